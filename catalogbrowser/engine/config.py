"""Configuration helpers for the browsing engine."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml


@dataclass(frozen=True)
class EngineConfig:
    """Typed wrapper around the engine configuration dictionary."""

    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def decay_lambda(self) -> float:
        return float(self.raw.get("decay_lambda", DEFAULTS["decay_lambda"]))

    @property
    def selection_increment(self) -> float:
        return float(self.raw.get("selection_increment", DEFAULTS["selection_increment"]))

    @property
    def sort_by_relevance(self) -> bool:
        return bool(self.raw.get("sort_by_relevance", False))

    @property
    def allowed_tags(self) -> List[str]:
        return list(self.raw.get("allowed_tags", []))

    def label(self, name: str, count: int) -> str:
        labels = self.raw.get("labels", {})
        template = labels.get(name, name.title() + " ({count})")
        return template.format(count=count)


DEFAULTS: Dict[str, Any] = {
    "decay_lambda": 0.1,
    "selection_increment": 1.0,
    "sort_by_relevance": False,
    "labels": {
        "items": "Modules ({count})",
        "brands": "Brands ({count})",
        "tags": "Tags ({count})",
    },
    "allowed_tags": [
        "Arpeggiator",
        "Attenuator",
        "Blank",
        "Chorus",
        "Clock generator",
        "Clock modulator",
        "Compressor",
        "Controller",
        "Delay",
        "Digital",
        "Distortion",
        "Drum",
        "Dual",
        "Dynamics",
        "Effect",
        "Envelope follower",
        "Envelope generator",
        "Equalizer",
        "Expander",
        "External",
        "Filter",
        "Flanger",
        "Function generator",
        "Granular",
        "Hardware clone",
        "Limiter",
        "Logic",
        "Low-frequency oscillator",
        "Low-pass gate",
        "MIDI",
        "Mixer",
        "Multiple",
        "Noise",
        "Oscillator",
        "Panning",
        "Phaser",
        "Physical modeling",
        "Polyphonic",
        "Quad",
        "Quantizer",
        "Random",
        "Recording",
        "Reverb",
        "Ring modulator",
        "Sample and hold",
        "Sampler",
        "Sequencer",
        "Slew limiter",
        "Switch",
        "Synth voice",
        "Tuner",
        "Utility",
        "Visual",
        "Vocoder",
        "Voltage-controlled amplifier",
        "Waveshaper",
    ],
}


def check_rates(decay: float, increment: float) -> None:
    """Reject rates that would drive favorite scores below zero."""

    if not 0.0 <= decay <= 1.0:
        raise ValueError(f"decay_lambda must be within [0, 1], got {decay}")
    if increment < 0.0:
        raise ValueError(f"selection_increment must not be negative, got {increment}")


def load_config(path: str | Path | None = None) -> EngineConfig:
    """Build the engine config: defaults, then a YAML file's overrides.

    A path that does not exist leaves the defaults untouched. Label templates
    are merged one by one; every other key replaces the default outright.
    """

    data: Dict[str, Any] = copy.deepcopy(DEFAULTS)
    overrides = _read_overrides(Path(path)) if path is not None else {}

    labels = overrides.pop("labels", None) or {}
    if not isinstance(labels, dict):
        raise ValueError(f"{path}: 'labels' must be a mapping")
    data["labels"].update(labels)
    data.update(overrides)

    config = EngineConfig(data)
    check_rates(config.decay_lambda, config.selection_increment)
    return config


def _read_overrides(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as stream:
        try:
            overrides = yaml.safe_load(stream) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"{path}: {exc}") from exc
    if not isinstance(overrides, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return overrides
