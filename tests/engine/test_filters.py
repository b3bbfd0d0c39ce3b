"""Visibility filter tests."""

from __future__ import annotations

from catalogbrowser.engine.filters import is_visible


def test_everything_visible_without_constraints(scenario_catalog):
    for publisher, item in scenario_catalog.entries():
        assert is_visible(publisher, item, "", "", "")


def test_constraints_are_anded(scenario_catalog):
    visible = [
        item.slug
        for publisher, item in scenario_catalog.entries()
        if is_visible(publisher, item, "filt", "Acme", "filter")
    ]
    assert visible == ["acme-filter"]


def test_brand_match_is_case_sensitive(scenario_catalog):
    publisher, item = scenario_catalog.entries()[0]
    assert is_visible(publisher, item, "", "Acme", "")
    assert not is_visible(publisher, item, "", "acme", "")


def test_unknown_filter_values_hide_everything(scenario_catalog):
    entries = scenario_catalog.entries()
    assert not any(is_visible(p, i, "", "Nobody", "") for p, i in entries)
    assert not any(is_visible(p, i, "", "", "reverb") for p, i in entries)
    assert not any(is_visible(p, i, "qqq", "", "") for p, i in entries)
