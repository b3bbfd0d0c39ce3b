"""Decaying popularity scores updated on item selection."""

from __future__ import annotations

import logging
from typing import Mapping

from .config import DEFAULTS, check_rates
from .types import FavoriteKey, FavoriteScoreTable

logger = logging.getLogger(__name__)


def favorite_score(table: Mapping[FavoriteKey, float], key: FavoriteKey) -> float:
    """Return the score for key, 0.0 when it has never been selected."""

    return table.get(key, 0.0)


def record_selection(
    table: FavoriteScoreTable,
    key: FavoriteKey,
    decay: float = DEFAULTS["decay_lambda"],
    increment: float = DEFAULTS["selection_increment"],
) -> float:
    """Decay every score once, then reinforce key. Returns key's new score.

    Raises ``ValueError`` for rates that would make a score negative; the
    table is left untouched in that case.
    """

    check_rates(decay, increment)
    retain = 1.0 - decay
    for existing in table:
        table[existing] *= retain
    table[key] = table.get(key, 0.0) + increment
    logger.debug("Favorite %s/%s now scores %.4f", key[0], key[1], table[key])
    return table[key]
