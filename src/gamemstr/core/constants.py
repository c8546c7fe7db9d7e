"""Shared constants for gamemstr.

This module defines the D&D 5E rules constants the schema validates
against.
"""

from __future__ import annotations

# =============================================================================
# Ability Scores
# =============================================================================

MIN_ABILITY_SCORE = 1
"""Minimum ability score (1 is barely functioning)."""

MAX_ABILITY_SCORE = 30
"""Maximum ability score for any creature (RAW D&D 5E)."""

ABILITY_SCORE_BASELINE = 10
"""Score whose modifier is +0."""

ABILITY_COUNT = 6
"""Number of ability scores a creature carries."""

# =============================================================================
# Characters
# =============================================================================

MIN_CHARACTER_LEVEL = 1
"""Lowest player character level."""

MAX_CHARACTER_LEVEL = 20
"""Highest player character level."""

# =============================================================================
# Rendering
# =============================================================================

EMPTY_LIST_MARKER = "—"
"""Placeholder shown for a stat-block list present but empty (e.g. Languages)."""

# =============================================================================
# Records
# =============================================================================

DECODE_CONTEXT_KEY = "decoding"
"""Validation context flag set while decoding stored records."""


__all__ = [
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
    "ABILITY_SCORE_BASELINE",
    "ABILITY_COUNT",
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
    "EMPTY_LIST_MARKER",
    "DECODE_CONTEXT_KEY",
]
