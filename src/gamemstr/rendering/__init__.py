"""Text rendering for stat blocks.

Submodules:
    text: Number spelling and phrase helpers used by the models.
    stat_block: Creature, item, and spell stat-block renderers.

The stat-block renderers import the models, so they are not re-exported
here; import them from :mod:`gamemstr.rendering.stat_block` or the
top-level package.
"""

from __future__ import annotations

from gamemstr.rendering.text import join_phrases, number_to_words, signed


__all__ = [
    "join_phrases",
    "number_to_words",
    "signed",
]
