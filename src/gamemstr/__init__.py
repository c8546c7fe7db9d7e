"""gamemstr - schemas and stat-block rendering for tabletop campaigns.

A library of validated data models for game-master content (creatures,
items, spells, worlds, campaigns, sessions, maps, and player characters)
with plain-text stat-block rendering and JSON record encoding.

Example:
    >>> from gamemstr import WorldRequest, render_creature
    >>> world = WorldRequest(name="Krynn", description="A world of dragons").to_entity()
    >>> world.name
    'Krynn'

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 schemas, requests, and records.
    rendering: Number spelling and stat-block rendering.
"""

from __future__ import annotations

# Core
from gamemstr.core.config import Settings, get_settings
from gamemstr.core.exceptions import (
    EntityConstructionError,
    GamemstrError,
    InvalidIdentifierError,
    MapBoundsError,
    RecordDecodeError,
    RenderError,
)
from gamemstr.core.logging import configure_logging, get_logger

# Models
from gamemstr.models import (
    Action,
    Campaign,
    Creature,
    CreatureRequest,
    DieExpression,
    Health,
    Item,
    ItemRequest,
    Location,
    Map,
    Monster,
    NPC,
    Player,
    Session,
    Spell,
    SpellRequest,
    World,
    WorldRequest,
    decode,
    encode,
)

# Rendering
from gamemstr.rendering.stat_block import render_creature, render_item, render_spell
from gamemstr.rendering.text import number_to_words


__version__ = "0.1.0"

__all__ = [
    # Core
    "Settings",
    "get_settings",
    "GamemstrError",
    "EntityConstructionError",
    "InvalidIdentifierError",
    "MapBoundsError",
    "RecordDecodeError",
    "RenderError",
    "configure_logging",
    "get_logger",
    # Models
    "Action",
    "Campaign",
    "Creature",
    "CreatureRequest",
    "DieExpression",
    "Health",
    "Item",
    "ItemRequest",
    "Location",
    "Map",
    "Monster",
    "NPC",
    "Player",
    "Session",
    "Spell",
    "SpellRequest",
    "World",
    "WorldRequest",
    "decode",
    "encode",
    # Rendering
    "render_creature",
    "render_item",
    "render_spell",
    "number_to_words",
]
