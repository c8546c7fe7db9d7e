"""Pydantic V2 schemas for tabletop campaign content.

This package provides the data model layer: enumerated descriptors,
dice expressions, stat-block attributes, actions, creatures, items,
spells, and the world/campaign aggregates that tie them together.

Submodules:
    enums: Enumerated descriptors (DamageType, Alignment, Language, etc.)
    dice: DieExpression with its derived value
    attributes: Ability scores, hit points, speeds, skills, senses, lairs
    actions: Attack variants, target shapes, and identified actions
    creature: Creature stat blocks and monsters
    item: Items with attunement, charges, and nested inventories
    spell: Spells with range, area, components, and saves
    world: World, Campaign, Session, Map, Location, NPC, Player
    requests: Partial requests and their conversion into entities
    records: JSON-compatible record encoding and decoding

Example:
    >>> from gamemstr.models import DieExpression, Die, Health
    >>> Health.from_dice(6, Die.D10, 12).total
    45
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from gamemstr.models.enums import (
    AbilityType,
    Alignment,
    AreaShape,
    ArmorType,
    CastingTime,
    ConditionType,
    DamageType,
    Die,
    ItemRarity,
    ItemType,
    Language,
    MonsterType,
    PlayerClass,
    Race,
    SenseType,
    SkillType,
    SpellDuration,
    SpellLevel,
    TimeDivision,
    WeaponType,
)

# =============================================================================
# Base & Dice
# =============================================================================
from gamemstr.models.base import (
    Entity,
    IdentifiedValue,
    Identifier,
    ValueModel,
    new_identifier,
)
from gamemstr.models.dice import DieExpression

# =============================================================================
# Attributes & Actions
# =============================================================================
from gamemstr.models.attributes import (
    AbilityScore,
    BurrowSpeed,
    ClimbSpeed,
    FlySpeed,
    Health,
    Lair,
    MovementSpeed,
    OtherAttribute,
    Paragraph,
    RacialTrait,
    SavingThrow,
    Sense,
    Skill,
    SwimSpeed,
    WalkSpeed,
    build_ability_scores,
    calculate_modifier,
)
from gamemstr.models.actions import (
    Action,
    AreaTarget,
    Attack,
    DescriptiveAction,
    MeleeOrRangedWeaponAttack,
    MeleeSpellAttack,
    MeleeWeaponAttack,
    MultipleTargets,
    OneTarget,
    Range,
    RangedSpellAttack,
    RangedWeaponAttack,
    TargetShape,
)

# =============================================================================
# Entities
# =============================================================================
from gamemstr.models.creature import (
    Creature,
    CreatureCategory,
    Monster,
    MonsterCategory,
    NPCCategory,
    PlayerCategory,
)
from gamemstr.models.spell import (
    Area,
    Components,
    DistanceRange,
    Save,
    SelfRange,
    Spell,
    SpellRange,
    TouchRange,
)
from gamemstr.models.item import Attuneable, Charge, Item
from gamemstr.models.world import (
    NPC,
    Campaign,
    Location,
    Map,
    MapCoordinates,
    Note,
    Player,
    Session,
    World,
)

# =============================================================================
# Requests & Records
# =============================================================================
from gamemstr.models.requests import (
    CampaignRequest,
    ConversionResult,
    CreatureRequest,
    EntityRequest,
    ItemRequest,
    SessionRequest,
    SpellRequest,
    WorldRequest,
)
from gamemstr.models.records import decode, encode, from_json, to_json


__all__ = [
    # Enumerations
    "AbilityType",
    "Alignment",
    "AreaShape",
    "ArmorType",
    "CastingTime",
    "ConditionType",
    "DamageType",
    "Die",
    "ItemRarity",
    "ItemType",
    "Language",
    "MonsterType",
    "PlayerClass",
    "Race",
    "SenseType",
    "SkillType",
    "SpellDuration",
    "SpellLevel",
    "TimeDivision",
    "WeaponType",
    # Base & Dice
    "Entity",
    "IdentifiedValue",
    "Identifier",
    "ValueModel",
    "new_identifier",
    "DieExpression",
    # Attributes
    "AbilityScore",
    "BurrowSpeed",
    "ClimbSpeed",
    "FlySpeed",
    "Health",
    "Lair",
    "MovementSpeed",
    "OtherAttribute",
    "Paragraph",
    "RacialTrait",
    "SavingThrow",
    "Sense",
    "Skill",
    "SwimSpeed",
    "WalkSpeed",
    "build_ability_scores",
    "calculate_modifier",
    # Actions
    "Action",
    "AreaTarget",
    "Attack",
    "DescriptiveAction",
    "MeleeOrRangedWeaponAttack",
    "MeleeSpellAttack",
    "MeleeWeaponAttack",
    "MultipleTargets",
    "OneTarget",
    "Range",
    "RangedSpellAttack",
    "RangedWeaponAttack",
    "TargetShape",
    # Entities
    "Creature",
    "CreatureCategory",
    "Monster",
    "MonsterCategory",
    "NPCCategory",
    "PlayerCategory",
    "Area",
    "Components",
    "DistanceRange",
    "Save",
    "SelfRange",
    "Spell",
    "SpellRange",
    "TouchRange",
    "Attuneable",
    "Charge",
    "Item",
    "NPC",
    "Campaign",
    "Location",
    "Map",
    "MapCoordinates",
    "Note",
    "Player",
    "Session",
    "World",
    # Requests & Records
    "CampaignRequest",
    "ConversionResult",
    "CreatureRequest",
    "EntityRequest",
    "ItemRequest",
    "SessionRequest",
    "SpellRequest",
    "WorldRequest",
    "decode",
    "encode",
    "from_json",
    "to_json",
]
