"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the gamemstr test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gamemstr.models import (
    AbilityType,
    Action,
    Alignment,
    Area,
    AreaShape,
    Attuneable,
    CastingTime,
    Charge,
    ClimbSpeed,
    Components,
    Creature,
    DamageType,
    DescriptiveAction,
    Die,
    DieExpression,
    DistanceRange,
    FlySpeed,
    Health,
    Item,
    ItemRarity,
    ItemType,
    Language,
    MeleeWeaponAttack,
    MonsterCategory,
    MonsterType,
    SavingThrow,
    Sense,
    SenseType,
    Skill,
    SkillType,
    Spell,
    SpellDuration,
    SpellLevel,
    TimeDivision,
    WalkSpeed,
    build_ability_scores,
)


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from gamemstr.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def bite() -> Action:
    """Provide a dragon bite attack wrapped in an action."""
    return Action(
        action=MeleeWeaponAttack(
            name="Bite",
            modifier=14,
            reach=10,
            damage=DieExpression(count=2, die=Die.D10, bonus=8),
            damage_type=DamageType.PIERCING,
            description="Plus 2d6 fire damage.",
        )
    )


@pytest.fixture
def dragon(bite: Action) -> Creature:
    """Create an adult red dragon stat block.

    Returns:
        Creature instance with most optional sections filled in.
    """
    return Creature(
        name="Adult Red Dragon",
        category=MonsterCategory(monster_type=MonsterType.DRAGON),
        alignment=Alignment.CHAOTIC_EVIL,
        armor_class=19,
        hit_points=Health.from_dice(19, Die.D12, 133),
        speed=[WalkSpeed(feet=40), ClimbSpeed(feet=40), FlySpeed(feet=80)],
        ability_scores=build_ability_scores(
            strength=27,
            dexterity=10,
            constitution=25,
            intelligence=16,
            wisdom=13,
            charisma=21,
        ),
        saving_throws=[
            SavingThrow(ability=AbilityType.DEX, modifier=6),
            SavingThrow(ability=AbilityType.CON, modifier=13),
        ],
        damage_immunities=[DamageType.FIRE],
        skills=[
            Skill(skill_type=SkillType.PERCEPTION, modifier=13),
            Skill(skill_type=SkillType.STEALTH, modifier=6),
        ],
        senses=[
            Sense(sense_type=SenseType.BLINDSIGHT, range_ft=60),
            Sense(sense_type=SenseType.DARKVISION, range_ft=120),
        ],
        languages=[Language.COMMON, Language.DRACONIC],
        challenge_rating="17",
        actions=[
            Action(
                action=DescriptiveAction(
                    name="Multiattack",
                    description="The dragon makes three attacks.",
                )
            ),
            bite,
        ],
    )


@pytest.fixture
def fireball() -> Spell:
    """Create the fireball spell."""
    return Spell(
        name="Fireball",
        description="A bright streak flashes from your pointing finger.",
        level=SpellLevel.LEVEL_3,
        casting_time=CastingTime.ACTION,
        duration=SpellDuration.INSTANTANEOUS,
        damage=DieExpression(count=8, die=Die.D6),
        damage_type=DamageType.FIRE,
        range=DistanceRange(feet=150),
        area=Area(shape=AreaShape.SPHERE, size_ft=20),
        components=Components(
            verbal=True,
            somatic=True,
            material=True,
            material_description="a tiny ball of bat guano and sulfur",
        ),
    )


@pytest.fixture
def wand_of_fireballs(fireball: Spell) -> Item:
    """Create a wand that casts fireball."""
    return Item(
        name="Wand of Fireballs",
        item_type=ItemType.WAND,
        rarity=ItemRarity.RARE,
        attunement=Attuneable(),
        attached_spell=fireball,
        charges=Charge(count=7, per=TimeDivision.DAY),
    )
