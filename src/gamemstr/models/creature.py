"""Creature and monster models.

A Creature is the full stat block shared by monsters, player characters,
and NPCs. Its category decides which of these it is; the wrapper models
(Monster here, Player and NPC in :mod:`gamemstr.models.world`) pin the
category down.

Optional list fields distinguish *absent* (``None``) from *present but
empty* (``[]``); the stat-block renderer relies on that difference.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gamemstr.core.constants import ABILITY_COUNT
from gamemstr.models.actions import Action
from gamemstr.models.attributes import (
    AbilityScore,
    Health,
    Lair,
    MovementSpeed,
    OtherAttribute,
    RacialTrait,
    SavingThrow,
    Sense,
    Skill,
)
from gamemstr.models.base import Entity, ValueModel
from gamemstr.models.enums import (
    AbilityType,
    Alignment,
    ConditionType,
    DamageType,
    Language,
    MonsterType,
)


# =============================================================================
# Creature Category
# =============================================================================


class MonsterCategory(ValueModel):
    """A monster of a given type (e.g., dragon)."""

    kind: Literal["monster"] = "monster"
    monster_type: MonsterType

    @property
    def display_name(self) -> str:
        """Get the display name used on the stat block."""
        return self.monster_type.display_name


class PlayerCategory(ValueModel):
    """A player character."""

    kind: Literal["player"] = "player"

    @property
    def display_name(self) -> str:
        return "Player"


class NPCCategory(ValueModel):
    """A non-player character."""

    kind: Literal["npc"] = "npc"

    @property
    def display_name(self) -> str:
        return "NPC"


CreatureCategory = Annotated[
    MonsterCategory | PlayerCategory | NPCCategory,
    Field(discriminator="kind"),
]


# =============================================================================
# Creature
# =============================================================================


class Creature(Entity):
    """A creature stat block.

    Attributes:
        category: Monster (with type), player, or NPC.
        alignment: Alignment descriptor.
        armor_class: Armor Class.
        hit_points: Hit dice with the derived total.
        speed: One or more movement speeds.
        ability_scores: Exactly one score for each of the six abilities.
        challenge_rating: Free-text difficulty label (e.g., '1/4', '17').
        actions: Actions printed under the Actions heading.
        lair: Optional lair with lair actions and regional effects.
        others: Free-form attributes not otherwise modeled.
    """

    category: CreatureCategory
    alignment: Alignment
    armor_class: int = Field(ge=0, description="Armor Class")
    hit_points: Health
    speed: list[MovementSpeed] = Field(min_length=1)
    ability_scores: list[AbilityScore] = Field(
        min_length=ABILITY_COUNT,
        max_length=ABILITY_COUNT,
    )
    saving_throws: list[SavingThrow] | None = None
    damage_resistances: list[DamageType] | None = None
    damage_immunities: list[DamageType] | None = None
    damage_vulnerabilities: list[DamageType] | None = None
    condition_immunities: list[ConditionType] | None = None
    skills: list[Skill] | None = None
    senses: list[Sense] | None = None
    languages: list[Language] | None = None
    challenge_rating: str = Field(min_length=1, description="Challenge rating")
    racial_traits: list[RacialTrait] | None = None
    description: str | None = None
    actions: list[Action] | None = None
    lair: Lair | None = None
    others: list[OtherAttribute] | None = None

    @field_validator("ability_scores")
    @classmethod
    def validate_ability_scores(cls, value: list[AbilityScore]) -> list[AbilityScore]:
        """Ensure each ability appears exactly once."""
        kinds = {score.kind for score in value}
        if len(kinds) != len(value) or kinds != set(AbilityType):
            msg = "ability_scores must contain each of the six abilities exactly once"
            raise ValueError(msg)
        return value

    def ability_score(self, kind: AbilityType) -> AbilityScore:
        """Get the score for an ability."""
        for score in self.ability_scores:
            if score.kind == kind:
                return score
        # Unreachable once validated
        raise KeyError(kind)

    def modifier(self, kind: AbilityType) -> int:
        """Get the modifier for an ability."""
        return self.ability_score(kind).modifier

    def render(self) -> str:
        """Render the creature as a stat block."""
        from gamemstr.rendering.stat_block import render_creature

        return render_creature(self)


class Monster(BaseModel):
    """A creature whose category is a monster type."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    creature: Creature

    @model_validator(mode="after")
    def validate_category(self) -> "Monster":
        """Ensure the wrapped creature is a monster."""
        if not isinstance(self.creature.category, MonsterCategory):
            msg = f"Monster requires a monster category, got {self.creature.category.kind!r}"
            raise ValueError(msg)
        return self

    @property
    def id(self) -> str:
        return self.creature.id

    @property
    def name(self) -> str:
        return self.creature.name

    @property
    def monster_type(self) -> MonsterType:
        """Get the monster's type."""
        return self.creature.category.monster_type

    def render(self) -> str:
        return self.creature.render()


__all__ = [
    "MonsterCategory",
    "PlayerCategory",
    "NPCCategory",
    "CreatureCategory",
    "Creature",
    "Monster",
]
