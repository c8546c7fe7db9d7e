"""Attribute and trait types composed into creatures.

This module defines the small value objects that make up a stat block:
ability scores with derived modifiers, hit points, movement speeds,
skills, senses, racial traits, lairs, and free-form attributes.

Components:
    AbilityScore: One ability score with its computed modifier.
    Health: Hit dice with the derived hit point total.
    MovementSpeed: Discriminated union of walk/swim/fly/burrow/climb speeds.
    Skill, Sense, SavingThrow: Stat-block bonus lines.
    Lair: Lair actions and regional effects.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, ValidationInfo, computed_field, model_validator

from gamemstr.core.constants import (
    ABILITY_SCORE_BASELINE,
    DECODE_CONTEXT_KEY,
    MAX_ABILITY_SCORE,
    MIN_ABILITY_SCORE,
)
from gamemstr.models.base import ValueModel
from gamemstr.models.dice import DieExpression
from gamemstr.models.enums import AbilityType, Die, SenseType, SkillType
from gamemstr.rendering.text import signed


# =============================================================================
# Ability Scores
# =============================================================================


def calculate_modifier(score: int) -> int:
    """Calculate the ability modifier from an ability score.

    The modifier is calculated as: floor((score - 10) / 2)

    Args:
        score: The ability score.

    Returns:
        The ability modifier.

    Example:
        >>> calculate_modifier(15)
        2
        >>> calculate_modifier(8)
        -1
    """
    return (score - ABILITY_SCORE_BASELINE) // 2


class AbilityScore(ValueModel):
    """A single ability score with its derived modifier.

    The modifier is never stored independently: it is computed from the
    score. A modifier supplied at construction must agree with the score;
    one present in a decoded record is ignored and re-derived.

    Attributes:
        kind: Which ability this score is for.
        score: The ability score (1-30).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",  # Derived modifier is re-computed on decode
    )

    kind: AbilityType = Field(description="Ability this score belongs to")
    score: int = Field(
        ge=MIN_ABILITY_SCORE,
        le=MAX_ABILITY_SCORE,
        description="Ability score (1-30)",
    )

    @model_validator(mode="before")
    @classmethod
    def check_supplied_modifier(cls, data: Any, info: ValidationInfo) -> Any:
        """Reject a supplied modifier that disagrees with the score."""
        if not isinstance(data, dict) or "modifier" not in data:
            return data
        if info.context and info.context.get(DECODE_CONTEXT_KEY):
            return data
        score = data.get("score")
        if isinstance(score, int) and data["modifier"] != calculate_modifier(score):
            msg = f"modifier {data['modifier']!r} does not match score {score}"
            raise ValueError(msg)
        return data

    @computed_field(description="Ability modifier: floor((score - 10) / 2)")
    @property
    def modifier(self) -> int:
        """Calculate the ability modifier."""
        return calculate_modifier(self.score)

    def __str__(self) -> str:
        return f"{self.kind.abbreviation} {self.score} ({signed(self.modifier)})"


def build_ability_scores(
    strength: int = 10,
    dexterity: int = 10,
    constitution: int = 10,
    intelligence: int = 10,
    wisdom: int = 10,
    charisma: int = 10,
) -> list[AbilityScore]:
    """Build the six ability scores in stat-block order.

    Returns:
        One AbilityScore per ability, STR through CHA.

    Example:
        >>> scores = build_ability_scores(strength=18)
        >>> scores[0].modifier
        4
    """
    values = {
        AbilityType.STR: strength,
        AbilityType.DEX: dexterity,
        AbilityType.CON: constitution,
        AbilityType.INT: intelligence,
        AbilityType.WIS: wisdom,
        AbilityType.CHA: charisma,
    }
    return [AbilityScore(kind=kind, score=score) for kind, score in values.items()]


class SavingThrow(ValueModel):
    """A saving throw bonus shown on a stat block."""

    ability: AbilityType
    modifier: int

    def __str__(self) -> str:
        return f"{self.ability.short_name} {signed(self.modifier)}"


# =============================================================================
# Hit Points
# =============================================================================


class Health(ValueModel):
    """Hit points expressed as hit dice with a derived total.

    Example:
        >>> health = Health.from_dice(6, Die.D10, 12)
        >>> str(health)
        '45 (6d10 + 12)'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",  # Derived total is re-computed on decode
    )

    dice: DieExpression = Field(description="Hit dice formula")

    @classmethod
    def from_dice(cls, count: int, die: Die, bonus: int = 0) -> Health:
        """Create hit points from a dice formula.

        Args:
            count: Number of hit dice.
            die: Hit die size.
            bonus: Flat bonus (usually CON modifier times count).

        Returns:
            The Health value.
        """
        return cls(dice=DieExpression(count=count, die=die, bonus=bonus))

    @computed_field(description="Average hit points, rounded down")
    @property
    def total(self) -> int:
        """Get the hit point total derived from the dice."""
        return self.dice.value()

    def __str__(self) -> str:
        return f"{self.total} ({self.dice})"


# =============================================================================
# Movement
# =============================================================================

Feet = Annotated[int, Field(ge=0, description="Distance in feet")]


class WalkSpeed(ValueModel):
    """Walking speed; printed without a label."""

    kind: Literal["walk"] = "walk"
    feet: Feet

    def __str__(self) -> str:
        return f"{self.feet} ft."


class SwimSpeed(ValueModel):
    """Swimming speed."""

    kind: Literal["swim"] = "swim"
    feet: Feet

    def __str__(self) -> str:
        return f"swim {self.feet} ft."


class FlySpeed(ValueModel):
    """Flying speed, optionally with hover."""

    kind: Literal["fly"] = "fly"
    feet: Feet
    hover: bool = False

    def __str__(self) -> str:
        suffix = " (hover)" if self.hover else ""
        return f"fly {self.feet} ft.{suffix}"


class BurrowSpeed(ValueModel):
    """Burrowing speed."""

    kind: Literal["burrow"] = "burrow"
    feet: Feet

    def __str__(self) -> str:
        return f"burrow {self.feet} ft."


class ClimbSpeed(ValueModel):
    """Climbing speed."""

    kind: Literal["climb"] = "climb"
    feet: Feet

    def __str__(self) -> str:
        return f"climb {self.feet} ft."


MovementSpeed = Annotated[
    WalkSpeed | SwimSpeed | FlySpeed | BurrowSpeed | ClimbSpeed,
    Field(discriminator="kind"),
]


# =============================================================================
# Skills, Senses, Traits
# =============================================================================


class Skill(ValueModel):
    """A skill bonus (e.g., 'Perception (Wis) +13')."""

    skill_type: SkillType
    modifier: int

    def __str__(self) -> str:
        return f"{self.skill_type.display_name} {signed(self.modifier)}"


class Sense(ValueModel):
    """A special sense with its range (e.g., 'Darkvision 120 ft.')."""

    sense_type: SenseType
    range_ft: Feet

    def __str__(self) -> str:
        return f"{self.sense_type.display_name} {self.range_ft} ft."


class RacialTrait(ValueModel):
    """A named trait printed above the actions section."""

    name: str = Field(min_length=1)
    description: str

    def __str__(self) -> str:
        return f"{self.name}. {self.description}"


class OtherAttribute(ValueModel):
    """A free-form attribute for data not otherwise modeled.

    Attributes:
        title: Label of the attribute.
        description: Longer explanation, not shown on the stat block.
        value: Value printed after the label.
    """

    title: str = Field(min_length=1)
    description: str = ""
    value: str

    def __str__(self) -> str:
        return f"{self.title}: {self.value}"


class Paragraph(ValueModel):
    """A paragraph of lair text, optionally bulleted."""

    text: str
    bullet: bool = False


class Lair(ValueModel):
    """A creature's lair with lair actions and regional effects."""

    name: str = Field(min_length=1)
    description: str = ""
    lair_actions: list[Paragraph] = Field(default_factory=list)
    regional_effects: list[Paragraph] = Field(default_factory=list)


__all__ = [
    "calculate_modifier",
    "AbilityScore",
    "build_ability_scores",
    "SavingThrow",
    "Health",
    "Feet",
    "WalkSpeed",
    "SwimSpeed",
    "FlySpeed",
    "BurrowSpeed",
    "ClimbSpeed",
    "MovementSpeed",
    "Skill",
    "Sense",
    "RacialTrait",
    "OtherAttribute",
    "Paragraph",
    "Lair",
]
