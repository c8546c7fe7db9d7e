"""Spell models."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, model_validator

from gamemstr.models.base import Entity, ValueModel
from gamemstr.models.dice import DieExpression
from gamemstr.models.enums import (
    AbilityType,
    AreaShape,
    CastingTime,
    DamageType,
    SpellDuration,
    SpellLevel,
)
from gamemstr.rendering.text import signed


# =============================================================================
# Spell Range
# =============================================================================


class SelfRange(ValueModel):
    kind: Literal["self"] = "self"

    def __str__(self) -> str:
        return "Self"


class TouchRange(ValueModel):
    kind: Literal["touch"] = "touch"

    def __str__(self) -> str:
        return "Touch"


class DistanceRange(ValueModel):
    """A spell range measured in feet."""

    kind: Literal["distance"] = "distance"
    feet: int = Field(ge=0)

    def __str__(self) -> str:
        return f"{self.feet} ft."


SpellRange = Annotated[
    SelfRange | TouchRange | DistanceRange,
    Field(discriminator="kind"),
]


# =============================================================================
# Area, Components, Save
# =============================================================================


class Area(ValueModel):
    """A spell's area of effect (e.g., '20 ft. Sphere')."""

    shape: AreaShape
    size_ft: int = Field(ge=1)

    def __str__(self) -> str:
        return f"{self.size_ft} ft. {self.shape.display_name}"


class Components(ValueModel):
    """Verbal, somatic, and material components of a spell.

    Example:
        >>> str(Components(verbal=True, somatic=True, material=True,
        ...                material_description="a tiny ball of bat guano"))
        'V, S, M (a tiny ball of bat guano)'
    """

    verbal: bool = False
    somatic: bool = False
    material: bool = False
    material_description: str | None = None

    @model_validator(mode="after")
    def validate_any_component(self) -> "Components":
        """Ensure at least one component is required."""
        if not (self.verbal or self.somatic or self.material):
            msg = "At least one of verbal, somatic, or material must be set"
            raise ValueError(msg)
        if self.material_description and not self.material:
            msg = "material_description requires material to be set"
            raise ValueError(msg)
        return self

    def __str__(self) -> str:
        parts = []
        if self.verbal:
            parts.append("V")
        if self.somatic:
            parts.append("S")
        if self.material:
            parts.append(f"M ({self.material_description})" if self.material_description else "M")
        return ", ".join(parts)


class Save(ValueModel):
    """The saving throw a spell calls for."""

    ability: AbilityType
    dc: int | None = Field(default=None, ge=1)

    def __str__(self) -> str:
        if self.dc is None:
            return self.ability.display_name
        return f"{self.ability.display_name} DC {self.dc}"


# =============================================================================
# Spell
# =============================================================================


class Spell(Entity):
    """A spell.

    Attributes:
        description: Full spell text.
        level: Cantrip through 9th level.
        casting_time: Time required to cast.
        duration: How long the effect lasts.
        damage: Damage dealt, if any.
        damage_type: Type of the damage dealt.
        range: Self, touch, or a distance in feet.
        area: Area of effect, if any.
        components: Required components.
        attack_bonus: Spell attack bonus, for attack spells.
        save: Saving throw, for save spells.
    """

    description: str
    level: SpellLevel
    casting_time: CastingTime
    duration: SpellDuration
    damage: DieExpression | None = None
    damage_type: DamageType | None = None
    range: SpellRange
    area: Area | None = None
    components: Components
    attack_bonus: int | None = None
    save: Save | None = None

    def summary(self) -> str:
        """Get a one-line summary (e.g., '3rd Level, 8d6 + 0 Fire')."""
        parts = [self.level.display_name]
        if self.damage is not None:
            damage = str(self.damage)
            if self.damage_type is not None:
                damage = f"{damage} {self.damage_type.display_name}"
            parts.append(damage)
        if self.attack_bonus is not None:
            parts.append(f"{signed(self.attack_bonus)} to hit")
        if self.save is not None:
            parts.append(f"{self.save} save")
        return ", ".join(parts)

    def render(self) -> str:
        """Render the spell as a stat block."""
        from gamemstr.rendering.stat_block import render_spell

        return render_spell(self)


__all__ = [
    "SelfRange",
    "TouchRange",
    "DistanceRange",
    "SpellRange",
    "Area",
    "Components",
    "Save",
    "Spell",
]
