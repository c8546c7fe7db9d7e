"""Action and attack models.

Attacks form a closed set of variants, each rendering to a single
stat-block sentence such as::

    Bite. Melee Weapon Attack: +14 to hit, reach 10 ft., one target.
    Hit: 2d10 + 8 Piercing. Plus 2d6 fire damage.

Every variant shares the name, to-hit modifier, target shape, damage, and
description fields; melee legs carry an optional reach and ranged legs an
optional range. Actions wrap an attack (or a plain descriptive action
such as Multiattack) together with an identifier.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Annotated, ClassVar, Literal

from pydantic import Field, model_validator

from gamemstr.core.config import get_settings
from gamemstr.models.base import IdentifiedValue, ValueModel
from gamemstr.models.dice import DieExpression
from gamemstr.models.enums import DamageType
from gamemstr.rendering.text import number_to_words, signed


# =============================================================================
# Range & Target Shape
# =============================================================================


class Range(ValueModel):
    """Normal and long range of a ranged attack, in feet."""

    close_ft: int = Field(ge=0, description="Normal range in feet")
    long_ft: int = Field(ge=0, description="Long range in feet")

    @model_validator(mode="after")
    def validate_order(self) -> "Range":
        """Ensure long range is not shorter than normal range."""
        if self.long_ft < self.close_ft:
            msg = f"long_ft ({self.long_ft}) must not be less than close_ft ({self.close_ft})"
            raise ValueError(msg)
        return self

    def __str__(self) -> str:
        return f"{self.close_ft}/{self.long_ft} ft."


class OneTarget(ValueModel):
    """A single target."""

    kind: Literal["one_target"] = "one_target"

    def __str__(self) -> str:
        return "one target"


class MultipleTargets(ValueModel):
    """A fixed number of targets (two or more)."""

    kind: Literal["multiple_targets"] = "multiple_targets"
    count: int = Field(ge=2, description="Number of targets")

    def __str__(self) -> str:
        return f"{number_to_words(self.count)} targets"


_AREA_NAMES: dict[str, str] = {
    "cone": "Cone",
    "line": "Line",
    "cube": "Cube",
    "sphere": "Sphere",
}


class AreaTarget(ValueModel):
    """An area of effect sized in feet."""

    kind: Literal["cone", "line", "cube", "sphere"]
    size_ft: int = Field(ge=1, description="Size of the area in feet")

    def __str__(self) -> str:
        return f"{number_to_words(self.size_ft)} ft. {_AREA_NAMES[self.kind]}"


TargetShape = Annotated[
    OneTarget | MultipleTargets | AreaTarget,
    Field(discriminator="kind"),
]


# =============================================================================
# Attacks
# =============================================================================


class _AttackBase(ValueModel):
    """Fields shared by every attack variant."""

    label: ClassVar[str]

    name: str = Field(min_length=1, description="Attack name")
    modifier: int = Field(description="Bonus to hit")
    target: TargetShape = Field(default_factory=OneTarget)
    damage: DieExpression
    damage_type: DamageType
    description: str = ""

    @abstractmethod
    def _distance_clause(self) -> str | None:
        """Get the reach/range clause, or None when it is unknown."""

    def render(self) -> str:
        """Render the attack as a stat-block sentence.

        An unknown distance clause is left out of the to-hit line.
        """
        parts = [f"{signed(self.modifier)} to hit", self._distance_clause(), str(self.target)]
        to_hit = ", ".join(part for part in parts if part)
        text = (
            f"{self.name}. {self.label}: {to_hit}. "
            f"Hit: {self.damage} {self.damage_type.display_name}. {self.description}"
        )
        return text.rstrip()

    def __str__(self) -> str:
        return self.render()


def _reach_clause(reach: int | None) -> str:
    if reach is None:
        reach = get_settings().render.default_reach_ft
    return f"reach {reach} ft."


def _range_clause(range_: Range | None) -> str | None:
    if range_ is None:
        default = get_settings().render.default_range
        if default is None:
            return None
        range_ = Range(close_ft=default[0], long_ft=default[1])
    return f"range {range_}"


class _MeleeLeg(_AttackBase):
    reach: int | None = Field(default=None, ge=0, description="Reach in feet")

    def _distance_clause(self) -> str:
        return _reach_clause(self.reach)


class _RangedLeg(_AttackBase):
    range: Range | None = None

    def _distance_clause(self) -> str | None:
        return _range_clause(self.range)


class MeleeWeaponAttack(_MeleeLeg):
    """A melee weapon attack."""

    label: ClassVar[str] = "Melee Weapon Attack"
    kind: Literal["melee_weapon_attack"] = "melee_weapon_attack"


class RangedWeaponAttack(_RangedLeg):
    """A ranged weapon attack."""

    label: ClassVar[str] = "Ranged Weapon Attack"
    kind: Literal["ranged_weapon_attack"] = "ranged_weapon_attack"


class MeleeOrRangedWeaponAttack(_AttackBase):
    """A weapon usable in melee or thrown/fired at range."""

    label: ClassVar[str] = "Melee or Ranged Weapon Attack"
    kind: Literal["melee_or_ranged_weapon_attack"] = "melee_or_ranged_weapon_attack"
    reach: int | None = Field(default=None, ge=0, description="Reach in feet")
    range: Range | None = None

    def _distance_clause(self) -> str:
        reach = _reach_clause(self.reach)
        ranged = _range_clause(self.range)
        if ranged is None:
            return reach
        return f"{reach} or {ranged}"


class MeleeSpellAttack(_MeleeLeg):
    """A melee spell attack."""

    label: ClassVar[str] = "Melee Spell Attack"
    kind: Literal["melee_spell_attack"] = "melee_spell_attack"


class RangedSpellAttack(_RangedLeg):
    """A ranged spell attack."""

    label: ClassVar[str] = "Ranged Spell Attack"
    kind: Literal["ranged_spell_attack"] = "ranged_spell_attack"


Attack = Annotated[
    MeleeWeaponAttack
    | RangedWeaponAttack
    | MeleeOrRangedWeaponAttack
    | MeleeSpellAttack
    | RangedSpellAttack,
    Field(discriminator="kind"),
]


class DescriptiveAction(ValueModel):
    """A non-attack action printed as a named paragraph (e.g., Multiattack)."""

    kind: Literal["descriptive"] = "descriptive"
    name: str = Field(min_length=1)
    description: str

    def render(self) -> str:
        """Render the action as a stat-block paragraph."""
        return f"{self.name}. {self.description}"

    def __str__(self) -> str:
        return self.render()


ActionKind = Annotated[
    MeleeWeaponAttack
    | RangedWeaponAttack
    | MeleeOrRangedWeaponAttack
    | MeleeSpellAttack
    | RangedSpellAttack
    | DescriptiveAction,
    Field(discriminator="kind"),
]


class Action(IdentifiedValue):
    """An identified action in a creature's or item's action list.

    Attributes:
        id: Unique identifier of the action.
        action: The attack or descriptive action.
    """

    action: ActionKind

    @property
    def name(self) -> str:
        """Get the action's display name."""
        return self.action.name

    def render(self) -> str:
        """Render the wrapped action."""
        return self.action.render()

    def __str__(self) -> str:
        return self.render()


__all__ = [
    "Range",
    "OneTarget",
    "MultipleTargets",
    "AreaTarget",
    "TargetShape",
    "MeleeWeaponAttack",
    "RangedWeaponAttack",
    "MeleeOrRangedWeaponAttack",
    "MeleeSpellAttack",
    "RangedSpellAttack",
    "Attack",
    "DescriptiveAction",
    "ActionKind",
    "Action",
]
