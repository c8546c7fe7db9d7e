"""Tests for actions, attacks and target shapes."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gamemstr.core.exceptions import RenderError
from gamemstr.models import (
    Action,
    AreaTarget,
    DamageType,
    DescriptiveAction,
    Die,
    DieExpression,
    MeleeOrRangedWeaponAttack,
    MeleeSpellAttack,
    MeleeWeaponAttack,
    MultipleTargets,
    OneTarget,
    Range,
    RangedSpellAttack,
    RangedWeaponAttack,
)
from gamemstr.models.actions import _AttackBase


def _damage(count: int = 1, die: Die = Die.D6, bonus: int = 2) -> DieExpression:
    return DieExpression(count=count, die=die, bonus=bonus)


class TestRange:
    """Tests for the Range model."""

    def test_str(self) -> None:
        """Ranges render as 'close/long ft.'."""
        assert str(Range(close_ft=80, long_ft=320)) == "80/320 ft."

    def test_long_below_close_rejected(self) -> None:
        """Long range must not be shorter than close range."""
        with pytest.raises(ValidationError):
            Range(close_ft=320, long_ft=80)

    def test_equal_legs_allowed(self) -> None:
        """Equal close and long ranges are valid."""
        assert str(Range(close_ft=30, long_ft=30)) == "30/30 ft."


class TestTargetShape:
    """Tests for target shapes."""

    def test_one_target(self) -> None:
        """A single target renders as 'one target'."""
        assert str(OneTarget()) == "one target"

    def test_multiple_targets(self) -> None:
        """Target counts are spelled out."""
        assert str(MultipleTargets(count=3)) == "three targets"

    def test_multiple_targets_minimum(self) -> None:
        """Multiple targets means at least two."""
        with pytest.raises(ValidationError):
            MultipleTargets(count=1)

    @pytest.mark.parametrize(
        "kind,size,expected",
        [
            ("cone", 30, "thirty ft. Cone"),
            ("line", 120, "one hundred twenty ft. Line"),
            ("cube", 15, "fifteen ft. Cube"),
            ("sphere", 25, "twenty-five ft. Sphere"),
        ],
    )
    def test_area_target(self, kind: str, size: int, expected: str) -> None:
        """Area sizes are spelled out in words."""
        assert str(AreaTarget(kind=kind, size_ft=size)) == expected

    def test_area_kind_restricted(self) -> None:
        """Only cone, line, cube and sphere areas are accepted."""
        with pytest.raises(ValidationError):
            AreaTarget(kind="cylinder", size_ft=10)

    def test_area_size_positive(self) -> None:
        """Area size must be at least one foot."""
        with pytest.raises(ValidationError):
            AreaTarget(kind="cone", size_ft=0)

    def test_spelling_rejects_negative(self) -> None:
        """Spelling out a negative number raises RenderError."""
        target = AreaTarget.model_construct(kind="cone", size_ft=-5)
        with pytest.raises(RenderError):
            str(target)


class TestAttackRendering:
    """Tests for attack stat-block sentences."""

    def test_melee_weapon_attack(self, bite: Action) -> None:
        """Melee attacks render reach, target and damage."""
        assert bite.render() == (
            "Bite. Melee Weapon Attack: +14 to hit, reach 10 ft., one target. "
            "Hit: 2d10 + 8 Piercing. Plus 2d6 fire damage."
        )

    def test_empty_description_trimmed(self) -> None:
        """No trailing whitespace is left when the description is empty."""
        attack = MeleeWeaponAttack(
            name="Claw",
            modifier=4,
            reach=5,
            damage=_damage(),
            damage_type=DamageType.SLASHING,
        )
        assert attack.render() == (
            "Claw. Melee Weapon Attack: +4 to hit, reach 5 ft., one target. "
            "Hit: 1d6 + 2 Slashing."
        )

    def test_default_reach(self) -> None:
        """Absent reach uses the configured default."""
        attack = MeleeSpellAttack(
            name="Shocking Grasp",
            modifier=5,
            damage=_damage(1, Die.D8, 0),
            damage_type=DamageType.LIGHTNING,
        )
        assert "Melee Spell Attack: +5 to hit, reach 5 ft., one target." in attack.render()

    def test_default_reach_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The default reach can be configured."""
        monkeypatch.setenv("GAMEMSTR_RENDER_DEFAULT_REACH_FT", "10")
        attack = MeleeWeaponAttack(
            name="Tail",
            modifier=14,
            damage=_damage(2, Die.D8, 8),
            damage_type=DamageType.BLUDGEONING,
        )
        assert "reach 10 ft." in attack.render()

    def test_ranged_weapon_attack(self) -> None:
        """Ranged attacks render their range."""
        attack = RangedWeaponAttack(
            name="Longbow",
            modifier=4,
            range=Range(close_ft=150, long_ft=600),
            damage=_damage(1, Die.D8, 2),
            damage_type=DamageType.PIERCING,
        )
        assert attack.render() == (
            "Longbow. Ranged Weapon Attack: +4 to hit, range 150/600 ft., one target. "
            "Hit: 1d8 + 2 Piercing."
        )

    def test_ranged_without_range_omits_leg(self) -> None:
        """Without a range or configured default the range leg is omitted."""
        attack = RangedSpellAttack(
            name="Fire Bolt",
            modifier=5,
            damage=_damage(1, Die.D10, 0),
            damage_type=DamageType.FIRE,
        )
        assert attack.render() == (
            "Fire Bolt. Ranged Spell Attack: +5 to hit, one target. Hit: 1d10 + 0 Fire."
        )

    @pytest.mark.parametrize("range_", [Range(close_ft=30, long_ft=60), None])
    def test_description_text_preserved(self, range_: Range | None) -> None:
        """Descriptions are rendered verbatim, commas included."""
        description = "Quote: 'x to hit, , y'."
        attack = RangedWeaponAttack(
            name="Spit",
            modifier=3,
            range=range_,
            damage=_damage(1, Die.D8, 3),
            damage_type=DamageType.ACID,
            description=description,
        )
        assert attack.render().endswith(f"Hit: 1d8 + 3 Acid. {description}")

    def test_attack_base_is_abstract(self) -> None:
        """Only concrete variants supply a distance clause."""
        with pytest.raises(TypeError):
            _AttackBase(
                name="Claw",
                modifier=1,
                damage=_damage(),
                damage_type=DamageType.SLASHING,
            )

    def test_ranged_default_range(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A configured default range fills in an absent range."""
        monkeypatch.setenv("GAMEMSTR_RENDER_DEFAULT_CLOSE_RANGE_FT", "80")
        monkeypatch.setenv("GAMEMSTR_RENDER_DEFAULT_LONG_RANGE_FT", "320")
        attack = RangedWeaponAttack(
            name="Shortbow",
            modifier=4,
            damage=_damage(1, Die.D6, 2),
            damage_type=DamageType.PIERCING,
        )
        assert "+4 to hit, range 80/320 ft., one target." in attack.render()

    def test_melee_or_ranged(self) -> None:
        """Combined attacks render both reach and range."""
        attack = MeleeOrRangedWeaponAttack(
            name="Spear",
            modifier=3,
            reach=5,
            range=Range(close_ft=20, long_ft=60),
            damage=_damage(1, Die.D6, 1),
            damage_type=DamageType.PIERCING,
        )
        assert attack.render() == (
            "Spear. Melee or Ranged Weapon Attack: +3 to hit, reach 5 ft. or "
            "range 20/60 ft., one target. Hit: 1d6 + 1 Piercing."
        )

    def test_melee_or_ranged_without_range(self) -> None:
        """Combined attacks without any range fall back to reach only."""
        attack = MeleeOrRangedWeaponAttack(
            name="Dagger",
            modifier=4,
            damage=_damage(1, Die.D4, 2),
            damage_type=DamageType.PIERCING,
        )
        assert "+4 to hit, reach 5 ft., one target." in attack.render()

    def test_area_target_and_negative_modifier(self) -> None:
        """Area targets and negative modifiers render correctly."""
        attack = RangedSpellAttack(
            name="Spray",
            modifier=-1,
            range=Range(close_ft=30, long_ft=30),
            target=AreaTarget(kind="cone", size_ft=30),
            damage=_damage(2, Die.D6, 0),
            damage_type=DamageType.ACID,
        )
        assert "Spray. Ranged Spell Attack: -1 to hit, range 30/30 ft., thirty ft. Cone." in (
            attack.render()
        )

    def test_descriptive_action(self) -> None:
        """Descriptive actions render as a named paragraph."""
        action = DescriptiveAction(name="Multiattack", description="It makes two attacks.")
        assert action.render() == "Multiattack. It makes two attacks."


class TestAction:
    """Tests for the identified Action wrapper."""

    def test_generates_identifier(self, bite: Action) -> None:
        """Actions receive a fresh identifier."""
        other = Action(action=bite.action)
        assert bite.id
        assert bite.id != other.id

    def test_name_delegates(self, bite: Action) -> None:
        """The action name comes from the wrapped attack."""
        assert bite.name == "Bite"

    def test_decode_by_kind(self) -> None:
        """Wrapped actions decode to the variant named by their kind."""
        action = Action.model_validate(
            {
                "id": "a-1",
                "action": {
                    "kind": "ranged_weapon_attack",
                    "name": "Sling",
                    "modifier": 2,
                    "range": {"close_ft": 30, "long_ft": 120},
                    "target": {"kind": "one_target"},
                    "damage": {"count": 1, "die": "d4", "bonus": 0},
                    "damage_type": "bludgeoning",
                },
            }
        )
        assert isinstance(action.action, RangedWeaponAttack)
        assert action.id == "a-1"

    def test_blank_identifier_rejected(self, bite: Action) -> None:
        """Blank identifiers are rejected."""
        with pytest.raises(ValidationError):
            Action(id="   ", action=bite.action)

    def test_identifier_immutable(self, bite: Action) -> None:
        """Identifiers cannot be reassigned."""
        with pytest.raises(ValidationError):
            bite.id = "other"
