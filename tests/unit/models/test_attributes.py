"""Tests for stat-block attribute models."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from gamemstr.models import (
    AbilityScore,
    AbilityType,
    BurrowSpeed,
    ClimbSpeed,
    Die,
    FlySpeed,
    Health,
    MovementSpeed,
    OtherAttribute,
    RacialTrait,
    SavingThrow,
    Sense,
    SenseType,
    Skill,
    SkillType,
    SwimSpeed,
    WalkSpeed,
    build_ability_scores,
    calculate_modifier,
    decode,
)


class TestCalculateModifier:
    """Tests for the calculate_modifier function."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (1, -5), (2, -4), (3, -4), (7, -2), (8, -1), (9, -1), (10, 0),
            (11, 0), (12, 1), (15, 2), (18, 4), (27, 8), (30, 10),
        ],
    )
    def test_modifier_table(self, score: int, expected: int) -> None:
        """Modifier is floor((score - 10) / 2)."""
        assert calculate_modifier(score) == expected


class TestAbilityScore:
    """Tests for the AbilityScore model."""

    def test_modifier_derived(self) -> None:
        """Modifier is computed from the score."""
        assert AbilityScore(kind=AbilityType.STR, score=15).modifier == 2
        assert AbilityScore(kind=AbilityType.STR, score=8).modifier == -1

    @pytest.mark.parametrize("score", [0, 31])
    def test_score_bounds(self, score: int) -> None:
        """Scores must lie within 1-30."""
        with pytest.raises(ValidationError):
            AbilityScore(kind=AbilityType.DEX, score=score)

    def test_matching_modifier_accepted(self) -> None:
        """A supplied modifier that agrees with the score is accepted."""
        score = AbilityScore.model_validate({"kind": "strength", "score": 18, "modifier": 4})
        assert score.modifier == 4

    def test_conflicting_modifier_rejected(self) -> None:
        """A supplied modifier that disagrees with the score is rejected."""
        with pytest.raises(ValidationError, match="does not match score"):
            AbilityScore(kind=AbilityType.STR, score=15, modifier=99)

    def test_decoded_modifier_rederived(self) -> None:
        """A modifier in a decoded record is ignored and re-derived."""
        score = decode(AbilityScore, {"kind": "strength", "score": 18, "modifier": 0})
        assert score.modifier == 4

    def test_modifier_not_settable(self) -> None:
        """The derived modifier cannot be assigned."""
        score = AbilityScore(kind=AbilityType.STR, score=18)
        with pytest.raises((AttributeError, ValidationError)):
            score.modifier = 0

    def test_modifier_serialized(self) -> None:
        """The modifier is included in dumps for readers."""
        dumped = AbilityScore(kind=AbilityType.STR, score=18).model_dump(mode="json")
        assert dumped == {"kind": "strength", "score": 18, "modifier": 4}

    def test_str(self) -> None:
        """Scores render as 'STR 18 (+4)'."""
        assert str(AbilityScore(kind=AbilityType.STR, score=18)) == "STR 18 (+4)"
        assert str(AbilityScore(kind=AbilityType.INT, score=3)) == "INT 3 (-4)"

    def test_build_ability_scores(self) -> None:
        """The builder returns six scores in stat-block order."""
        scores = build_ability_scores(strength=18, charisma=8)

        assert [s.kind for s in scores] == list(AbilityType)
        assert scores[0].modifier == 4
        assert scores[5].modifier == -1
        assert scores[2].score == 10


class TestHealth:
    """Tests for the Health model."""

    def test_total_and_str(self) -> None:
        """Hit points render with their derived total."""
        health = Health.from_dice(6, Die.D10, 12)

        assert health.total == 45
        assert str(health) == "45 (6d10 + 12)"

    def test_dragon_hit_points(self) -> None:
        """Large hit dice pools are computed exactly."""
        assert Health.from_dice(19, Die.D12, 133).total == 256

    def test_supplied_total_ignored(self) -> None:
        """A total in input data is recomputed from the dice."""
        health = Health.model_validate(
            {"dice": {"count": 2, "die": "d8", "bonus": 2}, "total": 999}
        )
        assert health.total == 11


class TestMovementSpeed:
    """Tests for movement speed variants."""

    @pytest.mark.parametrize(
        "speed,expected",
        [
            (WalkSpeed(feet=30), "30 ft."),
            (SwimSpeed(feet=40), "swim 40 ft."),
            (FlySpeed(feet=80), "fly 80 ft."),
            (FlySpeed(feet=60, hover=True), "fly 60 ft. (hover)"),
            (BurrowSpeed(feet=20), "burrow 20 ft."),
            (ClimbSpeed(feet=40), "climb 40 ft."),
        ],
    )
    def test_str(self, speed: object, expected: str) -> None:
        """Speeds render in stat-block form."""
        assert str(speed) == expected

    def test_discriminated_union(self) -> None:
        """Speeds decode to the variant named by their kind tag."""
        adapter = TypeAdapter(MovementSpeed)
        speed = adapter.validate_python({"kind": "fly", "feet": 60, "hover": True})

        assert isinstance(speed, FlySpeed)
        assert speed.hover is True

    def test_unknown_kind_rejected(self) -> None:
        """Unknown speed kinds are rejected."""
        with pytest.raises(ValidationError):
            TypeAdapter(MovementSpeed).validate_python({"kind": "teleport", "feet": 30})

    def test_negative_speed_rejected(self) -> None:
        """Speeds must be non-negative."""
        with pytest.raises(ValidationError):
            WalkSpeed(feet=-10)


class TestStatLines:
    """Tests for skills, senses, saves, traits and other attributes."""

    def test_skill(self) -> None:
        """Skills render with their ability and signed modifier."""
        skill = Skill(skill_type=SkillType.PERCEPTION, modifier=13)
        assert str(skill) == "Perception (Wis) +13"

    def test_sense(self) -> None:
        """Senses render with their range."""
        sense = Sense(sense_type=SenseType.DARKVISION, range_ft=120)
        assert str(sense) == "Darkvision 120 ft."

    def test_saving_throw(self) -> None:
        """Saving throws render with the short ability name."""
        assert str(SavingThrow(ability=AbilityType.DEX, modifier=5)) == "Dex +5"
        assert str(SavingThrow(ability=AbilityType.CHA, modifier=-1)) == "Cha -1"

    def test_racial_trait(self) -> None:
        """Traits render as a named paragraph."""
        trait = RacialTrait(name="Legendary Resistance (3/Day)", description="It succeeds instead.")
        assert str(trait) == "Legendary Resistance (3/Day). It succeeds instead."

    def test_other_attribute(self) -> None:
        """Other attributes render as 'title: value'."""
        other = OtherAttribute(title="Size", value="Huge")
        assert str(other) == "Size: Huge"
        assert other.description == ""

    def test_extra_fields_forbidden(self) -> None:
        """Unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Skill(skill_type=SkillType.STEALTH, modifier=6, proficient=True)
