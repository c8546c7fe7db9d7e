"""Request payloads and their conversion into entities.

A request is a partially filled entity: every field is optional, so it
can be assembled incrementally (from a form, an import, or a prompt)
and converted once complete. Conversion checks the required fields,
assigns a fresh identifier, and validates the result as the target
entity.

Example:
    >>> request = WorldRequest(name="Krynn", description="A world of dragons")
    >>> world = request.to_entity()
    >>> world.name
    'Krynn'
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gamemstr.core.exceptions import EntityConstructionError
from gamemstr.core.logging import get_logger
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
from gamemstr.models.base import Entity, new_identifier
from gamemstr.models.creature import Creature, CreatureCategory
from gamemstr.models.dice import DieExpression
from gamemstr.models.enums import (
    Alignment,
    ArmorType,
    CastingTime,
    ConditionType,
    DamageType,
    ItemRarity,
    ItemType,
    Language,
    SpellDuration,
    SpellLevel,
    WeaponType,
)
from gamemstr.models.item import Attuneable, Charge, Item
from gamemstr.models.spell import Area, Components, Save, Spell, SpellRange
from gamemstr.models.world import Campaign, Note, Session, World

logger = get_logger(__name__)

EntityT = TypeVar("EntityT", bound=Entity)


class ConversionResult(BaseModel, Generic[EntityT]):
    """Outcome of a non-raising request conversion.

    Attributes:
        success: Whether the entity was constructed.
        entity: The constructed entity on success.
        error: The construction error on failure.
        missing_fields: Required fields that were absent.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    entity: EntityT | None = None
    error: EntityConstructionError | None = None
    missing_fields: list[str] = Field(default_factory=list)


class EntityRequest(BaseModel, Generic[EntityT]):
    """Base class for entity construction requests.

    Subclasses declare the target entity and which of their fields must
    be present for conversion to succeed.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    entity_type: ClassVar[type[Entity]]
    required_fields: ClassVar[tuple[str, ...]] = ("name",)

    name: str | None = None

    def missing_fields(self) -> list[str]:
        """Get the required fields that are still absent."""
        return [field for field in self.required_fields if getattr(self, field) is None]

    def to_entity(self) -> EntityT:
        """Convert the request into its entity.

        Supplied values are copied, so later changes to the request do not
        affect the entity.

        Returns:
            The new entity, under a freshly generated identifier.

        Raises:
            EntityConstructionError: If required fields are missing or the
                entity rejects the supplied values.
        """
        entity_name = self.entity_type.__name__
        missing = self.missing_fields()
        if missing:
            logger.warning(
                "Entity conversion failed",
                entity_type=entity_name,
                missing_fields=missing,
            )
            raise EntityConstructionError(
                f"Cannot build {entity_name}: missing required fields",
                entity_type=entity_name,
                missing_fields=missing,
            )

        data: dict[str, Any] = self.model_dump(exclude_none=True)
        data["id"] = new_identifier()
        try:
            entity = self.entity_type.model_validate(data)
        except ValidationError as exc:
            logger.warning(
                "Entity conversion failed",
                entity_type=entity_name,
                error_count=exc.error_count(),
            )
            raise EntityConstructionError(
                f"Cannot build {entity_name}: invalid field values",
                entity_type=entity_name,
                details={"errors": exc.errors(include_url=False)},
            ) from exc

        logger.debug("Entity constructed", entity_type=entity_name, id=entity.id)
        return entity

    def try_convert(self) -> ConversionResult[EntityT]:
        """Convert the request without raising.

        Returns:
            A result holding either the entity or the construction error.
        """
        try:
            entity = self.to_entity()
        except EntityConstructionError as exc:
            return ConversionResult(
                success=False,
                error=exc,
                missing_fields=exc.missing_fields,
            )
        return ConversionResult(success=True, entity=entity)


# =============================================================================
# World Requests
# =============================================================================


class WorldRequest(EntityRequest[World]):
    """Request for a World."""

    entity_type: ClassVar[type[Entity]] = World
    required_fields: ClassVar[tuple[str, ...]] = ("name", "description")

    description: str | None = None


class CampaignRequest(EntityRequest[Campaign]):
    """Request for a Campaign."""

    entity_type: ClassVar[type[Entity]] = Campaign
    required_fields: ClassVar[tuple[str, ...]] = ("name", "world_id")

    description: str | None = None
    world_id: str | None = None


class SessionRequest(EntityRequest[Session]):
    """Request for a Session."""

    entity_type: ClassVar[type[Entity]] = Session
    required_fields: ClassVar[tuple[str, ...]] = ("name", "campaign_id")

    description: str | None = None
    campaign_id: str | None = None
    notes: list[Note] | None = None
    plan: str | None = None
    recap: str | None = None


# =============================================================================
# Stat Block Requests
# =============================================================================


class CreatureRequest(EntityRequest[Creature]):
    """Request for a Creature."""

    entity_type: ClassVar[type[Entity]] = Creature
    required_fields: ClassVar[tuple[str, ...]] = (
        "name",
        "category",
        "alignment",
        "armor_class",
        "hit_points",
        "speed",
        "ability_scores",
        "challenge_rating",
    )

    category: CreatureCategory | None = None
    alignment: Alignment | None = None
    armor_class: int | None = None
    hit_points: Health | None = None
    speed: list[MovementSpeed] | None = None
    ability_scores: list[AbilityScore] | None = None
    saving_throws: list[SavingThrow] | None = None
    damage_resistances: list[DamageType] | None = None
    damage_immunities: list[DamageType] | None = None
    damage_vulnerabilities: list[DamageType] | None = None
    condition_immunities: list[ConditionType] | None = None
    skills: list[Skill] | None = None
    senses: list[Sense] | None = None
    languages: list[Language] | None = None
    challenge_rating: str | None = None
    racial_traits: list[RacialTrait] | None = None
    description: str | None = None
    actions: list[Action] | None = None
    lair: Lair | None = None
    others: list[OtherAttribute] | None = None


class ItemRequest(EntityRequest[Item]):
    """Request for an Item."""

    entity_type: ClassVar[type[Entity]] = Item
    required_fields: ClassVar[tuple[str, ...]] = ("name", "item_type", "rarity")

    item_type: ItemType | None = None
    rarity: ItemRarity | None = None
    attunement: Attuneable | None = None
    weapon_type: WeaponType | None = None
    armor_type: ArmorType | None = None
    conditions: list[ConditionType] | None = None
    attached_spell: Spell | None = None
    charges: Charge | None = None
    inventory: list[Item] | None = None
    others: list[OtherAttribute] | None = None
    actions: list[Action] | None = None


class SpellRequest(EntityRequest[Spell]):
    """Request for a Spell."""

    entity_type: ClassVar[type[Entity]] = Spell
    required_fields: ClassVar[tuple[str, ...]] = (
        "name",
        "description",
        "level",
        "casting_time",
        "duration",
        "range",
        "components",
    )

    description: str | None = None
    level: SpellLevel | None = None
    casting_time: CastingTime | None = None
    duration: SpellDuration | None = None
    damage: DieExpression | None = None
    damage_type: DamageType | None = None
    range: SpellRange | None = None
    area: Area | None = None
    components: Components | None = None
    attack_bonus: int | None = None
    save: Save | None = None


__all__ = [
    "ConversionResult",
    "EntityRequest",
    "WorldRequest",
    "CampaignRequest",
    "SessionRequest",
    "CreatureRequest",
    "ItemRequest",
    "SpellRequest",
]
