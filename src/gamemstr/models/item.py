"""Item models.

Items may hold other items in a nested inventory (a bag of holding full
of potions, for instance). Lookups and removals by identifier walk the
nested inventories depth-first.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import Field

from gamemstr.core.logging import get_logger
from gamemstr.models.actions import Action
from gamemstr.models.attributes import OtherAttribute
from gamemstr.models.base import Entity, ValueModel
from gamemstr.models.enums import (
    Alignment,
    ArmorType,
    ConditionType,
    ItemRarity,
    ItemType,
    TimeDivision,
    WeaponType,
)
from gamemstr.models.spell import Spell

logger = get_logger(__name__)


class Attuneable(ValueModel):
    """An attunement requirement, optionally restricted by alignment.

    Example:
        >>> str(Attuneable())
        '(requires attunement)'
    """

    alignments: list[Alignment] | None = None

    def __str__(self) -> str:
        if not self.alignments:
            return "(requires attunement)"
        restriction = ", ".join(alignment.display_name for alignment in self.alignments)
        return f"(requires attunement, {restriction})"


class Charge(ValueModel):
    """Limited uses that recharge every time unit (e.g., '3/Day')."""

    count: int = Field(ge=0)
    per: TimeDivision

    def describe(self) -> str:
        """Describe the charges in prose (e.g., '3 charges per Day')."""
        noun = "charge" if self.count == 1 else "charges"
        return f"{self.count} {noun} per {self.per.display_name}"

    def __str__(self) -> str:
        return f"{self.count}/{self.per.display_name}"


class Item(Entity):
    """A mundane or magic item.

    Attributes:
        item_type: Item category (weapon, wand, wondrous item...).
        rarity: Item rarity.
        attunement: Attunement requirement, if any.
        weapon_type: Weapon sub-type for weapons.
        armor_type: Armor sub-type for armor.
        conditions: Conditions the item imposes or grants.
        attached_spell: Spell the item can cast.
        charges: Limited-use charges.
        inventory: Items carried inside this item.
        others: Free-form attributes.
        actions: Actions the item grants.
    """

    item_type: ItemType
    rarity: ItemRarity
    attunement: Attuneable | None = None
    weapon_type: WeaponType | None = None
    armor_type: ArmorType | None = None
    conditions: list[ConditionType] | None = None
    attached_spell: Spell | None = None
    charges: Charge | None = None
    inventory: list[Item] | None = None
    others: list[OtherAttribute] | None = None
    actions: list[Action] | None = None

    def header(self) -> str:
        """Get the item's subtitle line.

        Example:
            'Wondrous Item, Very Rare (requires attunement)'
        """
        text = f"{self.item_type.display_name}, {self.rarity.display_name}"
        if self.attunement is not None:
            text = f"{text} {self.attunement}"
        return text

    def add_item(self, item: Item) -> None:
        """Add an item to this item's inventory.

        Raises:
            pydantic.ValidationError: If item is not a valid Item.
        """
        item = Item.model_validate(item)
        if self.inventory is None:
            self.inventory = []
        self.inventory.append(item)

    def remove_item(self, item_id: str) -> bool:
        """Remove an item by identifier from this or a nested inventory.

        Args:
            item_id: Identifier of the item to remove.

        Returns:
            True if an item was removed, False if none matched.
        """
        if self._remove_nested(item_id):
            return True
        logger.debug("Item not found in inventory", container_id=self.id, item_id=item_id)
        return False

    def _remove_nested(self, item_id: str) -> bool:
        for index, held in enumerate(self.inventory or []):
            if held.id == item_id:
                del self.inventory[index]
                return True
            if held._remove_nested(item_id):
                return True
        return False

    def find_item(self, item_id: str) -> Item | None:
        """Find an item by identifier, searching nested inventories depth-first."""
        for held in self.iter_items():
            if held.id == item_id:
                return held
        return None

    def iter_items(self) -> Iterator[Item]:
        """Yield every contained item depth-first."""
        for held in self.inventory or []:
            yield held
            yield from held.iter_items()

    def render(self) -> str:
        """Render the item as a stat block."""
        from gamemstr.rendering.stat_block import render_item

        return render_item(self)


__all__ = [
    "Attuneable",
    "Charge",
    "Item",
]
