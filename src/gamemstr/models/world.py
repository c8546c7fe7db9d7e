"""World, campaign, and table-side entities.

These aggregates tie creatures, items, and spells to a campaign context:

    World -> Campaign -> Session (notes, plan, recap)
    World -> Map (grid of cell labels) -> Location -> NPC
    Campaign <- Player (creature + race/class/level + inventory + spells)

Cross-aggregate links are identifier references (``world_id``,
``campaign_id``, ``map_id``) rather than embedded copies.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gamemstr.core.constants import MAX_CHARACTER_LEVEL, MIN_CHARACTER_LEVEL
from gamemstr.core.exceptions import MapBoundsError
from gamemstr.core.logging import get_logger
from gamemstr.models.base import Entity, IdentifiedValue, Identifier
from gamemstr.models.creature import Creature, NPCCategory, PlayerCategory
from gamemstr.models.enums import PlayerClass, Race
from gamemstr.models.item import Item
from gamemstr.models.spell import Spell

logger = get_logger(__name__)


# =============================================================================
# World, Campaign, Session
# =============================================================================


class World(Entity):
    """A game world."""

    description: str


class Campaign(Entity):
    """A campaign set in a world."""

    description: str = ""
    world_id: Identifier


class Note(IdentifiedValue):
    """A free-text session note."""

    name: str = Field(min_length=1)
    description: str = ""


class Session(Entity):
    """A play session with notes, a plan, and a recap.

    Attributes:
        description: Short description of the session.
        campaign_id: Campaign the session belongs to.
        notes: Notes taken during or before the session.
        plan: What the game master intends to run.
        recap: What actually happened.
    """

    description: str = ""
    campaign_id: Identifier
    notes: list[Note] = Field(default_factory=list)
    plan: str = ""
    recap: str = ""

    def add_note(self, note: Note) -> None:
        """Append a note to the session.

        Raises:
            pydantic.ValidationError: If note is not a valid Note.
        """
        self.notes.append(Note.model_validate(note))

    def remove_note(self, note_id: str) -> bool:
        """Remove a note by identifier.

        Returns:
            True if a note was removed, False if none matched.
        """
        for index, note in enumerate(self.notes):
            if note.id == note_id:
                del self.notes[index]
                return True
        logger.debug("Note not found in session", session_id=self.id, note_id=note_id)
        return False


# =============================================================================
# Maps & Locations
# =============================================================================


class MapCoordinates(BaseModel):
    """A cell on a specific map."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    map_id: Identifier
    x: int = Field(ge=0)
    y: int = Field(ge=0)


class NPC(BaseModel):
    """A non-player character living in a world."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    creature: Creature
    world_id: Identifier

    @model_validator(mode="after")
    def validate_category(self) -> "NPC":
        """Ensure the wrapped creature is categorised as an NPC."""
        if not isinstance(self.creature.category, NPCCategory):
            msg = f"NPC requires an npc category, got {self.creature.category.kind!r}"
            raise ValueError(msg)
        return self

    @property
    def id(self) -> str:
        return self.creature.id

    @property
    def name(self) -> str:
        return self.creature.name


class Location(Entity):
    """A named place, optionally pinned to a map cell."""

    description: str = ""
    world_id: Identifier
    map_coordinates: MapCoordinates | None = None
    npcs: list[NPC] = Field(default_factory=list)


class Map(Entity):
    """A rectangular grid of cell labels with pinned locations.

    The grid is indexed ``grid[y][x]``: rows top to bottom, columns left
    to right.

    Attributes:
        description: Description of the mapped area.
        world_id: World the map belongs to.
        width: Number of columns.
        height: Number of rows.
        grid: Cell labels, ``height`` rows of ``width`` cells each.
        locations: Locations placed on this map.
    """

    description: str = ""
    world_id: Identifier
    width: int = Field(ge=1)
    height: int = Field(ge=1)
    grid: list[list[str]]
    locations: list[Location] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_grid_shape(self) -> "Map":
        """Ensure the grid is exactly height rows of width cells."""
        if len(self.grid) != self.height:
            msg = f"grid has {len(self.grid)} rows, expected {self.height}"
            raise ValueError(msg)
        for row_index, row in enumerate(self.grid):
            if len(row) != self.width:
                msg = f"grid row {row_index} has {len(row)} cells, expected {self.width}"
                raise ValueError(msg)
        return self

    @classmethod
    def blank(
        cls,
        name: str,
        world_id: str,
        width: int,
        height: int,
        description: str = "",
    ) -> Map:
        """Create a map whose cells are all empty labels."""
        grid = [["" for _ in range(width)] for _ in range(height)]
        return cls(
            name=name,
            world_id=world_id,
            width=width,
            height=height,
            grid=grid,
            description=description,
        )

    def contains(self, x: int, y: int) -> bool:
        """Check whether a cell lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise MapBoundsError(
                f"Cell ({x}, {y}) is outside map {self.name!r}",
                x=x,
                y=y,
                width=self.width,
                height=self.height,
            )

    def cell(self, x: int, y: int) -> str:
        """Get the label of a cell.

        Raises:
            MapBoundsError: If the cell is outside the grid.
        """
        self._check_bounds(x, y)
        return self.grid[y][x]

    def set_cell(self, x: int, y: int, label: str) -> None:
        """Set the label of a cell.

        Raises:
            MapBoundsError: If the cell is outside the grid.
            pydantic.ValidationError: If label is not a string.
        """
        self._check_bounds(x, y)
        grid = [list(row) for row in self.grid]
        grid[y][x] = label
        self.grid = grid

    def add_location(self, location: Location) -> None:
        """Place a location on this map.

        Args:
            location: Location whose coordinates reference this map.

        Raises:
            ValueError: If the location has no coordinates or they reference
                another map.
            MapBoundsError: If the coordinates are outside the grid.
            pydantic.ValidationError: If location is not a valid Location.
        """
        location = Location.model_validate(location)
        coordinates = location.map_coordinates
        if coordinates is None or coordinates.map_id != self.id:
            msg = f"Location {location.name!r} is not pinned to map {self.id!r}"
            raise ValueError(msg)
        self._check_bounds(coordinates.x, coordinates.y)
        self.locations.append(location)

    def locations_at(self, x: int, y: int) -> list[Location]:
        """Get the locations pinned to a cell."""
        self._check_bounds(x, y)
        return [
            location
            for location in self.locations
            if location.map_coordinates is not None
            and (location.map_coordinates.x, location.map_coordinates.y) == (x, y)
        ]


# =============================================================================
# Player
# =============================================================================


class Player(BaseModel):
    """A player character: a creature plus character progression.

    Attributes:
        creature: The character's stat block (category must be player).
        race: Character race.
        character_class: Character class.
        level: Character level (1-20).
        experience: Experience points.
        inventory: Carried items.
        spells: Known spells.
        campaign_id: Campaign the character plays in.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    creature: Creature
    race: Race
    character_class: PlayerClass
    level: int = Field(
        default=MIN_CHARACTER_LEVEL,
        ge=MIN_CHARACTER_LEVEL,
        le=MAX_CHARACTER_LEVEL,
    )
    experience: int = Field(default=0, ge=0)
    inventory: list[Item] = Field(default_factory=list)
    spells: list[Spell] = Field(default_factory=list)
    campaign_id: Identifier | None = None

    @model_validator(mode="after")
    def validate_category(self) -> "Player":
        """Ensure the wrapped creature is categorised as a player."""
        if not isinstance(self.creature.category, PlayerCategory):
            msg = f"Player requires a player category, got {self.creature.category.kind!r}"
            raise ValueError(msg)
        return self

    @property
    def id(self) -> str:
        return self.creature.id

    @property
    def name(self) -> str:
        return self.creature.name

    def add_item(self, item: Item) -> None:
        """Add an item to the inventory.

        Raises:
            pydantic.ValidationError: If item is not a valid Item.
        """
        self.inventory.append(Item.model_validate(item))

    def remove_item(self, item_id: str) -> bool:
        """Remove an item from the inventory by identifier.

        Returns:
            True if an item was removed, False if none matched.
        """
        for index, item in enumerate(self.inventory):
            if item.id == item_id:
                del self.inventory[index]
                return True
        logger.debug("Item not found in inventory", player_id=self.id, item_id=item_id)
        return False

    def add_spell(self, spell: Spell) -> None:
        """Add a spell to the known spells.

        Raises:
            pydantic.ValidationError: If spell is not a valid Spell.
        """
        self.spells.append(Spell.model_validate(spell))

    def remove_spell(self, spell_id: str) -> bool:
        """Remove a known spell by identifier.

        Returns:
            True if a spell was removed, False if none matched.
        """
        for index, spell in enumerate(self.spells):
            if spell.id == spell_id:
                del self.spells[index]
                return True
        logger.debug("Spell not found", player_id=self.id, spell_id=spell_id)
        return False

    def set_level(self, level: int) -> None:
        """Set the character level.

        Raises:
            pydantic.ValidationError: If level is outside 1-20.
        """
        self.level = level

    def set_experience(self, experience: int) -> None:
        """Set the experience total.

        Raises:
            pydantic.ValidationError: If experience is negative.
        """
        self.experience = experience


__all__ = [
    "World",
    "Campaign",
    "Note",
    "Session",
    "MapCoordinates",
    "NPC",
    "Location",
    "Map",
    "Player",
]
