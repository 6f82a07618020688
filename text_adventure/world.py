"""
World model: rooms, exits, items and the game state snapshot.

Everything here is immutable. The Director builds new snapshots with
dataclasses.replace instead of editing the old ones.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType, Optional

RoomName = NewType("RoomName", str)
Description = NewType("Description", str)


class Direction(Enum):
    """Enum for movement directions."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"
    UP = "up"
    DOWN = "down"

    @property
    def word(self) -> str:
        """Lowercase word used in messages ("north")."""
        return self.value

    @property
    def abbreviation(self) -> str:
        return self.value[0]

    @classmethod
    def from_word(cls, word: str) -> Optional["Direction"]:
        """Resolve 'north' or 'n' (any case) to a Direction, else None."""
        word = word.lower()
        for direction in cls:
            if word in (direction.word, direction.abbreviation):
                return direction
        return None


@dataclass(frozen=True)
class Item:
    """A portable thing. Two items are equal iff their names are equal."""

    name: str


@dataclass(frozen=True)
class Exit:
    direction: Direction
    destination: RoomName


@dataclass(frozen=True)
class Room:
    """A node in the world graph."""

    name: RoomName
    description: Description
    exits: tuple[Exit, ...] = ()
    items: tuple[Item, ...] = ()


@dataclass(frozen=True)
class GameState:
    """The whole mutable part of the world, as one immutable snapshot."""

    current_room: RoomName
    rooms: tuple[Room, ...]
    inventory: tuple[Item, ...] = ()


# ==========================================================
# LOOKUP HELPERS
# ==========================================================
def find_room(rooms, name) -> Optional[Room]:
    """First room whose name equals `name`. None means the reference is dangling."""
    for room in rooms:
        if room.name == name:
            return room
    return None


def find_exit(exits, direction) -> Optional[Exit]:
    for exit_ in exits:
        if exit_.direction == direction:
            return exit_
    return None


def normalize(name: str) -> str:
    """Canonical case-insensitive form of an item name."""
    return name.lower()


def has_item(items, item: Item) -> bool:
    """Exact, case-sensitive structural match (used by Take)."""
    return any(candidate == item for candidate in items)


def find_item_named(items, name: str) -> Optional[Item]:
    """Case-insensitive match on the normalized name (used by Examine and Use)."""
    wanted = normalize(name)
    for item in items:
        if normalize(item.name) == wanted:
            return item
    return None
