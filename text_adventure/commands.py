"""
Structured player commands and the Message wrapper.

The Listener produces exactly one of the nine Command variants below; the
Director consumes them.
"""

from dataclasses import dataclass
from typing import Union

from .world import Direction, Item


@dataclass(frozen=True)
class Look:
    pass


@dataclass(frozen=True)
class Move:
    direction: Direction


@dataclass(frozen=True)
class Inventory:
    pass


@dataclass(frozen=True)
class Examine:
    name: str


@dataclass(frozen=True)
class Use:
    name: str


@dataclass(frozen=True)
class Take:
    item: Item


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Unknown:
    text: str


Command = Union[Look, Move, Inventory, Examine, Use, Take, Help, Quit, Unknown]


@dataclass(frozen=True)
class Message:
    """Display text returned by the Director."""

    text: str

    def __str__(self):
        return self.text
