"""
Loads an authored world file (YAML) into the initial GameState.

A world file looks like:

    title: Kaer Morhen
    start: Gate
    rooms:
      - name: Gate
        description: A broken gate.
        exits: {north: Yard}
        items: [medallion]
"""

import logging
import os
from dataclasses import dataclass

import yaml

from .world import Description, Direction, Exit, GameState, Item, Room, RoomName

log = logging.getLogger(__name__)

WORLD_SUFFIX = ".yaml"


class CampaignError(ValueError):
    """Raised when a world file is readable YAML but not a valid world."""


@dataclass(frozen=True)
class Campaign:
    title: str
    intro: str
    state: GameState


def new_game(start, rooms):
    """Starting snapshot: player at `start`, empty inventory."""
    return GameState(current_room=RoomName(start), rooms=tuple(rooms), inventory=())


def build_rooms(data):
    """Converts the `rooms` list of a world file into Room records, in file order."""
    raw_rooms = data.get('rooms')
    if not isinstance(raw_rooms, list) or not raw_rooms:
        raise CampaignError("world file needs a non-empty 'rooms' list")

    rooms = []
    for index, raw in enumerate(raw_rooms):
        if not isinstance(raw, dict) or not isinstance(raw.get('name'), str):
            raise CampaignError(f"room #{index + 1} has no name")
        name = raw['name']

        raw_exits = raw.get('exits') or {}
        if not isinstance(raw_exits, dict):
            raise CampaignError(f"room '{name}': exits must be a mapping of direction to room")

        exits = []
        for word, destination in raw_exits.items():
            direction = Direction.from_word(str(word))
            if direction is None:
                raise CampaignError(f"room '{name}': unknown direction '{word}'")
            if not isinstance(destination, str):
                raise CampaignError(f"room '{name}': exit '{word}' needs a room name")
            exits.append(Exit(direction, RoomName(destination)))

        raw_items = raw.get('items') or []
        if not isinstance(raw_items, list):
            raise CampaignError(f"room '{name}': items must be a list")

        items = []
        for item_name in raw_items:
            if not isinstance(item_name, str):
                raise CampaignError(f"room '{name}': item names must be text")
            items.append(Item(item_name))

        description = raw.get('description') or ""
        if not isinstance(description, str):
            raise CampaignError(f"room '{name}': description must be text")
        description = description.rstrip("\n")
        rooms.append(Room(RoomName(name), Description(description), tuple(exits), tuple(items)))

    return tuple(rooms)


def parse_campaign(data):
    if not isinstance(data, dict):
        raise CampaignError("world file must be a mapping")

    rooms = build_rooms(data)
    start = data.get('start', rooms[0].name)
    if not isinstance(start, str):
        raise CampaignError("'start' must be a room name")
    if not any(room.name == start for room in rooms):
        # Allowed, the interpreter reports "nowhere" until the player moves.
        log.warning("start room '%s' is not defined in the world file", start)

    return Campaign(
        title=data.get('title', 'Untitled'),
        intro=(data.get('intro') or "").strip(),
        state=new_game(start, rooms),
    )


def load_campaign(path):
    """
    Reads and validates a world file.
    Raises FileNotFoundError, yaml.YAMLError or CampaignError.
    """
    log.debug("loading campaign from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return parse_campaign(data)


def list_campaigns(directory):
    """Campaign ids (file names without suffix) found in `directory`, sorted."""
    if not os.path.isdir(directory):
        return []
    return sorted(
        os.path.splitext(f)[0] for f in os.listdir(directory) if f.endswith(WORLD_SUFFIX)
    )


def campaign_path(directory, campaign_id):
    return os.path.join(directory, campaign_id + WORLD_SUFFIX)
