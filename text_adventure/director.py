import logging
from dataclasses import replace

from . import narrator
from .commands import Examine, Help, Inventory, Look, Move, Quit, Take, Unknown, Use
from .lore import lookup_lore, use_effect
from .world import find_exit, find_item_named, find_room, has_item, normalize

log = logging.getLogger(__name__)


# ==========================================================
# 1. THE MASTER ROUTER
# ==========================================================
def update(state, command):
    """
    The Director is the STATE MACHINE.
    Takes a GameState and a Command -> returns (new GameState, Message).

    Every command produces an answer; failures (no such room, exit or item)
    come back as a message with the state unchanged. The old state is never
    modified, so callers may keep it around.
    """
    log.debug("dispatch %r in %r", command, state.current_room)

    if isinstance(command, Look):
        return look(state)
    elif isinstance(command, Move):
        return move(state, command.direction)
    elif isinstance(command, Take):
        return take(state, command.item)
    elif isinstance(command, Inventory):
        return state, narrator.report_inventory(state.inventory)
    elif isinstance(command, Examine):
        return examine(state, command.name)
    elif isinstance(command, Use):
        return use(state, command.name)
    elif isinstance(command, Help):
        return state, narrator.say(narrator.HELP_TEXT)
    elif isinstance(command, Quit):
        return state, narrator.say(narrator.GOODBYE)
    elif isinstance(command, Unknown):
        return state, narrator.report_unknown(command.text)

    raise TypeError(f"not a command: {command!r}")


# ==========================================================
# 2. THE SCENE SHIFTER
# ==========================================================
def look(state):
    room = find_room(state.rooms, state.current_room)
    if room is None:
        return state, narrator.say(narrator.NOWHERE)
    return state, narrator.describe_room(room)


def move(state, direction):
    room = find_room(state.rooms, state.current_room)
    if room is None:
        return state, narrator.say(narrator.NOWHERE)

    exit_ = find_exit(room.exits, direction)
    if exit_ is None:
        return state, narrator.say(narrator.NO_EXIT)

    # The destination is not checked against the room list; a dangling
    # destination shows up as "nowhere" on the next look.
    return replace(state, current_room=exit_.destination), narrator.report_move(direction)


# ==========================================================
# 3. THE INVENTORY MANAGER
# ==========================================================
def take(state, item):
    """
    Moves an item from the current room into the inventory.
    Matching is exact and case-sensitive; every identical copy leaves the room,
    one copy goes to the front of the inventory.
    """
    room = find_room(state.rooms, state.current_room)
    if room is None:
        return state, narrator.say(narrator.NOWHERE)

    if not has_item(room.items, item):
        return state, narrator.report_missing(item)

    remaining = tuple(candidate for candidate in room.items if candidate != item)
    emptied = replace(room, items=remaining)
    rooms = tuple(emptied if r.name == room.name else r for r in state.rooms)

    new_state = replace(state, rooms=rooms, inventory=(item,) + state.inventory)
    return new_state, narrator.report_take(item)


# ==========================================================
# 4. INSPECTION
# ==========================================================
def examine(state, name):
    room = find_room(state.rooms, state.current_room)
    room_items = room.items if room is not None else ()

    item = find_item_named(room_items, name) or find_item_named(state.inventory, name)
    if item is None:
        return state, narrator.say(narrator.NOT_HERE)
    return state, narrator.say(lookup_lore(normalize(name)))


def use(state, name):
    if find_item_named(state.inventory, name) is None:
        return state, narrator.say(narrator.NOT_CARRIED)

    effect = use_effect(normalize(name))
    if effect is None:
        return state, narrator.say(narrator.CANNOT_USE)
    return state, narrator.say(effect)
