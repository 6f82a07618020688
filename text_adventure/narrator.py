"""
The Narrator turns the Director's decisions into display text.

Nothing here reads or builds game state; each function formats exactly one
kind of outcome. The wording is part of the game's contract, so tests assert
it verbatim.
"""

from .commands import Message

NOWHERE = "You are nowhere."
NO_EXIT = "You can't go that way."
NOT_HERE = "You don't see that here."
NOT_CARRIED = "You must pick it up first."
CANNOT_USE = "You can't use that right now."
EMPTY_HANDS = "You are carrying nothing."
NO_ITEMS = "There are no items here."
GOODBYE = "Goodbye."

HELP_TEXT = "\n".join([
    "Commands:",
    "  look               describe the room you are in",
    "  go <direction>     walk north, east, south, west, up or down",
    "  take <item>        pick something up",
    "  examine <item>     study an item here or in your pack",
    "  use <item>         use something you are carrying",
    "  inventory          list what you are carrying",
    "  help               show this summary",
    "  quit               leave the game",
])


def describe_room(room) -> Message:
    text = f"{room.name}\n{room.description}\n\n"
    if room.items:
        text += "You see here:\n" + "\n".join(f"- {item.name}" for item in room.items)
    else:
        text += NO_ITEMS
    return Message(text)


def report_move(direction) -> Message:
    return Message(f"You go {direction.word}.")


def report_take(item) -> Message:
    return Message(f"You take the {item.name}.")


def report_missing(item) -> Message:
    return Message(f"There is no {item.name} here.")


def report_inventory(inventory) -> Message:
    if not inventory:
        return Message(EMPTY_HANDS)
    return Message("You are carrying: " + ", ".join(item.name for item in inventory))


def report_unknown(text) -> Message:
    return Message(f"I don't understand {text}")


def say(text) -> Message:
    return Message(text)
