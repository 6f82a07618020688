"""
The Listener maps a line of player text onto one of the nine commands.

It keeps no state: the same line always gives the same command.
"""

from .commands import Examine, Help, Inventory, Look, Move, Quit, Take, Unknown, Use
from .world import Direction, Item

SIMPLE_COMMANDS = {
    'look': Look, 'l': Look,
    'inventory': Inventory, 'i': Inventory, 'inv': Inventory,
    'help': Help, '?': Help,
    'quit': Quit, 'exit': Quit,
}


def parse(line):
    """
    Text -> Command.
    Keywords are matched case-insensitively after collapsing whitespace;
    anything unrecognized becomes Unknown with the original trimmed text.
    """
    original = line.strip()
    tokens = original.lower().split()
    if not tokens:
        return Unknown(original)

    text = " ".join(tokens)
    if text in SIMPLE_COMMANDS:
        return SIMPLE_COMMANDS[text]()

    verb, rest = tokens[0], " ".join(tokens[1:])

    # bare "north" / "n"
    if not rest:
        direction = Direction.from_word(verb)
        if direction is not None:
            return Move(direction)
        return Unknown(original)

    if verb in ('go', 'walk') and len(tokens) == 2:
        direction = Direction.from_word(rest)
        if direction is not None:
            return Move(direction)
    elif verb in ('take', 'get'):
        return Take(Item(rest))
    elif verb in ('examine', 'x'):
        return Examine(rest)
    elif verb == 'use':
        return Use(rest)

    return Unknown(original)


def read_line(prompt, reader=input):
    """
    One line of input from `reader`, trailing whitespace and newline removed.
    EOFError from the reader propagates to the caller.
    """
    return reader(prompt).rstrip()
