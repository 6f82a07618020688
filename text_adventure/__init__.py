from .commands import Command, Examine, Help, Inventory, Look, Message, Move, Quit, Take, Unknown, Use
from .director import update
from .world import Direction, Exit, GameState, Item, Room, RoomName, find_exit, find_room

__all__ = [
    "Command", "Examine", "Help", "Inventory", "Look", "Message", "Move", "Quit",
    "Take", "Unknown", "Use", "update", "Direction", "Exit", "GameState", "Item",
    "Room", "RoomName", "find_exit", "find_room",
]
