"""A console text adventure with rooms, events, monsters, traps, NPCs, abilities and XML saves."""

__version__ = "0.1.0"

__all__ = [
    "abilities",
    "actions",
    "combat",
    "event_manager",
    "events",
    "game",
    "input",
    "monsters",
    "npcs",
    "player",
    "traps",
    "world",
]