"""Rooms and the map that holds them."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional


@dataclass
class Room:
    """A place in the world, optionally tied to an event."""

    room_id: str = "Unknown"
    name: str = "Unnamed Room"
    description: str = "No Description"
    event_id: str = ""
    cleared: bool = False

    def enter(self) -> None:
        print(f"You have entered {self.name}.")
        self.display_description()

    def display_description(self) -> str:
        """Print the room's description and return it."""
        text = self.description
        print(text)
        return text

    def has_event(self) -> bool:
        return bool(self.event_id)


class WorldMap:
    """Rooms keyed by id, kept in the order they were added."""

    def __init__(self) -> None:
        self._rooms: dict[str, Room] = {}

    def add_room(self, room: Room) -> None:
        """Store a copy of ``room``, replacing any room with the same id."""
        self._rooms[room.room_id] = copy.copy(room)

    def get_room(self, room_id: str) -> Optional[Room]:
        return self._rooms.get(room_id)

    def get_adjacent_rooms(self, room_id: str) -> list[Room]:
        """Every room other than ``room_id``."""
        return [room for key, room in self._rooms.items() if key != room_id]

    def get_all_rooms(self) -> list[Room]:
        return list(self._rooms.values())