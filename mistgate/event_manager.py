"""Loading events from the event file and running them for the player."""

from __future__ import annotations

import re
import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from .actions import Action, ContinueAction, FightAction, GetPotionAction, RunAwayAction
from .events import Choice, Event
from .input import InputManager
from .monsters import BaseMonster, create_monster
from .traps import BaseTrap, PitfallTrap, PoisonGasTrap

if TYPE_CHECKING:
    from .player import Player

DEFAULT_EVENTS_PATH = Path("../resources/events.xml")

_HEX_INT = re.compile(r"\s*0[xX]([0-9a-fA-F]+)")
_DEC_INT = re.compile(r"\s*([+-]?\d+)")


def _int_attribute(element: ET.Element, name: str, default: int = 0) -> int:
    """Read a leading integer from an attribute, falling back to ``default``."""
    raw = element.get(name)
    if raw is None:
        return default
    match = _HEX_INT.match(raw)
    if match:
        return int(match.group(1), 16)
    match = _DEC_INT.match(raw)
    if match:
        return int(match.group(1))
    return default


def _make_action(choice_id: str, monster: Optional[BaseMonster]) -> Action:
    if choice_id == "fight" and monster is not None:
        return FightAction(monster)
    if choice_id == "run":
        return RunAwayAction()
    if choice_id == "get potion":
        return GetPotionAction()
    return ContinueAction()


def _make_trap(element: Optional[ET.Element]) -> Optional[BaseTrap]:
    if element is None:
        return None
    trap_type = element.get("type", "")
    damage = _int_attribute(element, "damage")
    if trap_type == "PoisonGasTrap":
        return PoisonGasTrap("Poison Gas", damage)
    if trap_type == "PitfallTrap":
        return PitfallTrap("Pitfall", damage)
    return None


def _make_monster(element: Optional[ET.Element]) -> Optional[BaseMonster]:
    if element is None:
        return None
    return create_monster(
        element.get("type", "Unknown"),
        element.get("name", "Unknown"),
        _int_attribute(element, "health"),
        _int_attribute(element, "attackPower"),
    )


def _build_event(element: ET.Element, event_id: str) -> Event:
    event = Event(
        event_id,
        element.findtext("name") or "",
        element.findtext("description") or "",
    )
    monster = _make_monster(element.find("Monster"))
    event.monster = monster

    choices = element.find("Choices")
    if choices is not None:
        for choice_element in choices.findall("Choice"):
            choice_id = choice_element.get("id", "")
            event.add_choice(
                Choice(
                    choice_id,
                    choice_element.get("description", ""),
                    _make_action(choice_id, monster),
                    choice_element.get("nextEventId", ""),
                    "",
                    _make_trap(choice_element.find("Trap")),
                )
            )
    return event


def load_event(path: Union[str, Path], event_id: str) -> Optional[Event]:
    """Build the event with ``event_id`` from the XML file at ``path``.

    Returns None, after reporting on standard error, when the file cannot be
    read or parsed or has no <Events> root; returns None when no event matches.
    """
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        print(f"Failed to load events from {path} Error: {exc}", file=sys.stderr)
        return None

    if root.tag != "Events":
        print("No root element <Events> found in XML file.", file=sys.stderr)
        return None

    for element in root.findall("Event"):
        if element.get("id") == event_id:
            return _build_event(element, event_id)
    return None


class EventManager:
    """Loads events on demand, caches them and runs them for the player."""

    def __init__(
        self,
        events_path: Union[str, Path] = DEFAULT_EVENTS_PATH,
        input_manager: Optional[InputManager] = None,
    ) -> None:
        self.events_path = Path(events_path)
        self.input_manager = input_manager if input_manager is not None else InputManager()
        self._events: dict[str, Event] = {}

    def get_event(self, event_id: str) -> Optional[Event]:
        """Return a cached event, or None if it has not been loaded."""
        return self._events.get(event_id)

    def process_event(self, event_id: str, player: "Player") -> str:
        """Run an event and return the id of the event that follows.

        Returns "end" when the event cannot be found. Events whose id contains
        "NPC" chain straight on into the next event, stopping at "event3".
        """
        event = self.get_event(event_id)
        if event is None:
            event = load_event(self.events_path, event_id)
            if event is None:
                print(f"Unable to process event with ID: {event_id}")
                return "end"
            self._events[event_id] = event
            print(f"[DEBUG] Loaded new event with ID: {event_id}")

        event.execute(player, self.input_manager)
        next_event_id = event.next_event_id
        event.mark_as_completed()

        if "NPC" in event_id:
            if next_event_id == "event3":
                return next_event_id
            if next_event_id and next_event_id != "end":
                return self.process_event(next_event_id, player)

        return next_event_id

    def execute_choice(self, choice_id: str, event: Event, player: "Player") -> None:
        """Carry out the named choice of ``event`` and record where it leads."""
        chosen = next((c for c in event.choices if c.id == choice_id), None)
        if chosen is None:
            print("Invalid choice ID.")
            return
        chosen.execute(player)
        next_event_id = chosen.next_event_id
        if next_event_id == "end":
            print("Event chain ended. Proceeding to next room...")
        elif next_event_id:
            event.next_event_id = next_event_id