"""Events the player meets and the choices they offer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .input import InputManager

if TYPE_CHECKING:
    from .actions import Action
    from .monsters import BaseMonster
    from .npcs import BaseNPC
    from .player import Player
    from .traps import BaseTrap


@dataclass
class Choice:
    """An option in an event: an optional trap, then an action, then where to go next."""

    id: str
    description: str
    action: Optional["Action"] = None
    next_event_id: str = ""
    ability_id: str = ""
    trap: Optional["BaseTrap"] = None

    def execute(self, player: "Player") -> None:
        """Spring the trap, if any, then carry out the action, if any."""
        if self.trap is not None:
            self.trap.trigger(player)
        if self.action is not None:
            self.action.execute(player)


@dataclass
class Event:
    """A scene with a description, choices and optional monster, NPC and trap."""

    event_id: str
    name: str
    description: str
    choices: list[Choice] = field(default_factory=list)
    monster: Optional["BaseMonster"] = None
    npc: Optional["BaseNPC"] = None
    trap: Optional["BaseTrap"] = None
    next_event_id: str = ""
    completed: bool = False
    ability_reward_id: Optional[str] = None

    def add_choice(self, choice: Choice) -> None:
        self.choices.append(choice)

    def display_choices(self) -> None:
        for choice in self.choices:
            print(f"{choice.id}: {choice.description}")

    def execute(
        self, player: "Player", input_manager: Optional[InputManager] = None
    ) -> None:
        """Show the event, ask for a choice, carry it out and record the next event id.

        Raises ValueError when the event offers no choices.
        """
        if not self.choices:
            raise ValueError(f"event {self.event_id!r} has no choices")
        manager = input_manager if input_manager is not None else InputManager()
        print("\n===========================")
        print(self.description)
        print("===========================\n")
        self.display_choices()
        choice_id = manager.get_choice_input(self.choices)
        chosen = next(c for c in self.choices if c.id == choice_id)
        chosen.execute(player)
        self.next_event_id = chosen.next_event_id

    def has_monster(self) -> bool:
        return self.monster is not None

    def has_npc(self) -> bool:
        return self.npc is not None

    def mark_as_completed(self) -> None:
        self.completed = True

    def set_ability_reward(self, ability_id: str) -> None:
        self.ability_reward_id = ability_id

    @property
    def has_ability_reward(self) -> bool:
        return self.ability_reward_id is not None