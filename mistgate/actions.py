"""Actions carried out when the player picks a choice."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from .combat import CombatManager

if TYPE_CHECKING:
    from .monsters import BaseMonster
    from .player import Player


class Action(ABC):
    """Something that happens to the player."""

    @abstractmethod
    def execute(self, player: "Player") -> None:
        """Carry out the action on the player."""


class ClimbWallAction(Action):
    """Climbing costs 5 health."""

    def execute(self, player: "Player") -> None:
        print("You decided to climb the wall!")
        player.health = player.health - 5


class ContinueAction(Action):
    """Move on with no effect."""

    def execute(self, player: "Player") -> None:
        print("You continue forward through the mist...")


class RunAwayAction(Action):
    """Fleeing costs 10 mental strength."""

    def execute(self, player: "Player") -> None:
        print("You decided to run away from the fight!")
        player.mental_strength = player.mental_strength - 10


class GetPotionAction(Action):
    """Adds a health boost ability to the player's inventory."""

    def execute(self, player: "Player") -> None:
        print("You found a Health Boost potion! It has been added to your inventory.")
        player.add_ability("health_boost")


class FightAction(Action):
    """Starts combat with the given monster."""

    def __init__(
        self, monster: Optional["BaseMonster"] = None, round_delay: float = 1.0
    ) -> None:
        self.monster = monster
        self.round_delay = round_delay

    def execute(self, player: "Player") -> None:
        if self.monster is None:
            print("No monster found to fight.")
            return
        print(f"You chose to fight the {self.monster.name}!")
        CombatManager(player, self.monster, self.round_delay).start_combat()