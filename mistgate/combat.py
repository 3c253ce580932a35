"""Turn-based combat between the player and a single monster."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .monsters import BaseMonster
    from .player import Player


class CombatManager:
    """Runs a fight in which the player and the monster trade blows until one falls.

    ``round_delay`` is the pause, in seconds, between full rounds.
    """

    def __init__(
        self,
        player: "Player",
        monster: Optional["BaseMonster"],
        round_delay: float = 1.0,
    ) -> None:
        self.player = player
        self.monster = monster
        self.round_delay = round_delay

    def start_combat(self) -> None:
        """Show both sides, reset the player's combat health and fight it out."""
        if self.monster is None:
            print("No monster to fight!")
            return
        print(f"Combat with {self.monster.name} started!")
        self.player.display_status()
        self.monster.display_status()
        self.player.combat_health = self.player.health
        self._combat_loop()

    def _combat_loop(self) -> None:
        player, monster = self.player, self.monster
        assert monster is not None
        while not player.is_combat_defeated() and not monster.is_combat_defeated():
            self._player_attack()
            self._display_combat_status()
            if monster.is_combat_defeated():
                print(f"You have defeated the {monster.name}!")
                break

            self._monster_attack()
            self._display_combat_status()
            if player.is_combat_defeated():
                print(f"You have been defeated by the {monster.name}!")
                player.apply_defeat_penalty()
                break

            if self.round_delay > 0:
                time.sleep(self.round_delay)
            print("------------------------------------")

        player.combat_health = player.health
        if monster.is_combat_defeated():
            print("The monster has been defeated.")

    def _player_attack(self) -> None:
        damage = self.player.attack_power
        self.monster.take_combat_damage(damage)
        print(f"You attack the {self.monster.name} for {damage} damage.")

    def _monster_attack(self) -> None:
        damage = self.monster.attack_power
        self.player.take_combat_damage(damage)
        print(f"{self.monster.name} attacks you for {damage} damage.")

    def _display_combat_status(self) -> str:
        text = (
            f"Player Combat Health: {self.player.combat_health} "
            f"| Monster Health: {self.monster.health}"
        )
        print(text)
        return text