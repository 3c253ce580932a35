"""Monsters the player can fight, and the prototype registry that makes them."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .player import Player


class BaseMonster(ABC):
    """A monster with a name, health and attack power."""

    def __init__(self, name: str, health: int, attack_power: int) -> None:
        self.name = name
        self.health = health
        self.attack_power = attack_power

    @abstractmethod
    def attack(self, player: "Player") -> None:
        """Strike the player outside of a combat round."""

    def clone(self) -> "BaseMonster":
        """Return an independent copy of this monster."""
        return copy.copy(self)

    def is_combat_defeated(self) -> bool:
        return self.health <= 0

    def take_combat_damage(self, damage: int) -> None:
        self.health = max(self.health - damage, 0)

    def set_attributes(self, name: str, health: int, attack_power: int) -> None:
        self.name = name
        self.health = health
        self.attack_power = attack_power

    def display_status(self) -> str:
        """Print the monster's stats and return the printed line."""
        text = (
            f"Monster: {self.name}, Health: {self.health}, "
            f"Attack Power: {self.attack_power}"
        )
        print(text)
        return text


class Dragon(BaseMonster):
    """A fire-breathing monster."""

    def attack(self, player: "Player") -> None:
        print(f"{self.name} breathes fire at the player!")
        player.take_damage(self.attack_power)


class Goblin(BaseMonster):
    """A dagger-wielding monster; always named "Goblin" when constructed."""

    def __init__(self, name: str, health: int, attack_power: int) -> None:
        super().__init__("Goblin", health, attack_power)

    def attack(self, player: "Player") -> None:
        print("Goblin strikes the player with a dagger!")
        player.take_damage(self.attack_power)


_PROTOTYPES: dict[str, BaseMonster] = {}


def register_monster_prototype(type_name: str, prototype: BaseMonster) -> None:
    """Register (or replace) the prototype used for ``type_name``."""
    _PROTOTYPES[type_name] = prototype


def create_monster(
    type_name: str, name: str, health: int, attack_power: int
) -> Optional[BaseMonster]:
    """Clone the prototype of ``type_name`` with the given stats, or return None."""
    prototype = _PROTOTYPES.get(type_name)
    if prototype is None:
        return None
    monster = prototype.clone()
    monster.set_attributes(name, health, attack_power)
    return monster


for _cls in (Dragon, Goblin):
    register_monster_prototype(_cls.__name__, _cls(f"Prototype {_cls.__name__}", 100, 20))