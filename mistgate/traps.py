"""Traps that may injure the player, and the prototype registry that makes them."""

from __future__ import annotations

import copy
import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from .player import Player


class _Roller(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class BaseTrap(ABC):
    """A trap with a name and the damage it deals.

    ``avoid_chance`` is the percentage chance (out of 100) that the player
    escapes it; ``rng`` supplies the roll and defaults to the system source.
    """

    avoid_chance: int = 0

    def __init__(self, name: str, damage: int, rng: Optional[_Roller] = None) -> None:
        self.name = name
        self.damage = damage
        self._rng: _Roller = rng if rng is not None else random.SystemRandom()

    @abstractmethod
    def trigger(self, player: "Player") -> None:
        """Spring the trap on the player."""

    def clone(self) -> "BaseTrap":
        """Return an independent copy of this trap."""
        return copy.copy(self)

    def set_attributes(self, name: str, damage: int) -> None:
        self.name = name
        self.damage = damage

    def can_avoid(self) -> bool:
        """Roll 1-100; the trap is avoided when the roll is within the avoid chance."""
        return self._rng.randint(1, 100) <= self.avoid_chance


class PitfallTrap(BaseTrap):
    """A hidden pit; avoided 20% of the time."""

    avoid_chance = 20

    def trigger(self, player: "Player") -> None:
        if self.can_avoid():
            print(f"{self.name} Successfully avoided the")
            return
        print(f"{self.name}you fall into a pitfall! {self.damage} fall damage")
        player.take_damage(self.damage)


class PoisonGasTrap(BaseTrap):
    """A burst of poisonous gas; avoided 30% of the time."""

    avoid_chance = 30

    def trigger(self, player: "Player") -> None:
        if self.can_avoid():
            print(f"Successfully avoided the {self.name}!")
            return
        print(
            f"{self.name} trap has been triggered! "
            f"Taking {self.damage} poison damage."
        )
        player.take_damage(self.damage)


_PROTOTYPES: dict[str, BaseTrap] = {}


def register_trap_prototype(type_name: str, prototype: BaseTrap) -> None:
    """Register (or replace) the prototype used for ``type_name``."""
    _PROTOTYPES[type_name] = prototype


def create_trap(type_name: str, name: str, damage: int) -> Optional[BaseTrap]:
    """Clone the prototype of ``type_name`` with the given name and damage, or return None."""
    prototype = _PROTOTYPES.get(type_name)
    if prototype is None:
        return None
    trap = prototype.clone()
    trap.set_attributes(name, damage)
    return trap