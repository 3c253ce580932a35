"""Abilities a player can carry, the prototype factory that makes them, and the inventory."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from .player import Player


@dataclass
class Ability:
    """A named effect that can be applied to a player."""

    ability_id: str
    name: str
    description: str
    effect_value: int

    def apply_effect(self, player: "Player") -> None:
        """Change the player's health by the effect value and report it."""
        player.modify_health(self.effect_value)
        print(f"Applied ability: {self.name} with effect value: {self.effect_value}")

    def clone(self) -> "Ability":
        """Return an independent copy of this ability."""
        return copy.copy(self)


@dataclass
class HealthBoostAbility(Ability):
    """Restores health by its effect value."""

    ability_id: str = "health_boost"
    name: str = "Health Boost"
    description: str = "Boost your health by 10"
    effect_value: int = 10

    def apply_effect(self, player: "Player") -> None:
        player.modify_health(self.effect_value)


class AbilityFactory:
    """Creates abilities by cloning registered prototypes."""

    def __init__(self) -> None:
        self._prototypes: dict[str, Ability] = {}

    def register_ability(self, ability_id: str, prototype: Ability) -> None:
        """Register (or replace) the prototype used for ``ability_id``."""
        self._prototypes[ability_id] = prototype

    def create_ability(self, ability_id: str) -> Optional[Ability]:
        """Return a fresh copy of the prototype, or None if none is registered."""
        prototype = self._prototypes.get(ability_id)
        return prototype.clone() if prototype is not None else None


_DEFAULT_FACTORY = AbilityFactory()
_DEFAULT_FACTORY.register_ability(
    "health_boost",
    HealthBoostAbility(
        "health_boost", "Health Boost", "Boosts your health by 10 points", 10
    ),
)


def default_factory() -> AbilityFactory:
    """Return the shared factory holding the game's built-in abilities."""
    return _DEFAULT_FACTORY


class AbilityInventory:
    """An ordered collection of abilities held by a player."""

    def __init__(self) -> None:
        self._abilities: list[Ability] = []

    def __iter__(self) -> Iterator[Ability]:
        return iter(self._abilities)

    def __len__(self) -> int:
        return len(self._abilities)

    def add(self, ability: Ability) -> None:
        self._abilities.append(ability)

    def remove(self, ability_id: str) -> None:
        """Remove every ability with the given id."""
        self._abilities = [a for a in self._abilities if a.ability_id != ability_id]

    def has(self, ability_id: str) -> bool:
        return any(a.ability_id == ability_id for a in self._abilities)

    def get(self, ability_id: str) -> Optional[Ability]:
        """Return the first ability with the given id, or None."""
        return next((a for a in self._abilities if a.ability_id == ability_id), None)

    def display(self) -> None:
        if not self._abilities:
            print("No abilities available.")
            return
        print("Available Abilities:")
        for ability in self._abilities:
            print(f" - {ability.name}: {ability.description}")

    def is_empty(self) -> bool:
        return not self._abilities