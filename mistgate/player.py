"""The player character and its stats."""

from __future__ import annotations

from typing import Optional

from .abilities import Ability, AbilityFactory, AbilityInventory, default_factory


def _non_negative(value: int) -> int:
    return value if value >= 0 else 0


class Player:
    """Holds a player's stats, combat health and abilities.

    Every stat is clamped to zero on assignment; an empty name is ignored.
    """

    def __init__(
        self,
        name: str = "Player",
        health: int = 100,
        mental_strength: int = 50,
        attack_power: int = 20,
        money: int = 100,
        ability_factory: Optional[AbilityFactory] = None,
    ) -> None:
        self._name = name
        self._health = health
        self._mental_strength = mental_strength
        self._attack_power = attack_power
        self._money = money
        self._combat_health = health
        self.abilities = AbilityInventory()
        self._factory = ability_factory if ability_factory is not None else default_factory()

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if value:
            self._name = value

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        self._health = _non_negative(value)

    @property
    def mental_strength(self) -> int:
        return self._mental_strength

    @mental_strength.setter
    def mental_strength(self, value: int) -> None:
        self._mental_strength = _non_negative(value)

    @property
    def attack_power(self) -> int:
        return self._attack_power

    @attack_power.setter
    def attack_power(self, value: int) -> None:
        self._attack_power = _non_negative(value)

    @property
    def money(self) -> int:
        return self._money

    @money.setter
    def money(self, value: int) -> None:
        self._money = _non_negative(value)

    @property
    def combat_health(self) -> int:
        return self._combat_health

    @combat_health.setter
    def combat_health(self, value: int) -> None:
        self._combat_health = _non_negative(value)

    def modify_health(self, amount: int) -> None:
        self.health = self.health + amount

    def modify_mental_strength(self, amount: int) -> None:
        self.mental_strength = self.mental_strength + amount

    def modify_attack_power(self, amount: int) -> None:
        self.attack_power = self.attack_power + amount

    def modify_money(self, amount: int) -> None:
        self.money = self.money + amount

    def modify_combat_health(self, amount: int) -> None:
        self.combat_health = self.combat_health + amount

    def is_combat_defeated(self) -> bool:
        return self.combat_health <= 0

    def take_combat_damage(self, damage: int) -> None:
        self.modify_combat_health(-damage)

    def is_defeated(self) -> bool:
        return self.health <= 0

    def take_damage(self, damage: int) -> None:
        self.modify_health(-damage)

    def apply_defeat_penalty(self) -> None:
        """Reduce health by 10 and mental strength by 5 after a lost fight."""
        health_penalty = 10
        mental_strength_penalty = 5
        self.modify_health(-health_penalty)
        self.modify_mental_strength(-mental_strength_penalty)
        print(
            f"You have been defeated. Health reduced by {health_penalty}, "
            f"Mental Strength reduced by {mental_strength_penalty}."
        )

    def add_ability(self, ability_id: str) -> None:
        """Create the ability from the factory and put it in the inventory."""
        ability = self._factory.create_ability(ability_id)
        if ability is None:
            print(f"Failed to create ability: {ability_id}")
            return
        self.abilities.add(ability)
        print(f"Ability ({ability_id}) has been added to your inventory.")

    def remove_ability(self, ability_id: str) -> None:
        self.abilities.remove(ability_id)

    def has_ability(self, ability_id: str) -> bool:
        return self.abilities.has(ability_id)

    def get_ability(self, ability_id: str) -> Optional[Ability]:
        return self.abilities.get(ability_id)

    def use_ability(self, ability_id: str) -> None:
        """Apply a held ability to this player and show the new status."""
        ability = self.get_ability(ability_id)
        if ability is None:
            print(f"You do not have the ability: {ability_id}")
            return
        ability.apply_effect(self)
        print(f"Used ability: {ability.name}")
        self.display_status()

    def display_abilities(self) -> None:
        if self.abilities.is_empty():
            print("No abilities available.")
            return
        print("Available Abilities:")
        for ability in self.abilities:
            print(
                f" - ID: {ability.ability_id}, Name: {ability.name}, "
                f"Description: {ability.description}"
            )

    def _status_text(self) -> str:
        lines = [
            "Player Status:",
            f"Name: {self.name}",
            f"Health: {self.health}",
            f"Mental Strength: {self.mental_strength}",
            f"Attack Power: {self.attack_power}",
            f"Money: {self.money}",
            "-" * 36,
        ]
        return "\n".join(lines)

    def display_status(self) -> str:
        """Print the player's stats and return the printed text."""
        text = self._status_text()
        print(text)
        return text