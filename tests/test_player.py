import pytest

from mistgate.abilities import Ability, AbilityFactory
from mistgate.player import Player


def test_defaults():
    player = Player()
    assert player.name == "Player"
    assert player.health == 100
    assert player.mental_strength == 50
    assert player.attack_power == 20
    assert player.money == 100
    assert player.combat_health == player.health


def test_empty_name_is_ignored():
    player = Player(name="Hero")
    player.name = ""
    assert player.name == "Hero"
    player.name = "Ranger"
    assert player.name == "Ranger"


@pytest.mark.parametrize(
    "attr", ["health", "mental_strength", "attack_power", "money", "combat_health"]
)
def test_stats_clamp_to_zero(attr):
    player = Player()
    setattr(player, attr, -5)
    assert getattr(player, attr) == 0


@pytest.mark.parametrize("method, attr", [
    ("modify_health", "health"),
    ("modify_mental_strength", "mental_strength"),
    ("modify_attack_power", "attack_power"),
    ("modify_money", "money"),
    ("modify_combat_health", "combat_health"),
])
def test_modify_adds_and_clamps(method, attr):
    player = Player()
    before = getattr(player, attr)
    getattr(player, method)(7)
    assert getattr(player, attr) == before + 7
    getattr(player, method)(-10_000)
    assert getattr(player, attr) == 0


def test_take_damage_and_defeat():
    player = Player()
    before = player.health
    player.take_damage(30)
    assert player.health == before - 30
    assert not player.is_defeated()
    player.take_damage(before)
    assert player.health == 0
    assert player.is_defeated()


def test_combat_damage_leaves_health_untouched():
    player = Player()
    player.take_combat_damage(player.combat_health)
    assert player.is_combat_defeated()
    assert player.health == 100


def test_defeat_penalty(capsys):
    player = Player()
    health, mental = player.health, player.mental_strength
    player.apply_defeat_penalty()
    assert player.health == health - 10
    assert player.mental_strength == mental - 5
    assert "Health reduced by 10, Mental Strength reduced by 5" in capsys.readouterr().out


def test_add_default_ability(capsys):
    player = Player()
    player.add_ability("health_boost")
    assert player.has_ability("health_boost")
    assert player.get_ability("health_boost").name == "Health Boost"
    assert "Ability (health_boost) has been added to your inventory." in capsys.readouterr().out


def test_add_unknown_ability(capsys):
    player = Player()
    player.add_ability("nothing")
    assert not player.has_ability("nothing")
    assert "Failed to create ability: nothing" in capsys.readouterr().out


def test_custom_factory_and_remove():
    factory = AbilityFactory()
    factory.register_ability("shield", Ability("shield", "Shield", "Blocks", 3))
    player = Player(ability_factory=factory)
    player.add_ability("shield")
    player.add_ability("health_boost")
    assert player.has_ability("shield")
    assert not player.has_ability("health_boost")
    player.remove_ability("shield")
    assert player.get_ability("shield") is None


def test_use_ability_applies_effect(capsys):
    player = Player()
    player.add_ability("health_boost")
    before = player.health
    effect = player.get_ability("health_boost").effect_value
    player.use_ability("health_boost")
    assert player.health == before + effect
    out = capsys.readouterr().out
    assert "Used ability: Health Boost" in out
    assert "Player Status:" in out


def test_use_missing_ability(capsys):
    player = Player()
    before = player.health
    player.use_ability("ghost")
    assert player.health == before
    assert "You do not have the ability: ghost" in capsys.readouterr().out


def test_display_abilities(capsys):
    player = Player()
    player.display_abilities()
    assert "No abilities available." in capsys.readouterr().out
    player.add_ability("health_boost")
    capsys.readouterr()
    player.display_abilities()
    assert " - ID: health_boost, Name: Health Boost" in capsys.readouterr().out


def test_display_status(capsys):
    Player(name="Aria").display_status()
    out = capsys.readouterr().out
    assert "Name: Aria" in out
    assert "Mental Strength: 50" in out