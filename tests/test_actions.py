from mistgate.actions import (
    ClimbWallAction,
    ContinueAction,
    FightAction,
    GetPotionAction,
    RunAwayAction,
)
from mistgate.monsters import Goblin
from mistgate.player import Player


def test_climb_wall_costs_five_health():
    player = Player(health=100)
    ClimbWallAction().execute(player)
    assert player.health == 100 - 5


def test_climb_wall_clamps_at_zero():
    player = Player(health=3)
    ClimbWallAction().execute(player)
    assert player.health == 0


def test_run_away_costs_mental_strength():
    player = Player(mental_strength=50)
    RunAwayAction().execute(player)
    assert player.mental_strength == 50 - 10


def test_continue_changes_nothing(capsys):
    player = Player()
    ContinueAction().execute(player)
    assert "You continue forward through the mist..." in capsys.readouterr().out
    assert player.health == 100
    assert player.mental_strength == 50


def test_get_potion_adds_health_boost():
    player = Player()
    GetPotionAction().execute(player)
    assert player.has_ability("health_boost")


def test_fight_without_monster(capsys):
    player = Player()
    FightAction().execute(player)
    assert "No monster found to fight." in capsys.readouterr().out
    assert player.health == 100


def test_fight_defeats_monster():
    player = Player(attack_power=20)
    goblin = Goblin("g", 30, 5)
    FightAction(goblin, round_delay=0).execute(player)
    assert goblin.is_combat_defeated()
    assert player.combat_health == player.health