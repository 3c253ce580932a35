# mistgate

A small console text adventure. You walk through a series of rooms that are
read from an XML world map. A room can hold an event with choices. A choice
may start a fight with a monster, set off a trap, give you a potion, or cost
you some mental strength as you run away. Your progress can be saved to XML
files and loaded again later.

## Installing

```
pip install .
```

## Playing

```
mistgate
```

The command accepts three options:

- `--world PATH`: the world map file (default `../resources/worldmap.xml`).
- `--events PATH`: the events file (default `../resources/events.xml`).
- `--saves DIR`: the directory that holds save files (default `save`).

The main menu offers three options:

1. **New Game**: enter a name, reset your stats and start in the first room.
2. **Load Game**: list the files in the save directory and load one of them.
3. **Delete Save File**: remove a file from the save directory and return
   to the menu.

Before each room you are asked whether to save and whether to use an ability
from your inventory. Answer `y`/`yes` or `n`/`no` in any case. When an event
shows its choices, type the full choice id or just its first letter. If an
event leads to `end`, the journey is over. Once the input runs out (end of
file) or you press Ctrl-C, the game stops quietly.

## Data files

The package does not ship a world map or an events file. You must supply
your own, either at the default paths or with `--world` and `--events`.

- World map: a `<WorldMap>` root with a `<Rooms>` list of `<Room>`
  elements. Each has `id`, `name`, `description` and `eventId` attributes.
  Rooms are visited in file order.
- Events: an `<Events>` root with `<Event id="...">` elements. Each
  holds a `<name>` and a `<description>`, an optional
  `<Monster type="Dragon|Goblin" name= health= attackPower=>`, and
  `<Choices>` of `<Choice id= description= nextEventId=>`. The choice
  id decides what happens:
  - `fight` fights the event's monster.
  - `run` costs 10 mental strength.
  - `get potion` adds a Health Boost ability.
  - Any other id simply moves on.

  A choice may hold a `<Trap type="PoisonGasTrap|PitfallTrap" damage=>`,
  which springs before the action.

  Events are loaded when they are first needed and cached after that. Events
  whose id contains `NPC` run straight on into their next event. The chain
  stops at `event3`.

A save file is a `<GameSave>` document. It holds the player's stats in a
`<PlayerStatus>` element and each room's `cleared` flag under `<Rooms>`.

## Using it as a library

The pieces can be used on their own:

```python
from mistgate.player import Player
from mistgate.monsters import create_monster
from mistgate.combat import CombatManager

hero = Player(name="Ari")
goblin = create_monster("Goblin", "Sneaky", 40, 5)
CombatManager(hero, goblin, round_delay=0).start_combat()
print(hero.health, goblin.health)
```

The modules are:

- `mistgate.player`: `Player`. All stats are clamped at zero. It also
  covers combat health and abilities.
- `mistgate.abilities`: `Ability`, `HealthBoostAbility`, `AbilityInventory`,
  and `AbilityFactory` with `default_factory()`. The default factory knows
  `health_boost`.
- `mistgate.monsters`: `BaseMonster`, `Dragon`, `Goblin`, `create_monster`
  and `register_monster_prototype`. `Dragon` and `Goblin` are registered.
- `mistgate.traps`: `BaseTrap`, `PitfallTrap` (20% chance to avoid),
  `PoisonGasTrap` (30% chance to avoid), `create_trap` and
  `register_trap_prototype`. No trap prototypes are registered by default.
  A trap takes an optional `rng` that has a `randint` method.
- `mistgate.npcs`: `BaseNPC`, `DialogNPC`, `create_npc` and
  `register_npc_prototype`. `DialogNPC` is registered.
- `mistgate.world`: `Room` and `WorldMap`.
- `mistgate.actions`: `Action`, `ClimbWallAction`, `ContinueAction`,
  `RunAwayAction`, `GetPotionAction` and `FightAction`.
- `mistgate.events`: `Choice` and `Event`.
- `mistgate.input`: `InputManager`, which reads trimmed, non-empty lines
  from any text stream. Also `InputDecorator` and `preprocess_input`.
- `mistgate.combat`: `CombatManager`.
- `mistgate.event_manager`: `load_event` and `EventManager`.
- `mistgate.game`: `load_world_map`, `GameManager` and `main`.

## What it does not do

- NPCs can be created and made to speak, but no event file setting places
  an NPC in an event.
- `WorldMap` has no real notion of adjacency: every other room counts as
  adjacent. The game itself walks the rooms in order.
- Abilities are not written to save files, so they are lost on load.

## Running the tests

```
pip install .[test]
pytest
```