"""The game itself: the main menu, saving and loading, and the walk through the rooms."""

from __future__ import annotations

import argparse
import re
import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Sequence, Union

from .combat import CombatManager
from .event_manager import DEFAULT_EVENTS_PATH, EventManager
from .input import InputManager
from .monsters import BaseMonster
from .player import Player
from .world import Room

DEFAULT_WORLD_MAP_PATH = Path("../resources/worldmap.xml")
DEFAULT_SAVE_DIR = Path("save")

_SEPARATOR = "==========================="
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_HEX_INT = re.compile(r"\s*0[xX]([0-9a-fA-F]+)")


def _leading_int(text: Optional[str]) -> Optional[int]:
    """Parse the integer at the start of ``text``, or return None."""
    if text is None:
        return None
    match = _HEX_INT.match(text)
    if match:
        return int(match.group(1), 16)
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _parse_bool(text: Optional[str]) -> Optional[bool]:
    """Read a boolean written as an integer or as true/false; None if neither."""
    number = _leading_int(text)
    if number is not None:
        return number != 0
    if text in ("true", "True", "TRUE"):
        return True
    if text in ("false", "False", "FALSE"):
        return False
    return None


def load_world_map(path: Union[str, Path]) -> list[Room]:
    """Read the rooms, in file order, from the world map XML at ``path``.

    Returns an empty list, after reporting why, when the file cannot be read
    or holds no <Rooms> element under a <WorldMap> root.
    """
    print(f"Loading world map from: {path}")
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        print(f"Error: Unable to load world map. Error code: {exc}")
        print("Error loading world map from XML file!\n")
        return []

    rooms_element = root.find("Rooms") if root.tag == "WorldMap" else None
    if rooms_element is None:
        print("No rooms found in XML file!\n")
        return []

    rooms = []
    for element in rooms_element.findall("Room"):
        room = Room(
            element.get("id", "Unknown"),
            element.get("name", "Unknown"),
            element.get("description", ""),
            element.get("eventId", ""),
        )
        rooms.append(room)
        print(f"Loaded Room: {room.name}, ID: {room.room_id}, Event ID: {room.event_id}")
    return rooms


class GameManager:
    """Runs a whole game: menu, room-by-room progress, saves and abilities."""

    def __init__(
        self,
        player: Optional[Player] = None,
        input_manager: Optional[InputManager] = None,
        event_manager: Optional[EventManager] = None,
        world_map_path: Union[str, Path] = DEFAULT_WORLD_MAP_PATH,
        save_dir: Union[str, Path] = DEFAULT_SAVE_DIR,
        combat_round_delay: float = 1.0,
    ) -> None:
        self.player = player if player is not None else Player()
        self.input_manager = input_manager if input_manager is not None else InputManager()
        self.event_manager = (
            event_manager
            if event_manager is not None
            else EventManager(DEFAULT_EVENTS_PATH, self.input_manager)
        )
        self.world_map_path = Path(world_map_path)
        self.save_dir = Path(save_dir)
        self.combat_round_delay = combat_round_delay
        self.world_map: list[Room] = load_world_map(self.world_map_path)

    def initialize_game(self) -> None:
        """Reset the player's stats (keeping the name) and reload the world map."""
        print("Initializing game...")
        self.player.health = 100
        self.player.mental_strength = 50
        self.player.attack_power = 20
        self.player.money = 100
        self.world_map = load_world_map(self.world_map_path)

    def start_game(self) -> None:
        """Show the main menu until a game is started or loaded, then play it."""
        while True:
            self.display_message(f"{_SEPARATOR}\n")
            self.display_message("       Text Game Manager      \n")
            self.display_message(f"{_SEPARATOR}\n")
            self.display_message("1. New Game\n")
            self.display_message("2. Load Game\n")
            self.display_message("3. Delete Save File\n")
            self.display_message(f"{_SEPARATOR}\n")
            self.display_message("Select an option (1, 2, or 3): ")
            choice = _leading_int(self.input_manager.get_user_input())

            if choice == 1:
                self.display_message("Starting a new game...\n")
                self.display_message("Enter your player's name: ")
                self.player.name = self.input_manager.get_user_input()
                self.initialize_game()
                self.display_player_status()
                break
            if choice == 2:
                self.display_message("Loading saved game...\n")
                self.display_save_files()
                self.display_message("Enter the save file name to load: ")
                self.load_game(self.input_manager.get_user_input())
                self.display_player_status()
                break
            if choice == 3:
                self.display_message("Deleting a saved file...\n")
                self.display_save_files()
                self.display_message("Enter the save file name to delete: ")
                if self.delete_save_file(self.input_manager.get_user_input()):
                    self.display_message("Save file deleted successfully.\n")
                else:
                    self.display_message("Failed to delete save file. File may not exist.\n")
                continue
            self.display_message("Invalid choice. Please enter 1, 2, or 3.\n")

        self.game_loop()

    def game_loop(self) -> None:
        """Walk through the rooms in order, offering saves and abilities, running events."""
        rooms = self.world_map
        for index, room in enumerate(rooms):
            self.display_message(f"\n{_SEPARATOR}")
            self.display_message(f"\nEntering room: {room.name}\n")

            self.display_message("Would you like to save your progress? (yes/no): ")
            if self.input_manager.get_yes_no_input() == "yes":
                self.display_message("Enter save file name: ")
                self.save_game(self.input_manager.get_user_input())

            self.display_message(
                "Would you like to check and use an ability from your inventory? (yes/no): "
            )
            if self.input_manager.get_yes_no_input() == "yes":
                self.use_ability()

            if room.has_event():
                result = self.event_manager.process_event(room.event_id, self.player)
                if result == "end":
                    self.display_message(f"\n{_SEPARATOR}")
                    self.display_message("Congratulations! You have completed your journey!")
                    self.display_message(f"{_SEPARATOR}\n")
                    return

            room.cleared = True
            self.display_message(f"\nRoom: {room.name} has been cleared.")

            if index + 1 < len(rooms):
                self.display_message(f"\n{_SEPARATOR}")
                self.display_message("\nMoving to the next room...")
                self.player.display_status()

        self.display_message(f"\n{_SEPARATOR}")
        self.display_message("All rooms have been explored.")
        self.display_message("You have completed your journey!")
        self.display_message(f"{_SEPARATOR}\n")

    def display_options(self, options: Sequence[str]) -> None:
        for number, option in enumerate(options, start=1):
            print(f"{number}. {option}")

    def start_combat(self, enemy: BaseMonster) -> None:
        self.display_message(f"Combat started with {enemy.name}!\n")
        CombatManager(self.player, enemy, self.combat_round_delay).start_combat()

    def save_game(self, save_file_name: str) -> None:
        """Write the player's stats and each room's cleared flag to the save directory."""
        save_path = self.save_dir / save_file_name
        root = ET.Element("GameSave")
        ET.SubElement(
            root,
            "PlayerStatus",
            {
                "name": self.player.name,
                "health": str(self.player.health),
                "mentalStrength": str(self.player.mental_strength),
                "attackPower": str(self.player.attack_power),
                "money": str(self.player.money),
            },
        )
        rooms_element = ET.SubElement(root, "Rooms")
        for room in self.world_map:
            ET.SubElement(
                rooms_element,
                "Room",
                {"name": room.name, "cleared": "true" if room.cleared else "false"},
            )
        tree = ET.ElementTree(root)
        ET.indent(tree, space="    ")
        try:
            self.save_dir.mkdir(parents=True, exist_ok=True)
            tree.write(save_path, encoding="utf-8")
        except OSError:
            self.display_message("Error saving game!\n")
            return
        self.display_message(f"Game saved successfully to {save_path}\n")

    def load_game(self, load_file_name: str) -> None:
        """Restore the player's stats and room progress from a save file."""
        load_path = self.save_dir / load_file_name
        try:
            root = ET.parse(load_path).getroot()
        except (OSError, ET.ParseError):
            self.display_message("Failed to load save file. Starting a new game instead...\n")
            return
        if root.tag != "GameSave":
            self.display_message("Invalid save file format. Starting a new game instead...\n")
            return

        status = root.find("PlayerStatus")
        if status is not None:
            self.player.name = status.get("name", "Unknown")
            for attribute, stat in (
                ("health", "health"),
                ("mentalStrength", "mental_strength"),
                ("attackPower", "attack_power"),
                ("money", "money"),
            ):
                value = _leading_int(status.get(attribute))
                if value is not None:
                    setattr(self.player, stat, value)

        rooms_element = root.find("Rooms")
        if rooms_element is not None:
            for element in rooms_element.findall("Room"):
                room_name = element.get("name", "Unknown")
                cleared = _parse_bool(element.get("cleared"))
                if cleared is None:
                    continue
                for room in self.world_map:
                    if room.name == room_name:
                        room.cleared = cleared

        player = self.player
        self.display_message(
            f"Loaded player: {player.name}, Health: {player.health}, "
            f"Mental Strength: {player.mental_strength}, "
            f"Attack Power: {player.attack_power}, Money: {player.money}"
        )

    def display_message(self, message: str) -> None:
        print(message)

    def display_player_status(self) -> None:
        player = self.player
        self.display_message(f"{_SEPARATOR}\n")
        self.display_message("Player Status:\n")
        self.display_message(f"Name: {player.name}\n")
        self.display_message(f"Health: {player.health}\n")
        self.display_message(f"Mental Strength: {player.mental_strength}\n")
        self.display_message(f"Attack Power: {player.attack_power}\n")
        self.display_message(f"Money: {player.money}\n")
        self.display_message(f"{_SEPARATOR}\n")

    def delete_save_file(self, save_file_name: str) -> bool:
        """Delete a save; True if it existed and was removed."""
        save_path = self.save_dir / save_file_name
        try:
            if not save_path.exists():
                return False
            if save_path.is_dir():
                save_path.rmdir()
            else:
                save_path.unlink()
            return True
        except OSError as exc:
            print(f"Error deleting file: {exc}", file=sys.stderr)
            return False

    def display_save_files(self) -> None:
        self.display_message(f"\n{_SEPARATOR}\n")
        self.display_message("     Available Saves     \n")
        self.display_message(f"{_SEPARATOR}\n\n")

        if not self.save_dir.is_dir() or not any(self.save_dir.iterdir()):
            self.display_message("No save files found.\n")
            return

        for entry in sorted(self.save_dir.iterdir()):
            if entry.is_file():
                self.display_message(f"► {entry.name}\n")
        self.display_message(f"\n{_SEPARATOR}\n")

    def use_ability(self) -> None:
        """List the player's abilities and use the one named at the prompt."""
        self.player.display_abilities()
        print("Enter the ability ID to use: ", end="")
        self.player.use_ability(self.input_manager.get_user_input())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game from the command line."""
    parser = argparse.ArgumentParser(description="Play the text adventure.")
    parser.add_argument("--world", default=str(DEFAULT_WORLD_MAP_PATH), help="world map XML file")
    parser.add_argument("--events", default=str(DEFAULT_EVENTS_PATH), help="events XML file")
    parser.add_argument("--saves", default=str(DEFAULT_SAVE_DIR), help="save directory")
    args = parser.parse_args(argv)

    input_manager = InputManager()
    game = GameManager(
        input_manager=input_manager,
        event_manager=EventManager(args.events, input_manager),
        world_map_path=args.world,
        save_dir=args.saves,
    )
    game.initialize_game()
    try:
        game.start_game()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())