"""Non-player characters and the prototype registry that makes them."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .player import Player


class BaseNPC(ABC):
    """A character with a name and a line of dialog."""

    def __init__(self, name: str, dialog: str) -> None:
        self.name = name
        self.dialog = dialog

    @abstractmethod
    def interact(self, player: "Player") -> Optional[str]:
        """React to the player."""

    def clone(self) -> "BaseNPC":
        """Return an independent copy of this NPC."""
        return copy.copy(self)

    def set_attributes(self, name: str, dialog: str) -> None:
        self.name = name
        self.dialog = dialog


class DialogNPC(BaseNPC):
    """An NPC that speaks its dialog line."""

    def interact(self, player: "Player") -> str:
        """Speak the dialog line and return what was said."""
        line = f"{self.name}: {self.dialog}"
        print(line)
        return line


_PROTOTYPES: dict[str, BaseNPC] = {}


def register_npc_prototype(type_name: str, prototype: BaseNPC) -> None:
    """Register (or replace) the prototype used for ``type_name``."""
    _PROTOTYPES[type_name] = prototype


def create_npc(type_name: str, name: str, dialog: str) -> Optional[BaseNPC]:
    """Clone the prototype of ``type_name`` with the given name and dialog, or return None."""
    prototype = _PROTOTYPES.get(type_name)
    if prototype is None:
        return None
    npc = prototype.clone()
    npc.set_attributes(name, dialog)
    return npc


register_npc_prototype("DialogNPC", DialogNPC("Prototype DialogNPC", "Default Dialog"))