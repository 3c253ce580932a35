import pytest

from mistgate.npcs import BaseNPC, DialogNPC, create_npc, register_npc_prototype
from mistgate.player import Player


def test_dialog_npc_interact_prints_name_and_dialog(capsys):
    npc = DialogNPC("Hermit", "Beware the mist.")
    npc.interact(Player())
    assert capsys.readouterr().out == "Hermit: Beware the mist.\n"


def test_base_npc_is_abstract():
    with pytest.raises(TypeError):
        BaseNPC("x", "y")


def test_set_attributes_replaces_name_and_dialog():
    npc = DialogNPC("a", "b")
    npc.set_attributes("Guide", "Follow me.")
    assert (npc.name, npc.dialog) == ("Guide", "Follow me.")


def test_clone_is_independent():
    npc = DialogNPC("Guide", "Hello")
    twin = npc.clone()
    twin.set_attributes("Other", "Bye")
    assert (npc.name, npc.dialog) == ("Guide", "Hello")
    assert isinstance(twin, DialogNPC)


def test_create_npc_uses_registered_dialog_prototype():
    npc = create_npc("DialogNPC", "Elder", "Welcome, traveller.")
    assert isinstance(npc, DialogNPC)
    assert npc.name == "Elder"
    assert npc.dialog == "Welcome, traveller."


def test_create_npc_unknown_type_returns_none():
    assert create_npc("NoSuchNPC", "x", "y") is None


def test_created_npcs_do_not_share_state():
    first = create_npc("DialogNPC", "One", "first")
    second = create_npc("DialogNPC", "Two", "second")
    assert first is not second
    assert first.name == "One"
    assert second.dialog == "second"


def test_register_custom_prototype():
    prototype = DialogNPC("Prototype Custom", "Default Dialog")
    register_npc_prototype("CustomNPCForTest", prototype)
    npc = create_npc("CustomNPCForTest", "Smith", "Need a blade?")
    assert npc.name == "Smith"
    assert prototype.name == "Prototype Custom"