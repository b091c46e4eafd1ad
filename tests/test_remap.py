import json

import pytest

from awase.condition import Condition
from awase.hotkey import Hotkey, Modifiers
from awase.keys import Key
from awase.remap import KeyRemap


def test_new_remap():
    remap = KeyRemap(Hotkey(Modifiers.NONE, Key.CAPS_LOCK), Hotkey(Modifiers.NONE, Key.ESCAPE))
    assert remap.condition is None


def test_remap_with_condition():
    remap = KeyRemap(
        Hotkey(Modifiers.FN, Key.H), Hotkey(Modifiers.NONE, Key.LEFT)
    ).with_condition(Condition(app="Terminal"))
    assert remap.condition == Condition(app="Terminal")


def test_serde_roundtrip():
    remap = KeyRemap(Hotkey.parse("caps_lock"), Hotkey.parse("escape"))
    text = json.dumps(remap.to_dict())
    assert KeyRemap.from_dict(json.loads(text)) == remap


def test_serde_roundtrip_with_condition():
    remap = KeyRemap(Hotkey.parse("fn+h"), Hotkey.parse("left")).with_condition(
        Condition(app="Terminal", display=1)
    )
    assert KeyRemap.from_dict(remap.to_dict()) == remap


def test_to_dict_uses_from_key():
    data = KeyRemap(Hotkey.parse("caps_lock"), Hotkey.parse("escape")).to_dict()
    assert data == {
        "from": {"modifiers": 0, "key": "CapsLock"},
        "to": {"modifiers": 0, "key": "Escape"},
    }


def test_from_dict_missing_field():
    with pytest.raises(ValueError):
        KeyRemap.from_dict({"from": {"modifiers": 0, "key": "CapsLock"}})