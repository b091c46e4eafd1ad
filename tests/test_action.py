import json

import pytest

from awase.action import Action, ActionKind


def test_command_action():
    a = Action.command("window_focus_west")
    assert a == Action(ActionKind.COMMAND, "window_focus_west")


def test_mode_switch_action():
    a = Action.mode_switch("resize")
    assert a.is_mode_switch()
    assert a == Action(ActionKind.MODE_SWITCH, "resize")


def test_exec_action():
    a = Action.exec("open -a Terminal")
    assert a == Action(ActionKind.EXEC, "open -a Terminal")


def test_script_action():
    a = Action.script('focus_window("west")')
    assert not a.is_mode_switch()
    assert a.kind is ActionKind.SCRIPT


def test_chain_action():
    a = Action.chain([Action.command("window_focus_west"), Action.mode_switch("default")])
    assert a.kind is ActionKind.CHAIN
    assert len(a.value) == 2
    assert a.value[1] == Action.mode_switch("default")


def test_chain_is_hashable_and_equal():
    a = Action.chain([Action.command("a"), Action.command("b")])
    b = Action.chain((Action.command("a"), Action.command("b")))
    assert a == b
    assert hash(a) == hash(b)


@pytest.mark.parametrize(
    "action",
    [
        Action.command("test"),
        Action.mode_switch("resize"),
        Action.exec("echo hello"),
        Action.script("1 + 2"),
        Action.chain([Action.command("a"), Action.command("b")]),
    ],
)
def test_serde_roundtrip(action):
    text = json.dumps(action.to_dict())
    assert Action.from_dict(json.loads(text)) == action


def test_serialized_form():
    assert Action.command("test").to_dict() == {"Command": "test"}
    assert Action.chain([Action.mode_switch("x")]).to_dict() == {
        "Chain": [{"ModeSwitch": "x"}]
    }


def test_from_dict_unknown_variant():
    with pytest.raises(ValueError):
        Action.from_dict({"Bogus": "x"})


def test_from_dict_wrong_payload():
    with pytest.raises(ValueError):
        Action.from_dict({"Command": 3})
    with pytest.raises(ValueError):
        Action.from_dict({"Chain": "a"})


def test_from_dict_multiple_tags():
    with pytest.raises(ValueError):
        Action.from_dict({"Command": "a", "Exec": "b"})


def test_constructor_rejects_bad_value():
    with pytest.raises(TypeError):
        Action(ActionKind.COMMAND, ["x"])