import json

import pytest

from awase.condition import Condition, MatchContext


def ctx(app=None, title=None, display=0):
    return MatchContext(
        focused_app_bundle_id=app,
        focused_window_title=title,
        display_index=display,
    )


def test_empty_condition_matches_everything():
    c = Condition()
    assert c.matches(ctx("com.apple.Safari", "Google", 0))
    assert c.matches(ctx(None, None, 5))


def test_app_include_match():
    c = Condition(app="com.apple.Safari")
    assert c.matches(ctx("com.apple.Safari"))
    assert not c.matches(ctx("com.mitchellh.ghostty"))


def test_app_include_no_app_fails():
    c = Condition(app="com.apple.Safari")
    assert not c.matches(ctx())


def test_app_exclude_match():
    c = Condition(app_exclude="com.apple.Terminal|com.mitchellh.ghostty")
    assert not c.matches(ctx("com.apple.Terminal"))
    assert not c.matches(ctx("com.mitchellh.ghostty"))
    assert c.matches(ctx("com.apple.Safari"))


def test_app_exclude_no_app_passes():
    c = Condition(app_exclude="com.apple.Terminal")
    assert c.matches(ctx())


def test_title_match():
    c = Condition(title="Untitled")
    assert c.matches(ctx(title="Untitled Document"))
    assert not c.matches(ctx(title="My File"))
    assert not c.matches(ctx())


def test_display_match():
    c = Condition(display=1)
    assert c.matches(ctx(display=1))
    assert not c.matches(ctx(display=0))


def test_combined_conditions():
    c = Condition(app="Safari", title="Google", display=0)
    assert c.matches(ctx("com.apple.Safari", "Google Search", 0))
    assert not c.matches(ctx("com.apple.Safari", "Google Search", 1))
    assert not c.matches(ctx("com.apple.Safari", "Yahoo", 0))
    assert not c.matches(ctx("com.mitchellh.ghostty", "Google Search", 0))


def test_pattern_pipe_alternatives():
    c = Condition(app="Safari|Chrome|Firefox")
    assert c.matches(ctx("com.apple.Safari"))
    assert c.matches(ctx("com.google.Chrome"))
    assert c.matches(ctx("org.mozilla.Firefox"))
    assert not c.matches(ctx("com.mitchellh.ghostty"))


def test_pattern_alternatives_are_trimmed():
    c = Condition(app="Safari | Chrome")
    assert c.matches(ctx("com.google.Chrome"))


def test_case_insensitive_matching():
    c = Condition(app="safari")
    assert c.matches(ctx("com.apple.Safari"))


def test_match_context_defaults():
    context = MatchContext()
    assert context.focused_app_bundle_id is None
    assert context.focused_window_title is None
    assert context.display_index == 0


def test_serde_roundtrip():
    c = Condition(app="Safari", app_exclude=None, title="test", display=1)
    text = json.dumps(c.to_dict())
    assert Condition.from_dict(json.loads(text)) == c


def test_serde_skips_none_fields():
    c = Condition(app="test")
    text = json.dumps(c.to_dict())
    assert "app_exclude" not in text
    assert "title" not in text
    assert "display" not in text
    assert c.to_dict() == {"app": "test"}


def test_from_dict_missing_fields_are_none():
    assert Condition.from_dict({}) == Condition()


def test_from_dict_rejects_bad_display():
    with pytest.raises(ValueError, match="display"):
        Condition.from_dict({"display": -1})


def test_from_dict_rejects_non_string_app():
    with pytest.raises(ValueError, match="app"):
        Condition.from_dict({"app": 3})