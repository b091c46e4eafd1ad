# awase

Platform-agnostic building blocks for global hotkeys. It provides key and
modifier types, a hotkey parser, actions, conditional bindings, modes, two-step
key chords, key remaps and conflict detection. The package registers no hotkeys
with the operating system and listens to no keyboard events. It gives a backend
what it needs to decide what a key press means.

## Installation

```
pip install awase
```

## Parsing hotkeys

Two notations are accepted. Parts are case-insensitive.

```python
from awase.hotkey import Hotkey, Modifiers
from awase.keys import Key

hk = Hotkey.parse("cmd+space")           # plus-separated
same = Hotkey.parse("cmd + alt - h")     # modifiers before " - ", key after

assert hk.key is Key.SPACE
assert hk.modifiers.contains(Modifiers.CMD)
print(hk.display())                      # "cmd+space"
```

The modifier names are `cmd`, `ctrl`, `alt`, `shift`, `fn`, `caps_lock` and
`hyper`. `hyper` stands for cmd, ctrl, alt and shift together. The parser also
accepts aliases such as `command`, `option`, `lcmd`, `ralt` and `capslock`. A
lone `capslock` with no other part is read as the Caps Lock key. Keys have
aliases too, for example `enter`, `esc`, `pgdn`, `kp_enter` and `mouse1`.
`Key.parse(name)` looks up a single key and returns `None` for an unknown name.

`Modifiers` values combine with `|` and `&`. `Modifiers.from_bits()` and
`.bits()` convert to and from the raw bitmask.

## Bindings, modes and matching

```python
from awase.action import Action
from awase.binding import Binding
from awase.chord import KeyChord
from awase.condition import Condition, MatchContext
from awase.hotkey import Hotkey
from awase.mode import BindingMap, KeyMode, Matched
from awase.remap import KeyRemap

bindings = BindingMap()                  # starts with a passthrough "default" mode
bindings.mode("default").add_binding(
    Binding(Hotkey.parse("cmd+h"), Action.command("focus_west")).with_condition(
        Condition(app_exclude="com.apple.Terminal")
    )
)

resize = KeyMode("resize", passthrough=False)
resize.add_binding(Binding(Hotkey.parse("escape"), Action.mode_switch("default")))
bindings.add_mode(resize)

chord = KeyChord(
    leader=Hotkey.parse("ctrl+a"),
    follower=Hotkey.parse("c"),
    timeout_ms=1000,
    action=Action.command("new_window"),
)
bindings.add_chord(chord)
bindings.add_remap(KeyRemap(Hotkey.parse("capslock"), Hotkey.parse("escape")))

ctx = MatchContext(focused_app_bundle_id="com.apple.Safari")
result = bindings.match_key(Hotkey.parse("cmd+h"), ctx)
assert result == Matched(action=Action.command("focus_west"), consume=True)
```

`match_key` first checks remaps. It then checks for the follower of a pending
chord, then for chord leaders, and last for the bindings of the current mode.
It returns one of `Matched`, `ChordPending`, `Remapped` or `NoMatch`. A
pending chord is dropped when its timeout has passed or when the next key is
not its follower. `BindingMap` and `ChordState` take an optional `clock`
callable that returns monotonic seconds, for timing chords.

Condition patterns are case-insensitive substring matches. Alternatives are
separated by `|`. The fields `app`, `app_exclude`, `title` and `display` must
all hold when they are set.

Switch modes with `bindings.set_mode("resize")`. An unknown mode name raises
`ModeNotFoundError`. `current_mode()`, `current_mode_passthrough()`,
`list_bindings()` and `mode_names()` report the map's state.

Actions are built with `Action.command`, `Action.mode_switch`, `Action.exec`,
`Action.script` and `Action.chain`. The package never runs them. Interpreting
an action is left to the caller.

## Conflicts

```python
from awase.conflict import detect_conflicts

report = detect_conflicts([bindings.mode("default"), resize], [chord])
if not report.is_clean():
    for entry in report.conflicts:
        print(entry.mode, entry.hotkey, entry.existing, entry.new)
```

A conflict is reported wherever a chord leader is also bound in a mode.

## Serialisation

`Action`, `Hotkey`, `Condition`, `Binding`, `KeyChord`, `KeyRemap` and
`KeyMode` each have `to_dict()` and `from_dict()`. These produce and accept
plain JSON-compatible structures. `from_dict()` raises `ValueError` on
malformed input.

## Managers

`awase.manager.HotkeyManager` is the abstract interface that a platform
backend implements, with `register(id, hotkey)` and `unregister(id)`.
`NoopManager` only tracks registered ids. Registering an id twice raises
`AlreadyRegisteredError`.

## Errors

All exceptions derive from `awase.errors.AwaseError`. The package raises
`InvalidHotkeyError`, `AlreadyRegisteredError` and `ModeNotFoundError`. It
also defines `DuplicateBindingError`, `PermissionDeniedError` and
`PlatformError` for backends to use.

## macOS tables

`awase.macos.keycode` maps between `Key` and macOS virtual keycodes with
`key_to_keycode` and `keycode_to_key`. `awase.macos.flags` converts between
`Modifiers` and `CGEventFlags` bitmasks with `modifiers_to_cg_flags` and
`cg_flags_to_modifiers`. Both modules are pure data and work on any platform.

## What it does not do

There is no platform backend. Nothing here hooks into the operating system
to capture keys, emit remapped keys or run actions. A program that does any
of that has to provide its own `HotkeyManager` and event handling.