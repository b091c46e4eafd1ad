"""Global hotkey abstraction: keys, parsing, actions, bindings, modes, chords, remaps and conflicts."""

__version__ = "0.1.0"