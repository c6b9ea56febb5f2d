"""Key chord parsing for the form's keyboard model."""

from __future__ import annotations

Chord = str

# Canonical modifier letters, in the order they appear in a chord.
MODIFIER_ORDER = "CMS"
MODIFIERS = {"c": "C", "ctrl": "C", "m": "M", "alt": "M", "s": "S", "shift": "S"}
KEY_ALIASES = {"esc": "escape", "ret": "enter", "return": "enter"}


def parse_chord(token: str) -> Chord:
    """Parse user or UI input into a canonical chord such as ``S-tab``."""
    *raw_mods, base = token.strip().split("-")
    if not base:
        raise ValueError(f"missing key in chord: {token!r}")

    held: set[str] = set()
    for raw in raw_mods:
        mod = MODIFIERS.get(raw.lower())
        if mod is None:
            raise ValueError(f"unknown key modifier: {raw!r}")
        held.add(mod)

    key = KEY_ALIASES.get(base.lower(), base.lower())
    return "-".join([*(mod for mod in MODIFIER_ORDER if mod in held), key])


def split_chord(chord: Chord) -> tuple[tuple[str, ...], str]:
    """Return the modifiers and base key of a canonical chord."""
    *modifiers, key = chord.split("-")
    return tuple(modifiers), key


def is_plain(chord: Chord, key: str) -> bool:
    """True when CHORD is KEY pressed with no modifiers held."""
    return chord == key
