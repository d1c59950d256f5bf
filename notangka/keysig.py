"""Key signatures, modes and the mapping from fifths to a tonal root."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from notangka.musicxml import KeySignature as XMLKeySignature
from notangka.musicxml import Note, NoteAccidental


class KeySignatureMode(IntEnum):
    MAJOR = 0
    MINOR = 1
    DORIAN = 2
    PHRYGIAN = 3

    def __str__(self) -> str:
        return self.name.lower()

    def numbered_root(self) -> str:
        """The solmization syllable that the mode starts from."""
        return ("do", "la", "re", "mi")[int(self)]


_ACCIDENTALS_SET: dict[int, tuple[str, ...]] = {
    7: ("C", "D", "E", "F", "G", "A", "B"),
    6: ("F", "G", "A", "C", "D", "E"),
    5: ("C", "D", "F", "G", "A"),
    4: ("F", "G", "C", "D"),
    3: ("C", "F", "G"),
    2: ("F", "C"),
    1: ("F",),
    0: (),
    -1: ("B",),
    -2: ("B", "E"),
    -3: ("E", "A", "B"),
    -4: ("A", "B", "D", "E"),
    -5: ("D", "E", "G", "A", "B"),
    -6: ("G", "A", "B", "C", "D", "E"),
    -7: ("G", "A", "B", "C", "D", "E"),
}

_MODE_ROOT: dict[str, dict[int, str]] = {
    "major": {
        7: "C#", 6: "F#", 5: "B", 4: "E", 3: "A", 2: "D", 1: "G", 0: "C",
        -1: "F", -2: "Bb", -3: "Eb", -4: "Ab", -5: "Db", -6: "Gb", -7: "Cb",
    },
    "minor": {
        7: "A#", 6: "D#", 5: "G#", 4: "C#", 3: "F#", 2: "B", 1: "E", 0: "A",
        -1: "D", -2: "G", -3: "C", -4: "F", -5: "Bb", -6: "Eb", -7: "Ab",
    },
    "dorian": {
        5: "C#", 4: "F#", 3: "B", 2: "E", 1: "A", 0: "D",
        -1: "G", -2: "C", -3: "F", -4: "Bb", -5: "Eb",
    },
    "phrygian": {
        -5: "F", -4: "C", -3: "G", -2: "D", -1: "A", 0: "E",
        1: "B", 2: "F#", 3: "C#", 4: "G#", 5: "D#", 6: "A#",
    },
}

_MODE_STEPS: dict[str, tuple[float, ...]] = {
    "major": (1, 1, 0.5, 1, 1, 1, 0.5),
    "minor": (1, 0.5, 1, 1, 0.5, 1, 1),
    "dorian": (1, 0.5, 1, 1, 1, 0.5, 1),
    "phrygian": (0.5, 1, 1, 1, 0.5, 1, 1),
}

_MODE_NAMES = {
    "major": KeySignatureMode.MAJOR,
    "minor": KeySignatureMode.MINOR,
    "dorian": KeySignatureMode.DORIAN,
    "phrygian": KeySignatureMode.PHRYGIAN,
}


def spelled_numbered_notation(letter_notation: str) -> str:
    """Spell a lettered pitch the way numbered notation names it (e.g. Bb -> bes)."""
    if letter_notation.endswith("#"):
        return f"{letter_notation[0].lower()}is"
    if letter_notation.endswith("b"):
        first = letter_notation[0]
        if first in ("A", "E"):
            return f"{first.lower()}s"
        return f"{first.lower()}es"
    return letter_notation.lower()


@dataclass
class Mode:
    """A scale mode; the root and humanized name are cached once computed."""

    mode: KeySignatureMode = KeySignatureMode.MAJOR
    cached_root: str = ""
    cached_humanized: str = ""

    def root(self, fifth: int) -> str:
        """The lettered root of this mode for the given circle-of-fifths value."""
        if self.cached_root:
            return self.cached_root
        root = _MODE_ROOT[str(self.mode)].get(fifth, "")
        self.cached_root = root
        return root

    def humanized(self, fifth: int) -> str:
        """A label such as ``do = d``."""
        if self.cached_humanized:
            return self.cached_humanized
        text = f"{self.mode.numbered_root()} = {spelled_numbered_notation(self.root(fifth))}"
        self.cached_humanized = text
        return text

    def scale_steps(self) -> list[float]:
        """Whole/half step sizes between consecutive scale degrees."""
        return list(_MODE_STEPS[str(self.mode)])


def new_mode(name: str) -> Mode:
    """Build a mode from its MusicXML name; unknown or empty names mean major."""
    return Mode(mode=_MODE_NAMES.get(name, KeySignatureMode.MAJOR))


@dataclass
class KeySignature:
    key: str = ""
    mode: Mode = field(default_factory=Mode)
    humanized: str = ""
    fifth: int = 0
    root_pitch: str = ""

    def __str__(self) -> str:
        return self.humanized

    def based_pitch(self) -> str:
        """The lettered pitch of the mode's root."""
        return self.mode.root(self.fifth)

    def lettered(self) -> str:
        """The lettered name of the key."""
        return self.mode.root(self.fifth)

    def pitch_with_accidental(self, note: Note) -> str:
        """The note's step with the accidental implied by the key or written on it."""
        pitch = note.pitch.step
        accidental = ""
        if pitch in _ACCIDENTALS_SET.get(self.fifth, ()):
            if self.fifth > 0:
                accidental = NoteAccidental.SHARP
            elif self.fifth < 0:
                accidental = NoteAccidental.FLAT
        if note.accidental:
            accidental = note.accidental
        try:
            sign = NoteAccidental(accidental).sign()
        except ValueError:
            sign = ""
        return f"{pitch}{sign}"


def new_key_signature(key: XMLKeySignature) -> KeySignature:
    """Build a key signature from a MusicXML ``<key>`` element."""
    mode = new_mode(key.mode or "major")
    fifths = key.fifth
    root = mode.root(fifths)
    return KeySignature(
        key=root,
        mode=mode,
        humanized=mode.humanized(fifths),
        fifth=fifths,
    )