import pytest

from notangka.keysig import (
    KeySignature,
    KeySignatureMode,
    Mode,
    new_key_signature,
    new_mode,
    spelled_numbered_notation,
)
from notangka.musicxml import KeySignature as XMLKeySignature
from notangka.musicxml import Note, NoteAccidental, Pitch


def test_new_key_signature_defaults_to_c_major():
    got = new_key_signature(XMLKeySignature())
    assert got == KeySignature(
        key="C",
        mode=Mode(mode=KeySignatureMode.MAJOR, cached_root="C", cached_humanized="do = c"),
        humanized="do = c",
    )


def test_new_key_signature_a_minor():
    got = new_key_signature(XMLKeySignature(mode="minor"))
    assert got == KeySignature(
        key="A",
        mode=Mode(mode=KeySignatureMode.MINOR, cached_root="A", cached_humanized="la = a"),
        humanized="la = a",
    )


@pytest.mark.parametrize(
    "fifth, step, accidental, want",
    [
        (0, "C", "", "C"),
        (0, "C", NoteAccidental.SHARP, "C#"),
        (2, "F", "", "F#"),
        (-2, "E", "", "Eb"),
    ],
)
def test_pitch_with_accidental(fifth, step, accidental, want):
    ks = KeySignature(fifth=fifth)
    note = Note(pitch=Pitch(step=step, octave=4), accidental=accidental)
    assert ks.pitch_with_accidental(note) == want


def test_natural_cancels_key_accidental():
    ks = KeySignature(fifth=2)
    note = Note(pitch=Pitch(step="C", octave=5), accidental=NoteAccidental.NATURAL)
    assert ks.pitch_with_accidental(note) == "C"


def test_str_is_humanized():
    ks = new_key_signature(XMLKeySignature(fifth=2))
    assert str(ks) == "do = d"


@pytest.mark.parametrize(
    "fifth, mode, want",
    [
        (0, "", "C"),
        (2, "", "D"),
        (0, "minor", "A"),
        (2, "minor", "B"),
        (0, "dorian", "D"),
        (2, "dorian", "E"),
    ],
)
def test_based_pitch_and_lettered(fifth, mode, want):
    ks = new_key_signature(XMLKeySignature(fifth=fifth, mode=mode))
    assert ks.based_pitch() == want
    assert ks.lettered() == want


def test_mode_humanized_minor():
    assert new_mode("minor").humanized(0) == "la = a"


def test_mode_humanized_f_major():
    assert new_mode("").humanized(-1) == "do = f"


def test_mode_humanized_uses_cache():
    assert Mode(cached_humanized="do = d").humanized(2) == "do = d"


def test_mode_root_is_cached():
    mode = new_mode("major")
    assert mode.root(2) == "D"
    assert mode.root(-1) == "D"


def test_mode_scale_steps_major():
    assert new_mode("major").scale_steps() == [1, 1, 0.5, 1, 1, 1, 0.5]


def test_unknown_mode_is_major():
    assert new_mode("lydian").mode is KeySignatureMode.MAJOR


def test_mode_names_and_roots():
    assert str(KeySignatureMode.PHRYGIAN) == "phrygian"
    assert KeySignatureMode.DORIAN.numbered_root() == "re"


@pytest.mark.parametrize(
    "letter, want",
    [
        ("C", "c"),
        ("C#", "cis"),
        ("Db", "des"),
        ("D", "d"),
        ("D#", "dis"),
        ("Eb", "es"),
        ("E", "e"),
        ("F", "f"),
        ("F#", "fis"),
        ("Gb", "ges"),
        ("G", "g"),
        ("G#", "gis"),
        ("Ab", "as"),
        ("A", "a"),
        ("A#", "ais"),
        ("Bb", "bes"),
    ],
)
def test_spelled_numbered_notation(letter, want):
    assert spelled_numbered_notation(letter) == want