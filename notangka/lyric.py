"""Lyric widths and the preparation of lyrics under a note."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

from notangka.entity import LOWERCASE_LENGTH, UPPERCASE_LENGTH, Coordinate, NoteRenderer
from notangka.entity import Lyric as RenderLyric
from notangka.entity import Text
from notangka.musicxml import LyricSyllabic, Note


def _glyphs(chars: str, widths: tuple[float, ...]) -> dict[str, float]:
    if len(chars) != len(widths):
        raise ValueError("every glyph needs exactly one width")
    return dict(zip(chars, widths))


# advance widths of the Caladea font, in layout units
_CALADEA_WIDTH: dict[str, float] = {
    **_glyphs(
        "ABCDEFGHIJKLM",
        (9.59, 9.27, 8.1, 10, 8.65, 8.15, 8.63, 11.15, 5.49, 4.99, 10.08, 8.02, 14.21),
    ),
    **_glyphs(
        "NOPQRSTUVWXYZ",
        (11.09, 9.59, 8.53, 9.59, 9.81, 7.25, 8.92, 11, 9.57, 14.23, 9.95, 8.92, 8.11),
    ),
    **_glyphs(
        "abcdefghijklm",
        (7.52, 8.32, 6.74, 8.32, 7.06, 5.87, 7.35, 8.86, 4.44, 4.76, 8.43, 4.34, 13.01),
    ),
    **_glyphs(
        "nopqrstuvwxyz",
        (8.94, 7.69, 8.32, 8.02, 6.34, 6.28, 5.21, 8.74, 8.08, 12.08, 7.78, 8.18, 6.85),
    ),
    **_glyphs("0123456789", (8.57, 9.28, 7.55, 7.43, 8.57, 7.61, 7.53, 7.53, 8, 7.65)),
    **_glyphs(",'.!; -", (3.28, 3.28, 3.3, 4.58, 4.23, 4, 5.27)),
}

_NUMBERED_LYRIC = re.compile(r"^[0-9]*\.[\t\n\f\r ]?")

_LYRIC_PADDING = 4
_LINE_SPACING = 25


@dataclass
class VerseInfo:
    margin_bottom: int = 0


@dataclass
class LyricPosition:
    coordinate: Coordinate = field(default_factory=Coordinate)
    lyrics: RenderLyric = field(default_factory=RenderLyric)


def lyric_width(text: str) -> float:
    """Rendered width of the text; characters without a known width count as zero."""
    total = 0.0
    for char in text:
        total += _CALADEA_WIDTH.get(char, 0.0)
    return total


def _round(value: float) -> int:
    """Round half away from zero."""
    magnitude = int(math.floor(abs(value) + 0.5))
    return magnitude if value >= 0 else -magnitude


def _slot_width(lyric: RenderLyric) -> int:
    width = _round(lyric_width("".join(t.value for t in lyric.text)))
    if lyric.syllabic in (LyricSyllabic.END, LyricSyllabic.SINGLE):
        width += LOWERCASE_LENGTH
    return width + _LYRIC_PADDING


def set_lyric_renderer(note_renderer: NoteRenderer, note: Note) -> VerseInfo:
    """Copy the note's lyrics into the renderer and size the note slot to fit them."""
    widest = 0
    margin_bottom = 0

    if note.lyrics:
        margin_bottom = (len(note.lyrics) - 1) * _LINE_SPACING
        note_renderer.lyrics = [
            RenderLyric(
                text=[Text(value=part.value, underline=part.underline) for part in lyric.text],
                syllabic=lyric.syllabic,
            )
            for lyric in note.lyrics
        ]
        widest = max(_slot_width(lyric) for lyric in note_renderer.lyrics)

    note_w = LOWERCASE_LENGTH
    if note_w > widest:
        note_renderer.width = note_w * 2
        note_renderer.is_length_taken_from_lyric = False
    else:
        note_renderer.is_length_taken_from_lyric = True
        note_renderer.width = (
            int(UPPERCASE_LENGTH * 1.7) if widest < note_w + UPPERCASE_LENGTH else widest
        )

    return VerseInfo(margin_bottom=margin_bottom)


def margin_left(text: str) -> float:
    """Negative width of a leading verse number such as ``1. ``, else zero."""
    match = _NUMBERED_LYRIC.match(text)
    if match is None:
        return 0
    return -lyric_width(match.group(0))