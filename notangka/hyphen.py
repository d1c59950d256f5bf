"""Hyphens drawn between the syllables of a word under a staff."""

from __future__ import annotations

import math

from notangka.entity import (
    LAYOUT_INDENT_LENGTH,
    LAYOUT_WIDTH,
    Coordinate,
    NoteRenderer,
    SvgCanvas,
    lyric_text,
)
from notangka.entity import Lyric as RenderLyric
from notangka.lyric import LyricPosition, lyric_width
from notangka.musicxml import LyricSyllabic

_RIGHT_EDGE = float(LAYOUT_WIDTH - LAYOUT_INDENT_LENGTH)
# every sixth of the layout holds three hyphens
_CONTAINER = (LAYOUT_WIDTH - (2 - LAYOUT_INDENT_LENGTH)) // 6


class HyphenStack:
    """Tracks open words by their syllabic markers."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def process(self, syllabic: str) -> None:
        if syllabic == LyricSyllabic.END:
            if self._items:
                self._items.pop()
        elif syllabic == LyricSyllabic.BEGIN:
            self._items.append(syllabic)
        elif syllabic == LyricSyllabic.SINGLE:
            if self._items and self._items[-1] in (LyricSyllabic.BEGIN, LyricSyllabic.MIDDLE):
                self._items.pop()

    def is_empty(self) -> bool:
        return not self._items


def calculate_hyphens(previous: LyricPosition, current: LyricPosition) -> list[Coordinate]:
    """Positions of the hyphens between two syllables of the same word."""
    if previous.lyrics.syllabic in (LyricSyllabic.END, LyricSyllabic.SINGLE):
        return []

    hyphen_width = lyric_width("-")
    start = previous.coordinate.x + lyric_width(lyric_text(previous.lyrics.text))
    end = current.coordinate.x
    distance = end - start
    y = current.coordinate.y

    if distance < 4:
        # a syllable pushed against the right margin still gets its hyphen
        if end == _RIGHT_EDGE:
            return [Coordinate(x=start, y=y)]
        return []

    if distance < _CONTAINER:
        offset = max(distance / 2 - hyphen_width, 0)
        return [Coordinate(x=start + offset, y=y)]

    total_containers = math.floor((distance - 2 * hyphen_width) / _CONTAINER)
    total = int(total_containers * 3)
    return [Coordinate(x=start + i * (distance / total), y=y) for i in range(total)]


def _position(note: NoteRenderer, line: int, lyric: RenderLyric) -> LyricPosition:
    return LyricPosition(
        coordinate=Coordinate(x=float(note.position_x), y=float(note.position_y) + 25 + line * 20),
        lyrics=lyric,
    )


def render_hyphens(canvas: SvgCanvas, notes: list[NoteRenderer]) -> None:
    """Write the hyphens for all lyric lines of one staff."""
    pairs: dict[int, list[LyricPosition | None]] = {}
    stack = HyphenStack()
    base_y = 0.0
    last_lyrics: list[RenderLyric] = []
    locations: list[Coordinate] = []

    for note in notes:
        if not note.lyrics:
            continue
        last_lyrics = note.lyrics
        for line, lyric in enumerate(note.lyrics):
            stack.process(lyric.syllabic)
            pair = list(pairs.get(line, (None, None)))
            here = _position(note, line, lyric)

            if lyric.syllabic == LyricSyllabic.BEGIN:
                pair[0] = here
            elif lyric.syllabic == LyricSyllabic.END:
                pair[1] = here
                start = pair[0]
                if start is None:
                    start = LyricPosition(
                        coordinate=Coordinate(x=float(notes[0].position_x), y=here.coordinate.y)
                    )
                locations = calculate_hyphens(start, here) + locations
                pair = [None, None]
            elif lyric.syllabic == LyricSyllabic.MIDDLE:
                if pair[0] is None:
                    pair[0] = here
                    pairs[line] = pair
                    continue
                if pair[1] is None:
                    locations = calculate_hyphens(pair[0], here) + locations
                    pair = [here, None]

            pairs[line] = pair
            base_y = float(note.position_y) + 25

    # words still open at the end of the staff run to the right margin
    for line in sorted(pairs):
        opened, closed = pairs[line]
        if opened is not None and closed is None:
            lyric = last_lyrics[line] if line < len(last_lyrics) else RenderLyric()
            end = LyricPosition(
                coordinate=Coordinate(x=_RIGHT_EDGE, y=base_y + line * 20), lyrics=lyric
            )
            locations = calculate_hyphens(opened, end) + locations

    canvas.group("hyphens")
    for location in locations:
        canvas.write(f'<text x="{location.x:.4f}" y="{location.y:.0f}">-</text>')
    canvas.gend()