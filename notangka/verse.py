"""Verses printed below the score, in one or two columns."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from enum import IntEnum

from notangka.entity import LAYOUT_INDENT_LENGTH, LAYOUT_WIDTH, Coordinate, SvgCanvas
from notangka.lyric import VerseInfo, lyric_width

_log = logging.getLogger(__name__)

_LINE_HEIGHT = 25
_VERSE_GAP = 35
_COMBINE_STYLE = "fill:none;stroke:#000000;stroke-linecap:round;stroke-width:1.1"


class VerseRowStyle(IntEnum):
    SINGLE_COLUMN = 12
    DUAL_COLUMN = 6


@dataclass
class LyricStylePart:
    text: str = ""
    underline: bool = False


@dataclass
class LyricPartVerse:
    text: str = ""
    type: str = ""
    combine: bool = False
    breakdown: list[LyricStylePart] = field(default_factory=list)


@dataclass
class LyricWordVerse:
    word: str = ""
    breakdown: list[LyricPartVerse] = field(default_factory=list)
    dash: bool = False


@dataclass
class HymnVerse:
    """One stored verse of a hymn; ``content`` is its JSON line layout."""

    verse_num: int = 0
    content: str = ""
    style_row: int = 0
    col: int = 0
    row: int = 0


@dataclass
class _VersePosition:
    col: int = 0
    row: int = 0
    row_width: int = 0
    style: int = 0


def _style_part(data: dict) -> LyricStylePart:
    return LyricStylePart(
        text=data.get("text") or "", underline=bool(data.get("underline", False))
    )


def _part(data: dict) -> LyricPartVerse:
    return LyricPartVerse(
        text=data.get("text") or "",
        type=data.get("type") or "",
        combine=bool(data.get("combine", False)),
        breakdown=[_style_part(p) for p in data.get("breakdown") or []],
    )


def _word(data: dict) -> LyricWordVerse:
    return LyricWordVerse(
        word=data.get("word") or "",
        breakdown=[_part(p) for p in data.get("breakdown") or []],
        dash=bool(data.get("dash", False)),
    )


def parse_verse_content(content: str) -> list[list[LyricWordVerse]]:
    """Parse the JSON of a verse: a list of lines, each a list of words.

    Raises ValueError when the content is not such a document.
    """
    try:
        raw = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid verse content: {exc}") from exc
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError("verse content must be a list of lines")
    try:
        return [[_word(word) for word in line or []] for line in raw]
    except (AttributeError, TypeError) as exc:
        raise ValueError(f"invalid verse content: {exc}") from exc


def _round(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def _combine_marks(line: list[LyricWordVerse], line_index: int) -> list[tuple[Coordinate, Coordinate]]:
    marks = []
    line_text = ""
    for word in line:
        word_part = ""
        for part in word.breakdown:
            if part.combine:
                x1 = 0.0
                x2 = 0.0
                for piece in part.breakdown:
                    if piece.underline:
                        x2 = x1 + lyric_width(piece.text)
                        break
                    x1 += lyric_width(piece.text)
                start = lyric_width(line_text) + lyric_width(word_part)
                marks.append(
                    (
                        Coordinate(x=start + x1, y=float(line_index)),
                        Coordinate(x=start + x2, y=float(line_index)),
                    )
                )
            word_part += part.text
        line_text = line_text + " " + word.word
    return marks


def render_verses(canvas: SvgCanvas, y: int, verses: list[HymnVerse]) -> VerseInfo:
    """Write the verses starting at ``y``; the result holds the lowest y reached."""
    canvas.group("class='verses'", "style='font-family:Caladea'")

    all_verse: dict[int, list[str]] = {}
    all_combine: dict[int, list[tuple[Coordinate, Coordinate]]] = {}
    verse_pos: dict[int, _VersePosition] = {}
    y_pos_row: dict[int, int] = {}
    line_length = 0.0
    max_right_post = 0.0
    multi_column = False
    max_y = 0.0

    for verse in verses:
        try:
            whole = parse_verse_content(verse.content)
        except ValueError as exc:
            _log.warning("cannot read verse %d: %s", verse.verse_num, exc)
            whole = []

        y_pos_row[verse.row] = (
            y + _LINE_HEIGHT * len(whole) * (verse.row - 1) + (verse.row - 1) * _VERSE_GAP
        )
        style = verse.style_row or VerseRowStyle.SINGLE_COLUMN
        verse_pos[verse.verse_num] = _VersePosition(
            col=verse.col, row=verse.row, row_width=verse.style_row, style=style
        )

        combine: list[tuple[Coordinate, Coordinate]] = []
        blob: list[str] = []
        for line_index, line in enumerate(whole):
            combine.extend(_combine_marks(line, line_index))
            line_text = "".join(" " + word.word for word in line)
            line_length = max(line_length, lyric_width(line_text))
            if verse.col == 2:
                max_right_post = max(max_right_post, line_length)
                multi_column = True
            blob.append(line_text)
        all_verse[verse.verse_num] = blob
        all_combine[verse.verse_num] = combine

    default_x = _round(LAYOUT_WIDTH // 2 - line_length / 2)
    x = LAYOUT_INDENT_LENGTH * 2 if multi_column else default_x

    # the first verse sits under the notes, so listed verses start at number two
    for number in range(2, len(all_verse) + 2):
        canvas.group("class='verse'")
        y_verse = y
        position = verse_pos.get(number, _VersePosition())

        margin = 0
        if position.col == 2 and position.row_width == VerseRowStyle.DUAL_COLUMN:
            margin = LAYOUT_WIDTH - LAYOUT_INDENT_LENGTH * 3 - int(max_right_post)
            y_verse = y_pos_row.get(position.row, 0)
            y = y_verse

        if position.style == VerseRowStyle.SINGLE_COLUMN:
            x = default_x + LAYOUT_INDENT_LENGTH // 2

        label = f"{number}. "
        canvas.text(x - 5 - int(lyric_width(label)) + margin, y, label)
        for line_text in all_verse.get(number, []):
            canvas.text(x + margin, y, line_text)
            y += _LINE_HEIGHT
        canvas.group()

        for start, end in all_combine.get(number, []):
            left = int(start.x) + x + margin
            canvas.qbez(
                left,
                int(start.y * _LINE_HEIGHT) + 2 + y_verse,
                left + int(int(end.x - start.x) / 2),
                y_verse + 7 + int(start.y) * _LINE_HEIGHT,
                int(end.x) + x + margin,
                int(end.y * _LINE_HEIGHT) + 2 + y_verse,
                _COMBINE_STYLE,
            )
        canvas.gend()
        canvas.gend()

        y += _VERSE_GAP
        max_y = max(max_y, float(y))

    canvas.gend()
    return VerseInfo(margin_bottom=int(max_y))