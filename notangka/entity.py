"""Layout constants, render records and a small SVG writer."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, TextIO
from xml.sax.saxutils import escape

from notangka.musicxml import Barline, MeasureText, TimeModification, Tuplet

LAYOUT_INDENT_LENGTH = 50
LAYOUT_WIDTH = 720
LOWERCASE_LENGTH = 15
UPPERCASE_LENGTH = 20
SPACE_LENGTH = 7


@dataclass
class Coordinate:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Text:
    value: str = ""
    underline: int = 0


def lyric_text(texts: Iterable[Text]) -> str:
    """Join the values of lyric text parts."""
    return "".join(text.value for text in texts)


@dataclass
class Lyric:
    text: list[Text] = field(default_factory=list)
    syllabic: str = ""


@dataclass
class Slur:
    number: int = 0
    type: str = ""
    line_type: str = ""


@dataclass
class Beam:
    number: int = 0
    type: str = ""


class ArticulationType(str, Enum):
    BREATH_MARK = "breathMark"

    def __str__(self) -> str:
        return self.value


@dataclass
class Articulation:
    breath_mark: ArticulationType | None = None


@dataclass
class NoteRenderer:
    is_dotted: bool = False
    is_rest: bool = False
    position_x: int = 0
    position_y: int = 0
    note: int = 0
    octave: int = 0
    strikethrough: bool = False
    note_length: str = ""
    width: int = 0
    lyrics: list[Lyric] = field(default_factory=list)
    slur: dict[int, Slur] = field(default_factory=dict)
    beam: dict[int, Beam] = field(default_factory=dict)
    tie: Slur | None = None
    articulation: Articulation | None = None
    barline: Barline | None = None
    is_length_taken_from_lyric: bool = False
    index_position: int = 0
    is_new_line: bool = False
    measure_number: int = 0
    measure_text: list[MeasureText] = field(default_factory=list)
    tuplet: Tuplet | None = None
    time_modifications: TimeModification | None = None

    def update_beam(self, number: int, beam_type: str) -> None:
        """Set the beam of the given number."""
        self.beam[number] = Beam(number=number, type=beam_type)


@dataclass
class SvgCanvas:
    """Writes SVG markup to a text stream."""

    out: TextIO = field(default_factory=io.StringIO)

    def write(self, content: str) -> None:
        self.out.write(content)

    def group(self, *args: str) -> None:
        attrs = " ".join(arg if "=" in arg else f'style="{arg}"' for arg in args)
        self.write(f"<g {attrs}>\n" if attrs else "<g>\n")

    def gend(self) -> None:
        self.write("</g>\n")

    def text(self, x, y, content: str) -> None:
        self.write(f'<text x="{x}" y="{y}">{escape(content)}</text>\n')

    def qbez(self, sx, sy, cx, cy, ex, ey, style: str) -> None:
        self.write(f'<path d="M{sx},{sy} Q{cx},{cy} {ex},{ey}" style="{style}"/>\n')