"""The lyric and music credits, copyright and references below a hymn."""

from __future__ import annotations

from dataclasses import dataclass

from notangka.entity import LAYOUT_INDENT_LENGTH, LAYOUT_WIDTH, UPPERCASE_LENGTH, SvgCanvas

SPACE_WIDTH = 2
INDENT_MUSIC_AND_LYRIC = 68
INDENT_LYRIC = 30
NEW_LINE_HEIGHT = 15

_ITALIC_OPEN = '<tspan font-style="italic">'
_ITALIC_CLOSE = "</tspan>"
_CREDIT_STYLE = "style=\"font-size:60%;font-family:'Figtree';font-weight:600\""

_LOWER = "abcdefghijklmnopqrstuvwxyz"
_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_DIGITS = "0123456789"
_PUNCT = ",'.!;:-/ "


def _glyphs(*groups: tuple[str, tuple[int, ...]]) -> dict[str, float]:
    table: dict[str, float] = {}
    for chars, widths in groups:
        if len(chars) != len(widths):
            raise ValueError("every glyph needs exactly one width")
        table.update(zip(chars, map(float, widths)))
    return table


# widths of the Figtree font in italic; applied at 60 %
_ITALIC_WIDTH = _glyphs(
    (_LOWER, (8, 9, 9, 9, 8, 8, 9, 8, 6, 8, 9, 6, 11, 8, 9, 10, 9, 7, 8, 7, 9, 8, 10, 10, 10, 8)),
    (_UPPER, (10, 9, 11, 10, 9, 9, 11, 11, 6, 9, 10, 8, 12, 11, 11, 9, 11, 9, 9, 9, 9, 10, 13, 11, 9, 10)),
    (_DIGITS, (10, 6, 9, 9, 9, 9, 9, 9, 9, 9)),
    (_PUNCT, (6, 5, 4, 6, 7, 6, 7, 9, 2)),
)

# widths of the Figtree font in its upright style
_REGULAR_WIDTH = _glyphs(
    (_LOWER, (7, 8, 8, 8, 8, 6, 8, 8, 4, 6, 8, 4, 10, 8, 8, 8, 8, 6, 7, 7, 7, 9, 11, 8, 9, 7)),
    (_UPPER, (10, 8, 9, 9, 8, 8, 10, 9, 4, 8, 9, 8, 10, 9, 10, 8, 10, 8, 8, 9, 9, 10, 13, 10, 10, 8)),
    (_DIGITS, (8, 6, 7, 7, 8, 8, 8, 8, 8, 8)),
    (_PUNCT, (5, 4, 4, 5, 5, 4, 6, 9, 2)),
)


@dataclass
class HymnCredits:
    """Credit metadata of a hymn; optional parts are None when absent."""

    lyric: str = ""
    music: str = ""
    copyright: str | None = None
    ref_be: int | None = None
    ref_nr: int | None = None
    title_footnotes: str | None = None


def text_width(text: str, italic: bool) -> float:
    """Width of credit text; characters without a known width count as zero."""
    total = 0.0
    if italic:
        for char in text:
            total += _ITALIC_WIDTH.get(char, 0.0) * 0.6
    else:
        for char in text:
            total += _REGULAR_WIDTH.get(char, 0.0)
    return total


def auto_wrap_text(text: str, left_indent: int) -> tuple[list[str], list[int]]:
    """Wrap text to the layout width, turning ``<i>`` into italic tspans.

    Returns the lines and the measured length of each line.
    """
    available = LAYOUT_WIDTH - (left_indent + LAYOUT_INDENT_LENGTH)
    lines: list[str] = []
    lengths: list[int] = []
    current: list[str] = []
    length = 0
    in_italic = False

    for word in text.split():
        length += SPACE_WIDTH
        if in_italic or word.startswith("<i>"):
            closes = word.endswith("</i>")
            cleaned = word.removesuffix("</i>").removeprefix("<i>")
            length += int(text_width(cleaned, True))
            if not in_italic:
                current.append(_ITALIC_OPEN + cleaned)
            elif not closes:
                current.append(word)
            if closes:
                current.append(cleaned + _ITALIC_CLOSE)
            in_italic = not closes
        else:
            length += int(text_width(word, False))
            current.append(word)

        if length >= available:
            lines.append(" ".join(current))
            lengths.append(length)
            current, length = [], 0

    lines.append(" ".join(current))
    lengths.append(length)
    return lines, lengths


def align_text(text: str, text_length: int, target_length: int) -> str:
    """Justify a line by widening the gaps between its words."""
    protected = text.replace("tspan font-style", "tspan-font-style")
    words = protected.split()
    gaps = len(words) - 2
    spare = target_length - text_length
    if gaps > 0 and spare > gaps * SPACE_WIDTH:
        protected = ("&#160;" * (spare // gaps)).join(words)
    return protected.replace("tspan-font-style", "tspan font-style")


def _balance_italic(line: str) -> str:
    opens = "<tspan font-style=" in line
    closes = _ITALIC_CLOSE in line
    if opens and not closes:
        return line + _ITALIC_CLOSE
    if closes and not opens:
        return _ITALIC_OPEN + line
    return line


def render_credits(canvas: SvgCanvas, y: int, metadata: HymnCredits) -> None:
    """Write the credits block starting at ``y``."""
    merged = metadata.lyric == metadata.music
    left_indent = INDENT_MUSIC_AND_LYRIC if merged else INDENT_LYRIC

    wrapped, lengths = auto_wrap_text(metadata.lyric, left_indent)
    canvas.group("class='credit'", _CREDIT_STYLE)
    canvas.text(LAYOUT_INDENT_LENGTH, y, "Syair dan lagu :" if merged else "Syair: ")

    last_index = len(wrapped) - 1
    for index, line in enumerate(wrapped):
        content = _balance_italic(line)
        y += index * NEW_LINE_HEIGHT
        if index < last_index:
            content = align_text(content, lengths[index], LAYOUT_WIDTH)
        canvas.write(f'<text x="{LAYOUT_INDENT_LENGTH + left_indent}" y="{y}">{content}</text>')

    copyright_y = y
    y += NEW_LINE_HEIGHT

    if not merged:
        music = metadata.music.replace("<i>", _ITALIC_OPEN).replace("</i>", _ITALIC_CLOSE)
        canvas.write(f'<text x="{LAYOUT_INDENT_LENGTH}" y="{y}">Lagu: {music}</text>')

    if metadata.copyright is not None:
        notice_width = int(text_width(metadata.copyright, False))
        last_line_width = int(text_width(wrapped[-1], False))
        if LAYOUT_WIDTH - (left_indent + last_line_width + notice_width) < LAYOUT_INDENT_LENGTH:
            copyright_y += NEW_LINE_HEIGHT
            y += NEW_LINE_HEIGHT
        canvas.text(
            LAYOUT_WIDTH - notice_width - LAYOUT_INDENT_LENGTH + UPPERCASE_LENGTH,
            copyright_y,
            f"© {metadata.copyright}",
        )

    refs = [
        f"{label} {number}"
        for label, number in (("BE", metadata.ref_be), ("NR", metadata.ref_nr))
        if number is not None
    ]
    if refs:
        ref = ", ".join(refs)
        canvas.text(LAYOUT_WIDTH - UPPERCASE_LENGTH - int(text_width(ref, False)), y, ref)

    if metadata.title_footnotes is not None:
        y += 30
        notes = f"{_ITALIC_OPEN}*  {metadata.title_footnotes}{_ITALIC_CLOSE}"
        canvas.write(f'<text x="{LAYOUT_INDENT_LENGTH}" y="{y}">{notes}</text>')

    canvas.gend()