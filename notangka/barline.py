"""Placement and drawing of barlines (Noto Music glyphs)."""

from __future__ import annotations

from dataclasses import dataclass, replace

from notangka.entity import UPPERCASE_LENGTH, Coordinate, NoteRenderer, SvgCanvas
from notangka.musicxml import (
    BarLineRepeatDirection,
    BarLineStyle,
    Barline,
    BarlineLocation,
    Measure,
)

_BARLINE_WIDTH: dict[str, float] = {
    BarLineStyle.REGULAR: 4.16,
    BarLineStyle.LIGHT_HEAVY: 7.7,
    BarLineStyle.LIGHT_LIGHT: 6.28,
    BarLineStyle.HEAVY_HEAVY: 8,
    BarLineStyle.HEAVY_LIGHT: 7.7,
}

_GLYPHS: dict[str, str] = {
    BarLineStyle.REGULAR: "&#x01D100;",
    BarLineStyle.LIGHT_HEAVY: "&#x01D102;",
    BarLineStyle.LIGHT_LIGHT: "&#x01D101;",
    BarLineStyle.HEAVY_HEAVY: "&#x01D101;",
    BarLineStyle.HEAVY_LIGHT: "&#x01D103;",
}


@dataclass
class BarlineInfo:
    x_increment: int = 0


def barline_width(style: str) -> float:
    """Width of a barline glyph; unknown styles have no width."""
    return _BARLINE_WIDTH.get(style, 0.0)


def left_barline_renderer(
    measure: Measure, x: int, last_right_position: Coordinate | None = None
) -> tuple[NoteRenderer | None, BarlineInfo | None]:
    """Renderer for a non-regular left barline, or ``(None, None)`` if there is none."""
    if not measure.barlines:
        return None, None
    left = measure.barlines[0]
    if left.location != BarlineLocation.LEFT or left.bar_style == BarLineStyle.REGULAR:
        return None, None

    position = x if last_right_position is None else int(last_right_position.x)
    renderer = NoteRenderer(
        position_x=position,
        width=int(barline_width(left.bar_style)),
        barline=replace(left),
        measure_number=measure.number,
    )
    increment = 5
    if left.repeat is not None:
        increment += UPPERCASE_LENGTH
    return renderer, BarlineInfo(x_increment=increment)


def right_barline_renderer(measure: Measure, x: int) -> tuple[int, NoteRenderer]:
    """Position and renderer of the right barline; regular when none is given."""
    barline = Barline(bar_style=BarLineStyle.REGULAR)
    if len(measure.barlines) == 1:
        if measure.barlines[0].location == BarlineLocation.RIGHT:
            barline = replace(measure.barlines[0])
    elif len(measure.barlines) > 1:
        if measure.barlines[1].location == BarlineLocation.RIGHT:
            barline = replace(measure.barlines[1])

    if barline.repeat is not None and barline.repeat.direction == BarLineRepeatDirection.BACKWARD:
        x += 5

    return x, NoteRenderer(measure_number=measure.number, position_x=x, barline=barline)


def render_barline(canvas: SvgCanvas, barline: Barline, coordinate: Coordinate) -> None:
    """Write the barline glyph, with repeat dots when it repeats."""
    forward = ""
    backward = ""
    if barline.repeat is not None:
        if barline.repeat.direction == BarLineRepeatDirection.BACKWARD:
            backward = f'<tspan x="{coordinate.x - 5:f}" y="{coordinate.y:f}">:</tspan>'
        elif barline.repeat.direction == BarLineRepeatDirection.FORWARD:
            forward = f'<tspan x="{coordinate.x + 10:f}" y="{coordinate.y:f}">:</tspan>'

    x = coordinate.x
    y = coordinate.y + 6
    glyph = _GLYPHS.get(barline.bar_style, "")
    canvas.write(
        f'<text x="{x:f}" y="{y:f}" style="font-family:Noto Music"> {backward} '
        f'<tspan x="{x:f}" y="{y:f}" font-size="180%"> {glyph} </tspan> {forward} </text>'
    )