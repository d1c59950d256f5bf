from notangka.barline import (
    BarlineInfo,
    barline_width,
    left_barline_renderer,
    render_barline,
    right_barline_renderer,
)
from notangka.entity import Coordinate, NoteRenderer, SvgCanvas
from notangka.musicxml import (
    BarLineRepeat,
    BarLineRepeatDirection,
    BarLineStyle,
    Barline,
    BarlineLocation,
    Measure,
)


def test_left_no_barline():
    assert left_barline_renderer(Measure(), 0) == (None, None)


def test_left_no_left_barline():
    measure = Measure(barlines=[Barline(location=BarlineLocation.RIGHT)])
    assert left_barline_renderer(measure, 0) == (None, None)


def test_left_regular_barline_is_skipped():
    measure = Measure(
        barlines=[Barline(location=BarlineLocation.LEFT, bar_style=BarLineStyle.REGULAR)]
    )
    assert left_barline_renderer(measure, 25) == (None, None)


def test_left_light_light_without_repeat():
    measure = Measure(
        number=1,
        barlines=[Barline(location=BarlineLocation.LEFT, bar_style=BarLineStyle.LIGHT_LIGHT)],
    )
    renderer, info = left_barline_renderer(measure, 25)
    assert renderer == NoteRenderer(
        position_x=25,
        width=6,
        barline=Barline(location=BarlineLocation.LEFT, bar_style=BarLineStyle.LIGHT_LIGHT),
        measure_number=1,
    )
    assert info == BarlineInfo(x_increment=5)


def test_left_heavy_light_with_repeat():
    measure = Measure(
        number=1,
        barlines=[
            Barline(
                location=BarlineLocation.LEFT,
                bar_style=BarLineStyle.HEAVY_LIGHT,
                repeat=BarLineRepeat(),
            )
        ],
    )
    renderer, info = left_barline_renderer(measure, 25, Coordinate(x=30))
    assert renderer == NoteRenderer(
        position_x=30,
        width=7,
        barline=Barline(
            location=BarlineLocation.LEFT,
            bar_style=BarLineStyle.HEAVY_LIGHT,
            repeat=BarLineRepeat(),
        ),
        measure_number=1,
    )
    assert info == BarlineInfo(x_increment=25)


def test_right_single_barline_without_repeat():
    measure = Measure(number=1, barlines=[Barline(location=BarlineLocation.RIGHT)])
    pos, renderer = right_barline_renderer(measure, 25)
    assert pos == 25
    assert renderer == NoteRenderer(
        measure_number=1,
        position_x=25,
        barline=Barline(location=BarlineLocation.RIGHT),
    )


def test_right_two_barlines_with_backward_repeat():
    right = Barline(
        location=BarlineLocation.RIGHT,
        bar_style=BarLineStyle.LIGHT_HEAVY,
        repeat=BarLineRepeat(direction=BarLineRepeatDirection.BACKWARD),
    )
    measure = Measure(number=1, barlines=[Barline(location=BarlineLocation.LEFT), right])
    pos, renderer = right_barline_renderer(measure, 25)
    assert pos == 30
    assert renderer == NoteRenderer(measure_number=1, position_x=30, barline=right)


def test_right_default_is_regular():
    pos, renderer = right_barline_renderer(Measure(number=3), 40)
    assert pos == 40
    assert renderer.barline == Barline(bar_style=BarLineStyle.REGULAR)


def _render(barline):
    canvas = SvgCanvas()
    render_barline(canvas, barline, Coordinate(x=25, y=125))
    return canvas.out.getvalue()


def test_render_no_repeat():
    barline = Barline(location=BarlineLocation.RIGHT, bar_style=BarLineStyle.LIGHT_HEAVY)
    assert _render(barline) == (
        '<text x="25.000000" y="131.000000" style="font-family:Noto Music">  '
        '<tspan x="25.000000" y="131.000000" font-size="180%"> &#x01D102; </tspan>  </text>'
    )


def test_render_repeat_forward():
    barline = Barline(
        location=BarlineLocation.LEFT,
        bar_style=BarLineStyle.HEAVY_LIGHT,
        repeat=BarLineRepeat(direction=BarLineRepeatDirection.FORWARD),
    )
    assert _render(barline) == (
        '<text x="25.000000" y="131.000000" style="font-family:Noto Music">  '
        '<tspan x="25.000000" y="131.000000" font-size="180%"> &#x01D103; </tspan> '
        '<tspan x="35.000000" y="125.000000">:</tspan> </text>'
    )


def test_render_repeat_backward():
    barline = Barline(
        location=BarlineLocation.RIGHT,
        bar_style=BarLineStyle.LIGHT_HEAVY,
        repeat=BarLineRepeat(direction=BarLineRepeatDirection.BACKWARD),
    )
    assert _render(barline) == (
        '<text x="25.000000" y="131.000000" style="font-family:Noto Music"> '
        '<tspan x="20.000000" y="125.000000">:</tspan> '
        '<tspan x="25.000000" y="131.000000" font-size="180%"> &#x01D102; </tspan>  </text>'
    )


def test_barline_width():
    assert barline_width(BarLineStyle.HEAVY_HEAVY) == 8.0
    assert barline_width("unknown") == 0.0