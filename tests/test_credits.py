import pytest

from notangka.credits import (
    HymnCredits,
    align_text,
    auto_wrap_text,
    render_credits,
    text_width,
)
from notangka.entity import LAYOUT_INDENT_LENGTH, LAYOUT_WIDTH, SvgCanvas

ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKMNOPQRSTUVWXYZ1234567890-.!;:-/"
LONG = (
    "this is a very long text, this intentionally added with a lot of text just for "
    "satisfy requirement. <i>Also added a long italic text for breaking down the text "
    "to the new line.</i>"
)
GROUP_OPEN = "<g class='credit' style=\"font-size:60%;font-family:'Figtree';font-weight:600\">\n"


@pytest.mark.parametrize(
    "italic, expected", [(True, 361.79999999999984), (False, 535)]
)
def test_text_width(italic, expected):
    assert text_width(ALPHABET, italic) == expected


@pytest.mark.parametrize(
    "text, lines, lengths",
    [
        ("this is a simple text", ["this is a simple text"], [125]),
        (
            "this is a simple text <i>with italic</i> added",
            ['this is a simple text <tspan font-style="italic">with italic</tspan> added'],
            [213],
        ),
        (
            "this is a simple text <i>with italic</i>",
            ['this is a simple text <tspan font-style="italic">with italic</tspan>'],
            [172],
        ),
        (
            LONG,
            [
                "this is a very long text, this intentionally added with a lot of text just "
                'for satisfy requirement. <tspan font-style="italic">Also',
                "added a long italic text for breaking down the text to the new line.</tspan>",
            ],
            [625, 281],
        ),
    ],
)
def test_auto_wrap_text(text, lines, lengths):
    assert auto_wrap_text(text, LAYOUT_INDENT_LENGTH) == (lines, lengths)


def test_align_text():
    text = (
        "this is a very long text, this intentionally added with a lot of text just for "
        'satisfy requirement. <tspan font-style="italic">Also'
    )
    gap = "&#160;" * 5
    expected = gap.join(
        [
            "this", "is", "a", "very", "long", "text,", "this", "intentionally", "added",
            "with", "a", "lot", "of", "text", "just", "for", "satisfy", "requirement.",
            '<tspan font-style="italic">Also',
        ]
    )
    assert align_text(text, 625, LAYOUT_WIDTH) == expected


def test_align_text_leaves_short_lines():
    assert align_text("one two", 10, LAYOUT_WIDTH) == "one two"


def test_render_merged_credits():
    canvas = SvgCanvas()
    render_credits(
        canvas,
        150,
        HymnCredits(lyric="this is from unittest", music="this is from unittest"),
    )
    assert canvas.out.getvalue() == (
        GROUP_OPEN
        + '<text x="50" y="150">Syair dan lagu :</text>\n'
        + '<text x="118" y="150">this is from unittest</text>'
        + "</g>\n"
    )


def test_render_separate_credits_with_references():
    canvas = SvgCanvas()
    render_credits(
        canvas,
        150,
        HymnCredits(
            lyric="this is lyric from unittest",
            music="this is music from unittest",
            ref_be=1,
            ref_nr=1,
        ),
    )
    assert canvas.out.getvalue() == (
        GROUP_OPEN
        + '<text x="50" y="150">Syair: </text>\n'
        + '<text x="80" y="150">this is lyric from unittest</text>'
        + '<text x="50" y="165">Lagu: this is music from unittest</text>'
        + '<text x="644" y="165">BE 1, NR 1</text>\n'
        + "</g>\n"
    )


def test_render_italic_over_multiple_lines():
    canvas = SvgCanvas()
    render_credits(
        canvas, 150, HymnCredits(lyric=LONG, music="this is music from unittest")
    )
    gap = "&#160;" * 3
    line1 = gap.join(
        [
            "this", "is", "a", "very", "long", "text,", "this", "intentionally", "added",
            "with", "a", "lot", "of", "text", "just", "for", "satisfy", "requirement.",
            '<tspan font-style="italic">Also', "added</tspan>",
        ]
    )
    line2 = (
        '<tspan font-style="italic">a long italic text for breaking down the text '
        "to the new line.</tspan>"
    )
    assert canvas.out.getvalue() == (
        GROUP_OPEN
        + '<text x="50" y="150">Syair: </text>\n'
        + f'<text x="80" y="150">{line1}</text>'
        + f'<text x="80" y="165">{line2}</text>'
        + '<text x="50" y="180">Lagu: this is music from unittest</text>'
        + "</g>\n"
    )


def test_render_copyright_and_footnote():
    canvas = SvgCanvas()
    render_credits(
        canvas,
        150,
        HymnCredits(lyric="lagu", music="lagu", copyright="Hak", title_footnotes="catatan"),
    )
    out = canvas.out.getvalue()
    assert "© Hak</text>" in out
    assert '<tspan font-style="italic">*  catatan</tspan></text>' in out
    assert out.index("© Hak") < out.index("catatan")
    assert out.endswith("</g>\n")


def test_render_music_italic_is_converted():
    canvas = SvgCanvas()
    render_credits(canvas, 150, HymnCredits(lyric="a", music="b <i>c</i>"))
    assert 'Lagu: b <tspan font-style="italic">c</tspan></text>' in canvas.out.getvalue()