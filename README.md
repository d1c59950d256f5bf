# notangka

Building blocks for writing hymns in numbered (cipher) music notation as SVG.

## Modules

- `notangka.musicxml`: the score model and `parse_musicxml`, which reads a partwise MusicXML
  document and calls `Measure.build` on every measure to collect its notes, line breaks and
  measure texts. `parse_note` and `parse_direction` read single fragments. Unreadable input
  raises `MusicXMLError`.
- `notangka.entity`: layout constants (`LAYOUT_WIDTH`, `LAYOUT_INDENT_LENGTH`, ...), the
  `NoteRenderer` record and related types, and `SvgCanvas`, a small writer of SVG markup to a
  text stream (`group`, `gend`, `text`, `qbez`, `write`).
- `notangka.keysig`: key signatures and modes (`new_key_signature`, `new_mode`,
  `KeySignature`, `Mode`) for major, minor, dorian and phrygian, including the humanized label
  such as `do = d`, and `spelled_numbered_notation` (`Bb` → `bes`).
- `notangka.barline`: `left_barline_renderer`, `right_barline_renderer`, `render_barline` and
  `barline_width`.
- `notangka.breathpause`: `breath_pause_renderer`, which gives a breath mark its own slot.
- `notangka.syllable`: `split_syllable` for Indonesian words, and `is_vowel`.
- `notangka.lyric`: `lyric_width` (Caladea glyph widths), `set_lyric_renderer`, which copies a
  note's lyrics into a `NoteRenderer` and sizes the slot, and `margin_left` for verse numbers.
- `notangka.hyphen`: `calculate_hyphens`, `render_hyphens` and `HyphenStack`.
- `notangka.verse`: `HymnVerse`, `parse_verse_content` and `render_verses`, which writes the
  extra verses below a score in one or two columns.
- `notangka.credits`: `HymnCredits`, `text_width`, `auto_wrap_text`, `align_text` and
  `render_credits`, which writes the lyric and music credits, copyright, references and
  footnote.
- `notangka.lyric_parser`: `breakdown_lyrics`, `breakdown_json` and the `notangka-syllables`
  command.

## Installation

```
pip install .
```

## Splitting lyrics into syllables

```python
from notangka.syllable import split_syllable

split_syllable("mengantuk")   # ['me', 'ngan', 'tuk']
split_syllable("cemerlang!")  # ['ce', 'mer', 'lang!']
```

Diphthongs are not recognised: `kacau` gives `['ka', 'ca', 'u']`.

For whole texts, `notangka.lyric_parser.breakdown_lyrics` returns one list of `WordBreakdown`
per non-empty line (lines split on newlines or on the escaped sequence `\n`), and
`breakdown_json` gives the same as indented JSON.

The command reads the files named as arguments, or standard input when none are given, and
prints the JSON:

```
echo "Kerubim dan serafim" | notangka-syllables
```

## Key signatures

```python
from notangka.musicxml import KeySignature as XMLKey
from notangka.keysig import new_key_signature

ks = new_key_signature(XMLKey(fifth=2))
str(ks)          # 'do = d'
ks.lettered()    # 'D'
```

## Writing SVG

The rendering functions take an `SvgCanvas`; by default it writes to an in-memory stream.

```python
from notangka.entity import SvgCanvas
from notangka.credits import HymnCredits, render_credits

canvas = SvgCanvas()
render_credits(canvas, 150, HymnCredits(lyric="Syair A", music="Lagu B", ref_be=1))
svg_fragment = canvas.out.getvalue()
```

## What the package does not do

It provides the parts of a page, not a whole page: there is no function that lays a parsed
score out into staves and writes a complete SVG document. It has no HTTP service and no
storage; verse and credit data are passed in as `HymnVerse` and `HymnCredits` values.

## Running the tests

```
pip install .[test]
pytest
```