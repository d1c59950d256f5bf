"""MusicXML score model and parser for the parts the renderer uses."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar, Union
from xml.sax.saxutils import escape


class MusicXMLError(ValueError):
    """Raised when a MusicXML document or fragment cannot be read."""


class _StrEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class TextAlignment(_StrEnum):
    RIGHT = "right"
    LEFT = "left"


class CreditType(_StrEnum):
    TITLE = "title"


class NoteLength(_StrEnum):
    N256TH = "256th"
    N128TH = "128th"
    N64TH = "64th"
    N32ND = "32nd"
    N16TH = "16th"
    EIGHTH = "eighth"
    QUARTER = "quarter"
    HALF = "half"
    WHOLE = "whole"
    BREVE = "breve"
    LONG = "long"


class NoteAccidental(_StrEnum):
    NATURAL = "natural"
    SHARP = "sharp"
    FLAT = "flat"
    DOUBLE_SHARP = "double-sharp"
    DOUBLE_FLAT = "double-flat"

    def sign(self) -> str:
        """The sign appended to a pitch letter for this accidental."""
        return _ACCIDENTAL_SIGNS[self.value]


_ACCIDENTAL_SIGNS = {
    "natural": "",
    "sharp": "#",
    "flat": "b",
    "double-sharp": "x",
    "double-flat": "bb",
}


class LyricSyllabic(_StrEnum):
    BEGIN = "begin"
    MIDDLE = "middle"
    END = "end"
    SINGLE = "single"


class NoteSlurType(_StrEnum):
    START = "start"
    STOP = "stop"
    # a note that stops and starts the same slur number
    HOP = "hop"


class NoteSlurLineType(_StrEnum):
    DASHED = "dashed"
    DOTTED = "dotted"
    SOLID = "solid"
    WAVY = "wavy"


class NoteBeamType(_StrEnum):
    BEGIN = "begin"
    CONTINUE = "continue"
    END = "end"
    FORWARD_HOOK = "forward hook"
    BACKWARD_HOOK = "backward hook"
    # extra beam used only while rendering numbered notes
    ADDITIONAL = "additional"


class TupletType(_StrEnum):
    START = "start"
    STOP = "stop"


class BarLineStyle(_StrEnum):
    REGULAR = "regular"
    LIGHT_HEAVY = "light-heavy"
    LIGHT_LIGHT = "light-light"
    HEAVY_HEAVY = "heavy-heavy"
    HEAVY_LIGHT = "heavy-light"


class BarLineRepeatDirection(_StrEnum):
    BACKWARD = "backward"
    FORWARD = "forward"


class BarlineLocation(_StrEnum):
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Pitch:
    step: str = ""
    octave: int = 0


@dataclass
class LyricTextPart:
    value: str = ""
    underline: int = 0


@dataclass
class Lyric:
    number: int = 0
    text: list[LyricTextPart] = field(default_factory=list)
    syllabic: str = ""
    relative_x: float = 0.0
    relative_y: float = 0.0
    default_x: float = 0.0
    default_y: float = 0.0


@dataclass
class NoteBeam:
    number: int = 0
    state: str = ""


@dataclass
class Tie:
    type: str = ""
    line_type: str = ""


@dataclass
class NotationSlur:
    type: str = ""
    number: int = 0
    line_type: str = ""


@dataclass
class Tuplet:
    type: str = ""
    bracket: str = ""


@dataclass
class NotationArticulation:
    breath_mark: bool = False


@dataclass
class NoteNotation:
    slurs: list[NotationSlur] = field(default_factory=list)
    tied: Tie | None = None
    articulation: NotationArticulation | None = None
    tuplet: Tuplet | None = None


@dataclass
class TimeModification:
    actual_notes: int = 0
    normal_notes: int = 0


@dataclass
class MeasureText:
    text: str = ""
    relative_y: float = 0.0
    text_alignment: str = ""


@dataclass
class Note:
    pitch: Pitch = field(default_factory=Pitch)
    type: str = ""
    beams: list[NoteBeam] = field(default_factory=list)
    notations: NoteNotation | None = None
    lyrics: list[Lyric] = field(default_factory=list)
    accidental: str = ""
    dots: int = 0
    rest: bool = False
    time_modification: TimeModification | None = None
    measure_text: list[MeasureText] = field(default_factory=list)


@dataclass
class Direction:
    placement: str = ""
    words: str = ""
    relative_y: float = 0.0


@dataclass
class Element:
    """The inner XML of a measure child that is not parsed up front."""

    content: str = ""

    def parse_as_note(self) -> Note:
        return parse_note(self.content)

    def parse_as_direction(self) -> Direction:
        return parse_direction(self.content)


@dataclass
class BarLineRepeat:
    direction: str = ""


@dataclass
class BarlineEnding:
    number: str = ""
    type: str = ""


@dataclass
class Barline:
    location: str = ""
    bar_style: str = ""
    repeat: BarLineRepeat | None = None
    ending: BarlineEnding | None = None


@dataclass
class KeySignature:
    fifth: int = 0
    mode: str = ""


@dataclass
class TimeSignature:
    beats: int = 0
    beat_type: int = 0


@dataclass
class Attribute:
    key: KeySignature = field(default_factory=KeySignature)
    time: TimeSignature | None = None


@dataclass
class Print:
    new_system: str = ""


@dataclass
class Measure:
    number: int = 0
    appendix: list[Element] = field(default_factory=list)
    attribute: Attribute | None = None
    notes: list[Note] = field(default_factory=list)
    barlines: list[Barline] = field(default_factory=list)
    printing: Print | None = None
    new_line_index: int = -1
    right_measure_text: MeasureText | None = None

    def build(self) -> None:
        """Parse the notes and directions held in the appendix."""
        self.new_line_index = -1
        self.notes = []
        self.right_measure_text = None
        pending: MeasureText | None = None

        for index, element in enumerate(self.appendix):
            content = element.content.strip()
            if (
                content.startswith("<pitch>")
                or "<rest />" in content
                or "<rest/>" in content
            ):
                note = element.parse_as_note()
                if pending is not None:
                    note.measure_text.append(
                        MeasureText(text=pending.text, relative_y=pending.relative_y)
                    )
                    pending = None
                self.notes.append(note)
            elif content.startswith("<direction-type>"):
                direction = element.parse_as_direction()
                if direction.words == "__layout=br":
                    self.new_line_index = index
                elif direction.words == "D.C. al Fine":
                    continue
                else:
                    pending = MeasureText(
                        text=direction.words, relative_y=direction.relative_y
                    )

        if pending is not None:
            self.right_measure_text = MeasureText(
                text=pending.text, relative_y=pending.relative_y
            )


@dataclass
class Part:
    id: str = ""
    measures: list[Measure] = field(default_factory=list)


@dataclass
class Credit:
    type: str = ""
    words: str = ""


@dataclass
class Work:
    title: str = ""


@dataclass
class MusicXML:
    credits: list[Credit] = field(default_factory=list)
    part: Part = field(default_factory=Part)
    work: Work = field(default_factory=Work)


_E = TypeVar("_E", bound=_StrEnum)


def _coerce(enum_cls: type[_E], value: str) -> Union[_E, str]:
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _int(value: str | None, what: str) -> int:
    text = (value or "").strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError as exc:
        raise MusicXMLError(f"invalid integer for {what}: {value!r}") from exc


def _float(value: str | None, what: str) -> float:
    text = (value or "").strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError as exc:
        raise MusicXMLError(f"invalid number for {what}: {value!r}") from exc


def _text(node: ET.Element, path: str) -> str:
    child = node.find(path)
    if child is None or child.text is None:
        return ""
    return child.text


def _parse_fragment(tag: str, content: str) -> ET.Element:
    try:
        return ET.fromstring(f"<{tag}>{content}</{tag}>")
    except ET.ParseError as exc:
        raise MusicXMLError(f"cannot parse {tag}: {exc}") from exc


def _inner_xml(node: ET.Element) -> str:
    parts = [escape(node.text or "")]
    parts.extend(ET.tostring(child, encoding="unicode") for child in node)
    return "".join(parts)


def _lyric_from(node: ET.Element) -> Lyric:
    return Lyric(
        number=_int(node.get("number"), "lyric number"),
        text=[
            LyricTextPart(
                value=part.text or "",
                underline=_int(part.get("underline"), "underline"),
            )
            for part in node.findall("text")
        ],
        syllabic=_coerce(LyricSyllabic, _text(node, "syllabic")),
        relative_x=_float(node.get("relative-x"), "relative-x"),
        relative_y=_float(node.get("relative-y"), "relative-y"),
        default_x=_float(node.get("default-x"), "default-x"),
        default_y=_float(node.get("default-y"), "default-y"),
    )


def _notations_from(node: ET.Element) -> NoteNotation:
    notation = NoteNotation(
        slurs=[
            NotationSlur(
                type=_coerce(NoteSlurType, slur.get("type", "")),
                number=_int(slur.get("number"), "slur number"),
                line_type=_coerce(NoteSlurLineType, slur.get("line-type", "")),
            )
            for slur in node.findall("slur")
        ]
    )
    tied = node.find("tied")
    if tied is not None:
        notation.tied = Tie(
            type=_coerce(NoteSlurType, tied.get("type", "")),
            line_type=_coerce(NoteSlurLineType, tied.get("line-type", "")),
        )
    articulations = node.find("articulations")
    if articulations is not None:
        notation.articulation = NotationArticulation(
            breath_mark=articulations.find("breath-mark") is not None
        )
    tuplet = node.find("tuplet")
    if tuplet is not None:
        notation.tuplet = Tuplet(
            type=_coerce(TupletType, tuplet.get("type", "")),
            bracket=tuplet.get("bracket", tuplet.get("braket", "")),
        )
    return notation


def _note_from(node: ET.Element) -> Note:
    pitch_node = node.find("pitch")
    pitch = Pitch()
    if pitch_node is not None:
        pitch = Pitch(
            step=_text(pitch_node, "step"),
            octave=_int(_text(pitch_node, "octave"), "octave"),
        )

    notations_node = node.find("notations")
    modification_node = node.find("time-modification")
    modification = None
    if modification_node is not None:
        modification = TimeModification(
            actual_notes=_int(_text(modification_node, "actual-notes"), "actual-notes"),
            normal_notes=_int(_text(modification_node, "normal-notes"), "normal-notes"),
        )

    return Note(
        pitch=pitch,
        type=_coerce(NoteLength, _text(node, "type")),
        beams=[
            NoteBeam(
                number=_int(beam.get("number"), "beam number"),
                state=_coerce(NoteBeamType, beam.text or ""),
            )
            for beam in node.findall("beam")
        ],
        notations=_notations_from(notations_node) if notations_node is not None else None,
        lyrics=[_lyric_from(lyric) for lyric in node.findall("lyric")],
        accidental=_coerce(NoteAccidental, _text(node, "accidental")),
        dots=len(node.findall("dot")),
        rest=node.find("rest") is not None,
        time_modification=modification,
    )


def parse_note(content: str) -> Note:
    """Parse the inner XML of a ``<note>`` element."""
    return _note_from(_parse_fragment("note", content))


def parse_direction(content: str) -> Direction:
    """Parse the inner XML of a ``<direction>`` element."""
    node = _parse_fragment("direction", content)
    words = node.find("direction-type/words")
    return Direction(
        placement=node.get("placement", ""),
        words="" if words is None else (words.text or ""),
        relative_y=0.0 if words is None else _float(words.get("relative-y"), "relative-y"),
    )


def _barline_from(node: ET.Element) -> Barline:
    barline = Barline(
        location=_coerce(BarlineLocation, node.get("location", "")),
        bar_style=_coerce(BarLineStyle, _text(node, "bar-style")),
    )
    repeat = node.find("repeat")
    if repeat is not None:
        barline.repeat = BarLineRepeat(
            direction=_coerce(BarLineRepeatDirection, repeat.get("direction", ""))
        )
    ending = node.find("ending")
    if ending is not None:
        barline.ending = BarlineEnding(
            number=ending.get("number", ""), type=ending.get("type", "")
        )
    return barline


def _attribute_from(node: ET.Element) -> Attribute:
    attribute = Attribute()
    key = node.find("key")
    if key is not None:
        attribute.key = KeySignature(
            fifth=_int(_text(key, "fifths"), "fifths"), mode=_text(key, "mode")
        )
    time = node.find("time")
    if time is not None:
        attribute.time = TimeSignature(
            beats=_int(_text(time, "beats"), "beats"),
            beat_type=_int(_text(time, "beat-type"), "beat-type"),
        )
    return attribute


def _measure_from(node: ET.Element) -> Measure:
    measure = Measure(number=_int(node.get("number"), "measure number"))
    for child in node:
        if child.tag == "attributes":
            measure.attribute = _attribute_from(child)
        elif child.tag == "barline":
            measure.barlines.append(_barline_from(child))
        elif child.tag == "print":
            measure.printing = Print(new_system=child.get("new-system", ""))
        else:
            measure.appendix.append(Element(_inner_xml(child)))
    return measure


def parse_musicxml(data: str | bytes) -> MusicXML:
    """Parse a partwise MusicXML document and build every measure."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise MusicXMLError(f"cannot parse document: {exc}") from exc
    if root.tag != "score-partwise":
        raise MusicXMLError(
            f"expected element type <score-partwise> but have <{root.tag}>"
        )

    score = MusicXML(
        credits=[
            Credit(
                type=_coerce(CreditType, _text(credit, "credit-type")),
                words=_text(credit, "credit-words"),
            )
            for credit in root.findall("credit")
        ],
        work=Work(title=_text(root, "work/work-title")),
    )
    part_node = root.find("part")
    if part_node is not None:
        score.part = Part(
            id=part_node.get("id", ""),
            measures=[_measure_from(m) for m in part_node.findall("measure")],
        )
    for measure in score.part.measures:
        measure.build()
    return score