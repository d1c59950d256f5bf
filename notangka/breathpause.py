"""Breath marks, rendered as their own note slot."""

from __future__ import annotations

from notangka.entity import LOWERCASE_LENGTH, Articulation, ArticulationType, NoteRenderer
from notangka.musicxml import Note


def breath_pause_renderer(note_renderer: NoteRenderer, note: Note) -> NoteRenderer | None:
    """Renderer for the note's breath mark, or None if it has none.

    A pending new line moves from the note to the breath mark.
    """
    notations = note.notations
    has_breath_mark = (
        notations is not None
        and notations.articulation is not None
        and notations.articulation.breath_mark
    )
    if not has_breath_mark:
        return None

    result = NoteRenderer(
        articulation=Articulation(breath_mark=ArticulationType.BREATH_MARK),
        measure_number=note_renderer.measure_number,
        width=LOWERCASE_LENGTH,
        is_new_line=note_renderer.is_new_line,
    )
    note_renderer.is_new_line = False
    return result