"""Numbered music notation: MusicXML parsing, key signatures, syllables, lyrics and SVG parts."""

__version__ = "0.1.0"