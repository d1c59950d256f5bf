"""Break lyric text into words and syllables, as data or JSON."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field

from notangka.syllable import split_syllable


@dataclass
class WordBreakdown:
    word: str = ""
    breakdown: list[str] = field(default_factory=list)

    def to_json(self) -> dict:
        return {"word": self.word, "Breakdown": list(self.breakdown)}


def _lines(text: str):
    cleaned = text.strip().replace("\\t", "")
    for chunk in cleaned.split("\\n"):
        yield from chunk.splitlines()


def breakdown_lyrics(text: str) -> list[list[WordBreakdown]]:
    """Split text into lines of words with their syllables.

    Lines are separated by newlines or the escaped sequence ``\\n``; escaped
    ``\\t`` sequences are dropped and blank lines are skipped.
    """
    result = []
    for line in _lines(text):
        words = line.split()
        if words:
            result.append([WordBreakdown(word=w, breakdown=split_syllable(w)) for w in words])
    return result


def breakdown_json(text: str) -> str:
    """The breakdown of the text as indented JSON."""
    data = [[word.to_json() for word in line] for line in breakdown_lyrics(text)]
    dumped = json.dumps(data, indent=4, ensure_ascii=False)
    return (
        dumped.replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")
    )


def main(argv: list[str] | None = None) -> int:
    """Print the syllable breakdown of the given files, or of standard input."""
    parser = argparse.ArgumentParser(description="Break lyrics into syllables.")
    parser.add_argument("files", nargs="*", help="text files holding the lyrics")
    args = parser.parse_args(argv)

    if args.files:
        parts = []
        for name in args.files:
            with open(name, encoding="utf-8") as handle:
                parts.append(handle.read())
        text = "\n".join(parts)
    else:
        text = sys.stdin.read()

    print(breakdown_json(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())