"""Splitting Indonesian words into sung syllables."""

from __future__ import annotations

_VOWELS = frozenset("aiueoAIUEO")


def is_vowel(char: str) -> bool:
    """True if the character is one of a, i, u, e, o in either case."""
    return char.lower() in ("a", "i", "u", "e", "o")


def _tail_after_n(word: str, v: int) -> str:
    """What follows the vowel at ``v`` when the next letter is an ``n``."""
    length = len(word)
    following = word[v + 1]
    if v + 2 >= length:
        return following

    after = word[v + 2]
    if after.lower() in ("y", "g"):
        if v + 2 == length - 1:
            return following + after
        tail = ""
        if v + 3 < length:
            third = word[v + 3]
            if not is_vowel(third):
                tail += following + after
            if not third.isalpha():
                tail += third
        return tail

    tail = following
    if v + 3 < length and not word[v + 3].isalpha():
        tail += word[v + 3]
    return tail


def _tail(word: str, v: int) -> str:
    """The consonants and punctuation that close the syllable at ``v``."""
    length = len(word)
    if v + 1 >= length:
        return ""

    following = word[v + 1]
    if not following.isalpha():
        return following
    if is_vowel(following):
        return ""
    if following.lower() == "n":
        return _tail_after_n(word, v)

    if v + 2 >= length:
        return following
    after = word[v + 2]
    tail = ""
    if not is_vowel(after):
        tail += following
    if not after.isalpha():
        tail += after
    return tail


def _head(word: str, v: int) -> str:
    """The consonants that open the syllable at ``v``."""
    if v == 0:
        return ""
    previous = word[v - 1]
    if is_vowel(previous):
        return ""
    head = previous
    if previous.lower() in ("y", "g") and v - 2 >= 0:
        before = word[v - 2]
        if before.lower() == "n":
            head = before + head
    return head


def split_syllable(word: str) -> list[str]:
    """Split a word into one syllable per vowel.

    Diphthongs are not recognised, so ``kacau`` becomes ``ka``, ``ca``, ``u``.
    """
    return [
        _head(word, v) + word[v] + _tail(word, v)
        for v, char in enumerate(word)
        if char in _VOWELS
    ]