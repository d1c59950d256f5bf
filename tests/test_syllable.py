import pytest

from notangka.syllable import is_vowel, split_syllable


@pytest.mark.parametrize(
    "word, expected",
    [
        ("dan", ["dan"]),
        ("Kata", ["Ka", "ta"]),
        ("yakin", ["ya", "kin"]),
        ("lumping", ["lum", "ping"]),
        ("mengantuk", ["me", "ngan", "tuk"]),
        ("menyair", ["me", "nya", "ir"]),
        ("yang", ["yang"]),
        ("anti", ["an", "ti"]),
        ("tanya", ["ta", "nya"]),
        ("kacau", ["ka", "ca", "u"]),
        ("mau", ["ma", "u"]),
        ("mengganggu", ["meng", "gang", "gu"]),
        (
            "mempertanggungjawabkan",
            ["mem", "per", "tang", "gung", "ja", "wab", "kan"],
        ),
        ("langit", ["la", "ngit"]),
        ("jumat", ["ju", "mat"]),
        ("menyala!", ["me", "nya", "la!"]),
        ("salah!", ["sa", "lah!"]),
        ("cemerlang!", ["ce", "mer", "lang!"]),
    ],
)
def test_split_syllable(word, expected):
    assert split_syllable(word) == expected


def test_word_without_vowel_has_no_syllable():
    assert split_syllable("psst") == []


@pytest.mark.parametrize("char, expected", [("a", True), ("E", True), ("b", False), ("!", False)])
def test_is_vowel(char, expected):
    assert is_vowel(char) is expected