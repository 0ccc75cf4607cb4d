import pytest

from pystrit import is_word_separator, word_iter


def test_digits_and_letters_are_words():
    it = word_iter("1 2 3 a b c")

    assert [str(v) for v in it] == ["1", "2", "3", "a", "b", "c"]
    assert word_iter("1 2 3 a b c").count() == 6


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Hello, world! 42x", ["Hello", "world", "42x"]),
        ("naïve café—über", ["naïve", "café", "über"]),
        ("snake_case-and.dots", ["snake", "case", "and", "dots"]),
        ("½ Ⅻ", ["½", "Ⅻ"]),
        ("...", []),
        ("", []),
    ],
)
def test_word_boundaries(text, expected):
    assert [str(v) for v in word_iter(text)] == expected


def test_combining_vowel_signs_stay_inside_words():
    # Vowel signs are Alphabetic; the virama is not.
    assert [str(v) for v in word_iter("हिन्दी")] == ["हि", "दी"]
    assert [str(v) for v in word_iter("नमस्ते दुनिया")] == ["नमस", "ते", "दुनिया"]


@pytest.mark.parametrize(
    "ch,expected",
    [
        ("a", False),
        ("7", False),
        ("é", False),
        ("ि", False),
        (" ", True),
        ("-", True),
        ("्", True),
        ("😀", True),
    ],
)
def test_is_word_separator(ch, expected):
    assert is_word_separator(ch) is expected


def test_word_iterators_are_independent():
    text = "alpha beta gamma"
    a = word_iter(text)
    b = word_iter(text)

    assert a.next_view().text == "alpha"
    assert a.next_view().text == "beta"
    assert b.next_view().text == "alpha"
    assert a.next_view().text == "gamma"
    assert b.next_view().text == "beta"
