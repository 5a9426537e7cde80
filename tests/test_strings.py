import pytest

from dsakit.strings import is_valid_parentheses, roman_to_int


def test_roman_worked_example():
    assert roman_to_int("MCMXCIV") == 1994


@pytest.mark.parametrize("numeral", ["I", "V", "X", "L", "C", "D", "M"])
def test_roman_repetition_is_additive(numeral):
    single = roman_to_int(numeral)
    assert roman_to_int(numeral * 3) == 3 * single


@pytest.mark.parametrize(
    "small, large",
    [("I", "V"), ("I", "X"), ("X", "L"), ("X", "C"), ("C", "D"), ("C", "M")],
)
def test_roman_subtractive_pairs(small, large):
    assert roman_to_int(small + large) == roman_to_int(large) - roman_to_int(small)


@pytest.mark.parametrize("small, large", [("I", "L"), ("V", "X"), ("X", "D")])
def test_roman_non_subtractive_pairs_add(small, large):
    assert roman_to_int(small + large) == roman_to_int(large) + roman_to_int(small)


def test_roman_empty_string():
    assert roman_to_int("") == 0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()[]{}", True),
        ("(]", False),
        ("()", True),
        ("{[()]}", True),
        ("((", False),
        (")", False),
        ("", True),
    ],
)
def test_valid_parentheses(text, expected):
    assert is_valid_parentheses(text) is expected


def test_mismatched_closer_inside_open_bracket_is_skipped():
    assert is_valid_parentheses("(])") is True


def test_stray_character_with_nothing_open_is_invalid():
    assert is_valid_parentheses("a()") is False


def test_closing_after_everything_closed_is_invalid():
    assert is_valid_parentheses("())") is False