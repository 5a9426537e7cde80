"""String puzzles: Roman numerals and bracket matching."""

from __future__ import annotations

__all__ = ["roman_to_int", "is_valid_parentheses"]

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

# A numeral is subtracted when the larger numeral seen just after it is one of these.
_SUBTRACTS_BEFORE = {"I": "VX", "X": "LC", "C": "DM"}

_PAIRS = {")": "(", "}": "{", "]": "["}


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer, reading right to left.

    Characters that are not upper-case Roman digits are ignored.
    """
    total = 0
    prev = ""
    for ch in reversed(s):
        value = _VALUES.get(ch)
        if value is None:
            continue
        if prev and prev in _SUBTRACTS_BEFORE.get(ch, ""):
            total -= value
        else:
            total += value
            prev = ch
    return total


def is_valid_parentheses(s: str) -> bool:
    """Return True if every opening bracket in ``s`` is closed.

    A closing character that does not match the innermost open bracket is
    skipped while a bracket is open; any closing or other character met
    with no bracket open makes the string invalid.
    """
    stack: list[str] = []
    for ch in s:
        if ch in "({[":
            stack.append(ch)
        elif stack:
            if _PAIRS.get(ch) == stack[-1]:
                stack.pop()
        else:
            return False
    return not stack