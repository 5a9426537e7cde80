"""Integer puzzles: ugly numbers and palindromic integers."""

from __future__ import annotations

__all__ = [
    "is_ugly",
    "is_ugly_by_division",
    "is_palindrome",
    "is_palindrome_by_reversal",
]


def is_ugly(n: int) -> bool:
    """Return True if ``n`` is positive and has no prime factor above 5.

    Uses trial division by odd numbers up to the square root.
    """
    if n < 1:
        return False
    if n == 1:
        return True
    while n % 2 == 0:
        n //= 2
    divisor = 3
    while divisor * divisor <= n:
        while n % divisor == 0:
            if divisor > 5:
                return False
            n //= divisor
        divisor += 2
    return n <= 5


def is_ugly_by_division(n: int) -> bool:
    """Return True if dividing out 2, 3 and 5 leaves exactly 1."""
    if n == 0:
        return False
    for factor in (2, 3, 5):
        while n % factor == 0:
            n //= factor
    return n == 1


def is_palindrome(x: int) -> bool:
    """Return True if the decimal digits of ``x`` read the same both ways.

    Negative numbers are never palindromes.
    """
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def is_palindrome_by_reversal(n: int) -> bool:
    """Return True if reversing the digits of ``n`` gives ``n`` back.

    The sign is kept while reversing, so a negative number whose digits
    form a palindrome counts as one.
    """
    sign = -1 if n < 0 else 1
    reversed_value = sign * int(str(abs(n))[::-1])
    return reversed_value == n