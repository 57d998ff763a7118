"""
core/checksum.py
----------------
Weighted modulus-11 check digit used by Hong Kong Identity Card numbers.

The eight positions of ``XX123456`` carry weights 9 down to 2.  Letters are
valued ``(index + 10) % 11`` with ``'A'`` as index 0; digits carry their face
value.  A one-letter prefix occupies the weight-8 slot and the empty
weight-9 slot contributes a fixed :data:`SINGLE_LETTER_PREFIX_CONTRIBUTION`.

The remainder of the weighted sum modulo 11 maps to the check digit:
``0 -> '0'``, ``1 -> 'A'`` and ``r -> str(11 - r)`` otherwise.
"""

from __future__ import annotations

from typing import Any, Tuple

from hkid.core.errors import InvalidHKIDNumberFormatError
from hkid.core.formats import NUMERALS_PATTERN, PREFIX_PATTERN

MODULUS = 11

# Weights for the two prefix slots followed by the six numeral slots.
PREFIX_WEIGHTS: Tuple[int, int] = (9, 8)
NUMERAL_WEIGHTS: Tuple[int, ...] = (7, 6, 5, 4, 3, 2)

# An absent leading letter is valued 36: (36 % 11) * 9 % 11 == 5.
SINGLE_LETTER_PREFIX_CONTRIBUTION = 5


def letter_value(letter: str) -> int:
    """Return the checksum value of an upper-case letter (``'A'`` is 10)."""
    return (ord(letter) - ord("A") + 10) % MODULUS


def weighted_sum(prefix: str, numerals: str) -> int:
    """
    Compute the weighted (unreduced) sum over a prefix and its numerals.

    Every term is reduced modulo 11 before accumulation.
    """
    total = 0
    if len(prefix) == 1:
        total += SINGLE_LETTER_PREFIX_CONTRIBUTION
        letters = zip(PREFIX_WEIGHTS[1:], prefix)
    else:
        letters = zip(PREFIX_WEIGHTS, prefix)

    for weight, letter in letters:
        total += letter_value(letter) * weight % MODULUS

    for weight, digit in zip(NUMERAL_WEIGHTS, numerals):
        total += (int(digit) % MODULUS) * weight % MODULUS

    return total


def compute_check_digit(prefix: Any, numerals: Any) -> str:
    """
    Compute the check digit for an HKID prefix and numerals pair.

    Args:
        prefix:   One or two letters; lower case is accepted.
        numerals: Exactly six ASCII digits.

    Returns:
        One of ``'0'``-``'9'`` or ``'A'``.

    Raises:
        InvalidHKIDNumberFormatError: If either part is malformed.
    """
    if (
        not isinstance(prefix, str)
        or not prefix.isascii()
        or PREFIX_PATTERN.fullmatch(prefix.upper()) is None
    ):
        raise InvalidHKIDNumberFormatError(f"Invalid prefix format: {prefix}", value=prefix)
    if not isinstance(numerals, str) or NUMERALS_PATTERN.fullmatch(numerals) is None:
        raise InvalidHKIDNumberFormatError(
            f"Numerals must be exactly 6 digits long: {numerals}", value=numerals
        )

    remainder = weighted_sum(prefix.upper(), numerals) % MODULUS
    if remainder == 0:
        return "0"
    if remainder == 1:
        # 11 - 1 = 10, written as 'A'
        return "A"
    return str(MODULUS - remainder)


def verify_check_digit(prefix: Any, numerals: Any, candidate: Any) -> bool:
    """
    Return ``True`` if *candidate* equals the computed check digit.

    The comparison is against the single-character string form, so ``3`` and
    ``"3"`` are both accepted while ``"a"`` does not match ``"A"``.
    """
    return compute_check_digit(prefix, numerals) == str(candidate)
