"""
core/errors.py
--------------
Exception hierarchy for HKID parsing and validation.

Both :class:`InvalidHKIDNumberFormatError` and :class:`InvalidCheckDigitError`
are expected, recoverable conditions.  Calling code should catch them (or use
:func:`~hkid.core.validation.parse_hkid` to receive a result object instead).
"""

from __future__ import annotations

from typing import Any, Optional


class HKIDError(ValueError):
    """Base class for every error raised by the hkid package."""


class InvalidHKIDNumberFormatError(HKIDError):
    """
    Raised when an HKID number, prefix or numerals value does not match its
    textual grammar (including ``None``, empty and non-string input).

    Attributes:
        value: The offending raw text or field value.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        self.value = value
        super().__init__(message)


class InvalidCheckDigitError(HKIDError):
    """
    Raised when an HKID number embeds a check digit that differs from the
    digit computed from its prefix and numerals.

    Attributes:
        value:    The original input text.
        expected: The computed check digit.
    """

    def __init__(self, value: str, expected: Optional[str] = None) -> None:
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid check digit for HKID number: {value}")


class UnknownPrefixError(HKIDError, KeyError):
    """Raised when a prefix has no entry in the defined-prefix registry."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(f"Prefix {prefix!r} is not a defined HKID prefix.")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
