"""
core/formats.py
---------------
The three textual layouts an HKID number may take, and the recogniser that
classifies an input string into exactly one of them.

===========================  ===============  ===============
Layout                       Example          Check digit
===========================  ===============  ===============
``WITHOUT_CHECK_DIGIT``      ``A123456``      absent
``WITHOUT_PARENTHESES``      ``A1234563``     trailing
``COMPLETE``                 ``A123456(3)``   parenthesised
===========================  ===============  ===============
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from hkid.core.errors import InvalidHKIDNumberFormatError


PREFIX_PATTERN = re.compile(r"[A-Z]{1,2}")
NUMERALS_PATTERN = re.compile(r"[0-9]{6}")


class Format(Enum):
    """Layouts for parsing and rendering, in recognition order."""

    WITHOUT_CHECK_DIGIT = (
        "without_check_digit",
        "{prefix}{numerals}",
        r"([A-Z]{1,2})([0-9]{6})",
    )
    WITHOUT_PARENTHESES = (
        "without_parentheses",
        "{prefix}{numerals}{check_digit}",
        r"([A-Z]{1,2})([0-9]{6})([0-9A])",
    )
    COMPLETE = (
        "complete",
        "{prefix}{numerals}({check_digit})",
        r"([A-Z]{1,2})([0-9]{6})\(([0-9A])\)",
    )

    def __init__(self, label: str, template: str, pattern: str) -> None:
        self.label = label
        self.template = template
        self.regex = re.compile(pattern)

    @property
    def has_check_digit(self) -> bool:
        return self is not Format.WITHOUT_CHECK_DIGIT

    def render(self, prefix: str, numerals: str, check_digit: str) -> str:
        return self.template.format(
            prefix=prefix, numerals=numerals, check_digit=check_digit
        )

    @classmethod
    def from_name(cls, name: Any) -> "Format":
        """
        Resolve a layout from its enum name, label, or hyphenated CLI spelling.

        ``None`` resolves to :attr:`WITHOUT_CHECK_DIGIT`; a :class:`Format`
        is returned unchanged.

        Raises:
            ValueError: If *name* does not identify a layout.
        """
        if name is None:
            return cls.WITHOUT_CHECK_DIGIT
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "_")
        for fmt in cls:
            if fmt.label == key:
                return fmt
        raise ValueError(
            f"Unknown HKID format {name!r}. "
            f"Valid formats: {[fmt.label for fmt in cls]}"
        )


@dataclass(frozen=True)
class RecognizedNumber:
    """The layout matched by :func:`recognize` and its captured fields."""

    format: Format
    prefix: str
    numerals: str
    check_digit: Optional[str] = None


def recognize(text: Any) -> RecognizedNumber:
    """
    Classify *text* into one of the :class:`Format` layouts.

    The input is upper-cased before matching, so recognition is
    case-insensitive.  Only ASCII input is considered; non-ASCII letters
    such as ``"\u00df"`` are rejected rather than folded into ``"SS"``.

    Args:
        text: Candidate HKID number string.

    Returns:
        A :class:`RecognizedNumber` with the layout and captured groups.
        ``check_digit`` is ``None`` for :attr:`Format.WITHOUT_CHECK_DIGIT`.

    Raises:
        InvalidHKIDNumberFormatError: If *text* is not a non-empty string or
            matches none of the layouts.
    """
    if not isinstance(text, str) or not text:
        raise InvalidHKIDNumberFormatError(
            "HKID number cannot be null or empty.", value=text
        )

    if not text.isascii():
        raise InvalidHKIDNumberFormatError(
            f"Invalid format for HKID number: {text}", value=text
        )

    candidate = text.upper()
    for fmt in Format:
        match = fmt.regex.fullmatch(candidate)
        if match is None:
            continue
        check_digit = match.group(3) if fmt.has_check_digit else None
        return RecognizedNumber(fmt, match.group(1), match.group(2), check_digit)

    raise InvalidHKIDNumberFormatError(
        f"Invalid format for HKID number: {text}", value=text
    )
