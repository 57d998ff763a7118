"""
core/validation.py
------------------
Non-raising entry points: :func:`parse_hkid` returns a
:class:`~hkid.core.result_schema.ParseResult`, and :func:`validate_check_digit`
returns a plain ``bool``.
"""

from __future__ import annotations

import logging
from typing import Any

from hkid.core.errors import InvalidCheckDigitError, InvalidHKIDNumberFormatError
from hkid.core.formats import Format, recognize
from hkid.core.number import HKIDNumber
from hkid.core.result_schema import ParseResult, ParseStatus

logger = logging.getLogger(__name__)


def parse_hkid(text: Any) -> ParseResult:
    """
    Parse *text* without raising.

    Returns:
        A :class:`ParseResult` whose ``status`` distinguishes a valid number
        from a format failure and from a check digit mismatch.
    """
    try:
        number = HKIDNumber(text)
    except InvalidHKIDNumberFormatError as exc:
        return ParseResult(text, ParseStatus.INVALID_FORMAT, error=str(exc))
    except InvalidCheckDigitError as exc:
        return ParseResult(text, ParseStatus.INVALID_CHECK_DIGIT, error=str(exc))
    return ParseResult(text, ParseStatus.VALID, number=number)


def validate_check_digit(hkid_number: Any, check_digit: Any) -> bool:
    """
    Check a bare HKID number (prefix and numerals only) against a candidate
    check digit.

    Returns ``False`` rather than raising when *hkid_number* is malformed or
    already carries a check digit, with or without parentheses.

    Example::

        >>> validate_check_digit("A123456", "3")
        True
        >>> validate_check_digit("A123456", 3)
        True
        >>> validate_check_digit("A123456(3)", "3")
        False
    """
    try:
        recognized = recognize(hkid_number)
        if recognized.format is not Format.WITHOUT_CHECK_DIGIT:
            return False
        return HKIDNumber(hkid_number).check_digit == str(check_digit)
    except (InvalidHKIDNumberFormatError, InvalidCheckDigitError) as exc:
        logger.debug("Check digit validation failed for %r: %s", hkid_number, exc)
        return False
