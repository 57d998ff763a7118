"""
core/result_schema.py
---------------------
Structured parse outcome for callers that prefer inspecting a result over
catching exceptions.

Classes
-------
* :class:`ParseStatus` — ``VALID``, ``INVALID_FORMAT`` or ``INVALID_CHECK_DIGIT``.
* :class:`ParseResult` — status, the parsed :class:`~hkid.core.number.HKIDNumber`
                         on success, and the error message otherwise.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from hkid.core.errors import InvalidCheckDigitError, InvalidHKIDNumberFormatError
from hkid.core.formats import Format
from hkid.core.number import HKIDNumber


class ParseStatus(str, Enum):
    VALID = "valid"
    INVALID_FORMAT = "invalid_format"
    INVALID_CHECK_DIGIT = "invalid_check_digit"


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parsing one candidate HKID number.

    Attributes:
        input:  The raw value that was parsed.
        status: The :class:`ParseStatus`.
        number: The parsed number when ``status`` is ``VALID``, else ``None``.
        error:  The error message when parsing failed, else ``None``.
    """

    input: Any
    status: ParseStatus
    number: Optional[HKIDNumber] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.VALID

    def raise_for_status(self) -> HKIDNumber:
        """
        Return the parsed number, or raise the error that parsing produced.

        Raises:
            InvalidHKIDNumberFormatError: For ``INVALID_FORMAT``.
            InvalidCheckDigitError:       For ``INVALID_CHECK_DIGIT``.
        """
        if self.status is ParseStatus.INVALID_FORMAT:
            raise InvalidHKIDNumberFormatError(self.error or "", value=self.input)
        if self.status is ParseStatus.INVALID_CHECK_DIGIT:
            raise InvalidCheckDigitError(str(self.input))
        return self.number  # type: ignore[return-value]

    def to_dict(self, fmt: Format = Format.COMPLETE) -> Dict[str, Any]:
        """
        Serialise to a plain dictionary.

        Args:
            fmt: Layout used for the ``normalized`` field.
        """
        return {
            "input": self.input,
            "status": self.status.value,
            "prefix": self.number.prefix if self.number else None,
            "numerals": self.number.numerals if self.number else None,
            "check_digit": self.number.check_digit if self.number else None,
            "normalized": self.number.format(fmt) if self.number else None,
            "defined_prefix": self.number.has_defined_prefix if self.number else False,
            "error": self.error,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False, default=str)
