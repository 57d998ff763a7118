"""
core/number.py
--------------
The :class:`HKIDNumber` record: a prefix, six numerals, and the check digit
derived from them.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, Optional, Union

from hkid.core.checksum import compute_check_digit
from hkid.core.errors import InvalidCheckDigitError, InvalidHKIDNumberFormatError
from hkid.core.formats import NUMERALS_PATTERN, PREFIX_PATTERN, Format, recognize
from hkid.registry.prefixes import describe_prefix, is_defined_prefix

logger = logging.getLogger(__name__)


class HKIDNumber:
    """
    A validated Hong Kong Identity Card number.

    Construct one by parsing text in any of the three layouts::

        HKIDNumber("A123456")       # no check digit, computed
        HKIDNumber("a1234563")      # check digit verified
        HKIDNumber("A123456(3)")    # check digit verified

    or from its parts with :meth:`from_parts`.  The check digit is always
    derived from ``prefix`` and ``numerals``; assigning either property
    changes it accordingly.

    Raises:
        InvalidHKIDNumberFormatError: If the text matches no layout.
        InvalidCheckDigitError:       If an embedded check digit is wrong.
    """

    __slots__ = ("_prefix", "_numerals")

    def __init__(self, hkid_number: str) -> None:
        recognized = recognize(hkid_number)

        self._prefix: str = recognized.prefix
        self._numerals: str = recognized.numerals

        if recognized.check_digit is not None and recognized.check_digit != self.check_digit:
            logger.debug(
                "Rejected %r: check digit %s, expected %s",
                hkid_number, recognized.check_digit, self.check_digit,
            )
            raise InvalidCheckDigitError(hkid_number, expected=self.check_digit)

    @classmethod
    def from_parts(
        cls,
        prefix: Optional[str],
        numerals: Optional[str],
        check_digit: Optional[str] = None,
    ) -> "HKIDNumber":
        """
        Build a number from its parts.

        The parts are concatenated and parsed like any other input, so a
        supplied ``check_digit`` is verified rather than trusted.
        """
        return cls("".join(part or "" for part in (prefix, numerals, check_digit)))

    @classmethod
    def generate(
        cls,
        only_defined_prefix: Optional[bool] = True,
        rng: Optional[random.Random] = None,
    ) -> "HKIDNumber":
        """Shortcut for :func:`~hkid.generation.generator.gen_random_hkid_number`."""
        from hkid.generation.generator import gen_random_hkid_number

        return gen_random_hkid_number(only_defined_prefix, rng=rng)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def prefix(self) -> str:
        return self._prefix

    @prefix.setter
    def prefix(self, value: str) -> None:
        if not isinstance(value, str) or not value:
            raise InvalidHKIDNumberFormatError(
                "Prefix of HKID Number cannot be null or empty.", value=value
            )
        normalized = value.upper()
        if not value.isascii() or PREFIX_PATTERN.fullmatch(normalized) is None:
            raise InvalidHKIDNumberFormatError(f"Invalid prefix format: {value}", value=value)
        self._prefix = normalized

    @property
    def numerals(self) -> str:
        return self._numerals

    @numerals.setter
    def numerals(self, value: str) -> None:
        if not isinstance(value, str) or not value:
            raise InvalidHKIDNumberFormatError(
                "Numerals of HKID Number cannot be null or empty.", value=value
            )
        if NUMERALS_PATTERN.fullmatch(value) is None:
            raise InvalidHKIDNumberFormatError(
                f"Numerals must be exactly 6 digits long: {value}", value=value
            )
        self._numerals = value

    @property
    def check_digit(self) -> str:
        """The check digit, ``'0'``-``'9'`` or ``'A'``, computed on access."""
        return compute_check_digit(self._prefix, self._numerals)

    def set_prefix(self, value: str) -> None:
        self.prefix = value

    def set_numerals(self, value: str) -> None:
        self.numerals = value

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def format(self, fmt: Union[Format, str, None] = None) -> str:
        """
        Render the number in one of the :class:`~hkid.core.formats.Format`
        layouts.  Defaults to :attr:`Format.WITHOUT_CHECK_DIGIT`.
        """
        return Format.from_name(fmt).render(self._prefix, self._numerals, self.check_digit)

    @property
    def has_defined_prefix(self) -> bool:
        return is_defined_prefix(self._prefix)

    def get_prefix_description(self, localized: bool = False) -> str:
        """
        Describe the prefix using the defined-prefix registry.

        Args:
            localized: Return the Traditional Chinese description instead of
                       the English one.

        Raises:
            UnknownPrefixError: If the prefix is valid but not a defined code.
        """
        return describe_prefix(self._prefix, localized=localized)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prefix": self._prefix,
            "numerals": self._numerals,
            "check_digit": self.check_digit,
            "formatted": self.format(Format.COMPLETE),
        }

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"HKIDNumber({self.format(Format.COMPLETE)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HKIDNumber):
            return NotImplemented
        return (self._prefix, self._numerals) == (other._prefix, other._numerals)

    __hash__ = None  # mutable
