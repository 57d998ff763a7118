"""
hkid — Hong Kong Identity Card number toolkit v0.1
"""

__version__ = "0.1.0"
__author__ = "hkid"

from hkid.core.errors import (
    HKIDError,
    InvalidCheckDigitError,
    InvalidHKIDNumberFormatError,
    UnknownPrefixError,
)
from hkid.core.formats import Format
from hkid.core.checksum import compute_check_digit, verify_check_digit
from hkid.core.number import HKIDNumber
from hkid.core.validation import parse_hkid, validate_check_digit
from hkid.generation.generator import HKIDGenerator, gen_random_hkid_number

__all__ = [
    "HKIDNumber",
    "Format",
    "HKIDError",
    "InvalidHKIDNumberFormatError",
    "InvalidCheckDigitError",
    "UnknownPrefixError",
    "compute_check_digit",
    "verify_check_digit",
    "parse_hkid",
    "validate_check_digit",
    "HKIDGenerator",
    "gen_random_hkid_number",
    "__version__",
]
