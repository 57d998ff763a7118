"""core sub-package — errors, layouts, checksum, the HKIDNumber record and configuration."""

from hkid.core.errors import (
    HKIDError,
    InvalidCheckDigitError,
    InvalidHKIDNumberFormatError,
    UnknownPrefixError,
)
from hkid.core.formats import Format, RecognizedNumber, recognize
from hkid.core.checksum import compute_check_digit, verify_check_digit
from hkid.core.number import HKIDNumber
from hkid.core.result_schema import ParseResult, ParseStatus
from hkid.core.validation import parse_hkid, validate_check_digit
from hkid.core.config import HKIDConfig, DEFAULT_CONFIG, load_config

__all__ = [
    "HKIDError",
    "InvalidCheckDigitError",
    "InvalidHKIDNumberFormatError",
    "UnknownPrefixError",
    "Format",
    "RecognizedNumber",
    "recognize",
    "compute_check_digit",
    "verify_check_digit",
    "HKIDNumber",
    "ParseResult",
    "ParseStatus",
    "parse_hkid",
    "validate_check_digit",
    "HKIDConfig",
    "DEFAULT_CONFIG",
    "load_config",
]
