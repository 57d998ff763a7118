import pytest

from hkid.core.checksum import verify_check_digit
from hkid.core.errors import InvalidCheckDigitError, InvalidHKIDNumberFormatError
from hkid.core.number import HKIDNumber
from hkid.core.result_schema import ParseStatus
from hkid.core.validation import parse_hkid, validate_check_digit


@pytest.mark.parametrize("text, digit, expected", [
    ("A123456", "3", True),
    ("a123456", "3", True),
    ("WX123456", "9", True),
    ("A000002", "A", True),
    ("A123456", "7", False),
    ("A12345", "3", False),
    ("A1234563", "3", False),
    ("A123456(3)", "3", False),
    ("A123456", 3, True),
    ("A000002", "a", False),
    ("A123456", None, False),
    (None, "3", False),
    ("", "3", False),
    ("#$123456", "3", False),
])
def test_validate_check_digit(text, digit, expected):
    assert validate_check_digit(text, digit) is expected


def test_parse_valid():
    result = parse_hkid("a123456(3)")
    assert result.ok
    assert result.status is ParseStatus.VALID
    assert result.number == HKIDNumber("A123456")
    assert result.error is None
    assert result.raise_for_status() == result.number


def test_parse_invalid_format():
    result = parse_hkid("01234567")
    assert not result.ok
    assert result.status is ParseStatus.INVALID_FORMAT
    assert result.number is None
    assert "01234567" in result.error
    with pytest.raises(InvalidHKIDNumberFormatError):
        result.raise_for_status()


def test_parse_invalid_check_digit():
    result = parse_hkid("A123456(7)")
    assert result.status is ParseStatus.INVALID_CHECK_DIGIT
    assert result.number is None
    with pytest.raises(InvalidCheckDigitError):
        result.raise_for_status()


def test_parse_none_is_invalid_format():
    assert parse_hkid(None).status is ParseStatus.INVALID_FORMAT


def test_parse_result_to_dict():
    data = parse_hkid("WX1234569").to_dict()
    assert data == {
        "input": "WX1234569",
        "status": "valid",
        "prefix": "WX",
        "numerals": "123456",
        "check_digit": "9",
        "normalized": "WX123456(9)",
        "defined_prefix": True,
        "error": None,
    }


def test_parse_result_to_json():
    payload = parse_hkid("A123456(7)").to_json()
    assert '"status": "invalid_check_digit"' in payload


@pytest.mark.parametrize("digit", ["3", 3, "7", 7, "a", None])
def test_validate_check_digit_agrees_with_verify_check_digit(digit):
    assert validate_check_digit("A123456", digit) is verify_check_digit("A", "123456", digit)
