import pytest

from hkid.core.errors import InvalidHKIDNumberFormatError
from hkid.core.formats import Format, recognize


def test_recognize_bare_layout():
    recognized = recognize("A123456")
    assert recognized.format is Format.WITHOUT_CHECK_DIGIT
    assert (recognized.prefix, recognized.numerals, recognized.check_digit) == ("A", "123456", None)


def test_recognize_suffixed_layout():
    recognized = recognize("AB1234569")
    assert recognized.format is Format.WITHOUT_PARENTHESES
    assert (recognized.prefix, recognized.numerals, recognized.check_digit) == ("AB", "123456", "9")


def test_recognize_parenthesized_layout():
    recognized = recognize("a123456(a)")
    assert recognized.format is Format.COMPLETE
    assert (recognized.prefix, recognized.numerals, recognized.check_digit) == ("A", "123456", "A")


@pytest.mark.parametrize("text", [
    "01234567",
    "#$123456",
    "AB12345(9)",
    "AB1234567(0)",
    "AB1C34567(9)",
    "AB1234567((9)",
    "AB1234567(9",
    "AB12345679)",
    "ABC123456",
    "A123456\n",
    " A123456",
    "\u00df123456",
    "\u0131123456",
    "A\uff11\uff12\uff13\uff14\uff15\uff16",
    "A123456(B)",
])
def test_recognize_rejects(text):
    with pytest.raises(InvalidHKIDNumberFormatError) as exc_info:
        recognize(text)
    assert exc_info.value.value == text
    assert text in str(exc_info.value)


@pytest.mark.parametrize("text", [None, "", 1234567])
def test_recognize_rejects_empty_and_non_string(text):
    with pytest.raises(InvalidHKIDNumberFormatError):
        recognize(text)


def test_render_templates():
    assert Format.WITHOUT_CHECK_DIGIT.render("A", "123456", "3") == "A123456"
    assert Format.WITHOUT_PARENTHESES.render("A", "123456", "3") == "A1234563"
    assert Format.COMPLETE.render("A", "123456", "3") == "A123456(3)"


@pytest.mark.parametrize("name, expected", [
    (None, Format.WITHOUT_CHECK_DIGIT),
    (Format.COMPLETE, Format.COMPLETE),
    ("complete", Format.COMPLETE),
    ("WITHOUT_PARENTHESES", Format.WITHOUT_PARENTHESES),
    ("without-check-digit", Format.WITHOUT_CHECK_DIGIT),
])
def test_from_name(name, expected):
    assert Format.from_name(name) is expected


def test_from_name_unknown():
    with pytest.raises(ValueError, match="Unknown HKID format"):
        Format.from_name("dashed")
