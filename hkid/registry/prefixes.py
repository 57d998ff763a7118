"""
registry/prefixes.py
--------------------
Registry of defined HKID prefixes and what each one denotes.

Reference: L/M (82) in RP 32/230/R of the Registration of Persons Office.
The general prefix grammar ``[A-Z]{1,2}`` is broader than this registry;
validation never consults it.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from hkid.core.errors import UnknownPrefixError


@dataclass(frozen=True)
class PrefixDescriptor:
    """
    Description of one defined prefix.

    Attributes:
        code:           The one- or two-letter prefix.
        description:    English description.
        tc_description: Traditional Chinese description.
    """
    code: str
    description: str
    tc_description: str


_NO_CHINESE_NAME = PrefixDescriptor(
    code="",
    description="ID card issues to person without a Chinese name before 27 March 1983",
    tc_description="1983年3月27日前沒有中文姓名的新登記身份證人士。",
)

_DESCRIPTORS: Tuple[PrefixDescriptor, ...] = (
    PrefixDescriptor(
        "A",
        "Original ID cards, issued between 1949 and 1962, most holders were born before 1950",
        "首批身份證，1949-1962年間在簽發，大部份人在1950年代之前出生。",
    ),
    PrefixDescriptor(
        "B",
        "Issued between 1955 and 1960 in city offices",
        "1955-1960年間在市區辦事處簽發。",
    ),
    PrefixDescriptor(
        "C",
        "Issued between 1960 and 1983 in NT offices, if a child most born between 1946 and 1971, "
        "principally HK born",
        "1960-1983年間在新界辦事處簽發，如小童申請人多於1946-1971年間出生，以香港出生者為主。",
    ),
    PrefixDescriptor(
        "D",
        "Issued between 1960 and 1983 at HK Island office, if a child most born between, "
        "principally HK born",
        "1960-1983年間在港島辦事處簽發，如小童申請人多於1946-1971年間出生，以香港出生者為主。",
    ),
    PrefixDescriptor(
        "E",
        "Issued between 1955 and 1969 in Kowloon offices, if a child most born between 1946 and 1962, "
        "principally HK born",
        "1955-1969年間在九龍辦事處簽發，如小童申請人多於1946-1962年間出生，以香港出生者為主。",
    ),
    PrefixDescriptor(
        "F",
        "First issue of a card commencing from 24 February 2020",
        "2020年2月24日起首次獲簽發身份證的人士。",
    ),
    PrefixDescriptor(
        "G",
        "Issued between 1967 and 1983 in Kowloon offices, if a child most born between 1956 and 1971",
        "1967-1983年間在九龍辦事處簽發，如小童申請人多於1956-1971年間出生。",
    ),
    PrefixDescriptor(
        "H",
        "Issued between 1979 and 1983 in HK Island offices, if a child most born between 1968 and 1971, "
        "principally HK born",
        "1979-1983年間在港島辦事處簽發，如小童申請人多於1968-1971年間出生，以香港以外出生者為主。",
    ),
    PrefixDescriptor(
        "J",
        "Consular officers after 23 October 1991",
        "1991年10月23日開始簽發予領事館僱員。",
    ),
    PrefixDescriptor(
        "K",
        "First issue of an ID card between 28 March 1983 and 31 July 1990, "
        "if a child most born between 1972 and 1979",
        "1983年3月28日至1990年7月31日首次獲簽發身份證的人士，如小童申請人多於1972年至1979年6月在香港出生。",
    ),
    PrefixDescriptor(
        "L",
        "Issued between 1983 and 2003, used when computer system malfunctioned",
        "1983-2003年間簽發，電腦系統故障時使用的備用號碼。2003年6月23日起停用。",
    ),
    PrefixDescriptor(
        "M",
        "First issue of ID card between 1 August 2011 and 23 February 2020",
        "2011年8月1日至2020年2月23日首次獲簽發身份證的人士，如小童申請人多於2000年起在香港以外出生。",
    ),
    PrefixDescriptor(
        "N",
        "Birth registered in Hong Kong after 1 June 2019",
        "2019年6月1日起於香港登記出生的人士。",
    ),
    PrefixDescriptor(
        "P",
        "First issue of an ID card between 1 August 1990 and 27 December 2000, "
        "if a child most born between July and December 1979",
        "1990年8月1日至2000年12月27日首次獲簽發身份證的人士，如小童申請人多於1979年7月至12月在香港出生，"
        "或1980年代在香港以外出生。",
    ),
    PrefixDescriptor(
        "R",
        "First issue of an ID card between 28 December 2000 and 31 July 2011",
        "2000年12月28日至2011年7月31日首次獲簽發身份證的人士，以香港以外出生者為主。",
    ),
    PrefixDescriptor(
        "S",
        "Birth registered in Hong Kong between 1 April 2005 and 31 May 2019",
        "2005年4月1日至2019年5月31日於香港登記出生的人士。",
    ),
    PrefixDescriptor(
        "T",
        "Issued between 1983 and 1997, used when computer system malfunctioned",
        "1983-1997年間簽發，電腦系統故障時使用的備用號碼。1997年7月1日起停用。",
    ),
    PrefixDescriptor(
        "V",
        'Child under 11 issued with a "Document of Identity for Visa Purposes" '
        "between 28 March 1983 and 31 August 2003",
        "1983年3月28日至2003年8月31日獲簽發簽證身份書的11歲以下兒童。",
    ),
    PrefixDescriptor(
        "W",
        "First issue to a foreign labourer or foreign domestic helper "
        "between 10 November 1989 and 1 January 2009",
        "1989年11月10日至2009年1月1日首次獲簽發身份證的外籍勞工及外籍家庭傭工。",
    ),
    PrefixDescriptor(
        "Y",
        "Birth registered in Hong Kong between 1 January 1989 and 31 March 2005",
        "1989年1月1日至2005年3月31日於香港登記出生的人士。",
    ),
    PrefixDescriptor(
        "Z",
        "Birth registered in Hong Kong between 1 January 1980 and 31 December 1988",
        "1980年1月1日至1988年12月31日於香港登記出生的人士。",
    ),
    PrefixDescriptor(
        "WX",
        "First issue to a foreign labourer or foreign domestic helper since 2 January 2009",
        "2009年1月2日起首次獲簽發身份證的外籍勞工及外籍家庭傭工。",
    ),
) + tuple(
    PrefixDescriptor(code, _NO_CHINESE_NAME.description, _NO_CHINESE_NAME.tc_description)
    for code in ("XA", "XB", "XC", "XD", "XE", "XG", "XH")
)
# U (pseudo ID for neonates born in public hospitals) is not issued on cards.

DEFINED_PREFIXES: Mapping[str, PrefixDescriptor] = MappingProxyType(
    {descriptor.code: descriptor for descriptor in _DESCRIPTORS}
)

DEFINED_PREFIX_CODES: Tuple[str, ...] = tuple(DEFINED_PREFIXES)


def is_defined_prefix(prefix: str) -> bool:
    """Return ``True`` if *prefix* (any case) is a defined prefix code."""
    return isinstance(prefix, str) and prefix.upper() in DEFINED_PREFIXES


def get_prefix_descriptor(prefix: str) -> PrefixDescriptor:
    """
    Look up the descriptor for *prefix*, normalised to upper case.

    Raises:
        UnknownPrefixError: If *prefix* is not a defined code.
    """
    key = prefix.upper() if isinstance(prefix, str) else prefix
    try:
        return DEFINED_PREFIXES[key]
    except (KeyError, TypeError):
        raise UnknownPrefixError(str(prefix)) from None


def describe_prefix(prefix: str, localized: bool = False) -> str:
    """Return the English (or Traditional Chinese) description of *prefix*."""
    descriptor = get_prefix_descriptor(prefix)
    return descriptor.tc_description if localized else descriptor.description
