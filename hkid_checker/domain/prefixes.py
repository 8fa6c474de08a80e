"""Catalog of historically issued HKID prefixes."""
from __future__ import annotations

from string import ascii_uppercase
from types import MappingProxyType
from typing import Iterable, Iterator

from .models import Prefix, PrefixKind
from .random_source import RandomSource

_WITHOUT_CHINESE_NAME = "Persons without Chinese names issued before 27 Mar 1983"

KNOWN_PREFIX_DESCRIPTIONS: tuple[tuple[str, str], ...] = (
    ("A", "Original ID cards, issued between 1949 and 1962, most holders born before 1950"),
    ("B", "Issued between 1955 and 1960 in city offices"),
    ("C", "Issued between 1960 and 1983 in NT offices, mostly HK-born children (1946-1971)"),
    ("D", "Issued between 1960 and 1983 at HK Island offices, mostly HK-born children"),
    ("E", "Issued between 1955 and 1969 in Kowloon offices, mostly HK-born children (1946-1962)"),
    ("F", "First issue of a card commencing from 24 February 2020"),
    ("G", "Issued between 1967 and 1983 in Kowloon offices, children born 1956-1971"),
    ("H", "Issued between 1979 and 1983 in HK Island offices, children born 1968-1971"),
    ("J", "Consular officers"),
    ("K", "First issue (1983 - 1990), children born 1972-1979"),
    ("L", "Issued between 1983 and 2003 during computer malfunctions, very few holders"),
    ("M", "First issue (2011 - 23 Feb 2020)"),
    ("N", "Birth registered in Hong Kong after 1 June 2019"),
    ("P", "First issue (1990 - 2000), children mostly born July-Dec 1979"),
    ("R", "First issue (2000 - 2011)"),
    ("S", "Birth registered in Hong Kong (1 Apr 2005 - 31 May 2019)"),
    ("T", "Issued between 1983 and 1997 during computer malfunctions, very few holders"),
    ("V", 'Child under 11 issued "Document of Identity for Visa Purposes" (1983 - 2003)'),
    ("W", "First issue to foreign laborer/domestic helper (10 Nov 1989 - 1 Jan 2009)"),
    ("Y", "Birth registered in Hong Kong (1 Jan 1989 - 31 Mar 2005)"),
    ("Z", "Birth registered in Hong Kong (1 Jan 1980 - 31 Dec 1988)"),
    ("EC", "European Community officers and dependents (1993 - 2003)"),
    ("WX", "Foreign laborers/domestic helpers issued since 2 Jan 2009"),
    ("XA", _WITHOUT_CHINESE_NAME),
    ("XB", _WITHOUT_CHINESE_NAME),
    ("XC", _WITHOUT_CHINESE_NAME),
    ("XD", _WITHOUT_CHINESE_NAME),
    ("XE", _WITHOUT_CHINESE_NAME),
    ("XG", _WITHOUT_CHINESE_NAME),
    ("XH", _WITHOUT_CHINESE_NAME),
)

# 26 single letters followed by 26 * 26 letter pairs
UNKNOWN_PREFIX_SPACE = len(ascii_uppercase) + len(ascii_uppercase) ** 2


class PrefixCatalog:
    """Immutable lookup table of recognized prefixes.

    Lookups are case-sensitive; callers upper-case input before asking.
    Random selection draws from an injected :class:`RandomSource` so the
    catalog itself holds no mutable state.
    """

    def __init__(self, entries: Iterable[tuple[str, str]] = KNOWN_PREFIX_DESCRIPTIONS) -> None:
        prefixes = tuple(Prefix(code=code, kind=PrefixKind.KNOWN, description=description) for code, description in entries)
        if not prefixes:
            raise ValueError("Prefix catalog cannot be empty")
        self._ordered = prefixes
        self._by_code = MappingProxyType({prefix.code: prefix for prefix in prefixes})

    def lookup(self, text: str) -> Prefix | None:
        return self._by_code.get(text)

    def resolve(self, text: str) -> Prefix:
        """Return the catalogued prefix, or an unknown prefix for any other well-formed code."""
        known = self.lookup(text)
        if known is not None:
            return known
        return Prefix(code=text, kind=PrefixKind.UNKNOWN)

    def describe(self, text: str) -> str | None:
        known = self.lookup(text)
        return known.description if known else None

    def random_known_prefix(self, random_source: RandomSource) -> Prefix:
        return self._ordered[random_source.randbelow(len(self._ordered))]

    def random_unknown_prefix(self, random_source: RandomSource) -> Prefix:
        """Draw uniformly among all 702 one- and two-letter codes, catalogued or not."""
        index = random_source.randbelow(UNKNOWN_PREFIX_SPACE)
        letters = len(ascii_uppercase)
        if index < letters:
            code = ascii_uppercase[index]
        else:
            first, second = divmod(index - letters, letters)
            code = ascii_uppercase[first] + ascii_uppercase[second]
        return self.resolve(code)

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(prefix.code for prefix in self._ordered)

    def __iter__(self) -> Iterator[Prefix]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, text: object) -> bool:
        return text in self._by_code


DEFAULT_CATALOG = PrefixCatalog()
KNOWN_PREFIXES = DEFAULT_CATALOG.codes
