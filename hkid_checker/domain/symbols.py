"""Symbols printed on an HKID card below the holder's date of birth."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_LOST_CARD = re.compile(r"L(?P<times>[0-9]+)")
_OFFICE_CODE = re.compile(r"[A-Z][0-9]")
MAX_LOST_COUNT = 255


class CardSymbol(Enum):
    ADULT_REENTRY_PERMIT = ("***", "The holder is aged 18 or over and eligible for a Hong Kong Re-entry Permit")
    YOUTH_REENTRY_PERMIT = ("*", "The holder is aged between 11 and 17 and eligible for a Hong Kong Re-entry Permit")
    RIGHT_OF_ABODE = ("A", "The holder has the right of abode in Hong Kong")
    BIRTH_DATE_OR_PLACE_CHANGED = ("B", "The holder's reported date/place of birth has changed since first registration")
    STAY_LIMITED = ("C", "The holder's stay in Hong Kong is limited by the Director of Immigration at registration")
    NAME_CHANGED = ("N", "The holder's reported name has changed since first registration")
    BORN_OUTSIDE_HK_CHINA_MACAU = ("O", "The holder was born outside Hong Kong, Mainland China, or Macau")
    RIGHT_TO_LAND = ("R", "The holder has the right to land in Hong Kong")
    STAY_UNLIMITED = ("U", "The holder's stay in Hong Kong is not limited by the Director of Immigration")
    BORN_IN_MACAU = ("W", "The holder's reported place of birth is Macau")
    BORN_IN_MAINLAND_CHINA = ("X", "The holder's reported place of birth is Mainland China")
    BIRTH_DATE_CONFIRMED = ("Y", "The holder's date of birth has been confirmed by birth certificate or passport")
    BORN_IN_HONG_KONG = ("Z", "The holder's reported place of birth is Hong Kong")

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message


_BY_CODE = {symbol.code: symbol for symbol in CardSymbol}


@dataclass(frozen=True)
class SymbolInfo:
    code: str
    kind: str
    message: str
    lost_count: int | None = None
    symbol: CardSymbol | None = None


def parse_symbol(text: str) -> SymbolInfo:
    """Interpret a single card symbol such as ``***``, ``A``, ``L2`` or ``H1``."""
    code = text.strip()
    known = _BY_CODE.get(code)
    if known is not None:
        return SymbolInfo(code=code, kind="symbol", message=known.message, symbol=known)

    lost = _LOST_CARD.fullmatch(code)
    if lost and int(lost.group("times")) <= MAX_LOST_COUNT:
        times = int(lost.group("times"))
        label = "once" if times == 1 else "twice" if times == 2 else f"{times} times"
        return SymbolInfo(
            code=code,
            kind="lost_card",
            message=f"The holder has lost their ID card {label}",
            lost_count=times,
        )

    if _OFFICE_CODE.fullmatch(code):
        return SymbolInfo(code=code, kind="office_code", message=f"Issuing office code {code}")

    return SymbolInfo(code=code, kind="unknown", message="Unknown or custom symbol")
