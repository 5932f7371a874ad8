"""
Pali symbol inventory and the IPE hub encoding.

Every symbol owns exactly one hub code unit.  The Pali letters live in the
legacy single-byte range 0xC0-0xE9 (IPE); ordinal order of those codes is
Pali alphabetical order.  Digits and dandas keep their Devanagari code
points, which is how legacy IPE text has always carried them.

A decoded text is a list of HubUnit values.  Units flagged ``literal`` are
characters no table recognised; encoders re-emit them untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Kind(Enum):
    VOWEL = "vowel"
    CONSONANT = "consonant"
    NIGGAHITA = "niggahita"
    DIGIT = "digit"
    PUNCTUATION = "punctuation"


class Case(IntEnum):
    """Letter case of a decoded Latin unit."""

    LOWER = 0
    TITLE = 1
    UPPER = 2


@dataclass(frozen=True, slots=True)
class Symbol:
    name: str  # Latin (IAST) form, or the Devanagari glyph for digits/dandas
    kind: Kind
    code: int

    def __repr__(self) -> str:
        return f"Symbol({self.name!r}, {self.kind.value}, 0x{self.code:02X})"


@dataclass(frozen=True, slots=True)
class HubUnit:
    """One hub code unit plus decode-side flags."""

    code: int
    literal: bool = False
    case: Case = Case.LOWER

    @classmethod
    def of(cls, ch: str) -> HubUnit:
        """Opaque passthrough unit for a single character."""
        return cls(ord(ch), literal=True)

    def __repr__(self) -> str:
        flag = " literal" if self.literal else ""
        if self.case is not Case.LOWER:
            flag += f" {self.case.name.lower()}"
        return f"HubUnit(0x{self.code:02X}{flag})"


# ── Inventory ───────────────────────────────────────────────────────────────

NIGGAHITA = 0xC0
VOWELS = ["a", "ā", "i", "ī", "u", "ū", "e", "o"]
CONSONANTS = [
    "k", "kh", "g", "gh", "ṅ",
    "c", "ch", "j", "jh", "ñ",
    "ṭ", "ṭh", "ḍ", "ḍh",
    # 0xD7 is skipped
    "ṇ",
    "t", "th", "d", "dh", "n",
    "p", "ph", "b", "bh", "m",
    "y", "r", "l", "v", "s", "h", "ḷ",
]
DANDA = 0x0964
DOUBLE_DANDA = 0x0965
DIGIT_ZERO = 0x0966


def _build_inventory() -> list[Symbol]:
    symbols = [Symbol("ṃ", Kind.NIGGAHITA, NIGGAHITA)]
    code = 0xC1
    for name in VOWELS:
        symbols.append(Symbol(name, Kind.VOWEL, code))
        code += 1
    for name in CONSONANTS:
        if code == 0xD7:
            code += 1
        symbols.append(Symbol(name, Kind.CONSONANT, code))
        code += 1
    symbols.append(Symbol(chr(DANDA), Kind.PUNCTUATION, DANDA))
    symbols.append(Symbol(chr(DOUBLE_DANDA), Kind.PUNCTUATION, DOUBLE_DANDA))
    for d in range(10):
        symbols.append(Symbol(chr(DIGIT_ZERO + d), Kind.DIGIT, DIGIT_ZERO + d))
    return symbols


INVENTORY: tuple[Symbol, ...] = tuple(_build_inventory())

_BY_CODE: dict[int, Symbol] = {s.code: s for s in INVENTORY}
_BY_NAME: dict[str, Symbol] = {s.name: s for s in INVENTORY}

if len(_BY_CODE) != len(INVENTORY) or len(_BY_NAME) != len(INVENTORY):
    raise RuntimeError("symbol inventory is not a bijection")

# The legacy byte values downstream data depends on
A = _BY_NAME["a"].code
if A != 0xC1 or _BY_NAME["ḷ"].code != 0xE9:
    raise RuntimeError("symbol inventory does not match the legacy IPE layout")


def symbol(name: str) -> Symbol:
    """Look up a symbol by its Latin name ("kh", "ā", "ṃ")."""
    return _BY_NAME[name]


def symbol_to_hub(sym: Symbol) -> int:
    if _BY_CODE.get(sym.code) != sym:
        raise KeyError(sym)
    return sym.code


def hub_to_symbol(code: int) -> Symbol:
    """Inverse of symbol_to_hub; KeyError for codes outside the inventory."""
    return _BY_CODE[code]


def is_symbol_code(code: int) -> bool:
    return code in _BY_CODE


# ── Boundary conversions ────────────────────────────────────────────────────

def hub_to_text(units: list[HubUnit]) -> str:
    """Render hub units as IPE text, one character per code unit.

    IPE text has no room for a literal flag: a literal whose code point
    falls inside the symbol inventory (0xC0-0xE9, 0x0964-0x096F) reads
    back as that symbol.  "é" (0xE9) comes back as "ḷ", for example.
    Keep text as HubUnit lists when foreign characters must survive.
    """
    return "".join(chr(u.code) for u in units)


def text_to_hub(text: str) -> list[HubUnit]:
    """Parse IPE text; characters outside the inventory become literals."""
    return [
        HubUnit(ord(ch)) if ord(ch) in _BY_CODE else HubUnit.of(ch)
        for ch in text
    ]


def to_legacy_bytes(text: str) -> bytes:
    """Encode IPE text to the persisted single-byte layout."""
    try:
        return text.encode("latin-1")
    except UnicodeEncodeError as e:
        raise ValueError(
            f"IPE text has a character outside the single-byte range at {e.start}"
        ) from e


def from_legacy_bytes(data: bytes) -> str:
    return data.decode("latin-1")


# ── Collation ───────────────────────────────────────────────────────────────

def ipe_sort_key(text: str) -> tuple[int, ...]:
    """Sort key for IPE text: ordinal code order is Pali alphabetical order."""
    return tuple(ord(ch) for ch in text)


def compare_ipe(a: str, b: str) -> int:
    """Ordinal three-way comparison of two IPE strings (-1, 0, 1)."""
    ka, kb = ipe_sort_key(a), ipe_sort_key(b)
    return (ka > kb) - (ka < kb)
