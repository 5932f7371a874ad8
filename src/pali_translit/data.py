"""
Native forms for every supported script.

Each builder returns a freshly validated ScriptTable; the registry calls
them lazily.  Keys are the Latin names of the Pali symbols (symbols.py).

Sources of the special rules:
- Devanagari: ZWJ after virama in the conjuncts that Pali typesetting
  keeps unligated (kk, kl, kv, cc, jj, ñc, ñj, ññ, nn, pl, ll)
- Myanmar: ñña ligature, medial ya/ra/va/ha, tall aa after kha/ga/pa/va/ddha,
  great sa for ssa, kinzi for ṅ + virama
- Thai: e and o signs are written before their consonant
- Tibetan: clusters use subjoined letters; yya and vva take the fixed
  subjoined forms, jjha/yha/vha keep an explicit halanta
"""

from __future__ import annotations

from pali_translit.scripts import Script
from pali_translit.table import ZWJ, ZWNJ, ScriptTable

# Devanagari digits and dandas are the hub symbols themselves
DIGITS = [chr(0x0966 + d) for d in range(10)]
DANDAS = {"।": "।", "॥": "॥"}
ASCII_DIGITS = {d: str(i) for i, d in enumerate(DIGITS)}


def _digits(zero: int) -> dict[str, str]:
    return {d: chr(zero + i) for i, d in enumerate(DIGITS)}


def _s(*codes: int) -> str:
    return "".join(chr(c) for c in codes)


# ── Latin ───────────────────────────────────────────────────────────────────

def latin() -> ScriptTable:
    names = [
        "k", "kh", "g", "gh", "ṅ", "c", "ch", "j", "jh", "ñ",
        "ṭ", "ṭh", "ḍ", "ḍh", "ṇ", "t", "th", "d", "dh", "n",
        "p", "ph", "b", "bh", "m", "y", "r", "l", "v", "s", "h", "ḷ",
    ]
    return ScriptTable(
        Script.LATIN,
        consonants={n: n for n in names},
        vowels={v: v for v in ["a", "ā", "i", "ī", "u", "ū", "e", "o"]},
        marks={"ṃ": "ṃ", **DANDAS},
        encode_only=ASCII_DIGITS,
        aliases={
            "\u1e41": "ṃ",
            "m\u0323": "ṃ",
            "m\u0307": "ṃ",
            "n\u0307": "ṅ",
            "n\u0303": "ñ",
            "t\u0323": "ṭ",
            "t\u0323h": "ṭh",
            "d\u0323": "ḍ",
            "d\u0323h": "ḍh",
            "n\u0323": "ṇ",
            "l\u0323": "ḷ",
            "a\u0304": "ā",
            "i\u0304": "ī",
            "u\u0304": "ū",
        },
        cased=True,
    )


# ── Cyrillic ────────────────────────────────────────────────────────────────

def cyrillic() -> ScriptTable:
    dot, under, tilde = "\u0307", "\u0323", "\u0303"
    return ScriptTable(
        Script.CYRILLIC,
        consonants={
            "k": "г", "kh": "к", "g": "г" + dot, "gh": "гх", "ṅ": "н" + dot,
            "c": "ж", "ch": "ч", "j": "ж" + dot, "jh": "жх", "ñ": "н" + tilde,
            "ṭ": "д", "ṭh": "т", "ḍ": "д" + under, "ḍh": "дх", "ṇ": "н" + under,
            "t": "д" + dot, "th": "т" + dot, "d": "д" + dot + under,
            "dh": "д" + dot + "х", "n": "н",
            "p": "б", "ph": "п", "b": "б" + under, "bh": "бх", "m": "м",
            "y": "я", "r": "р", "l": "л", "v": "в", "s": "с", "h": "х",
            "ḷ": "л" + under,
        },
        vowels={
            "a": "а", "ā": "аа", "i": "и", "ī": "ий",
            "u": "у", "ū": "уу", "e": "з", "o": "о",
        },
        marks={"ṃ": "м" + under, **DANDAS},
        encode_only=ASCII_DIGITS,
        aliases={"г" + dot + "х": "gh", "ж" + dot + "х": "jh"},
    )


# ── Devanagari and the scripts laid out like it ─────────────────────────────

_DEVA_CONSONANTS = {
    "k": 0x0915, "kh": 0x0916, "g": 0x0917, "gh": 0x0918, "ṅ": 0x0919,
    "c": 0x091A, "ch": 0x091B, "j": 0x091C, "jh": 0x091D, "ñ": 0x091E,
    "ṭ": 0x091F, "ṭh": 0x0920, "ḍ": 0x0921, "ḍh": 0x0922, "ṇ": 0x0923,
    "t": 0x0924, "th": 0x0925, "d": 0x0926, "dh": 0x0927, "n": 0x0928,
    "p": 0x092A, "ph": 0x092B, "b": 0x092C, "bh": 0x092D, "m": 0x092E,
    "y": 0x092F, "r": 0x0930, "l": 0x0932, "v": 0x0935, "s": 0x0938,
    "h": 0x0939, "ḷ": 0x0933,
}
_DEVA_VOWELS = {
    "a": 0x0905, "ā": 0x0906, "i": 0x0907, "ī": 0x0908,
    "u": 0x0909, "ū": 0x090A, "e": 0x090F, "o": 0x0913,
}
_DEVA_SIGNS = {
    "ā": 0x093E, "i": 0x093F, "ī": 0x0940,
    "u": 0x0941, "ū": 0x0942, "e": 0x0947, "o": 0x094B,
}
_DEVA_VIRAMA = 0x094D
_DEVA_ANUSVARA = 0x0902

_ZWJ_CONJUNCTS = [
    ("k", "k"), ("k", "l"), ("k", "v"), ("c", "c"), ("j", "j"),
    ("ñ", "c"), ("ñ", "j"), ("ñ", "ñ"), ("n", "n"), ("p", "l"), ("l", "l"),
]


def _indic(script: Script, base: int, **overrides) -> ScriptTable:
    """Build a table for a script whose block mirrors Devanagari at ``base``."""
    delta = base - 0x0900
    consonants = {n: chr(c + delta) for n, c in _DEVA_CONSONANTS.items()}
    consonants.update(overrides.pop("consonants", {}))
    kwargs = dict(
        consonants=consonants,
        vowels={n: chr(c + delta) for n, c in _DEVA_VOWELS.items()},
        signs={"a": "", **{n: chr(c + delta) for n, c in _DEVA_SIGNS.items()}},
        virama=chr(_DEVA_VIRAMA + delta),
        marks={"ṃ": chr(_DEVA_ANUSVARA + delta), **DANDAS, **_digits(base + 0x66)},
        ignorable=(ZWJ, ZWNJ),
    )
    kwargs.update(overrides)
    return ScriptTable(script, **kwargs)


def devanagari() -> ScriptTable:
    virama = chr(_DEVA_VIRAMA)
    rewrites = []
    for a, b in _ZWJ_CONJUNCTS:
        left, right = chr(_DEVA_CONSONANTS[a]), chr(_DEVA_CONSONANTS[b])
        rewrites.append((left + virama + right, left + virama + ZWJ + right))
    return _indic(Script.DEVANAGARI, 0x0900, rewrites=tuple(rewrites))


def bengali() -> ScriptTable:
    # va is written with the Assamese ra-with-diagonal so it stays distinct
    # from ba; there is no native ḷa, so la + nukta stands in
    return _indic(
        Script.BENGALI, 0x0980,
        consonants={"v": _s(0x09F0), "ḷ": _s(0x09B2, 0x09BC)},
    )


def gurmukhi() -> ScriptTable:
    return _indic(Script.GURMUKHI, 0x0A00, aliases={_s(0x0A70): "ṃ"})


def gujarati() -> ScriptTable:
    return _indic(Script.GUJARATI, 0x0A80)


def telugu() -> ScriptTable:
    return _indic(Script.TELUGU, 0x0C00)


def kannada() -> ScriptTable:
    return _indic(Script.KANNADA, 0x0C80)


def malayalam() -> ScriptTable:
    return _indic(Script.MALAYALAM, 0x0D00)


# ── Sinhala ─────────────────────────────────────────────────────────────────

def sinhala() -> ScriptTable:
    cons = [
        0x0D9A, 0x0D9B, 0x0D9C, 0x0D9D, 0x0D9E,
        0x0DA0, 0x0DA1, 0x0DA2, 0x0DA3, 0x0DA4,
        0x0DA7, 0x0DA8, 0x0DA9, 0x0DAA, 0x0DAB,
        0x0DAD, 0x0DAE, 0x0DAF, 0x0DB0, 0x0DB1,
        0x0DB4, 0x0DB5, 0x0DB6, 0x0DB7, 0x0DB8,
        0x0DBA, 0x0DBB, 0x0DBD, 0x0DC0, 0x0DC3, 0x0DC4, 0x0DC5,
    ]
    return ScriptTable(
        Script.SINHALA,
        consonants={n: chr(c) for n, c in zip(_DEVA_CONSONANTS, cons)},
        vowels={
            "a": _s(0x0D85), "ā": _s(0x0D86), "i": _s(0x0D89), "ī": _s(0x0D8A),
            "u": _s(0x0D8B), "ū": _s(0x0D8C), "e": _s(0x0D91), "o": _s(0x0D94),
        },
        signs={
            "a": "", "ā": _s(0x0DCF), "i": _s(0x0DD2), "ī": _s(0x0DD3),
            "u": _s(0x0DD4), "ū": _s(0x0DD6), "e": _s(0x0DD9), "o": _s(0x0DDC),
        },
        virama=_s(0x0DCA),
        marks={"ṃ": _s(0x0D82), **DANDAS},
        encode_only=ASCII_DIGITS,
        aliases={_s(0x0DD9, 0x0DCF): "-o"},
        ignorable=(ZWJ, ZWNJ),
    )


# ── Myanmar ─────────────────────────────────────────────────────────────────

def _tall_aa_rules(*prefixes: str) -> list[tuple[str, str]]:
    rules = []
    for p in prefixes:
        rules.append((p + _s(0x1031, 0x102C), p + _s(0x1031, 0x102B)))
        rules.append((p + _s(0x102C), p + _s(0x102B)))
    return rules


def myanmar() -> ScriptTable:
    cons = list(range(0x1000, 0x100A)) + list(range(0x100B, 0x1021))
    rewrites = [
        (_s(0x1009, 0x1039, 0x1009), _s(0x100A)),
        (_s(0x1039, 0x101A), _s(0x103B)),
        (_s(0x1039, 0x101B), _s(0x103C)),
        (_s(0x1039, 0x101D), _s(0x103D)),
        (_s(0x1039, 0x101F), _s(0x103E)),
        *_tall_aa_rules(_s(0x1012, 0x1039, 0x1013)),
        *_tall_aa_rules(_s(0x1001), _s(0x1002), _s(0x1015), _s(0x101D)),
        (_s(0x101E, 0x1039, 0x101E), _s(0x103F)),
        (_s(0x1004, 0x1039), _s(0x1004, 0x103A, 0x1039)),
    ]
    return ScriptTable(
        Script.MYANMAR,
        consonants={n: chr(c) for n, c in zip(_DEVA_CONSONANTS, cons)},
        vowels={
            "a": _s(0x1021), "ā": _s(0x1021, 0x102C), "i": _s(0x1023),
            "ī": _s(0x1024), "u": _s(0x1025), "ū": _s(0x1026),
            "e": _s(0x1027), "o": _s(0x1029),
        },
        signs={
            "a": "", "ā": _s(0x102C), "i": _s(0x102D), "ī": _s(0x102E),
            "u": _s(0x102F), "ū": _s(0x1030), "e": _s(0x1031),
            "o": _s(0x1031, 0x102C),
        },
        virama=_s(0x1039),
        marks={"ṃ": _s(0x1036), "।": _s(0x104A), "॥": _s(0x104B), **_digits(0x1040)},
        aliases={
            _s(0x102B): "-ā",
            _s(0x1031, 0x102B): "-o",
            _s(0x1021, 0x102B): "ā",
            _s(0x100A): "ñ + ñ",
            _s(0x103B): "+ y",
            _s(0x103C): "+ r",
            _s(0x103D): "+ v",
            _s(0x103E): "+ h",
            _s(0x103F): "s + s",
            _s(0x103A, 0x1039): "+",
            _s(0x103A): "+",
        },
        rewrites=tuple(rewrites),
        ignorable=(ZWJ, ZWNJ),
    )


# ── Khmer ───────────────────────────────────────────────────────────────────

def khmer() -> ScriptTable:
    cons = list(range(0x1780, 0x179D)) + [0x179F, 0x17A0, 0x17A1]
    return ScriptTable(
        Script.KHMER,
        consonants={n: chr(c) for n, c in zip(_DEVA_CONSONANTS, cons)},
        vowels={
            "a": _s(0x17A2), "ā": _s(0x17A2, 0x17B6), "i": _s(0x17A5),
            "ī": _s(0x17A6), "u": _s(0x17A7), "ū": _s(0x17A9),
            "e": _s(0x17AF), "o": _s(0x17B1),
        },
        signs={
            "a": "", "ā": _s(0x17B6), "i": _s(0x17B7), "ī": _s(0x17B8),
            "u": _s(0x17BB), "ū": _s(0x17BC), "e": _s(0x17C1), "o": _s(0x17C4),
        },
        virama=_s(0x17D2),
        marks={"ṃ": _s(0x17C6), "।": _s(0x17D4), "॥": _s(0x17D5), **_digits(0x17E0)},
        ignorable=(ZWJ, ZWNJ),
    )


# ── Thai ────────────────────────────────────────────────────────────────────

def thai() -> ScriptTable:
    cons = [
        0x0E01, 0x0E02, 0x0E04, 0x0E06, 0x0E07,
        0x0E08, 0x0E09, 0x0E0A, 0x0E0C, 0x0E0D,
        0x0E0F, 0x0E10, 0x0E11, 0x0E12, 0x0E13,
        0x0E15, 0x0E16, 0x0E17, 0x0E18, 0x0E19,
        0x0E1B, 0x0E1C, 0x0E1E, 0x0E20, 0x0E21,
        0x0E22, 0x0E23, 0x0E25, 0x0E27, 0x0E2A, 0x0E2B, 0x0E2C,
    ]
    o_ang = _s(0x0E2D)
    return ScriptTable(
        Script.THAI,
        consonants={n: chr(c) for n, c in zip(_DEVA_CONSONANTS, cons)},
        vowels={
            "a": o_ang, "ā": o_ang + _s(0x0E32), "i": o_ang + _s(0x0E34),
            "ī": o_ang + _s(0x0E35), "u": o_ang + _s(0x0E38),
            "ū": o_ang + _s(0x0E39), "e": _s(0x0E40) + o_ang,
            "o": _s(0x0E42) + o_ang,
        },
        signs={
            "a": "", "ā": _s(0x0E32), "i": _s(0x0E34), "ī": _s(0x0E35),
            "u": _s(0x0E38), "ū": _s(0x0E39), "e": _s(0x0E40), "o": _s(0x0E42),
        },
        virama=_s(0x0E3A),
        marks={"ṃ": _s(0x0E4D), **DANDAS, **_digits(0x0E50)},
        aliases={_s(0x0E36): "-i ṃ"},
        prevowels=("e", "o"),
        ignorable=(ZWJ, ZWNJ),
    )


# ── Tibetan ─────────────────────────────────────────────────────────────────

def tibetan() -> ScriptTable:
    cons = {
        "k": _s(0x0F40), "kh": _s(0x0F41), "g": _s(0x0F42), "gh": _s(0x0F43),
        "ṅ": _s(0x0F44), "c": _s(0x0F59), "ch": _s(0x0F5A), "j": _s(0x0F5B),
        "jh": _s(0x0F5C), "ñ": _s(0x0F49), "ṭ": _s(0x0F4A), "ṭh": _s(0x0F4B),
        "ḍ": _s(0x0F4C), "ḍh": _s(0x0F4D), "ṇ": _s(0x0F4E), "t": _s(0x0F4F),
        "th": _s(0x0F50), "d": _s(0x0F51), "dh": _s(0x0F52), "n": _s(0x0F53),
        "p": _s(0x0F54), "ph": _s(0x0F55), "b": _s(0x0F56), "bh": _s(0x0F57),
        "m": _s(0x0F58), "y": _s(0x0F61), "r": _s(0x0F62), "l": _s(0x0F63),
        "v": _s(0x0F5D), "s": _s(0x0F66), "h": _s(0x0F67),
        "ḷ": _s(0x0F63, 0x0F39),
    }
    # subjoined letters sit 0x50 above the base letters
    subjoined = {n: chr(ord(c[0]) + 0x50) + c[1:] for n, c in cons.items()}
    halanta = _s(0x0F84)
    achung = _s(0x0F68)
    return ScriptTable(
        Script.TIBETAN,
        consonants=cons,
        vowels={
            "a": achung, "ā": achung + _s(0x0F71), "i": achung + _s(0x0F72),
            "ī": achung + _s(0x0F71, 0x0F72), "u": achung + _s(0x0F74),
            "ū": achung + _s(0x0F71, 0x0F74), "e": achung + _s(0x0F7A),
            "o": achung + _s(0x0F7C),
        },
        signs={
            "a": "", "ā": _s(0x0F71), "i": _s(0x0F72), "ī": _s(0x0F71, 0x0F72),
            "u": _s(0x0F74), "ū": _s(0x0F71, 0x0F74), "e": _s(0x0F7A),
            "o": _s(0x0F7C),
        },
        virama=halanta,
        marks={"ṃ": _s(0x0F7E), "।": _s(0x0F0D), "॥": _s(0x0F0E), **_digits(0x0F20)},
        subjoined=subjoined,
        cluster_forms={
            ("y", "y"): _s(0x0FBB),
            ("v", "v"): _s(0x0FBA),
            ("j", "jh"): halanta + cons["jh"],
            ("y", "h"): halanta + cons["h"],
            ("v", "h"): halanta + cons["h"],
        },
        aliases={_s(0x0FBB): "+ y", _s(0x0FBA): "+ v"},
        ignorable=(_s(0x0F0B), ZWJ, ZWNJ),
    )


BUILDERS = {
    Script.LATIN: latin,
    Script.CYRILLIC: cyrillic,
    Script.DEVANAGARI: devanagari,
    Script.BENGALI: bengali,
    Script.GURMUKHI: gurmukhi,
    Script.GUJARATI: gujarati,
    Script.TELUGU: telugu,
    Script.KANNADA: kannada,
    Script.MALAYALAM: malayalam,
    Script.SINHALA: sinhala,
    Script.MYANMAR: myanmar,
    Script.KHMER: khmer,
    Script.THAI: thai,
    Script.TIBETAN: tibetan,
}
