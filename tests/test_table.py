"""Tests for table construction and validation (table.py, data.py)."""

import pytest

from pali_translit.data import BUILDERS, _indic
from pali_translit.scripts import Script
from pali_translit.symbols import CONSONANTS, VOWELS, symbol
from pali_translit.table import (
    AmbiguousTableError,
    Element,
    Role,
    ScriptTable,
    TableLoadError,
)


def _latin_like(**overrides) -> dict:
    kwargs = dict(
        consonants={n: n for n in CONSONANTS},
        vowels={v: v for v in VOWELS},
        marks={"ṃ": "ṃ"},
    )
    kwargs.update(overrides)
    return kwargs


# ── Shipped tables ────────────────────────────────────────────────────────────

@pytest.mark.parametrize("script", list(BUILDERS), ids=lambda s: s.value)
def test_every_shipped_table_builds(script):
    table = BUILDERS[script]()
    assert table.script is script
    assert table.longest >= 1


def test_alphabets_have_no_inherent_vowel():
    assert not BUILDERS[Script.LATIN]().inherent_vowel
    assert not BUILDERS[Script.CYRILLIC]().inherent_vowel
    assert BUILDERS[Script.THAI]().inherent_vowel


# ── Matching ──────────────────────────────────────────────────────────────────

def test_match_takes_longest_form():
    table = BUILDERS[Script.LATIN]()
    size, elements = table.match("ṭhāna", 0)
    assert size == 2
    assert elements == (Element(Role.LETTER, symbol("ṭh").code),)


def test_match_decomposed_alias():
    table = BUILDERS[Script.LATIN]()
    size, elements = table.match("t\u0323ha", 0)
    assert size == 3
    assert elements == (Element(Role.LETTER, symbol("ṭh").code),)


def test_match_nothing():
    table = BUILDERS[Script.LATIN]()
    assert table.match("x", 0) == (0, None)
    assert table.match("a", 1) == (0, None)


def test_tokens_expand_ligatures():
    table = BUILDERS[Script.MYANMAR]()
    assert table.tokens("ည") == [
        Element(Role.LETTER, symbol("ñ").code),
        Element(Role.VIRAMA),
        Element(Role.LETTER, symbol("ñ").code),
    ]


def test_tokens_skip_ignorables():
    table = BUILDERS[Script.DEVANAGARI]()
    assert table.tokens("\u0915\u094d\u200d\u0915") == table.tokens("\u0915\u094d\u0915")


def test_known_chars():
    chars = BUILDERS[Script.LATIN]().known_chars()
    assert "ṭ" in chars
    assert "\u0323" in chars  # from the decomposed aliases
    assert "x" not in chars


# ── Validation ────────────────────────────────────────────────────────────────

def test_minimal_alphabet_builds():
    table = ScriptTable(Script.LATIN, **_latin_like())
    assert table.decode_map["kh"] == (Element(Role.LETTER, symbol("kh").code),)


def test_missing_symbol_is_load_error():
    consonants = {n: n for n in CONSONANTS if n != "ḷ"}
    with pytest.raises(TableLoadError, match="ḷ") as exc:
        ScriptTable(Script.LATIN, **_latin_like(consonants=consonants))
    assert not isinstance(exc.value, AmbiguousTableError)
    assert exc.value.script is Script.LATIN


def test_abugida_needs_virama():
    with pytest.raises(TableLoadError, match="virama"):
        ScriptTable(
            Script.DEVANAGARI,
            **_latin_like(signs={v: v for v in VOWELS}),
        )


def test_shared_form_is_ambiguous():
    consonants = {n: n for n in CONSONANTS}
    consonants["v"] = "b"
    with pytest.raises(AmbiguousTableError, match="'b'"):
        ScriptTable(Script.LATIN, **_latin_like(consonants=consonants))


def test_overlapping_forms_are_ambiguous():
    # "k" followed by "a" would be read back as a single "kh"
    with pytest.raises(AmbiguousTableError, match="'k' followed by 'a'"):
        ScriptTable(Script.LATIN, **_latin_like(aliases={"ka": "kh"}))


def test_empty_form_rejected():
    vowels = {v: v for v in VOWELS}
    vowels["o"] = ""
    with pytest.raises(TableLoadError, match="empty"):
        ScriptTable(Script.LATIN, **_latin_like(vowels=vowels))


def test_alias_with_unknown_symbol():
    with pytest.raises(TableLoadError, match="'q'"):
        ScriptTable(Script.LATIN, **_latin_like(aliases={"q": "q"}))


def test_rewrite_must_keep_symbols():
    with pytest.raises(TableLoadError, match="rewrite"):
        _indic(Script.DEVANAGARI, 0x0900, rewrites=(("क", "ख"),))


def test_rewrite_into_ignorable_is_fine():
    kk, kk_zwj = "\u0915\u094d\u0915", "\u0915\u094d\u200d\u0915"
    table = _indic(Script.DEVANAGARI, 0x0900, rewrites=((kk, kk_zwj),))
    assert table.rewrites == ((kk, kk_zwj),)
