"""Tests for the symbol inventory and hub code units (symbols.py)."""

import pytest

from pali_translit.scripts import Script
from pali_translit.symbols import (
    INVENTORY,
    Case,
    HubUnit,
    Kind,
    compare_ipe,
    from_legacy_bytes,
    hub_to_symbol,
    hub_to_text,
    ipe_sort_key,
    symbol,
    symbol_to_hub,
    text_to_hub,
    to_legacy_bytes,
)


# ── Inventory ─────────────────────────────────────────────────────────────────

def test_vowel_a_is_legacy_0xC1():
    assert symbol_to_hub(symbol("a")) == 0xC1


def test_symbol_hub_bijection():
    codes = [s.code for s in INVENTORY]
    assert len(set(codes)) == len(codes)
    for s in INVENTORY:
        assert hub_to_symbol(symbol_to_hub(s)) is s


def test_legacy_layout_fixed_points():
    assert symbol("ṃ").code == 0xC0
    assert symbol("o").code == 0xC8
    assert symbol("k").code == 0xC9
    assert symbol("ḍh").code == 0xD6
    assert symbol("ṇ").code == 0xD8
    assert symbol("t").code == 0xD9
    assert symbol("ḷ").code == 0xE9


def test_0xD7_is_not_a_symbol():
    with pytest.raises(KeyError):
        hub_to_symbol(0xD7)


def test_kinds():
    assert symbol("kh").kind is Kind.CONSONANT
    assert symbol("ū").kind is Kind.VOWEL
    assert symbol("ṃ").kind is Kind.NIGGAHITA
    assert symbol("५").kind is Kind.DIGIT
    assert symbol("।").kind is Kind.PUNCTUATION


def test_digits_keep_devanagari_code_points():
    assert symbol("०").code == 0x0966
    assert symbol("॥").code == 0x0965


# ── HubUnit and IPE text ──────────────────────────────────────────────────────

def test_text_to_hub_marks_unknown_as_literal():
    units = text_to_hub("\xe7\xc1-")
    assert units[0] == HubUnit(0xE7)
    assert units[1] == HubUnit(0xC1)
    assert units[2].literal
    assert hub_to_text(units) == "\xe7\xc1-"


def test_hub_unit_defaults():
    u = HubUnit(0xC9)
    assert not u.literal
    assert u.case is Case.LOWER


def test_legacy_bytes():
    ipe = "\xe7\xc1\xcd\xcc\xc1"
    data = to_legacy_bytes(ipe)
    assert data == bytes([0xE7, 0xC1, 0xCD, 0xCC, 0xC1])
    assert from_legacy_bytes(data) == ipe


def test_legacy_bytes_rejects_wide_characters():
    with pytest.raises(ValueError):
        to_legacy_bytes("\xc1\u0967")


# ── Collation ─────────────────────────────────────────────────────────────────

def test_ipe_order_is_pali_alphabetical(converter):
    words = ["ṭhāna", "cakka", "kāya", "ñāṇa", "akusala", "ūmi"]
    ipe = {converter.convert(w, Script.LATIN, Script.IPE): w for w in words}
    ordered = [ipe[k] for k in sorted(ipe, key=ipe_sort_key)]
    assert ordered == ["akusala", "ūmi", "kāya", "cakka", "ñāṇa", "ṭhāna"]


def test_compare_ipe():
    assert compare_ipe("\xc1", "\xc9") == -1
    assert compare_ipe("\xc9", "\xc1") == 1
    assert compare_ipe("\xc1\xc9", "\xc1\xc9") == 0


# ── Literals and the single-byte hub ──────────────────────────────────────────

def test_literal_in_symbol_range_reads_back_as_symbol(converter):
    # "é" is 0xE9, the code of ḷ; IPE text cannot mark it as a literal
    ipe = converter.convert("café", Script.LATIN, Script.IPE)
    assert ipe == converter.convert("caf", Script.LATIN, Script.IPE) + "\xe9"
    assert converter.convert(ipe, Script.IPE, Script.LATIN) == "cafḷ"


def test_literal_survives_as_hub_units(converter):
    units = converter.decode("café", Script.LATIN)
    assert units[-1] == HubUnit(0xE9, literal=True)
    assert converter.encode(units, Script.LATIN) == "café"
    assert text_to_hub(hub_to_text(units))[-1] == HubUnit(0xE9)
