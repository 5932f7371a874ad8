"""Tests for wildcard-preserving pattern conversion (patterns.py)."""

import pytest

from conftest import NATIVE_SCRIPTS
from pali_translit.converter import ScriptConverter
from pali_translit.patterns import WildcardConverter, convert_preserving_wildcards
from pali_translit.scripts import Script

TARGETS = NATIVE_SCRIPTS + [Script.IPE]


@pytest.fixture(scope="module")
def patterns(converter):
    return WildcardConverter(converter)


def _wildcard_positions(text: str) -> list[tuple[int, str]]:
    return [(i, ch) for i, ch in enumerate(text) if ch in "*?"]


@pytest.mark.parametrize("target", TARGETS, ids=lambda s: s.value)
@pytest.mark.parametrize("pattern", ["a*", "bhikkhu*", "*saṅgha", "*ṭh*", "?", "dh?mma"])
def test_wildcards_survive(patterns, pattern, target):
    out = patterns.convert(pattern, Script.LATIN, target)
    assert out.count("*") == pattern.count("*")
    assert out.count("?") == pattern.count("?")
    if pattern.startswith(("*", "?")):
        assert out[0] == pattern[0]
    if pattern.endswith(("*", "?")):
        assert out[-1] == pattern[-1]


def test_pieces_convert_independently(patterns, converter):
    out = patterns.convert("bhikkhu*saṅgha", Script.LATIN, Script.DEVANAGARI)
    left = converter.convert("bhikkhu", Script.LATIN, Script.DEVANAGARI)
    right = converter.convert("saṅgha", Script.LATIN, Script.DEVANAGARI)
    assert out == left + "*" + right


def test_wildcard_closes_consonant(patterns):
    # "dh" before "?" has no vowel of its own
    assert patterns.convert("dh?mma", Script.LATIN, Script.DEVANAGARI) == "ध्?म्म"


def test_only_wildcards(patterns):
    for target in TARGETS:
        assert patterns.convert("*?*", Script.LATIN, target) == "*?*"


def test_empty_pattern(patterns):
    assert patterns.convert("", Script.LATIN, Script.THAI) == ""


def test_back_to_latin(patterns):
    mymr = patterns.convert("*saṅgha?", Script.LATIN, Script.MYANMAR)
    assert _wildcard_positions(mymr) == [(0, "*"), (len(mymr) - 1, "?")]
    assert patterns.convert(mymr, Script.MYANMAR, Script.LATIN) == "*saṅgha?"


def test_unknown_source_per_piece(patterns, converter):
    out = patterns.convert("dhamma*सङ्घ", Script.UNKNOWN, Script.LATIN)
    assert out == "dhamma*saṅgha"


def test_custom_glyphs(converter):
    wc = WildcardConverter(converter, glyphs=["%"])
    assert wc.convert("ka%", Script.LATIN, Script.DEVANAGARI) == "क%"
    # "*" is plain text for this converter
    assert wc.convert("ka*", Script.LATIN, Script.DEVANAGARI) == "क*"


def test_glyphs_default_to_converter():
    conv = ScriptConverter(wildcards=["_"])
    assert WildcardConverter(conv).glyphs == ("_",)


def test_module_level_function():
    assert convert_preserving_wildcards("a*", Script.LATIN, Script.DEVANAGARI) == "अ*"
