"""Tests for script tags and detection (scripts.py)."""

import pytest

from pali_translit.scripts import Script, detect_script, script_of_char


def test_iso15924_codes():
    assert Script.DEVANAGARI.iso15924 == "deva"
    assert Script.MYANMAR.iso15924 == "mymr"
    assert Script.TIBETAN.iso15924 == "tibt"
    assert Script.IPE.iso15924 is None
    assert Script.UNKNOWN.iso15924 is None


@pytest.mark.parametrize("name, expected", [
    ("deva", Script.DEVANAGARI),
    ("Devanagari", Script.DEVANAGARI),
    ("  LATN ", Script.LATIN),
    ("ipe", Script.IPE),
    ("sinhala", Script.SINHALA),
])
def test_from_name(name, expected):
    assert Script.from_name(name) is expected


def test_from_name_rejects_unknown():
    with pytest.raises(ValueError, match="klingon"):
        Script.from_name("klingon")


@pytest.mark.parametrize("text, expected", [
    ("धम्म", Script.DEVANAGARI),
    ("saṅgha", Script.LATIN),
    ("ṭhāna", Script.LATIN),
    ("ධම්ම", Script.SINHALA),
    ("ဓမ္မ", Script.MYANMAR),
    ("ธมฺม", Script.THAI),
    ("སངྒྷ", Script.TIBETAN),
    ("дхамма", Script.CYRILLIC),
    ("\xe7\xc1\xcd\xcc\xc1", Script.IPE),
])
def test_detect_script(text, expected):
    assert detect_script(text) is expected


def test_detect_skips_neutral_characters():
    assert detect_script("  ।१२ धम्म") is Script.DEVANAGARI
    assert detect_script("*? ঘ") is Script.BENGALI


def test_detect_defaults_to_latin():
    assert detect_script("") is Script.LATIN
    assert detect_script("123 -") is Script.LATIN


def test_script_of_char_non_letters():
    assert script_of_char("*") is Script.UNKNOWN
    assert script_of_char(" ") is Script.UNKNOWN
