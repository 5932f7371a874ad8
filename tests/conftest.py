"""Shared test fixtures."""

import pytest

from pali_translit.converter import ScriptConverter
from pali_translit.scripts import Script

# Every native script (no hub, no auto-detect)
NATIVE_SCRIPTS = [s for s in Script if s not in (Script.IPE, Script.UNKNOWN)]

# Pali words that every script can write without loss
PALI_WORDS = [
    "saṅgha",
    "bhikkhu",
    "buddho",
    "dhammaṃ",
    "paṭicca",
    "saṃyutta",
    "aṭṭhakathā",
    "evaṃ",
    "ñāṇa",
    "paññā",
    "assa",
    "kāyo",
    "veḷuvana",
    "ajjhatta",
    "vyākaraṇa",
    "gāmo",
]


@pytest.fixture(scope="session")
def converter() -> ScriptConverter:
    """One converter for the whole run; tables build lazily on first use."""
    return ScriptConverter()
