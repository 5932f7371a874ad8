"""
Script tags and Unicode-block script detection.

Usage:
    from pali_translit.scripts import Script, detect_script

    Script.from_name("deva")        # Script.DEVANAGARI
    detect_script("धम्म")            # Script.DEVANAGARI
"""

from __future__ import annotations

from enum import Enum


class Script(Enum):
    """Supported writing systems, the IPE hub, and UNKNOWN (auto-detect)."""

    UNKNOWN = "unknown"
    IPE = "ipe"
    LATIN = "latn"
    BENGALI = "beng"
    CYRILLIC = "cyrl"
    DEVANAGARI = "deva"
    GUJARATI = "gujr"
    GURMUKHI = "guru"
    KANNADA = "knda"
    KHMER = "khmr"
    MALAYALAM = "mlym"
    MYANMAR = "mymr"
    SINHALA = "sinh"
    TELUGU = "telu"
    THAI = "thai"
    TIBETAN = "tibt"

    @property
    def iso15924(self) -> str | None:
        """Lowercase ISO 15924 code, or None for IPE and UNKNOWN."""
        if self in (Script.IPE, Script.UNKNOWN):
            return None
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Script:
        """Resolve an enum name ("devanagari") or ISO code ("deva")."""
        key = name.strip().lower()
        for script in cls:
            if key == script.value or key == script.name.lower():
                return script
        raise ValueError(f"Unknown script: {name!r}")


# ── Unicode blocks ──────────────────────────────────────────────────────────

# (first, last, script); first match wins
_BLOCKS: list[tuple[int, int, Script]] = [
    (0x00C0, 0x00E9, Script.IPE),
    (0x0041, 0x005A, Script.LATIN),
    (0x0061, 0x007A, Script.LATIN),
    (0x00EA, 0x024F, Script.LATIN),
    (0x1E00, 0x1EFF, Script.LATIN),
    (0x0400, 0x04FF, Script.CYRILLIC),
    (0x0900, 0x097F, Script.DEVANAGARI),
    (0x0980, 0x09FF, Script.BENGALI),
    (0x0A00, 0x0A7F, Script.GURMUKHI),
    (0x0A80, 0x0AFF, Script.GUJARATI),
    (0x0C00, 0x0C7F, Script.TELUGU),
    (0x0C80, 0x0CFF, Script.KANNADA),
    (0x0D00, 0x0D7F, Script.MALAYALAM),
    (0x0D80, 0x0DFF, Script.SINHALA),
    (0x0E00, 0x0E7F, Script.THAI),
    (0x0F00, 0x0FFF, Script.TIBETAN),
    (0x1000, 0x109F, Script.MYANMAR),
    (0x1780, 0x17FF, Script.KHMER),
]

# Shared punctuation and digits that say nothing about the script
_NEUTRAL = {0x0964, 0x0965} | set(range(0x0966, 0x0970))


def script_of_char(ch: str) -> Script:
    """Return the script a single character belongs to, or UNKNOWN."""
    cp = ord(ch)
    if cp in _NEUTRAL:
        return Script.UNKNOWN
    for first, last, script in _BLOCKS:
        if first <= cp <= last:
            return script
    return Script.UNKNOWN


def detect_script(text: str) -> Script:
    """Script of the first character whose script is known; LATIN if none."""
    for ch in text:
        script = script_of_char(ch)
        if script is not Script.UNKNOWN:
            return script
    return Script.LATIN
