"""
Conversion facade: every route goes native -> hub -> native.

Usage:
    from pali_translit import ScriptConverter, Script

    conv = ScriptConverter()
    conv.convert("saṅgha", Script.LATIN, Script.DEVANAGARI)   # "सङ्घ"
    conv.convert("सङ्घ", Script.DEVANAGARI, Script.IPE)        # IPE text
    conv.to_hub("bhikkhu*")                                   # auto-detect, keeps "*"

    # Or from a TOML config (wildcard glyphs):
    conv = ScriptConverter.from_config("pali_translit.toml")
"""

from __future__ import annotations

import re
import threading
import tomllib
from collections.abc import Iterable
from pathlib import Path

from pali_translit.coders import (
    AbugidaDecoder,
    AbugidaEncoder,
    AlphabetDecoder,
    AlphabetEncoder,
    HubDecoder,
    HubEncoder,
)
from pali_translit.registry import TableRegistry
from pali_translit.scripts import Script, detect_script
from pali_translit.symbols import HubUnit, hub_to_text

DEFAULT_WILDCARDS = ("*", "?")

# Script -> (decoder class, encoder class)
DISPATCH = {
    Script.IPE: (HubDecoder, HubEncoder),
    Script.LATIN: (AlphabetDecoder, AlphabetEncoder),
    Script.CYRILLIC: (AlphabetDecoder, AlphabetEncoder),
    **{
        script: (AbugidaDecoder, AbugidaEncoder)
        for script in (
            Script.DEVANAGARI, Script.BENGALI, Script.GUJARATI, Script.GURMUKHI,
            Script.KANNADA, Script.MALAYALAM, Script.TELUGU, Script.SINHALA,
            Script.MYANMAR, Script.KHMER, Script.THAI, Script.TIBETAN,
        )
    },
}


def split_wildcards(text: str, glyphs: Iterable[str] = DEFAULT_WILDCARDS) -> list[tuple[str, bool]]:
    """Split text into (segment, is_wildcard) pieces, in order."""
    glyphs = [g for g in glyphs if g]
    if not glyphs:
        return [(text, False)] if text else []
    pattern = re.compile("(" + "|".join(re.escape(g) for g in glyphs) + ")")
    return [
        (piece, i % 2 == 1)
        for i, piece in enumerate(pattern.split(text))
        if piece
    ]


def to_title_case(text: str) -> str:
    """Upper-case every letter that follows a non-letter."""
    out = []
    last_was_letter = False
    for ch in text:
        if ch.isalpha():
            if not last_was_letter:
                ch = ch.upper()
            last_was_letter = True
        else:
            last_was_letter = False
        out.append(ch)
    return "".join(out)


class ScriptConverter:
    """Public entry point for script conversion.

    Holds only the table registry and the wildcard glyphs; every call is a
    single decode-then-encode pass over immutable tables.
    """

    def __init__(
        self,
        registry: TableRegistry | None = None,
        wildcards: Iterable[str] = DEFAULT_WILDCARDS,
    ):
        self.registry = registry if registry is not None else TableRegistry()
        self.wildcards = tuple(wildcards)

    @classmethod
    def from_config(cls, config_path: str | Path = "pali_translit.toml") -> ScriptConverter:
        """Build a converter from a TOML config file.

        Recognised keys:
            [wildcards]
            glyphs = ["*", "?"]
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            cfg = tomllib.load(f)

        glyphs = cfg.get("wildcards", {}).get("glyphs", list(DEFAULT_WILDCARDS))
        if not isinstance(glyphs, list) or not all(isinstance(g, str) and g for g in glyphs):
            raise ValueError(f"[wildcards] glyphs must be a list of non-empty strings in {config_path}")
        return cls(wildcards=glyphs)

    # ── Dispatch ─────────────────────────────────────────────────────────

    def _pair(self, script: Script):
        try:
            decoder_cls, encoder_cls = DISPATCH[script]
        except KeyError:
            raise ValueError(f"{script.name} cannot be used here") from None
        table = None if script is Script.IPE else self.registry.get(script)
        return decoder_cls, encoder_cls, table

    def decoder(self, script: Script):
        decoder_cls, _, table = self._pair(script)
        return decoder_cls(table)

    def encoder(self, script: Script):
        _, encoder_cls, table = self._pair(script)
        return encoder_cls(table)

    # ── Conversion ───────────────────────────────────────────────────────

    def decode(self, text: str, source: Script) -> list[HubUnit]:
        """Native text -> hub units.  UNKNOWN detects the script first."""
        if source is Script.UNKNOWN:
            source = detect_script(text)
        return self.decoder(source).decode(text)

    def encode(self, units: list[HubUnit], target: Script) -> str:
        return self.encoder(target).encode(units)

    def convert(
        self, text: str, source: Script, target: Script, *, title_case: bool = False,
    ) -> str:
        """Convert text between two scripts (either may be Script.IPE)."""
        if source is target and source is not Script.UNKNOWN:
            out = text
        else:
            out = self.encode(self.decode(text, source), target)
        if title_case and target is Script.LATIN:
            out = to_title_case(out)
        return out

    def convert_many(self, texts: Iterable[str], source: Script, target: Script) -> list[str]:
        return [self.convert(t, source, target) for t in texts]

    def to_hub(self, text: str, source: Script = Script.UNKNOWN) -> str:
        """Any script -> IPE text, keeping wildcard glyphs as they are.

        With source UNKNOWN, each stretch between wildcards is detected
        on its own.
        """
        out = []
        for piece, is_wildcard in split_wildcards(text, self.wildcards):
            if is_wildcard:
                out.append(piece)
            else:
                out.append(hub_to_text(self.decode(piece, source)))
        return "".join(out)


_default: ScriptConverter | None = None
_default_lock = threading.Lock()


def default_converter() -> ScriptConverter:
    """Process-wide converter used by the module-level convert()."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = ScriptConverter()
    return _default


def convert(text: str, source: Script, target: Script, *, title_case: bool = False) -> str:
    return default_converter().convert(text, source, target, title_case=title_case)
