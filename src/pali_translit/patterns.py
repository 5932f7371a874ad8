"""Search-pattern conversion that leaves wildcard glyphs where they are."""

from __future__ import annotations

from collections.abc import Iterable

from pali_translit.converter import ScriptConverter, default_converter, split_wildcards
from pali_translit.scripts import Script


class WildcardConverter:
    """Wraps a ScriptConverter; wildcard glyphs are never converted.

    The pattern is cut at every wildcard, each stretch is converted on its
    own, and the pieces are joined back in the same order.
    """

    def __init__(
        self,
        converter: ScriptConverter | None = None,
        glyphs: Iterable[str] | None = None,
    ):
        self.converter = converter if converter is not None else ScriptConverter()
        self.glyphs = tuple(glyphs) if glyphs is not None else self.converter.wildcards

    def convert(self, pattern: str, source: Script, target: Script) -> str:
        out = []
        for piece, is_wildcard in split_wildcards(pattern, self.glyphs):
            if is_wildcard:
                out.append(piece)
            else:
                out.append(self.converter.convert(piece, source, target))
        return "".join(out)


def convert_preserving_wildcards(pattern: str, source: Script, target: Script) -> str:
    return WildcardConverter(default_converter()).convert(pattern, source, target)
