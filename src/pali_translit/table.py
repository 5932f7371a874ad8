"""
Per-script mapping tables.

A ScriptTable is built once from plain data (dicts keyed by the Latin name
of each symbol, see data.py), validated, and never mutated afterwards.

Decode side: native string -> tuple of Elements, matched greedily
(longest key first).  Encode side: canonical native form per symbol plus
ordered rendering rewrites.  Validation rejects tables whose greedy decode
would be ambiguous, so conversions never have to deal with it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pali_translit.scripts import Script
from pali_translit.symbols import CONSONANTS, VOWELS, Kind, symbol


class TranslitError(Exception):
    """Base class for errors raised by pali_translit."""


class TableLoadError(TranslitError):
    """A script table could not be constructed."""

    def __init__(self, script: Script, message: str):
        super().__init__(f"{script.name}: {message}")
        self.script = script


class AmbiguousTableError(TableLoadError):
    """Greedy longest-match decoding over the table would be ambiguous."""


class Role(Enum):
    LETTER = "letter"  # consonant
    VOWEL = "vowel"    # independent vowel
    SIGN = "sign"      # dependent vowel sign
    VIRAMA = "virama"
    MARK = "mark"      # niggahita, digit, danda


@dataclass(frozen=True, slots=True)
class Element:
    role: Role
    code: int = 0


VIRAMA = Element(Role.VIRAMA)

ZWJ = "\u200d"
ZWNJ = "\u200c"


class ScriptTable:
    """Immutable bidirectional mapping between one script and the hub.

    ``signs`` is None for alphabetic scripts (Latin, Cyrillic), where every
    vowel is written out; otherwise the script has an inherent vowel and
    the sign for "a" is normally the empty string.
    """

    def __init__(
        self,
        script: Script,
        *,
        consonants: dict[str, str],
        vowels: dict[str, str],
        marks: dict[str, str],
        signs: dict[str, str] | None = None,
        virama: str | None = None,
        aliases: dict[str, str] | None = None,
        encode_only: dict[str, str] | None = None,
        ignorable: tuple[str, ...] = (),
        rewrites: tuple[tuple[str, str], ...] = (),
        prevowels: tuple[str, ...] = (),
        subjoined: dict[str, str] | None = None,
        cluster_forms: dict[tuple[str, str], str] | None = None,
        cased: bool = False,
    ):
        self.script = script
        self.cased = cased
        self.inherent_vowel = signs is not None
        self.virama = virama
        self.ignorable = frozenset(ignorable)
        self.rewrites = tuple(rewrites)

        self.consonants = {symbol(n).code: s for n, s in consonants.items()}
        self.vowels = {symbol(n).code: s for n, s in vowels.items()}
        self.signs = {symbol(n).code: s for n, s in (signs or {}).items()}
        self.marks = {symbol(n).code: s for n, s in marks.items()}
        for name, native in (encode_only or {}).items():
            self.marks[symbol(name).code] = native
        self.prevowels = frozenset(symbol(n).code for n in prevowels)
        self.subjoined = {symbol(n).code: s for n, s in (subjoined or {}).items()}
        self.cluster_forms = {
            (symbol(a).code, symbol(b).code): s
            for (a, b), s in (cluster_forms or {}).items()
        }

        self._check_complete()

        self.decode_map: dict[str, tuple[Element, ...]] = {}
        for role, forms in (
            (Role.LETTER, self.consonants),
            (Role.VOWEL, self.vowels),
            (Role.SIGN, self.signs),
            (Role.MARK, {symbol(n).code: s for n, s in marks.items()}),
        ):
            for code, native in forms.items():
                if role is Role.SIGN and native == "":
                    continue
                self._register(native, (Element(role, code),))
        if virama is not None:
            self._register(virama, (VIRAMA,))
        for code, native in self.subjoined.items():
            self._register(native, (VIRAMA, Element(Role.LETTER, code)), alias=True)
        for native, descriptor in (aliases or {}).items():
            self._register(native, self._parse_descriptor(descriptor), alias=True)

        self.longest = max(len(k) for k in self.decode_map)
        self.prevowel_signs = {self.signs[c]: c for c in self.prevowels}

        self._check_prefixes()
        self._check_rewrites()

    # ── Construction helpers ─────────────────────────────────────────────

    def _fail(self, message: str, ambiguous: bool = False):
        cls = AmbiguousTableError if ambiguous else TableLoadError
        raise cls(self.script, message)

    def _check_complete(self) -> None:
        missing = [n for n in CONSONANTS if symbol(n).code not in self.consonants]
        missing += [n for n in VOWELS if symbol(n).code not in self.vowels]
        if symbol("ṃ").code not in self.marks:
            missing.append("ṃ")
        if self.inherent_vowel:
            missing += [n for n in VOWELS if symbol(n).code not in self.signs]
            if not self.virama:
                missing.append("virama")
        if missing:
            self._fail(f"no native form for {', '.join(missing)}")

    def _register(self, native: str, elements: tuple[Element, ...], alias: bool = False) -> None:
        if not native:
            self._fail(f"empty native form for {elements}")
        existing = self.decode_map.get(native)
        if existing is not None and existing != elements:
            kind = "alias" if alias else "form"
            self._fail(
                f"{kind} {native!r} maps to both {existing} and {elements}",
                ambiguous=True,
            )
        self.decode_map[native] = elements

    def _parse_descriptor(self, descriptor: str) -> tuple[Element, ...]:
        """Parse an alias target such as "ñ + ñ", "-ā" or "-i ṃ"."""
        elements = []
        for tok in descriptor.split():
            if tok == "+":
                elements.append(VIRAMA)
                continue
            is_sign = tok.startswith("-") and len(tok) > 1
            try:
                sym = symbol(tok[1:] if is_sign else tok)
            except KeyError:
                self._fail(f"unknown symbol {tok!r} in alias {descriptor!r}")
            if is_sign:
                elements.append(Element(Role.SIGN, sym.code))
            elif sym.kind is Kind.CONSONANT:
                elements.append(Element(Role.LETTER, sym.code))
            elif sym.kind is Kind.VOWEL:
                elements.append(Element(Role.VOWEL, sym.code))
            else:
                elements.append(Element(Role.MARK, sym.code))
        return tuple(elements)

    def _check_prefixes(self) -> None:
        """Adjacent forms the encoder emits must tokenize back separately."""
        niggahita = [self.marks[symbol("ṃ").code]]
        if self.inherent_vowel:
            pairs = [
                (c, s)
                for c in self.consonants.values()
                for s in [*self.signs.values(), self.virama, *niggahita]
                if s
            ]
            pairs += [(s, n) for s in self.signs.values() if s for n in niggahita]
        else:
            pairs = [
                (c, v)
                for c in self.consonants.values()
                for v in self.vowels.values()
            ]
            pairs += [(v, n) for v in self.vowels.values() for n in niggahita]
        for left, right in pairs:
            if self.tokens(left + right) != self.tokens(left) + self.tokens(right):
                self._fail(
                    f"{left!r} followed by {right!r} decodes as a different symbol",
                    ambiguous=True,
                )

    def _check_rewrites(self) -> None:
        for src, dst in self.rewrites:
            if self.tokens(src) != self.tokens(dst):
                self._fail(f"rewrite {src!r} -> {dst!r} changes the decoded symbols")

    # ── Lookup ───────────────────────────────────────────────────────────

    def match(self, text: str, i: int) -> tuple[int, tuple[Element, ...] | None]:
        """Longest decode key starting at text[i]; (0, None) when nothing matches."""
        for n in range(min(self.longest, len(text) - i), 0, -1):
            elements = self.decode_map.get(text[i:i + n])
            if elements is not None:
                return n, elements
        return 0, None

    def tokens(self, text: str) -> list[Element | str]:
        """Flat greedy tokenization; unmatched characters are returned as-is."""
        out: list[Element | str] = []
        i = 0
        while i < len(text):
            if text[i] in self.ignorable:
                i += 1
                continue
            n, elements = self.match(text, i)
            if elements is None:
                out.append(text[i])
                i += 1
            else:
                out.extend(elements)
                i += n
        return out

    def known_chars(self) -> set[str]:
        """Every character that appears in some decode key or is ignorable."""
        chars = set(self.ignorable)
        for native in self.decode_map:
            chars.update(native)
        return chars

    def __repr__(self) -> str:
        return f"ScriptTable({self.script.name}, {len(self.decode_map)} forms)"
