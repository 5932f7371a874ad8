"""
Script decoders (native text -> hub units) and encoders (hub units -> native).

Three families cover every script:

- Abugida: consonants carry an inherent "a"; virama, dependent signs,
  conjunct rewrites and pre-posed vowel signs (Devanagari and relatives,
  Sinhala, Myanmar, Khmer, Thai, Tibetan).
- Alphabet: every vowel is written (Latin, Cyrillic); Latin also records
  letter case on each unit.
- Hub: IPE text itself, one character per code unit.

Decoders never raise for text content: anything the table does not know
becomes a literal unit and is written back unchanged by every encoder.
"""

from __future__ import annotations

from pali_translit.symbols import (
    A,
    Case,
    HubUnit,
    Kind,
    hub_to_symbol,
    hub_to_text,
    is_symbol_code,
    text_to_hub,
)
from pali_translit.table import Role, ScriptTable


def _fold_case(text: str) -> str:
    """Lowercase character by character, keeping string length unchanged."""
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in text)


def _case_of(native: str) -> Case:
    if native == native.lower():
        return Case.LOWER
    if native == native.upper():
        return Case.UPPER
    if native[0].isupper():
        return Case.TITLE
    return Case.LOWER


def _apply_case(form: str, case: Case) -> str:
    if case is Case.UPPER:
        return form.upper()
    if case is Case.TITLE:
        return form[:1].upper() + form[1:]
    return form


# ── Decoders ────────────────────────────────────────────────────────────────

class HubDecoder:
    """IPE text -> hub units."""

    def __init__(self, table: ScriptTable | None = None):
        self.table = table

    def decode(self, text: str) -> list[HubUnit]:
        return text_to_hub(text)


class AlphabetDecoder:
    """Greedy longest-match decoding for scripts with written vowels."""

    def __init__(self, table: ScriptTable):
        self.table = table

    def decode(self, text: str) -> list[HubUnit]:
        table = self.table
        folded = _fold_case(text) if table.cased else text
        units: list[HubUnit] = []
        i = 0
        while i < len(text):
            if text[i] in table.ignorable:
                i += 1
                continue
            size, elements = table.match(folded, i)
            if elements is None:
                units.append(HubUnit.of(text[i]))
                i += 1
                continue
            case = _case_of(text[i:i + size]) if table.cased else Case.LOWER
            units.extend(HubUnit(el.code, case=case) for el in elements)
            i += size
        return units


class AbugidaDecoder:
    """Greedy longest-match decoding with inherent-vowel handling.

    A consonant stays "open" until the next element decides its vowel:
    a dependent sign supplies the vowel, a virama leaves it bare, and
    anything else closes it with the inherent "a".
    """

    def __init__(self, table: ScriptTable):
        self.table = table

    def decode(self, text: str) -> list[HubUnit]:
        table = self.table
        units: list[HubUnit] = []
        open_consonant = False

        def close():
            nonlocal open_consonant
            if open_consonant:
                units.append(HubUnit(A))
                open_consonant = False

        i = 0
        while i < len(text):
            ch = text[i]
            if ch in table.ignorable:
                i += 1
                continue

            # Pre-posed vowel sign: the consonant it belongs to comes next
            if ch in table.prevowel_signs:
                size, elements = table.match(text, i + 1)
                if elements is not None and len(elements) == 1 and elements[0].role is Role.LETTER:
                    close()
                    units.append(HubUnit(elements[0].code))
                    units.append(HubUnit(table.prevowel_signs[ch]))
                    i += 1 + size
                    continue

            size, elements = table.match(text, i)
            if elements is None:
                close()
                units.append(HubUnit.of(ch))
                i += 1
                continue

            for el in elements:
                if el.role is Role.LETTER:
                    close()
                    units.append(HubUnit(el.code))
                    open_consonant = True
                elif el.role is Role.SIGN or el.role is Role.VIRAMA:
                    if not open_consonant:
                        # a sign or virama with no consonant to attach to
                        units.extend(HubUnit.of(c) for c in text[i:i + size])
                        break
                    if el.role is Role.SIGN:
                        units.append(HubUnit(el.code))
                    open_consonant = False
                else:
                    close()
                    units.append(HubUnit(el.code))
            i += size

        close()
        return units


# ── Encoders ────────────────────────────────────────────────────────────────

class HubEncoder:
    """Hub units -> IPE text."""

    def __init__(self, table: ScriptTable | None = None):
        self.table = table

    def encode(self, units: list[HubUnit]) -> str:
        return hub_to_text(units)


class AlphabetEncoder:
    def __init__(self, table: ScriptTable):
        self.table = table
        self.forms = {**table.consonants, **table.vowels, **table.marks}

    def encode(self, units: list[HubUnit]) -> str:
        out = []
        for unit in units:
            form = None if unit.literal else self.forms.get(unit.code)
            if form is None:
                out.append(chr(unit.code))
            elif self.table.cased:
                out.append(_apply_case(form, unit.case))
            else:
                out.append(form)
        return "".join(out)


class AbugidaEncoder:
    """Render hub units with virama insertion and inherent-vowel suppression.

    Consonant clusters are joined with the virama, or with a subjoined form
    where the table provides one.  Pre-posed vowel signs are placed before
    the consonant they follow phonetically.  The table's rewrites run last,
    in order, over the finished string.
    """

    def __init__(self, table: ScriptTable):
        self.table = table

    def encode(self, units: list[HubUnit]) -> str:
        table = self.table
        out: list[str] = []
        pending: int | None = None  # consonant still waiting for its vowel
        consonant_at = 0            # index in out of that consonant

        for unit in units:
            if unit.literal or not is_symbol_code(unit.code):
                if pending is not None:
                    out.append(table.virama)
                    pending = None
                out.append(chr(unit.code))
                continue

            kind = hub_to_symbol(unit.code).kind
            if kind is Kind.CONSONANT:
                if pending is not None:
                    joined = table.cluster_forms.get((pending, unit.code))
                    if joined is None:
                        joined = table.subjoined.get(unit.code)
                    if joined is None:
                        out.append(table.virama)
                        joined = table.consonants[unit.code]
                    consonant_at = len(out)
                    out.append(joined)
                else:
                    consonant_at = len(out)
                    out.append(table.consonants[unit.code])
                pending = unit.code
            elif kind is Kind.VOWEL:
                if pending is None:
                    out.append(table.vowels[unit.code])
                elif unit.code in table.prevowels:
                    out.insert(consonant_at, table.signs[unit.code])
                else:
                    out.append(table.signs[unit.code])
                pending = None
            else:
                if pending is not None:
                    out.append(table.virama)
                    pending = None
                out.append(table.marks[unit.code])

        if pending is not None:
            out.append(table.virama)

        text = "".join(out)
        for src, dst in table.rewrites:
            text = text.replace(src, dst)
        return text
