"""
Character frequency analysis for corpus text.

Finds every character a script's table does not account for (and that is
not ordinary punctuation, whitespace or digits), counts it, records which
sources contain it, and keeps a few context snippets for each.  Useful for
spotting stray code points before converting a corpus.

Usage:
    from pali_translit.charstats import analyze_files

    report = analyze_files(["data/s0101m.txt"], Script.DEVANAGARI)
    print(report.summary())
    report.write_tsv("data/anomalies.tsv")
"""

from __future__ import annotations

import csv
import logging
import re
import unicodedata
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from pali_translit.registry import TableRegistry
from pali_translit.scripts import Script

logger = logging.getLogger("pali_translit.charstats")

# Characters that are never reported, whatever the script
COMMON_CHARS = set(
    " \t\n\r.,;:!?-()[]{}\"'`0123456789"
    "—–“”‘’"
    "।॥"
)
CONTEXT_WIDTH = 20

_WS_RE = re.compile(r"\s+")


@dataclass
class CharacterInfo:
    char: str
    count: int = 0
    sources: set[str] = field(default_factory=set)
    examples: list[str] = field(default_factory=list)

    @property
    def codepoint(self) -> str:
        return f"U+{ord(self.char):04X}"

    @property
    def name(self) -> str:
        return unicodedata.name(self.char, "<unnamed>")


@dataclass
class CharacterReport:
    """Anomalous characters found across a set of sources."""

    script: Script
    sources_checked: int = 0
    total_chars: int = 0
    standard_chars: int = 0
    chars: dict[str, CharacterInfo] = field(default_factory=dict)
    counts: Counter = field(default_factory=Counter)  # char -> count, all chars

    def anomalies(self) -> list[CharacterInfo]:
        """Anomalous characters, most frequent first."""
        return sorted(self.chars.values(), key=lambda c: (-c.count, c.char))

    def summary(self, top: int = 20) -> str:
        if self.total_chars == 0:
            return "No characters checked."

        pct = lambda n, d: f"{100*n/d:.2f}%" if d > 0 else "N/A"
        anomalous = self.total_chars - self.standard_chars

        lines = [
            f"═══ Character Analysis ({self.script.name}) ═══",
            "",
            f"Sources:        {self.sources_checked}",
            f"Characters:     {self.total_chars}",
            f"Standard:       {self.standard_chars:8d}  ({pct(self.standard_chars, self.total_chars)})",
            f"Non-standard:   {anomalous:8d}  ({pct(anomalous, self.total_chars)})",
            f"Distinct non-standard: {len(self.chars)}",
        ]
        if self.chars:
            lines.extend(["", f"─── Top {min(top, len(self.chars))} ───"])
            for info in self.anomalies()[:top]:
                lines.append(
                    f"  {info.char!r:8} {info.codepoint:8} {info.count:6d}  "
                    f"{len(info.sources)} source(s)  {info.name}"
                )
        return "\n".join(lines)

    def write_tsv(self, path: str | Path) -> None:
        """Write every anomaly with its sources and examples to a TSV file."""
        path = Path(path)
        with path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f, delimiter="\t")
            writer.writerow(["char", "codepoint", "name", "count", "sources", "examples"])
            for info in self.anomalies():
                writer.writerow([
                    info.char,
                    info.codepoint,
                    info.name,
                    info.count,
                    ", ".join(sorted(info.sources)),
                    " | ".join(info.examples),
                ])


def _context(text: str, index: int, width: int = CONTEXT_WIDTH) -> str:
    start = max(0, index - width)
    snippet = text[start:index + width + 1]
    return _WS_RE.sub(" ", snippet).strip()


def standard_chars(script: Script, registry: TableRegistry | None = None) -> set[str]:
    """Characters considered normal for text in the given script."""
    registry = registry if registry is not None else TableRegistry()
    chars = set(COMMON_CHARS) | registry.get(script).known_chars()
    if script is Script.LATIN:
        chars.update("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
        chars.update(c.upper() for c in list(chars))
    return chars


def analyze_characters(
    texts: Iterable[tuple[str, str]],
    script: Script,
    *,
    registry: TableRegistry | None = None,
    examples: int = 10,
) -> CharacterReport:
    """Analyze (source_name, text) pairs written in ``script``."""
    standard = standard_chars(script, registry)
    report = CharacterReport(script=script)

    for source, text in texts:
        report.sources_checked += 1
        for i, ch in enumerate(text):
            report.total_chars += 1
            report.counts[ch] += 1
            if ch in standard:
                report.standard_chars += 1
                continue
            info = report.chars.get(ch)
            if info is None:
                info = report.chars[ch] = CharacterInfo(ch)
            info.count += 1
            info.sources.add(source)
            if len(info.examples) < examples:
                snippet = _context(text, i)
                if snippet not in info.examples:
                    info.examples.append(snippet)
    return report


def analyze_files(
    paths: Iterable[str | Path],
    script: Script,
    *,
    registry: TableRegistry | None = None,
    examples: int = 10,
) -> CharacterReport:
    """Analyze UTF-8 text files; unreadable files are logged and skipped."""

    def _read():
        for p in paths:
            p = Path(p)
            try:
                text = p.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping {p}: {e}")
                continue
            yield p.name, text

    return analyze_characters(_read(), script, registry=registry, examples=examples)
