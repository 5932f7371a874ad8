#!/usr/bin/env python3
"""
Pali script conversion CLI.

Reads pali_translit.toml from the current directory if present, or pass
--config.  Text comes from --text or, line by line, from stdin:

    pali-translit --from latn --to deva --text "saṅgha"
    pali-translit --from deva --to ipe --hub --text "सङ्घ"
    pali-translit --from latn --to mymr --pattern --text "bhikkhu*"
    cat sutta.txt | pali-translit --from deva --to sinh
    pali-translit --charstats data/*.txt --script deva --report data/anomalies.tsv
"""

import argparse
import logging
import sys
from pathlib import Path


def _find_default_config() -> Path | None:
    """Look for pali_translit.toml in CWD."""
    candidate = Path("pali_translit.toml")
    if candidate.exists():
        return candidate
    return None


def _hex_units(ipe_text: str) -> str:
    return " ".join(f"{ord(ch):02X}" for ch in ipe_text)


def main(argv: list[str] | None = None) -> int:
    from pali_translit.scripts import Script

    parser = argparse.ArgumentParser(
        description="Convert Pali text between scripts"
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect pali_translit.toml)",
    )
    parser.add_argument(
        "--from",
        dest="source",
        default="unknown",
        help="Source script: name or ISO 15924 code, 'ipe', or 'unknown' to detect (default)",
    )
    parser.add_argument(
        "--to",
        dest="target",
        default="latn",
        help="Target script: name or ISO 15924 code, or 'ipe' (default: latn)",
    )
    parser.add_argument(
        "--text",
        help="Text to convert (default: read lines from stdin)",
    )
    parser.add_argument(
        "--pattern",
        action="store_true",
        help="Treat input as a search pattern; wildcard glyphs are kept as-is",
    )
    parser.add_argument(
        "--title-case",
        action="store_true",
        help="Capitalize words (Latin output only)",
    )
    parser.add_argument(
        "--hub",
        action="store_true",
        help="Also print the hub code units in hex",
    )
    parser.add_argument(
        "--charstats",
        nargs="+",
        metavar="FILE",
        help="Report non-standard characters in text files (use with --script)",
    )
    parser.add_argument(
        "--script",
        default="deva",
        help="Script of the --charstats files (default: deva)",
    )
    parser.add_argument(
        "--report",
        metavar="FILE",
        help="Write the full --charstats list to a TSV file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log table loading",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = Script.from_name(args.source)
        target = Script.from_name(args.target)
        stats_script = Script.from_name(args.script)
    except ValueError as e:
        parser.error(str(e))
    if target is Script.UNKNOWN:
        parser.error("--to cannot be 'unknown'")

    # ── Build converter ──────────────────────────────────────────────────

    from pali_translit.converter import ScriptConverter
    from pali_translit.patterns import WildcardConverter
    from pali_translit.table import TableLoadError

    config_path = Path(args.config) if args.config else _find_default_config()
    if config_path is not None:
        converter = ScriptConverter.from_config(config_path)
    else:
        converter = ScriptConverter()

    # ── Character statistics ─────────────────────────────────────────────

    if args.charstats:
        from pali_translit.charstats import analyze_files

        report = analyze_files(args.charstats, stats_script, registry=converter.registry)
        print(report.summary())
        if args.report:
            report.write_tsv(args.report)
            print(f"\nFull list written to {args.report}")
        return 0

    # ── Convert ──────────────────────────────────────────────────────────

    lines = [args.text] if args.text is not None else (l.rstrip("\n") for l in sys.stdin)
    patterns = WildcardConverter(converter)

    try:
        for line in lines:
            if args.pattern:
                out = patterns.convert(line, source, target)
            else:
                out = converter.convert(line, source, target, title_case=args.title_case)
            print(out)
            if args.hub:
                print(_hex_units(converter.to_hub(line, source)))
    except TableLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
