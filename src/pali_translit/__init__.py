"""pali-translit: Pali text conversion between fourteen scripts via the IPE hub."""

from pali_translit.scripts import Script, detect_script
from pali_translit.symbols import HubUnit, Symbol, hub_to_symbol, symbol_to_hub
from pali_translit.table import ScriptTable, TranslitError, TableLoadError, AmbiguousTableError
from pali_translit.registry import TableRegistry
from pali_translit.converter import ScriptConverter, convert, to_title_case
from pali_translit.patterns import WildcardConverter, convert_preserving_wildcards
from pali_translit.charstats import CharacterReport, analyze_characters

__all__ = [
    "Script", "detect_script",
    "HubUnit", "Symbol", "hub_to_symbol", "symbol_to_hub",
    "ScriptTable", "TranslitError", "TableLoadError", "AmbiguousTableError",
    "TableRegistry",
    "ScriptConverter", "convert", "to_title_case",
    "WildcardConverter", "convert_preserving_wildcards",
    "CharacterReport", "analyze_characters",
]
