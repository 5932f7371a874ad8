"""
Lazily built, per-script table cache.

Each converter owns one TableRegistry.  A table is built the first time its
script is used, under a lock for that script only, and kept for the life
of the registry.  A script whose table fails to build raises
TableLoadError on use; other scripts are unaffected.

Usage:
    from pali_translit.registry import TableRegistry

    registry = TableRegistry()
    table = registry.get(Script.MYANMAR)

    # Or with your own builders (tests, extra scripts):
    registry = TableRegistry({Script.LATIN: my_latin_builder})
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable

from pali_translit.data import BUILDERS
from pali_translit.scripts import Script
from pali_translit.table import ScriptTable, TableLoadError

logger = logging.getLogger("pali_translit.registry")


class TableRegistry:
    def __init__(self, builders: dict[Script, Callable[[], ScriptTable]] | None = None):
        self.builders = dict(BUILDERS if builders is None else builders)
        self._tables: dict[Script, ScriptTable] = {}
        self._locks: dict[Script, threading.Lock] = {}
        self._guard = threading.Lock()

    def _lock_for(self, script: Script) -> threading.Lock:
        with self._guard:
            return self._locks.setdefault(script, threading.Lock())

    def get(self, script: Script) -> ScriptTable:
        """Return the table for a script, building it on first use."""
        table = self._tables.get(script)
        if table is not None:
            return table
        with self._lock_for(script):
            table = self._tables.get(script)
            if table is None:
                table = self._build(script)
                self._tables[script] = table
        return table

    def _build(self, script: Script) -> ScriptTable:
        builder = self.builders.get(script)
        if builder is None:
            raise TableLoadError(script, "no table registered for this script")
        try:
            table = builder()
        except TableLoadError as e:
            logger.error(f"Failed to build table: {e}")
            raise
        except Exception as e:
            logger.error(f"Failed to build {script.name} table: {e}")
            raise TableLoadError(script, f"table builder failed: {e}") from e
        logger.debug(f"Built {table!r} (longest form {table.longest})")
        return table

    def preload(self, scripts: Iterable[Script] | None = None) -> dict[Script, TableLoadError]:
        """Build tables up front.  Returns the failures instead of raising."""
        failures: dict[Script, TableLoadError] = {}
        for script in scripts if scripts is not None else list(self.builders):
            try:
                self.get(script)
            except TableLoadError as e:
                failures[script] = e
        return failures

    def loaded(self) -> list[Script]:
        return list(self._tables)

    def summary(self) -> str:
        loaded = ", ".join(s.iso15924 or s.value for s in self.loaded()) or "none"
        return f"Tables: {len(self._tables)}/{len(self.builders)} loaded ({loaded})"
