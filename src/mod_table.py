"""
Mod Scan - Modifier Table
Phrase → identifier lookup the line matcher scans against.

The table is built once from the static MOD_NAME_LIST, optionally extended
with a seed file and with stat definitions fetched from the trade API, and
is read-only afterwards. A reload builds a whole new table and swaps the
reference held by TableStore.

Seed file format (one entry per line):
    ["to maximum life"] = "stat_3299347043",
"""

import re
import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, Optional, Tuple, Union

from mod_names import MOD_NAME_LIST

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """The table cannot be built from the given sources."""


@dataclass(frozen=True)
class ModifierEntry:
    phrase: str                 # "to maximum life"
    targets: Tuple[str, ...]    # ("Life",) or ("Str", "Dex", "Int")

    def __post_init__(self):
        targets = self.targets
        if isinstance(targets, str):
            targets = (targets,)
        else:
            targets = tuple(targets)
        if not targets:
            raise ValueError(f"Modifier {self.phrase!r} has no targets")
        object.__setattr__(self, "targets", targets)


TargetSpec = Union[str, Iterable[str]]


class ModifierTable(Mapping):
    """
    Immutable mapping of phrase → ModifierEntry.

    Later entries with the same phrase replace earlier ones. Every
    replacement with different targets is logged and counted in
    ``overwrites`` so a hand-maintained list can be audited.
    """

    def __init__(self, entries: Iterable[ModifierEntry]):
        data: Dict[str, ModifierEntry] = {}
        overwrites = 0
        for entry in entries:
            # scan() lowercases the line, so keys must be lowercase too
            if entry.phrase != entry.phrase.lower():
                entry = replace(entry, phrase=entry.phrase.lower())
            previous = data.get(entry.phrase)
            if previous is not None and previous.targets != entry.targets:
                overwrites += 1
                logger.debug(
                    f"Phrase {entry.phrase!r} redefined: "
                    f"{previous.targets} → {entry.targets}"
                )
            data[entry.phrase] = entry

        if not data:
            raise ConfigurationError("ModifierTable needs at least one phrase")

        self._data = data
        self.overwrites = overwrites

    @classmethod
    def from_mapping(cls, mapping: Dict[str, TargetSpec]) -> "ModifierTable":
        """Build a table from a plain {phrase: target(s)} dict."""
        if not mapping:
            raise ConfigurationError("ModifierTable needs at least one phrase")
        return cls(ModifierEntry(phrase.lower(), targets) for phrase, targets in mapping.items())

    def merged(self, entries: Iterable[ModifierEntry]) -> "ModifierTable":
        """Return a new table with ``entries`` layered over this one."""
        def _chain():
            yield from self._data.values()
            yield from entries
        return ModifierTable(_chain())

    def __getitem__(self, phrase: str) -> ModifierEntry:
        return self._data[phrase]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"<ModifierTable phrases={len(self._data)}>"


# ─── Seed file ───────────────────────────────────

# ["<phrase>"] = "<id>",  (trailing comma optional)
_SEED_LINE_RE = re.compile(r'^\s*\["(.+?)"\]\s*=\s*"(.+?)"\s*,?\s*$')


def parse_seed_line(line: str) -> Optional[Tuple[str, str]]:
    """Parse one seed line into (phrase, id), or None if malformed."""
    m = _SEED_LINE_RE.match(line)
    if not m:
        return None
    phrase, target = m.group(1).strip().lower(), m.group(2).strip()
    if not phrase or not target:
        return None
    return phrase, target


def load_seed_file(path: Union[str, Path]) -> list:
    """
    Read ModifierEntry items from a seed file.

    Malformed lines, including lines that are not valid UTF-8 (seed files
    written with a legacy ANSI code page), are skipped. Raises
    ConfigurationError when the file does not exist or cannot be read;
    the static table is still usable then.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Seed file not found: {path}")

    entries = []
    skipped = 0
    try:
        with open(path, "rb") as f:
            for raw in f:
                try:
                    line = raw.decode("utf-8-sig")
                except UnicodeDecodeError:
                    skipped += 1
                    continue
                if not line.strip():
                    continue
                parsed = parse_seed_line(line)
                if parsed is None:
                    skipped += 1
                    continue
                entries.append(ModifierEntry(*parsed))
    except OSError as e:
        raise ConfigurationError(f"Seed file unreadable: {path}: {e}") from e

    if skipped:
        logger.debug(f"Seed file {path.name}: skipped {skipped} malformed lines")
    logger.info(f"Loaded {len(entries)} entries from seed file {path}")
    return entries


# ─── Table construction ──────────────────────────

def build_static_table(mod_names: Optional[Dict[str, TargetSpec]] = None) -> ModifierTable:
    """Build the default table from the compiled-in name list."""
    names = MOD_NAME_LIST if mod_names is None else mod_names
    return ModifierTable.from_mapping(names)


def build_table(seed_file: Optional[Union[str, Path]] = None,
                stats: Optional[Iterable[ModifierEntry]] = None,
                mod_names: Optional[Dict[str, TargetSpec]] = None) -> ModifierTable:
    """
    Compose a table: static names, then seed entries, then remote stats.
    Later sources shadow earlier ones on equal phrases.
    """
    table = build_static_table(mod_names)
    if seed_file is not None:
        table = table.merged(load_seed_file(seed_file))
    if stats is not None:
        table = table.merged(stats)
    if table.overwrites:
        logger.info(f"ModifierTable: {table.overwrites} phrases redefined by later sources")
    return table


class TableStore:
    """
    Holds the current ModifierTable by reference.

    Readers take ``store.table`` once and use that object for the whole
    match; reload() only ever replaces the reference, never mutates a table.
    """

    def __init__(self, table: ModifierTable):
        if table is None:
            raise ConfigurationError("TableStore needs a table")
        self._table = table
        self._lock = threading.Lock()

    @property
    def table(self) -> ModifierTable:
        return self._table

    def reload(self, builder: Callable[[], ModifierTable]) -> ModifierTable:
        """
        Build a new table with ``builder`` and swap it in.

        If the builder raises, the current table stays in place and the
        exception propagates.
        """
        with self._lock:
            new_table = builder()
            if not isinstance(new_table, ModifierTable):
                raise ConfigurationError("Table builder returned no ModifierTable")
            self._table = new_table
        logger.info(f"ModifierTable reloaded: {len(new_table)} phrases")
        return new_table
