"""
Mod Scan - Mod Parser
Matches item mod text to modifier identifiers.

Each mod line goes through two scans:
1. Form scan (regex mode) against MOD_FORM_LIST picks the numeric form
   ("42% increased", "+12 to", "adds 5 to 10 fire damage") and captures
   the numbers.
2. Name scan (plain mode) against the ModifierTable finds the modifier
   phrase in the line, numbers replaced by "#" so trade API stat texts
   ("+# to maximum life") match as well as plain names ("maximum life").

Both scans use the same best-match rule: earliest start wins, then the
longest span, then the longest pattern. Table iteration order never
affects the result.
"""

import re
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Mapping, Optional, Tuple, Union

from item_parser import extract_mod_lines
from mod_names import MOD_FORM_LIST, NEGATIVE_FORMS
from mod_table import ModifierEntry, ModifierTable, TableStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    entry: ModifierEntry        # winning phrase and its targets
    start: int                  # span [start, end) in the lowercased line
    end: int
    remainder: str              # line with the span cut out
    captures: Tuple[Optional[str], ...] = ()   # regex groups, pattern mode only

    @property
    def phrase(self) -> str:
        return self.entry.phrase

    @property
    def targets(self) -> Tuple[str, ...]:
        return self.entry.targets

    def __bool__(self) -> bool:
        return True


class NoMatch:
    """Result of a scan that found nothing. Falsy, keeps the line as given."""

    __slots__ = ("line",)

    entry = None
    targets: Tuple[str, ...] = ()
    captures: Tuple[Optional[str], ...] = ()

    def __init__(self, line: str):
        self.line = line

    @property
    def remainder(self) -> str:
        return self.line

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other) -> bool:
        return isinstance(other, NoMatch) and other.line == self.line

    def __hash__(self) -> int:
        return hash(("NoMatch", self.line))

    def __repr__(self) -> str:
        return f"NoMatch({self.line!r})"


ScanResult = Union[MatchResult, NoMatch]


@lru_cache(maxsize=1024)
def _compile(pattern: str) -> Optional[re.Pattern]:
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.warning(f"Skipping invalid form pattern {pattern!r}: {e}")
        return None


def _is_better(start: int, end: int, pattern: str,
               best_start: int, best_end: int, best_pattern: str) -> bool:
    if start != best_start:
        return start < best_start
    if end != best_end:
        return end > best_end
    if len(pattern) != len(best_pattern):
        return len(pattern) > len(best_pattern)
    return pattern < best_pattern


def scan(line: str, patterns: Mapping, plain: bool = True) -> ScanResult:
    """
    Find the best-matching pattern anywhere in ``line``.

    Args:
        line: mod text, any case
        patterns: ModifierTable, or a mapping of pattern → target(s)
        plain: True for literal substring search, False to treat each
            pattern as a regex

    Returns:
        MatchResult for the earliest/longest match, else NoMatch(line)
    """
    line_lower = line.lower()

    best = None   # (start, end, pattern, captures)
    for pattern in patterns:
        if not pattern:
            continue
        if plain:
            start = line_lower.find(pattern)
            if start < 0:
                continue
            end = start + len(pattern)
            captures = ()
        else:
            regex = _compile(pattern)
            if regex is None:
                continue
            m = regex.search(line_lower)
            if m is None:
                continue
            start, end = m.span()
            captures = m.groups()

        if best is None or _is_better(start, end, pattern, best[0], best[1], best[2]):
            best = (start, end, pattern, captures)

    if best is None:
        return NoMatch(line)

    start, end, pattern, captures = best
    value = patterns[pattern]
    entry = value if isinstance(value, ModifierEntry) else ModifierEntry(pattern, value)

    # Lowercasing can change the length of some non-ASCII text; cut the
    # span from the string it was measured on in that case.
    source = line if len(line) == len(line_lower) else line_lower
    remainder = source[:start] + source[end:]

    return MatchResult(
        entry=entry,
        start=start,
        end=end,
        remainder=remainder,
        captures=tuple(captures),
    )


@dataclass
class ParsedMod:
    raw_text: str                       # "+42 to maximum Life"
    mod_type: str                       # "explicit" or "implicit"
    phrase: str                         # "maximum life"
    targets: Tuple[str, ...]            # ("Life",)
    form: str = ""                      # "BASE", "INC", ... or "" when no form matched
    values: Tuple[float, ...] = ()      # (42.0,)


_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def to_placeholder_text(line: str) -> str:
    """Replace every number with the "#" placeholder: "+42 to Life" → "+# to Life"."""
    return _NUMBER_RE.sub("#", line)


def _capture_values(captures, negate: bool) -> Tuple[float, ...]:
    values = []
    for group in captures:
        if group is None:
            continue
        try:
            value = float(group)
        except ValueError:
            continue   # damage type words, resource names
        values.append(-value if negate else value)
    return tuple(values)


def collect_targets(mods: List[ParsedMod]) -> List[str]:
    """Flatten the targets of parsed mods, dropping repeats."""
    seen = {}
    for parsed in mods:
        for target in parsed.targets:
            seen.setdefault(target, None)
    return list(seen)


class ModParser:
    """
    Resolves mod lines to modifier identifiers.

    Usage:
        mp = ModParser(TableStore(build_table()))
        mods = mp.parse_mods(clipboard_text)
        ids = mp.resolve_targets(clipboard_text)
    """

    def __init__(self, store: Union[TableStore, ModifierTable],
                 forms: Optional[Mapping[str, str]] = None):
        if isinstance(store, ModifierTable):
            store = TableStore(store)
        self._store = store
        self._forms = MOD_FORM_LIST if forms is None else forms

    @property
    def table(self) -> ModifierTable:
        return self._store.table

    def parse_line(self, line: str, mod_type: str = "explicit") -> Optional[ParsedMod]:
        """Parse a single mod line. Returns None when no modifier name matched."""
        return self._parse_line(line, mod_type, self._store.table)

    def parse_mods(self, text: str) -> List[ParsedMod]:
        """
        Parse every mod line of an item.

        Args:
            text: clipboard-format item text, or bare mod lines

        Returns:
            ParsedMod for each line that resolved, in item order
        """
        table = self._store.table   # one table for the whole item
        mod_lines = extract_mod_lines(text)

        results = []
        for mod_type, line in mod_lines:
            parsed = self._parse_line(line, mod_type, table)
            if parsed:
                results.append(parsed)
            else:
                logger.debug(f"No modifier matched: {line!r}")

        if mod_lines:
            logger.debug(f"Matched {len(results)}/{len(mod_lines)} mods")
        return results

    def resolve_targets(self, text: str) -> List[str]:
        """All identifiers found in ``text``, de-duplicated, first seen first."""
        return collect_targets(self.parse_mods(text))

    def _parse_line(self, line: str, mod_type: str,
                    table: ModifierTable) -> Optional[ParsedMod]:
        text = line.strip()
        if not text:
            return None

        form = scan(text, self._forms, plain=False)

        # Stat texts from the trade API carry "#" where the numbers go
        name = scan(to_placeholder_text(text), table)
        if not name:
            return None

        form_tag = form.targets[0] if form else ""
        return ParsedMod(
            raw_text=line,
            mod_type=mod_type,
            phrase=name.phrase,
            targets=name.targets,
            form=form_tag,
            values=_capture_values(form.captures, form_tag in NEGATIVE_FORMS),
        )
