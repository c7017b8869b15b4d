"""
Mod Scan - Trade Stats Client
Fetches stat definitions from the trade API and turns them into table entries.

GET /api/trade/data/stats returns:
    {"result": [
        {"label": "Explicit", "entries": [
            {"id": "explicit.stat_3299347043", "text": "+# to maximum Life", "type": "explicit"},
            ...]},
        {"label": "Implicit", "entries": [...]},
        ...]}

Only groups whose label is in the allow-list are imported. Each entry's text
becomes a lowercase phrase (tabs and line breaks collapsed to one space) and
its id becomes the single target.
"""

import re
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

import requests

from config import (
    TRADE_STATS_URL,
    TRADE_STATS_CATEGORIES,
    TRADE_REQUEST_TIMEOUT,
    USER_AGENT,
)
from mod_table import ModifierEntry

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """The stats listing could not be fetched or understood."""


@dataclass(frozen=True)
class StatEntry:
    category: str      # "Explicit"
    id: str            # "explicit.stat_3299347043"
    text: str          # "+# to maximum life"


_WHITESPACE_RE = re.compile(r"[\s\x00-\x1f\x7f]+")


def normalize_stat_text(text: str) -> str:
    """Collapse control characters, line breaks and repeated spaces to one space and lowercase."""
    return _WHITESPACE_RE.sub(" ", text).strip().lower()


def parse_stats(data: dict, categories: Iterable[str] = TRADE_STATS_CATEGORIES) -> List[StatEntry]:
    """
    Extract StatEntry items from a stats API payload.

    Raises FetchError when the payload has no ``result`` list.
    """
    if not isinstance(data, dict) or not isinstance(data.get("result"), list):
        raise FetchError("Stats payload has no 'result' list")

    allowed = set(categories)
    stats = []
    for group in data["result"]:
        if not isinstance(group, dict):
            continue
        label = group.get("label", "")
        if not isinstance(label, str) or label not in allowed:
            continue

        entries = group.get("entries") or []
        if not isinstance(entries, list):
            raise FetchError(f"Stats group {label!r} has no 'entries' list")

        for entry in entries:
            if not isinstance(entry, dict):
                continue
            stat_id = entry.get("id", "")
            stat_text = entry.get("text", "")
            if not isinstance(stat_id, str) or not isinstance(stat_text, str):
                continue
            if not stat_id or not stat_text:
                continue

            text = normalize_stat_text(stat_text)
            if text:
                stats.append(StatEntry(category=label, id=stat_id, text=text))

    return stats


def stats_to_entries(stats: Iterable[StatEntry]) -> List[ModifierEntry]:
    """Map stat definitions to ModifierEntry (text → phrase, id → target)."""
    return [ModifierEntry(s.text, (s.id,)) for s in stats]


class StatsClient:
    """
    Reads the trade API stats listing.

    Usage:
        client = StatsClient()
        entries = stats_to_entries(client.fetch())
    """

    def __init__(self, url: str = TRADE_STATS_URL,
                 timeout: float = TRADE_REQUEST_TIMEOUT,
                 categories: Optional[Iterable[str]] = None,
                 session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.categories = tuple(categories) if categories else TRADE_STATS_CATEGORIES
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": USER_AGENT})

    def fetch(self) -> List[StatEntry]:
        """
        Fetch and parse the stats listing.

        Raises FetchError on network errors, non-200 responses and
        unparseable payloads. Callers keep their current table in that case.
        """
        logger.info("Fetching stat definitions from trade API...")
        try:
            resp = self._session.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Stats request failed: {e}") from e

        if resp.status_code != 200:
            raise FetchError(f"Stats API returned HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise FetchError(f"Stats API returned invalid JSON: {e}") from e

        stats = parse_stats(data, self.categories)
        logger.info(
            f"Fetched {len(stats)} stat definitions "
            f"({', '.join(self.categories)})"
        )
        return stats

    def close(self):
        self._session.close()
