"""Shared fixtures for the Mod Scan test suite."""

import sys
import random
from pathlib import Path

import pytest

# Ensure src/ is importable
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from mod_names import MOD_NAME_LIST
from mod_table import ModifierEntry, ModifierTable, build_static_table

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ── Tables ───────────────────────────────────────────────

@pytest.fixture(scope="session")
def static_table():
    """The built-in table, built once per session."""
    return build_static_table()


@pytest.fixture
def small_table():
    """A handful of phrases with overlapping spans."""
    return make_table({
        "life": "Life",
        "maximum life": "Life",
        "to maximum life": "stat_1",
        "mana": "Mana",
        "all attributes": ("Str", "Dex", "Int"),
        "attributes": ("Str", "Dex", "Int"),
        "fire resistance": "FireResist",
    })


def make_table(mapping, shuffle_seed=None):
    """Build a ModifierTable from a dict, optionally in shuffled insertion order."""
    items = list(mapping.items())
    if shuffle_seed is not None:
        random.Random(shuffle_seed).shuffle(items)
    return ModifierTable(ModifierEntry(phrase, targets) for phrase, targets in items)


def shuffled_static_tables(count=3):
    """The static name list in ``count`` different insertion orders."""
    return [make_table(MOD_NAME_LIST, shuffle_seed=seed) for seed in range(count)]


# ── Trade API payload ────────────────────────────────────

@pytest.fixture
def stats_payload():
    """Trimmed /api/trade/data/stats response."""
    return {
        "result": [
            {
                "label": "Pseudo",
                "entries": [
                    {"id": "pseudo.pseudo_total_life", "text": "+# total maximum Life", "type": "pseudo"},
                ],
            },
            {
                "label": "Explicit",
                "entries": [
                    {"id": "explicit.stat_3299347043", "text": "+# to maximum Life", "type": "explicit"},
                    {"id": "explicit.stat_681332047", "text": "#% increased Attack Speed", "type": "explicit"},
                    {"id": "explicit.stat_multiline", "text": "Adds # to # Fire Damage\nto Attacks", "type": "explicit"},
                    {"id": "", "text": "broken entry without id", "type": "explicit"},
                    {"id": "explicit.stat_no_text", "type": "explicit"},
                ],
            },
            {
                "label": "Implicit",
                "entries": [
                    {"id": "implicit.stat_3372524247", "text": "+#% to Fire Resistance", "type": "implicit"},
                ],
            },
            {
                "label": "Crafted",
                "entries": [
                    {"id": "crafted.stat_3299347043", "text": "+# to maximum Life", "type": "crafted"},
                ],
            },
        ]
    }


# ── Item text ────────────────────────────────────────────

def load_fixture(filename):
    """Load a single fixture file by name."""
    path = FIXTURES_DIR / filename
    if not path.exists():
        pytest.skip(f"Fixture {filename} not found")
    return path.read_text(encoding="utf-8")
