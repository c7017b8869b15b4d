"""Tests for mod_table.py — entries, table construction, seed files, reload."""

import threading

import pytest

from mod_names import MOD_NAME_LIST
from mod_table import (
    ConfigurationError,
    ModifierEntry,
    ModifierTable,
    TableStore,
    build_static_table,
    build_table,
    load_seed_file,
    parse_seed_line,
)
from tests.conftest import make_table


# ── ModifierEntry ────────────────────────────────────────

def test_entry_single_target_normalised_to_tuple():
    entry = ModifierEntry("maximum life", "Life")
    assert entry.targets == ("Life",)


def test_entry_list_target_normalised_to_tuple():
    entry = ModifierEntry("all attributes", ["Str", "Dex", "Int"])
    assert entry.targets == ("Str", "Dex", "Int")


def test_entry_without_targets_rejected():
    with pytest.raises(ValueError):
        ModifierEntry("life", ())


def test_entry_is_frozen():
    entry = ModifierEntry("life", "Life")
    with pytest.raises(AttributeError):
        entry.phrase = "mana"


# ── ModifierTable ────────────────────────────────────────

def test_empty_table_is_configuration_error():
    with pytest.raises(ConfigurationError):
        ModifierTable([])
    with pytest.raises(ConfigurationError):
        ModifierTable.from_mapping({})
    with pytest.raises(ConfigurationError):
        build_static_table({})


def test_table_mapping_interface(small_table):
    assert "maximum life" in small_table
    assert "nonexistent" not in small_table
    assert small_table["mana"].targets == ("Mana",)
    assert small_table.get("nonexistent") is None
    assert len(small_table) == 7
    assert set(small_table) == {
        "life", "maximum life", "to maximum life", "mana",
        "all attributes", "attributes", "fire resistance",
    }


def test_table_is_read_only(small_table):
    with pytest.raises(TypeError):
        small_table["mana"] = ModifierEntry("mana", "Other")


def test_table_lowercases_entry_phrases():
    table = ModifierTable([ModifierEntry("Maximum Life", "Life")])
    assert list(table) == ["maximum life"]
    assert table["maximum life"].phrase == "maximum life"
    assert table["maximum life"].targets == ("Life",)


def test_from_mapping_lowercases_phrases():
    table = ModifierTable.from_mapping({"Maximum Life": "Life"})
    assert "maximum life" in table
    assert table["maximum life"].phrase == "maximum life"


def test_duplicate_phrase_last_write_wins():
    table = ModifierTable([
        ModifierEntry("life", "Life"),
        ModifierEntry("mana", "Mana"),
        ModifierEntry("life", "stat_life"),
    ])
    assert table["life"].targets == ("stat_life",)
    assert len(table) == 2
    assert table.overwrites == 1


def test_duplicate_with_same_targets_not_counted():
    table = ModifierTable([ModifierEntry("life", "Life"), ModifierEntry("life", "Life")])
    assert table.overwrites == 0


def test_merged_returns_new_table(small_table):
    merged = small_table.merged([
        ModifierEntry("mana", "stat_mana"),
        ModifierEntry("cold resistance", "ColdResist"),
    ])
    assert merged is not small_table
    assert merged["mana"].targets == ("stat_mana",)
    assert merged["cold resistance"].targets == ("ColdResist",)
    assert small_table["mana"].targets == ("Mana",)
    assert "cold resistance" not in small_table
    assert merged.overwrites == 1


def test_static_table_contents(static_table):
    assert len(static_table) == len(MOD_NAME_LIST)
    assert static_table["maximum life"].targets == ("Life",)
    assert static_table["all attributes"].targets == ("Str", "Dex", "Int")
    assert static_table["all maximum resistances"].targets == (
        "FireResistMax", "ColdResistMax", "LightningResistMax", "ChaosResistMax",
    )
    assert all(phrase == phrase.lower() for phrase in static_table)


def test_insertion_order_does_not_change_contents():
    a = make_table(MOD_NAME_LIST)
    b = make_table(MOD_NAME_LIST, shuffle_seed=7)
    assert dict(a) == dict(b)


# ── Seed file ────────────────────────────────────────────

SEED_LINES = [
    ('["to maximum life"] = "stat_1",', ("to maximum life", "stat_1")),
    ('    ["maximum mana"] = "Mana",', ("maximum mana", "Mana")),
    ('["Fire Resistance"] = "FireResist"', ("fire resistance", "FireResist")),
    ('["+#% to fire resistance"] = "explicit.stat_3372524247",',
     ("+#% to fire resistance", "explicit.stat_3372524247")),
    ('["adds # to # fire damage, to attacks"] = "stat_2",',
     ("adds # to # fire damage, to attacks", "stat_2")),
]


@pytest.mark.parametrize("line,expected", SEED_LINES)
def test_parse_seed_line(line, expected):
    assert parse_seed_line(line) == expected


@pytest.mark.parametrize("line", [
    "",
    "-- Attributes",
    '["strength"] = ',
    '["strength"] "Str",',
    'strength = "Str",',
    '[""] = "Str",',
    '["strength"] = "",',
])
def test_parse_seed_line_malformed(line):
    assert parse_seed_line(line) is None


def test_seed_file_round_trip(tmp_path):
    seed = tmp_path / "temp_modparser.txt"
    seed.write_text('["to maximum life"] = "stat_1",\n', encoding="utf-8")

    table = build_table(seed_file=seed)
    assert list(table["to maximum life"].targets) == ["stat_1"]
    assert "maximum life" in table   # static entries still there


def test_seed_file_skips_malformed_lines(tmp_path):
    seed = tmp_path / "seed.txt"
    seed.write_text(
        '["to maximum life"] = "stat_1",\n'
        "this line is garbage\n"
        "\n"
        '["incomplete"] =\n'
        '["to maximum mana"] = "stat_2",\n',
        encoding="utf-8",
    )
    entries = load_seed_file(seed)
    assert [e.phrase for e in entries] == ["to maximum life", "to maximum mana"]


def test_seed_file_skips_undecodable_lines(tmp_path):
    """Lines written in a legacy code page are dropped, the rest still load."""
    seed = tmp_path / "seed.txt"
    seed.write_bytes(
        b'["to maximum life"] = "stat_1",\r\n'
        b'["caf\x92e"] = "stat_2",\r\n'
        b'["to maximum mana"] = "stat_3",\r\n'
    )
    entries = load_seed_file(seed)
    assert [(e.phrase, e.targets) for e in entries] == [
        ("to maximum life", ("stat_1",)),
        ("to maximum mana", ("stat_3",)),
    ]


def test_seed_file_with_bom(tmp_path):
    seed = tmp_path / "seed.txt"
    seed.write_bytes(b'\xef\xbb\xbf["to maximum life"] = "stat_1",\n')
    assert [e.phrase for e in load_seed_file(seed)] == ["to maximum life"]


def test_seed_file_missing(tmp_path):
    with pytest.raises(ConfigurationError):
        load_seed_file(tmp_path / "missing.txt")
    with pytest.raises(ConfigurationError):
        build_table(seed_file=tmp_path / "missing.txt")


def test_seed_overrides_static_entry(tmp_path):
    seed = tmp_path / "seed.txt"
    seed.write_text('["maximum life"] = "stat_life",\n', encoding="utf-8")
    table = build_table(seed_file=seed)
    assert table["maximum life"].targets == ("stat_life",)
    assert table.overwrites == 1


def test_build_table_layers_stats_last(tmp_path):
    seed = tmp_path / "seed.txt"
    seed.write_text('["maximum life"] = "from_seed",\n', encoding="utf-8")
    stats = [ModifierEntry("maximum life", "from_stats")]
    table = build_table(seed_file=seed, stats=stats)
    assert table["maximum life"].targets == ("from_stats",)


# ── TableStore ───────────────────────────────────────────

def test_store_requires_table():
    with pytest.raises(ConfigurationError):
        TableStore(None)


def test_store_reload_swaps_reference(small_table):
    store = TableStore(small_table)
    held = store.table

    new_table = make_table({"mana": "stat_mana"})
    assert store.reload(lambda: new_table) is new_table

    assert store.table is new_table
    # A reader that took the old reference keeps a consistent table
    assert held is small_table
    assert held["mana"].targets == ("Mana",)


def test_store_reload_failure_keeps_current_table(small_table):
    store = TableStore(small_table)

    def failing_builder():
        raise ConfigurationError("no data")

    with pytest.raises(ConfigurationError):
        store.reload(failing_builder)
    assert store.table is small_table


def test_store_reload_rejects_non_table(small_table):
    store = TableStore(small_table)
    with pytest.raises(ConfigurationError):
        store.reload(lambda: {"mana": "Mana"})
    assert store.table is small_table


def test_store_concurrent_reloads(small_table):
    """Readers only ever see complete tables while reloads run."""
    store = TableStore(small_table)
    tables = [make_table({"mana": f"stat_{i}"}) for i in range(20)]
    seen = []

    def reader():
        for _ in range(200):
            table = store.table
            seen.append(len(table) in (1, len(small_table)))

    def writer():
        for t in tables:
            store.reload(lambda t=t: t)

    threads = [threading.Thread(target=reader), threading.Thread(target=writer)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert all(seen)
    assert store.table is tables[-1]
