"""
Mod Scan - Command Line
Resolves the mods of a pasted item to modifier identifiers.

Usage:
    python main.py item.txt                  # Parse an item saved from the clipboard
    python main.py < item.txt                # Same, from stdin
    python main.py --seed mods.txt item.txt  # Extend the static table from a seed file
    python main.py --refresh item.txt        # Merge stat ids from the trade API
    python main.py --debug                   # Verbose logging
"""

import sys
import os
import logging
import argparse

# Add src to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import (
    APP_VERSION,
    LOG_FILE,
    LOG_LEVEL,
    MOD_SEED_FILE,
    TRADE_STATS_CATEGORIES,
)
from mod_parser import ModParser, collect_targets
from mod_table import ConfigurationError, TableStore, build_static_table, load_seed_file
from stats_client import FetchError, StatsClient, stats_to_entries

logger = logging.getLogger("mod-scan")


def setup_logging(debug: bool = False):
    """Configure logging.

    Console shows warnings and errors only so the results stay readable.
    The log file gets INFO, or DEBUG with --debug.
    """
    level = logging.DEBUG if debug else getattr(logging, LOG_LEVEL.upper(), logging.INFO)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if debug else logging.WARNING)
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console)

    try:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
    except OSError as e:
        logger.warning(f"File logging disabled: {e}")
        return
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    ))
    root_logger.addHandler(file_handler)


def load_table(seed_file=None, refresh=False, categories=None):
    """
    Build the table for this run.

    Seed file and trade API failures are reported and skipped; the static
    table is always available.
    """
    table = build_static_table()
    logger.info(f"Static table: {len(table)} phrases")

    if seed_file:
        try:
            table = table.merged(load_seed_file(seed_file))
        except ConfigurationError as e:
            logger.warning(f"{e}; continuing with the built-in table")

    if refresh:
        client = StatsClient(categories=categories)
        try:
            table = table.merged(stats_to_entries(client.fetch()))
        except FetchError as e:
            logger.warning(f"Trade stats unavailable: {e}")
        finally:
            client.close()

    return table


def format_result(parsed) -> str:
    targets = ", ".join(parsed.targets)
    line = f"{parsed.raw_text} -> {targets}"
    if parsed.mod_type != "explicit":
        line += f" ({parsed.mod_type})"
    return line


def run(text: str, store: TableStore, out=None) -> int:
    """Parse ``text`` and print one line per resolved mod. Returns the count."""
    out = out or sys.stdout
    parser = ModParser(store)
    mods = parser.parse_mods(text)

    for parsed in mods:
        print(format_result(parsed), file=out)

    targets = collect_targets(mods)
    if targets:
        print("", file=out)
        print("Found: " + ", ".join(targets), file=out)
    else:
        print("No known modifiers found.", file=out)
    return len(mods)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Mod Scan - match item mods to modifier identifiers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py item.txt                      # Parse a saved item
  python main.py --refresh item.txt            # Include trade API stat ids
  python main.py --category Explicit item.txt  # Only explicit stats
        """
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Item text file (default: read stdin)"
    )
    parser.add_argument(
        "--seed", "-s",
        default=str(MOD_SEED_FILE) if MOD_SEED_FILE else None,
        help="Seed file with extra ['phrase'] = \"id\", lines"
    )
    parser.add_argument(
        "--refresh", "-r",
        action="store_true",
        help="Fetch stat definitions from the trade API and merge them"
    )
    parser.add_argument(
        "--category",
        action="append",
        help=f"Stat category to import, repeatable (default: {', '.join(TRADE_STATS_CATEGORIES)})"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}"
    )

    args = parser.parse_args(argv)

    setup_logging(debug=args.debug)

    try:
        if args.file:
            with open(args.file, "r", encoding="utf-8") as f:
                text = f.read()
        else:
            text = sys.stdin.read()

        table = load_table(
            seed_file=args.seed,
            refresh=args.refresh,
            categories=args.category,
        )
        run(text, TableStore(table))
    except KeyboardInterrupt:
        print("\nGoodbye!")
    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
