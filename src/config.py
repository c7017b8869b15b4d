"""
Mod Scan - Configuration
All tunable constants in one place.

Values that differ per machine can be overridden from the environment or a
.env file next to the project (loaded with python-dotenv).
"""

import os
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

PROJECT_DIR = Path(__file__).resolve().parent.parent

# ─────────────────────────────────────────────
# Version
# ─────────────────────────────────────────────
_version_file = PROJECT_DIR / "resources" / "VERSION"
APP_VERSION = _version_file.read_text().strip() if _version_file.exists() else "dev"

# ─────────────────────────────────────────────
# Trade API (stat definitions)
# ─────────────────────────────────────────────
TRADE_API_BASE = os.environ.get("TRADE_API_BASE", "https://www.pathofexile.com/api/trade")
TRADE_STATS_URL = os.environ.get("TRADE_STATS_URL", f"{TRADE_API_BASE}/data/stats")

# Only stat groups with these labels are imported into the table.
# "Crafted" and "Pseudo" are opt-in.
TRADE_STATS_CATEGORIES = tuple(
    c.strip()
    for c in os.environ.get("TRADE_STATS_CATEGORIES", "Explicit,Implicit").split(",")
    if c.strip()
)

TRADE_REQUEST_TIMEOUT = float(os.environ.get("TRADE_REQUEST_TIMEOUT", "15"))
USER_AGENT = os.environ.get("USER_AGENT", f"ModScan/{APP_VERSION}")

# ─────────────────────────────────────────────
# Modifier Table
# ─────────────────────────────────────────────
# Optional seed file extending the static table, one entry per line:
#   ["to maximum life"] = "stat_3299347043",
_seed = os.environ.get("MOD_SEED_FILE", "")
MOD_SEED_FILE = Path(_seed).expanduser() if _seed else None

# ─────────────────────────────────────────────
# Logging
# ─────────────────────────────────────────────
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FILE = Path(os.environ.get(
    "LOG_FILE",
    Path(os.path.expanduser("~")) / ".mod-scan" / "mod_scan.log",
))
