"""
Mod Scan - Item Parser
Pulls mod lines out of pasted item text.

Clipboard structure (Ctrl+C over an item in game):
    Item Class: Rings
    Rarity: Rare
    Doom Loop
    Two-Stone Ring
    --------
    Requirements:
    Level: 36
    --------
    Item Level: 75
    --------
    +16% to Fire and Cold Resistances (implicit)
    --------
    +42 to maximum Life
    --------
    Corrupted

Sections are separated by "--------". Mods live in the sections after the
"Item Level:" section. Text without that section is treated as bare mod
lines typed or pasted by hand. A unique item's unquoted flavour text
section is dropped.
"""

import re
import logging
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "--------"

# Markers that indicate non-mod sections in clipboard text
_NON_MOD_MARKERS = frozenset({
    "corrupted", "mirrored", "unidentified", "split",
})

# Annotations the game appends to mod lines
_MOD_ANNOTATION_RE = re.compile(
    r"\s*\((implicit|crafted|enchant|fractured)\)\s*$", re.IGNORECASE
)

# Property/requirement lines, never mods
_SKIP_LINE_RE = re.compile(
    r"^(Item Class|Rarity|Item Level|Level|Quality|Sockets|Requires|Requirements"
    r"|Str|Dex|Int|Stack Size|Note)\b\s*:?",
    re.IGNORECASE,
)

# Flavour text is quoted; usage hints start with "Place into", "Right click"
_FLAVOUR_RE = re.compile(r'^".*"$|^(Place into|Right click|Travel to)\b', re.IGNORECASE)

_UNIQUE_RARITY_RE = re.compile(r"^Rarity:\s*Unique\s*$", re.IGNORECASE | re.MULTILINE)


def _section_lines(section: str) -> List[str]:
    return [l.strip() for l in section.strip().split("\n") if l.strip()]


def _is_non_mod_section(lines: List[str]) -> bool:
    if len(lines) == 1 and lines[0].lower() in _NON_MOD_MARKERS:
        return True
    # Player-added notes (price tags) take the whole section
    return any(l.startswith("Note:") for l in lines)


def _unique_flavour_section(sections: List[str]) -> Optional[int]:
    """
    Index of a unique item's flavour text section, or None.

    Unique flavour text is not quoted. It is the last text section, after
    the mods, and carries no numbers.
    """
    for i in range(len(sections) - 1, -1, -1):
        lines = _section_lines(sections[i])
        if not lines or _is_non_mod_section(lines):
            continue
        if all(_FLAVOUR_RE.match(l) for l in lines):
            continue
        if any(ch.isdigit() for l in lines for ch in l):
            return None
        return i
    return None


def extract_mod_lines(text: str) -> List[Tuple[str, str]]:
    """
    Extract mod lines from item text.

    Returns a list of (mod_type, text) tuples where mod_type is
    "explicit", "implicit", "crafted", "enchant" or "fractured".
    Unannotated lines are explicit.
    """
    if not text or not text.strip():
        return []

    sections = text.replace("\r\n", "\n").split(SECTION_SEPARATOR)

    ilvl_idx = None
    for i, section in enumerate(sections):
        if "Item Level:" in section:
            ilvl_idx = i
            break

    mod_sections = sections if ilvl_idx is None else sections[ilvl_idx + 1:]

    flavour_idx = None
    if ilvl_idx is not None and _UNIQUE_RARITY_RE.search(sections[0]):
        flavour_idx = _unique_flavour_section(mod_sections)

    mods = []
    for i, section in enumerate(mod_sections):
        if i == flavour_idx:
            continue

        lines = _section_lines(section)
        if not lines or _is_non_mod_section(lines):
            continue

        for line in lines:
            if line.lower() in _NON_MOD_MARKERS:
                continue
            if _SKIP_LINE_RE.match(line) or _FLAVOUR_RE.match(line):
                continue

            ann_match = _MOD_ANNOTATION_RE.search(line)
            if ann_match:
                mod_type = ann_match.group(1).lower()
                clean_text = line[:ann_match.start()].strip()
            else:
                mod_type = "explicit"
                clean_text = line

            if clean_text:
                mods.append((mod_type, clean_text))

    logger.debug(f"Extracted {len(mods)} mod lines")
    return mods
