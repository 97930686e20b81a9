"""Render note titles from bibliography entry fields."""
from __future__ import annotations

import re
from typing import Dict, List, Mapping, Optional

DEFAULT_TITLE_TEMPLATE = "Notes on ${author editor:%etal}, ${title}"

PLACEHOLDER_PATTERN = re.compile(r"\$\{(?P<fields>[^}:]+)(?::(?P<fmt>[^}]*))?\}")
NAME_SEPARATOR = re.compile(r"\s+and\s+")
EMPTY_MARK = "\x00"
EMPTY_FIELD_PATTERN = re.compile(r"\x00[,;:]?\s*")


def _family_name(name: str) -> str:
    name = name.strip()
    if "," in name:
        return name.split(",", 1)[0].strip()
    parts = name.split()
    return parts[-1] if parts else ""


def shorten_names(value: str) -> str:
    """Shorten a BibTeX name list to ``A``, ``A & B`` or ``A et al.``."""
    names = [_family_name(name) for name in NAME_SEPARATOR.split(value) if name.strip()]
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} & {names[1]}"
    return f"{names[0]} et al."


def _clean(value: object) -> str:
    text = str(value).replace("{", "").replace("}", "")
    return re.sub(r"\s+", " ", text).strip()


def _lookup(entry: Mapping[str, object], fields: List[str]) -> Optional[str]:
    lowered: Dict[str, object] = {str(k).lower(): v for k, v in entry.items()}
    for name in fields:
        value = lowered.get(name.lower())
        if value not in (None, ""):
            return _clean(value)
    return None


def _apply_format(value: str, fmt: Optional[str]) -> str:
    if not fmt:
        return value
    if fmt == "%etal":
        return shorten_names(value)
    if fmt.isdigit():
        width = int(fmt)
        return value[:width].ljust(width)
    return value


def format_title(template: str, entry: Mapping[str, object]) -> str:
    """Fill ``${field other:fmt}`` placeholders from ``entry``.

    Fields separated by spaces are tried in order; missing fields render
    empty and the separator left behind by them is dropped. Returns an empty
    string when no placeholder could be filled.
    """
    filled = []

    def replace(match: re.Match) -> str:
        value = _lookup(entry, match.group("fields").split())
        if value is None:
            return EMPTY_MARK
        filled.append(match.group(0))
        return _apply_format(value, match.group("fmt"))

    text = PLACEHOLDER_PATTERN.sub(replace, template)
    if PLACEHOLDER_PATTERN.search(template) and not filled:
        return ""
    text = EMPTY_FIELD_PATTERN.sub("", text)
    return text.strip().strip(",;:").strip()
