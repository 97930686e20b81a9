"""Helpers for reading and writing multi-valued document properties."""
from __future__ import annotations

import re
from typing import Callable, Iterable, List, Optional, Tuple

from .models import REF_MARKER

TOKEN_PATTERN = re.compile(r'"((?:\\.|[^"\\])*)"|(\S+)')
SCHEME_PATTERN = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]+):(?P<rest>.+)$")
CITE_PREFIX = "cite:"


def _token_value(match: re.Match) -> str:
    quoted, bare = match.groups()
    if quoted is not None:
        return re.sub(r"\\(.)", r"\1", quoted)
    return bare


def split_values(value: Optional[str]) -> List[str]:
    """Split a property value into tokens, honouring double-quoted values."""
    if not value:
        return []
    return [_token_value(match) for match in TOKEN_PATTERN.finditer(value)]


def quote_value(value: str) -> str:
    if value and not re.search(r'[\s"]', value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def join_values(values: Iterable[str]) -> str:
    return " ".join(quote_value(value) for value in values)


def append_values(existing: Optional[str], values: Iterable[str]) -> str:
    """Append values not already present, leaving the existing text untouched."""
    present = set(split_values(existing))
    additions: List[str] = []
    for value in values:
        if value in present:
            continue
        present.add(value)
        additions.append(value)
    if not additions:
        return existing or ""
    joined = join_values(additions)
    if not existing or not existing.strip():
        return joined
    return f"{existing.rstrip()} {joined}"


def remove_values(existing: Optional[str], drop: Callable[[str], bool]) -> str:
    """Cut the values matching ``drop`` out of ``existing``.

    The text between kept values is left as written; each removed value
    takes the whitespace in front of it along.
    """
    if not existing:
        return ""
    pieces: List[str] = []
    position = 0
    removed_first = False
    for number, match in enumerate(TOKEN_PATTERN.finditer(existing)):
        if drop(_token_value(match)):
            removed_first = removed_first or number == 0
        else:
            pieces.append(existing[position:match.start()])
            pieces.append(match.group(0))
        position = match.end()
    pieces.append(existing[position:])
    text = "".join(pieces)
    if removed_first:
        text = text.lstrip()
    return text if text.strip() else ""


def parse_ref(token: str) -> Tuple[str, str]:
    """Return ``(ref_path, ref_type)`` for a single reference token.

    Citekeys (``@key``, ``cite:key`` or a bare key) get an empty type. Any
    other ``scheme:rest`` token is typed by its scheme and keeps ``rest`` as
    the path, so ``https://example.com`` becomes ``//example.com`` and
    ``doi:10.1/x`` becomes ``10.1/x``. Single-letter schemes are not links.
    """
    if token.startswith(REF_MARKER):
        return token[len(REF_MARKER):], ""
    if token.startswith(CITE_PREFIX):
        return token[len(CITE_PREFIX):].lstrip(REF_MARKER), ""
    match = SCHEME_PATTERN.match(token)
    if match:
        return match.group("rest"), match.group("scheme").lower()
    return token, ""
