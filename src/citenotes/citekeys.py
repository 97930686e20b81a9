"""Select citation entries from a reference index snapshot."""
from __future__ import annotations

from typing import AbstractSet, Dict, Optional, Sequence, Union

from .errors import InvalidArgumentError

CitekeyCollection = Union[Sequence[str], AbstractSet[str]]


def _validate_keys(keys: object) -> set:
    if isinstance(keys, (str, bytes)) or not isinstance(keys, (list, tuple, set, frozenset)):
        raise InvalidArgumentError(
            f"citekeys must be a list of strings, got {type(keys).__name__}"
        )
    if not all(isinstance(key, str) for key in keys):
        raise InvalidArgumentError("citekeys must contain only strings")
    return set(keys)


def filter_citekeys(
    snapshot: Dict[str, Optional[str]], keys: Optional[CitekeyCollection] = None
) -> Dict[str, str]:
    """Return the citation entries of ``snapshot``, optionally limited to ``keys``.

    Entries with a non-empty reference type (links and other resources) are
    never returned.
    """
    allowed = None if keys is None else _validate_keys(keys)
    return {
        ref_path: ref_type or ""
        for ref_path, ref_type in snapshot.items()
        if not ref_type and (allowed is None or ref_path in allowed)
    }
