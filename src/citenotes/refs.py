"""Commands that read and edit the references attached to a document."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from .errors import InvalidArgumentError
from .host import Host
from .models import REFS_PROPERTY, decorate
from .properties import append_values, parse_ref, remove_values, split_values

logger = logging.getLogger(__name__)

NO_REFERENCES_MESSAGE = "No references found"


def _as_citekeys(citekeys: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(citekeys, str):
        return [citekeys]
    if isinstance(citekeys, (list, tuple)) and all(isinstance(key, str) for key in citekeys):
        return list(citekeys)
    raise InvalidArgumentError(
        f"Expected a citekey or a list of citekeys, got {type(citekeys).__name__}"
    )


def add_refs(
    host: Host, citekeys: Union[str, Sequence[str]], document_id: Optional[str] = None
) -> str:
    """Attach ``@citekey`` values to a document's ``ROAM_REFS``.

    Values already present are not repeated and the existing text is kept
    as written. Returns the new property value.
    """
    keys = _as_citekeys(citekeys)
    existing = host.get_document_metadata(document_id, REFS_PROPERTY)
    value = append_values(existing, [decorate(key) for key in keys])
    host.set_document_metadata(document_id, REFS_PROPERTY, value)
    logger.info("Added refs %s", ", ".join(keys))
    return value


def remove_refs(
    host: Host, citekeys: Union[str, Sequence[str]], document_id: Optional[str] = None
) -> str:
    """Detach citekeys from a document, in any of their written forms.

    Other values and the spacing between them are kept as written.
    """
    keys = set(_as_citekeys(citekeys))
    existing = host.get_document_metadata(document_id, REFS_PROPERTY)

    def drop(token: str) -> bool:
        ref_path, ref_type = parse_ref(token)
        return not ref_type and ref_path in keys

    value = remove_values(existing, drop)
    host.set_document_metadata(document_id, REFS_PROPERTY, value)
    logger.info("Removed refs %s", ", ".join(sorted(keys)))
    return value


def document_citekeys(host: Host, document_id: Optional[str] = None) -> List[str]:
    """Return the citekeys attached to a document, in written order."""
    keys: List[str] = []
    for token in split_values(host.get_document_metadata(document_id, REFS_PROPERTY)):
        ref_path, ref_type = parse_ref(token)
        if not ref_type and ref_path not in keys:
            keys.append(ref_path)
    return keys


def open_resource(host: Host, select: bool = False) -> List[str]:
    """Open the references of the current document.

    All of them are opened unless ``select`` is set (the prefix-argument
    case), in which case the user picks a subset. Without a current document
    this reports that no references were found. Returns the opened keys.
    """
    keys = document_citekeys(host) if host.current_document_id() else []
    if not keys:
        host.message(NO_REFERENCES_MESSAGE)
        return []
    if select:
        keys = host.select("Open references", keys, True)
    if keys:
        host.open_references(keys)
    return keys
