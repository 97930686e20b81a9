"""Build selection candidates for citekeys that have notes."""
from __future__ import annotations

import logging
from typing import Optional, Union

from .citekeys import CitekeyCollection, filter_citekeys
from .errors import UnresolvedReferenceError
from .index import ReferenceIndex
from .models import Candidate, CandidateTable, NodeInfo, decorate

logger = logging.getLogger(__name__)


def format_candidate(document_id: str, ref_path: str, title: str) -> str:
    return Candidate(document_id, ref_path, title).display()


def parse_document_id(value: Union[str, Candidate]) -> str:
    """Return the document id carried by a candidate or its display string."""
    if isinstance(value, Candidate):
        return value.document_id
    tokens = value.split(None, 1)
    if not tokens:
        raise ValueError("empty candidate string")
    return tokens[0]


def resolve_node(index: ReferenceIndex, ref_path: str) -> NodeInfo:
    document_id = index.decorated_id_lookup(decorate(ref_path))
    if not document_id:
        raise UnresolvedReferenceError(ref_path)
    return NodeInfo(
        document_id=document_id,
        ref_path=ref_path,
        title=index.entry_title(document_id) or "",
    )


def build_candidates(
    index: ReferenceIndex, keys: Optional[CitekeyCollection] = None
) -> CandidateTable:
    """Map each citation key with a note to its candidates, newest first.

    Keys whose document id cannot be resolved are skipped.
    """
    table: CandidateTable = {}
    for ref_path in filter_citekeys(index.snapshot(), keys):
        try:
            node = resolve_node(index, ref_path)
        except UnresolvedReferenceError as exc:
            logger.warning("Skipping candidate: %s", exc)
            continue
        table.setdefault(ref_path, []).insert(0, Candidate.from_node(node))
    logger.debug("Built candidates for %d citekeys", len(table))
    return table
