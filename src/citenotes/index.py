"""Reference index over note documents."""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .models import REFS_PROPERTY, ReferenceEntry
from .properties import parse_ref, split_values
from .store import NoteStore


class ReferenceIndex:
    """Read-only view of the reference associations kept by the note indexer."""

    def snapshot(self) -> Dict[str, str]:  # pragma: no cover - interface
        """Return a mapping of reference path to reference type."""
        raise NotImplementedError

    def decorated_id_lookup(self, decorated: str) -> Optional[str]:  # pragma: no cover - interface
        raise NotImplementedError

    def entry_title(self, document_id: str) -> Optional[str]:  # pragma: no cover - interface
        raise NotImplementedError

    def all_known_ref_paths(self) -> List[str]:  # pragma: no cover - interface
        raise NotImplementedError


class StoreReferenceIndex(ReferenceIndex):
    """Derive references from the ``ROAM_REFS`` property of stored documents.

    Every call reads the store afresh, so results always reflect the current
    document properties.
    """

    def __init__(self, store: NoteStore):
        self.store = store

    def entries(self) -> List[Tuple[ReferenceEntry, str]]:
        refs: List[Tuple[ReferenceEntry, str]] = []
        for document in self.store.documents.values():
            for token in split_values(document.properties.get(REFS_PROPERTY)):
                ref_path, ref_type = parse_ref(token)
                if ref_path:
                    refs.append((ReferenceEntry(ref_path, ref_type), document.document_id))
        return refs

    def snapshot(self) -> Dict[str, str]:
        return {entry.ref_path: entry.ref_type for entry, _ in self.entries()}

    def decorated_id_lookup(self, decorated: str) -> Optional[str]:
        for entry, document_id in self.entries():
            if entry.is_citation and entry.decorated() == decorated:
                return document_id
        return None

    def entry_title(self, document_id: str) -> Optional[str]:
        document = self.store.get(document_id)
        return document.title if document else None

    def all_known_ref_paths(self) -> List[str]:
        seen: Dict[str, None] = {}
        for entry, _ in self.entries():
            seen.setdefault(entry.ref_path, None)
        return list(seen)
