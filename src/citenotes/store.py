"""JSON-backed in-memory note store used by the CLI and tests."""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import NodeNotFoundError
from .models import Document

logger = logging.getLogger(__name__)


@dataclass
class NoteStore:
    """Documents plus the host state commands act on.

    A workspace file looks like::

        {
          "current": "n1",
          "capture_keys": ["d", "n"],
          "documents": {
            "n1": {"title": "Smith 2020", "properties": {"ROAM_REFS": "@smith2020"}}
          }
        }
    """

    documents: Dict[str, Document] = field(default_factory=dict)
    current: Optional[str] = None
    capture_keys: List[str] = field(default_factory=list)

    def add(self, document: Document) -> Document:
        self.documents[document.document_id] = document
        return document

    def get(self, document_id: str) -> Optional[Document]:
        return self.documents.get(document_id)

    def require(self, document_id: str) -> Document:
        document = self.documents.get(document_id)
        if document is None:
            raise NodeNotFoundError(document_id)
        return document

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NoteStore":
        documents: Dict[str, Document] = {}
        for document_id, raw in (data.get("documents") or {}).items():
            documents[document_id] = Document(
                document_id=document_id,
                title=raw.get("title", ""),
                file=raw.get("file"),
                properties=dict(raw.get("properties") or {}),
                body=raw.get("body", ""),
            )
        return cls(
            documents=documents,
            current=data.get("current"),
            capture_keys=list(data.get("capture_keys") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        documents = {}
        for document_id, document in self.documents.items():
            raw = asdict(document)
            raw.pop("document_id")
            documents[document_id] = raw
        return {
            "current": self.current,
            "capture_keys": self.capture_keys,
            "documents": documents,
        }

    @classmethod
    def load(cls, path: Path) -> "NoteStore":
        if not path.exists():
            logger.info("Workspace %s not found; starting empty", path)
            return cls()
        return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))

    def save(self, path: Path) -> None:
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
