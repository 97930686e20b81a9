"""Data models for citekey-to-note mapping."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

CANDIDATE_WIDTH = 60
REF_MARKER = "@"
REFS_PROPERTY = "ROAM_REFS"


@dataclass(frozen=True)
class ReferenceEntry:
    """A reference path tracked by the index and its type tag."""

    ref_path: str
    ref_type: str = ""

    @property
    def is_citation(self) -> bool:
        return not self.ref_type

    def decorated(self) -> str:
        return decorate(self.ref_path)


@dataclass(frozen=True)
class NodeInfo:
    document_id: str
    ref_path: str
    title: str


@dataclass(frozen=True)
class Candidate:
    """Selection payload pairing a note document with the citekey it covers."""

    document_id: str
    ref_path: str
    title: str = ""

    def display(self) -> str:
        """Return the display string; the document id is always the first token."""
        padding = " " * max(1, CANDIDATE_WIDTH - len(self.ref_path))
        return f"{self.document_id}{padding}{self.ref_path} {self.title}".rstrip()

    @classmethod
    def from_node(cls, node: NodeInfo) -> "Candidate":
        return cls(document_id=node.document_id, ref_path=node.ref_path, title=node.title)


CandidateTable = Dict[str, List[Candidate]]


@dataclass
class CaptureTemplate:
    """Template handed to the host capture session."""

    key: str
    description: str
    target: str
    header: str
    document_id: str
    title: str = ""
    properties: Dict[str, str] = field(default_factory=dict)


@dataclass
class Document:
    """A note document as held by the in-memory store."""

    document_id: str
    title: str = ""
    file: Optional[str] = None
    properties: Dict[str, str] = field(default_factory=dict)
    body: str = ""


def decorate(ref_path: str) -> str:
    """Return the lookup key used by the secondary index."""
    return f"{REF_MARKER}{ref_path}"
