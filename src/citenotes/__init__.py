"""Link bibliography citekeys to note documents."""

from .backends import BackendRegistry, NotesBackend, RoamNotesBackend
from .candidates import build_candidates, parse_document_id
from .capture import allocate_capture_key, create_capture_note
from .citekeys import filter_citekeys
from .config import Settings, load_settings
from .errors import (
    CapacityExceededError,
    CitenotesError,
    InvalidArgumentError,
    NodeNotFoundError,
    UnresolvedReferenceError,
)
from .host import Host, StoreHost
from .index import ReferenceIndex, StoreReferenceIndex
from .models import Candidate, CaptureTemplate, Document, NodeInfo, ReferenceEntry
from .opener import open_note
from .presence import has_notes
from .refs import add_refs, open_resource, remove_refs
from .store import NoteStore

__all__ = [
    "BackendRegistry",
    "NotesBackend",
    "RoamNotesBackend",
    "build_candidates",
    "parse_document_id",
    "allocate_capture_key",
    "create_capture_note",
    "filter_citekeys",
    "Settings",
    "load_settings",
    "CapacityExceededError",
    "CitenotesError",
    "InvalidArgumentError",
    "NodeNotFoundError",
    "UnresolvedReferenceError",
    "Host",
    "StoreHost",
    "ReferenceIndex",
    "StoreReferenceIndex",
    "Candidate",
    "CaptureTemplate",
    "Document",
    "NodeInfo",
    "ReferenceEntry",
    "open_note",
    "has_notes",
    "add_refs",
    "open_resource",
    "remove_refs",
    "NoteStore",
]
