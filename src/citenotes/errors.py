"""Exception hierarchy for citation note commands."""
from __future__ import annotations


class CitenotesError(Exception):
    """Base class for errors surfaced to the invoking command."""


class InvalidArgumentError(CitenotesError, ValueError):
    """Raised when a command receives a malformed argument."""


class NodeNotFoundError(CitenotesError, LookupError):
    """Raised when a document identifier has no live document."""

    def __init__(self, document_id: str):
        super().__init__(f"No document with id {document_id!r}")
        self.document_id = document_id


class UnresolvedReferenceError(CitenotesError, LookupError):
    """A citekey that does not resolve to a document id."""

    def __init__(self, citekey: str):
        super().__init__(f"No document for citekey {citekey!r}")
        self.citekey = citekey


class CapacityExceededError(CitenotesError, RuntimeError):
    """Raised when every single-letter capture key is already taken."""
