"""Pluggable notes backends and the registry choosing the active one."""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional, Union

from .candidates import build_candidates
from .citekeys import CitekeyCollection
from .capture import create_capture_note
from .config import Settings
from .errors import InvalidArgumentError
from .host import Host
from .index import ReferenceIndex
from .models import Candidate, CandidateTable
from .opener import open_note
from .presence import has_notes

logger = logging.getLogger(__name__)


class NotesBackend:
    """Capabilities a notes source offers to the bibliography tool."""

    name: str = "base"

    def has_items(self) -> Callable[[str], bool]:  # pragma: no cover - interface
        raise NotImplementedError

    def list_items(self, keys: Optional[CitekeyCollection] = None) -> CandidateTable:  # pragma: no cover - interface
        raise NotImplementedError

    def open(self, candidate: Union[str, Candidate]) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def create(self, citekey: str, entry: Mapping[str, object]) -> str:  # pragma: no cover - interface
        raise NotImplementedError


class RoamNotesBackend(NotesBackend):
    """Notes are documents whose ``ROAM_REFS`` carry the citekey."""

    name = "roam"

    def __init__(self, index: ReferenceIndex, host: Host, settings: Settings | None = None):
        self.index = index
        self.host = host
        self.settings = settings or Settings()

    def has_items(self) -> Callable[[str], bool]:
        return has_notes(self.index)

    def list_items(self, keys: Optional[CitekeyCollection] = None) -> CandidateTable:
        return build_candidates(self.index, keys)

    def open(self, candidate: Union[str, Candidate]) -> str:
        return open_note(self.host, candidate)

    def create(self, citekey: str, entry: Mapping[str, object]) -> str:
        return create_capture_note(self.host, citekey, entry, self.settings)


class BackendRegistry:
    """Named backends with save/restore of the active one.

    Registering a backend makes it current and remembers which backend was
    current before; unregistering it restores that one.
    """

    def __init__(self) -> None:
        self._backends: Dict[str, NotesBackend] = {}
        self._previous: List[Optional[str]] = []
        self._current: Optional[str] = None

    def register(self, name: str, backend: NotesBackend) -> NotesBackend:
        if not name:
            raise InvalidArgumentError("Backend name must not be empty")
        self._backends[name] = backend
        if self._current != name:
            self._previous.append(self._current)
            self._current = name
        logger.debug("Registered notes backend %s", name)
        return backend

    def unregister(self, name: str) -> None:
        if name not in self._backends:
            raise InvalidArgumentError(f"Unknown notes backend: {name}")
        del self._backends[name]
        self._previous = [prev for prev in self._previous if prev != name]
        if self._current == name:
            restored = None
            while self._previous:
                candidate = self._previous.pop()
                if candidate is None or candidate in self._backends:
                    restored = candidate
                    break
            self._current = restored
        logger.debug("Unregistered notes backend %s; current is %s", name, self._current)

    def current(self) -> Optional[NotesBackend]:
        if self._current is None:
            return None
        return self._backends[self._current]

    @property
    def current_name(self) -> Optional[str]:
        return self._current

    def get(self, name: str) -> NotesBackend:
        try:
            return self._backends[name]
        except KeyError:
            raise InvalidArgumentError(f"Unknown notes backend: {name}") from None

    def names(self) -> List[str]:
        return list(self._backends)


def setup(registry: BackendRegistry, backend: NotesBackend) -> NotesBackend:
    """Make ``backend`` the active notes source."""
    return registry.register(backend.name, backend)


def teardown(registry: BackendRegistry, backend: NotesBackend) -> None:
    """Deactivate ``backend`` and restore the source active before it."""
    registry.unregister(backend.name)
