"""Host application interface and a store-backed implementation."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from .errors import CitenotesError, InvalidArgumentError
from .models import CaptureTemplate, Document
from .store import NoteStore

logger = logging.getLogger(__name__)

Selector = Callable[[str, Sequence[str], bool], List[str]]


class Host:
    """Operations the surrounding editor provides to note commands."""

    def navigate_to_document(self, document_id: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def open_capture_session(self, templates: List[CaptureTemplate]) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def current_document_id(self) -> Optional[str]:  # pragma: no cover - interface
        raise NotImplementedError

    def get_document_metadata(self, document_id: Optional[str], key: str) -> Optional[str]:  # pragma: no cover - interface
        raise NotImplementedError

    def set_document_metadata(self, document_id: Optional[str], key: str, value: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def registered_capture_keys(self) -> List[str]:  # pragma: no cover - interface
        raise NotImplementedError

    def select(self, prompt: str, choices: Sequence[str], multiple: bool = False) -> List[str]:  # pragma: no cover - interface
        raise NotImplementedError

    def open_references(self, citekeys: List[str]) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def message(self, text: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError


def prompt_selector(prompt: str, choices: Sequence[str], multiple: bool) -> List[str]:
    """Ask on stdin for one or more numbered choices."""
    for number, choice in enumerate(choices, start=1):
        print(f"{number:>3}. {choice}")
    hint = "comma-separated numbers" if multiple else "a number"
    answer = input(f"{prompt} ({hint}): ")
    picked: List[str] = []
    for part in answer.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit() or not 1 <= int(part) <= len(choices):
            raise InvalidArgumentError(f"Invalid choice: {part}")
        picked.append(choices[int(part) - 1])
        if not multiple:
            break
    return picked


class StoreHost(Host):
    """Host backed by a ``NoteStore``.

    Capture sessions complete immediately by writing the templated document
    to the store and making it current. Opened references and messages are
    recorded so callers can report them.
    """

    def __init__(self, store: NoteStore, selector: Selector | None = None):
        self.store = store
        self.selector = selector or prompt_selector
        self.opened: List[str] = []
        self.messages: List[str] = []

    def _document(self, document_id: Optional[str]) -> Document:
        target = document_id or self.store.current
        if not target:
            raise CitenotesError("No current document")
        return self.store.require(target)

    def navigate_to_document(self, document_id: str) -> None:
        self.store.require(document_id)
        self.store.current = document_id

    def open_capture_session(self, templates: List[CaptureTemplate]) -> None:
        if not templates:
            raise InvalidArgumentError("No capture templates given")
        template = templates[0]
        if len(templates) > 1:
            keys = [t.key for t in templates]
            chosen = self.selector("Capture template", keys, False)
            if chosen:
                template = templates[keys.index(chosen[0])]
        document = Document(
            document_id=template.document_id,
            title=template.title or template.description,
            file=template.target,
            properties=dict(template.properties),
            body=template.header,
        )
        self.store.add(document)
        self.store.current = document.document_id
        logger.info("Captured %s into %s", document.document_id, template.target)

    def current_document_id(self) -> Optional[str]:
        return self.store.current

    def get_document_metadata(self, document_id: Optional[str], key: str) -> Optional[str]:
        return self._document(document_id).properties.get(key)

    def set_document_metadata(self, document_id: Optional[str], key: str, value: str) -> None:
        document = self._document(document_id)
        if value:
            document.properties[key] = value
        else:
            document.properties.pop(key, None)

    def registered_capture_keys(self) -> List[str]:
        return list(self.store.capture_keys)

    def select(self, prompt: str, choices: Sequence[str], multiple: bool = False) -> List[str]:
        return self.selector(prompt, choices, multiple)

    def open_references(self, citekeys: List[str]) -> None:
        self.opened.extend(citekeys)

    def message(self, text: str) -> None:
        logger.info(text)
        self.messages.append(text)
