import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest

from citenotes.host import StoreHost
from citenotes.index import StoreReferenceIndex
from citenotes.models import Document
from citenotes.store import NoteStore


@pytest.fixture()
def store() -> NoteStore:
    """A workspace with two reference notes, a link note and a plain note."""

    notes = NoteStore(capture_keys=["d", "n"])
    notes.add(
        Document(
            "n-smith",
            title="Smith 2020: Deep learning",
            file="references/smith2020.org",
            properties={"ROAM_REFS": "@smith2020"},
        )
    )
    notes.add(
        Document(
            "n-doe",
            title="Doe & Roe on testing",
            file="references/doe2021.org",
            properties={"ROAM_REFS": "cite:doe2021"},
        )
    )
    notes.add(
        Document(
            "n-site",
            title="Example site",
            properties={"ROAM_REFS": "https://example.com/page"},
        )
    )
    notes.add(Document("n-plain", title="Scratch"))
    notes.current = "n-plain"
    return notes


@pytest.fixture()
def index(store: NoteStore) -> StoreReferenceIndex:
    return StoreReferenceIndex(store)


@pytest.fixture()
def host(store: NoteStore) -> StoreHost:
    return StoreHost(store, selector=lambda _prompt, choices, _multiple: list(choices))
