"""Answer whether a reference has an associated note."""
from __future__ import annotations

from typing import Callable

from .index import ReferenceIndex
from .models import decorate


def has_notes(index: ReferenceIndex) -> Callable[[str], bool]:
    """Return a predicate over a snapshot of every tracked reference.

    Unlike candidate building this does not filter by reference type: any
    tracked reference counts as having a note. The predicate does not see
    changes made to the index after it was built.
    """
    table = {decorate(ref_path): True for ref_path in index.all_known_ref_paths()}

    def has_note(ref_path: str) -> bool:
        return table.get(decorate(ref_path), False)

    return has_note
