"""Open the note behind a selected candidate."""
from __future__ import annotations

import logging
from typing import Union

from .candidates import parse_document_id
from .host import Host
from .models import Candidate

logger = logging.getLogger(__name__)


def open_note(host: Host, candidate: Union[str, Candidate]) -> str:
    """Navigate to the candidate's document and return its id.

    Raises ``NodeNotFoundError`` from the host when the id has no document.
    """
    document_id = parse_document_id(candidate)
    logger.info("Opening note %s", document_id)
    host.navigate_to_document(document_id)
    return document_id
