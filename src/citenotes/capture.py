"""Capture key allocation and creation of reference notes."""
from __future__ import annotations

import hashlib
import logging
import string
import uuid
from typing import Callable, Iterable, List, Mapping, Optional

from .config import Settings
from .errors import CapacityExceededError
from .host import Host
from .models import CaptureTemplate
from .refs import add_refs
from .template import format_title

logger = logging.getLogger(__name__)

KEY_POOL = string.ascii_lowercase + string.ascii_uppercase
CAPTURE_DESCRIPTION = "Reference note"


def available_keys(taken: Iterable[str]) -> List[str]:
    """Return the unused letters, ``a..z`` before ``A..Z``."""
    used = set(taken)
    return [key for key in KEY_POOL if key not in used]


def taken_keys_digest(taken: Iterable[str]) -> int:
    # Sorted so the result depends on the set of keys, not their order.
    canonical = "".join(sorted(set(taken)))
    return int(hashlib.sha256(canonical.encode()).hexdigest(), 16)


def allocate_capture_key(taken: Iterable[str]) -> str:
    """Pick a free single-letter capture key, stable for a given taken set."""
    taken = list(taken)
    pool = available_keys(taken)
    if not pool:
        raise CapacityExceededError("All 52 single-letter capture keys are taken")
    return pool[taken_keys_digest(taken) % len(pool)]


def capture_key(host: Host, settings: Settings) -> str:
    if settings.capture_key:
        return settings.capture_key
    return allocate_capture_key(host.registered_capture_keys())


def build_capture_template(
    citekey: str,
    entry: Mapping[str, object],
    settings: Settings,
    key: str,
    document_id: Optional[str] = None,
) -> CaptureTemplate:
    title = format_title(settings.note_title_template, entry) or citekey
    document_id = document_id or str(uuid.uuid4())
    return CaptureTemplate(
        key=key,
        description=CAPTURE_DESCRIPTION,
        target=f"{settings.notes_subdir}/{citekey}.org",
        header=f"#+title: {title}\n",
        document_id=document_id,
        title=title,
    )


def create_capture_note(
    host: Host,
    citekey: str,
    entry: Mapping[str, object],
    settings: Settings,
    id_factory: Callable[[], str] | None = None,
) -> str:
    """Create a note for ``citekey`` through a capture session.

    The session runs to completion before the citekey is stamped into the
    new document's ``ROAM_REFS``. Returns the new document id.
    """
    key = capture_key(host, settings)
    document_id = id_factory() if id_factory else None
    template = build_capture_template(citekey, entry, settings, key, document_id)
    logger.info("Capturing note %s for %s with key %s", template.document_id, citekey, key)
    host.open_capture_session([template])
    add_refs(host, citekey, document_id=template.document_id)
    return template.document_id
