"""Command line interface over a JSON note workspace."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List

from .backends import BackendRegistry, RoamNotesBackend, setup
from .capture import capture_key
from .config import Settings, load_settings
from .errors import CitenotesError, InvalidArgumentError, UnresolvedReferenceError
from .host import StoreHost
from .index import StoreReferenceIndex
from .refs import add_refs, open_resource, remove_refs
from .store import NoteStore

logger = logging.getLogger(__name__)

DEFAULT_WORKSPACE = Path("citenotes.json")


def _parse_fields(pairs: List[str] | None) -> Dict[str, str]:
    fields: Dict[str, str] = {}
    for pair in pairs or []:
        name, sep, value = pair.partition("=")
        if not sep or not name.strip():
            raise InvalidArgumentError(f"Expected NAME=VALUE, got {pair!r}")
        fields[name.strip()] = value
    return fields


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Link bibliography citekeys to notes")
    parser.add_argument(
        "--workspace",
        type=Path,
        default=DEFAULT_WORKSPACE,
        help="JSON workspace holding documents and capture keys",
    )
    parser.add_argument("--config", type=Path, help="YAML settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    commands = parser.add_subparsers(dest="command", required=True)

    candidates = commands.add_parser("candidates", help="List notes for citekeys")
    candidates.add_argument("keys", nargs="*", help="Limit to these citekeys")

    has_note = commands.add_parser("has-note", help="Report whether citekeys have notes")
    has_note.add_argument("keys", nargs="+")

    open_cmd = commands.add_parser("open", help="Open the note for a citekey")
    open_cmd.add_argument("key")

    add = commands.add_parser("add-refs", help="Attach citekeys to a document")
    add.add_argument("keys", nargs="+")
    add.add_argument("--document", help="Document id (defaults to the current one)")

    remove = commands.add_parser("remove-refs", help="Detach citekeys from a document")
    remove.add_argument("keys", nargs="+")
    remove.add_argument("--document", help="Document id (defaults to the current one)")

    resource = commands.add_parser(
        "open-resource", help="Open the references of the current document"
    )
    resource.add_argument(
        "--select", action="store_true", help="Choose which references to open"
    )

    create = commands.add_parser("create-note", help="Create a note for a citekey")
    create.add_argument("key")
    create.add_argument(
        "--field",
        action="append",
        metavar="NAME=VALUE",
        help="Bibliography field used in the note title (can be repeated)",
    )

    commands.add_parser("capture-key", help="Show the capture key notes are created with")
    return parser


def _run(args: argparse.Namespace, settings: Settings) -> int:
    store = NoteStore.load(args.workspace)
    host = StoreHost(store)
    registry = BackendRegistry()
    backend = setup(registry, RoamNotesBackend(StoreReferenceIndex(store), host, settings))
    changed = False

    if args.command == "candidates":
        table = backend.list_items(args.keys or None)
        for key in sorted(table):
            for candidate in table[key]:
                print(candidate.display())
    elif args.command == "has-note":
        has_note = backend.has_items()
        for key in args.keys:
            print(f"{key}\t{'yes' if has_note(key) else 'no'}")
    elif args.command == "open":
        candidates = backend.list_items([args.key]).get(args.key)
        if not candidates:
            raise UnresolvedReferenceError(args.key)
        print(backend.open(candidates[0]))
        changed = True
    elif args.command == "add-refs":
        print(add_refs(host, args.keys, document_id=args.document))
        changed = True
    elif args.command == "remove-refs":
        print(remove_refs(host, args.keys, document_id=args.document))
        changed = True
    elif args.command == "open-resource":
        for key in open_resource(host, select=args.select):
            print(key)
        for message in host.messages:
            print(message)
    elif args.command == "create-note":
        print(backend.create(args.key, _parse_fields(args.field)))
        changed = True
    elif args.command == "capture-key":
        print(capture_key(host, settings))

    if changed:
        store.save(args.workspace)
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings(args.config)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else settings.log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )
        return _run(args, settings)
    except (CitenotesError, FileNotFoundError, ValueError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
