import pytest

from citenotes.backends import BackendRegistry, NotesBackend, RoamNotesBackend, setup, teardown
from citenotes.errors import InvalidArgumentError


class FileBackend(NotesBackend):
    name = "files"


def test_roam_backend_exposes_capabilities(index, host, store):
    backend = RoamNotesBackend(index, host)

    assert backend.has_items()("smith2020")
    table = backend.list_items(["smith2020"])
    assert backend.open(table["smith2020"][0]) == "n-smith"
    assert store.current == "n-smith"

    created = backend.create("new2022", {"title": "Fresh"})
    assert backend.has_items()("new2022")
    assert backend.list_items(["new2022"])["new2022"][0].document_id == created


def test_registry_restores_previous_backend(index, host):
    registry = BackendRegistry()
    files = FileBackend()
    roam = RoamNotesBackend(index, host)

    assert registry.current() is None
    setup(registry, files)
    setup(registry, roam)
    assert registry.current() is roam
    assert registry.names() == ["files", "roam"]

    teardown(registry, roam)
    assert registry.current() is files

    teardown(registry, files)
    assert registry.current() is None


def test_registry_skips_removed_backends_when_restoring(index, host):
    registry = BackendRegistry()
    first, second, third = FileBackend(), FileBackend(), RoamNotesBackend(index, host)
    registry.register("first", first)
    registry.register("second", second)
    registry.register("third", third)

    registry.unregister("second")
    assert registry.current() is third

    registry.unregister("third")
    assert registry.current() is first
    assert registry.current_name == "first"


def test_registry_rejects_unknown_names():
    registry = BackendRegistry()
    with pytest.raises(InvalidArgumentError):
        registry.unregister("missing")
    with pytest.raises(InvalidArgumentError):
        registry.get("missing")
    with pytest.raises(InvalidArgumentError):
        registry.register("", FileBackend())
