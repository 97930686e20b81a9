import json
from pathlib import Path

import pytest

from citenotes import cli
from citenotes.config import CAPTURE_KEY_ENV
from citenotes.store import NoteStore


@pytest.fixture()
def workspace(tmp_path: Path, monkeypatch, store: NoteStore) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CAPTURE_KEY_ENV, raising=False)
    path = tmp_path / "workspace.json"
    store.save(path)
    return path


def _run(workspace: Path, *args: str) -> int:
    return cli.main(["--workspace", str(workspace), *args])


def test_cli_lists_candidates(workspace: Path, capsys):
    assert _run(workspace, "candidates") == 0
    lines = capsys.readouterr().out.splitlines()

    assert len(lines) == 2
    assert lines[0].split()[0] == "n-doe"
    assert lines[1].startswith("n-smith ")
    assert "smith2020 Smith 2020: Deep learning" in lines[1]


def test_cli_reports_note_presence(workspace: Path, capsys):
    _run(workspace, "has-note", "smith2020", "nobody")
    assert capsys.readouterr().out.splitlines() == ["smith2020\tyes", "nobody\tno"]


def test_cli_add_refs_persists_workspace(workspace: Path, capsys):
    assert _run(workspace, "add-refs", "a", "b") == 0
    assert capsys.readouterr().out.strip() == "@a @b"

    data = json.loads(workspace.read_text())
    assert data["documents"]["n-plain"]["properties"]["ROAM_REFS"] == "@a @b"


def test_cli_open_moves_current_document(workspace: Path, capsys):
    assert _run(workspace, "open", "doe2021") == 0
    assert capsys.readouterr().out.strip() == "n-doe"
    assert NoteStore.load(workspace).current == "n-doe"


def test_cli_open_unknown_key_fails(workspace: Path, capsys):
    assert _run(workspace, "open", "nobody") == 1
    assert "nobody" in capsys.readouterr().err


def test_cli_open_resource_without_refs(workspace: Path, capsys):
    assert _run(workspace, "open-resource") == 0
    assert capsys.readouterr().out.strip() == "No references found"


def test_cli_create_note_and_capture_key(workspace: Path, capsys):
    assert _run(workspace, "capture-key") == 0
    key = capsys.readouterr().out.strip()
    assert len(key) == 1 and key not in {"d", "n"}

    assert _run(workspace, "create-note", "new2022", "--field", "title=Fresh start") == 0
    document_id = capsys.readouterr().out.strip()

    stored = NoteStore.load(workspace).get(document_id)
    assert stored.title == "Notes on Fresh start"
    assert stored.properties["ROAM_REFS"] == "@new2022"


def test_cli_rejects_malformed_field(workspace: Path, capsys):
    assert _run(workspace, "create-note", "k", "--field", "notapair") == 1
    assert "NAME=VALUE" in capsys.readouterr().err


@pytest.mark.parametrize("content", ["capture_key: [unclosed\n", "just a string\n"])
def test_cli_reports_malformed_config(workspace: Path, capsys, content):
    config = workspace.parent / "bad.yaml"
    config.write_text(content)

    assert cli.main(["--workspace", str(workspace), "--config", str(config), "capture-key"]) == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_cli_open_resource_with_selection(workspace: Path, monkeypatch, capsys):
    _run(workspace, "add-refs", "a", "b", "c")
    capsys.readouterr()
    monkeypatch.setattr("builtins.input", lambda _prompt: "3, 1")

    assert _run(workspace, "open-resource", "--select") == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[-2:] == ["c", "a"]
