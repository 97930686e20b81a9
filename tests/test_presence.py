from citenotes.models import REFS_PROPERTY
from citenotes.presence import has_notes


def test_has_notes_reports_tracked_references(index):
    has_note = has_notes(index)

    assert has_note("smith2020")
    assert has_note("doe2021")
    assert has_note("//example.com/page")
    assert not has_note("nobody1999")


def test_has_notes_is_stable_for_same_snapshot(index):
    first = has_notes(index)
    second = has_notes(index)
    for key in ["smith2020", "doe2021", "nobody1999", ""]:
        assert first(key) == second(key)


def test_has_notes_keeps_build_time_snapshot(index, store):
    has_note = has_notes(index)
    store.get("n-plain").properties[REFS_PROPERTY] = "@late2024"

    assert not has_note("late2024")
    assert has_notes(index)("late2024")
