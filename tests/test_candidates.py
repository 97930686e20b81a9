from citenotes.candidates import build_candidates, format_candidate, parse_document_id
from citenotes.index import ReferenceIndex
from citenotes.models import Candidate


class FakeIndex(ReferenceIndex):
    def __init__(self, snapshot, ids, titles):
        self._snapshot = snapshot
        self.ids = ids
        self.titles = titles
        self.lookups = []

    def snapshot(self):
        return dict(self._snapshot)

    def decorated_id_lookup(self, decorated):
        self.lookups.append(decorated)
        return self.ids.get(decorated)

    def entry_title(self, document_id):
        return self.titles.get(document_id)

    def all_known_ref_paths(self):
        return list(self._snapshot)


def test_build_candidates_resolves_citations(index):
    table = build_candidates(index)

    assert set(table) == {"smith2020", "doe2021"}
    assert table["smith2020"] == [
        Candidate("n-smith", "smith2020", "Smith 2020: Deep learning")
    ]
    assert table["doe2021"][0].document_id == "n-doe"


def test_build_candidates_limits_to_keys(index):
    table = build_candidates(index, ["doe2021", "unknown"])
    assert list(table) == ["doe2021"]


def test_build_candidates_skips_unresolved_keys():
    index = FakeIndex(
        {"known": "", "orphan": "", "site": "https"},
        ids={"@known": "id-1"},
        titles={"id-1": "Known note"},
    )

    table = build_candidates(index)

    assert table == {"known": [Candidate("id-1", "known", "Known note")]}
    assert sorted(index.lookups) == ["@known", "@orphan"]


def test_candidate_display_pads_to_column():
    display = format_candidate("n1", "smith2020", "Title")
    assert display == "n1" + " " * 51 + "smith2020 Title"


def test_candidate_display_keeps_one_space_for_long_keys():
    key = "k" * 75
    assert format_candidate("n1", key, "Title") == f"n1 {key} Title"


def test_display_round_trips_document_id(index):
    for candidates in build_candidates(index).values():
        for candidate in candidates:
            assert parse_document_id(candidate.display()) == candidate.document_id
            assert parse_document_id(candidate) == candidate.document_id
