from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List

import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from citenotes.candidates import build_candidates  # noqa: E402
from citenotes.index import StoreReferenceIndex  # noqa: E402
from citenotes.presence import has_notes  # noqa: E402
from citenotes.store import NoteStore  # noqa: E402


def _parse_keys(text: str) -> List[str]:
    return [key.strip().lstrip("@") for key in text.replace(",", " ").split() if key.strip()]


def _build_rows(store: NoteStore, keys: List[str]) -> List[Dict[str, str]]:
    index = StoreReferenceIndex(store)
    table = build_candidates(index, keys or None)
    rows = []
    for citekey in sorted(table):
        for candidate in table[citekey]:
            document = store.get(candidate.document_id)
            rows.append(
                {
                    "Citekey": citekey,
                    "Title": candidate.title,
                    "Document": candidate.document_id,
                    "File": document.file if document and document.file else "",
                }
            )
    return rows


def _presence_rows(store: NoteStore, keys: List[str]) -> List[Dict[str, str]]:
    has_note = has_notes(StoreReferenceIndex(store))
    return [{"Citekey": key, "Has note": "Yes" if has_note(key) else "No"} for key in keys]


def main() -> None:
    st.set_page_config(page_title="Citation Notes", layout="wide")
    st.title("Citation Notes")
    st.caption("Browse which citekeys have reference notes in a workspace.")

    workspace = st.text_input("Workspace file", value=str(ROOT / "citenotes.json"))
    key_text = st.text_area(
        "Citekeys",
        placeholder="Leave empty to list every citekey with a note...",
        height=120,
    )

    if st.button("Show notes"):
        path = Path(workspace)
        if not path.exists():
            st.warning(f"Workspace `{path}` not found.")
            return
        store = NoteStore.load(path)
        keys = _parse_keys(key_text)
        rows = _build_rows(store, keys)
        if rows:
            st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
        else:
            st.info("No notes found for these citekeys.")

        if keys:
            st.subheader("Note presence")
            st.dataframe(
                pd.DataFrame(_presence_rows(store, keys)),
                use_container_width=True,
                hide_index=True,
            )


if __name__ == "__main__":
    main()
