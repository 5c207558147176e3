"""
SealNote Web: Entries Tab
=========================

Browse and manage stored secrets:
  • Filter entries by title
  • View title / URL / password / notes
  • Add, edit, duplicate and delete entries
"""

from __future__ import annotations

from datetime import datetime

import streamlit as st

from secret_store import Entry, SecretStoreError
from state import get_store


# ---------------------------------------------------------------------------
# Public render function
# ---------------------------------------------------------------------------

def render() -> None:
    """Render the Entries tab."""
    store = get_store()

    list_col, detail_col = st.columns([1, 2])

    with list_col:
        filter_text = st.text_input("Filter", placeholder="Search titles…", key="entries_filter")
        titles = store.titles(filter_text)
        if not titles:
            st.info("No entries yet. Add one on the right or generate keys in the **RSA** tab.")
            selected = None
        else:
            selected = st.radio(
                "Entries",
                titles,
                key="entries_selected",
                label_visibility="collapsed",
            )

    with detail_col:
        with st.expander("Add New Entry", expanded=not titles):
            _render_entry_form(None, key_prefix="entry_add")

        if selected:
            entry = store.find(selected)
            if entry is not None:
                _render_entry_card(entry)


# ---------------------------------------------------------------------------
# Card and form renderers
# ---------------------------------------------------------------------------

def _render_entry_card(entry: Entry) -> None:
    """Render a single entry with its actions."""
    store = get_store()
    with st.container(border=True):
        st.markdown(f"**{entry.title}**")
        st.caption(f"Created {_format_time(entry.created)}")
        if entry.url:
            st.text_input("URL", value=entry.url, disabled=True, key=f"view_url_{entry.title}")
        if entry.password:
            st.text_input(
                "Password",
                value=entry.password,
                type="password",
                disabled=True,
                key=f"view_pw_{entry.title}",
            )
        if entry.notes:
            st.code(entry.notes, language=None)

        action_cols = st.columns(3)
        with action_cols[0]:
            with st.popover("✏️ Edit", use_container_width=True):
                _render_entry_form(entry, key_prefix=f"entry_edit_{entry.title}")
        with action_cols[1]:
            if st.button("📄 Duplicate", key=f"entry_dup_{entry.title}", use_container_width=True):
                store.duplicate(entry.title, title=store.unique_title(f"{entry.title} (copy)"))
                st.rerun()
        with action_cols[2]:
            if st.button("🗑️ Delete", key=f"entry_del_{entry.title}", use_container_width=True):
                store.remove(entry.title)
                st.rerun()


def _render_entry_form(entry: Entry | None, key_prefix: str) -> None:
    """Render the add (``entry is None``) or edit form."""
    store = get_store()
    title = st.text_input("Title", value=entry.title if entry else "", key=f"{key_prefix}_title")
    url = st.text_input("URL", value=entry.url if entry else "", key=f"{key_prefix}_url")
    password = st.text_input(
        "Password",
        value=entry.password if entry else "",
        type="password",
        key=f"{key_prefix}_password",
    )
    notes = st.text_area("Notes", value=entry.notes if entry else "", height=150, key=f"{key_prefix}_notes")

    if st.button("Save", key=f"{key_prefix}_save", type="primary", use_container_width=True):
        title = title.strip()
        if not title:
            st.error("Please fill the title field.")
            return
        try:
            new_entry = Entry(title=title, url=url, password=password, notes=notes)
            if entry is None:
                store.add(new_entry)
            else:
                store.replace(entry.title, new_entry)
        except SecretStoreError as e:
            st.error(str(e))
            return
        st.rerun()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _format_time(iso_str: str) -> str:
    """Format an ISO timestamp for display."""
    try:
        dt = datetime.fromisoformat(iso_str)
        return dt.strftime("%Y-%m-%d %H:%M")
    except ValueError:
        return iso_str
