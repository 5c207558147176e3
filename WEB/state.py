"""
SealNote Web: Session-State Store
=================================

Keep one :class:`secret_store.SecretStore` in ``st.session_state``;
nothing is persisted beyond the active browser session.
"""

from __future__ import annotations

import streamlit as st

from secret_store import SecretStore

_STORE = "sealnote_store"
_LAST_ENTRY = "sealnote_last_entry"


def get_store() -> SecretStore:
    """Return the session's store, creating it on first use."""
    if _STORE not in st.session_state:
        st.session_state[_STORE] = SecretStore()
    return st.session_state[_STORE]


def remember_entry(title: str | None) -> None:
    """Record the title of the most recently created entry for display."""
    st.session_state[_LAST_ENTRY] = title


def last_entry_title() -> str | None:
    return st.session_state.get(_LAST_ENTRY)
