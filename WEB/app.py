"""
SealNote: Web Edition
=====================

Streamlit application entry point.

Launch:
    cd sealnote
    streamlit run WEB/app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# -- Ensure project root is importable ------------------------------------
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

# -- Ensure WEB/ directory is importable ----------------------------------
_web_root = str(Path(__file__).resolve().parent)
if _web_root not in sys.path:
    sys.path.insert(0, _web_root)

import streamlit as st  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ---------------------------------------------------------------------------
# Page config: must be the first Streamlit command
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="SealNote",
    page_icon="🔐",
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.markdown(
    """
    <style>
    .stButton > button[kind="primary"] {
        background-color: #e94560;
        border-color: #e94560;
    }
    .sealnote-header {
        text-align: center;
        padding: 1rem 0 0.5rem 0;
    }
    .sealnote-header p {
        color: #a0a0b8;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------

st.markdown(
    """
    <div class="sealnote-header">
        <h1>🔐 SealNote</h1>
        <p>Secret entries with RSA-OAEP &amp; AES-256-GCM hybrid encryption</p>
    </div>
    """,
    unsafe_allow_html=True,
)

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

from state import get_store  # noqa: E402

with st.sidebar:
    st.markdown("### About")
    st.markdown(
        "**SealNote** stores secrets and encrypts pass-phrases and text "
        "messages for an RSA key pair kept as the `rsa.pub` / `rsa.pvt` entries, "
        "and encrypts files with an entry's password."
    )
    st.markdown("---")
    st.markdown("#### Security Notice")
    st.markdown(
        "• Entries exist **only** in your browser session.  \n"
        "• Closing the tab destroys all entries, keys included.  \n"
        "• Copy anything you need to keep somewhere safe."
    )
    st.markdown("---")
    store = get_store()
    st.caption(f"{len(store)} entr{'y' if len(store) == 1 else 'ies'}"
               f"{'  •  modified' if store.modified else ''}")
    st.caption("SealNote v1.0 · Web Edition")

# ---------------------------------------------------------------------------
# Tabs
# ---------------------------------------------------------------------------

from tabs.entries_tab import render as render_entries  # noqa: E402
from tabs.file_tab import render as render_file  # noqa: E402
from tabs.rsa_tab import render as render_rsa  # noqa: E402

tab_entries, tab_rsa, tab_file = st.tabs(["🗂️ Entries", "🔑 RSA", "📁 File"])

with tab_entries:
    render_entries()

with tab_rsa:
    render_rsa()

with tab_file:
    render_file()
