"""
SealNote Web: File Tab
======================

Encrypt / decrypt an uploaded file with the password of a stored entry
(PBKDF2 → AES-256-GCM).  The file is processed in memory and offered
back as a download; nothing is written to disk.
"""

from __future__ import annotations

import streamlit as st

import sealcrypt
import secret_store
from state import get_store


# ---------------------------------------------------------------------------
# Public render function
# ---------------------------------------------------------------------------

def render() -> None:
    """Render the File encryption / decryption tab."""
    store = get_store()

    operation = st.radio(
        "Operation",
        ["Encrypt", "Decrypt"],
        horizontal=True,
        key="file_operation",
    )
    encrypting = operation == "Encrypt"

    uploaded = st.file_uploader(
        "Choose a file" if encrypting else "Choose an encrypted file",
        key="file_uploader",
    )
    if uploaded:
        st.caption(f"**{uploaded.name}**  ·  {human_file_size(uploaded.size)}")

    candidates = [e.title for e in store.entries if e.password]
    if not candidates:
        st.info("No entries with a password yet. Add one in the **Entries** tab.")
        return
    title = st.selectbox("Password Entry", candidates, key="file_entry")

    st.markdown("---")
    btn_label = "🔒 Encrypt File" if encrypting else "🔓 Decrypt File"
    if st.button(btn_label, type="primary", use_container_width=True, key="file_action"):
        if not uploaded:
            st.error("Please upload a file first.")
            return
        action = (
            secret_store.encrypt_bytes_with_entry
            if encrypting
            else secret_store.decrypt_bytes_with_entry
        )
        try:
            with st.spinner("Processing…"):
                result = action(store, title, uploaded.getvalue())
        except sealcrypt.DecryptionError as e:
            st.error(f"Decryption failed: {e}")
        except sealcrypt.SealError as e:
            st.error(f"Error: {e}")
        except secret_store.SecretStoreError as e:
            st.warning(str(e))
        else:
            done = "Encryption" if encrypting else "Decryption"
            st.success(f"{done} successful!  ({human_file_size(len(result))})")
            out_name = output_filename(uploaded.name, encrypting)
            st.download_button(
                f"📥 Download {out_name}",
                data=result,
                file_name=out_name,
                mime="application/octet-stream",
                key="file_download",
            )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def human_file_size(size_bytes: int) -> str:
    """Convert byte count to a human-readable string (e.g. '1.5 MB')."""
    size = float(max(size_bytes, 0))
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024.0:
            return f"{int(size)} B" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} TB"


def output_filename(original: str, encrypting: bool) -> str:
    """
    Derive a download filename.

    * Encrypting  → append ``.enc``
    * Decrypting  → strip ``.enc`` if present, else prepend ``decrypted_``
    """
    if encrypting:
        return original + ".enc"
    if original.endswith(".enc") and len(original) > 4:
        return original[:-4]
    return "decrypted_" + original
