"""
SealNote Web: RSA Tab
=====================

Hybrid encryption against the stored key entries:
  • Generate the ``rsa.pub`` / ``rsa.pvt`` key pair entries
  • Encrypt / decrypt a short pass-phrase (RSA-OAEP)
  • Encrypt / decrypt a text message (RSA-OAEP + AES-256-GCM envelope)

Every result is stored as a new entry.
"""

from __future__ import annotations

import streamlit as st

import sealcrypt
import secret_store
from state import get_store, last_entry_title, remember_entry

_ACTIONS = {
    "Encrypt Phrase": (secret_store.encrypt_phrase_with_entry, "Pass-phrase", True),
    "Decrypt Phrase": (secret_store.decrypt_phrase_with_entry, "Encrypted pass-phrase (Base64)", False),
    "Encrypt Message": (secret_store.encrypt_message_with_entry, "Text message", True),
    "Decrypt Message": (secret_store.decrypt_message_with_entry, "Encrypted text message", False),
}


# ---------------------------------------------------------------------------
# Public render function
# ---------------------------------------------------------------------------

def render() -> None:
    """Render the RSA tab."""
    store = get_store()

    gen_col, action_col = st.columns([1, 2])

    # =====================================================================
    # LEFT COLUMN: key pair generation
    # =====================================================================
    with gen_col:
        st.subheader("🔐 Key Pair")
        key_size = st.selectbox("Key Size", [2048, 4096], index=1, key="rsa_gen_size")
        if st.button("Generate RSA Key Pair", key="rsa_gen_btn", use_container_width=True):
            try:
                with st.spinner(f"Generating {key_size}-bit RSA key pair… This may take a moment."):
                    _, public_entry = secret_store.generate_rsa_key_entries(store, key_size=key_size)
                remember_entry(public_entry.title)
                st.rerun()
            except secret_store.KeyEntriesExistError as e:
                st.warning(str(e))
            except sealcrypt.KeyGenerationError as e:
                st.error(f"Key generation failed: {e}")

    # =====================================================================
    # RIGHT COLUMN: encrypt / decrypt with a key entry
    # =====================================================================
    with action_col:
        st.subheader("🔑 Encrypt / Decrypt")
        operation = st.radio("Operation", list(_ACTIONS), horizontal=True, key="rsa_operation")
        action, input_label, needs_public = _ACTIONS[operation]

        candidates = [
            e.title for e in store.entries
            if (e.is_public_key if needs_public else e.is_private_key)
        ]
        if not candidates:
            kind = "public" if needs_public else "private"
            st.info(f"No {kind} key entries yet. Generate a key pair on the left.")
            return

        key_title = st.selectbox("Key Entry", candidates, key="rsa_key_entry")
        if operation.endswith("Phrase"):
            input_text = st.text_input(input_label, key=f"rsa_input_{operation}")
        else:
            input_text = st.text_area(input_label, height=200, key=f"rsa_input_{operation}")

        if st.button(f"Run {operation}", type="primary", use_container_width=True, key="rsa_action"):
            try:
                entry = action(store, key_title, input_text)
            except sealcrypt.DecryptionError as e:
                st.error(f"Decryption failed: {e}")
            except sealcrypt.PayloadTooLargeError as e:
                st.error(f"Too long for this key: {e}")
            except sealcrypt.FormatError as e:
                st.error(f"Format error: {e}")
            except sealcrypt.SealError as e:
                st.error(f"Error: {e}")
            except secret_store.SecretStoreError as e:
                st.warning(str(e))
            else:
                if entry is None:
                    st.info("Nothing to do: the input is empty.")
                else:
                    remember_entry(entry.title)
                    st.rerun()

        _render_last_entry()


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _render_last_entry() -> None:
    """Show the entry created by the last successful action."""
    title = last_entry_title()
    entry = get_store().find(title) if title else None
    if entry is None:
        return
    st.markdown("---")
    st.success(f"Added entry **{entry.title}**")
    if entry.url:
        st.text_area("URL", value=entry.url, height=120, key="rsa_result_url")
    if entry.password:
        st.code(entry.password, language=None)
    if entry.notes:
        st.text_area("Notes", value=entry.notes, height=160, key="rsa_result_notes")
