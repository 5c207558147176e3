"""
SealNote: Secret Store
======================

In-memory repository of secret entries (title, URL, password, notes) and
the entry actions that run the hybrid engine against a selected key entry
and store the result as a new entry.  The password of any entry can
also encrypt or decrypt uploaded file contents.

Nothing is persisted to disk; the web front end keeps one store per
browser session.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

import sealcrypt

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

RSA_PUBLIC_TITLE = "rsa.pub"
RSA_PRIVATE_TITLE = "rsa.pvt"
RESERVED_KEY_TITLES = (RSA_PUBLIC_TITLE, RSA_PRIVATE_TITLE)

PHRASE_ENCRYPTION_PREFIX = "RSA ENCRYPTION: "
PHRASE_DECRYPTION_PREFIX = "RSA DECRYPTION: "
MESSAGE_ENCRYPTION_PREFIX = "RSA+AES TEXT MESSAGE ENCRYPTION: "
MESSAGE_DECRYPTION_PREFIX = "RSA+AES TEXT MESSAGE DECRYPTION: "
TITLE_TIMESTAMP_FORMAT = "%Y%m%d %H%M%S"

MESSAGE_ENCRYPTION_NOTE = (
    "Your text message was encrypted with the public key and was set in the URL field.\n"
    + "=" * 38
    + "\n"
)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SecretStoreError(Exception):
    """Base exception for repository and entry-action errors."""


class EntryNotFoundError(SecretStoreError):
    """No entry with the requested title."""


class NotAKeyError(SecretStoreError):
    """The selected entry does not hold the required kind of RSA key."""


class KeyEntriesExistError(SecretStoreError):
    """The reserved key-pair entries are already present."""


class DuplicateTitleError(SecretStoreError):
    """Another entry already uses the title."""


class EmptyPasswordError(SecretStoreError):
    """The selected entry has no password to encrypt with."""


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Entry:
    """A single stored secret."""
    title: str
    url: str = ""
    password: str = ""
    notes: str = ""
    created: str = field(default_factory=_utc_now)

    @property
    def is_public_key(self) -> bool:
        return self.notes.startswith(sealcrypt.KeyKind.PUBLIC.begin_marker)

    @property
    def is_private_key(self) -> bool:
        return self.notes.startswith(sealcrypt.KeyKind.PRIVATE.begin_marker)


class SecretStore:
    """Ordered collection of entries with a "modified" flag."""

    def __init__(self, entries: Optional[Iterable[Entry]] = None):
        self._entries: List[Entry] = list(entries or [])
        self.modified = False

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, title: str) -> bool:
        return self.find(title) is not None

    def titles(self, filter_text: Optional[str] = None) -> List[str]:
        """Entry titles in insertion order, optionally filtered (case-insensitive)."""
        titles = [e.title for e in self._entries]
        if filter_text:
            needle = filter_text.lower()
            titles = [t for t in titles if needle in t.lower()]
        return titles

    def find(self, title: str) -> Optional[Entry]:
        """Return the first entry with *title*, or ``None``."""
        for entry in self._entries:
            if entry.title == title:
                return entry
        return None

    def unique_title(self, title: str) -> str:
        """Return *title*, or *title* with ` (2)`, ` (3)`, ... appended if taken."""
        candidate, n = title, 1
        while candidate in self:
            n += 1
            candidate = f"{title} ({n})"
        return candidate

    def get(self, title: str) -> Entry:
        entry = self.find(title)
        if entry is None:
            raise EntryNotFoundError(f"No entry titled {title!r}.")
        return entry

    def add(self, entry: Entry) -> Entry:
        if entry.title in self:
            raise DuplicateTitleError("Title already exists, please enter a different title.")
        self._entries.append(entry)
        self.modified = True
        logger.info("Added entry %r", entry.title)
        return entry

    def replace(self, title: str, entry: Entry) -> Entry:
        """Edit: drop the entry titled *title* and append *entry* at the end."""
        old = self.get(title)
        if entry.title != title and entry.title in self:
            raise DuplicateTitleError("Title already exists, please enter a different title.")
        self._entries.remove(old)
        self._entries.append(entry)
        self.modified = True
        logger.info("Edited entry %r", title)
        return entry

    def duplicate(self, title: str, /, **changes) -> Entry:
        """Add a copy of *title* with *changes* applied."""
        changes.setdefault("created", _utc_now())
        return self.add(dataclasses.replace(self.get(title), **changes))

    def remove(self, title: str) -> Entry:
        entry = self.get(title)
        self._entries.remove(entry)
        self.modified = True
        logger.info("Removed entry %r", title)
        return entry

    def mark_saved(self) -> None:
        self.modified = False


# ---------------------------------------------------------------------------
# Entry actions
# ---------------------------------------------------------------------------


def _timestamp_title(prefix: str) -> str:
    return prefix + datetime.now().strftime(TITLE_TIMESTAMP_FORMAT)


def _result_title(store: SecretStore, prefix: str) -> str:
    return store.unique_title(_timestamp_title(prefix))


def _public_key_entry(store: SecretStore, title: str) -> Entry:
    entry = store.get(title)
    if not entry.is_public_key:
        raise NotAKeyError("The entry is not a public key")
    return entry


def _private_key_entry(store: SecretStore, title: str) -> Entry:
    entry = store.get(title)
    if not entry.is_private_key:
        raise NotAKeyError("The entry is not a private key")
    return entry


def generate_rsa_key_entries(
    store: SecretStore,
    key_size: int = sealcrypt.DEFAULT_KEY_SIZE,
) -> Tuple[Entry, Entry]:
    """
    Generate an RSA key pair and store it as ``rsa.pvt`` / ``rsa.pub``.

    Returns ``(private_entry, public_entry)``.

    Raises
    ------
    KeyEntriesExistError
        If either reserved title is already taken.
    """
    if any(title in store for title in RESERVED_KEY_TITLES):
        raise KeyEntriesExistError("Key entries already exist.")
    keypair = sealcrypt.generate_keypair(key_size=key_size)
    private_entry = store.add(Entry(title=RSA_PRIVATE_TITLE, notes=keypair.export_private().text))
    public_entry = store.add(Entry(title=RSA_PUBLIC_TITLE, notes=keypair.export_public().text))
    return private_entry, public_entry


def encrypt_phrase_with_entry(store: SecretStore, title: str, phrase: str) -> Optional[Entry]:
    """Encrypt *phrase* with the public key entry *title*; ciphertext goes in notes."""
    key_entry = _public_key_entry(store, title)
    if not phrase:
        logger.debug("Empty phrase, nothing to encrypt")
        return None
    ciphertext = sealcrypt.encrypt_phrase(key_entry.notes, phrase)
    return store.add(Entry(title=_result_title(store, PHRASE_ENCRYPTION_PREFIX), notes=ciphertext))


def decrypt_phrase_with_entry(store: SecretStore, title: str, ciphertext: str) -> Optional[Entry]:
    """Decrypt *ciphertext* with the private key entry *title*; phrase goes in password."""
    key_entry = _private_key_entry(store, title)
    if not ciphertext:
        logger.debug("Empty ciphertext, nothing to decrypt")
        return None
    phrase = sealcrypt.decrypt_phrase(key_entry.notes, ciphertext)
    return store.add(Entry(title=_result_title(store, PHRASE_DECRYPTION_PREFIX), password=phrase))


def encrypt_message_with_entry(store: SecretStore, title: str, message: str) -> Optional[Entry]:
    """
    Encrypt a text message with the public key entry *title*.

    The envelope is stored in the new entry's URL field; the notes keep
    the original message below an explanatory header.
    """
    key_entry = _public_key_entry(store, title)
    if not message:
        logger.debug("Empty message, nothing to encrypt")
        return None
    envelope = sealcrypt.encrypt_message(key_entry.notes, message)
    return store.add(
        Entry(
            title=_result_title(store, MESSAGE_ENCRYPTION_PREFIX),
            url=envelope,
            notes=MESSAGE_ENCRYPTION_NOTE + message,
        )
    )


def decrypt_message_with_entry(store: SecretStore, title: str, envelope: str) -> Optional[Entry]:
    """Decrypt envelope text with the private key entry *title*."""
    key_entry = _private_key_entry(store, title)
    if not envelope:
        logger.debug("Empty envelope, nothing to decrypt")
        return None
    message = sealcrypt.decrypt_message(key_entry.notes, envelope)
    return store.add(Entry(title=_result_title(store, MESSAGE_DECRYPTION_PREFIX), notes=message))


def _password_entry(store: SecretStore, title: str) -> Entry:
    entry = store.get(title)
    if not entry.password:
        raise EmptyPasswordError("The password field of this entry is empty.")
    return entry


def encrypt_bytes_with_entry(
    store: SecretStore,
    title: str,
    data: bytes,
    iterations: int = sealcrypt.PBKDF2_ITERATIONS,
) -> bytes:
    """
    Encrypt *data* (an uploaded file) with the password of entry *title*.

    Nothing is added to the store; the caller hands the result back to
    the user.

    Raises
    ------
    EmptyPasswordError
        If the entry has no password.
    """
    entry = _password_entry(store, title)
    blob = sealcrypt.encrypt_with_passphrase(data, entry.password, iterations=iterations)
    logger.info("Encrypted %d bytes with entry %r", len(data), title)
    return blob


def decrypt_bytes_with_entry(store: SecretStore, title: str, data: bytes) -> bytes:
    """Decrypt a blob from :func:`encrypt_bytes_with_entry` with entry *title*."""
    entry = _password_entry(store, title)
    plaintext = sealcrypt.decrypt_with_passphrase(data, entry.password)
    logger.info("Decrypted %d bytes with entry %r", len(plaintext), title)
    return plaintext
