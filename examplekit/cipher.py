"""Authenticated AES-GCM encryption and a store that encrypts what it keeps."""

from __future__ import annotations

import base64
import binascii
import gzip
import os
import sqlite3
from types import TracebackType

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

NONCE_SIZE = 12

_CREATE_TABLE = """CREATE TABLE IF NOT EXISTS test (
    id INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
    data TEXT NOT NULL
)"""


def _cipher(key: bytes) -> AESGCM:
    if len(key) not in (16, 24, 32):
        raise ValueError(f"invalid AES key size {len(key)}; use 16, 24 or 32 bytes")
    return AESGCM(bytes(key))


def _open(key: bytes, nonce: bytes, sealed: bytes) -> bytes:
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")
    try:
        return _cipher(key).decrypt(bytes(nonce), bytes(sealed), None)
    except InvalidTag:
        raise ValueError("message authentication failed") from None


def aes_gcm_encrypt(key: bytes, plaintext: str) -> tuple[bytes, bytes]:
    """Encrypt ``plaintext`` with a fresh random nonce.

    Returns ``(ciphertext, nonce)``; the ciphertext carries the 16-byte tag.
    A key of 16, 24 or 32 bytes selects AES-128, AES-192 or AES-256.
    """
    aes = _cipher(key)
    nonce = os.urandom(NONCE_SIZE)
    return aes.encrypt(nonce, plaintext.encode("utf-8"), None), nonce


def aes_gcm_decrypt(key: bytes, ciphertext: bytes, nonce: bytes) -> str:
    """Decrypt what :func:`aes_gcm_encrypt` produced; raises ValueError if tampered."""
    return _open(key, nonce, ciphertext).decode("utf-8")


def encrypt(plaintext: bytes, key: bytes) -> bytes:
    """Encrypt ``plaintext`` and return the nonce followed by the ciphertext."""
    aes = _cipher(key)
    nonce = os.urandom(NONCE_SIZE)
    return nonce + aes.encrypt(nonce, bytes(plaintext), None)


def decrypt(ciphertext: bytes, key: bytes) -> bytes:
    """Split off the nonce that :func:`encrypt` prepended and decrypt the rest."""
    _cipher(key)
    if len(ciphertext) < NONCE_SIZE:
        raise ValueError("ciphertext too short")
    return _open(key, ciphertext[:NONCE_SIZE], ciphertext[NONCE_SIZE:])


def encode_value(data: bytes | None, key: bytes) -> bytes | None:
    """Encrypt, gzip and base64-encode ``data``; ``None`` stays ``None``."""
    if data is None:
        return None
    return base64.b64encode(gzip.compress(encrypt(data, key)))


def decode_value(value: bytes, key: bytes) -> bytes:
    """Reverse :func:`encode_value`."""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError("value to decode must be bytes")
    try:
        compressed = base64.b64decode(bytes(value), validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 data: {exc}") from exc
    try:
        sealed = gzip.decompress(compressed)
    except (OSError, EOFError) as exc:
        raise ValueError(f"invalid gzip data: {exc}") from exc
    return decrypt(sealed, key)


class EncryptedStore:
    """An SQLite table whose values are encrypted before they are written."""

    def __init__(self, path: str | os.PathLike[str], key: bytes) -> None:
        _cipher(key)
        self._key = bytes(key)
        self._db = sqlite3.connect(os.fspath(path))
        with self._db:
            self._db.execute(_CREATE_TABLE)

    def insert(self, data: bytes) -> int:
        """Store ``data`` encrypted and return the new row id."""
        with self._db:
            cursor = self._db.execute(
                "INSERT INTO test (data) VALUES (?)", (encode_value(data, self._key),)
            )
        return int(cursor.lastrowid)

    def fetch(self, row_id: int) -> bytes | None:
        """Decrypted value of the row ``row_id``, or ``None`` if there is no such row."""
        row = self._db.execute("SELECT data FROM test WHERE id = ?", (row_id,)).fetchone()
        if row is None:
            return None
        stored = row[0]
        if isinstance(stored, str):
            stored = stored.encode("ascii")
        return decode_value(stored, self._key)

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    def __enter__(self) -> EncryptedStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()