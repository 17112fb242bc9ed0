"""Common message digests of a text."""

from __future__ import annotations

import base64
import hashlib
import hmac

from cryptography.hazmat.primitives import hashes


def _sha512_256(data: bytes) -> bytes:
    digest = hashes.Hash(hashes.SHA512_256())
    digest.update(data)
    return digest.finalize()


def digests(text: str, secret: str) -> dict[str, str]:
    """Digests of ``text`` as hex strings, plus a base64 HMAC-SHA512 keyed by ``secret``.

    Keys: ``md5``, ``sha256``, ``sha512``, ``sha512_256`` and ``hmac512``.
    """
    data = text.encode("utf-8")
    mac = hmac.new(secret.encode("utf-8"), data, hashlib.sha512).digest()
    return {
        "md5": hashlib.md5(data).hexdigest(),
        "sha256": hashlib.sha256(data).hexdigest(),
        "sha512": hashlib.sha512(data).hexdigest(),
        "sha512_256": _sha512_256(data).hex(),
        "hmac512": base64.b64encode(mac).decode("ascii"),
    }