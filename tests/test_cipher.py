import base64

import pytest

from examplekit.cipher import (
    EncryptedStore,
    aes_gcm_decrypt,
    aes_gcm_encrypt,
    decode_value,
    decrypt,
    encode_value,
    encrypt,
)

KEY = bytes(range(32))
OTHER_KEY = bytes(range(1, 33))


def test_aes_gcm_round_trip():
    ciphertext, nonce = aes_gcm_encrypt(KEY, "Lorem Ipsum")
    assert aes_gcm_decrypt(KEY, ciphertext, nonce) == "Lorem Ipsum"


def test_aes_gcm_sizes():
    ciphertext, nonce = aes_gcm_encrypt(KEY, "Lorem Ipsum")
    assert len(nonce) == 12
    assert len(ciphertext) == len("Lorem Ipsum") + 16


def test_aes_128_key_works():
    short_key = bytes(range(16))
    ciphertext, nonce = aes_gcm_encrypt(short_key, "abc")
    assert aes_gcm_decrypt(short_key, ciphertext, nonce) == "abc"


def test_nonces_differ():
    _, first = aes_gcm_encrypt(KEY, "x")
    _, second = aes_gcm_encrypt(KEY, "x")
    assert first != second


def test_tampered_ciphertext_rejected():
    ciphertext, nonce = aes_gcm_encrypt(KEY, "Lorem Ipsum")
    broken = bytes([ciphertext[0] ^ 1]) + ciphertext[1:]
    with pytest.raises(ValueError):
        aes_gcm_decrypt(KEY, broken, nonce)


def test_wrong_key_rejected():
    ciphertext, nonce = aes_gcm_encrypt(KEY, "Lorem Ipsum")
    with pytest.raises(ValueError):
        aes_gcm_decrypt(OTHER_KEY, ciphertext, nonce)


def test_bad_key_size():
    with pytest.raises(ValueError):
        aes_gcm_encrypt(bytes(10), "x")


def test_bad_nonce_size():
    ciphertext, _ = aes_gcm_encrypt(KEY, "x")
    with pytest.raises(ValueError):
        aes_gcm_decrypt(KEY, ciphertext, bytes(8))


def test_encrypt_decrypt_round_trip():
    sealed = encrypt(b"Hello, world!", KEY)
    assert len(sealed) == 12 + len(b"Hello, world!") + 16
    assert decrypt(sealed, KEY) == b"Hello, world!"


def test_decrypt_too_short():
    with pytest.raises(ValueError, match="too short"):
        decrypt(b"abc", KEY)


def test_encode_none_stays_none():
    assert encode_value(None, KEY) is None


def test_encode_value_is_base64_of_gzip():
    encoded = encode_value(b"Hello, world!", KEY)
    raw = base64.b64decode(encoded)
    assert raw[:2] == b"\x1f\x8b"


def test_encode_decode_round_trip():
    encoded = encode_value(b"Hello, world!", KEY)
    assert decode_value(encoded, KEY) == b"Hello, world!"


def test_decode_requires_bytes():
    with pytest.raises(TypeError):
        decode_value("text", KEY)


def test_decode_garbage():
    with pytest.raises(ValueError):
        decode_value(base64.b64encode(b"not gzip"), KEY)


def test_store_round_trip(tmp_path):
    with EncryptedStore(tmp_path / "store.db", KEY) as store:
        row_id = store.insert(b"Hello, world!")
        assert store.fetch(row_id) == b"Hello, world!"
        assert store.fetch(row_id + 100) is None


def test_store_keeps_ciphertext_only(tmp_path):
    import sqlite3

    path = tmp_path / "store.db"
    with EncryptedStore(path, KEY) as store:
        store.insert(b"Hello, world!")
    stored = sqlite3.connect(path).execute("SELECT data FROM test").fetchone()[0]
    assert b"Hello" not in bytes(stored)


def test_store_wrong_key_fails(tmp_path):
    path = tmp_path / "store.db"
    with EncryptedStore(path, KEY) as store:
        row_id = store.insert(b"data")
    with EncryptedStore(path, OTHER_KEY) as store:
        with pytest.raises(ValueError):
            store.fetch(row_id)