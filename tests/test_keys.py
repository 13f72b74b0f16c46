"""Tests for key generation, fingerprints and the key text format."""

import os
import pytest
from nacl.public import PrivateKey

from envcrypto import (
    decode_key_text,
    encode_key_text,
    fingerprint,
    gen_aes_key,
    gen_box_keypair,
    load_key_file,
    save_key_file,
)
from envcrypto.errors import InvalidKey, MalformedKeyText


def test_keypair_generation():
    pub, priv = gen_box_keypair()
    assert len(pub) == 32
    assert len(priv) == 32
    assert pub != priv
    # public half is derived from the private half
    assert bytes(PrivateKey(priv).public_key) == pub


def test_keypairs_are_fresh():
    assert gen_box_keypair() != gen_box_keypair()


def test_aes_key_generation():
    key1 = gen_aes_key()
    key2 = gen_aes_key()
    assert len(key1) == 32
    assert key1 != key2


def test_fingerprint_stable(alice, bob):
    fp = fingerprint(alice[0])
    assert len(fp) == 20
    assert fp == fingerprint(alice[0])
    assert fp != fingerprint(bob[0])


def test_fingerprint_is_sha1_of_raw_key():
    import hashlib
    key = bytes(range(32))
    assert fingerprint(key) == hashlib.sha1(key).digest()


def test_fingerprint_accepts_nacl_key(alice):
    assert fingerprint(PrivateKey(alice[1]).public_key) == fingerprint(alice[0])


def test_fingerprint_rejects_wrong_length():
    with pytest.raises(InvalidKey):
        fingerprint(b"\x01" * 31)


def test_key_text_known_vector():
    assert encode_key_text(b"\x00" * 32) == "A" * 43 + "="


def test_key_text_with_comment(alice):
    text = encode_key_text(alice[0], " alice@laptop")
    assert len(text) == 44 + len(" alice@laptop")
    assert decode_key_text(text) == alice[0]


def test_key_text_without_comment(bob):
    assert decode_key_text(encode_key_text(bob[1])) == bob[1]


@pytest.mark.parametrize("text", ["", "AAAA", "A" * 40, "A" * 42 + "=="])
def test_short_key_text(text):
    with pytest.raises(MalformedKeyText):
        decode_key_text(text)


def test_garbage_key_text():
    with pytest.raises(MalformedKeyText):
        decode_key_text("!" * 44)


def test_key_file_round_trip(tmp_path, alice):
    path = str(tmp_path / "alice.key")
    save_key_file(alice[1], path, "  # private key")
    assert load_key_file(path) == alice[1]
    if os.name == "posix":
        assert os.stat(path).st_mode & 0o777 == 0o600


@pytest.mark.skipif(os.name != "posix", reason="POSIX permissions")
def test_key_file_overwrite_tightens_mode(tmp_path, bob):
    path = tmp_path / "bob.key"
    path.write_text("stale")
    os.chmod(path, 0o644)
    save_key_file(bob[1], str(path))
    assert os.stat(path).st_mode & 0o777 == 0o600
    assert load_key_file(str(path)) == bob[1]


def test_load_missing_key_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_key_file(str(tmp_path / "nope.key"))
