import os
from typing import Tuple, Union
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from nacl.public import PrivateKey, PublicKey

from .constants import (
    BOX_KEY_BYTES,
    KEY_TEXT_CHARS,
    PBKDF2_CYCLES,
    PBKDF2_KEY_BYTES,
    PBKDF2_PASSWORD_BYTES,
    PBKDF2_SALT_BYTES,
)
from .entropy import random_bytes
from .errors import InvalidKey, MalformedKeyText
from .utils import b64e, b64d, B64Error

KeyLike = Union[bytes, bytearray, memoryview, PublicKey, PrivateKey]

def raw_key(key: KeyLike) -> bytes:
    if isinstance(key, (PublicKey, PrivateKey)):
        return bytes(key)
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise InvalidKey(f"unsupported key type: {type(key).__name__}")
    key = bytes(key)
    if len(key) != BOX_KEY_BYTES:
        raise InvalidKey(f"key must be {BOX_KEY_BYTES} bytes, got {len(key)}")
    return key

def as_public_key(key: KeyLike) -> PublicKey:
    if isinstance(key, PublicKey):
        return key
    if isinstance(key, PrivateKey):
        raise InvalidKey("expected a public key, got a private key")
    return PublicKey(raw_key(key))

def as_private_key(key: KeyLike) -> PrivateKey:
    if isinstance(key, PrivateKey):
        return key
    if isinstance(key, PublicKey):
        raise InvalidKey("expected a private key, got a public key")
    return PrivateKey(raw_key(key))

def gen_box_keypair() -> Tuple[bytes, bytes]:
    """Fresh Curve25519 key pair as (public, private) raw bytes."""
    priv = PrivateKey(random_bytes(BOX_KEY_BYTES))
    return bytes(priv.public_key), bytes(priv)

def gen_aes_key() -> bytes:
    # PBKDF2 over a random password and salt, kept for parity with existing deployments
    password = random_bytes(PBKDF2_PASSWORD_BYTES)
    salt = random_bytes(PBKDF2_SALT_BYTES)
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=PBKDF2_KEY_BYTES,
        salt=salt,
        iterations=PBKDF2_CYCLES,
    )
    return kdf.derive(password)

def encode_key_text(key: KeyLike, comment: str = "") -> str:
    return b64e(raw_key(key)) + comment

def decode_key_text(text: str) -> bytes:
    """Decode the first 44 characters of text; anything after is a comment."""
    head = text[:KEY_TEXT_CHARS]
    try:
        data = b64d(head)
    except B64Error as exc:
        raise MalformedKeyText(f"key text is not valid base64: {exc}") from exc
    if len(data) < BOX_KEY_BYTES:
        raise MalformedKeyText(f"key text decodes to {len(data)} bytes, need {BOX_KEY_BYTES}")
    return data[:BOX_KEY_BYTES]

def save_key_file(key: KeyLike, path: str, comment: str = ""):
    text = encode_key_text(key, comment)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(text)
    # O_CREAT mode is ignored when the file already exists
    os.chmod(path, 0o600)

def load_key_file(path: str) -> bytes:
    with open(path, "r", encoding="utf-8") as f:
        data = f.read()
    return decode_key_text(data)

__all__ = [
    "KeyLike",
    "raw_key",
    "as_public_key",
    "as_private_key",
    "gen_box_keypair",
    "gen_aes_key",
    "encode_key_text",
    "decode_key_text",
    "save_key_file",
    "load_key_file",
]
