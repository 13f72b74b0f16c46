import logging
from typing import Iterable, List
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from nacl.exceptions import CryptoError
from nacl.public import Box, PrivateKey, PublicKey

from .constants import GCM_KEY_BYTES
from .digest import fingerprint
from .entropy import box_nonce, gcm_nonce
from .errors import (
    InvalidKey,
    KeyUnsealFailed,
    MalformedBlob,
    PayloadDecryptionFailed,
    RecipientNotAuthorized,
)
from .keys import KeyLike, as_private_key, as_public_key, gen_aes_key
from .layout import RecipientRecord, encode_ct_length, parse_envelope

logger = logging.getLogger(__name__)

def _wrap_key(pub: PublicKey, priv: PrivateKey, aes_key: bytes) -> RecipientRecord:
    nonce = box_nonce()
    try:
        box = Box(priv, pub)
    except CryptoError as exc:
        # libsodium refuses low-order points
        raise InvalidKey("recipient public key is not a usable Curve25519 point") from exc
    # 32-byte key + 16-byte Poly1305 tag, nonce not included
    sealed = box.encrypt(aes_key, nonce).ciphertext
    return RecipientRecord(fingerprint=fingerprint(pub), box_nonce=nonce, sealed_key=sealed)

def _unwrap_key(priv: PrivateKey, owner: PublicKey, record: RecipientRecord) -> bytes:
    try:
        aes_key = Box(priv, owner).decrypt(record.sealed_key, record.box_nonce)
    except CryptoError:
        raise KeyUnsealFailed("could not unseal the envelope key") from None
    if len(aes_key) != GCM_KEY_BYTES:
        raise KeyUnsealFailed("could not unseal the envelope key")
    return aes_key

def _unique_recipients(recipients: Iterable[KeyLike]) -> List[PublicKey]:
    seen = set()
    out = []
    for r in recipients:
        pub = as_public_key(r)
        raw = bytes(pub)
        if raw in seen:
            continue
        seen.add(raw)
        out.append(pub)
    return out

def encrypt_for_recipients(plaintext: bytes, recipients: Iterable[KeyLike], self_pub: KeyLike, self_priv: KeyLike) -> bytes:
    owner_pub = as_public_key(self_pub)
    owner_priv = as_private_key(self_priv)
    pubs = _unique_recipients(recipients)

    aes_key = gen_aes_key()
    nonce = gcm_nonce()
    ct = AESGCM(aes_key).encrypt(nonce, bytes(plaintext), None)

    parts = [nonce, encode_ct_length(len(ct)), ct, bytes(owner_pub)]
    for pub in pubs:
        parts.append(_wrap_key(pub, owner_priv, aes_key).to_bytes())
    blob = b"".join(parts)
    logger.debug("sealed %d-byte payload for %d recipient(s), envelope %d bytes",
                 len(plaintext), len(pubs), len(blob))
    return blob

def decrypt_envelope(blob: bytes, self_pub: KeyLike, self_priv: KeyLike) -> bytes:
    try:
        priv = as_private_key(self_priv)
        own_fp = fingerprint(self_pub)
        env = parse_envelope(blob)
    except (InvalidKey, MalformedBlob) as exc:
        logger.debug("envelope rejected: %s", type(exc).__name__)
        raise

    record = env.find_record(own_fp)
    if record is None:
        logger.debug("no recipient record matches caller fingerprint")
        raise RecipientNotAuthorized("caller is not a recipient of this envelope")

    try:
        aes_key = _unwrap_key(priv, PublicKey(env.owner_public_key), record)
    except KeyUnsealFailed:
        logger.debug("envelope key unseal failed")
        raise

    try:
        plaintext = AESGCM(aes_key).decrypt(env.gcm_nonce, env.ciphertext, None)
    except InvalidTag:
        logger.debug("payload authentication failed")
        raise PayloadDecryptionFailed("payload authentication failed") from None
    logger.debug("opened envelope, %d-byte payload", len(plaintext))
    return plaintext

__all__ = [
    "encrypt_for_recipients",
    "decrypt_envelope",
    "_wrap_key",
    "_unwrap_key",
]
