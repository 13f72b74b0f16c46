from .errors import (
    EnvelopeError,
    EntropyUnavailable,
    PayloadTooLarge,
    InvalidKey,
    MalformedBlob,
    MalformedKeyText,
    RecipientNotAuthorized,
    KeyUnsealFailed,
    PayloadDecryptionFailed,
)
from .entropy import random_bytes
from .keys import (
    gen_box_keypair,
    gen_aes_key,
    encode_key_text,
    decode_key_text,
    save_key_file,
    load_key_file,
)
from .digest import sha1_bytes, fingerprint
from .layout import parse_envelope, recipient_fingerprints, envelope_owner
from .hybrid import encrypt_for_recipients, decrypt_envelope

__all__ = [
    "EnvelopeError",
    "EntropyUnavailable",
    "PayloadTooLarge",
    "InvalidKey",
    "MalformedBlob",
    "MalformedKeyText",
    "RecipientNotAuthorized",
    "KeyUnsealFailed",
    "PayloadDecryptionFailed",
    "random_bytes",
    "gen_box_keypair",
    "gen_aes_key",
    "encode_key_text",
    "decode_key_text",
    "save_key_file",
    "load_key_file",
    "sha1_bytes",
    "fingerprint",
    "parse_envelope",
    "recipient_fingerprints",
    "envelope_owner",
    "encrypt_for_recipients",
    "decrypt_envelope",
]
