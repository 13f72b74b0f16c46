"""
Binary envelope layout.

    gcm_nonce(12) | ct_length(16 ASCII digits) | ciphertext(ct_length) | owner_pub(32)
    followed by zero or more 92-byte recipient records:
    fingerprint(20) | box_nonce(24) | sealed_key(48)

parse_envelope only slices; nothing here needs key material.
"""
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .constants import (
    BOX_KEY_BYTES,
    BOX_NONCE_BYTES,
    CTLENGTH_BLOCK_SIZE,
    FINGERPRINT_BYTES,
    GCM_NONCE_BYTES,
    HEADER_BYTES,
    MIN_ENVELOPE_BYTES,
    RECIPIENT_RECORD_BYTES,
)
from .errors import MalformedBlob, PayloadTooLarge

@dataclass(frozen=True)
class RecipientRecord:
    fingerprint: bytes
    box_nonce: bytes
    sealed_key: bytes

    def to_bytes(self) -> bytes:
        return self.fingerprint + self.box_nonce + self.sealed_key

@dataclass(frozen=True)
class EnvelopeLayout:
    gcm_nonce: bytes
    ciphertext: bytes
    owner_public_key: bytes
    records_blob: bytes

    def records(self) -> Iterator[RecipientRecord]:
        body = self.records_blob
        for i in range(0, len(body), RECIPIENT_RECORD_BYTES):
            fp_end = i + FINGERPRINT_BYTES
            nonce_end = fp_end + BOX_NONCE_BYTES
            yield RecipientRecord(
                fingerprint=body[i:fp_end],
                box_nonce=body[fp_end:nonce_end],
                sealed_key=body[nonce_end:i + RECIPIENT_RECORD_BYTES],
            )

    def find_record(self, fp: bytes) -> Optional[RecipientRecord]:
        for rec in self.records():
            if rec.fingerprint == fp:
                return rec
        return None

def encode_ct_length(n: int) -> bytes:
    digits = str(n)
    if len(digits) > CTLENGTH_BLOCK_SIZE:
        raise PayloadTooLarge(
            f"ciphertext length {n} does not fit in a {CTLENGTH_BLOCK_SIZE}-digit length field"
        )
    return digits.zfill(CTLENGTH_BLOCK_SIZE).encode("ascii")

def decode_ct_length(field: bytes) -> int:
    if len(field) != CTLENGTH_BLOCK_SIZE or not field.isdigit():
        raise MalformedBlob("length field is not a 16-digit decimal number")
    return int(field)

def parse_envelope(blob: bytes) -> EnvelopeLayout:
    blob = bytes(blob)
    if len(blob) < MIN_ENVELOPE_BYTES:
        raise MalformedBlob(
            f"envelope is {len(blob)} bytes, shorter than the {MIN_ENVELOPE_BYTES}-byte minimum"
        )
    gcm_nonce = blob[:GCM_NONCE_BYTES]
    ct_len = decode_ct_length(blob[GCM_NONCE_BYTES:HEADER_BYTES])
    ct_end = HEADER_BYTES + ct_len
    owner_end = ct_end + BOX_KEY_BYTES
    if owner_end > len(blob):
        raise MalformedBlob(f"envelope truncated: length field claims {ct_len} ciphertext bytes")
    if (len(blob) - owner_end) % RECIPIENT_RECORD_BYTES:
        raise MalformedBlob(
            f"envelope truncated: recipient section is not a multiple of {RECIPIENT_RECORD_BYTES} bytes"
        )
    return EnvelopeLayout(
        gcm_nonce=gcm_nonce,
        ciphertext=blob[HEADER_BYTES:ct_end],
        owner_public_key=blob[ct_end:owner_end],
        records_blob=blob[owner_end:],
    )

def recipient_fingerprints(blob: bytes) -> List[bytes]:
    return [rec.fingerprint for rec in parse_envelope(blob).records()]

def envelope_owner(blob: bytes) -> bytes:
    return parse_envelope(blob).owner_public_key

__all__ = [
    "RecipientRecord",
    "EnvelopeLayout",
    "encode_ct_length",
    "decode_ct_length",
    "parse_envelope",
    "recipient_fingerprints",
    "envelope_owner",
]
