from cryptography.hazmat.primitives import hashes
from .keys import as_public_key

def sha1_bytes(data: bytes) -> bytes:
    h = hashes.Hash(hashes.SHA1())
    h.update(data)
    return h.finalize()

def fingerprint(public_key) -> bytes:
    """20-byte lookup tag for a public key. Not a trust anchor."""
    return sha1_bytes(bytes(as_public_key(public_key)))

__all__ = ["sha1_bytes", "fingerprint"]
