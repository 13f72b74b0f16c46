import os
from .constants import GCM_NONCE_BYTES, BOX_NONCE_BYTES
from .errors import EntropyUnavailable

def random_bytes(n: int) -> bytes:
    """Return exactly n bytes from the OS CSPRNG or raise EntropyUnavailable."""
    if n < 0:
        raise ValueError("n must be non-negative")
    try:
        buf = os.urandom(n)
    except (OSError, NotImplementedError) as exc:
        raise EntropyUnavailable(f"random source unavailable: {exc}") from exc
    if len(buf) != n:
        raise EntropyUnavailable(f"short read from random source ({len(buf)}/{n} bytes)")
    return buf

def gcm_nonce() -> bytes:
    return random_bytes(GCM_NONCE_BYTES)

def box_nonce() -> bytes:
    return random_bytes(BOX_NONCE_BYTES)

__all__ = ["random_bytes", "gcm_nonce", "box_nonce"]
