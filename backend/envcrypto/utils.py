import base64
import binascii

def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")

def b64d(s: str) -> bytes:
    # validate=True: reject stray characters instead of silently skipping them
    return base64.b64decode(s.encode("ascii"), validate=True)

B64Error = (binascii.Error, UnicodeEncodeError)

__all__ = ["b64e", "b64d", "B64Error"]
