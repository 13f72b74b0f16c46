# Envelope layout: nonce | length | ciphertext | owner pubkey | records...
GCM_NONCE_BYTES = 12
GCM_KEY_BYTES = 32
GCM_TAG_BYTES = 16

CTLENGTH_BLOCK_SIZE = 16

BOX_KEY_BYTES = 32
BOX_NONCE_BYTES = 24
FINGERPRINT_BYTES = 20
SEALED_KEY_BYTES = GCM_KEY_BYTES + 16
RECIPIENT_RECORD_BYTES = FINGERPRINT_BYTES + BOX_NONCE_BYTES + SEALED_KEY_BYTES

HEADER_BYTES = GCM_NONCE_BYTES + CTLENGTH_BLOCK_SIZE
MIN_ENVELOPE_BYTES = HEADER_BYTES + BOX_KEY_BYTES

# base64 of 32 raw bytes, padding included
KEY_TEXT_CHARS = 44

PBKDF2_PASSWORD_BYTES = 32
PBKDF2_SALT_BYTES = 32
PBKDF2_KEY_BYTES = GCM_KEY_BYTES
PBKDF2_CYCLES = 5000

__all__ = [
    "GCM_NONCE_BYTES",
    "GCM_KEY_BYTES",
    "GCM_TAG_BYTES",
    "CTLENGTH_BLOCK_SIZE",
    "BOX_KEY_BYTES",
    "BOX_NONCE_BYTES",
    "FINGERPRINT_BYTES",
    "SEALED_KEY_BYTES",
    "RECIPIENT_RECORD_BYTES",
    "HEADER_BYTES",
    "MIN_ENVELOPE_BYTES",
    "KEY_TEXT_CHARS",
    "PBKDF2_PASSWORD_BYTES",
    "PBKDF2_SALT_BYTES",
    "PBKDF2_KEY_BYTES",
    "PBKDF2_CYCLES",
]
