"""Exceptions raised by envcrypto. Every failure is one of these."""

class EnvelopeError(Exception):
    """Base class for all envelope errors."""

class EntropyUnavailable(EnvelopeError):
    pass

class PayloadTooLarge(EnvelopeError):
    pass

class InvalidKey(EnvelopeError, ValueError):
    pass

class MalformedBlob(EnvelopeError, ValueError):
    pass

class MalformedKeyText(EnvelopeError, ValueError):
    pass

class RecipientNotAuthorized(EnvelopeError):
    pass

class KeyUnsealFailed(EnvelopeError):
    pass

class PayloadDecryptionFailed(EnvelopeError):
    pass

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
]
