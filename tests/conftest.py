"""
Pytest configuration and fixtures for envcrypto tests.

Provides fresh Curve25519 key pairs for the usual cast of recipients.
"""

from typing import Tuple
import pytest

from envcrypto import gen_box_keypair


@pytest.fixture
def alice() -> Tuple[bytes, bytes]:
    """Envelope owner: (public, private)."""
    return gen_box_keypair()


@pytest.fixture
def bob() -> Tuple[bytes, bytes]:
    return gen_box_keypair()


@pytest.fixture
def carol() -> Tuple[bytes, bytes]:
    """A key pair that is never authorized."""
    return gen_box_keypair()


@pytest.fixture
def quote() -> bytes:
    return b"Corporations are people, my friend"
