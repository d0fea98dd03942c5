# tests/conftest.py
import time

import pytest

from pkg_jwt.adapters.pyjwt.codec import PyJWTCodec
from pkg_jwt.application.use_cases.sign import SignTokenUseCase
from pkg_jwt.application.use_cases.verify import VerifyTokenUseCase

SECRET = "my-very-secure-secret-key-that-is-long-enough-for-hs256"
WRONG_SECRET = "wrong-secret-key-that-is-also-long-enough-for-hs256"


@pytest.fixture
def secret():
    return SECRET


@pytest.fixture
def wrong_secret():
    return WRONG_SECRET


@pytest.fixture
def codec():
    return PyJWTCodec()


@pytest.fixture
def signer(codec):
    return SignTokenUseCase(codec=codec)


@pytest.fixture
def verifier(codec):
    return VerifyTokenUseCase(codec=codec)


@pytest.fixture
def signer_at(codec):
    """Build a signer whose clock is shifted by `offset` seconds from real time."""

    def _make(offset: int) -> SignTokenUseCase:
        return SignTokenUseCase(codec=codec, clock=lambda: time.time() + offset)

    return _make
