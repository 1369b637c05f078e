from datetime import timedelta
from types import SimpleNamespace

import pytest
from jose import jwt

from app.core.config import settings
from app.core.errors import AuthenticationError
from app.core.security import (
    create_access_token,
    create_token,
    decode_token,
    hash_password,
    verify_password,
)

USER = SimpleNamespace(id=7, email="bob@mailbox.org", nickname="bob")


def test_password_hash_roundtrip():
    hashed = hash_password("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


def test_token_carries_identity_and_expires_in_a_day():
    data = decode_token(create_access_token(USER))
    assert data["user_id"] == 7
    assert data["sub"] == "7"
    assert data["email"] == "bob@mailbox.org"
    assert data["nickname"] == "bob"
    assert data["iss"] == settings.JWT_ISSUER
    assert data["exp"] - data["iat"] == 24 * 3600


def test_tampered_signature_rejected():
    token = create_access_token(USER)
    head, payload, sig = token.split(".")
    swapped = "A" if sig[5] != "A" else "B"
    forged = ".".join([head, payload, sig[:5] + swapped + sig[6:]])
    with pytest.raises(AuthenticationError):
        decode_token(forged)


def test_token_signed_with_other_secret_rejected():
    token = jwt.encode(
        {"sub": "7", "user_id": 7, "iss": settings.JWT_ISSUER},
        "not-the-secret",
        algorithm=settings.JWT_ALG,
    )
    with pytest.raises(AuthenticationError):
        decode_token(token)


def test_expired_token_rejected():
    token = create_token(
        user_id=7, email="bob@mailbox.org", nickname=None, expires_delta=timedelta(seconds=-30)
    )
    with pytest.raises(AuthenticationError):
        decode_token(token)


def test_garbage_token_rejected():
    with pytest.raises(AuthenticationError):
        decode_token("not.a.jwt")
