"""Unit tests for password hashing and access tokens."""

from datetime import timedelta
from uuid import uuid4

from jose import jwt

from app.config import settings
from app.core.security import (
    create_access_token,
    decode_token,
    get_password_hash,
    verify_password,
)


def test_password_hash_roundtrip():
    hashed = get_password_hash("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("secret124", hashed)


def test_password_hash_is_salted():
    assert get_password_hash("secret123") != get_password_hash("secret123")


def test_long_password_truncated_to_bcrypt_limit():
    long_password = "é" * 50  # 100 bytes in UTF-8
    hashed = get_password_hash(long_password)
    assert verify_password(long_password, hashed)
    assert verify_password("é" * 36, hashed)


def test_access_token_claims():
    user_id = str(uuid4())
    payload = decode_token(create_access_token({"sub": user_id}))
    assert payload["sub"] == user_id
    assert payload["type"] == "access"
    assert "exp" in payload


def test_expired_token_rejected():
    token = create_access_token({"sub": "x"}, expires_delta=timedelta(seconds=-5))
    assert decode_token(token) is None


def test_token_signed_with_other_key_rejected():
    token = jwt.encode({"sub": "x", "type": "access"}, "another-key", algorithm=settings.ALGORITHM)
    assert decode_token(token) is None


def test_garbage_token_rejected():
    assert decode_token("not-a-token") is None
