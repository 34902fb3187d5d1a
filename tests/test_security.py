"""Tests for token issuance / verification and password hashing."""

import uuid
from datetime import timedelta

import pytest
from jose import jwt

from notesapp.core.config import get_settings
from notesapp.core.errors import InvalidToken
from notesapp.core.security import (
    hash_password,
    issue_token,
    verify_password,
    verify_token,
)


def _flip_signature_char(token: str) -> str:
    header, payload, signature = token.split(".")
    i = len(signature) // 2
    replacement = "A" if signature[i] != "A" else "B"
    return ".".join([header, payload, signature[:i] + replacement + signature[i + 1:]])


def test_issue_then_verify_returns_user_id():
    user_id = uuid.uuid4()
    assert verify_token(issue_token(user_id)) == user_id


def test_token_carries_only_identity_and_times():
    settings = get_settings()
    token = issue_token(uuid.uuid4())
    claims = jwt.get_unverified_claims(token)
    assert set(claims) == {"sub", "iat", "exp"}
    assert claims["exp"] - claims["iat"] == settings.jwt_expire_minutes * 60


def test_default_expiry_is_24_hours():
    assert get_settings().jwt_expire_minutes == 24 * 60


def test_expired_token_rejected():
    token = issue_token(uuid.uuid4(), expires_delta=timedelta(seconds=-1))
    with pytest.raises(InvalidToken):
        verify_token(token)


def test_tampered_signature_rejected():
    token = issue_token(uuid.uuid4())
    with pytest.raises(InvalidToken):
        verify_token(_flip_signature_char(token))


def test_tampered_payload_rejected():
    token = issue_token(uuid.uuid4())
    header, payload, signature = token.split(".")
    forged = jwt.encode({"sub": str(uuid.uuid4())}, "other", algorithm="HS256").split(".")[1]
    with pytest.raises(InvalidToken):
        verify_token(".".join([header, forged, signature]))


def test_wrong_secret_rejected():
    settings = get_settings()
    token = jwt.encode(
        {"sub": str(uuid.uuid4()), "exp": 9999999999},
        settings.jwt_secret_key + "-not",
        algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(InvalidToken):
        verify_token(token)


@pytest.mark.parametrize("garbage", ["", "not-a-jwt", "a.b.c"])
def test_malformed_token_rejected(garbage):
    with pytest.raises(InvalidToken):
        verify_token(garbage)


def test_non_uuid_subject_rejected():
    settings = get_settings()
    token = jwt.encode(
        {"sub": "42", "exp": 9999999999},
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(InvalidToken):
        verify_token(token)


def test_password_hash_roundtrip():
    hashed = hash_password("password")
    assert hashed != "password"
    assert verify_password("password", hashed)
    assert not verify_password("Password", hashed)


def test_verify_password_with_garbage_hash_is_false():
    assert verify_password("password", "not-a-hash") is False
