"""Token service: emisión y verificación de JWTs de acceso."""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from app.services.token_service import InvalidToken, TokenService

SECRET = "unit-test-secret-key-with-enough-length"


def test_issued_token_verifies_to_same_user():
    tokens = TokenService(SECRET)
    token = tokens.issue("64b7f0c2a1b2c3d4e5f60718")
    assert tokens.verify(token) == "64b7f0c2a1b2c3d4e5f60718"


def test_token_valid_for_24_hours():
    tokens = TokenService(SECRET)
    now = datetime.now(timezone.utc)
    payload = pyjwt.decode(tokens.issue("u1", now=now), SECRET, algorithms=["HS256"])
    assert payload["exp"] - payload["iat"] == 24 * 60 * 60


def test_token_still_valid_just_before_expiry():
    tokens = TokenService(SECRET)
    issued = datetime.now(timezone.utc) - timedelta(hours=23, minutes=59)
    assert tokens.verify(tokens.issue("u1", now=issued)) == "u1"


def test_expired_token_is_rejected():
    tokens = TokenService(SECRET)
    issued = datetime.now(timezone.utc) - timedelta(hours=25)
    with pytest.raises(InvalidToken):
        tokens.verify(tokens.issue("u1", now=issued))


def test_token_from_other_key_is_rejected():
    token = TokenService(SECRET).issue("u1")
    with pytest.raises(InvalidToken):
        TokenService("another-secret-key-with-enough-length").verify(token)


def test_malformed_token_is_rejected():
    with pytest.raises(InvalidToken):
        TokenService(SECRET).verify("not-a-jwt")


def test_token_without_subject_is_rejected():
    exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())
    token = pyjwt.encode({"exp": exp}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidToken):
        TokenService(SECRET).verify(token)


def test_each_token_has_unique_jti():
    tokens = TokenService(SECRET)
    a = pyjwt.decode(tokens.issue("u1"), SECRET, algorithms=["HS256"])
    b = pyjwt.decode(tokens.issue("u1"), SECRET, algorithms=["HS256"])
    assert a["jti"] != b["jti"]


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService("")
