import pytest
from jose import jwt

from app.core.config import settings
from app.services.security import Caller, create_access_token, decode_access_token, grants


def test_token_round_trip_carries_scope_and_abilities():
    token = create_access_token("5", team_id=3, abilities=["read", "view:sensitive"])
    claims = decode_access_token(token)
    assert claims.user_id == 5
    assert claims.team_id == 3
    assert claims.abilities == ["read", "view:sensitive"]


def test_token_without_team_scope():
    claims = decode_access_token(create_access_token("5"))
    assert claims.team_id is None
    assert claims.abilities == []


def test_expired_token_rejected():
    token = create_access_token("5", team_id=1, expires_minutes=-10)
    with pytest.raises(ValueError):
        decode_access_token(token)


def test_wrong_audience_rejected():
    token = jwt.encode(
        {"sub": "5", "team_id": 1, "iss": settings.jwt_issuer, "aud": "someone-else"},
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(ValueError):
        decode_access_token(token)


def test_wrong_signature_rejected():
    token = jwt.encode(
        {"sub": "5", "iss": settings.jwt_issuer, "aud": settings.jwt_audience},
        "another-secret-key",
        algorithm="HS256",
    )
    with pytest.raises(ValueError):
        decode_access_token(token)


def test_malformed_team_claim_rejected():
    token = jwt.encode(
        {"sub": "5", "team_id": "not-a-number", "iss": settings.jwt_issuer, "aud": settings.jwt_audience},
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )
    with pytest.raises(ValueError):
        decode_access_token(token)


def test_ability_grants():
    caller = Caller(user_id=1, team_id=1, abilities=frozenset({"read"}))
    assert grants(caller.abilities, "read")
    assert not grants(caller.abilities, "view:sensitive")
    assert grants(["*"], "view:sensitive")
    assert grants(["view:sensitive"], "view:sensitive")
    assert not grants([], "view:sensitive")
