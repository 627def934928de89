"""
Unit tests for the bearer-token access gate in api.v1.deps.
"""
import datetime as dt

import pytest

from app.api.v1.deps import authenticate, extract_bearer_token
from app.core.errors import Forbidden, Unauthorized
from app.core.security import TokenService
from app.schemas.auth import TokenClaims


@pytest.fixture
def tokens():
    return TokenService("gate-secret-0123456789abcdef0123456789")


@pytest.fixture
def claims():
    return TokenClaims(sub="3", email="gate@x.io", role="admin")


@pytest.mark.parametrize(
    "header, expected",
    [
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("bearer abc", "abc"),
        ("Bearer   abc  ", "abc"),
        ("Bearer ", None),
        ("Basic dXNlcjpwdw==", None),
        ("abc.def.ghi", None),
        ("", None),
        (None, None),
    ],
)
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected


def test_missing_header_is_unauthorized(tokens):
    with pytest.raises(Unauthorized) as excinfo:
        authenticate(None, tokens)
    assert excinfo.value.status_code == 401
    assert excinfo.value.message == "Access token required"


def test_malformed_token_is_forbidden(tokens):
    with pytest.raises(Forbidden) as excinfo:
        authenticate("Bearer not-a-token", tokens)
    assert excinfo.value.status_code == 403


def test_expired_token_is_forbidden(tokens, claims):
    token, _ = tokens.issue(claims, now=dt.datetime.now(dt.timezone.utc) - dt.timedelta(days=2))
    with pytest.raises(Forbidden):
        authenticate(f"Bearer {token}", tokens)


def test_valid_token_yields_original_claims(tokens, claims):
    token, _ = tokens.issue(claims)
    assert authenticate(f"Bearer {token}", tokens) == claims
