"""
Tests for the JWT session token service.

Tests verify that:
- Access and refresh tokens carry the same identity claim
- Each token type is signed with its own secret and lifetime
- Expired, forged and malformed tokens fail with distinct errors
- Signing keys never show up in repr()
"""

import warnings
from datetime import UTC, datetime, timedelta

import jwt as pyjwt
import pytest

from todolist_core.auth.token import (
    IdentityClaim,
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
    TokenKeys,
    TokenService,
)
from todolist_core.exceptions import ConfigurationError

ACCESS_SECRET = "unit-access-secret-0123456789abcdef"
REFRESH_SECRET = "unit-refresh-secret-0123456789abcdef"


@pytest.fixture
def keys():
    return TokenKeys(access_secret=ACCESS_SECRET, refresh_secret=REFRESH_SECRET)


@pytest.fixture
def service(keys):
    return TokenService(keys)


@pytest.fixture
def claim():
    return IdentityClaim(user_id=1, email="john@example.com", username="john")


# ============================================================================
# Issuing
# ============================================================================


class TestIssueTokens:
    """Tests for issue_access_token, issue_refresh_token and issue_pair."""

    def test_access_token_is_three_part_jwt(self, service, claim):
        token = service.issue_access_token(claim)
        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_access_token_claims(self, service, claim):
        token = service.issue_access_token(claim)
        payload = pyjwt.decode(token, options={"verify_signature": False})

        assert payload["userId"] == 1
        assert payload["email"] == "john@example.com"
        assert payload["username"] == "john"
        assert isinstance(payload["iat"], int)
        assert isinstance(payload["exp"], int)

    def test_access_token_lifetime_is_15_minutes(self, service, claim):
        token = service.issue_access_token(claim)
        payload = pyjwt.decode(token, options={"verify_signature": False})
        assert payload["exp"] - payload["iat"] == 15 * 60

    def test_refresh_token_lifetime_is_7_days(self, service, claim):
        token = service.issue_refresh_token(claim)
        payload = pyjwt.decode(token, options={"verify_signature": False})
        assert payload["exp"] - payload["iat"] == 7 * 24 * 60 * 60

    def test_access_token_signed_with_access_secret(self, service, claim):
        token = service.issue_access_token(claim)
        payload = pyjwt.decode(token, ACCESS_SECRET, algorithms=["HS256"])
        assert payload["userId"] == 1

    def test_refresh_token_signed_with_refresh_secret(self, service, claim):
        token = service.issue_refresh_token(claim)
        payload = pyjwt.decode(token, REFRESH_SECRET, algorithms=["HS256"])
        assert payload["userId"] == 1

    def test_pair_carries_identical_claim(self, service, claim):
        pair = service.issue_pair(claim)
        access = pyjwt.decode(pair.access_token, options={"verify_signature": False})
        refresh = pyjwt.decode(pair.refresh_token, options={"verify_signature": False})

        for key in ("userId", "email", "username", "iat"):
            assert access[key] == refresh[key]
        assert access["exp"] < refresh["exp"]
        assert pair.access_token != pair.refresh_token


# ============================================================================
# Verification
# ============================================================================


class TestVerify:
    """Tests for verify, verify_access_token and verify_refresh_token."""

    def test_issue_then_verify_returns_same_claim(self, service, claim):
        token = service.issue_access_token(claim)
        assert service.verify_access_token(token) == claim

    def test_refresh_round_trip(self, service, claim):
        token = service.issue_refresh_token(claim)
        assert service.verify_refresh_token(token) == claim

    def test_expired_access_token(self, service, claim):
        issued = datetime.now(UTC) - timedelta(minutes=15, seconds=5)
        token = service.issue_access_token(claim, issued_at=issued)

        with pytest.raises(TokenExpiredError):
            service.verify_access_token(token)

    def test_expired_refresh_token(self, service, claim):
        issued = datetime.now(UTC) - timedelta(days=7, seconds=5)
        token = service.issue_refresh_token(claim, issued_at=issued)

        with pytest.raises(TokenExpiredError):
            service.verify_refresh_token(token)

    def test_expired_token_is_not_reported_as_bad_signature(self, service, claim):
        issued = datetime.now(UTC) - timedelta(hours=1)
        token = service.issue_access_token(claim, issued_at=issued)

        with pytest.raises(TokenExpiredError) as exc_info:
            service.verify(token, ACCESS_SECRET)
        assert not isinstance(exc_info.value, InvalidSignatureError)

    def test_token_just_before_expiry_is_valid(self, service, claim):
        issued = datetime.now(UTC) - timedelta(minutes=14)
        token = service.issue_access_token(claim, issued_at=issued)
        assert service.verify_access_token(token) == claim

    def test_access_token_rejected_by_refresh_verifier(self, service, claim):
        token = service.issue_access_token(claim)
        with pytest.raises(InvalidSignatureError):
            service.verify_refresh_token(token)

    def test_refresh_token_rejected_by_access_verifier(self, service, claim):
        token = service.issue_refresh_token(claim)
        with pytest.raises(InvalidSignatureError):
            service.verify_access_token(token)

    def test_forged_token_rejected(self, service, claim):
        token = service.issue_access_token(claim)
        payload = pyjwt.decode(token, options={"verify_signature": False})
        forged = pyjwt.encode(payload, "attacker-secret-0123456789abcdefgh", algorithm="HS256")

        with pytest.raises(InvalidSignatureError):
            service.verify_access_token(forged)

    @pytest.mark.parametrize("token", [
        "not-a-jwt",
        "invalid.token.here",
        "eyJhbGciOiJub25lIn0.eyJzdWIiOiIxMjM0NTY3ODkwIn0.",  # alg=none
        "",
    ])
    def test_malformed_token_rejected(self, service, token):
        with pytest.raises(MalformedTokenError):
            service.verify_access_token(token)

    def test_token_missing_identity_claims_rejected(self, service):
        now = int(datetime.now(UTC).timestamp())
        token = pyjwt.encode(
            {"userId": 1, "iat": now, "exp": now + 60},
            ACCESS_SECRET,
            algorithm="HS256",
        )
        with pytest.raises(MalformedTokenError):
            service.verify_access_token(token)

    def test_token_with_non_numeric_user_id_rejected(self, service):
        now = int(datetime.now(UTC).timestamp())
        token = pyjwt.encode(
            {"userId": "abc", "email": "a@b.co", "username": "a", "iat": now, "exp": now + 60},
            ACCESS_SECRET,
            algorithm="HS256",
        )
        with pytest.raises(MalformedTokenError):
            service.verify_access_token(token)

    def test_empty_secret_is_configuration_error(self, claim):
        service = TokenService(TokenKeys(access_secret="", refresh_secret="r"))
        with pytest.raises(ConfigurationError):
            service.verify_access_token("a.b.c")


class TestTokenKeys:
    """Tests for the immutable signing configuration."""

    def test_keys_are_frozen(self, keys):
        with pytest.raises(AttributeError):
            keys.access_secret = "other"

    def test_secrets_long_enough_for_hs256(self, service, claim, token_service, john_claim):
        """HS256 keys under 32 bytes make PyJWT warn on every encode and decode."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            for tokens, identity in ((service, claim), (token_service, john_claim)):
                pair = tokens.issue_pair(identity)
                assert tokens.verify_access_token(pair.access_token) == identity
                assert tokens.verify_refresh_token(pair.refresh_token) == identity

    def test_repr_hides_secrets(self, keys):
        text = repr(keys)
        assert ACCESS_SECRET not in text
        assert REFRESH_SECRET not in text
        assert "HS256" in text


class TestIdentityClaim:
    """Tests for the identity claim model."""

    def test_accepts_wire_alias(self):
        claim = IdentityClaim.model_validate(
            {"userId": 7, "email": "x@example.com", "username": "x"}
        )
        assert claim.user_id == 7

    def test_to_claims_uses_wire_names(self, claim):
        assert claim.to_claims() == {
            "userId": 1,
            "email": "john@example.com",
            "username": "john",
        }
