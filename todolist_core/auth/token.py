"""JWT session token service.

Two tokens are minted from the same identity claim:
- Access token: signed with the access secret, 15 minutes by default
- Refresh token: signed with the refresh secret, 7 days by default

Tokens are stateless. Validity is derived from signature and expiry only;
there is no server-side record of issued tokens, so a token cannot be
invalidated before it expires. Logout only clears the client's cookies.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt
from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import ConfigurationError

# Claims every session token must carry
REQUIRED_CLAIMS = ["exp", "iat", "userId", "email", "username"]


# ============================================================================
# Token Errors
# ============================================================================


class TokenError(Exception):
    """Base class for token verification failures."""


class TokenExpiredError(TokenError):
    """Token signature is valid but the token is past its expiry."""


class InvalidSignatureError(TokenError):
    """Token was not signed with the expected secret."""


class MalformedTokenError(TokenError):
    """Token is not a structurally valid JWT or lacks required claims."""


# ============================================================================
# Signing Configuration and Claim
# ============================================================================


@dataclass(frozen=True)
class TokenKeys:
    """Immutable signing configuration, built once at startup."""

    access_secret: str
    refresh_secret: str
    algorithm: str = "HS256"
    access_ttl: timedelta = timedelta(minutes=15)
    refresh_ttl: timedelta = timedelta(days=7)

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks
        return (
            f"TokenKeys(algorithm={self.algorithm!r}, "
            f"access_ttl={self.access_ttl!r}, refresh_ttl={self.refresh_ttl!r})"
        )


class IdentityClaim(BaseModel):
    """Identity payload embedded in both access and refresh tokens."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_id: int = Field(alias="userId")
    email: str
    username: str

    def to_claims(self) -> dict:
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class TokenPair:
    """Freshly minted access and refresh tokens."""

    access_token: str
    refresh_token: str


# ============================================================================
# Token Service
# ============================================================================


class TokenService:
    """Issues and verifies signed session tokens.

    Holds a reference to the immutable TokenKeys; it has no other state.
    """

    def __init__(self, keys: TokenKeys):
        self._keys = keys

    @property
    def keys(self) -> TokenKeys:
        return self._keys

    def _encode(
        self,
        claim: IdentityClaim,
        secret: str,
        ttl: timedelta,
        issued_at: datetime | None,
    ) -> str:
        iat = issued_at or datetime.now(UTC)
        payload = claim.to_claims()
        payload["iat"] = int(iat.timestamp())
        payload["exp"] = int((iat + ttl).timestamp())
        return jwt.encode(payload, secret, algorithm=self._keys.algorithm)

    def issue_access_token(
        self, claim: IdentityClaim, issued_at: datetime | None = None
    ) -> str:
        """Sign the claim with the access secret."""
        return self._encode(claim, self._keys.access_secret, self._keys.access_ttl, issued_at)

    def issue_refresh_token(
        self, claim: IdentityClaim, issued_at: datetime | None = None
    ) -> str:
        """Sign the claim with the refresh secret."""
        return self._encode(claim, self._keys.refresh_secret, self._keys.refresh_ttl, issued_at)

    def issue_pair(self, claim: IdentityClaim, issued_at: datetime | None = None) -> TokenPair:
        """Mint an access and a refresh token carrying the same claim."""
        iat = issued_at or datetime.now(UTC)
        return TokenPair(
            access_token=self.issue_access_token(claim, issued_at=iat),
            refresh_token=self.issue_refresh_token(claim, issued_at=iat),
        )

    def verify(self, token: str, secret: str) -> IdentityClaim:
        """
        Verify signature and expiry, then return the embedded claim.

        Args:
            token: Encoded JWT
            secret: Secret the token is expected to be signed with

        Returns:
            The IdentityClaim carried by the token

        Raises:
            TokenExpiredError: Signature is valid but the token has expired
            InvalidSignatureError: Token was signed with a different secret
            MalformedTokenError: Token cannot be decoded or lacks claims
            ConfigurationError: The secret is empty
        """
        if not secret:
            raise ConfigurationError("Token secret is not configured")

        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._keys.algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.InvalidSignatureError as e:
            raise InvalidSignatureError("Token signature is invalid") from e
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(f"Malformed token: {e}") from e

        try:
            return IdentityClaim.model_validate(payload)
        except ValueError as e:
            raise MalformedTokenError("Token claims are invalid") from e

    def verify_access_token(self, token: str) -> IdentityClaim:
        return self.verify(token, self._keys.access_secret)

    def verify_refresh_token(self, token: str) -> IdentityClaim:
        return self.verify(token, self._keys.refresh_secret)

