# Standard library imports
from typing import Any, Dict, FrozenSet, List, Optional

# External package imports
import jwt
from jwt import PyJWKClient
from jwt.exceptions import InvalidTokenError, PyJWKClientError

# Local application imports
from .config import Settings, get_settings
from ..domain.constants import Claims
from ..domain.models.identity import Identity


class TokenVerifier:
    """
    Verify bearer tokens issued by the identity provider.

    Tokens are RS256-signed and checked against the provider's published
    JWKS, plus the expected audience and issuer. When a shared secret is
    configured, HS256 tokens signed with it are accepted instead (local
    development and tests).
    """

    def __init__(
        self,
        audience: str,
        issuer: str,
        jwks_uri: Optional[str] = None,
        algorithms: Optional[List[str]] = None,
        shared_secret: Optional[str] = None,
    ) -> None:
        self.audience = audience
        self.issuer = issuer
        self.shared_secret = shared_secret or None
        if self.shared_secret:
            self.algorithms = ["HS256"]
            self._jwks_client: Optional[PyJWKClient] = None
        else:
            if not jwks_uri:
                raise ValueError("A JWKS URI is required when no shared secret is configured")
            self.algorithms = algorithms or ["RS256"]
            self._jwks_client = PyJWKClient(jwks_uri, cache_keys=True)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "TokenVerifier":
        settings = settings or get_settings()
        return cls(
            audience=settings.auth_audience,
            issuer=settings.auth_issuer,
            jwks_uri=settings.auth_jwks_uri,
            algorithms=settings.auth_algorithms,
            shared_secret=settings.auth_shared_secret,
        )

    def verify(self, token: str) -> Dict[str, Any]:
        """
        Decode and validate a bearer token

        Args:
            token: The encoded JWT

        Returns:
            Dictionary containing the verified token claims

        Raises:
            ValueError: If the token is malformed, badly signed, expired,
                or carries the wrong audience or issuer
        """
        try:
            if self._jwks_client is not None:
                key = self._jwks_client.get_signing_key_from_jwt(token).key
            else:
                key = self.shared_secret
            return jwt.decode(
                token,
                key,
                algorithms=self.algorithms,
                audience=self.audience,
                issuer=self.issuer,
            )
        except (InvalidTokenError, PyJWKClientError) as e:
            raise ValueError(f"Invalid token: {str(e)}")


def _read_scopes(claims: Dict[str, Any]) -> FrozenSet[str]:
    scopes = claims.get(Claims.SCOPES)
    if scopes is None:
        # Standard OAuth claim: space-delimited string
        scopes = claims.get(Claims.SCOPE) or []
    if isinstance(scopes, str):
        scopes = scopes.split()
    return frozenset(str(scope) for scope in scopes)


def build_identity(claims: Dict[str, Any]) -> Identity:
    """
    Build the caller identity from verified token claims

    Args:
        claims: Verified token claims

    Returns:
        Identity for the caller

    Raises:
        ValueError: If the subject claim is missing
    """
    user_id = claims.get(Claims.SUBJECT)
    if not user_id:
        raise ValueError("Invalid authentication payload: missing subject")

    return Identity(
        user_id=str(user_id),
        is_machine=claims.get(Claims.GRANT_TYPE) == Claims.CLIENT_CREDENTIALS,
        scopes=_read_scopes(claims),
    )
