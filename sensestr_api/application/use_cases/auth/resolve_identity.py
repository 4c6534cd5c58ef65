# Standard library imports
import asyncio
import logging

# Local application imports
from ....core.exceptions import UnauthorizedError
from ....core.security import TokenVerifier, build_identity
from ....domain.models.identity import Identity

logger = logging.getLogger(__name__)


class ResolveIdentityUseCase:
    """Use case for resolving the caller identity from a bearer token"""

    def __init__(self, token_verifier: TokenVerifier) -> None:
        self.token_verifier = token_verifier

    async def execute(self, token: str) -> Identity:
        """
        Verify the token and build the caller identity

        Args:
            token: Bearer access token

        Returns:
            Identity of the caller

        Raises:
            UnauthorizedError: If the token is invalid, expired or has no subject
        """
        try:
            # JWKS lookups may block on the network
            claims = await asyncio.to_thread(self.token_verifier.verify, token)
            return build_identity(claims)
        except ValueError as exception:
            logger.info(f"Rejected bearer token: {exception}")
            raise UnauthorizedError(str(exception))
