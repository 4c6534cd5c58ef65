# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.resolve_identity import ResolveIdentityUseCase
from ...core.exceptions import UnauthorizedError
from ...di.container import get_container
from ...domain.models.identity import Identity


security_scheme = HTTPBearer(auto_error=False)


async def get_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> Identity:
    """
    FastAPI dependency to get the verified caller identity from the bearer token

    Args:
        credentials: HTTP Bearer token credentials

    Returns:
        Identity of the caller

    Raises:
        UnauthorizedError: If the token is missing or invalid
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Missing bearer token")

    container = get_container()
    resolve_identity_use_case = container.get(ResolveIdentityUseCase)
    return await resolve_identity_use_case.execute(credentials.credentials)
