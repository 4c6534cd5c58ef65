from typing import TYPE_CHECKING
from ...core.security import TokenVerifier
from ...application.use_cases.auth.resolve_identity import ResolveIdentityUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication provider - registers the token verifier and identity use case"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the token verifier (singleton, it caches signing keys)
        and the identity use case (factory).
        """
        container.register_singleton(TokenVerifier, TokenVerifier.from_settings())

        container.register_factory(
            ResolveIdentityUseCase,
            lambda: ResolveIdentityUseCase(
                token_verifier=container.get(TokenVerifier)
            )
        )
