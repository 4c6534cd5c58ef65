from .resolve_identity import ResolveIdentityUseCase

__all__ = ["ResolveIdentityUseCase"]
