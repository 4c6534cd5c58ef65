# Standard library imports
from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class Identity:
    """
    Verified caller identity for a single request.

    Built from the claims of a verified bearer token. Machine principals are
    service accounts authenticated with the client-credentials grant.
    """
    user_id: str
    is_machine: bool = False
    scopes: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_id:
            raise ValueError("Caller user ID is required")

    def has_scope(self, scope: str) -> bool:
        return scope in self.scopes
