"""
Ownership policy for mutating requests.

Decides whether a create or update may set the requested owner and which
owner id the resource ends up with. Pure: no I/O, no side effects.
"""

# Standard library imports
from typing import Optional

# Local application imports
from ...core.exceptions import BadRequestError, UnauthorizedError
from ..constants import Scopes
from ..models.identity import Identity


def can_impersonate(identity: Identity) -> bool:
    """Only machine principals holding impersonate_user may act for another user."""
    return identity.is_machine and identity.has_scope(Scopes.IMPERSONATE_USER)


def resolve_owner(
    identity: Identity,
    resource_name: str,
    requested_owner_id: Optional[str] = None,
    current_owner_id: Optional[str] = None,
) -> str:
    """
    Resolve the owner of a resource being created or updated.

    Args:
        identity: Verified caller identity
        resource_name: Singular resource name used in error messages
        requested_owner_id: ownerId from the payload, if any
        current_owner_id: Owner of the existing resource; None on create

    Returns:
        The owner id the resource must be stored with

    Raises:
        UnauthorizedError: Owner change to another identity without impersonation rights
        BadRequestError: A machine principal naming itself as owner
    """
    creating = current_owner_id is None
    baseline_owner_id = identity.user_id if creating else current_owner_id

    if not requested_owner_id:
        return baseline_owner_id

    # Checked before the machine self-assignment rule
    if requested_owner_id != baseline_owner_id and not can_impersonate(identity):
        if creating:
            message = (
                f"You cannot create a {resource_name} for another user "
                f"without the {Scopes.IMPERSONATE_USER} scope."
            )
        else:
            message = (
                f"You cannot change a {resource_name} owner to another user "
                f"without the {Scopes.IMPERSONATE_USER} scope."
            )
        raise UnauthorizedError(message)

    if requested_owner_id == identity.user_id and identity.is_machine:
        raise BadRequestError("A machine cannot set themselves as the owner of this resource.")

    return requested_owner_id
