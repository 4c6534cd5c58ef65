from .ownership_policy import can_impersonate, resolve_owner

__all__ = ["can_impersonate", "resolve_owner"]
