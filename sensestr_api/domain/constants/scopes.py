"""Constants for token scopes and claims"""


class Scopes:
    """Scope names granted to callers"""
    IMPERSONATE_USER = "impersonate_user"


class Claims:
    """Token claim names read when building a caller identity"""
    SUBJECT = "sub"
    GRANT_TYPE = "gty"
    SCOPES = "scopes"
    SCOPE = "scope"

    CLIENT_CREDENTIALS = "client-credentials"
