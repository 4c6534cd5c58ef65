# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from .resource import Resource


@dataclass
class Viewer(Resource):
    """
    Pure domain model for Viewer entity.

    A viewer watches a single session. The session reference is optional and
    is not checked for existence.
    """
    session_id: Optional[str] = None

    resource_name = "viewer"
    collection_name = "viewers"
