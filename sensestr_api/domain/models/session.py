# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from .resource import Resource


@dataclass
class Session(Resource):
    """Pure domain model for Session entity."""
    name: str = ""
    description: Optional[str] = None

    resource_name = "session"
    collection_name = "sessions"

    def __post_init__(self) -> None:
        """Business validations"""
        super().__post_init__()
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Session name is required")
