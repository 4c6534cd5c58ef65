# Standard library imports
from dataclasses import dataclass, field
from typing import List, Optional

# Local application imports
from .resource import Resource


@dataclass
class Device(Resource):
    """
    Pure domain model for Device entity.

    A device belongs to an owner and references the sessions it takes part in.
    Session references are kept unique, first occurrence wins.
    """
    name: str = ""
    description: Optional[str] = None
    sessions: List[str] = field(default_factory=list)

    resource_name = "device"
    collection_name = "devices"

    def __post_init__(self) -> None:
        """Business validations"""
        super().__post_init__()
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Device name is required")
        self.sessions = list(dict.fromkeys(self.sessions or []))
