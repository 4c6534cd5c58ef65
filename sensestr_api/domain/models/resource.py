# Standard library imports
from dataclasses import dataclass, fields
from datetime import datetime
from typing import ClassVar, Optional, Tuple


@dataclass
class Resource:
    """
    Pure domain model shared by every owned resource.

    Holds the lifecycle bookkeeping (identity, timestamps, creator, last
    updator and owner). Concrete resources add their own fields, which are
    the only ones a client payload may replace.
    """
    id: Optional[str]
    created_date: datetime
    updated_date: datetime
    creator_id: str
    updator_id: str
    owner_id: str

    resource_name: ClassVar[str] = "resource"
    collection_name: ClassVar[str] = "resources"

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.owner_id:
            raise ValueError("Owner ID is required")
        if not self.creator_id:
            raise ValueError("Creator ID is required")
        if self.updated_date < self.created_date:
            raise ValueError("Updated date cannot precede created date")

    @classmethod
    def payload_fields(cls) -> Tuple[str, ...]:
        """Names of the resource-specific fields, in declaration order."""
        base = {f.name for f in fields(Resource)}
        return tuple(f.name for f in fields(cls) if f.name not in base)
