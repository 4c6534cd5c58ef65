from abc import ABC, abstractmethod

from ..models.resource import Resource


class EventPublisher(ABC):
    """Interface for best-effort resource change notifications"""

    @abstractmethod
    async def publish(self, event_name: str, resource: Resource) -> None:
        """Send one event for the resource. Must never raise on delivery failure"""
        pass
