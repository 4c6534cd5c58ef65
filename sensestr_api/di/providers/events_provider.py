from typing import TYPE_CHECKING

from ...domain.services.event_publisher import EventPublisher
from ...infrastructure.notifications.event_api_client import EventApiClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class EventsProvider:
    """Events provider - registers the event API client as the event publisher"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        event_api_client = EventApiClient()
        container.register_singleton(EventApiClient, event_api_client)
        container.register_singleton(EventPublisher, event_api_client)
