"""Outbound notifications: resource change events to the event API."""

from .event_api_client import EventApiClient, resource_to_event_payload

__all__ = ["EventApiClient", "resource_to_event_payload"]
