"""Event API client: publishes resource change events over a Socket.IO channel"""

import asyncio
import logging
from dataclasses import asdict
from threading import Lock
from typing import Any, Dict, Optional

import httpx
import socketio
from socketio.exceptions import ConnectionError as SocketConnectionError

from ...core.config import Settings, get_settings
from ...domain.models.resource import Resource
from ...domain.services.event_publisher import EventPublisher
from ...utils.datetime_utils import to_iso

logger = logging.getLogger(__name__)

MAX_RECONNECT_SECONDS = 60.0


def _snake_to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def resource_to_event_payload(resource: Resource) -> Dict[str, Any]:
    """Serialize a resource the way the REST API renders it (camelCase, ISO dates)"""
    payload: Dict[str, Any] = {}
    for key, value in asdict(resource).items():
        if key in ("created_date", "updated_date"):
            value = to_iso(value)
        payload[_snake_to_camel(key)] = value
    return payload


class EventApiClient(EventPublisher):
    """
    Publishes resource change events to the event ingestion service.

    Owns two background tasks: one periodically fetches a client-credentials
    access token, the other retries the Socket.IO connection until it is up.
    Publishing never waits for an acknowledgment and never raises: a failed
    or impossible send is logged and dropped.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        sio: Optional[socketio.AsyncClient] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._sio = sio if sio is not None else socketio.AsyncClient(reconnection=True)
        self._token = ""
        self._token_lock = Lock()
        self._refresh_task: Optional[asyncio.Task] = None
        self._connect_task: Optional[asyncio.Task] = None

        self._sio.on("connect", self._on_connect)
        self._sio.on("disconnect", self._on_disconnect)

    @property
    def enabled(self) -> bool:
        return bool(self.settings.event_api_base)

    @property
    def connected(self) -> bool:
        return bool(self._sio.connected)

    @property
    def current_token(self) -> str:
        with self._token_lock:
            return self._token

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=30.0, http2=True)
        return self._http_client

    def _set_token(self, token: str) -> None:
        with self._token_lock:
            self._token = token

    async def _on_connect(self) -> None:
        logger.info(f"Connected to event API socket (sid={self._sio.sid})")

    async def _on_disconnect(self, *args: Any) -> None:
        logger.warning("Disconnected from event API socket")

    def start(self) -> None:
        """Start the background token refresh and connection tasks."""
        if not self.enabled:
            logger.warning("EVENT_API_BASE not configured. Resource events will not be published.")
            return
        if self._refresh_task is None or self._refresh_task.done():
            self._refresh_task = asyncio.create_task(self._refresh_loop())
        if self._connect_task is None or self._connect_task.done():
            self._connect_task = asyncio.create_task(self._connect_loop())
        logger.info(f"Event API client started for {self.settings.event_api_base}")

    async def stop(self) -> None:
        """Stop the background tasks and disconnect the socket."""
        for task in (self._refresh_task, self._connect_task):
            if task is None:
                continue
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._refresh_task = None
        self._connect_task = None

        if self._sio.connected:
            await self._sio.disconnect()

        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
        logger.info("Event API client stopped")

    async def _refresh_loop(self) -> None:
        while True:
            try:
                await self.refresh_token()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error(f"Event API refresh cycle failed: {e}", exc_info=True)
            await asyncio.sleep(self.settings.event_token_refresh_seconds)

    async def _connect_loop(self) -> None:
        """
        Retry the initial socket connection with exponential backoff.

        Once a connection has been established, the Socket.IO client
        reconnects on its own after a drop.
        """
        delay = self.settings.event_reconnect_seconds
        while not await self.ensure_connected():
            logger.info(f"Retrying event API socket connection in {delay:.1f}s")
            await asyncio.sleep(delay)
            delay = min(delay * 2, MAX_RECONNECT_SECONDS)

    async def refresh_token(self) -> None:
        """Fetch a client-credentials access token; keeps the previous one on failure."""
        logger.info("Fetching event API token")
        client = self._get_http_client()
        try:
            response = await client.post(
                self.settings.auth_token_url,
                json={
                    "grant_type": "client_credentials",
                    "client_id": self.settings.client_id,
                    "client_secret": self.settings.client_secret,
                    "audience": self.settings.auth_audience,
                },
            )
            response.raise_for_status()
            self._set_token(response.json()["access_token"])
            logger.info("Retrieved event API token")
        except httpx.HTTPStatusError as e:
            logger.error(f"Error fetching token: {e.response.status_code} - {e.response.text}")
        except (httpx.HTTPError, KeyError, ValueError) as e:
            logger.error(f"Error fetching token: {e}")

    async def ensure_connected(self) -> bool:
        """Connect the socket if it is not connected already; returns whether it is connected."""
        if self._sio.connected:
            return True
        logger.info("Connecting to the event API socket")
        try:
            await self._sio.connect(
                self.settings.event_api_base,
                socketio_path=self.settings.event_api_socket_path,
            )
        except SocketConnectionError as e:
            logger.error(f"Could not connect to event API socket: {e}")
        return bool(self._sio.connected)

    async def publish(self, event_name: str, resource: Resource) -> None:
        """
        Emit one event for a resource.

        Event body: {event, token, <resource>Id, <resource>}.
        """
        if not self.enabled:
            logger.debug(f"Event API disabled, dropping '{event_name}'")
            return
        if not self._sio.connected:
            logger.warning(f"Event API socket not connected, dropping '{event_name}' for {resource.id}")
            return

        name = resource.resource_name
        event = {
            "event": event_name,
            "token": self.current_token,
            f"{name}Id": resource.id,
            name: resource_to_event_payload(resource),
        }
        try:
            await self._sio.emit(event_name, event)
            logger.debug(f"Published '{event_name}' for {resource.id}")
        except Exception as e:
            logger.warning(f"Failed to publish '{event_name}' for {resource.id}: {e}")
