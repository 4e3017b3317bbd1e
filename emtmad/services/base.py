"""
Service facade base - infrastructure shared by every family.

This module contains the base class with:
- credential ownership (read-only)
- dispatcher wiring for the family's category
- HTTP client lifecycle (per-call client, `async with` session or a
  caller-supplied client)
"""

from __future__ import annotations

from typing import Any, ClassVar, Mapping

from emtmad.config import Settings, settings as default_settings
from emtmad.models import Credentials, ServiceCategory
from emtmad.utils import EndpointFactory
from emtmad.utils.clients import HttpClient

from .dispatcher import RequestDispatcher
from .strategies import strategy_for


class ServiceFacade:
    """
    Base class of the per-family facades.

    Subclasses set `category` and expose one coroutine per remote operation,
    each delegating to `self.make_request(endpoint_id, params)`.

    Which HTTP client carries a request:

    - the *http_client* handed in by the caller, never closed here;
    - inside ``async with facade:``, one client opened on enter and closed on
      exit;
    - otherwise a client opened and closed around that single call, so
      ``await selector("bus").get_groups()`` leaves nothing open.
    """

    category: ClassVar[ServiceCategory]

    def __init__(
        self,
        credentials: Credentials,
        *,
        settings: Settings | None = None,
        http_client: HttpClient | None = None,
        dry_run: bool = False,
    ) -> None:
        self._settings = settings or default_settings
        self._http_client = http_client
        self._session: HttpClient | None = None
        self._dispatcher = RequestDispatcher(
            category=self.category,
            credentials=credentials,
            route=EndpointFactory(self._settings).build(self.category),
            send=self._send,
            strategy=strategy_for(
                self.category,
                bike_stray_brace=self._settings.BIKE_STRAY_BRACE,
                parking_segments=self._settings.PARKING_PATH_SEGMENTS,
            ),
            dry_run=dry_run,
        )
        self.make_request = self._dispatcher.dispatch
        self.assemble = self._dispatcher.assemble

    @property
    def credentials(self) -> Credentials:
        return self._dispatcher.credentials

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    async def _send(
        self,
        method: str,
        url: str,
        payload: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Any:
        client = self._http_client or self._session
        if client is not None:
            return await client.request(method, url, payload, **kwargs)
        async with HttpClient(settings=self._settings) as client:
            return await client.request(method, url, payload, **kwargs)

    async def close(self) -> None:
        """Close the session client opened by ``async with``, if any."""
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self):
        if (
            self._http_client is None
            and self._session is None
            and not self._dispatcher.dry_run
        ):
            self._session = HttpClient(settings=self._settings)
        return self

    async def __aexit__(self, *_exc) -> None:
        await self.close()

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__}(category={self.category.value!r}, "
            f"client_id={self.credentials.client_id!r})>"
        )
