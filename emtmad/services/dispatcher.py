from __future__ import annotations

from typing import Any, Awaitable, Callable

from emtmad.models import (
    AssembledRequest,
    Credentials,
    RequestParams,
    RouteConfig,
    ServiceCategory,
)
from emtmad.utils import logger, resolve_path

from .strategies import RequestStrategy, strategy_for

# Same shape as `HttpClient.request`: (method, url, payload, *, tag, redact)
Sender = Callable[..., Awaitable[Any]]


class RequestDispatcher:
    """
    Shared orchestration for every service family.

    Resolves the endpoint id against its `RouteConfig`, lets the family's
    `RequestStrategy` build target and payload, and hands the result to
    *send* (usually `HttpClient.request`) with the family's fixed verb.
    A dry-run dispatcher returns the `AssembledRequest` instead of sending it.
    """

    __slots__ = ("_category", "_credentials", "_route", "_send", "_strategy", "_dry_run")

    def __init__(
        self,
        category: ServiceCategory,
        credentials: Credentials,
        route: RouteConfig,
        send: Sender,
        strategy: RequestStrategy | None = None,
        *,
        dry_run: bool = False,
    ) -> None:
        self._category = category
        self._credentials = credentials
        self._route = route
        self._send = send
        self._strategy = strategy or strategy_for(category)
        self._dry_run = dry_run

    @property
    def category(self) -> ServiceCategory:
        return self._category

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def route(self) -> RouteConfig:
        return self._route

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def assemble(
        self, endpoint_id: str, params: RequestParams = None
    ) -> AssembledRequest:
        """Build the request for *endpoint_id* without sending it."""
        path = resolve_path(self._route, endpoint_id)
        target = self._strategy.build_address(
            self._route, self._credentials, path, params
        )
        payload = self._strategy.build_payload(self._credentials, params)
        return AssembledRequest(
            method=self._category.method, target=target, payload=payload
        )

    async def dispatch(self, endpoint_id: str, params: RequestParams = None) -> Any:
        """
        Send one request and return the decoded JSON response.

        In dry-run mode nothing is sent and the `AssembledRequest` is returned.

        Raises:
            UsageError: *endpoint_id* is unknown or *params* has the wrong shape.
            TransportError: the call failed or returned a non-2xx status.
            DecodeError: the response body is not JSON.
        """
        request = self.assemble(endpoint_id, params)
        log = logger.bind(category=self._category.value)
        if self._dry_run:
            log.debug("Simulação: {} {} não enviado", request.method, endpoint_id)
            return request

        log.debug("Enviando {} {}", request.method, endpoint_id)
        return await self._send(
            request.method,
            request.target,
            request.payload,
            tag=f"{self._category.value}:{endpoint_id}",
            redact=self._credentials.redact,
        )

    def __repr__(self) -> str:
        return (
            f"<RequestDispatcher(category={self._category.value!r}, "
            f"client_id={self._credentials.client_id!r})>"
        )
