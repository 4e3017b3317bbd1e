from __future__ import annotations

from typing import Any, Mapping

from emtmad.models import ServiceCategory

from .base import ServiceFacade

Params = Mapping[str, Any] | None


class MediaService(ServiceFacade):
    """Multimedia routing: arrival estimates and door-to-door routes."""

    category = ServiceCategory.MULTIMEDIA

    async def get_estimates_incident(self, params: Params = None) -> Any:
        """Estimated arrival at a stop and its related incidents."""
        return await self.make_request("GET_ESTIMATES_INCIDENT", params)

    async def get_street_route(self, params: Params = None) -> Any:
        """
        Up to three routes between two places by bus or walking.

        Origin and destination must already be known to the system, i.e.
        validated through `GeoService.get_street`.
        """
        return await self.make_request("GET_STREET_ROUTE", params)

    async def get_route_with_alarm(self, params: Params = None) -> Any:
        return await self.make_request("GET_ROUTE_WITH_ALARM", params)

    async def get_route_with_alarm_response(self, params: Params = None) -> Any:
        return await self.make_request("GET_ROUTE_WITH_ALARM_RESPONSE", params)

    async def get_route(self, params: Params = None) -> Any:
        return await self.make_request("GET_ROUTE", params)

    async def get_route_response(self, params: Params = None) -> Any:
        return await self.make_request("GET_ROUTE_RESPONSE", params)
