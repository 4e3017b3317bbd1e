from __future__ import annotations

from typing import Any, Mapping

from emtmad.models import ServiceCategory

from .base import ServiceFacade

Params = Mapping[str, Any] | None


class GeoService(ServiceFacade):
    """
    Geolocation queries: stops, streets, arrivals and points of interest.

    Operations take the remote field names as a single mapping and forward it
    unchanged (credentials are added by the dispatcher).
    """

    category = ServiceCategory.GEO

    async def get_arrive_stop(self, params: Params = None) -> Any:
        """Bus arrivals at a target stop."""
        return await self.make_request("GET_ARRIVE_STOP", params)

    async def get_groups(self, params: Params = None) -> Any:
        return await self.make_request("GET_GROUPS", params)

    async def get_info_line(self, params: Params = None) -> Any:
        """Line info on a target date."""
        return await self.make_request("GET_INFO_LINE", params)

    async def get_info_line_extend(self, params: Params = None) -> Any:
        return await self.make_request("GET_INFO_LINE_EXTEND", params)

    async def get_points_of_interest(self, params: Params = None) -> Any:
        """Points of interest around a coordinate within a radius."""
        return await self.make_request("GET_POINTS_OF_INTEREST", params)

    async def get_points_of_interest_types(self, params: Params = None) -> Any:
        return await self.make_request("GET_POINTS_OF_INTEREST_TYPES", params)

    async def get_stops_from_stop(self, params: Params = None) -> Any:
        """Stops within a radius of a target stop and the lines serving them."""
        return await self.make_request("GET_STOPS_FROM_STOP", params)

    async def get_stops_from_xy(self, params: Params = None) -> Any:
        """Stops within a radius of a coordinate and the lines serving them."""
        return await self.make_request("GET_STOPS_FROM_XY", params)

    async def get_stops_line(self, params: Params = None) -> Any:
        return await self.make_request("GET_STOPS_LINE", params)

    async def get_street(self, params: Params = None) -> Any:
        """EMT nodes related to a location, with their stops and lines."""
        return await self.make_request("GET_STREET", params)

    async def get_street_from_xy(self, params: Params = None) -> Any:
        return await self.make_request("GET_STREET_FROM_XY", params)
