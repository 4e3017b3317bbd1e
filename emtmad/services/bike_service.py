from __future__ import annotations

from typing import Any

from emtmad.models import ServiceCategory

from .base import ServiceFacade


class BikeService(ServiceFacade):
    """
    BiciMAD stations and their availability.

    Requests are GETs without a body: the credential pair and the optional
    station id are path segments.
    """

    category = ServiceCategory.BIKE

    async def get_stations(self) -> Any:
        """Every BiciMAD station and its operational state."""
        return await self.make_request("GET_STATIONS")

    async def get_single_station(self, base_id: int | str) -> Any:
        """State of one station. A non-numeric *base_id* is sent as empty."""
        return await self.make_request("GET_SINGLE_STATION", base_id)
