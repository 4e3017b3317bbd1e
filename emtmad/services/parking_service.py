"""
Parking service - car parks and points of interest.

Requests are POSTs to ``{PARKING_DOMAIN}/<Endpoint>/<client>,<pass>[,...]``
with the credentials also carried in the form body. Each parameter adds one
comma-separated path segment (its name by default, see
``Settings.PARKING_PATH_SEGMENTS``).
"""

from __future__ import annotations

from typing import Any

from emtmad.models import ServiceCategory

from .base import ServiceFacade


class ParkingService(ServiceFacade):
    category = ServiceCategory.PARKING

    async def detail_parking(self) -> Any:
        """
        Detailed info of the car parks: accesses, opening hours, fares,
        services and occupancy figures.
        """
        return await self.make_request("DETAIL_PARKING")

    async def detail_poi(self) -> Any:
        """
        Detailed info of the points of interest: family code, standard and
        translated names, description, web, hours, paid services and images.
        """
        return await self.make_request("DETAIL_POI")

    async def icon_description(self) -> Any:
        """Every element (car park feature, POI category, ...) that has an icon."""
        return await self.make_request("ICON_DESCRIPTION")

    async def info_parking_poi(self) -> Any:
        """Language-independent info of POIs and car parks (address, coordinates, codes)."""
        return await self.make_request("INFO_PARKING_POI")

    async def list_features(self) -> Any:
        """Active car park features with name, code, group and icon path."""
        return await self.make_request("LIST_FEATURES")

    async def list_parking(self, language: str) -> Any:
        """Active car parks with id, family, name, category, type, address and coordinates."""
        return await self.make_request("LIST_PARKING", {"language": language})

    async def list_street_pois_parking(self, address: str, language: str) -> Any:
        """Addresses and POIs (car parks included) matching *address* fully or partially."""
        body = {"address": address, "language": language}
        return await self.make_request("LIST_STREET_POIS_PARKING", body)

    async def list_types_pois(self, language: str) -> Any:
        """Active POI families, types and categories."""
        return await self.make_request("LIST_TYPES_POIS", {"language": language})
