"""
Bus service - schedules, lines and stops.

Every operation POSTs its fields plus the credential pair to
``{BUS_DOMAIN}bus/<Endpoint>.php``.
"""

from __future__ import annotations

from typing import Any

from emtmad.models import ServiceCategory

from .base import ServiceFacade


class BusService(ServiceFacade):
    """Line, calendar and timetable queries of the EMT bus network."""

    category = ServiceCategory.TRANSIT

    async def get_calendar(self, select_date_begin: str, select_date_end: str) -> Any:
        """
        Calendar of every day and line schedule type for a range of dates.

        Args:
            select_date_begin: First date, ``DD/MM/YYYY``.
            select_date_end: Last date, ``DD/MM/YYYY``.
        """
        body = {"SelectDateBegin": select_date_begin, "SelectDateEnd": select_date_end}
        return await self.make_request("GET_CALENDAR", body)

    async def get_groups(self) -> Any:
        """Every line group and its details."""
        return await self.make_request("GET_GROUPS")

    async def get_list_lines(self, select_date: str, lines: str) -> Any:
        """Lines with their description and group.

        Args:
            select_date: Reference date, ``DD/MM/YYYY``.
            lines: Pipe-separated line numbers (``"27|N1"``).
        """
        body = {"SelectDate": select_date, "Lines": lines}
        return await self.make_request("GET_LIST_LINES", body)

    async def get_nodes_lines(self, nodes: str) -> Any:
        """Stop identifiers with coordinates, name, lines and directions."""
        return await self.make_request("GET_NODES_LINES", {"Nodes": nodes})

    async def get_route_lines(self, select_date: str, lines: str) -> Any:
        """Route of the lines with vertex info and stop/axis coordinates."""
        body = {"SelectDate": select_date, "Lines": lines}
        return await self.make_request("GET_ROUTE_LINES", body)

    async def get_route_lines_route(self, select_date: str, lines: str) -> Any:
        """Line route with vertex info to draw a map, plus stop coordinates."""
        body = {"SelectDate": select_date, "Lines": lines}
        return await self.make_request("GET_ROUTE_LINES_ROUTE", body)

    async def get_time_table_lines(self, select_date: str, lines: str) -> Any:
        """Travel details of the requested lines."""
        body = {"SelectDate": select_date, "Lines": lines}
        return await self.make_request("GET_TIME_TABLE_LINES", body)

    async def get_times_lines(self, select_date: str, lines: str) -> Any:
        """Current schedules of the requested lines."""
        body = {"SelectDate": select_date, "Lines": lines}
        return await self.make_request("GET_TIMES_LINES", body)
