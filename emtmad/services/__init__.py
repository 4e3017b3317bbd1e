"""
Service facades - one per EMT service family.

All of them share `ServiceFacade` (credentials, dispatcher, HTTP client
lifecycle) and differ only in their catalog of operations and in the request
strategy their category selects.
"""

from .base import ServiceFacade
from .bike_service import BikeService
from .bus_service import BusService
from .dispatcher import RequestDispatcher
from .geo_service import GeoService
from .media_service import MediaService
from .parking_service import ParkingService
from .strategies import RequestStrategy, strategy_for

__all__ = [
    "ServiceFacade",
    "BusService",
    "GeoService",
    "MediaService",
    "BikeService",
    "ParkingService",
    "RequestDispatcher",
    "RequestStrategy",
    "strategy_for",
]
