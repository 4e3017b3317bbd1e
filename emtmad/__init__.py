from importlib.metadata import PackageNotFoundError, version as _version

from .config import settings
from .exceptions import DecodeError, EmtError, RequestError, TransportError, UsageError
from .factory import ServiceSelector, create_service_client
from .models import AssembledRequest, Credentials, ServiceCategory

"""
emtmad – EMT Madrid web-service client
======================================

Async client for the bus, geo, media, BiciMAD and parking services of the
Madrid municipal transport operator, all behind one request dispatcher.

    >>> emt = create_service_client("user1", "pass1")
    >>> async with emt("bus") as bus:
    ...     groups = await bus.get_groups()

Public objects
--------------
__version__ : str
    Installed distribution version.
"""

__all__ = [
    "__version__",
    "settings",
    "create_service_client",
    "ServiceSelector",
    "ServiceCategory",
    "Credentials",
    "AssembledRequest",
    "EmtError",
    "RequestError",
    "TransportError",
    "DecodeError",
    "UsageError",
]

try:
    __version__: str = _version("emtmad")
except PackageNotFoundError:
    __version__ = "1.0.0"
