from __future__ import annotations

from typing import Final

from emtmad.config import Settings, settings as default_settings
from emtmad.exceptions import UsageError
from emtmad.models import Credentials, ServiceCategory
from emtmad.services import (
    BikeService,
    BusService,
    GeoService,
    MediaService,
    ParkingService,
    ServiceFacade,
)
from emtmad.utils import logger
from emtmad.utils.clients import HttpClient

FACADES: Final[dict[ServiceCategory, type[ServiceFacade]]] = {
    ServiceCategory.TRANSIT: BusService,
    ServiceCategory.GEO: GeoService,
    ServiceCategory.MULTIMEDIA: MediaService,
    ServiceCategory.BIKE: BikeService,
    ServiceCategory.PARKING: ParkingService,
}


class ServiceSelector:
    """
    Category selector bound to one credential pair.

    ``selector("bus")`` returns a new `BusService`; unknown names return
    ``None``. Use `require` to get a `UsageError` instead.
    """

    __slots__ = ("_client_id", "_pass_key", "_settings", "_http_client", "_dry_run")

    def __init__(
        self,
        client_id: str,
        pass_key: str,
        *,
        settings: Settings | None = None,
        http_client: HttpClient | None = None,
        dry_run: bool = False,
    ) -> None:
        self._client_id = client_id
        self._pass_key = pass_key
        self._settings = settings or default_settings
        self._http_client = http_client
        self._dry_run = dry_run

    def __call__(self, service: str) -> ServiceFacade | None:
        category = ServiceCategory.from_alias(service)
        if category is None:
            logger.debug("Categoria de serviço desconhecida: {!r}", service)
            return None
        facade_cls = FACADES[category]
        return facade_cls(
            Credentials(self._client_id, self._pass_key),
            settings=self._settings,
            http_client=self._http_client,
            dry_run=self._dry_run,
        )

    def require(self, service: str) -> ServiceFacade:
        facade = self(service)
        if facade is None:
            known = ", ".join(c.value for c in ServiceCategory)
            raise UsageError(f"Serviço '{service}' desconhecido. Use um de: {known}")
        return facade

    def __repr__(self) -> str:
        return f"<ServiceSelector(client_id={self._client_id!r})>"


def create_service_client(
    client_id: str,
    pass_key: str,
    *,
    settings: Settings | None = None,
    http_client: HttpClient | None = None,
    dry_run: bool = False,
) -> ServiceSelector:
    """
    Bind a credential pair and return the category selector.

    Args:
        client_id: Client identifier issued by EMT.
        pass_key: Pass key paired with *client_id*.
        settings: Domains, endpoint table and HTTP options; defaults to the
            module-level settings.
        http_client: Shared transport. When given, facades do not close it.
        dry_run: Facades return the assembled request instead of sending it.

    Example:
        >>> bus = create_service_client("user1", "pass1")("bus")
        >>> groups = await bus.get_groups()
    """
    return ServiceSelector(
        client_id,
        pass_key,
        settings=settings,
        http_client=http_client,
        dry_run=dry_run,
    )
