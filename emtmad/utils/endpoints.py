from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Final, Mapping

import yaml

from emtmad.config import Settings, settings as default_settings
from emtmad.exceptions import UsageError
from emtmad.models import RouteConfig, ServiceCategory

_SECTIONS: Final[dict[ServiceCategory, str]] = {
    ServiceCategory.TRANSIT: "bus",
    ServiceCategory.GEO: "geo",
    ServiceCategory.MULTIMEDIA: "media",
    ServiceCategory.BIKE: "bike",
    ServiceCategory.PARKING: "parking",
}


@lru_cache(maxsize=8)
def load_endpoint_table(path: Path) -> Mapping[str, Mapping[str, str]]:
    """Read the YAML endpoint table once per path; result is read-only."""
    with Path(path).open("r", encoding="utf-8") as fp:
        raw = yaml.safe_load(fp) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Tabela de endpoints inválida em {path}")
    return MappingProxyType(
        {
            str(section): MappingProxyType(
                {str(k): str(v) for k, v in (entries or {}).items()}
            )
            for section, entries in raw.items()
        }
    )


class EndpointFactory:
    """Builds the read-only `RouteConfig` each dispatcher is constructed with."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or default_settings
        self._table = load_endpoint_table(self._settings.ENDPOINTS_FILE)

    def endpoints(self, category: ServiceCategory) -> Mapping[str, str]:
        return self._table.get(_SECTIONS[category], MappingProxyType({}))

    def domain(self, category: ServiceCategory) -> str:
        s = self._settings
        if category is ServiceCategory.BIKE:
            return s.BIKE_DOMAIN
        if category is ServiceCategory.PARKING:
            return s.PARKING_DOMAIN
        return s.BUS_DOMAIN

    def segment(self, category: ServiceCategory) -> str:
        s = self._settings
        return {
            ServiceCategory.TRANSIT: s.BUS_SEGMENT,
            ServiceCategory.GEO: s.GEO_SEGMENT,
            ServiceCategory.MULTIMEDIA: s.MEDIA_SEGMENT,
            ServiceCategory.BIKE: s.BIKE_SEGMENT,
            # parking addresses carry no category segment
            ServiceCategory.PARKING: "",
        }[category]

    def build(self, category: ServiceCategory) -> RouteConfig:
        return RouteConfig(
            domain=self.domain(category),
            segment=self.segment(category),
            endpoints=self.endpoints(category),
        )


def resolve_path(route: RouteConfig, endpoint_id: str) -> str:
    try:
        return route.endpoints[endpoint_id]
    except KeyError:
        raise UsageError(
            f"Endpoint '{endpoint_id}' não configurado para '{route.domain}{route.segment}'"
        ) from None
