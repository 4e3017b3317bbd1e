from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union

RequestParams = Union[Mapping[str, Any], str, int, float, None]


class ServiceCategory(str, Enum):
    """Remote service family. The value is the alias accepted by the factory."""

    TRANSIT = "bus"
    GEO = "geo"
    MULTIMEDIA = "media"
    BIKE = "bike"
    PARKING = "parking"

    @property
    def method(self) -> str:
        """HTTP verb fixed for the family."""
        return "GET" if self is ServiceCategory.BIKE else "POST"

    @classmethod
    def from_alias(cls, alias: object) -> ServiceCategory | None:
        try:
            return cls(alias)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Credentials:
    client_id: str
    pass_key: str = field(repr=False)

    def redact(self, text: str) -> str:
        """Mask the pass key where it travels in a URL path.

        Only the credential segment is touched: ``/{client}/{key}`` (bike) and
        ``/{client},{key}`` (parking). Hosts and other segments stay intact even
        when they happen to contain the key.
        """
        if not self.pass_key:
            return text
        pattern = (
            rf"(/{re.escape(self.client_id)}[/,])"
            rf"{re.escape(self.pass_key)}(?=[}}/,?#]|$)"
        )
        return re.sub(pattern, r"\g<1>***", text)


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """Where a family lives: domain root, category segment and endpoint table."""

    domain: str
    segment: str
    endpoints: Mapping[str, str]


@dataclass(frozen=True, slots=True)
class AssembledRequest:
    method: str
    target: str
    payload: dict[str, Any] | None = None
