"""
Per-family request construction.

Each service family locates an operation differently, so every family gets
its own pair of builders:

- address: endpoint path + params -> fully qualified target
- payload: params -> form fields sent with the request (or nothing)

`strategy_for` picks the pair for a `ServiceCategory`. The builders are plain
functions without state; the dispatcher composes them.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Literal, Mapping, Optional

from emtmad.exceptions import UsageError
from emtmad.models import Credentials, RequestParams, RouteConfig, ServiceCategory

AddressBuilder = Callable[[RouteConfig, Credentials, str, RequestParams], str]
PayloadBuilder = Callable[[Credentials, RequestParams], Optional[dict[str, Any]]]


@dataclass(frozen=True, slots=True)
class RequestStrategy:
    build_address: AddressBuilder
    build_payload: PayloadBuilder


# ──────────────────────── helpers ──────────────────────────────────────


# Accepted number literals. Anything else is "not a number" and becomes an
# empty path segment.
_NUMERIC_RE = re.compile(
    r"""
    [+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
    | 0[xX][0-9a-fA-F]+
    | 0[oO][0-7]+
    | 0[bB][01]+
    """,
    re.VERBOSE,
)


def _as_path_value(value: Any) -> str:
    if isinstance(value, float):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def numeric_or_empty(value: RequestParams) -> str:
    """Keep *value* only when it reads as a number, else return ``""``.

    Strings are matched against number literals (decimal, exponent,
    ``Infinity`` and ``0x``/``0o``/``0b`` prefixes) after trimming and kept
    verbatim, so ``"07"`` stays ``"07"``. Python-only spellings such as
    ``"1_000"`` or ``"inf"`` are rejected. Mappings, ``None``, booleans and
    ``NaN`` collapse to the empty string.
    """
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, (int, float)):
        return "" if isinstance(value, float) and math.isnan(value) else _as_path_value(value)
    if isinstance(value, str):
        stripped = value.strip()
        if stripped and not _NUMERIC_RE.fullmatch(stripped):
            return ""
        return value
    return ""


# ──────────────────────── address builders ─────────────────────────────


def transit_address(
    route: RouteConfig, credentials: Credentials, path: str, params: RequestParams
) -> str:
    """``{domain}{segment}/{path}.php``; params never reach the address."""
    return f"{route.domain}{route.segment}/{path}.php"


def bike_address(
    route: RouteConfig,
    credentials: Credentials,
    path: str,
    params: RequestParams,
    *,
    stray_brace: bool = True,
) -> str:
    """Credentials travel as path segments, followed by one positional value."""
    brace = "}" if stray_brace else ""
    return (
        f"{route.domain}/{route.segment}/{path}/"
        f"{credentials.client_id}/{credentials.pass_key}{brace}/"
        f"{numeric_or_empty(params)}"
    )


def parking_address(
    route: RouteConfig,
    credentials: Credentials,
    path: str,
    params: RequestParams,
    *,
    segments: Literal["keys", "values"] = "keys",
) -> str:
    """``{domain}/{path}/{client},{pass}`` plus one ``,x`` per parameter.

    With ``segments="keys"`` the parameter *names* are appended, which is what
    the service client has always sent; ``"values"`` appends the values.
    """
    url = f"{route.domain}/{path}/{credentials.client_id},{credentials.pass_key}"
    if not isinstance(params, Mapping):
        return url
    if segments == "values":
        extra = (_as_path_value(v) for v in params.values())
    else:
        extra = (str(k) for k in params)
    return url + "".join(f",{item}" for item in extra)


# ──────────────────────── payload builders ─────────────────────────────


def credential_payload(
    credentials: Credentials, params: RequestParams
) -> dict[str, Any]:
    """Copy of *params* with ``idClient``/``passKey`` set; credentials win."""
    if params is None:
        params = {}
    if not isinstance(params, Mapping):
        raise UsageError(
            f"Parâmetros devem ser um mapeamento, recebido {type(params).__name__}"
        )
    return {
        **params,
        "idClient": credentials.client_id,
        "passKey": credentials.pass_key,
    }


def no_payload(credentials: Credentials, params: RequestParams) -> None:
    return None


# ──────────────────────── registry ─────────────────────────────────────

_TRANSIT = RequestStrategy(transit_address, credential_payload)


def strategy_for(
    category: ServiceCategory,
    *,
    bike_stray_brace: bool = True,
    parking_segments: Literal["keys", "values"] = "keys",
) -> RequestStrategy:
    if category is ServiceCategory.BIKE:
        return RequestStrategy(
            partial(bike_address, stray_brace=bike_stray_brace), no_payload
        )
    if category is ServiceCategory.PARKING:
        return RequestStrategy(
            partial(parking_address, segments=parking_segments), credential_payload
        )
    if category in (
        ServiceCategory.TRANSIT,
        ServiceCategory.GEO,
        ServiceCategory.MULTIMEDIA,
    ):
        return _TRANSIT
    raise UsageError(f"Categoria desconhecida: {category!r}")


__all__ = [
    "AddressBuilder",
    "PayloadBuilder",
    "RequestStrategy",
    "numeric_or_empty",
    "transit_address",
    "bike_address",
    "parking_address",
    "credential_payload",
    "no_payload",
    "strategy_for",
]
