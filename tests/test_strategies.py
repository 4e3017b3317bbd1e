"""
Tests for the per-family request builders (emtmad/services/strategies.py)

Tests cover:
- Address shapes for transit, bike and parking
- Credential injection in payloads
- Strategy selection per category
"""

import pytest

from emtmad.exceptions import UsageError
from emtmad.models import Credentials, RouteConfig, ServiceCategory
from emtmad.services.strategies import (
    bike_address,
    credential_payload,
    no_payload,
    numeric_or_empty,
    parking_address,
    strategy_for,
    transit_address,
)

CREDS = Credentials("u", "p")
BUS_ROUTE = RouteConfig("https://bus.test/last/", "bus", {"GET_GROUPS": "GetGroups"})
BIKE_ROUTE = RouteConfig("https://bike.test", "BiciMad", {"GET_STATIONS": "GetStations"})
PARKING_ROUTE = RouteConfig("https://parking.test/json", "", {"LIST_PARKING": "ListParking"})


# ═══════════════════════════════════════════════════════════════════
# Address builders
# ═══════════════════════════════════════════════════════════════════


@pytest.mark.unit
class TestTransitAddress:
    def test_shape(self):
        url = transit_address(BUS_ROUTE, CREDS, "GetGroups", None)
        assert url == "https://bus.test/last/bus/GetGroups.php"

    @pytest.mark.parametrize(
        "params",
        [None, {}, {"Lines": "27"}, {"idClient": "x", "SelectDate": "01/01/2024"}, "42"],
    )
    def test_params_never_change_target(self, params):
        assert transit_address(BUS_ROUTE, CREDS, "GetGroups", params) == (
            "https://bus.test/last/bus/GetGroups.php"
        )

    def test_credentials_stay_out_of_target(self):
        url = transit_address(BUS_ROUTE, Credentials("user1", "secret"), "GetGroups", {})
        assert "user1" not in url
        assert "secret" not in url


@pytest.mark.unit
class TestBikeAddress:
    def test_no_param_keeps_stray_brace_and_trailing_slash(self):
        url = bike_address(BIKE_ROUTE, CREDS, "GetStations", None)
        assert url == "https://bike.test/BiciMad/GetStations/u/p}/"

    def test_numeric_param_appended(self):
        url = bike_address(BIKE_ROUTE, CREDS, "GetSingleStation", 12)
        assert url == "https://bike.test/BiciMad/GetSingleStation/u/p}/12"

    def test_numeric_string_param_appended_verbatim(self):
        url = bike_address(BIKE_ROUTE, CREDS, "GetSingleStation", "07")
        assert url.endswith("/07")

    @pytest.mark.parametrize("param", ["abc", {}, {"id": 3}, None, "", True])
    def test_non_numeric_param_becomes_empty(self, param):
        url = bike_address(BIKE_ROUTE, CREDS, "GetSingleStation", param)
        assert url == "https://bike.test/BiciMad/GetSingleStation/u/p}/"

    def test_without_stray_brace(self):
        url = bike_address(BIKE_ROUTE, CREDS, "GetStations", None, stray_brace=False)
        assert url == "https://bike.test/BiciMad/GetStations/u/p/"

    def test_embeds_exact_credentials(self):
        creds = Credentials("client-Ä1", "k3y.with.dots")
        url = bike_address(BIKE_ROUTE, creds, "GetStations", None)
        assert "/client-Ä1/k3y.with.dots}/" in url


@pytest.mark.unit
class TestParkingAddress:
    def test_without_params(self):
        url = parking_address(PARKING_ROUTE, CREDS, "DetailParking", None)
        assert url == "https://parking.test/json/DetailParking/u,p"

    def test_appends_param_keys_by_default(self):
        url = parking_address(
            PARKING_ROUTE, CREDS, "ListStreetPoisParking", {"address": "Gran Via", "language": "ES"}
        )
        assert url == "https://parking.test/json/ListStreetPoisParking/u,p,address,language"

    def test_values_variant(self):
        url = parking_address(
            PARKING_ROUTE,
            CREDS,
            "ListStreetPoisParking",
            {"address": "Gran Via", "language": "ES"},
            segments="values",
        )
        assert url == "https://parking.test/json/ListStreetPoisParking/u,p,Gran Via,ES"

    @pytest.mark.parametrize("params", [None, {}, {"language": "EN"}, {"a": 1, "b": 2}])
    def test_prefix_is_independent_of_params(self, params):
        url = parking_address(PARKING_ROUTE, CREDS, "ListParking", params)
        assert url.startswith("https://parking.test/json/ListParking/u,p")


@pytest.mark.unit
class TestNumericOrEmpty:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (5, "5"),
            (5.0, "5"),
            (2.5, "2.5"),
            ("12", "12"),
            (" 3 ", " 3 "),
            ("1e3", "1e3"),
            ("x1", ""),
            (float("nan"), ""),
            ("nan", ""),
            ("-2.5e-3", "-2.5e-3"),
            (".5", ".5"),
            ("Infinity", "Infinity"),
            ("-Infinity", "-Infinity"),
            ("0x1A", "0x1A"),
            ("0o17", "0o17"),
            ("0b101", "0b101"),
            ("1_000", ""),
            ("inf", ""),
            ("infinity", ""),
            ("-0x1A", ""),
            ("1e", ""),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
            (None, ""),
            (False, ""),
            ({}, ""),
            ([1], ""),
        ],
    )
    def test_values(self, value, expected):
        assert numeric_or_empty(value) == expected


# ═══════════════════════════════════════════════════════════════════
# Payload builders
# ═══════════════════════════════════════════════════════════════════


@pytest.mark.unit
class TestCredentialPayload:
    def test_injects_credentials(self):
        assert credential_payload(CREDS, {"Lines": "27"}) == {
            "Lines": "27",
            "idClient": "u",
            "passKey": "p",
        }

    @pytest.mark.parametrize("params", [None, {}])
    def test_empty_params_still_carry_credentials(self, params):
        assert credential_payload(CREDS, params) == {"idClient": "u", "passKey": "p"}

    def test_credentials_win_on_collision(self):
        payload = credential_payload(
            CREDS, {"idClient": "intruder", "passKey": "guess", "Nodes": "1"}
        )
        assert payload == {"idClient": "u", "passKey": "p", "Nodes": "1"}

    def test_caller_mapping_is_not_mutated(self):
        params = {"Nodes": "1"}
        credential_payload(CREDS, params)
        assert params == {"Nodes": "1"}

    def test_non_mapping_is_usage_error(self):
        with pytest.raises(UsageError):
            credential_payload(CREDS, "27")

    def test_no_payload(self):
        assert no_payload(CREDS, {"anything": 1}) is None


# ═══════════════════════════════════════════════════════════════════
# Strategy selection
# ═══════════════════════════════════════════════════════════════════


@pytest.mark.unit
class TestStrategyFor:
    @pytest.mark.parametrize(
        "category",
        [ServiceCategory.TRANSIT, ServiceCategory.GEO, ServiceCategory.MULTIMEDIA],
    )
    def test_transit_family_shares_strategy(self, category):
        strategy = strategy_for(category)
        assert strategy.build_address is transit_address
        assert strategy.build_payload is credential_payload

    def test_bike_has_no_payload(self):
        strategy = strategy_for(ServiceCategory.BIKE)
        assert strategy.build_payload(CREDS, {"x": 1}) is None

    def test_bike_flag_is_forwarded(self):
        strategy = strategy_for(ServiceCategory.BIKE, bike_stray_brace=False)
        url = strategy.build_address(BIKE_ROUTE, CREDS, "GetStations", None)
        assert "}" not in url

    def test_parking_flag_is_forwarded(self):
        strategy = strategy_for(ServiceCategory.PARKING, parking_segments="values")
        url = strategy.build_address(PARKING_ROUTE, CREDS, "ListParking", {"language": "EN"})
        assert url.endswith("/u,p,EN")
        assert strategy.build_payload(CREDS, {"language": "EN"})["idClient"] == "u"

    def test_unknown_category(self):
        with pytest.raises(UsageError):
            strategy_for("tram")  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("category", "method"),
        [
            (ServiceCategory.TRANSIT, "POST"),
            (ServiceCategory.GEO, "POST"),
            (ServiceCategory.MULTIMEDIA, "POST"),
            (ServiceCategory.PARKING, "POST"),
            (ServiceCategory.BIKE, "GET"),
        ],
    )
    def test_fixed_verb(self, category, method):
        assert category.method == method
