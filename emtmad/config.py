import ssl
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    """Runtime configuration for the EMT Madrid client.

    Values come from environment variables and an optional `.env` file in the
    current working directory. Every service instance receives its domain,
    segment and endpoint table from here at construction time, so a custom
    `Settings` object can be passed to `create_service_client` to point the
    client somewhere else (a test server, a proxy).

    Attributes:
        BUS_DOMAIN (str): Root shared by the bus, geo and media services.
            Must keep its trailing slash; the category segment is glued on
            directly.
        BIKE_DOMAIN (str): Root of the BiciMAD service (no trailing slash).
        PARKING_DOMAIN (str): Root of the parking service (no trailing slash).
        BUS_SEGMENT / GEO_SEGMENT / MEDIA_SEGMENT / BIKE_SEGMENT (str): Path
            segment that selects the family under its domain.
        ENDPOINTS_FILE (Path): YAML table mapping endpoint ids to paths.
        HTTP_TIMEOUT (float): Per-request timeout in seconds.
        VERIFY_SSL (bool): TLS certificate verification. Off by default since
            the EMT servers present self-signed certificates.
        CA_BUNDLE (Path | None): CA bundle used for verification when it
            exists; takes precedence over VERIFY_SSL.
        BIKE_STRAY_BRACE (bool): Keep the literal `}` the bike URL template
            has always carried after the pass key.
        PARKING_PATH_SEGMENTS ("keys" | "values"): What the parking address
            appends per parameter, the parameter names (historic behavior)
            or their values.
        EMT_CLIENT_ID / EMT_PASS_KEY (str): Default credentials for the CLI.
    """

    PACKAGE_DIR: Path = PACKAGE_DIR
    ENDPOINTS_FILE: Path = PACKAGE_DIR / "resources" / "endpoints.yaml"

    BUS_DOMAIN: str = "https://openbus.emtmadrid.es:9443/emt-proxy-server/last/"
    BIKE_DOMAIN: str = "https://rbdata.emtmadrid.es:8443"
    PARKING_DOMAIN: str = (
        "https://servicios.emtmadrid.es:8443/InfoParking/InfoParking.svc/json"
    )

    BUS_SEGMENT: str = "bus"
    GEO_SEGMENT: str = "geo"
    MEDIA_SEGMENT: str = "media"
    BIKE_SEGMENT: str = "BiciMad"

    # HTTP
    HTTP_TIMEOUT: float = Field(default=10.0, gt=0)
    VERIFY_SSL: bool = False
    CA_BUNDLE: Path | None = None

    # Historic URL shapes
    BIKE_STRAY_BRACE: bool = True
    PARKING_PATH_SEGMENTS: Literal["keys", "values"] = "keys"

    # CLI credentials
    EMT_CLIENT_ID: str = ""
    EMT_PASS_KEY: str = ""

    LOG_LEVEL: str = "INFO"
    LOG_DIR: Path | None = None

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("PARKING_PATH_SEGMENTS", mode="before")
    @classmethod
    def coerce_path_segments(cls, v):
        return str(v).strip().lower()

    @field_validator("BUS_DOMAIN")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        return v if v.endswith("/") else f"{v}/"

    @field_validator("BIKE_DOMAIN", "PARKING_DOMAIN")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def ssl_verify(self) -> bool | ssl.SSLContext:
        """Value handed to httpx as `verify`."""
        if self.CA_BUNDLE and self.CA_BUNDLE.exists():
            return ssl.create_default_context(cafile=str(self.CA_BUNDLE))
        return self.VERIFY_SSL


settings = Settings()
