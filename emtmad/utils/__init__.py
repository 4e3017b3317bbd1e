from .endpoints import EndpointFactory, load_endpoint_table, resolve_path
from .logger import FORMAT, LOG_DIR, logger, silence_libs

__all__ = [
    "EndpointFactory",
    "load_endpoint_table",
    "resolve_path",
    "logger",
    "FORMAT",
    "LOG_DIR",
    "silence_libs",
]
