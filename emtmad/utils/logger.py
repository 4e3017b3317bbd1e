from __future__ import annotations

import importlib
import logging
import os
import sys
from pathlib import Path

from loguru import logger as _loguru_logger
from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as rich_tb_install

from emtmad.config import settings

"""
emtmad.utils.logger
~~~~~~~~~~~~~~~~~~~
Pre-configured Loguru logger shared by the whole package.

1. **Console**
    - Rich handler by default, plain colorized stderr when `DISABLE_RICH` is set.
2. **File (optional)**
    - Rotating file sink, enabled only when `LOG_DIR` is configured.
3. **Request context**
    - Records carry `extra[category]`; bind it per request:
    ```python
    logger.bind(category="bus").debug("...")
    ```
4. **Silencing noisy libraries**
    ```python
    silence_libs("httpx", "httpcore", level="WARNING")
    ```

Environment Variables
---------------------
- `LOG_LEVEL`: DEBUG, INFO, WARNING, ERROR. Default: INFO.
- `LOG_DIR`: Directory for log files. Default: unset (no file sink).
- `LOG_ROTATION`: Default: 10 MB.
- `LOG_RETENTION`: Default: 14 days.
- `LOG_COMPRESSION`: zip, gz, bz2. Default: zip.
- `DISABLE_RICH`: Disable Rich console output if set.
- `RICH_THEME`: Rich traceback theme. Default: monokai.
"""


# ╭──────────────────────── Configuração básica ───────────────────────╮ #

_loguru_logger.remove()
_LEVEL = settings.LOG_LEVEL.upper()
FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level:8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<cyan>[{extra[category]:^9}]</cyan> - "
    "<level>{message}</level>"
)

# ——— console (Rich) ——— #
_IS_TTY = "DISABLE_RICH" not in os.environ
if _IS_TTY:
    rich_tb_install(
        show_locals=False,
        theme=os.getenv("RICH_THEME", "monokai"),
    )
    _loguru_logger.add(
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            markup=False,
            show_path=False,
            highlighter=None,
        ),
        level=_LEVEL,
        format="[{extra[category]}] {message}",
    )
else:
    _loguru_logger.add(sys.stderr, level=_LEVEL, format=FORMAT, colorize=True)

# ——— arquivo rotativo ——— #
LOG_DIR: Path | None = (
    Path(settings.LOG_DIR).expanduser() if settings.LOG_DIR else None
)
if LOG_DIR is not None:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    _loguru_logger.add(
        LOG_DIR / "emtmad_{time:YYYY-MM-DD}.log",
        level="DEBUG",
        rotation=os.getenv("LOG_ROTATION", "10 MB"),
        retention=os.getenv("LOG_RETENTION", "14 days"),
        compression=os.getenv("LOG_COMPRESSION", "zip"),
        enqueue=True,
        backtrace=False,
        format=FORMAT,
    )

logger = _loguru_logger  # reexport
logger.configure(extra={"category": "-"})

# ╰────────────────────────────────────────────────────────────────────╯ #


def silence_libs(*modules: str, level: str = "WARNING") -> None:
    """Raise the stdlib log level of third-party modules that are chatty."""
    lvl = getattr(logging, level.upper(), logging.WARNING)
    for name in modules:
        try:
            mod = importlib.import_module(name)
            logging.getLogger(mod.__name__).setLevel(lvl)
        except ModuleNotFoundError:
            continue


__all__ = [
    "logger",
    "FORMAT",
    "LOG_DIR",
    "silence_libs",
]
