"""Logging setup shared by the CLI and the HTTP server."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# per-request chatter from the HTTP stack; only shown when running at DEBUG
HTTP_CLIENT_LOGGERS = ("httpx", "httpcore", "hishel")


def resolve_level(level: int | str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names mean INFO."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: int | str = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger for hotelmerge entry points.

    Supplier HTTP traffic is logged at WARNING unless ``level`` is DEBUG. Pass
    ``force=True`` to replace handlers installed by an earlier call.
    """

    resolved = resolve_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    http_level = logging.DEBUG if resolved <= logging.DEBUG else logging.WARNING
    for name in HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
