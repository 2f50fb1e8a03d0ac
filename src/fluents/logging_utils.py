"""Runtime logging helpers."""

from __future__ import annotations

import sys
from logging import Handler
from typing import Literal

from loguru import logger
from rich import get_console
from rich.logging import RichHandler

from fluents.config import get_settings

LogProfile = Literal["default", "cli"]

_PROFILE_FORMATS: dict[LogProfile, str] = {
    "cli": "{message}",
    "default": "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {thread.name} | {name}:{function}:{line} | {message}",
}
_CONFIGURED: tuple[LogProfile, str] | None = None


def _build_cli_handler() -> Handler:
    return RichHandler(
        console=get_console(),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def configure_logging(*, level: str | None = None, profile: LogProfile | None = None) -> None:
    """Route fluents log records to a sink once per level/profile pair."""
    global _CONFIGURED
    settings = get_settings()
    level = (level or settings.log_level).upper()
    profile = profile or ("cli" if settings.log_format == "cli" else "default")
    logger.enable("fluents")
    if _CONFIGURED == (profile, level):
        return

    logger.remove()
    sink = _build_cli_handler() if profile == "cli" else sys.stderr
    logger.add(
        sink,
        level=level,
        format=_PROFILE_FORMATS[profile],
        backtrace=False,
        diagnose=False,
    )
    _CONFIGURED = (profile, level)
