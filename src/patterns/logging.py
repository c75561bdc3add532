"""Logging setup for the PATTERNS CLI.

Demo output is written to stdout, so all logging goes to stderr through Rich.
An optional in-memory "flight recorder" keeps recent records at DEBUG detail
and writes them to a file once something goes wrong.
"""

from __future__ import annotations

import logging
import sys
from importlib.metadata import version
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from pathlib import Path

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "patterns"

# Records at this level or above make the flight recorder write its buffer.
FLUSH_LEVEL = logging.WARNING

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Set `record.prefix` to "[<top-level package>]" for non-project records.

    Project records get an empty prefix. No record is ever dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top_level = record.name.split(".")[0]
        record.prefix = "" if top_level == PROJECT_PREFIX else f"[{top_level}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a Rich handler writing to stderr.

    In `debug_mode` the handler logs everything and shows the source location
    of each record; otherwise third-party records are prefixed with their
    package name.
    """
    color_system: ColorSystem | None = "auto" if color else None

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path, capacity: int = 2000, flush_on_close: bool = False
) -> MemoryHandler:
    """Return a handler buffering up to `capacity` records for `path`.

    The buffer is written when a record at `FLUSH_LEVEL` arrives, when it is
    full, and on close if `flush_on_close` is set. The file is only created
    on the first write.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=FLUSH_LEVEL,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def _flight_recorder(handlers: list[logging.Handler]) -> MemoryHandler | None:
    return next((h for h in handlers if isinstance(h, MemoryHandler)), None)


def log_startup(
    logger: logging.Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    logger_levels: dict[str, int],
) -> None:
    """Log which versions and logging settings this run uses.

    One INFO summary line is followed by DEBUG details. Flight recorder
    settings are read from the recorder found in `handlers`, if any.
    """
    recorder = _flight_recorder(handlers)

    logger.info(
        "PATTERNS %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(level),
        "ON" if recorder else "OFF",
    )

    logger.debug(
        "Python %s, Click %s, Rich %s",
        sys.version.split()[0],
        version("click"),
        version("rich"),
    )
    if recorder is not None:
        target = recorder.target
        logger.debug(
            "Flight recorder: path=%s, capacity=%d, flush_on_close=%s",
            getattr(target, "baseFilename", "<none>"),
            recorder.capacity,
            recorder.flushOnClose,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )


def verbosity_level(verbose_count: int = 0, quiet_count: int = 0) -> int:
    """Move one level away from WARNING per -v (down) or -q (up), clamped."""
    level = logging.WARNING - 10 * verbose_count + 10 * quiet_count
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug_mode: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    capacity: int = 2000,
    flush_on_close: bool = False,
    logger_levels: dict[str, int] | None = None,
) -> list[logging.Handler]:
    """Install the console handler, plus a flight recorder when `log_path` is set.

    The root logger passes everything through and the handlers filter, so the
    recorder keeps DEBUG records whatever the console level. `logger_levels`
    are applied to the named loggers and therefore affect both handlers.

    Returns:
        The installed handlers, console first.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if log_path is not None:
        handlers.append(
            config_flight_recorder(
                log_path, capacity=capacity, flush_on_close=flush_on_close
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)

    return handlers
