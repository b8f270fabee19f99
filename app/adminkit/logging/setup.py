"""Structlog configuration for adminkit.

Call ``configure_logging()`` once at startup; modules obtain their logger
with ``get_module_logger()``. Output format and level come from
``Settings.LOG_FORMAT`` and ``Settings.LOG_LEVEL``:

- ``LOG_FORMAT=console``: coloured key/value lines
- ``LOG_FORMAT=json``: one JSON object per event
- ``LOG_FORMAT=auto`` (default): JSON in production, console otherwise

Request fields bound through ``bind_request_context`` (correlation id,
user id, locale) are merged into every event.
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from adminkit.configuration import settings
from adminkit.logging.formatters import mask_sensitive_data

LOG_FORMATS = ("auto", "console", "json")


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def resolve_log_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its logging constant.

    Unknown names fall back to INFO.
    """
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def select_renderer(log_format: str, is_production: bool) -> Processor:
    """Pick the final processor for ``log_format``.

    Raises:
        ValueError: If ``log_format`` is not one of LOG_FORMATS.
    """
    log_format = log_format.lower()
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unsupported log format: {log_format!r}")
    if log_format == "auto":
        log_format = "json" if is_production else "console"
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer()


def build_processors(renderer: Processor) -> List[Processor]:
    """Processor chain shared by every output format, ending in ``renderer``."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        mask_sensitive_data(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Under pytest every event is dropped: the root level is set above
    CRITICAL.

    Args:
        log_level: Level name; defaults to settings.LOG_LEVEL.
        log_format: One of LOG_FORMATS; defaults to settings.LOG_FORMAT.
        is_production: Decides the ``auto`` format; defaults to
            settings.is_production.

    Returns:
        Configured logger instance.
    """
    if _is_test_environment():
        processors: List[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = logging.CRITICAL + 1
    else:
        prod_mode = settings.is_production if is_production is None else is_production
        renderer = select_renderer(log_format or settings.LOG_FORMAT, prod_mode)
        processors = build_processors(renderer)
        level = resolve_log_level(log_level or settings.LOG_LEVEL)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    logging.root.setLevel(level)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return a logger bound to the calling module.

    In ``adminkit.i18n.resolver`` the logger carries
    ``component="resolver"`` and ``module_path="adminkit.i18n.resolver"``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module_name = caller.f_globals.get("__name__") if caller is not None else None
    if not module_name:
        return logger.bind(component="unknown")
    return logger.bind(component=module_name.rsplit(".", 1)[-1], module_path=module_name)
