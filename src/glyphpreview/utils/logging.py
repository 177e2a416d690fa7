"""Logging utilities for Glyphpreview."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers added by configure_logging(), replaced on every call
_installed_handlers: list[logging.Handler] = []


@dataclass
class RenderStats:
    """Statistics over the render calls made by one renderer."""

    rendered_count: int = 0
    empty_count: int = 0
    error_count: int = 0
    strokes_drawn: int = 0
    points_drawn: int = 0
    clamped_scales: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    render_times_ms: list[float] = field(default_factory=list)

    @property
    def avg_render_time_ms(self) -> float | None:
        """Average duration of a render call."""
        if not self.render_times_ms:
            return None
        return sum(self.render_times_ms) / len(self.render_times_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("glyphpreview")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking render calls and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_render_start(self, template_name: str | None, width: int, height: int) -> float:
        """Log start of a render call.

        Returns:
            Start timestamp to pass to log_render_complete()
        """
        self._logger.debug(
            "Rendering glyph",
            template=template_name,
            surface_width=width,
            surface_height=height,
        )
        return time.perf_counter()

    def log_render_complete(
        self,
        template_name: str | None,
        strokes: int,
        points: int,
        scale: float,
        started: float,
    ) -> None:
        """Log successful render."""
        duration_ms = (time.perf_counter() - started) * 1000.0
        self._logger.info(
            "Glyph rendered",
            template=template_name,
            strokes=strokes,
            points=points,
            scale=round(scale, 4),
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1
        self._stats.strokes_drawn += strokes
        self._stats.points_drawn += points
        self._stats.render_times_ms.append(duration_ms)

    def log_render_empty(self, template_name: str | None) -> None:
        """Log a render of a template without points."""
        self._logger.debug("Empty template, nothing drawn", template=template_name)
        self._stats.empty_count += 1

    def log_scale_clamped(self, template_name: str | None, width: float, height: float) -> None:
        """Log that an unusable scale was replaced by 1."""
        self._logger.warning(
            "Scale clamped to 1",
            template=template_name,
            glyph_width=width,
            glyph_height=height,
        )
        self._stats.clamped_scales += 1

    def log_render_error(self, template_name: str | None, error: Exception) -> None:
        """Log render failure."""
        self._logger.error(
            "Glyph render failed",
            template=template_name,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((template_name or "<unnamed>", str(error)))

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
