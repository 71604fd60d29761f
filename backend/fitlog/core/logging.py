"""
Structured logging configuration.
Log events carry ids and counts, never workout labels.
"""
import logging
import sys
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Generator, List, Optional

import structlog
from structlog.types import Processor

from fitlog.core.config import settings


def setup_logging() -> None:
    """Configure structured logging for the application."""

    # Common processors
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.LOG_FORMAT == "json":
        # JSON format for production
        renderer = structlog.processors.JSONRenderer()
    else:
        # Console format for development
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure root logger
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper()))

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


# ========================================
# Dashboard Render Tracking
# ========================================

@dataclass
class RenderLog:
    """Complete log entry for one dashboard recompute."""
    render_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    trigger: str = ""
    record_count: int = 0
    panels: List[str] = field(default_factory=list)

    # Timing
    start_time: float = 0.0
    end_time: float = 0.0
    duration_ms: float = 0.0

    # Status
    success: bool = True
    error_type: Optional[str] = None
    error_message: Optional[str] = None


class RenderTracker:
    """
    Tracks a single dashboard recompute.

    Usage:
        with RenderTracker(logger, trigger="add", record_count=3) as render:
            stats = render_stats(...)
            render.add_panel("stats", stats)
    """

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        trigger: str,
        record_count: int = 0,
        enabled: Optional[bool] = None,
    ):
        self.logger = logger
        self.enabled = settings.RENDER_DEBUG_LOG if enabled is None else enabled
        self.log = RenderLog(trigger=trigger, record_count=record_count)

    def __enter__(self) -> "RenderTracker":
        self.log.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.log.success = False
            self.log.error_type = exc_type.__name__
            self.log.error_message = str(exc)
        self.finish()

    def add_panel(self, name: str, panel: Any = None) -> None:
        """Record that a panel was produced."""
        self.log.panels.append(name)

        if self.enabled:
            self.logger.debug(
                "Panel rendered",
                render_id=self.log.render_id,
                panel=name,
                empty=panel is None,
            )

    def finish(self) -> None:
        """Mark the end of the recompute and log summary."""
        self.log.end_time = time.time()
        self.log.duration_ms = (self.log.end_time - self.log.start_time) * 1000

        if self.log.success:
            self.logger.info(
                "Dashboard rendered",
                render_id=self.log.render_id,
                trigger=self.log.trigger,
                record_count=self.log.record_count,
                panels=self.log.panels,
                duration_ms=round(self.log.duration_ms, 2),
            )
        else:
            self.logger.error(
                "Dashboard render failed",
                render_id=self.log.render_id,
                trigger=self.log.trigger,
                duration_ms=round(self.log.duration_ms, 2),
                error_type=self.log.error_type,
                error_message=self.log.error_message,
            )


@contextmanager
def track_render(
    logger: structlog.stdlib.BoundLogger,
    trigger: str,
    record_count: int = 0,
) -> Generator[RenderTracker, None, None]:
    """Context manager for tracking a dashboard recompute."""
    with RenderTracker(logger, trigger, record_count) as tracker:
        yield tracker
