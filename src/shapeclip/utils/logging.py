"""Logging utilities for shapeclip."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on each call
_handlers: list[logging.Handler] = []


@dataclass
class OperationStats:
    """Statistics from a run of geometry operations."""

    operations: int = 0
    input_rings: int = 0
    output_rings: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    durations_ms: list[float] = field(default_factory=list)

    @property
    def total_ms(self) -> float:
        """Total time spent in operations."""
        return sum(self.durations_ms)

    @property
    def error_count(self) -> int:
        return len(self.errors)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    while _handlers:
        handler = _handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _handlers.append(console_handler)

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

    logger = structlog.get_logger("shapeclip")
    logger.debug("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class OperationLogger:
    """Logger for tracking geometry operations and their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = OperationStats()

    def log_operation_start(self, operation: str, polygons: int) -> None:
        """Log start of an operation."""
        self._logger.debug("Running operation", operation=operation, polygons=polygons)

    def log_operation_complete(
        self,
        operation: str,
        input_rings: int,
        output_rings: int,
        duration_ms: float,
    ) -> None:
        """Log a finished operation."""
        self._logger.info(
            "Operation complete",
            operation=operation,
            input_rings=input_rings,
            output_rings=output_rings,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.operations += 1
        self._stats.input_rings += input_rings
        self._stats.output_rings += output_rings
        self._stats.durations_ms.append(duration_ms)

    def log_operation_error(self, operation: str, error: Exception) -> None:
        """Log a failed operation."""
        self._logger.error(
            "Operation failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.errors.append((operation, str(error)))

    @property
    def stats(self) -> OperationStats:
        """Get current operation statistics."""
        return self._stats
