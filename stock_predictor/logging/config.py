"""
Centralized logging configuration for the forecasting core.

This module provides standardized logging configuration using structlog.
The core only emits events; the embedding application decides whether to
call configure_logging and how to render them.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_forecast_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the forecasting subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for model dispatch and evaluation
    """
    return get_logger(name).bind(subsystem="forecasting")


def log_model_selection(
    logger: FilteringBoundLogger,
    requested: str,
    selected: str,
    horizon_days: int,
    history_length: int,
) -> None:
    """
    Log which forecast strategy served a request.

    A request that fell through to the naive default is logged as a warning.

    Args:
        logger: Structlog logger instance
        requested: Model selector as given by the caller
        selected: ModelKind value actually used
        horizon_days: Number of days forecast
        history_length: Number of historical points fed to the model
    """
    bound_logger = logger.bind(
        requested_model=requested,
        model=selected,
        horizon_days=horizon_days,
        history_length=history_length,
    )

    if selected == "naive" and requested.lower() != "naive":
        bound_logger.warning("Unknown model selector, using naive forecast")
    else:
        bound_logger.debug("Forecast model selected")


def log_evaluation(
    logger: FilteringBoundLogger,
    compared: int,
    metrics: dict[str, float],
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of an accuracy evaluation.

    Args:
        logger: Structlog logger instance
        compared: Number of aligned point pairs
        metrics: MAE/RMSE/MAPE values
        context: Additional context data
    """
    bound_logger = logger.bind(compared=compared, **metrics)

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Forecast evaluated")
