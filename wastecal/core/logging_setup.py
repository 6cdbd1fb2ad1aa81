"""
Central logging configuration for wastecal.

Keeps third-party libraries quiet while letting the conversion modules report
section summaries at INFO and state transitions at DEBUG.
"""

import logging
import os
from typing import Optional

_TRUTHY = ("1", "true", "yes", "on")
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

WASTECAL_MODULES = [
    "wastecal",
    "wastecal.sheet.row_stream",
    "wastecal.sheet.section_parser",
    "wastecal.calendar.date_expansion",
    "wastecal.calendar.override_resolver",
    "wastecal.calendar.event_emitter",
    "wastecal.calendar.ics_writer",
    "wastecal.domain.pipeline",
]

SUPPRESSED_LOGGERS = {
    "icalendar": logging.INFO,
}


def env_debug_enabled() -> bool:
    """Return True if WASTECAL_DEBUG is set to a truthy value."""
    return os.getenv("WASTECAL_DEBUG", "").strip().lower() in _TRUTHY


def configure_logging(
    debug_mode: bool = False,
    force_debug: Optional[bool] = None,
    level_name: Optional[str] = None,
) -> None:
    """
    Configure logging levels for wastecal.

    Args:
        debug_mode: Whether to enable debug logging for wastecal modules
        force_debug: Override debug mode setting (None to use env var detection)
        level_name: Root level from configuration (e.g. "WARNING"); "DEBUG"
            also enables debug mode

    Environment Variables:
        WASTECAL_DEBUG: Set to '1', 'true', 'yes' to force debug logging
        WASTECAL_LOG_LEVEL: Override root log level (DEBUG, INFO, WARNING, ERROR)
    """
    env_log_level = os.getenv("WASTECAL_LOG_LEVEL", "").upper()
    config_level = (level_name or "").upper()

    if force_debug is not None:
        final_debug = force_debug
    elif env_debug_enabled():
        final_debug = True
    else:
        final_debug = debug_mode or config_level == "DEBUG"

    root_level = logging.DEBUG if final_debug else logging.INFO
    if not final_debug and config_level in _LEVELS:
        root_level = getattr(logging, config_level)
    if env_log_level in _LEVELS:
        root_level = getattr(logging, env_log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)

    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(root_level)
        handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(levelname)s - %(name)s - %(message)s")
        )
        root_logger.addHandler(handler)

    logger_config: dict[str, int] = dict(SUPPRESSED_LOGGERS)

    module_level = logging.DEBUG if final_debug else max(logging.INFO, root_level)
    for module in WASTECAL_MODULES:
        logger_config[module] = module_level

    for logger_name, level in logger_config.items():
        logging.getLogger(logger_name).setLevel(level)

    if final_debug:
        root_logger.debug("Debug logging enabled for wastecal modules")


def reset_logging_to_debug() -> None:
    """
    Reset all loggers to DEBUG level for troubleshooting.

    Temporarily enables verbose logging for every module, including the
    third-party loggers that configure_logging() quiets.
    """
    logging.getLogger().setLevel(logging.DEBUG)

    for logger_name in list(SUPPRESSED_LOGGERS) + WASTECAL_MODULES:
        logging.getLogger(logger_name).setLevel(logging.DEBUG)

    logging.getLogger().info("All loggers reset to DEBUG level for troubleshooting")


def get_logging_status() -> dict[str, str]:
    """
    Get current logging configuration status.

    Returns:
        Dictionary mapping logger names to their current levels
    """
    status = {"root": logging.getLevelName(logging.getLogger().level)}

    for logger_name in ["wastecal", "wastecal.sheet.section_parser", "icalendar"]:
        status[logger_name] = logging.getLevelName(logging.getLogger(logger_name).level)

    return status
