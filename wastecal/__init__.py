"""wastecal - convert municipal waste collection sheets into ICS calendars.

Imports are kept light here; the pipeline is loaded when run_conversion()
is called.
"""

__version__ = "0.1.0"

from typing import Any, Optional


def _init_logging(level_name: Optional[str]) -> None:
    """Initialize root logging to stream to console.

    Honors the WASTECAL_DEBUG environment variable (truthy values: "1",
    "true", "yes", "on"), which forces DEBUG verbosity so parser state
    transitions are visible when a sheet does not convert as expected.
    """
    import logging
    import os
    import sys

    from colorlog import ColoredFormatter

    debug_env = os.environ.get("WASTECAL_DEBUG", "")
    if debug_env.strip().lower() in ("1", "true", "yes", "on"):
        level_name = "DEBUG"

    root = logging.getLogger()
    # Only configure a handler if none is present to avoid duplicate output.
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stderr)
        # HH:MM:SS  LEVEL   logger.name: message (only the level is colorized)
        fmt = "%(asctime)s %(log_color)s%(levelname)-7s%(reset)s %(name)s: %(message)s"
        log_colors = {
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        }
        handler.setFormatter(ColoredFormatter(fmt, datefmt="%H:%M:%S", log_colors=log_colors))
        root.addHandler(handler)

    level = logging.INFO
    if isinstance(level_name, str):
        level = getattr(logging, level_name.upper(), logging.INFO)
    root.setLevel(level)
    logging.getLogger(__name__).debug(
        "Logging initialized at level %s", logging.getLevelName(level)
    )


def run_conversion(args: Any) -> int:
    """Run one conversion for parsed CLI arguments.

    Args:
        args: Namespace with ``calendar_path`` and optional ``output_path``

    Returns:
        Process exit code: 0 on success, 1 when the sheet could not be converted.

    Behavior:
    - Initialize console logging early using WASTECAL_LOG_LEVEL (env) if present.
    - Load configuration (WASTECAL_CONFIG or ./wastecal.yaml) and apply its
      log level unless the environment overrides it.
    - Convert the sheet; fatal schedule errors are logged and reported through
      the exit code, leaving no output file.
    """
    import logging
    import os

    _init_logging(os.environ.get("WASTECAL_LOG_LEVEL"))

    from wastecal.core.config_loader import load_config
    from wastecal.core.exceptions import ScheduleError
    from wastecal.core.logging_setup import configure_logging
    from wastecal.domain.pipeline import convert_schedule

    logger = logging.getLogger(__name__)

    try:
        cfg = load_config()
    except ScheduleError:
        logger.exception("Configuration could not be loaded")
        return 1

    configure_logging(level_name=cfg.log_level)

    calendar_path = args.calendar_path
    output_path = getattr(args, "output_path", None)

    try:
        result = convert_schedule(calendar_path, output_path, cfg)
    except ScheduleError as exc:
        logger.error("Conversion of %s failed: %s", calendar_path, exc)
        return 1
    except OSError as exc:
        logger.error("Could not read %s or write the calendar: %s", calendar_path, exc)
        return 1

    logger.info(
        "Converted %s: %d events for %d written to %s",
        calendar_path,
        result.event_count,
        result.year,
        result.output_path,
    )
    return 0
