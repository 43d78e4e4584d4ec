"""Runtime settings for Don't Say N!.

Defaults can be overridden via environment variables. Malformed numeric
values fall back to the default.
"""

import logging
import os

logger = logging.getLogger(__name__)

# Default configuration (can be overridden via environment variables)
DEFAULT_COMPUTER_DELAY_MS = 700
DEFAULT_TARGET = 13
DEFAULT_STEPS = "1,2"
DEFAULT_MAX_TARGET = 10_000
DEFAULT_LOG_LEVEL = "WARNING"


def _get_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring malformed {name}={raw!r}, using {default}")
        return default


def get_computer_delay() -> float:
    """Get the delay before the computer moves, in seconds."""
    return max(0, _get_int("DONTSAY_COMPUTER_DELAY_MS", DEFAULT_COMPUTER_DELAY_MS)) / 1000


def get_default_target() -> int:
    """Get the target prefilled on the configuration screen."""
    return _get_int("DONTSAY_DEFAULT_TARGET", DEFAULT_TARGET)


def get_default_steps() -> str:
    """Get the steps prefilled on the configuration screen."""
    return os.environ.get("DONTSAY_DEFAULT_STEPS", DEFAULT_STEPS)


def get_max_target() -> int:
    """Get the largest target the validator accepts."""
    return _get_int("DONTSAY_MAX_TARGET", DEFAULT_MAX_TARGET)


def get_log_level() -> str:
    """Get the logging level name for the CLI."""
    return os.environ.get("DONTSAY_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
