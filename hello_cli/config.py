"""Settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_LOG_COMMAND = "echo"
DEFAULT_LOG_DELAY = 0.8
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    log_command: str = DEFAULT_LOG_COMMAND
    log_delay: float = DEFAULT_LOG_DELAY
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        raw_delay = os.environ.get("HELLO_CLI_LOG_DELAY", str(DEFAULT_LOG_DELAY))
        try:
            delay = max(0.0, float(raw_delay))
        except ValueError:
            logger.warning("Ignoring invalid HELLO_CLI_LOG_DELAY=%r", raw_delay)
            delay = DEFAULT_LOG_DELAY
        return cls(
            log_command=os.environ.get("HELLO_CLI_LOG_COMMAND", DEFAULT_LOG_COMMAND),
            log_delay=delay,
            log_level=os.environ.get("HELLO_CLI_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
