"""Logging from config and env.

Runs inside a workflow step, so records go to stderr where the runner
collects them. Configure via the YAML config (logging.level,
logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT). At INFO the log
shows each decision of a run: skipped pull requests, the manifest version
and every label match.
"""

import logging

from merge_resolver.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LEVEL = "INFO"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER = "merge_resolver"

# HTTP client loggers, kept at WARNING unless the run itself is at DEBUG
NOISY_LOGGERS = ("urllib3",)


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names mean INFO."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


class ResolverLogging:
    """Configures logging for one resolver run from LoggingConfig."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        """Apply level and format to the root logger and quiet the HTTP
        client."""
        logging.basicConfig(level=self._level, format=self._format, force=True)
        noisy_level = self._level if self._level == logging.DEBUG else max(self._level, logging.WARNING)
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(noisy_level)

    def get_logger(self, name: str) -> logging.Logger:
        """Return the package logger for a module name (e.g. "main")."""
        if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
            return logging.getLogger(name)
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")
