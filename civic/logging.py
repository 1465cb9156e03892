"""Log setup for the civic CLI.

Command output goes to stdout; log records go to stderr so that warnings
about corrupt storage slots never mix into listings.

Levels:
- ERROR: bad configuration
- WARNING: corrupt or unreadable storage slots, skipped records
- INFO: seeding and issue mutations
- DEBUG: slot writes and lookup misses (civic --verbose)

Set via config.yaml (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
"""

import logging
import sys

from civic.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

FALLBACK_LEVEL = "INFO"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG = logging.getLogger("civic.logging")


def _resolve_level(level: str) -> int:
    """Map level name to logging constant, INFO if unknown."""
    return LEVELS.get(level.upper().strip(), LEVELS[FALLBACK_LEVEL])


class CivicLogging:
    """Configures the root logger for one CLI run."""

    def __init__(self, config: LoggingConfig, level_override: str | None = None) -> None:
        """level_override (DEBUG from --verbose) wins over config.level."""
        self.requested = (level_override or config.level or "").upper().strip()
        self.level_name = self.requested if self.requested in LEVELS else FALLBACK_LEVEL
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        """Point the root logger at stderr with the resolved level and format."""
        logging.basicConfig(
            level=_resolve_level(self.level_name),
            format=self._format,
            stream=sys.stderr,
            force=True,
        )
        if self.requested and self.requested != self.level_name:
            LOG.warning("Unknown log level %r, using %s", self.requested, self.level_name)
