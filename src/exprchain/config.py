"""
Runtime configuration for exprchain.

Values come from the environment (optionally a ``.env`` file):

- EXPRCHAIN_AND_SYMBOL: separator for AND groups when rendering (default " && ")
- EXPRCHAIN_OR_SYMBOL: separator for OR groups when rendering (default " || ")
- EXPRCHAIN_LOG_LEVEL: CLI log level (default WARNING)
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass
class ChainConfig:
    """Configuration for rendering and logging.

    Attributes:
        and_symbol: Separator placed between children of AND groups
        or_symbol: Separator placed between children of OR groups
        log_level: Log level name used by the CLI
    """

    and_symbol: str = " && "
    or_symbol: str = " || "
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> "ChainConfig":
        """Build a config from EXPRCHAIN_* environment variables."""
        load_dotenv()
        defaults = cls()
        config = cls(
            and_symbol=os.environ.get("EXPRCHAIN_AND_SYMBOL", defaults.and_symbol),
            or_symbol=os.environ.get("EXPRCHAIN_OR_SYMBOL", defaults.or_symbol),
            log_level=os.environ.get("EXPRCHAIN_LOG_LEVEL", defaults.log_level),
        )
        logger.debug(f"Loaded config from environment: {config}")
        return config


_CONFIG: ChainConfig | None = None


def get_config() -> ChainConfig:
    """Get the process-wide config, reading the environment on first use."""
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = ChainConfig.from_env()
    return _CONFIG


def set_config(config: ChainConfig | None) -> None:
    """Replace the process-wide config (None re-reads the environment lazily)."""
    global _CONFIG
    _CONFIG = config
