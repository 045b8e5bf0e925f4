"""
Configuration settings for visibility calculation.
"""

import logging
import os

import toml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class GameConfig(BaseModel):
    """Configuration settings for the visibility system."""

    # Sight settings
    sight_radius: int = Field(default=8, ge=0)

    # Map settings used when building maps without explicit dimensions
    map_width: int = Field(default=80, gt=0)
    map_height: int = Field(default=25, gt=0)

    # Logging
    log_level: str = "WARNING"

    model_config = ConfigDict(extra="allow")

    @classmethod
    def load_from_toml(cls, path: str = "config.toml") -> "GameConfig":
        """Load configuration from the [visibility] table of a TOML file."""
        if not os.path.exists(path):
            logger.warning("Config file %s not found. Using defaults.", path)
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = toml.load(f)

            return cls(**data.get("visibility", {}))
        except (OSError, ValueError, toml.TomlDecodeError) as e:
            logger.error("Error loading config %s: %s", path, e)
            return cls()


def configure_logging(config: GameConfig) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Global config instance
CONFIG = GameConfig.load_from_toml()
