# Area: Shared
"""
fair_dice.config — Game configuration
=====================================

Settings come from three places, later ones winning:

1. An optional JSON config file
2. Environment variables (a .env file in the working directory is loaded)
3. Command-line flags (applied by the CLI)
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from ._game.enums import TiePolicy
from .errors import ValidationError

logger = logging.getLogger("fair_dice.config")

# Environment variable -> config key
ENV_MAPPINGS = {
    "FAIR_DICE_LOG_FILE": "log_file",
    "FAIR_DICE_LOG_LEVEL": "log_level",
    "FAIR_DICE_TIE_POLICY": "tie_policy",
    "FAIR_DICE_TRACE": "trace",
    "FAIR_DICE_STRICT": "strict_verification",
    "DEMO_MODE": "demo",
}

BOOLEAN_KEYS = {"trace", "strict_verification", "demo"}
TRUE_VALUES = ("true", "1", "yes")


class GameConfig(BaseModel):
    """
    Validated settings for one run.

    Attributes:
        log_file: Path of the JSON log file, or None for terminal only
        log_level: Logging level name
        tie_policy: How equal rolls are resolved
        trace: Print the commit-reveal trace
        strict_verification: Stop the process if a reveal fails verification
        demo: Let DemoPeer answer instead of the terminal
    """

    model_config = ConfigDict(extra="ignore")

    log_file: Optional[str] = None
    log_level: str = "WARNING"
    tie_policy: TiePolicy = TiePolicy.SYSTEM_WINS
    trace: bool = False
    strict_verification: bool = False
    demo: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load raw config values from file and environment.

    Args:
        config_path: Optional JSON file path. A missing file is ignored.

    Returns:
        Dict of config values (not yet validated)

    Raises:
        ValidationError: If the file is not valid JSON or not a JSON object
    """
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    config = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise ValidationError(f"Invalid config file {config_path}: {e}") from e
            if not isinstance(config, dict):
                raise ValidationError(
                    f"Invalid config file {config_path}: expected a JSON object, "
                    f"got {type(config).__name__}"
                )
        else:
            logger.warning(f"Config file not found: {config_path}")

    load_dotenv(find_dotenv(usecwd=True))

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            value: Any = os.environ[env_key]
            if config_key in BOOLEAN_KEYS:
                value = value.lower() in TRUE_VALUES
            config[config_key] = value

    return config


def build_config(config: Dict[str, Any], overrides: Optional[Dict[str, Any]] = None) -> GameConfig:
    """
    Validate raw config values, applying non-None overrides on top.

    Raises:
        pydantic.ValidationError: If a value is invalid
    """
    merged = dict(config)
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value
    return GameConfig.model_validate(merged)
