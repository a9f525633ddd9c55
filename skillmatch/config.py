"""
Runtime configuration.

Settings come from three places, later ones winning:

1. defaults on :class:`Settings`
2. an optional YAML file with ``logging``, ``recognizer`` and
   ``ranking`` sections
3. ``SKILLMATCH_*`` environment variables, after ``.env`` has been
   loaded with python-dotenv

Example ``config.yaml``::

    logging:
      level: DEBUG
    recognizer:
      boundary: token
      catalog_file: skills.yaml
    ranking:
      location_bonus: 10
      recommendation_limit: 5
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml  # type: ignore
from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError
from .recognize import SkillRecognizer, build_recognizer
from .recognize.recognizer import BOUNDARY_MODES
from .vocabulary import load_catalog_file

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Resolved configuration values."""

    log_level: str = "INFO"
    boundary: str = "word"
    catalog_file: Optional[str] = None
    location_bonus: int = 10
    recommendation_limit: int = 5

    def validate(self) -> None:
        """Raise :class:`ConfigError` for unsupported values."""
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level {self.log_level!r}")
        if self.boundary not in BOUNDARY_MODES:
            raise ConfigError(
                f"Unknown recognizer boundary {self.boundary!r}; expected one of {sorted(BOUNDARY_MODES)}"
            )
        if not 0 <= self.location_bonus <= 100:
            raise ConfigError(f"location_bonus must be between 0 and 100, got {self.location_bonus}")
        if self.recommendation_limit < 1:
            raise ConfigError(f"recommendation_limit must be positive, got {self.recommendation_limit}")

    def build_recognizer(self) -> SkillRecognizer:
        """Return the recognizer described by these settings."""
        skills = load_catalog_file(self.catalog_file) if self.catalog_file else None
        return build_recognizer(skills, boundary=self.boundary)


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML configuration {path}: {exc}") from exc
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping")
    logger.debug("Loaded configuration from %s", path)
    return config


def _as_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from exc


def load_settings(config_path: Optional[str] = None) -> Settings:
    """Build :class:`Settings` from defaults, a YAML file and the environment.

    Args:
        config_path: Optional path to a YAML configuration file.

    Raises:
        FileNotFoundError: If ``config_path`` is given but missing.
        ConfigError: If the file cannot be parsed or a value is invalid.
    """
    load_dotenv(find_dotenv(usecwd=True))
    settings = Settings()
    if config_path:
        config = _load_yaml(Path(config_path))
        log_cfg = config.get("logging", {}) or {}
        recognizer_cfg = config.get("recognizer", {}) or {}
        ranking_cfg = config.get("ranking", {}) or {}
        if "level" in log_cfg:
            settings.log_level = str(log_cfg["level"]).upper()
        if "boundary" in recognizer_cfg:
            settings.boundary = str(recognizer_cfg["boundary"]).lower()
        if recognizer_cfg.get("catalog_file"):
            catalog_file = Path(recognizer_cfg["catalog_file"])
            if not catalog_file.is_absolute():
                catalog_file = Path(config_path).parent / catalog_file
            settings.catalog_file = str(catalog_file)
        if "location_bonus" in ranking_cfg:
            settings.location_bonus = _as_int(ranking_cfg["location_bonus"], "location_bonus")
        if "recommendation_limit" in ranking_cfg:
            settings.recommendation_limit = _as_int(
                ranking_cfg["recommendation_limit"], "recommendation_limit"
            )
    # Environment overrides
    if os.getenv("SKILLMATCH_LOG_LEVEL"):
        settings.log_level = os.environ["SKILLMATCH_LOG_LEVEL"].upper()
    if os.getenv("SKILLMATCH_BOUNDARY"):
        settings.boundary = os.environ["SKILLMATCH_BOUNDARY"].lower()
    if os.getenv("SKILLMATCH_CATALOG_FILE"):
        settings.catalog_file = os.environ["SKILLMATCH_CATALOG_FILE"]
    settings.validate()
    return settings
