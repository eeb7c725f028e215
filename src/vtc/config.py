"""
vtc Configuration
=================

This module handles configuration loading for vtc.

Configuration only supplies defaults for options a caller leaves out;
passing an option explicitly always wins.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. vtc.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    VTC_CONFIG            -> path of the YAML file to load
    VTC_DEFAULT_ROUND     -> framestamp.default_round
    VTC_DIVIDE_ROUND      -> framestamp.divide_round
    VTC_FILM_FORMAT       -> framestamp.film_format
    VTC_RUNTIME_PRECISION -> framestamp.runtime_precision
    VTC_INT64_CHECKS      -> codec.enforce_int64
    VTC_LOG_LEVEL         -> logging.level
    VTC_LOG_FORMAT        -> logging.format

Example:
    from vtc.config import settings

    print(settings.framestamp.default_round)
    print(settings.codec.enforce_int64)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from vtc.film_format import FilmFormat
from vtc.rational import Round


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class FramestampConfig(BaseModel):
    """Defaults for framestamp construction and conversion."""

    default_round: Round = Field(
        default=Round.CLOSEST,
        description="Rounding used to snap values to whole frames",
    )
    divide_round: Round = Field(
        default=Round.TRUNC,
        description="Rounding used by framestamp division",
    )
    film_format: FilmFormat = Field(
        default=FilmFormat.FF35MM_4PERF,
        description="Film format used for feet+frames",
    )
    runtime_precision: int = Field(
        default=9,
        ge=0,
        le=30,
        description="Decimal places kept in runtime strings",
    )

    @field_validator("default_round", "divide_round")
    @classmethod
    def validate_round(cls, v: Round) -> Round:
        """Defaults must always produce whole frames."""
        if v is Round.OFF:
            raise ValueError("Default rounding cannot be 'off'")
        return v


class CodecConfig(BaseModel):
    """Wire codec configuration."""

    enforce_int64: bool = Field(
        default=True,
        description="Reject encoded components outside signed 64-bit range",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for vtc.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    framestamp: FramestampConfig = Field(default_factory=FramestampConfig)
    codec: CodecConfig = Field(default_factory=CodecConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to vtc.yaml. If None, uses VTC_CONFIG or searches
            the working directory.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        config_path = os.environ.get("VTC_CONFIG")

    if config_path is None:
        for path in (Path("vtc.yaml"), Path("vtc.yml")):
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Framestamp defaults
    if env_round := os.environ.get("VTC_DEFAULT_ROUND"):
        config_data.setdefault("framestamp", {})["default_round"] = env_round.lower()
    if env_div := os.environ.get("VTC_DIVIDE_ROUND"):
        config_data.setdefault("framestamp", {})["divide_round"] = env_div.lower()
    if env_film := os.environ.get("VTC_FILM_FORMAT"):
        config_data.setdefault("framestamp", {})["film_format"] = env_film.lower()
    if env_precision := os.environ.get("VTC_RUNTIME_PRECISION"):
        config_data.setdefault("framestamp", {})["runtime_precision"] = int(env_precision)

    # Codec settings
    if env_int64 := os.environ.get("VTC_INT64_CHECKS"):
        config_data.setdefault("codec", {})["enforce_int64"] = env_int64.lower() in ("1", "true", "yes", "on")

    # Logging settings
    if env_log := os.environ.get("VTC_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_log_format := os.environ.get("VTC_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_log_format


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import. Logging is left to the
# application; call setup_logging(settings) to use vtc's formats.
settings = load_config()
