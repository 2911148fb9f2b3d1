"""
FSEQ Validator Configuration
============================

This module handles configuration loading for the sequence validator.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    FSEQ_MEMORY_LIMIT      -> validation.memory_limit
    FSEQ_MAX_DURATION_MS   -> validation.max_duration_ms
    FSEQ_MIN_STEP_TIME_MS  -> validation.min_step_time_ms
    FSEQ_MINOR_VERSIONS    -> validation.accepted_minor_versions (comma separated)
    FSEQ_SERVER_PORT       -> server.port
    FSEQ_LOG_LEVEL         -> logging.level
    FSEQ_LOG_FORMAT        -> logging.format
    PORT                   -> server.port (container platforms)

Example:
    from fseq_validator.config import settings

    print(settings.validation.memory_limit)
    print(settings.validation.accepted_minor_versions)
"""

import os
import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class ValidationConfig(BaseModel):
    """
    Acceptance policy for sequence files.

    The controller's instruction storage and the accepted header versions
    have changed between controller firmware releases, so every limit here
    is configuration rather than a constant in the decode path.
    """

    memory_limit: int = Field(
        default=3500,
        gt=0,
        description="Maximum number of commands the controller can store",
    )
    max_duration_ms: int = Field(
        default=5 * 60 * 1000,
        gt=0,
        description="Maximum total sequence duration in milliseconds",
    )
    min_step_time_ms: int = Field(
        default=15,
        ge=0,
        description="Minimum frame interval supported by the hardware",
    )
    min_data_offset: int = Field(
        default=24,
        ge=0,
        description="Minimum offset of the first frame in the file",
    )
    required_channel_count: int = Field(
        default=48,
        ge=1,
        description="Exact number of channels per frame",
    )
    accepted_major_version: int = Field(
        default=2,
        description="Accepted FSEQ major version",
    )
    accepted_minor_versions: List[int] = Field(
        default_factory=lambda: [0, 2],
        description="Accepted FSEQ minor versions",
    )
    accepted_compression_type: int = Field(
        default=0,
        description="Accepted compression type (0 = uncompressed)",
    )
    log_every_n_frames: int = Field(
        default=1000,
        ge=1,
        description="Log command counter progress every N frames",
    )


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8002, ge=1, le=65535, description="Bind port")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for the FSEQ validator.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
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
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    # Find config file
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    # Load from YAML if exists
    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.warning("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Validation policy
    if env_limit := os.environ.get("FSEQ_MEMORY_LIMIT"):
        config_data.setdefault("validation", {})["memory_limit"] = int(env_limit)
    if env_duration := os.environ.get("FSEQ_MAX_DURATION_MS"):
        config_data.setdefault("validation", {})["max_duration_ms"] = int(env_duration)
    if env_step := os.environ.get("FSEQ_MIN_STEP_TIME_MS"):
        config_data.setdefault("validation", {})["min_step_time_ms"] = int(env_step)
    if env_minor := os.environ.get("FSEQ_MINOR_VERSIONS"):
        config_data.setdefault("validation", {})["accepted_minor_versions"] = [
            int(v) for v in env_minor.split(",") if v.strip()
        ]

    # Server settings (container platforms use PORT env var)
    if env_port := os.environ.get("PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)
    elif env_port := os.environ.get("FSEQ_SERVER_PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)

    # Logging settings
    if env_log := os.environ.get("FSEQ_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_fmt := os.environ.get("FSEQ_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_fmt


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

# Global settings instance - loaded on import
settings = load_config()
setup_logging(settings)
