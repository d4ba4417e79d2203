"""
Tube configuration management for the Tube Times helper.
Author: Oliver Ernster

This module holds the TfL API settings and builds the request URLs
used for arrivals and line status, using Pydantic for validation.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union
from urllib.parse import quote, urlencode

from pydantic import BaseModel, Field, ValidationError, field_validator

from version import __tfl_api_url__, get_user_agent

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class TubeConfig(BaseModel):
    """
    Configuration for TfL data access.

    Timeout defaults to None so the HTTP client's own default applies.
    """

    api_base_url: str = Field(default=__tfl_api_url__, description="TfL API base URL")
    app_key: Optional[str] = Field(default=None, description="Optional TfL app key")

    stop_point_id: Optional[str] = Field(
        default=None, description="NaPTAN id of the stop point for arrivals"
    )
    line_id: Optional[str] = Field(default=None, description="Line id for status, e.g. 'northern'")

    timeout_seconds: Optional[int] = Field(
        default=None,
        ge=1,
        le=120,
        description="API request timeout",
    )
    user_agent: str = Field(default_factory=get_user_agent, description="User-Agent header")

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v):
        """Validate base URL scheme and strip the trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("API base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("stop_point_id", "line_id", "app_key")
    @classmethod
    def validate_optional_text(cls, v):
        """Treat blank values as unset."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    def _with_key(self, url: str, params: Optional[dict] = None) -> str:
        """Append query parameters and the app key if configured."""
        query = dict(params or {})
        if self.app_key:
            query["app_key"] = self.app_key
        if not query:
            return url
        return f"{url}?{urlencode(query)}"

    def arrivals_url(self) -> str:
        """Get the StopPoint arrivals URL."""
        if not self.stop_point_id:
            raise ValueError("stop_point_id is required for arrivals")
        return self._with_key(
            f"{self.api_base_url}/StopPoint/{quote(self.stop_point_id)}/Arrivals"
        )

    def line_status_url(self) -> str:
        """Get the detailed Line status URL."""
        if not self.line_id:
            raise ValueError("line_id is required for line status")
        return self._with_key(
            f"{self.api_base_url}/Line/{quote(self.line_id)}/Status", {"detail": "true"}
        )

    def to_summary_dict(self) -> dict:
        """Get configuration summary for display."""
        return {
            "api_base_url": self.api_base_url,
            "stop_point_id": self.stop_point_id,
            "line_id": self.line_id,
            "timeout_seconds": self.timeout_seconds,
            "app_key_set": self.app_key is not None,
        }


class TubeConfigFactory:
    """Factory for creating tube configurations."""

    @staticmethod
    def create_default_config() -> TubeConfig:
        """Create default tube configuration."""
        logger.info("Creating default tube configuration")
        return TubeConfig()

    @staticmethod
    def create_from_dict(config_dict: dict) -> TubeConfig:
        """Create configuration from dictionary."""
        try:
            config = TubeConfig(**config_dict)
            logger.info("Tube configuration created from dictionary")
            return config
        except (ValidationError, TypeError) as e:
            logger.error(f"Failed to create tube config from dict: {e}")
            raise ConfigurationError(f"Invalid configuration: {e}")

    @staticmethod
    def load_from_file(config_path: Union[str, Path]) -> TubeConfig:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the JSON configuration file

        Raises:
            ConfigurationError: If the file is missing or invalid
        """
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config_dict = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read config file {path}: {e}")
            raise ConfigurationError(f"Failed to read configuration: {e}")

        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration file must contain a JSON object")

        logger.info(f"Loaded tube configuration from {path}")
        return TubeConfigFactory.create_from_dict(config_dict)
