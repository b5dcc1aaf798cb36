#!/usr/bin/env python3
"""
Configuration Management for Expend

Handles environment-based configuration with secure defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import click
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_EXPENSIFY_BASE_URL = "https://integrations.expensify.com"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class ExpensifyConfig:
    """Expensify Integration Server configuration."""

    user_id: str | None = None
    user_secret: str | None = None
    base_url: str = DEFAULT_EXPENSIFY_BASE_URL
    timeout: int = 30


@dataclass
class Config:
    """
    Main configuration class for expend.

    Loads configuration from environment variables with secure defaults
    and validation for each environment type.
    """

    environment: Environment

    # Directory holding named <context>.json files
    context_dir: Path

    expensify: ExpensifyConfig

    # Optional YAML file merged over the built-in rate table
    rates_file: Path | None = None

    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("EXPEND_ENV", "development"))

        if env == Environment.TEST:
            default_context_dir = Path(tempfile.gettempdir()) / "test_expend_contexts"
        else:
            default_context_dir = Path(click.get_app_dir("expend"))
        context_dir = Path(os.getenv("EXPEND_CONTEXT_DIR", str(default_context_dir))).expanduser()

        expensify = ExpensifyConfig(
            user_id=os.getenv("EXPENSIFY_USER_ID") or None,
            user_secret=os.getenv("EXPENSIFY_USER_SECRET") or None,
            base_url=os.getenv("EXPENSIFY_BASE_URL", DEFAULT_EXPENSIFY_BASE_URL),
            timeout=int(os.getenv("EXPENSIFY_TIMEOUT", "30")),
        )

        rates_file = os.getenv("EXPEND_RATES_FILE")

        return cls(
            environment=env,
            context_dir=context_dir,
            expensify=expensify,
            rates_file=Path(rates_file).expanduser() if rates_file else None,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.expensify.user_id and not self.expensify.user_secret:
            errors.append("EXPENSIFY_USER_SECRET is required when EXPENSIFY_USER_ID is provided")
        if self.expensify.user_secret and not self.expensify.user_id:
            errors.append("EXPENSIFY_USER_ID is required when EXPENSIFY_USER_SECRET is provided")

        if self.expensify.timeout <= 0:
            errors.append("Expensify timeout must be positive")

        if self.rates_file is not None and not self.rates_file.is_file():
            errors.append(f"rates_file does not exist: {self.rates_file}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # Keep request internals quiet unless debugging
        if not self.debug:
            logging.getLogger("urllib3").setLevel(logging.WARNING)

    def get_sensitive_fields(self) -> list:
        """Get list of field names that contain sensitive data."""
        return ["expensify.user_secret"]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, ExpensifyConfig):
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    full_field_name = f"{field_name}.{nested_name}"
                    if not include_sensitive and nested_value and full_field_name in self.get_sensitive_fields():
                        nested_dict[nested_name] = "***REDACTED***"
                    else:
                        nested_dict[nested_name] = nested_value
                result[field_name] = nested_dict
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
