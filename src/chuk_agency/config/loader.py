"""
Configuration Loader
====================

Loads default translation options from YAML and the environment,
validated with Pydantic.

Resolution order (later wins):
1. built-in defaults
2. YAML file (``CHUK_AGENCY_CONFIG``, ``chuk_agency.yaml``,
   ``~/.chuk_agency/config.yaml``)
3. ``CHUK_AGENCY_STRICT`` / ``CHUK_AGENCY_PRESERVE_IDS`` environment variables
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from chuk_agency.compat import convert_translation_options
from chuk_agency.core import Provider, TranslationOptions, get_json_library

from .models import AgencyConfig

logger = logging.getLogger(__name__)

_ENV_OVERRIDES = {
    "CHUK_AGENCY_STRICT": "strict",
    "CHUK_AGENCY_PRESERVE_IDS": "preserve_ids",
}

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigLoader:
    """
    Configuration loader with Pydantic validation.

    Loads configuration from YAML, applies environment overrides and
    validates the result against ``AgencyConfig``.
    """

    def __init__(self, config_path: str | Path | None = None):
        """
        Initialize config loader.

        Args:
            config_path: Optional path to config file. If not provided,
                        searches standard locations.
        """
        self.config_path = Path(config_path) if config_path else None
        self._config: AgencyConfig | None = None
        self._load_env()

    def _load_env(self) -> None:
        """Load environment variables from .env file."""
        env_candidates: list[Path] = [
            Path(".env"),
            Path(".env.local"),
            Path.home() / ".chuk_agency" / ".env",
        ]

        for env_path in env_candidates:
            if env_path.exists():
                logger.info(f"Loading environment from {env_path}")
                load_dotenv(env_path, override=False)
                break

    def _find_config_file(self) -> Path | None:
        """Find configuration file in standard locations."""
        if self.config_path and self.config_path.exists():
            return self.config_path

        env_path_str = os.getenv("CHUK_AGENCY_CONFIG")
        if env_path_str:
            path = Path(env_path_str)
            if path.exists():
                return path

        candidates = [
            Path("chuk_agency.yaml"),
            Path("config/chuk_agency.yaml"),
            Path.home() / ".chuk_agency" / "config.yaml",
        ]

        for candidate in candidates:
            if candidate.exists():
                return candidate

        return None

    def _read_file(self) -> dict[str, Any]:
        config_file = self._find_config_file()
        if not config_file:
            logger.debug("No config file found, using defaults")
            return {}

        logger.info(f"Loading configuration from {config_file}")
        with open(config_file) as f:
            config_data = yaml.safe_load(f)

        if not config_data:
            logger.warning(f"Empty config file: {config_file}, using defaults")
            return {}

        if not isinstance(config_data, dict):
            raise ValueError(
                f"Invalid configuration in {config_file}: expected a mapping"
            )
        return config_data

    @staticmethod
    def _apply_env(config_data: dict[str, Any]) -> dict[str, Any]:
        options = dict(config_data.get("options") or {})
        for env_name, field in _ENV_OVERRIDES.items():
            raw = os.getenv(env_name)
            if raw is not None:
                options[field] = raw.strip().lower() in _TRUTHY
        return {**config_data, "options": options}

    def load(self) -> AgencyConfig:
        """
        Load and validate configuration.

        Returns:
            Validated configuration

        Raises:
            ValueError: If configuration is invalid
        """
        if self._config:
            return self._config

        config_data = self._apply_env(self._read_file())

        try:
            self._config = AgencyConfig.model_validate(config_data)
        except Exception as e:
            raise ValueError(f"Invalid configuration: {e}") from e

        logger.debug(
            f"Configuration loaded: options={self._config.options.model_dump()}, "
            f"json={get_json_library()}"
        )
        return self._config

    @property
    def current(self) -> AgencyConfig | None:
        """Configuration loaded so far, without triggering a load."""
        return self._config

    def reload(self) -> AgencyConfig:
        """Reload configuration from file."""
        self._config = None
        return self.load()


# Global config loader instance
_global_loader: ConfigLoader | None = None


def load_config(config_path: str | Path | None = None) -> AgencyConfig:
    """
    Load global configuration.

    Args:
        config_path: Optional path to config file

    Returns:
        Validated configuration
    """
    global _global_loader

    if _global_loader is None or config_path:
        _global_loader = ConfigLoader(config_path)

    return _global_loader.load()


def get_config() -> AgencyConfig:
    """Get current global configuration (loads if needed)."""
    global _global_loader

    if _global_loader is None:
        _global_loader = ConfigLoader()

    return _global_loader.load()


def reset_config() -> None:
    """Forget the cached configuration; the next access reloads it."""
    global _global_loader
    _global_loader = None


def resolve_options(
    options: TranslationOptions | dict[str, Any] | None,
    provider: Provider = Provider.ANTHROPIC,
) -> TranslationOptions:
    """
    Normalize the ``options`` argument of a translation call.

    ``None`` means "use the configured defaults" when configuration has been
    loaded, built-in defaults otherwise; translators never read files.
    Invalid options raise ``ValidationError`` tagged with ``provider``.
    """
    if options is None:
        if _global_loader is not None and _global_loader.current is not None:
            return _global_loader.current.options
        return TranslationOptions()
    return convert_translation_options(options, provider)
