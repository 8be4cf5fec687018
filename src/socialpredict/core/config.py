"""Configuration management for the SocialPredict client."""

import os
import re
from pathlib import Path
from typing import Any, cast

import yaml
from dotenv import load_dotenv

from socialpredict.core.models import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig


class ConfigError(Exception):
    """Raise when configuration loading or validation fails."""


class ConfigLoader:
    """Load and manage configuration from YAML files with environment variable substitution."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config loader.

        Load environment variables from a ``.env`` file (if present) and
        then read YAML configuration from the given directory.

        Args:
            config_dir: Directory containing config files. Defaults to the
                ``config`` directory shipped inside the package.

        """
        load_dotenv()
        if config_dir is None:
            config_dir = Path(__file__).parent.parent / "config"
        self.config_dir = Path(config_dir)
        self._config: dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML files."""
        settings_file = self.config_dir / "settings.yaml"
        if settings_file.exists():
            with settings_file.open() as f:
                self._config = yaml.safe_load(f) or {}

        # Machine-specific overrides, not committed
        local_settings = self.config_dir / "settings.local.yaml"
        if local_settings.exists():
            with local_settings.open() as f:
                local_config = cast("dict[str, Any]", yaml.safe_load(f) or {})
                self._deep_merge(self._config, local_config)

        self._config = self._substitute_env_vars(self._config)

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> None:
        """Deep merge override dict into base dict.

        Args:
            base: Base dictionary to merge into (modified in place).
            override: Dictionary with values to override.

        """
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], cast("dict[str, Any]", value))
            else:
                base[key] = value

    def _substitute_env_vars(self, config: Any) -> Any:
        """Recursively substitute environment variables in config.

        Supports format: ${VAR_NAME:default_value} or ${VAR_NAME}

        Args:
            config: Configuration value (dict or scalar).

        Returns:
            Configuration with environment variables substituted.

        Raises:
            ConfigError: If a variable is unset and has no default, or a
                reference is embedded inside a longer string.

        """
        if isinstance(config, dict):
            return {
                k: self._substitute_env_vars(v)
                for k, v in config.items()  # pyright: ignore[reportUnknownVariableType]
            }
        if isinstance(config, str) and config.startswith("${") and config.endswith("}"):
            var_expr = config[2:-1]
            if ":" in var_expr:
                var_name, default = var_expr.split(":", 1)
            else:
                var_name, default = var_expr, None

            value = os.getenv(var_name, default)
            if value is None:
                msg = f"Required environment variable ${{{var_name}}} is not set and has no default"
                raise ConfigError(msg)
            return value

        if isinstance(config, str) and re.search(r"\$\{[^}]+\}", config):
            msg = f"Unresolved environment variable reference in: {config}"
            raise ConfigError(msg)

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation key.

        Args:
            key: Configuration key in dot notation (e.g., 'socialpredict.base_url').
            default: Default value if key not found.

        Returns:
            Configuration value.

        """
        keys = key.split(".")
        current: Any = self._config
        for k in keys:
            if isinstance(current, dict):
                current = cast("dict[str, Any]", current).get(k)
                if current is None:
                    return default
            else:
                return default
        return current  # pyright: ignore[reportReturnType]

    def get_client_config(self) -> ClientConfig:
        """Build a ``ClientConfig`` from the ``socialpredict`` section.

        Empty strings count as unset, so ``${SOCIALPREDICT_TOKEN:}`` yields
        no token.

        Returns:
            Client settings with defaults filled in.

        Raises:
            ConfigError: If the section or its values have the wrong type.

        """
        section: Any = self.get("socialpredict", {})
        if not isinstance(section, dict):
            msg = f"socialpredict config must be a dict, got {type(section).__name__}"
            raise ConfigError(msg)
        settings = cast("dict[str, Any]", section)

        headers: Any = settings.get("headers") or {}
        if not isinstance(headers, dict):
            msg = f"socialpredict.headers must be a dict, got {type(headers).__name__}"
            raise ConfigError(msg)

        raw_timeout = settings.get("timeout") or DEFAULT_TIMEOUT
        try:
            return ClientConfig(
                base_url=str(settings.get("base_url") or DEFAULT_BASE_URL),
                token=settings.get("token") or None,
                timeout=float(raw_timeout),
                headers={str(k): str(v) for k, v in headers.items()},  # pyright: ignore[reportUnknownVariableType]
            )
        except ValueError as exc:
            msg = f"Invalid socialpredict config: {exc}"
            raise ConfigError(msg) from exc


_config: ConfigLoader | None = None


def get_config() -> ConfigLoader:
    """Return the global ``ConfigLoader`` singleton, creating it on first use.

    Returns:
        The shared ``ConfigLoader`` instance.

    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = ConfigLoader()
    return _config
