"""Configuration loader for ``config.yaml``."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from lectern.config.exceptions import ConfigFileError, ConfigNotFoundError, ConfigValidationError
from lectern.config.schema import DEFAULT_CONFIG_NAME, ENV_PREFIX, SiteConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and validates the site configuration.

    Priority (highest to lowest):
    1. Environment variables (``LECTERN_<FIELD>``)
    2. Config file
    3. Defaults
    """

    def __init__(self, site_root: Path | None = None) -> None:
        self.site_root = site_root if site_root is not None else Path.cwd()

    def load(self, config_path: Path | None = None) -> SiteConfig:
        """Load ``config_path``, or ``config.yaml`` under the site root.

        When an explicit path is given, relative paths inside it resolve against
        the file's own directory.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigFileError: If the file is not valid YAML or not a mapping.
            ConfigValidationError: If the merged values fail validation.

        """
        if config_path is None:
            config_path = self.site_root / DEFAULT_CONFIG_NAME
            site_root = self.site_root
        else:
            site_root = config_path.parent

        file_config = self._load_from_file(config_path)
        env_paths = self._collect_env_override_keys()
        try:
            base = SiteConfig().model_dump(mode="json")
            merged = self._merge_config(base, file_config, env_paths)
            merged["site_root"] = str(site_root.resolve())
            config = SiteConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigValidationError(exc.errors(include_url=False)) from exc

        logger.debug("Loaded configuration from %s", config_path)
        return config

    def _collect_env_override_keys(self) -> set[str]:
        """Return the config keys defined via environment variables."""
        return {key[len(ENV_PREFIX) :].lower() for key in os.environ if key.startswith(ENV_PREFIX)}

    def _merge_config(self, base: dict[str, Any], override: dict[str, Any], env_keys: set[str]) -> dict[str, Any]:
        """Merge file values into ``base``, skipping keys provided via env vars."""
        merged = deepcopy(base)
        for key, value in override.items():
            if str(key).lower() in env_keys:
                continue
            merged[key] = value
        return merged

    def _load_from_file(self, config_path: Path) -> dict[str, Any]:
        if not config_path.is_file():
            raise ConfigNotFoundError(config_path)

        logger.info("Loading config from %s", config_path)
        try:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigFileError(config_path, f"invalid YAML: {e}") from e

        if not isinstance(data, dict):
            msg = f"configuration root must be a mapping, got {type(data).__name__}"
            raise ConfigFileError(config_path, msg)
        return data


def load_site_config(config_path: Path | None = None) -> SiteConfig:
    """Load the site configuration from ``config_path`` or the working directory."""
    return ConfigLoader().load(config_path)
