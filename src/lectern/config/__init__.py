"""Site configuration."""

from lectern.config.exceptions import ConfigError, ConfigFileError, ConfigNotFoundError, ConfigValidationError
from lectern.config.loader import ConfigLoader, load_site_config
from lectern.config.schema import DEFAULT_CONFIG_NAME, SiteConfig

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "ConfigError",
    "ConfigFileError",
    "ConfigLoader",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "SiteConfig",
    "load_site_config",
]
