"""Configuration models and loaders for imgdigest."""

from .loader import CONFIG_ENV_VAR, ConfigError, DEFAULT_CONFIG_PATH, SEARCH_PATH_ENV_VAR, dump_example_config, load_config
from .models import AcquisitionConfig, DigestConfig, ImgDigestConfig, LoggingConfig

__all__ = [
    "AcquisitionConfig",
    "CONFIG_ENV_VAR",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "DigestConfig",
    "ImgDigestConfig",
    "LoggingConfig",
    "SEARCH_PATH_ENV_VAR",
    "dump_example_config",
    "load_config",
]
