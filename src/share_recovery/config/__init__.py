from .models import DEFAULT_INPUTS, LoggingConfig, RecoveryConfig
from .system import CONFIG_ENV_VAR, CONFIG_FILENAME, load_config, resolve_config_path

__all__ = [
    "DEFAULT_INPUTS",
    "LoggingConfig",
    "RecoveryConfig",
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "load_config",
    "resolve_config_path",
]
