"""Locating and loading the recovery configuration file."""

import os
from pathlib import Path
from typing import Optional, Tuple

from .models import RecoveryConfig

CONFIG_FILENAME = "share-recovery.json"
CONFIG_ENV_VAR = "SHARE_RECOVERY_CONFIG"


def resolve_config_path(explicit: Optional[Path] = None) -> Path:
    """
    Resolve the configuration path.

    An explicit path wins, then the SHARE_RECOVERY_CONFIG environment variable,
    then share-recovery.json in the working directory.
    """
    if explicit is not None:
        return Path(explicit).resolve()
    env_value = os.getenv(CONFIG_ENV_VAR)
    if env_value:
        candidate = Path(env_value)
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate
    return (Path.cwd() / CONFIG_FILENAME).resolve()


def load_config(explicit: Optional[Path] = None) -> Tuple[RecoveryConfig, Path]:
    """
    Load the recovery configuration.

    Returns:
        (config, resolved_path); defaults when the file does not exist.

    Raises:
        ValueError: if the file cannot be parsed or holds invalid settings.
    """
    path = resolve_config_path(explicit)
    if not path.exists():
        return RecoveryConfig(), path
    return RecoveryConfig.from_file(path), path
