from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..decoder import INVALID_SHARE_POLICIES
from ..utils.files import read_mapping

DEFAULT_INPUTS = ("shares1.json", "shares2.json")
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass
class LoggingConfig:
    level: str = "INFO"
    json_output: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Optional[Dict[str, Any]]) -> "LoggingConfig":
        if not data:
            return cls()
        for key in data:
            if key not in ("level", "json_output", "log_file"):
                raise ValueError(f"Unknown logging key '{key}'")
        level = str(data.get("level", "INFO")).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{level}'")
        log_file = data.get("log_file")
        return cls(
            level=level,
            json_output=bool(data.get("json_output", False)),
            log_file=str(log_file) if log_file else None,
        )


@dataclass
class RecoveryConfig:
    """
    Settings for a batch of reconstructions.

    Attributes:
        inputs: Share documents to process, in order.
        on_invalid_share: "abort" fails a document on its first undecodable share,
            "skip" drops the share and carries on.
        max_workers: Thread pool size for processing documents.
        logging: Log level and output format.
        metrics_port: Port for the Prometheus exporter; disabled when None.
    """

    inputs: List[str] = field(default_factory=lambda: list(DEFAULT_INPUTS))
    on_invalid_share: str = "abort"
    max_workers: int = 4
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    metrics_port: Optional[int] = None

    @classmethod
    def from_file(cls, path: Path) -> "RecoveryConfig":
        return cls.from_dict(read_mapping(Path(path)))

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RecoveryConfig":
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("Recovery config must be a mapping")
        inputs = data.get("inputs", list(DEFAULT_INPUTS))
        if isinstance(inputs, str) or not isinstance(inputs, list):
            raise ValueError("inputs must be a list of paths")
        inputs = [str(p).strip() for p in inputs]
        if any(not p for p in inputs):
            raise ValueError("inputs cannot contain empty paths")
        on_invalid_share = str(data.get("on_invalid_share", "abort")).lower()
        if on_invalid_share not in INVALID_SHARE_POLICIES:
            raise ValueError(f"Unknown on_invalid_share policy '{on_invalid_share}'")
        max_workers = int(data.get("max_workers", 4))
        if max_workers <= 0:
            raise ValueError("max_workers must be positive")
        metrics_port = data.get("metrics_port")
        if metrics_port is not None:
            metrics_port = int(metrics_port)
            if metrics_port <= 0 or metrics_port > 65535:
                raise ValueError("metrics_port must be within 1-65535")
        return cls(
            inputs=inputs,
            on_invalid_share=on_invalid_share,
            max_workers=max_workers,
            logging=LoggingConfig.from_mapping(data.get("logging")),
            metrics_port=metrics_port,
        )
