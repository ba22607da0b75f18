import json
from pathlib import Path
from typing import Any

import yaml

from ..errors import InvalidRecord

YAML_SUFFIXES = {".yaml", ".yml"}


def read_mapping(path: Path) -> Any:
    """Read a JSON document, or YAML when the suffix says so."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidRecord(f"Cannot read {path}: {exc}", source=str(path)) from exc
    # ValueError covers JSONDecodeError and integer literals past the interpreter digit limit.
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return yaml.safe_load(text)
        return json.loads(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise InvalidRecord(f"Invalid document at {path}: {exc}", source=str(path)) from exc
