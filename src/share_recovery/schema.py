"""
Record schema for share documents.

A document is a mapping with one ``keys`` record holding the threshold and any
number of share records keyed by their decimal x identifier::

    {"keys": {"n": 4, "k": 3}, "1": {"base": "10", "value": "4"}, ...}

Each top-level entry is validated against its own variant before any share is
decoded.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from .errors import DuplicateAbscissa, InvalidRecord

KEYS_FIELD = "keys"

_SHARE_ID = re.compile(r"[+-]?[0-9]+")

M = TypeVar("M", bound=BaseModel)


class KeysRecord(BaseModel):
    """Threshold record; ``n`` is informational, ``k`` is authoritative."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    n: StrictInt = Field(ge=0)
    k: StrictInt = Field(ge=1)


class ShareRecord(BaseModel):
    """One share: the radix of ``value`` and the encoded y coordinate."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    base: Union[StrictInt, StrictStr]
    value: StrictStr


class ShareDocument(BaseModel):
    """A validated document: the keys record plus share records by id."""

    keys: KeysRecord
    shares: Dict[str, ShareRecord] = Field(default_factory=dict)


def _format_errors(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "record"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def _validate(model: Type[M], data: Any, record_id: str) -> M:
    if not isinstance(data, Mapping):
        raise InvalidRecord(
            f"Record '{record_id}' must be a mapping, got {type(data).__name__}",
            share_id=None if record_id == KEYS_FIELD else record_id,
        )
    try:
        return model.model_validate(dict(data))
    except ValidationError as exc:
        raise InvalidRecord(
            f"Record '{record_id}' is invalid ({_format_errors(exc)})",
            share_id=None if record_id == KEYS_FIELD else record_id,
        ) from exc


def is_share_id(key: Any) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, str) and _SHARE_ID.fullmatch(key.strip()) is not None


def parse_document(data: Any) -> ShareDocument:
    """Split a raw mapping into its keys record and share records."""
    if not isinstance(data, Mapping):
        raise InvalidRecord(f"Share document must be a mapping, got {type(data).__name__}")
    if KEYS_FIELD not in data:
        raise InvalidRecord(f"Share document is missing the '{KEYS_FIELD}' record")
    keys = _validate(KeysRecord, data[KEYS_FIELD], KEYS_FIELD)
    shares: Dict[str, ShareRecord] = {}
    for key, value in data.items():
        if key == KEYS_FIELD:
            continue
        if not is_share_id(key):
            raise InvalidRecord(f"Record key {key!r} is neither '{KEYS_FIELD}' nor a decimal share id")
        share_id = str(key).strip()
        if share_id in shares:
            raise DuplicateAbscissa(f"Share id {share_id} appears more than once", share_id=share_id)
        shares[share_id] = _validate(ShareRecord, value, share_id)
    return ShareDocument(keys=keys, shares=shares)
