"""Share decoding: raw tokens to arbitrary-precision (x, y) coordinates."""

from __future__ import annotations

import logging
import string
from typing import Any, List, Union

from .errors import DecodeError, InvalidBase, InvalidDigit
from .models import ReconstructionProblem, Share
from .schema import ShareDocument, parse_document

logger = logging.getLogger(__name__)

DIGITS = string.digits + string.ascii_lowercase
MIN_BASE = 2
MAX_BASE = 36

INVALID_SHARE_POLICIES = ("abort", "skip")

# int(str, base) refuses very long strings for non power-of-two bases, so digits
# are converted in slices well below that limit.
_CHUNK = 1000

Token = Union[str, int]


def decode_base(token: Token) -> int:
    if isinstance(token, bool):
        raise InvalidBase(f"Base must be an integer in [{MIN_BASE}, {MAX_BASE}], got {token!r}")
    if isinstance(token, int):
        base = token
    elif isinstance(token, str):
        text = token.strip()
        if not text.isascii() or not text.isdigit():
            raise InvalidBase(f"Base must be an integer in [{MIN_BASE}, {MAX_BASE}], got {token!r}")
        base = int(text)
    else:
        raise InvalidBase(f"Base must be a string or integer, got {type(token).__name__}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f"Base {base} is outside [{MIN_BASE}, {MAX_BASE}]")
    return base


def _parse_digits(text: str, base: int) -> int:
    value = 0
    for start in range(0, len(text), _CHUNK):
        chunk = text[start : start + _CHUNK]
        value = value * base ** len(chunk) + int(chunk, base)
    return value


def _check_digits(text: str, base: int) -> None:
    # Checked before lowercasing: some non-ASCII characters lowercase to ASCII letters.
    allowed = DIGITS[:base] + DIGITS[10:base].upper()
    for pos, char in enumerate(text):
        if char not in allowed:
            raise InvalidDigit(f"Character {char!r} at position {pos} is not a digit in base {base}")


def decode_value(token: str, base: int) -> int:
    """Parse a digit string (0-9, a-z, case-insensitive) in the given base."""
    if not isinstance(token, str):
        raise InvalidDigit(f"Value must be a string, got {type(token).__name__}")
    text = token.strip()
    if not text:
        raise InvalidDigit("Value is empty")
    _check_digits(text, base)
    return _parse_digits(text.lower(), base)


def decode_share_id(token: Token) -> int:
    """Share identifiers are always decimal, optionally signed."""
    if isinstance(token, bool):
        raise InvalidDigit(f"Share id must be a decimal integer, got {token!r}")
    if isinstance(token, int):
        return token
    if not isinstance(token, str):
        raise InvalidDigit(f"Share id must be a string or integer, got {type(token).__name__}")
    text = token.strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if not text:
        raise InvalidDigit(f"Share id {token!r} has no digits")
    _check_digits(text, 10)
    return sign * _parse_digits(text, 10)


def decode(x_token: Token, base_token: Token, value_token: str) -> Share:
    """Decode one raw share into canonical coordinates."""
    share_id = str(x_token).strip()
    try:
        x = decode_share_id(x_token)
        base = decode_base(base_token)
        y = decode_value(value_token, base)
    except DecodeError as exc:
        exc.share_id = share_id
        raise
    return Share(x=x, y=y)


def encode_value(value: int, base: int) -> str:
    """Render an integer as a lowercase digit string in ``base``; inverse of decode_value."""
    base = decode_base(base)
    if value < 0:
        return "-" + encode_value(-value, base)
    if value < base:
        return DIGITS[value]
    step = base**_CHUNK
    chunks: List[str] = []
    while value:
        value, rem = divmod(value, step)
        digits = []
        while rem:
            rem, d = divmod(rem, base)
            digits.append(DIGITS[d])
        chunk = "".join(reversed(digits))
        # Inner chunks keep their leading zeros.
        chunks.append(chunk.rjust(_CHUNK, "0") if value else chunk)
    return "".join(reversed(chunks))


def format_secret(secret: int) -> str:
    """Canonical base-10 form, for secrets of any size."""
    return encode_value(secret, 10)


def decode_document(document: Any, on_invalid_share: str = "abort") -> ReconstructionProblem:
    """
    Validate a share document and decode every share record.

    With ``on_invalid_share="skip"`` shares whose base or value cannot be decoded
    are logged and dropped; with ``"abort"`` the first such error propagates.
    """
    if on_invalid_share not in INVALID_SHARE_POLICIES:
        raise ValueError(f"Unknown invalid-share policy '{on_invalid_share}'")
    if not isinstance(document, ShareDocument):
        document = parse_document(document)
    shares: List[Share] = []
    for share_id, record in document.shares.items():
        try:
            shares.append(decode(share_id, record.base, record.value))
        except (InvalidBase, InvalidDigit) as exc:
            if on_invalid_share == "abort":
                raise
            logger.warning(f"Skipping share {share_id}: {exc.kind}: {exc.message}")
    return ReconstructionProblem(threshold=document.keys.k, shares=tuple(shares), total=document.keys.n)
