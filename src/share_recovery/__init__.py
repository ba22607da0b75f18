"""
Threshold secret recovery: decode base-encoded shares and reconstruct the secret
by exact Lagrange interpolation at zero.
"""

from .crypto import reconstruct
from .decoder import decode, decode_document, encode_value, format_secret
from .errors import (
    DecodeError,
    DuplicateAbscissa,
    InsufficientShares,
    InvalidBase,
    InvalidDigit,
    InvalidRecord,
    InvalidThreshold,
    NonIntegerResult,
    ReconstructionError,
    ShareRecoveryError,
)
from .models import ReconstructionProblem, Secret, Share

__all__ = [
    "reconstruct",
    "decode",
    "decode_document",
    "encode_value",
    "format_secret",
    "DecodeError",
    "DuplicateAbscissa",
    "InsufficientShares",
    "InvalidBase",
    "InvalidDigit",
    "InvalidRecord",
    "InvalidThreshold",
    "NonIntegerResult",
    "ReconstructionError",
    "ShareRecoveryError",
    "ReconstructionProblem",
    "Secret",
    "Share",
]
