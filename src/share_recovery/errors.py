"""Error taxonomy shared by the decoder, the reconstructor and their callers."""

from __future__ import annotations

from typing import Optional


class ShareRecoveryError(ValueError):
    """Base class for every failure reported by share_recovery."""

    def __init__(self, message: str, *, share_id: Optional[str] = None, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.share_id = share_id
        self.source = source

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        if self.share_id is not None:
            return f"share {self.share_id}: {self.message}"
        return self.message


class DecodeError(ShareRecoveryError):
    """Raised while turning raw records into shares."""


class InvalidBase(DecodeError):
    """Base token is not an integer in [2, 36]."""


class InvalidDigit(DecodeError):
    """A token holds a character that is not a digit of its base."""


class InvalidRecord(DecodeError):
    """The document does not match the keys/share record schema."""


class ReconstructionError(ShareRecoveryError):
    """Raised when a problem instance cannot yield a secret."""


class InvalidThreshold(ReconstructionError):
    """Threshold is below one."""


class InsufficientShares(ReconstructionError):
    """Fewer shares than the threshold."""


class DuplicateAbscissa(ReconstructionError):
    """Two shares carry the same x coordinate."""


class NonIntegerResult(ReconstructionError):
    """Interpolation at zero did not land on an integer."""
