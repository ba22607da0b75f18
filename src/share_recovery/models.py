from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from .errors import InvalidThreshold

# Reconstructed secrets are plain arbitrary-precision integers.
Secret = int


@dataclass(frozen=True)
class Share:
    """A point (x, y) on the secret polynomial."""

    x: int
    y: int


@dataclass(frozen=True)
class ReconstructionProblem:
    """Threshold plus the decoded shares available for one reconstruction."""

    threshold: int
    shares: Tuple[Share, ...] = field(default_factory=tuple)
    total: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int):
            raise InvalidThreshold(f"Threshold must be an integer, got {self.threshold!r}")
        if self.threshold < 1:
            raise InvalidThreshold(f"Threshold must be at least 1, got {self.threshold}")
        # Accept any iterable but store an immutable tuple.
        object.__setattr__(self, "shares", tuple(self.shares))

    @classmethod
    def from_points(cls, threshold: int, points: Iterable[Tuple[int, int]]) -> "ReconstructionProblem":
        return cls(threshold=threshold, shares=tuple(Share(x, y) for x, y in points))
