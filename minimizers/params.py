"""Scheme-level parameter objects."""

from __future__ import annotations

from dataclasses import dataclass

from minimizers.errors import InvalidParameterError


@dataclass(frozen=True)
class SchemeParameters:
    """Parameters shared by every sampling scheme.

    Attributes:
        w: Number of candidate k-mers per window (``w >= 2``).
        k: k-mer length.
        t: Length of the auxiliary t-mers (``1 <= t <= k``). Schemes that do
            not sample t-mers ignore it; it defaults to ``k``.
        seed: Seed forwarded to the hash strategy.
    """

    w: int
    k: int
    t: int | None = None
    seed: int = 0

    def __post_init__(self) -> None:
        if self.t is None:
            object.__setattr__(self, "t", self.k)
        if self.w < 2:
            raise InvalidParameterError(f"w must be at least 2, got w={self.w}")
        if self.k < 1:
            raise InvalidParameterError(f"k must be positive, got k={self.k}")
        if not 1 <= self.t <= self.k:
            raise InvalidParameterError(f"t must lie in [1, k], got t={self.t}, k={self.k}")
        if self.seed < 0:
            raise InvalidParameterError(f"seed must be non-negative, got seed={self.seed}")

    @property
    def window_length(self) -> int:
        """Number of symbols spanned by one window (``w + k - 1``)."""
        return self.w + self.k - 1
