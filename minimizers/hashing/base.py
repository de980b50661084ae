"""Hash strategy interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod


class HashStrategy(ABC):
    """Base interface for element hash functions.

    Implementations must be pure and deterministic: the same ``data`` and
    parameters always produce the same integer. Only the ordering of the
    returned values matters to the sampling schemes.
    """

    @abstractmethod
    def hash(self, data: bytes, w: int, length: int, seed: int) -> int:
        """Hash an element of ``length`` bytes sampled from a window of ``w`` k-mers."""
