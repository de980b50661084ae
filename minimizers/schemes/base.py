"""Sampling scheme interfaces."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from minimizers.enumerator import Enumerator
from minimizers.hashing.base import HashStrategy
from minimizers.hashing.xxhash_strategy import XXHashStrategy
from minimizers.params import SchemeParameters
from minimizers.utils import encode_sequence

logger = logging.getLogger(__name__)


class SamplingScheme(ABC):
    """Base interface for minimizer sampling schemes.

    Every scheme selects, for each window of ``w`` consecutive k-mers, the
    0-based offset of one k-mer. Two entry points must agree exactly:
    :meth:`sample_batch` recomputes the answer from the window alone, while
    :meth:`sample_stream` maintains state across consecutive windows.
    """

    name: str = ""

    def __init__(
        self,
        w: int,
        k: int,
        t: int | None = None,
        seed: int = 0,
        hasher: HashStrategy | None = None,
    ) -> None:
        """Initialize the scheme.

        Args:
            w: Number of k-mers per window.
            k: k-mer length.
            t: t-mer length, for schemes that sample t-mers.
            seed: Hash seed.
            hasher: Hash strategy; defaults to :class:`XXHashStrategy`.
        """
        self.params = SchemeParameters(w=w, k=k, t=t, seed=seed)
        self.hasher = hasher if hasher is not None else XXHashStrategy()
        self._validate()
        logger.debug(f"Created {self.name} scheme with {self.params}")

    @property
    def w(self) -> int:
        return self.params.w

    @property
    def k(self) -> int:
        return self.params.k

    @property
    def t(self) -> int:
        return self.params.t

    @property
    def seed(self) -> int:
        return self.params.seed

    def _validate(self) -> None:
        """Check scheme-specific parameter constraints."""

    def _hash(self, element: bytes) -> int:
        return self.hasher.hash(element, self.params.w, len(element), self.params.seed)

    def _check_window(self, window: bytes | str) -> bytes:
        window = encode_sequence(window)
        if len(window) != self.params.window_length:
            raise ValueError(
                f"{self.name} expects windows of length {self.params.window_length}, "
                f"got {len(window)}"
            )
        return window

    @abstractmethod
    def sample_batch(self, window: bytes | str) -> int:
        """Return the selected k-mer offset in ``[0, w)`` for a single window."""

    @abstractmethod
    def sample_stream(self, window: bytes | str, clear: bool = False) -> int:
        """Return the selected k-mer offset for the next window of a stream.

        Args:
            window: The current window. Unless ``clear`` is set, it must be
                the previous window shifted by one symbol; only its rightmost
                element is read.
            clear: First window of a new, independent stream.
        """

    @abstractmethod
    def clear(self) -> None:
        """Reset streaming state."""


class KmerOrderScheme(SamplingScheme):
    """Scheme that picks the leftmost k-mer with the smallest order key.

    Subclasses only define :meth:`order_key`; both sampling paths follow.
    """

    def __init__(
        self,
        w: int,
        k: int,
        t: int | None = None,
        seed: int = 0,
        hasher: HashStrategy | None = None,
    ) -> None:
        super().__init__(w, k, t=t, seed=seed, hasher=hasher)
        self._kmers = Enumerator(self.params.w, self.params.k, self.order_key)

    @abstractmethod
    def order_key(self, kmer: bytes) -> Any:
        """Return the totally ordered key of ``kmer``."""

    def _check_minimum(self, key: Any) -> None:
        """Hook run on the winning key of every window."""

    def sample_batch(self, window: bytes | str) -> int:
        window = self._check_window(window)
        k = self.params.k
        best_pos = 0
        best_key = self.order_key(window[:k])
        for i in range(1, self.params.w):
            key = self.order_key(window[i : i + k])
            if key < best_key:
                best_key = key
                best_pos = i
        self._check_minimum(best_key)
        return best_pos

    def sample_stream(self, window: bytes | str, clear: bool = False) -> int:
        window = self._check_window(window)
        self._kmers.eat_window(window, clear)
        self._check_minimum(self._kmers.min_key)
        return self._kmers.next()

    def clear(self) -> None:
        self._kmers.clear()
