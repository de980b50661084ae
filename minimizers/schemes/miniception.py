"""Miniception: only k-mers with a charged context compete."""

from __future__ import annotations

from minimizers.enumerator import Enumerator
from minimizers.errors import InvalidParameterError, InvariantViolatedError
from minimizers.hashing.base import HashStrategy
from minimizers.schemes.base import SamplingScheme


class Miniception(SamplingScheme):
    """Miniception sampling (Zheng, Kingsford and Marçais, 2020).

    Each k-mer is split into ``k - t + 1`` t-mers. The k-mer is *charged*
    when its minimal t-mer sits at the first or the last of those offsets.
    Among the charged k-mers of a window, the leftmost one with the smallest
    k-mer hash is selected.

    Charged k-mers are at most ``k - t`` positions apart, so ``k - t <= w``
    is required for every window to contain one.
    """

    name = "miniception"

    def __init__(
        self,
        w: int,
        k: int,
        t: int | None = None,
        seed: int = 0,
        hasher: HashStrategy | None = None,
    ) -> None:
        super().__init__(w, k, t=t, seed=seed, hasher=hasher)
        self._last_tmer = self.k - self.t
        self._tmers = Enumerator(self._last_tmer + 1, self.t, self._hash)
        self._kmers = Enumerator(self.w, self.k, self._hash)

    def _validate(self) -> None:
        if self.k - self.t > self.w:
            raise InvalidParameterError(
                f"miniception needs k - t <= w, got k={self.k}, t={self.t}, w={self.w}"
            )

    def _is_charged(self, tmers: Enumerator) -> bool:
        tmer_pos = tmers.next()
        return tmer_pos == 0 or tmer_pos == self._last_tmer

    def sample_batch(self, window: bytes | str) -> int:
        window = self._check_window(window)
        k = self.k
        tmers = Enumerator(self._last_tmer + 1, self.t, self._hash)
        best_pos = None
        best_hash = None
        for i in range(self.w):
            kmer = window[i : i + k]
            tmers.eat_window(kmer, clear=i == 0)
            if self._is_charged(tmers):
                h = self._hash(kmer)
                if best_hash is None or h < best_hash:
                    best_hash = h
                    best_pos = i
        if best_pos is None:
            raise InvariantViolatedError(f"no charged context in window {window!r}")
        return best_pos

    def sample_stream(self, window: bytes | str, clear: bool = False) -> int:
        window = self._check_window(window)
        k = self.k
        if clear:
            self._kmers.clear()
        for i in range(0 if clear else self.w - 1, self.w):
            kmer = window[i : i + k]
            self._tmers.eat_window(kmer, clear=i == 0)
            if self._is_charged(self._tmers):
                self._kmers.eat(kmer)
            else:
                self._kmers.skip()
        return self._kmers.next()

    def clear(self) -> None:
        self._tmers.clear()
        self._kmers.clear()
