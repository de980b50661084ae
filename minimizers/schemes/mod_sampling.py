"""Mod-sampling: minimal t-mer position reduced modulo ``w``."""

from __future__ import annotations

from minimizers.enumerator import Enumerator
from minimizers.hashing.base import HashStrategy
from minimizers.schemes.base import SamplingScheme


class ModSampling(SamplingScheme):
    """Select the k-mer at ``p mod w``, ``p`` being the leftmost minimal t-mer.

    A window of ``w`` k-mers contains ``w + k - t`` t-mers; the t-mer with
    the smallest hash fixes the sampled k-mer through its offset modulo
    ``w``. With ``t == k`` this reduces to the random minimizer.
    """

    name = "mod_sampling"

    def __init__(
        self,
        w: int,
        k: int,
        t: int | None = None,
        seed: int = 0,
        hasher: HashStrategy | None = None,
    ) -> None:
        super().__init__(w, k, t=t, seed=seed, hasher=hasher)
        self._tmers = Enumerator(self.w + self.k - self.t, self.t, self._hash)

    def sample_batch(self, window: bytes | str) -> int:
        window = self._check_window(window)
        t = self.t
        num_tmers = self.w + self.k - t
        best_pos = 0
        best_hash = self._hash(window[:t])
        for i in range(1, num_tmers):
            h = self._hash(window[i : i + t])
            if h < best_hash:
                best_hash = h
                best_pos = i
        return best_pos % self.w

    def sample_stream(self, window: bytes | str, clear: bool = False) -> int:
        window = self._check_window(window)
        self._tmers.eat_window(window, clear)
        return self._tmers.next() % self.w

    def clear(self) -> None:
        self._tmers.clear()
