"""Minimizer sampling schemes."""

from __future__ import annotations

from minimizers.errors import UnsupportedSchemeError
from minimizers.hashing.base import HashStrategy
from minimizers.schemes.base import KmerOrderScheme, SamplingScheme
from minimizers.schemes.decycling import Decycling, DoubleDecycling
from minimizers.schemes.miniception import Miniception
from minimizers.schemes.minimizer import RandomMinimizer
from minimizers.schemes.mod_sampling import ModSampling
from minimizers.schemes.rotational_alt import RotationalAlt
from minimizers.schemes.rotational_orig import RotationalOrig

_SCHEME_REGISTRY: dict[str, type[SamplingScheme]] = {
    cls.name: cls
    for cls in (
        ModSampling,
        Miniception,
        RotationalAlt,
        RotationalOrig,
        Decycling,
        DoubleDecycling,
        RandomMinimizer,
    )
}

SCHEME_NAMES: tuple[str, ...] = tuple(_SCHEME_REGISTRY)


def get_scheme(
    name: str,
    w: int,
    k: int,
    t: int | None = None,
    seed: int = 0,
    hasher: HashStrategy | None = None,
) -> SamplingScheme:
    """Instantiate a sampling scheme by name.

    Args:
        name: One of :data:`SCHEME_NAMES`.
        w: Number of k-mers per window.
        k: k-mer length.
        t: t-mer length (``mod_sampling`` and ``miniception``).
        seed: Hash seed.
        hasher: Optional hash strategy override.

    Raises:
        UnsupportedSchemeError: If ``name`` is not registered.
    """
    if name not in _SCHEME_REGISTRY:
        raise UnsupportedSchemeError(f"Unsupported sampling scheme: {name!r}")
    return _SCHEME_REGISTRY[name](w, k, t=t, seed=seed, hasher=hasher)


__all__ = [
    "SCHEME_NAMES",
    "SamplingScheme",
    "KmerOrderScheme",
    "ModSampling",
    "Miniception",
    "RotationalAlt",
    "RotationalOrig",
    "Decycling",
    "DoubleDecycling",
    "RandomMinimizer",
    "get_scheme",
]
