"""Density analysis for sampling schemes.

The closed-form helpers are pure functions of ``(k, w, t)`` and do not touch
any scheme state. :func:`measure_density` and :func:`count_backward_jumps`
are their empirical counterparts, computed by running a scheme over a
sequence.
"""

from __future__ import annotations

import logging
import math

from minimizers.errors import InvalidParameterError, UnsupportedSchemeError
from minimizers.sampling import sample_positions
from minimizers.schemes.base import SamplingScheme
from minimizers.utils import encode_sequence

logger = logging.getLogger(__name__)


def redundancy_in_density_in_perc(density: float, lower_bound: float) -> float:
    """Excess of *density* over *lower_bound*, in percent."""
    return (density / lower_bound - 1) * 100.0


def redundancy_in_density_as_factor(density: float, lower_bound: float) -> float:
    """Ratio of *density* to *lower_bound*."""
    return density / lower_bound


def is_not_forward(k: int, w: int, t: int) -> bool:
    """Return ``True`` when mod-sampling with ``(k, w, t)`` is not forward.

    Let ``x`` and ``y`` be the offsets of the minimal t-mer in windows ``i``
    and ``i - 1``. The selected position jumps backwards exactly when a new
    t-mer entering at the last offset ``x = w + k - t - 1`` becomes the
    minimum while ``x mod w + 1 < y mod w``. Since ``y mod w`` can reach
    ``w - 1``, a backward jump exists iff ``x mod w < w - 2``.

    ``w`` is added before reducing so the left operand stays non-negative
    when ``t == k``.
    """
    if w < 2:
        raise InvalidParameterError(f"w must be at least 2, got w={w}")
    if t > k:
        raise InvalidParameterError(f"t must not exceed k, got t={t}, k={k}")
    return (w + k - t - 1) % w < w - 2


def closed_form_density(scheme_name: str, k: int, w: int, t: int) -> float:
    """Return the theoretical density of a scheme, ignoring lower-order terms.

    Args:
        scheme_name: ``"miniception"`` or ``"mod_sampling"``.
        k: k-mer length.
        w: Number of k-mers per window.
        t: t-mer length.

    Raises:
        UnsupportedSchemeError: For any other scheme name.
    """
    if scheme_name == "miniception":
        return 1.67 / w
    if scheme_name == "mod_sampling":
        aligned = (w + k - 1 - t) % w == w - 1
        correction = 0.0 if aligned else math.floor(1.0 + (k - 1.0 - t) / w) / (w + k - t)
        return (math.floor(1.0 + (k - t - 1.0) / w) + 2.0 - correction) / (w + k - t + 1.0)
    raise UnsupportedSchemeError(f"No closed-form density for scheme {scheme_name!r}")


def measure_density(
    scheme: SamplingScheme,
    sequence: str | bytes,
    stream: bool = True,
) -> float:
    """Fraction of k-mer positions of *sequence* sampled by *scheme*."""
    data = encode_sequence(sequence)
    positions = sample_positions(scheme, data, stream=stream)
    sampled = {start + offset for start, offset in enumerate(positions)}
    num_kmers = len(data) - scheme.k + 1
    density = len(sampled) / num_kmers
    logger.info(
        f"{scheme.name} (w={scheme.w}, k={scheme.k}, t={scheme.t}): "
        f"{len(sampled)} of {num_kmers} k-mers sampled, density {density:.5f}"
    )
    return density


def count_backward_jumps(
    scheme: SamplingScheme,
    sequence: str | bytes,
    stream: bool = True,
) -> int:
    """Count window advances whose selected absolute position decreases.

    A scheme is forward on *sequence* iff this returns 0.
    """
    positions = sample_positions(scheme, sequence, stream=stream)
    jumps = 0
    for start in range(1, len(positions)):
        if start + positions[start] < start - 1 + positions[start - 1]:
            jumps += 1
    return jumps
