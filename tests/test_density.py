"""Tests for closed-form and empirical density analysis."""

from __future__ import annotations

import pytest

from minimizers.density import (
    closed_form_density,
    count_backward_jumps,
    is_not_forward,
    measure_density,
    redundancy_in_density_as_factor,
    redundancy_in_density_in_perc,
)
from minimizers.errors import InvalidParameterError, UnsupportedSchemeError
from minimizers.schemes.minimizer import RandomMinimizer
from minimizers.schemes.mod_sampling import ModSampling
from minimizers.utils import random_sequence


def test_closed_form_density_miniception() -> None:
    """Miniception density is 1.67 / w."""
    assert closed_form_density("miniception", k=15, w=10, t=1) == pytest.approx(0.167)


def test_closed_form_density_mod_sampling_with_t_equal_k() -> None:
    """With t == k mod-sampling is the random minimizer, density 2 / (w + 1)."""
    for w in (2, 5, 10, 24):
        assert closed_form_density("mod_sampling", k=21, w=w, t=21) == pytest.approx(2 / (w + 1))


def test_closed_form_density_mod_sampling_aligned() -> None:
    """w=8, k=17, t=9: charged offsets 0, 8 and 16 of 17 give 3/17."""
    assert closed_form_density("mod_sampling", k=17, w=8, t=9) == pytest.approx(3 / 17)


def test_closed_form_density_mod_sampling_with_correction() -> None:
    """Misaligned parameters subtract the correction term."""
    # (w + k - 1 - t) % w = 13 % 8 = 5 != 7
    expected = (1 + 2 - 1 / 14) / 15
    assert closed_form_density("mod_sampling", k=11, w=8, t=5) == pytest.approx(expected)


def test_closed_form_density_unknown_scheme() -> None:
    """Only miniception and mod_sampling have closed forms."""
    with pytest.raises(UnsupportedSchemeError):
        closed_form_density("decycling", k=15, w=10, t=1)


def test_redundancy_helpers() -> None:
    """Redundancy is reported as factor and as percentage."""
    assert redundancy_in_density_as_factor(0.25, 0.2) == pytest.approx(1.25)
    assert redundancy_in_density_in_perc(0.25, 0.2) == pytest.approx(25.0)


@pytest.mark.parametrize(
    "k, w, t, expected",
    [
        # (w + k - t - 1) % w = 9 % 5 = 4, not below w - 2 = 3
        (10, 5, 5, False),
        # 11 % 4 = 3, not below 2
        (10, 4, 2, False),
        # 15 % 10 = 5, below 8
        (11, 10, 5, True),
        # t == k: (w - 1) % w = w - 1
        (7, 6, 7, False),
    ],
)
def test_is_not_forward(k: int, w: int, t: int, expected: bool) -> None:
    """Predicate matches the backward-jump case analysis."""
    assert is_not_forward(k, w, t) is expected


def test_is_not_forward_rejects_invalid_parameters() -> None:
    """w < 2 and t > k are rejected."""
    with pytest.raises(InvalidParameterError):
        is_not_forward(10, 1, 5)
    with pytest.raises(InvalidParameterError):
        is_not_forward(5, 4, 6)


@pytest.mark.parametrize("k, w, t", [(10, 5, 5), (10, 4, 2), (11, 10, 5)])
def test_backward_jumps_agree_with_predicate(k: int, w: int, t: int) -> None:
    """Simulated mod-sampling jumps backwards exactly when the predicate says so."""
    scheme = ModSampling(w=w, k=k, t=t, seed=9)
    jumps = count_backward_jumps(scheme, random_sequence(20_000, seed=4))
    assert (jumps > 0) is is_not_forward(k, w, t)


def test_measured_density_random_minimizer() -> None:
    """Random minimizer density is close to 2 / (w + 1)."""
    scheme = RandomMinimizer(w=10, k=11, seed=1)
    density = measure_density(scheme, random_sequence(20_000, seed=8))
    assert density == pytest.approx(2 / 11, abs=0.02)


def test_measured_density_mod_sampling_matches_closed_form() -> None:
    """Empirical mod-sampling density tracks the closed form."""
    scheme = ModSampling(w=8, k=17, t=9, seed=3)
    density = measure_density(scheme, random_sequence(20_000, seed=6))
    assert density == pytest.approx(closed_form_density("mod_sampling", 17, 8, 9), abs=0.015)


def test_measured_density_same_for_batch_and_stream() -> None:
    """Both paths sample the same k-mers."""
    scheme = ModSampling(w=5, k=9, t=4, seed=2)
    sequence = random_sequence(500, seed=1)
    assert measure_density(scheme, sequence, stream=True) == measure_density(
        scheme, sequence, stream=False
    )
