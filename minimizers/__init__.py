"""minimizers — minimizer sampling schemes over nucleotide streams.

Public API
----------
The entire usable surface is importable directly from ``minimizers``::

    from minimizers import get_scheme, sample_positions, measure_density
    from minimizers.schemes.mod_sampling import ModSampling
    from minimizers.hashing import XXHashStrategy
"""

from __future__ import annotations

# Configuration
from minimizers.config import SchemeConfig, build_scheme, load_scheme_config

# Density analysis
from minimizers.density import (
    closed_form_density,
    count_backward_jumps,
    is_not_forward,
    measure_density,
    redundancy_in_density_as_factor,
    redundancy_in_density_in_perc,
)

# Streaming engine
from minimizers.enumerator import Enumerator

# Errors
from minimizers.errors import (
    InvalidParameterError,
    InvariantViolatedError,
    MinimizerError,
    UnsupportedSchemeError,
)

# Hash strategies
from minimizers.hashing import HashStrategy, LexicographicHash, XXHashStrategy
from minimizers.params import SchemeParameters

# Drivers
from minimizers.sampling import iter_windows, sample_positions, sampled_kmer_positions

# Schemes
from minimizers.schemes import SCHEME_NAMES, SamplingScheme, get_scheme

# Sequence utilities
from minimizers.utils import encode_sequence, random_sequence, validate_sequence

__version__ = "0.1.0"

__all__ = [
    # Schemes
    "SCHEME_NAMES",
    "SamplingScheme",
    "SchemeParameters",
    "get_scheme",
    "Enumerator",
    # Hashing
    "HashStrategy",
    "XXHashStrategy",
    "LexicographicHash",
    # Configuration
    "SchemeConfig",
    "load_scheme_config",
    "build_scheme",
    # Drivers
    "iter_windows",
    "sample_positions",
    "sampled_kmer_positions",
    # Density analysis
    "closed_form_density",
    "redundancy_in_density_as_factor",
    "redundancy_in_density_in_perc",
    "is_not_forward",
    "measure_density",
    "count_backward_jumps",
    # Errors
    "MinimizerError",
    "InvalidParameterError",
    "UnsupportedSchemeError",
    "InvariantViolatedError",
    # Sequence utilities
    "encode_sequence",
    "validate_sequence",
    "random_sequence",
    "__version__",
]
