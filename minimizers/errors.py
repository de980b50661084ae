"""Exception types raised by minimizers."""

from __future__ import annotations


class MinimizerError(Exception):
    """Base class for all minimizers errors."""


class InvalidParameterError(MinimizerError, ValueError):
    """Structurally invalid ``(w, k, t, seed)`` combination."""


class UnsupportedSchemeError(MinimizerError, ValueError):
    """Scheme name not known to the registry or to a closed-form formula."""


class InvariantViolatedError(MinimizerError, RuntimeError):
    """A precondition the scheme relies on did not hold for some window.

    Typically caused by parameters outside the range a scheme was designed
    for (e.g. ``rotational_orig`` with ``k % w != 0``).
    """
