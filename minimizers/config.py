"""Scheme configuration objects and loaders."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from omegaconf import DictConfig, OmegaConf

from minimizers.errors import UnsupportedSchemeError
from minimizers.hashing.base import HashStrategy
from minimizers.params import SchemeParameters
from minimizers.schemes import SCHEME_NAMES, SamplingScheme, get_scheme


@dataclass
class SchemeConfig:
    """Configuration for one sampling scheme instance.

    Attributes:
        name: Scheme identifier, one of :data:`~minimizers.schemes.SCHEME_NAMES`.
        w: Number of k-mers per window.
        k: k-mer length.
        t: t-mer length; ``None`` means ``k``.
        seed: Hash seed.
    """

    name: str
    w: int
    k: int
    t: Optional[int] = None
    seed: int = 0


def load_scheme_config(source: str | Path | dict[str, Any] | DictConfig) -> SchemeConfig:
    """Load and validate a scheme configuration.

    Args:
        source: Path to a YAML file, a plain mapping, or a ``DictConfig``.
            A top-level ``scheme`` key is unwrapped if present.

    Returns:
        A validated :class:`SchemeConfig`.

    Raises:
        FileNotFoundError: If a path is given and does not exist.
        UnsupportedSchemeError: If the scheme name is unknown.
        InvalidParameterError: If ``(w, k, t, seed)`` is invalid.
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Missing config: {path}")
        cfg = OmegaConf.load(path)
    elif isinstance(source, DictConfig):
        cfg = source
    else:
        cfg = OmegaConf.create(source)
    if "scheme" in cfg:
        cfg = cfg.scheme

    merged = OmegaConf.merge(OmegaConf.structured(SchemeConfig), cfg)
    config: SchemeConfig = OmegaConf.to_object(merged)
    if config.name not in SCHEME_NAMES:
        raise UnsupportedSchemeError(f"Unsupported sampling scheme: {config.name!r}")
    SchemeParameters(w=config.w, k=config.k, t=config.t, seed=config.seed)
    return config


def build_scheme(
    source: str | Path | dict[str, Any] | DictConfig | SchemeConfig,
    hasher: HashStrategy | None = None,
) -> SamplingScheme:
    """Instantiate the scheme described by *source*."""
    config = source if isinstance(source, SchemeConfig) else load_scheme_config(source)
    return get_scheme(
        config.name, config.w, config.k, t=config.t, seed=config.seed, hasher=hasher
    )
