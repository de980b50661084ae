"""Hash strategies."""

from minimizers.hashing.base import HashStrategy
from minimizers.hashing.lexicographic import LexicographicHash
from minimizers.hashing.xxhash_strategy import XXHashStrategy

__all__ = [
    "HashStrategy",
    "LexicographicHash",
    "XXHashStrategy",
]
