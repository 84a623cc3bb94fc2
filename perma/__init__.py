from .permutations import CountMismatch, InvalidPermutation, LengthMismatch, Permutation
from .stats import DEFAULT_STATS, Stats, stats_frame

__all__ = [
    "CountMismatch",
    "DEFAULT_STATS",
    "InvalidPermutation",
    "LengthMismatch",
    "Permutation",
    "Stats",
    "stats_frame",
]
