"""
Tabulating statistics of permutations into a DataFrame.

>>> stats_frame([Permutation([1, 2]), Permutation([2, 1])], stats=[Stats.Disorders, Stats.Odd])
     perm  disorders    odd
0  (1, 2)          0  False
1  (2, 1)          1   True
"""
from __future__ import annotations

import abc
from typing import Generic, Iterable, Sequence, TypeVar

import pandas as pd

from .permutations import Permutation

T = TypeVar('T')


class PermStatBase(Generic[T]):
    name: str

    @staticmethod
    @abc.abstractmethod
    def calculate(perms: Sequence[Permutation]) -> Sequence[T]:
        """Calculate this statistic for each permutation."""


class Stats:
    class Order(PermStatBase[int]):
        """The number of points being permuted."""
        name = 'n'

        @staticmethod
        def calculate(perms: Sequence[Permutation]) -> Sequence[int]:
            return [len(perm) for perm in perms]

    class Disorders(PermStatBase[int]):
        """The number of out-of-order pairs."""
        name = 'disorders'

        @staticmethod
        def calculate(perms: Sequence[Permutation]) -> Sequence[int]:
            return [perm.disorders() for perm in perms]

    class Odd(PermStatBase[bool]):
        name = 'odd'

        @staticmethod
        def calculate(perms: Sequence[Permutation]) -> Sequence[bool]:
            return [perm.is_odd() for perm in perms]

    class Transposition(PermStatBase[bool]):
        name = 'transposition'

        @staticmethod
        def calculate(perms: Sequence[Permutation]) -> Sequence[bool]:
            return [perm.is_transposition() for perm in perms]

    class MovedPoints(PermStatBase[int]):
        """The number of points which are not fixed."""
        name = 'moved'

        @staticmethod
        def calculate(perms: Sequence[Permutation]) -> Sequence[int]:
            return [Permutation.cycle_length(perm) for perm in perms]

    class Cycles(PermStatBase[int]):
        """The number of nontrivial cycles in the disjoint cycle factorization."""
        name = 'cycles'

        @staticmethod
        def calculate(perms: Sequence[Permutation]) -> Sequence[int]:
            return [len(perm.factorization()) for perm in perms]


DEFAULT_STATS = (
    Stats.Order,
    Stats.Disorders,
    Stats.Odd,
    Stats.Transposition,
    Stats.MovedPoints,
    Stats.Cycles,
)


def stats_frame(perms: Iterable[Permutation], stats: Sequence[type[PermStatBase]] = DEFAULT_STATS) -> pd.DataFrame:
    """
    Build a DataFrame with one row per permutation (in the order given), a 'perm' column holding the
    default string form, and then one column per statistic.
    """
    perms = list(perms)
    values = [stat.calculate(perms) for stat in stats]
    df = pd.DataFrame(
        columns=['perm', *[stat.name for stat in stats]],
        data=[
            (str(perm), *[column[i] for column in values])
            for i, perm in enumerate(perms)
        ],
    )
    return df
