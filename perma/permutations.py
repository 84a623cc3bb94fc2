"""
Functions for working with permutations of the integers {1, ..., n}.

A permutation σ is stored in "word" notation: the tuple (σ(1), ..., σ(n)). Positions in the tuple are
0-based, values are 1-based, so σ(i) = word[i - 1]. Most functions in this module expect to be given a
permutation in word form (where the exact type of the object may be any sequence), and return
permutations in word form as a tuple. The Permutation class at the bottom wraps a word into an
immutable, validated value and delegates to these functions.

Composition is left-to-right: compose(x, y) applies x first, and then y.
"""
from __future__ import annotations

import dataclasses
import functools
import operator
import random
from typing import Iterable, Literal, Sequence, TypeVar

import numpy as np
import numpy.typing as npt

T = TypeVar('T')


class InvalidPermutation(ValueError):
    """The given values are not a bijection on {1, ..., n}."""


class CountMismatch(ValueError):
    """Two permutations which should have the same order do not."""


class LengthMismatch(ValueError):
    """A sequence has a different length to the order of the permutation acting on it."""


def is_permutation(word: Sequence[int]) -> bool:
    """
    Check that word is a permutation of the integers {1, ..., n} where n = len(word). The empty word is
    not a permutation.

    >>> words = [(), (1,), (1, 2), (1, 3), (1, 1, 3), (3, 2, 1), (0, 1)]
    >>> [is_permutation(word) for word in words]
    [False, True, True, False, False, True, False]
    """
    if len(word) == 0:
        return False

    # Once all entries are known to lie in [1, n], bitwise-or them into a bitmask of their union. This
    # should be 2^(n+1) - 2 (bits 1 through n set), and any duplicate will leave a zero somewhere.
    if min(word) != 1 or max(word) != len(word):
        return False

    mask = functools.reduce(operator.or_, (1 << x for x in word), 0)
    return mask == 2**(len(word) + 1) - 2


def identity(n: int) -> tuple[int, ...]:
    """
    The identity permutation of S_n.

    >>> [identity(n) for n in [1, 2, 3]]
    [(1,), (1, 2), (1, 2, 3)]
    """
    return tuple(range(1, n + 1))


def apply(word: Sequence[int], seq: Sequence[T]) -> list[T]:
    """
    Scatter the elements of seq through the permutation: the element at position i is moved to
    position word[i] - 1. The input is left untouched.

    >>> apply((3, 1, 2), ['a', 'b', 'c'])
    ['b', 'c', 'a']
    """
    seq = list(seq)
    if len(seq) != len(word):
        raise LengthMismatch(f"Cannot apply a permutation of order {len(word)} to a sequence of length {len(seq)}")

    result: list = [None] * len(word)
    for i, x in enumerate(seq):
        result[word[i] - 1] = x

    return result


def compose(x: Sequence[int], y: Sequence[int]) -> tuple[int, ...]:
    """
    Compose two permutations (x, y) -> xy. This composition is left-to-right, i.e. the result applies x,
    then y: (xy)(i) = y(x(i)).

    >>> compose((3, 1, 2), (2, 1, 3))
    (3, 2, 1)
    """
    if len(x) != len(y):
        raise CountMismatch(f"Cannot compose permutations of different orders {len(x)} and {len(y)}")

    return tuple(y[xi - 1] for xi in x)


def inverse(word: Sequence[int]) -> tuple[int, ...]:
    """
    The inverse of a permutation, found by scattering the identity through it.

    >>> inverse((3, 1, 2))
    (2, 3, 1)
    >>> inverse((1,))
    (1,)
    """
    return tuple(apply(word, identity(len(word))))


def next_word(word: Sequence[int]) -> tuple[int, ...]:
    """
    The lexicographic successor of a permutation. The last permutation (the descending one) wraps
    around to the identity, so iterating this from the identity visits all of S_n and then returns.

    >>> next_word((1, 2, 3))
    (1, 3, 2)
    >>> next_word((1, 3, 2))
    (2, 1, 3)
    >>> next_word((3, 2, 1))
    (1, 2, 3)
    """
    n = len(word)

    # Find the last ascent k, i.e. word[k] < word[k+1]. Everything after k is descending.
    k = n - 2
    while k >= 0 and word[k] > word[k + 1]:
        k -= 1

    if k < 0:
        return identity(n)

    # The rightmost entry after k which still exceeds word[k].
    t = n - 1
    while word[t] < word[k]:
        t -= 1

    succ = list(word)
    succ[k], succ[t] = succ[t], succ[k]
    succ[k + 1:] = reversed(succ[k + 1:])
    return tuple(succ)


def disorders(word: Sequence[int]) -> int:
    """
    Count the disorders (inversions) of a permutation, i.e. pairs i < j with word[i] > word[j]. This is
    the O(n^2) straightforward method, which is fine for the sizes we deal with.

    >>> disorders((1, 2, 3))
    0
    >>> disorders((3, 1, 2))
    2
    >>> disorders((3, 2, 1))
    3
    """
    return sum(1 for i in range(len(word)) for j in range(i + 1, len(word)) if word[i] > word[j])


def moved_points(word: Sequence[int]) -> int:
    """
    The number of positions which are not fixed points.

    >>> moved_points((1, 2, 3))
    0
    >>> moved_points((2, 1, 3))
    2
    """
    return sum(1 for i, x in enumerate(word, 1) if x != i)


def first_cycle(word: Sequence[int]) -> tuple[int, ...]:
    """
    Return the cycle of the permutation through its first non-fixed position, as a permutation which is
    the identity away from that orbit. If the permutation is the identity, so is the result.

    >>> first_cycle((1, 3, 2, 5, 4))
    (1, 3, 2, 4, 5)
    >>> first_cycle((1, 2))
    (1, 2)
    """
    n = len(word)
    cycle = list(identity(n))

    start = next((i for i in range(n) if word[i] != i + 1), None)
    if start is None:
        return tuple(cycle)

    # Walk the orbit of start. Each step records one new position, so this finishes within n steps.
    pos = start
    for _ in range(n):
        cycle[pos] = word[pos]
        pos = word[pos] - 1
        if pos == start:
            break

    assert pos == start, f"Orbit of {start + 1} in {word} did not close."
    return tuple(cycle)


def reduce_cycle(word: Sequence[int], cycle: Sequence[int]) -> tuple[int, ...]:
    """
    Remove a cycle from a permutation, by making every position moved by the cycle a fixed point.

    >>> reduce_cycle((1, 3, 2, 5, 4), (1, 3, 2, 4, 5))
    (1, 2, 3, 5, 4)
    """
    if len(word) != len(cycle):
        raise CountMismatch(f"Cannot reduce a permutation of order {len(word)} by a cycle of order {len(cycle)}")

    return tuple(i if c != i else x for i, (x, c) in enumerate(zip(word, cycle), 1))


def factorize(word: Sequence[int]) -> list[tuple[int, ...]]:
    """
    Return a list of disjoint cycles whose product is the permutation. Cycles are ordered by the
    smallest position they move. The identity has no cycles.

    >>> factorize((1, 3, 2, 5, 4))
    [(1, 3, 2, 4, 5), (1, 2, 3, 5, 4)]
    >>> factorize((2, 3, 1))
    [(2, 3, 1)]
    >>> factorize((1, 2, 3))
    []
    """
    cycles = []
    residual = tuple(word)
    cycle = first_cycle(residual)
    while moved_points(cycle) > 0:
        cycles.append(cycle)
        residual = reduce_cycle(residual, cycle)
        cycle = first_cycle(residual)

    return cycles


@dataclasses.dataclass(init=False, frozen=True, order=True)
class Permutation:
    """
    An immutable permutation of {1, ..., n}, stored as the word (σ(1), ..., σ(n)). The comparison and
    hashing come from the fields (n, word), so permutations are ordered first by their order n, and then
    lexicographically.

    >>> p = Permutation([3, 1, 2])
    >>> p
    Permutation((3, 1, 2))
    >>> print(p.inverse())
    (2, 3, 1)
    >>> p * p.inverse() == Permutation.identity(3)
    True
    >>> p.apply(['a', 'b', 'c'])
    ['b', 'c', 'a']
    """
    n: int
    word: tuple[int, ...]

    def __init__(self, values: Iterable[int]):
        try:
            word = tuple(operator.index(x) for x in values)
        except TypeError as exc:
            raise InvalidPermutation(f"Permutation entries must be integers, got {values!r}") from exc

        if not is_permutation(word):
            raise InvalidPermutation(f"{word!r} is not a permutation of 1, ..., {len(word)}")

        object.__setattr__(self, 'n', len(word))
        object.__setattr__(self, 'word', word)

    @classmethod
    def identity(cls, n: int) -> Permutation:
        """The identity permutation of order n ≥ 1."""
        if n < 1:
            raise InvalidPermutation(f"A permutation must have order at least 1, not {n}")

        return cls(identity(n))

    @classmethod
    def random(cls, n: int, rand: random.Random | None = None) -> Permutation:
        """
        Sample a permutation of order n uniformly at random. This draws without replacement from a pool
        of {1, ..., n}, moving the last remaining element into the hole left by each draw.

        Every call without an explicit rand creates its own random.Random, so no random state is shared
        between threads. Pass rand to get reproducible results.
        """
        if n < 1:
            raise InvalidPermutation(f"A permutation must have order at least 1, not {n}")

        rand = rand if rand is not None else random.Random()
        pool = list(range(1, n + 1))
        word = []
        for remaining in range(n, 1, -1):
            m = rand.randrange(remaining)
            word.append(pool[m])
            pool[m] = pool[remaining - 1]

        word.append(pool[0])
        return cls(word)

    @classmethod
    def from_matrix(cls, matrix: npt.ArrayLike) -> Permutation:
        """
        Recover a permutation from its permutation matrix, the inverse of to_matrix().

        >>> Permutation.from_matrix([[0, 0, 1], [1, 0, 0], [0, 1, 0]])
        Permutation((3, 1, 2))
        """
        arr = np.asarray(matrix)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1] or arr.shape[0] == 0:
            raise InvalidPermutation(f"A permutation matrix must be square and non-empty, got shape {arr.shape}")

        is_perm_matrix = (
            np.isin(arr, (0, 1)).all()
            and (arr.sum(axis=0) == 1).all()
            and (arr.sum(axis=1) == 1).all()
        )
        if not is_perm_matrix:
            raise InvalidPermutation("Matrix should have a single 1 in each row and column, and 0 elsewhere")

        return cls(int(j) + 1 for j in np.argmax(arr, axis=1))

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, index: int) -> int:
        return self.word[index]

    def __iter__(self):
        return iter(self.word)

    def __call__(self, i: int) -> int:
        """The image σ(i) of a point 1 ≤ i ≤ n."""
        if not 1 <= i <= self.n:
            raise IndexError(f"{i} is not in the domain 1, ..., {self.n}")

        return self.word[i - 1]

    def apply(self, seq: Sequence[T]) -> list[T]:
        """Return a new list where the element at position i of seq has moved to position σ(i+1) - 1."""
        return apply(self.word, seq)

    def multiply(self, other: Permutation) -> Permutation:
        """The product which applies self first, and then other."""
        return Permutation(compose(self.word, other.word))

    def __mul__(self, other):
        if isinstance(other, Permutation):
            return self.multiply(other)

        return NotImplemented

    def inverse(self) -> Permutation:
        return Permutation(inverse(self.word))

    def next(self) -> Permutation:
        """The lexicographic successor, wrapping around to the identity after the last permutation."""
        return Permutation(next_word(self.word))

    def disorders(self) -> int:
        return disorders(self.word)

    def is_odd(self) -> bool:
        return self.disorders() % 2 != 0

    def sign(self) -> int:
        return -1 if self.is_odd() else 1

    def is_transposition(self) -> bool:
        """Check whether exactly two positions differ from the identity, i.e. this swaps two points."""
        return moved_points(self.word) == 2

    def factorization(self) -> list[Permutation]:
        """
        Factor the permutation into disjoint cycles, each given as a permutation of the same order. Their
        product (in any order) is the original permutation.

        >>> [str(c) for c in Permutation([2, 1, 4, 5, 3]).factorization()]
        ['(2, 1, 3, 4, 5)', '(1, 2, 4, 5, 3)']
        """
        return [Permutation(cycle) for cycle in factorize(self.word)]

    @staticmethod
    def cycle_length(cycle: Permutation) -> int:
        """How many points a cycle moves. The identity has length 0."""
        return moved_points(cycle.word)

    def to_matrix(self) -> npt.NDArray:
        """
        The permutation matrix M with M[i, σ(i+1) - 1] = 1. Row vectors transform like apply(), that is
        x @ p.to_matrix() == p.apply(x), and hence (p * q).to_matrix() == p.to_matrix() @ q.to_matrix().

        >>> Permutation([3, 1, 2]).to_matrix()
        array([[0, 0, 1],
               [1, 0, 0],
               [0, 1, 0]])
        """
        matrix = np.zeros((self.n, self.n), dtype=int)
        matrix[np.arange(self.n), np.array(self.word) - 1] = 1
        return matrix

    def fmt(self, mode: Literal[None, 'cycle', 'full'] = None) -> str:
        """
        Format the permutation. The default lists the values; 'cycle' shows fixed points as '_'; 'full'
        spells out the mapping. Any other mode falls back to the default.

        >>> p = Permutation([2, 1, 3])
        >>> p.fmt(), p.fmt('cycle'), p.fmt('full')
        ('(2, 1, 3)', '(2, 1, _)', '(1 -> 2, 2 -> 1, 3 -> 3)')
        """
        if mode == 'cycle':
            entries = ['_' if x == i else str(x) for i, x in enumerate(self.word, 1)]
        elif mode == 'full':
            entries = [f'{i} -> {x}' for i, x in enumerate(self.word, 1)]
        else:
            entries = [str(x) for x in self.word]

        return '(' + ', '.join(entries) + ')'

    def cycle_str(self) -> str:
        return self.fmt('cycle')

    def __str__(self):
        return self.fmt()

    def __format__(self, format_spec: str) -> str:
        return self.fmt(format_spec or None)

    def __repr__(self):
        return f'Permutation({self.word!r})'
