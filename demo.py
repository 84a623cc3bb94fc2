"""
This script shuffles a list of items with random permutations, printing each permutation (with its
fixed points blanked out) followed by the shuffled list.
"""

import argparse
import random

import perma

DEFAULT_ITEMS = [
    'Ananas',
    'Apple',
    'Banana',
    'Lemon',
    'Orange',
    'Peach',
    'Pear',
    'Watermelon',
]

parser = argparse.ArgumentParser('Shuffle a list with random permutations')
parser.add_argument('items', nargs='*', default=DEFAULT_ITEMS, help='Items to shuffle')
parser.add_argument('--rounds', type=int, default=2, help='Number of random permutations to apply')
parser.add_argument('--seed', type=int, default=None, help='Random seed')
parser.add_argument('--stats', action='store_true', help='Print a table of statistics of the permutations used')

args = parser.parse_args()
assert len(args.items) >= 1
assert args.rounds >= 1


def main():
    rand = random.Random(args.seed)
    perms = []

    for i in range(args.rounds):
        if i > 0:
            print()

        perm = perma.Permutation.random(len(args.items), rand=rand)
        perms.append(perm)

        print(f"{perm:cycle}")
        for item in perm.apply(args.items):
            print(item)

    if args.stats:
        print()
        print(perma.stats_frame(perms))


main()
