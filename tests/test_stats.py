import pandas as pd
import pandas.testing as pd_test

from perma import DEFAULT_STATS, Permutation, Stats, stats_frame


def test_s3():
    perms = [Permutation.identity(3)]
    while len(perms) < 6:
        perms.append(perms[-1].next())

    pd_test.assert_frame_equal(
        stats_frame(perms),
        pd.DataFrame(
            columns=['perm', 'n', 'disorders', 'odd', 'transposition', 'moved', 'cycles'],
            data=[
                ('(1, 2, 3)', 3, 0, False, False, 0, 0),
                ('(1, 3, 2)', 3, 1, True, True, 2, 1),
                ('(2, 1, 3)', 3, 1, True, True, 2, 1),
                ('(2, 3, 1)', 3, 2, False, False, 3, 1),
                ('(3, 1, 2)', 3, 2, False, False, 3, 1),
                ('(3, 2, 1)', 3, 3, True, True, 2, 1),
            ],
        ),
    )


def test_selected_stats():
    perms = [Permutation([2, 1, 4, 3]), Permutation([1])]
    df = stats_frame(perms, stats=[Stats.Cycles, Stats.MovedPoints])
    assert list(df.columns) == ['perm', 'cycles', 'moved']
    assert list(df['perm']) == ['(2, 1, 4, 3)', '(1)']
    assert list(df['cycles']) == [2, 0]
    assert list(df['moved']) == [4, 0]


def test_stat_names_are_distinct():
    names = [stat.name for stat in DEFAULT_STATS]
    assert len(names) == len(set(names))
    assert 'perm' not in names
