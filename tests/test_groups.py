import pytest

from ipgroupmap.groups import (
    GROUP_COLUMN,
    GROUP_LABELS,
    assign_groups,
    group_counts,
    make_rng,
    partition_groups,
)


def test_every_record_gets_a_known_label(records_frame):
    labeled = assign_groups(records_frame, rng=make_rng(7))

    assert labeled[GROUP_COLUMN].isin(GROUP_LABELS).all()
    assert len(labeled) == len(records_frame)


def test_assignment_is_reproducible(records_frame):
    first = assign_groups(records_frame, rng=make_rng(42))
    second = assign_groups(records_frame, rng=make_rng(42))

    assert list(first[GROUP_COLUMN]) == list(second[GROUP_COLUMN])


def test_default_generator_is_seeded(records_frame):
    assert list(assign_groups(records_frame)[GROUP_COLUMN]) == list(assign_groups(records_frame)[GROUP_COLUMN])


def test_seed_changes_assignment(records_frame):
    first = assign_groups(records_frame, rng=make_rng(1))
    second = assign_groups(records_frame, rng=make_rng(2))

    assert list(first[GROUP_COLUMN]) != list(second[GROUP_COLUMN])


def test_assignment_leaves_input_untouched(records_frame):
    before = records_frame.copy()

    labeled = assign_groups(records_frame, rng=make_rng(3))

    assert GROUP_COLUMN not in records_frame.columns
    assert records_frame.equals(before)
    assert labeled.drop(columns=[GROUP_COLUMN]).equals(before)


def test_partition_is_disjoint_and_covering(records_frame):
    labeled = assign_groups(records_frame, rng=make_rng(11))

    views = partition_groups(labeled)

    assert list(views) == list(GROUP_LABELS)
    seen = []
    for label, view in views.items():
        assert (view[GROUP_COLUMN] == label).all()
        seen.extend(view.index)
    assert sorted(seen) == list(labeled.index)
    assert len(seen) == len(set(seen))


def test_partition_allows_empty_views(records_frame):
    labeled = records_frame.assign(**{GROUP_COLUMN: 'Group B'})

    views = partition_groups(labeled)

    assert len(views['Group A']) == 0
    assert len(views['Group B']) == len(records_frame)
    assert len(views['Group C']) == 0


def test_partition_rejects_unknown_label(records_frame):
    labeled = records_frame.assign(**{GROUP_COLUMN: 'Group Z'})

    with pytest.raises(ValueError, match="Group Z"):
        partition_groups(labeled)


def test_empty_record_set(records_frame):
    labeled = assign_groups(records_frame.iloc[0:0], rng=make_rng(5))

    views = partition_groups(labeled)

    assert [len(v) for v in views.values()] == [0, 0, 0]
    assert group_counts(labeled) == {'Group A': 0, 'Group B': 0, 'Group C': 0}


def test_group_counts_sum_to_total(records_frame):
    labeled = assign_groups(records_frame, rng=make_rng(9))

    counts = group_counts(labeled)

    assert list(counts) == list(GROUP_LABELS)
    assert sum(counts.values()) == len(records_frame)
