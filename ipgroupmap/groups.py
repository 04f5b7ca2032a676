import numpy as np
from loguru import logger

from ipgroupmap.config import RANDOM_SEED

GROUP_LABELS = ('Group A', 'Group B', 'Group C')
GROUP_COLUMN = 'group_name'


def make_rng(seed=RANDOM_SEED):
    return np.random.default_rng(seed)


def assign_groups(records, rng=None, labels=GROUP_LABELS):
    """
    Return a copy of `records` with a group label per row.

    Labels are sampled independently and uniformly with replacement, so group
    sizes are not balanced. The outcome depends on the generator state, the
    number of records and their order.
    """
    if rng is None:
        rng = make_rng()

    labeled = records.copy()
    picks = rng.integers(0, len(labels), size=len(labeled))
    labeled[GROUP_COLUMN] = [labels[i] for i in picks]
    logger.debug("Assigned {} records to {} groups", len(labeled), len(labels))
    return labeled


def partition_groups(records, labels=GROUP_LABELS):
    """
    Split labeled records into one view per label, in label order.

    Views may be empty. A record carrying a label outside `labels` would fall
    out of every view, so it is rejected.
    """
    unknown = set(records[GROUP_COLUMN].unique()) - set(labels)
    if unknown:
        raise ValueError(f"Records carry unknown group label(s): {sorted(unknown)}")

    return {label: records[records[GROUP_COLUMN] == label] for label in labels}


def group_counts(records, labels=GROUP_LABELS):
    """Number of records per label, zeros included."""
    counts = records[GROUP_COLUMN].value_counts()
    return {label: int(counts.get(label, 0)) for label in labels}
