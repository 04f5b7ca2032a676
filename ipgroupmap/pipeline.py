from dataclasses import dataclass
from pathlib import Path
from typing import Dict

import pandas as pd
from loguru import logger

from ipgroupmap.config import ESCAPE_POPUPS, RANDOM_SEED
from ipgroupmap.groups import assign_groups, group_counts, make_rng, partition_groups
from ipgroupmap.loader import load_records
from ipgroupmap.mapspec import MapSpec, build_map_spec
from ipgroupmap.table import build_table


@dataclass(frozen=True)
class Dashboard:
    records: pd.DataFrame
    views: Dict[str, pd.DataFrame]
    map_spec: MapSpec
    table: pd.DataFrame
    source: Path
    dropped: int = 0

    @property
    def counts(self):
        return group_counts(self.records)


def build_dashboard(path, seed=RANDOM_SEED, strict=True, escape=ESCAPE_POPUPS, rng=None):
    """
    Load the dataset and derive everything the page shows.

    The same generator drives group assignment and then the per-marker icon
    picks, so a given seed and dataset always produce the same page.
    """
    loaded = load_records(path, strict=strict)
    if rng is None:
        rng = make_rng(seed)

    records = assign_groups(loaded.records, rng=rng)
    views = partition_groups(records)
    logger.info(
        "Groups: {}",
        ", ".join(f"{label}={len(view)}" for label, view in views.items()),
    )

    map_spec = build_map_spec(views, rng=rng, escape=escape)
    table = build_table(records)

    return Dashboard(
        records=records,
        views=views,
        map_spec=map_spec,
        table=table,
        source=loaded.source,
        dropped=loaded.dropped,
    )
