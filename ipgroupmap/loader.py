from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd
from loguru import logger

from ipgroupmap.errors import CoercionError, LoadError

# --- RECORD SHAPE ---

STRING_COLUMNS = ['ip', 'country_name', 'region_name', 'city', 'time_zone']
COORDINATE_COLUMNS = ['latitude', 'longitude']
REQUIRED_COLUMNS = STRING_COLUMNS + COORDINATE_COLUMNS

# Loaded for completeness, never shown in the table except zip_code.
OPTIONAL_COLUMNS = ['country_code', 'region_code', 'metro_code', 'zip_code']

SUPPORTED_SUFFIXES = ('.csv', '.json', '.jsonl')


@dataclass(frozen=True)
class LoadedRecords:
    records: pd.DataFrame
    source: Path
    dropped: int = 0

    def __len__(self):
        return len(self.records)


def _read_frame(path):
    suffix = path.suffix.lower()
    if suffix == '.csv':
        # Everything as text: "NA" is Namibia, not a missing value.
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    return pd.read_json(path, orient='records', dtype=False, lines=(suffix == '.jsonl'))


def coerce_coordinates(frame, strict=True):
    """
    Convert latitude/longitude to floats.

    A row whose coordinate is not numeric, or not finite, is a coercion failure.
    In strict mode the first failure raises CoercionError; otherwise the failing
    rows are removed and their count is returned alongside the frame.
    """
    frame = frame.copy()
    bad = pd.Series(False, index=frame.index)
    for col in COORDINATE_COLUMNS:
        values = pd.to_numeric(frame[col], errors='coerce').astype(float)
        bad |= ~np.isfinite(values)
        frame[col] = values

    if not bad.any():
        return frame, 0

    if strict:
        row = bad[bad].index[0]
        ip = frame.at[row, 'ip']
        raise CoercionError(
            f"Row {row} (ip={ip}): coordinates are not numeric",
            row=int(row),
            ip=ip,
        )

    dropped = int(bad.sum())
    logger.warning("Dropped {} of {} records with non-numeric coordinates", dropped, len(frame))
    return frame[~bad].reset_index(drop=True), dropped


def load_records(path, strict=True):
    """
    Load the static geolocated IP dataset.

    Raises LoadError when the file is missing, unreadable or lacks a required
    column, and CoercionError (strict mode) when a coordinate is not numeric.
    """
    path = Path(path).expanduser()
    logger.info("Loading records from {}", path)

    if not path.is_file():
        raise LoadError(f"Dataset not found: {path}")
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise LoadError(f"Unsupported dataset format '{path.suffix}' (expected one of {', '.join(SUPPORTED_SUFFIXES)})")

    try:
        frame = _read_frame(path)
    except (OSError, ValueError, pd.errors.ParserError) as e:
        raise LoadError(f"Could not read {path}: {e}") from e

    # An empty JSON array carries no header at all.
    if frame.empty and len(frame.columns) == 0:
        frame = pd.DataFrame(columns=REQUIRED_COLUMNS + OPTIONAL_COLUMNS, dtype=str)

    missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        raise LoadError(f"{path.name} is missing required column(s): {', '.join(missing)}")

    for col in OPTIONAL_COLUMNS:
        if col not in frame.columns:
            frame[col] = ''

    # String fields may be empty but are never null.
    for col in STRING_COLUMNS + OPTIONAL_COLUMNS:
        frame[col] = frame[col].fillna('').astype(str)

    frame, dropped = coerce_coordinates(frame.reset_index(drop=True), strict=strict)

    logger.info("Loaded {} records from {}", len(frame), path.name)
    return LoadedRecords(records=frame, source=path, dropped=dropped)
