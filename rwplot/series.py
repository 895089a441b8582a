# SPDX-License-Identifier: Apache-2.0
"""Grouping of benchmark records into per-value-size read/write series."""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from rwplot.dataset import DataRecord, DataSet
from rwplot.errors import SeriesConstructionError


@dataclass(frozen=True)
class Series:
    """Throughput over connection count for one (ratio, value size, op)."""
    ratio: float
    value_size: int
    op: str  # "read" or "write"
    x: np.ndarray
    y: np.ndarray

    def __len__(self):
        return len(self.x)


def sorted_value_sizes(*records: Sequence[DataRecord]) -> List[int]:
    """Value sizes across every record list, de-duplicated and ascending.

    Called with the records of all compared datasets at once so marker shapes
    line up between them.
    """
    return sorted({r.value_size for rs in records for r in rs})


def group_by_value_size(records: Sequence[DataRecord]) -> Dict[int, List[DataRecord]]:
    """Records per value size, each list ordered by connection count."""
    groups: Dict[int, List[DataRecord]] = {}
    for r in records:
        groups.setdefault(r.value_size, []).append(r)
    return {v: sorted(rs, key=lambda r: r.conn_size) for v, rs in sorted(groups.items())}


def records_for_ratio(datasets: Sequence[DataSet], ratio: float) -> List[List[DataRecord]]:
    """One record list per dataset; empty where a dataset lacks the ratio."""
    return [d.get(ratio) for d in datasets]


def _checked_points(values, what: str, ratio: float, value_size: int) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if not np.all(np.isfinite(arr)) or np.any(arr <= 0):
        raise SeriesConstructionError(
            f"{what} must be finite and positive for a log scale "
            f"(ratio={ratio}, value_size={value_size}): {arr.tolist()}")
    return arr


def build_series(records: Sequence[DataRecord], ratio: float = 0.0) -> Tuple[Series, Series]:
    """Build the (read, write) series for records sharing one value size.

    Points are the raw averages ordered by connection count; nothing is
    interpolated or resampled.
    """
    if not records:
        raise SeriesConstructionError(f"no points for ratio={ratio}")
    sizes = {r.value_size for r in records}
    if len(sizes) != 1:
        raise SeriesConstructionError(
            f"series mixes value sizes {sorted(sizes)} (ratio={ratio})")
    value_size = sizes.pop()

    ordered = sorted(records, key=lambda r: r.conn_size)
    x = _checked_points([r.conn_size for r in ordered], "connection counts", ratio, value_size)
    read = _checked_points([r.avg_read for r in ordered], "read throughput", ratio, value_size)
    write = _checked_points([r.avg_write for r in ordered], "write throughput", ratio, value_size)

    return (Series(ratio, value_size, "read", x, read),
            Series(ratio, value_size, "write", x.copy(), write))
