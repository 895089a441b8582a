# SPDX-License-Identifier: Apache-2.0
"""
Benchmark datasets: records, the CSV loader, and built-in demo data.

The CSV layout matches what the read/write benchmark script writes:

    PARAM,--backend-quota=8GB --auto-compaction-mode=revision
    DATA,0.125,32,256,41093.6:5124.1,40511.2:5098.7,
    DATA,0.125,64,256,65771.0:8221.4,66110.9:8262.3,

Each DATA line is one (ratio, connections, value size) measurement followed by
one ``read:write`` throughput pair per benchmark iteration.
"""

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import numpy as np

from rwplot.errors import DataLoadError

# Column positions in a DATA line.
FIELD_RATIO = 1
FIELD_CONN_SIZE = 2
FIELD_VALUE_SIZE = 3
FIELD_ITER_OFFSET = 4


@dataclass(frozen=True)
class DataRecord:
    """One measurement: averaged throughput at a connection count and value size."""
    conn_size: int
    value_size: int
    avg_read: float
    avg_write: float


@dataclass(frozen=True)
class DataSet:
    """All records of one benchmark run, keyed by read/write ratio."""
    name: str
    param: str = ""
    records: Dict[float, List[DataRecord]] = field(default_factory=dict)

    def sorted_ratios(self) -> List[float]:
        """Ratios that carry data, ascending."""
        return sorted(ratio for ratio, rs in self.records.items() if rs)

    def get(self, ratio: float) -> List[DataRecord]:
        return list(self.records.get(ratio, []))


def _average_iterations(cells: Sequence[str], path: Path, lineno: int):
    reads, writes = [], []
    for cell in cells:
        cell = cell.strip()
        if not cell:
            continue
        try:
            read, write = cell.split(":")
            reads.append(float(read))
            writes.append(float(write))
        except ValueError:
            raise DataLoadError(
                f"{path}:{lineno}: bad iteration value {cell!r} (want read:write)"
            ) from None
    if not reads:
        raise DataLoadError(f"{path}:{lineno}: no iteration values")
    return float(np.mean(reads)), float(np.mean(writes))


def load_csv_data(path) -> DataSet:
    """Load one benchmark CSV file into a DataSet named after the file stem."""
    path = Path(path)
    param = ""
    records: Dict[float, List[DataRecord]] = {}

    with open(path, newline="") as f:
        for lineno, line in enumerate(csv.reader(f), start=1):
            if not line or not line[0].strip():
                continue
            if line[0] == "PARAM":
                param = line[1] if len(line) > 1 else ""
                continue
            if len(line) <= FIELD_ITER_OFFSET:
                raise DataLoadError(f"{path}:{lineno}: expected at least "
                                    f"{FIELD_ITER_OFFSET + 1} columns, got {len(line)}")
            try:
                ratio = float(line[FIELD_RATIO])
                conn_size = int(line[FIELD_CONN_SIZE])
                value_size = int(line[FIELD_VALUE_SIZE])
            except ValueError as e:
                raise DataLoadError(f"{path}:{lineno}: {e}") from None

            avg_read, avg_write = _average_iterations(line[FIELD_ITER_OFFSET:], path, lineno)
            records.setdefault(ratio, []).append(
                DataRecord(conn_size, value_size, avg_read, avg_write))

    return DataSet(name=path.stem, param=param, records=records)


def demo_datasets(count: int = 2,
                  ratios: Optional[Sequence[float]] = None) -> List[DataSet]:
    """Synthetic but plausible datasets for trying the charts without a benchmark run."""
    ratios = ratios or [0.125, 0.5, 1.0]
    conn_sizes = [32, 64, 128, 256, 512, 1024]
    value_sizes = [256, 1024, 4096, 16384]

    datasets = []
    for i in range(count):
        speedup = 1.0 + 0.15 * i
        records: Dict[float, List[DataRecord]] = {}
        for ratio in ratios:
            write_share = 1.0 / (1.0 + ratio)
            for value_size in value_sizes:
                size_penalty = 1.0 + np.log2(value_size / 256) * 0.12
                for conn in conn_sizes:
                    base = 9000.0 * conn ** 0.55 * speedup / size_penalty
                    records.setdefault(ratio, []).append(DataRecord(
                        conn_size=conn,
                        value_size=value_size,
                        avg_read=round(base * (1.0 - write_share) * 1.6, 1),
                        avg_write=round(base * write_share * 0.4, 1),
                    ))
        datasets.append(DataSet(name=f"demo-{i + 1}",
                                param=f"--quota-backend-bytes={2 * (i + 1)}GB",
                                records=records))
    return datasets
