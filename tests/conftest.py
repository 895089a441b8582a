# SPDX-License-Identifier: Apache-2.0
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest

from rwplot.dataset import DataRecord, DataSet

CONN_SIZES = [1, 10, 100]


def make_dataset(name, ratios, value_sizes, conn_sizes=CONN_SIZES, param="", scale=1.0):
    """Dataset with every (ratio, value size, connections) combination filled in."""
    records = {}
    for ratio in ratios:
        for value_size in value_sizes:
            for conn in conn_sizes:
                records.setdefault(ratio, []).append(DataRecord(
                    conn_size=conn,
                    value_size=value_size,
                    avg_read=1000.0 * conn * scale,
                    avg_write=100.0 * conn * scale,
                ))
    return DataSet(name=name, param=param, records=records)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def two_datasets():
    return [
        make_dataset("a", [0.5], [256, 4096], param="--conns=100"),
        make_dataset("b", [0.5], [4096, 256], param="--conns=200", scale=1.5),
    ]
