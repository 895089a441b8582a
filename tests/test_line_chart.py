# SPDX-License-Identifier: Apache-2.0
"""Tests for the per-ratio chart: scales, styling and legend entries."""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest

from conftest import make_dataset
from rwplot.errors import SeriesConstructionError
from rwplot.dataset import DataRecord
from rwplot.line_chart import X_LABEL, Y_LABEL, plot_individual_line_chart
from rwplot.style import SHAPES, RenderConfig, shape_for

VALUE_SIZES = [16, 32, 64, 128, 256, 512, 1024, 2048, 4096, 8192]


def draw(*records, names=None, config=None):
    fig, ax = plt.subplots()
    legend = plot_individual_line_chart(ax, "R/W Ratio 0.5000", *records,
                                        ratio=0.5, names=names, config=config)
    return ax, legend


@pytest.mark.parametrize("rank", range(20), ids=[f"rank{r}" for r in range(20)])
def test_shape_cycles_through_fixed_palette(rank):
    assert shape_for(rank) == shape_for(rank % len(SHAPES))
    assert len(SHAPES) == 8


def test_axes_are_log_scaled_with_labels():
    ax, _ = draw(make_dataset("a", [0.5], [256]).get(0.5))

    assert ax.get_xscale() == "log"
    assert ax.get_yscale() == "log"
    assert ax.get_xlabel() == X_LABEL
    assert ax.get_ylabel() == Y_LABEL
    assert ax.get_title() == "R/W Ratio 0.5000"


def test_ticks_are_powers_of_two():
    ax, _ = draw(make_dataset("a", [0.5], [256], conn_sizes=[1, 4, 16, 64]).get(0.5))
    ax.figure.canvas.draw()

    lo, hi = ax.get_xlim()
    ticks = [t for t in ax.get_xticks() if lo <= t <= hi]
    assert ticks
    for t in ticks:
        assert float(t).is_integer() and int(t) & (int(t) - 1) == 0


def test_read_and_write_share_shape_per_value_size():
    ax, _ = draw(make_dataset("a", [0.5], VALUE_SIZES).get(0.5))
    lines = ax.get_lines()

    assert len(lines) == 2 * len(VALUE_SIZES)
    for rank in range(len(VALUE_SIZES)):
        read, write = lines[2 * rank], lines[2 * rank + 1]
        assert read.get_marker() == write.get_marker() == shape_for(rank).marker


def test_colors_depend_on_operation_not_value_size():
    config = RenderConfig()
    ax, _ = draw(make_dataset("a", [0.5], [256, 1024, 4096]).get(0.5), config=config)
    lines = ax.get_lines()

    assert {l.get_color() for l in lines[0::2]} == {config.color_for(0, "read")}
    assert {l.get_color() for l in lines[1::2]} == {config.color_for(0, "write")}
    assert config.color_for(0, "read") != config.color_for(0, "write")


def test_black_overlay_per_write_series():
    ax, legend = draw(make_dataset("a", [0.5], [256, 1024]).get(0.5))

    assert len(ax.collections) == 2
    for coll in ax.collections:
        assert len(coll.get_offsets()) == 3
    # The overlay is not a data entry of its own.
    assert len(legend) == 2 + 2


def test_legend_single_dataset():
    _, legend = draw(make_dataset("a", [0.5], [4096, 256, 1024]).get(0.5), names=["a"])

    assert legend.labels == ["read", "write", "256", "1024", "4096"]


def test_legend_value_sizes_deduplicated_across_datasets(two_datasets):
    a, b = two_datasets
    ax, legend = draw(a.get(0.5), b.get(0.5), names=["a", "b"])

    assert legend.labels == ["a read", "a write", "b read", "b write", "256", "4096"]
    assert len(ax.get_lines()) == 8
    assert len(ax.collections) == 4


def test_value_size_entries_use_overlay_shape():
    _, legend = draw(make_dataset("a", [0.5], VALUE_SIZES).get(0.5))

    entries = legend.handles[2:]
    assert len(entries) == len(VALUE_SIZES)
    for rank, handle in enumerate(entries):
        assert handle.get_marker() == shape_for(rank).marker
        assert handle.get_color() == "black"


def test_dataset_without_ratio_contributes_nothing():
    a = make_dataset("a", [0.5], [256])
    ax, legend = draw(a.get(0.5), [], names=["a", "b"])

    assert len(ax.get_lines()) == 2
    assert legend.labels == ["a read", "a write", "256"]


def test_dataset_missing_a_value_size_keeps_shapes_aligned():
    a = make_dataset("a", [0.5], [256, 1024])
    b = make_dataset("b", [0.5], [1024])
    ax, _ = draw(a.get(0.5), b.get(0.5), names=["a", "b"])
    lines = ax.get_lines()

    assert len(lines) == 6
    # b's only series is the 1024 one, ranked second overall.
    assert lines[4].get_marker() == shape_for(1).marker


def test_non_positive_throughput_aborts_chart():
    records = [DataRecord(1, 256, 100.0, 0.0)]
    with pytest.raises(SeriesConstructionError):
        draw(records)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
