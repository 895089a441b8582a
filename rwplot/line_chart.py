# SPDX-License-Identifier: Apache-2.0
"""
Plot assembler: one log/log throughput chart per read/write ratio.

Every value size gets a read line and a write line sharing one marker shape.
Colors only say which dataset and which operation a line belongs to, so the
legend lists "read"/"write" once per dataset and then one marker entry per
value size.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for saving files
from matplotlib.lines import Line2D
from matplotlib.ticker import FuncFormatter, LogLocator, NullLocator

from rwplot.dataset import DataRecord
from rwplot.series import build_series, group_by_value_size, sorted_value_sizes
from rwplot.style import RenderConfig, Shape, shape_for

X_LABEL = "Connections Amount"
Y_LABEL = "QPS (Requests/sec)"
OVERLAY_COLOR = "black"


@dataclass
class ChartLegend:
    """Legend entries for one chart, drawn later by the layout engine."""
    handles: List[Line2D] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)

    def add(self, label: str, handle: Line2D):
        self.labels.append(label)
        self.handles.append(handle)

    def __len__(self):
        return len(self.labels)


def _pow2_label(value, _pos):
    if value >= 1:
        return f"{int(round(value))}"
    return f"{value:g}"


def _pow2_ticks(axis):
    axis.set_major_locator(LogLocator(base=2.0, subs=(1.0,), numticks=16))
    axis.set_minor_locator(NullLocator())
    axis.set_major_formatter(FuncFormatter(_pow2_label))


def _overlay_handle(shape: Shape) -> Line2D:
    return Line2D([], [], linestyle="none", marker=shape.marker, color=OVERLAY_COLOR,
                  markerfacecolor=OVERLAY_COLOR if shape.filled else "none")


def _draw_overlay(ax, series, shape: Shape):
    # Black markers on top of the write line; they carry no legend data.
    if shape.filled:
        ax.scatter(series.x, series.y, marker=shape.marker, color=OVERLAY_COLOR, zorder=3)
    else:
        ax.scatter(series.x, series.y, marker=shape.marker, facecolors="none",
                   edgecolors=OVERLAY_COLOR, zorder=3)


def _draw_line(ax, series, color: str, shape: Shape):
    line, = ax.plot(series.x, series.y, color=color, marker=shape.marker,
                    markeredgecolor=color,
                    markerfacecolor=color if shape.filled else "none")
    return line


def add_values(ax, legend: ChartLegend, values: Sequence[int],
               groups: Dict[int, List[DataRecord]], index: int, ratio: float,
               label_prefix: str, config: RenderConfig):
    """Draw one dataset's read/write lines for every value size it has."""
    read_color = config.color_for(index, "read")
    write_color = config.color_for(index, "write")
    first = True

    for rank, value in enumerate(values):
        rs = groups.get(value)
        if not rs:
            continue
        shape = shape_for(rank)
        read, write = build_series(rs, ratio)

        _draw_line(ax, read, read_color, shape)
        _draw_line(ax, write, write_color, shape)
        _draw_overlay(ax, write, shape)

        if first:
            legend.add(f"{label_prefix}read", Line2D([], [], color=read_color))
            legend.add(f"{label_prefix}write", Line2D([], [], color=write_color))
            first = False


def plot_individual_line_chart(ax, title: str, *records: Sequence[DataRecord],
                               ratio: float = 0.0,
                               names: Optional[Sequence[str]] = None,
                               config: Optional[RenderConfig] = None) -> ChartLegend:
    """
    Draw the chart for one ratio on ``ax``.

    ``records`` holds one record list per compared dataset, in the same order
    as ``names``. Empty lists are skipped; the chart is built from whichever
    datasets have data.
    """
    config = config or RenderConfig()

    ax.set_title(title)
    ax.set_xlabel(X_LABEL)
    ax.set_ylabel(Y_LABEL)
    ax.set_xscale("log", base=2)
    ax.set_yscale("log", base=2)
    _pow2_ticks(ax.xaxis)
    _pow2_ticks(ax.yaxis)

    legend = ChartLegend()
    values = sorted_value_sizes(*records)

    for index, rs in enumerate(records):
        if not rs:
            continue
        prefix = ""
        if names is not None and len(records) > 1:
            prefix = f"{names[index]} "
        add_values(ax, legend, values, group_by_value_size(rs), index, ratio, prefix, config)

    for rank, value in enumerate(values):
        legend.add(f"{value}", _overlay_handle(shape_for(rank)))

    return legend
