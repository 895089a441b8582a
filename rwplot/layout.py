# SPDX-License-Identifier: Apache-2.0
"""
Grid layout engine: tiles one chart per read/write ratio onto a single canvas.

All geometry is in millimetres with the origin at the bottom-left corner of
the canvas, and is converted to figure fractions only when axes are placed.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for saving files
import matplotlib.pyplot as plt
from matplotlib.font_manager import FontProperties
from matplotlib.legend import Legend
from matplotlib.lines import Line2D

from rwplot.dataset import DataSet
from rwplot.errors import RenderError
from rwplot.line_chart import ChartLegend, plot_individual_line_chart
from rwplot.series import records_for_ratio
from rwplot.style import RenderConfig

MM_PER_INCH = 25.4
MM_PER_POINT = MM_PER_INCH / 72.0

# Room inside a tile for tick labels, axis labels and the cell title.
AXES_MARGIN_LEFT = 22.0
AXES_MARGIN_BOTTOM = 14.0
AXES_MARGIN_TOP = 10.0
AXES_MARGIN_RIGHT = 1.0
LEGEND_GAP = 1.0
# A legend may take at most this share of the chart body; past that its font
# is shrunk step by step.
LEGEND_MAX_SHARE = 0.75
LEGEND_FONT_SCALES = (1.0, 0.85, 0.7, 0.55)


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def inset(self, left=0.0, bottom=0.0, right=0.0, top=0.0) -> "Rect":
        return Rect(self.x + left, self.y + bottom,
                    self.width - left - right, self.height - bottom - top)


@dataclass(frozen=True)
class Tiles:
    """Fixed rows x cols grid with padding around and between tiles (mm)."""
    rows: int
    cols: int
    pad_x: float = 4.0
    pad_y: float = 4.0
    pad_top: float = 15.0
    pad_bottom: float = 2.0
    pad_left: float = 2.0
    pad_right: float = 2.0

    def at(self, width: float, height: float, row: int, col: int) -> Rect:
        tile_w = (width - self.pad_left - self.pad_right - self.pad_x * (self.cols - 1)) / self.cols
        tile_h = (height - self.pad_top - self.pad_bottom - self.pad_y * (self.rows - 1)) / self.rows
        x = self.pad_left + col * (tile_w + self.pad_x)
        top = height - self.pad_top - row * (tile_h + self.pad_y)
        return Rect(x, top - tile_h, tile_w, tile_h)


@dataclass
class PlotCell:
    ratio: float
    title: str
    tile: Rect
    axes: object
    entries: ChartLegend
    legend: Optional[Legend] = None


@dataclass
class Canvas:
    """A composed figure ready to hand to the exporter."""
    figure: object
    width: float
    height: float
    cells: List[List[Optional[PlotCell]]] = field(default_factory=list)
    legend: Optional[Legend] = None

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def plots(self) -> Iterator[PlotCell]:
        for row in self.cells:
            for cell in row:
                if cell is not None:
                    yield cell

    def close(self):
        plt.close(self.figure)

    def fraction(self, rect: Rect) -> List[float]:
        return [rect.x / self.width, rect.y / self.height,
                rect.width / self.width, rect.height / self.height]


def sorted_ratios(datasets: Sequence[DataSet]) -> List[float]:
    """Ascending union of the ratios that carry data in any dataset.

    Ratios that only some datasets have still get their own cell, so the grid
    can hold more cells than the single dataset with the most ratios.
    """
    return sorted({r for d in datasets for r in d.sorted_ratios()})


def _place_legend(canvas: Canvas, cell: PlotCell, renderer):
    fig = canvas.figure
    # Move the legend down so it clears the cell title.
    y_offs = cell.axes.title.get_fontsize() * 3 * MM_PER_POINT
    anchor = ((cell.tile.x + cell.tile.width) / canvas.width,
              (cell.tile.y + cell.tile.height - y_offs) / canvas.height)
    body = cell.tile.inset(left=AXES_MARGIN_LEFT, bottom=AXES_MARGIN_BOTTOM,
                           top=AXES_MARGIN_TOP, right=AXES_MARGIN_RIGHT)
    max_width = body.width * LEGEND_MAX_SHARE
    base_size = FontProperties(size=plt.rcParams["legend.fontsize"]).get_size_in_points()

    for scale in LEGEND_FONT_SCALES:
        if cell.legend is not None:
            cell.legend.remove()
        cell.legend = fig.legend(cell.entries.handles, cell.entries.labels,
                                 loc="upper right", bbox_to_anchor=anchor,
                                 bbox_transform=fig.transFigure, borderaxespad=0.0,
                                 fontsize=base_size * scale)
        bbox = cell.legend.get_window_extent(renderer)
        legend_width = bbox.width / fig.dpi * MM_PER_INCH
        if legend_width + LEGEND_GAP <= max_width:
            break
    else:
        raise RenderError(f"legend of {cell.title!r} is {legend_width:.0f} mm wide, "
                          f"more than the {max_width:.0f} mm the cell allows")

    cropped = body.inset(right=legend_width + LEGEND_GAP)
    cell.axes.set_position(canvas.fraction(cropped))


def _draw_title_legend(canvas: Canvas, title: str, datasets: Sequence[DataSet],
                       tiles: Tiles):
    labels = [title] + [f"{d.name}: {d.param}" for d in datasets]
    handles = [Line2D([], [], linestyle="none") for _ in labels]
    canvas.legend = canvas.figure.legend(
        handles, labels, loc="upper left",
        bbox_to_anchor=(tiles.pad_left / canvas.width, 1.0),
        bbox_transform=canvas.figure.transFigure,
        handlelength=0, handletextpad=0, borderaxespad=0.2)


def plot_line_charts(datasets: Sequence[DataSet], title: str,
                     config: Optional[RenderConfig] = None) -> Canvas:
    """Lay out one chart per ratio, top to bottom, and add the title legend."""
    if not datasets:
        raise RenderError("no datasets to plot")
    config = config or RenderConfig()

    ratios = sorted_ratios(datasets)
    if not ratios:
        raise RenderError("no benchmark records to plot")

    cols = config.cols
    # One row per ratio whatever the column count; positions past the last
    # ratio stay blank.
    rows = len(ratios)
    tiles = Tiles(rows=rows, cols=cols)

    width = config.cell_width_cm * 10.0 * cols
    height = config.cell_height_cm * 10.0 * rows
    fig = plt.figure(figsize=(width / MM_PER_INCH, height / MM_PER_INCH), dpi=config.dpi)
    canvas = Canvas(figure=fig, width=width, height=height,
                    cells=[[None] * cols for _ in range(rows)])

    names = [d.name for d in datasets]
    try:
        for n, ratio in enumerate(ratios):
            row, col = divmod(n, cols)
            tile = tiles.at(width, height, row, col)
            body = tile.inset(left=AXES_MARGIN_LEFT, bottom=AXES_MARGIN_BOTTOM,
                              top=AXES_MARGIN_TOP, right=AXES_MARGIN_RIGHT)
            ax = fig.add_axes(canvas.fraction(body))

            cell_title = f"R/W Ratio {ratio:0.4f}"
            entries = plot_individual_line_chart(
                ax, cell_title, *records_for_ratio(datasets, ratio),
                ratio=ratio, names=names, config=config)
            canvas.cells[row][col] = PlotCell(ratio=ratio, title=cell_title, tile=tile,
                                              axes=ax, entries=entries)

        renderer = fig.canvas.get_renderer()
        for cell in canvas.plots():
            _place_legend(canvas, cell, renderer)

        _draw_title_legend(canvas, title, datasets, tiles)
    except Exception:
        # A half-built canvas is useless; drop it before propagating.
        plt.close(fig)
        raise
    return canvas
