# SPDX-License-Identifier: Apache-2.0
"""
rwplot: line charts of read/write benchmark throughput.

Usage:
    from rwplot import load_csv_data, render

    datasets = [load_csv_data("before.csv"), load_csv_data("after.csv")]
    render(datasets, "Compaction off vs on", "compare_readwrite.png", "png")
"""

from pathlib import Path
from typing import Optional, Sequence

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for saving files
import matplotlib.pyplot as plt

from rwplot.dataset import DataRecord, DataSet, demo_datasets, load_csv_data
from rwplot.errors import DataLoadError, ExportError, RenderError, SeriesConstructionError
from rwplot.export import save_canvas
from rwplot.layout import Canvas, plot_line_charts
from rwplot.style import RenderConfig

__all__ = [
    "Canvas",
    "DataLoadError",
    "DataRecord",
    "DataSet",
    "ExportError",
    "RenderConfig",
    "RenderError",
    "SeriesConstructionError",
    "demo_datasets",
    "load_csv_data",
    "plot_line_charts",
    "render",
    "save_canvas",
]


def render(datasets: Sequence[DataSet], title: str, output_path,
           output_format: str = "png", config: Optional[RenderConfig] = None) -> Path:
    """Plot ``datasets`` on one canvas and write it to ``output_path``.

    Fonts and theme come from ``config`` and only apply for the duration of
    this call.
    """
    config = config or RenderConfig()
    with plt.rc_context(config.rc()):
        canvas = plot_line_charts(datasets, title, config)
        return save_canvas(canvas, output_path, output_format)
