# SPDX-License-Identifier: Apache-2.0
"""Render configuration, fonts, colors and marker shapes."""

from dataclasses import dataclass
from typing import NamedTuple, Tuple

import seaborn as sns

# Soft palette; dataset i draws reads in COLORS[2i] and writes in COLORS[2i + 1].
DEFAULT_COLORS = (
    "#f15a60",
    "#7ac36a",
    "#5a9bd4",
    "#faa75b",
    "#9e67ab",
    "#ce7058",
    "#d77fb4",
)


class Shape(NamedTuple):
    marker: str
    filled: bool


# Ring, square, triangle, cross, plus, then the filled circle/box/pyramid.
SHAPES = (
    Shape("o", False),
    Shape("s", False),
    Shape("^", False),
    Shape("x", True),
    Shape("+", True),
    Shape("o", True),
    Shape("s", True),
    Shape("^", True),
)


def shape_for(rank: int) -> Shape:
    """Marker shape for the value size at ``rank`` in ascending order."""
    return SHAPES[rank % len(SHAPES)]


@dataclass(frozen=True)
class RenderConfig:
    cols: int = 1
    font_family: Tuple[str, ...] = ("Liberation Sans", "DejaVu Sans")
    dpi: int = 150
    colors: Tuple[str, ...] = DEFAULT_COLORS
    cell_width_cm: float = 30.0
    cell_height_cm: float = 15.0

    def __post_init__(self):
        if self.cols < 1:
            raise ValueError(f"cols must be >= 1, got {self.cols}")
        if not self.colors:
            raise ValueError("colors must not be empty")

    def color_for(self, dataset_index: int, op: str) -> str:
        """Fixed color of a dataset's read or write series, whatever the value size."""
        offset = 0 if op == "read" else 1
        return self.colors[(dataset_index * 2 + offset) % len(self.colors)]

    def rc(self) -> dict:
        """matplotlib rc settings for a scoped ``plt.rc_context``."""
        rc = {}
        rc.update(sns.axes_style("whitegrid"))
        rc.update(sns.plotting_context("paper", font_scale=1.2))
        rc.update({
            "font.family": "sans-serif",
            "font.sans-serif": list(self.font_family),
            "figure.dpi": self.dpi,
            "savefig.dpi": self.dpi,
            "axes.titlesize": 14,
            "axes.labelsize": 12,
            "legend.fontsize": 10,
            "legend.frameon": False,
        })
        return rc
