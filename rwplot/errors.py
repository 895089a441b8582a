# SPDX-License-Identifier: Apache-2.0
"""Exceptions raised while loading, plotting and exporting benchmark charts."""


class RenderError(Exception):
    """Base class for every error raised by rwplot."""


class DataLoadError(RenderError, ValueError):
    """Benchmark CSV could not be parsed."""


class SeriesConstructionError(RenderError, ValueError):
    """A line series was built from empty or malformed points.

    A chart missing one of its series is not a usable artifact, so this
    aborts the whole render.
    """


class ExportError(RenderError, OSError):
    """The canvas could not be written (unwritable path or unknown format)."""
