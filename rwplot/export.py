# SPDX-License-Identifier: Apache-2.0
"""Writes a composed canvas to disk with matplotlib's encoders."""

from pathlib import Path
from typing import List

from rwplot.errors import ExportError
from rwplot.layout import Canvas


def supported_formats(canvas: Canvas) -> List[str]:
    return sorted(canvas.figure.canvas.get_supported_filetypes())


def save_canvas(canvas: Canvas, output_path, output_format: str) -> Path:
    """Encode ``canvas`` as ``output_format`` into ``output_path``.

    The figure is closed afterwards whether or not the write succeeded.
    A partially written file is left for the caller to clean up.
    """
    path = Path(output_path)
    fmt = output_format.lower().lstrip(".")
    try:
        if fmt not in canvas.figure.canvas.get_supported_filetypes():
            raise ExportError(f"unsupported output format {output_format!r} "
                              f"(supported: {', '.join(supported_formats(canvas))})")
        try:
            canvas.figure.savefig(path, format=fmt)
        except OSError as e:
            raise ExportError(f"cannot write {path}: {e}") from e
    finally:
        canvas.close()
    return path
