"""Vertex record extraction.

Records are three values in stream order (x, y, z), either float32 or int16.
int16 values are taken as-is, no axis swap and no normalisation; use the scale
to bring them into a usable range.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

import numpy as np

from .binio import VERTEX_CODES, ShortReadError, read_values, seek_to, skip, stream_size
from .config import VertexLayout
from .summary import ExtractSummary


logger = logging.getLogger(__name__)

AXES = ("x", "y", "z")


def _warn(summary: ExtractSummary | None, message: str) -> None:
    logger.warning(message)
    if summary is not None:
        summary.warnings.append(message)


def sanitize_vertex(
    vertex: np.ndarray,
    vertex_index: int,
    summary: ExtractSummary | None = None,
) -> np.ndarray:
    nan_axes = np.isnan(vertex)
    for axis in np.flatnonzero(nan_axes):
        _warn(summary, f"Encountered NaN for vertex {vertex_index} axis {AXES[axis].upper()}, defaulting to 0.0")
    if summary is not None:
        summary.nan_replacements += int(np.count_nonzero(nan_axes))
    vertex[nan_axes] = 0.0
    return vertex


def extract_vertices(
    stream: BinaryIO,
    layout: VertexLayout,
    endian: str = "<",
    summary: ExtractSummary | None = None,
) -> np.ndarray:
    """Read vertex records until the stream, end offset or stride runs out.

    Returns an (N, 3) float32 array in read order. Only an impossible initial
    seek is fatal; a truncated record just ends the run.
    """
    size = stream_size(stream)
    seek_to(stream, layout.start_offset, size)

    code = VERTEX_CODES[layout.encoding]
    scale = np.float32(layout.scale)
    rows: list[np.ndarray] = []

    while True:
        record_offset = stream.tell()
        try:
            raw = read_values(stream, code, 3, endian)
        except ShortReadError as exc:
            if exc.got == 0:
                logger.info(f"Stopped reading vertices at 0x{record_offset:X} (end of stream)")
            else:
                _warn(
                    summary,
                    f"Failed to read in vertex at 0x{record_offset:X} ({exc.got} of {exc.wanted} bytes available)",
                )
            break

        with np.errstate(over="ignore", invalid="ignore"):
            vertex = np.array(raw, dtype=np.float32) * scale
        vertex = sanitize_vertex(vertex, len(rows), summary)
        logger.debug(f"\tx( {vertex[0]:f} ) y( {vertex[1]:f} ) z( {vertex[2]:f} )")
        rows.append(vertex)

        if layout.end_offset > 0 and stream.tell() >= layout.end_offset:
            break
        if layout.stride > 0 and not skip(stream, layout.stride, size):
            break

    vertices = np.vstack(rows) if rows else np.zeros((0, 3), dtype=np.float32)
    logger.info(f"Loaded in {len(vertices)} vertices")
    return vertices
