"""Face index extraction and validation."""

from __future__ import annotations

import logging
import struct
from typing import BinaryIO

import numpy as np

from .binio import INDEX_CODES, ShortReadError, read_values, seek_to, skip, stream_size
from .config import FaceLayout
from .summary import ExtractSummary


logger = logging.getLogger(__name__)

AXES = ("x", "y", "z", "w")


def _warn(summary: ExtractSummary | None, message: str) -> None:
    logger.warning(message)
    if summary is not None:
        summary.warnings.append(message)


def read_face(
    stream: BinaryIO,
    code: str,
    arity: int,
    endian: str,
    face_index: int,
    summary: ExtractSummary | None = None,
) -> list[int] | None:
    # Element-wise so a truncated record can name the element that failed.
    face: list[int] = []
    for axis in AXES[:arity]:
        try:
            (value,) = read_values(stream, code, 1, endian)
        except ShortReadError:
            _warn(
                summary,
                f"Failed to load in face element {axis} ({face_index}), some faces may be missing or incorrect!",
            )
            return None
        face.append(int(value))
    return face


def clamp_face(
    face: list[int],
    vertex_count: int,
    face_index: int,
    summary: ExtractSummary | None = None,
) -> list[int]:
    for i, index in enumerate(face):
        if index < vertex_count:
            continue
        _warn(
            summary,
            f"Encountered out of bound vertex index on face {face_index}, {AXES[i].upper()} ({index}) - defaulting to 0!",
        )
        face[i] = 0
        if summary is not None:
            summary.clamped_indices += 1
    return face


def extract_faces(
    stream: BinaryIO,
    layout: FaceLayout,
    vertex_count: int,
    endian: str = "<",
    summary: ExtractSummary | None = None,
) -> np.ndarray:
    """Read face records between the configured start and end offsets.

    Returns an (M, arity) uint32 array. Indices at or past ``vertex_count`` are
    clamped to 0. A record cut short by the end of the stream ends extraction
    and is not returned.
    """
    arity = layout.arity
    if not layout.enabled:
        return np.zeros((0, arity), dtype=np.uint32)

    logger.info("Attempting to read in faces...")
    size = stream_size(stream)
    seek_to(stream, layout.start_offset, size)

    code = INDEX_CODES[layout.index_width]
    record_width = struct.calcsize(f"{endian}{code}") * arity
    max_faces = (layout.end_offset - layout.start_offset) // record_width

    rows: list[list[int]] = []
    for face_index in range(max_faces):
        # Stride can carry the cursor past the end before the count runs out.
        if stream.tell() >= layout.end_offset:
            break

        face = read_face(stream, code, arity, endian, face_index, summary)
        if face is None:
            break
        face = clamp_face(face, vertex_count, face_index, summary)
        logger.debug("\t" + " ".join(f"{AXES[i]}( {index} )" for i, index in enumerate(face)))
        rows.append(face)

        if layout.stride > 0 and not skip(stream, layout.stride, size):
            break

    faces = np.array(rows, dtype=np.uint32).reshape(-1, arity)
    logger.info(f"Loaded in {len(faces)} faces")
    return faces


def degenerate_mask(faces: np.ndarray) -> np.ndarray:
    """True for every face that repeats an index, e.g. (0, 0, 1)."""
    mask = np.zeros(len(faces), dtype=bool)
    arity = faces.shape[1] if faces.ndim == 2 else 0
    for i in range(arity):
        for j in range(i + 1, arity):
            mask |= faces[:, i] == faces[:, j]
    return mask
