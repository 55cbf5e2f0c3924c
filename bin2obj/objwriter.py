"""Wavefront OBJ serialisation for extracted meshes."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from .faces import degenerate_mask
from .summary import ExtractSummary


logger = logging.getLogger(__name__)

HEADER = "# Generated by bin2obj\n\n"


def write_obj(
    out_path: Path,
    vertices: np.ndarray,
    faces: np.ndarray,
    summary: ExtractSummary | None = None,
) -> int:
    """Write ``v`` and 1-based ``f`` lines, skipping degenerate faces.

    Returns the number of faces written.
    """
    drop = degenerate_mask(faces)
    written = 0

    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", newline="\n", encoding="utf-8") as f:
        f.write(HEADER)
        for v in vertices:
            f.write(f"v {v[0]:f} {v[1]:f} {v[2]:f}\n")

        for face, degenerate in zip(faces, drop):
            if degenerate:
                logger.debug(f"Invalid face indices found ({' '.join(str(int(i)) for i in face)})!")
                continue
            f.write("f " + " ".join(str(int(i) + 1) for i in face) + "\n")
            written += 1

    dropped = len(faces) - written
    if dropped:
        logger.debug(f"Dropped {dropped} degenerate faces")
    if summary is not None:
        summary.faces_written = written
        summary.degenerate_faces = dropped
    return written
