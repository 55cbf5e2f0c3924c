"""The extraction pipeline: configuration in, OBJ file out."""

from __future__ import annotations

import logging

from .config import Bin2ObjConfig
from .faces import extract_faces
from .objwriter import write_obj
from .summary import ExtractSummary
from .vertices import extract_vertices


logger = logging.getLogger(__name__)


def convert(config: Bin2ObjConfig, summary: ExtractSummary | None = None) -> ExtractSummary:
    """Run one conversion.

    Raises ``SeekError`` for offsets beyond the input and ``OSError`` when the
    input cannot be opened or the output cannot be written. The input is closed
    before the output is opened.
    """
    if summary is None:
        summary = ExtractSummary(input_path=str(config.input_path), output_path=str(config.output_path))

    logger.info(f'Loading "{config.input_path}"')
    with config.input_path.open("rb") as stream:
        vertices = extract_vertices(stream, config.vertex, config.byte_order, summary)
        faces = extract_faces(stream, config.face, len(vertices), config.byte_order, summary)
    summary.vertices = len(vertices)
    summary.faces = len(faces)

    write_obj(config.output_path, vertices, faces, summary)
    logger.info(f'Wrote "{config.output_path}"!')
    return summary
