"""Convert raw vertex/face data embedded in binary blobs into Wavefront OBJ meshes."""

from .config import Bin2ObjConfig, FaceLayout, VertexLayout
from .convert import convert
from .faces import degenerate_mask, extract_faces
from .objwriter import write_obj
from .vertices import extract_vertices

__version__ = "0.1.0"

__all__ = [
    "Bin2ObjConfig",
    "FaceLayout",
    "VertexLayout",
    "convert",
    "degenerate_mask",
    "extract_faces",
    "extract_vertices",
    "write_obj",
]
