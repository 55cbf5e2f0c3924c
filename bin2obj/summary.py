from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ExtractSummary:
    input_path: str = ""
    output_path: str = ""
    vertices: int = 0
    faces: int = 0
    faces_written: int = 0
    nan_replacements: int = 0
    clamped_indices: int = 0
    degenerate_faces: int = 0
    warnings: list[str] = field(default_factory=list)
