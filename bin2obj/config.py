"""Run configuration and the command-line surface that builds it.

Every option has a descriptive long name plus the terse legacy spelling
(``-soff``, ``-fquad``...) so existing command lines keep working. argparse
keeps the last occurrence when an option is repeated.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .binio import ENDIAN_CODES, INDEX_CODES, VERTEX_CODES


DEFAULT_OUTPUT = Path("dump.obj")

VERTEX_TYPE_ALIASES = {"0": "f32", "1": "i16", "f32": "f32", "i16": "i16"}
FACE_TYPE_ALIASES = {"0": "i16", "1": "i32", "i16": "i16", "i32": "i32"}


@dataclass(frozen=True)
class VertexLayout:
    start_offset: int = 0
    end_offset: int = 0
    stride: int = 0
    encoding: str = "f32"
    scale: float = 1.0

    def __post_init__(self) -> None:
        if self.encoding not in VERTEX_CODES:
            raise ValueError(f"unsupported vertex encoding: {self.encoding}")


@dataclass(frozen=True)
class FaceLayout:
    start_offset: int = 0
    end_offset: int = 0
    stride: int = 0
    index_width: str = "i32"
    quad: bool = False

    def __post_init__(self) -> None:
        if self.index_width not in INDEX_CODES:
            raise ValueError(f"unsupported face index width: {self.index_width}")

    @property
    def arity(self) -> int:
        return 4 if self.quad else 3

    @property
    def enabled(self) -> bool:
        return self.end_offset > self.start_offset


@dataclass(frozen=True)
class Bin2ObjConfig:
    input_path: Path
    output_path: Path = DEFAULT_OUTPUT
    vertex: VertexLayout = field(default_factory=VertexLayout)
    face: FaceLayout = field(default_factory=FaceLayout)
    endian: str = "little"
    verbose: bool = False
    summary_json: Path | None = None

    def __post_init__(self) -> None:
        if self.endian not in ENDIAN_CODES:
            raise ValueError(f"unsupported byte order: {self.endian}")

    @property
    def byte_order(self) -> str:
        return ENDIAN_CODES[self.endian]

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> Bin2ObjConfig:
        return cls(
            input_path=args.input,
            output_path=args.output,
            vertex=VertexLayout(
                start_offset=args.start_offset,
                end_offset=args.end_offset,
                stride=args.stride,
                encoding=args.vertex_type,
                scale=args.scale,
            ),
            face=FaceLayout(
                start_offset=args.face_start_offset,
                end_offset=args.face_end_offset,
                stride=args.face_stride,
                index_width=args.face_type,
                quad=args.quad,
            ),
            endian=args.endian,
            verbose=args.verbose,
            summary_json=args.summary_json,
        )


def parse_offset(text: str) -> int:
    """Byte offsets and strides: decimal, or hex with a 0x prefix."""
    raw = text.strip().lower()
    try:
        value = int(raw, 16) if raw.startswith("0x") else int(raw, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid byte offset: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"byte offset must be non-negative: {text!r}")
    return value


def choice_parser(aliases: dict[str, str], label: str) -> Callable[[str], str]:
    def parse(text: str) -> str:
        value = aliases.get(text.strip().lower())
        if value is None:
            valid = ", ".join(sorted(aliases))
            raise argparse.ArgumentTypeError(f"invalid {label} {text!r} (choose from {valid})")
        return value

    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bin2obj",
        description="Convert raw vertex/face data from a binary blob into a Wavefront OBJ mesh.",
        epilog="For example: bin2obj path/to/myfile.whatever -soff 128",
        allow_abbrev=False,
    )
    parser.add_argument("input", type=Path, help="Path to the binary file to read.")
    parser.add_argument(
        "--output", "-outp", type=Path, default=DEFAULT_OUTPUT, help="Set the path for the output file."
    )

    vertex = parser.add_argument_group("vertices")
    vertex.add_argument(
        "--start-offset", "-soff", type=parse_offset, default=0, metavar="OFFSET",
        help="Set the start offset to begin reading from.",
    )
    vertex.add_argument(
        "--end-offset", "-eoff", type=parse_offset, default=0, metavar="OFFSET",
        help="Set the end offset to stop reading, otherwise reads to EOF.",
    )
    vertex.add_argument(
        "--stride", "-stri", type=parse_offset, default=0, metavar="BYTES",
        help="Number of bytes to proceed after reading XYZ.",
    )
    vertex.add_argument(
        "--scale", "-vtxs", type=float, default=1.0, help="Scales the vertices by the defined amount."
    )
    vertex.add_argument(
        "--vertex-type", "-vtyp", type=choice_parser(VERTEX_TYPE_ALIASES, "vertex type"), default="f32",
        metavar="TYPE", help="How the vertex bytes are stored: f32/0 = float32 (default), i16/1 = int16.",
    )

    face = parser.add_argument_group("faces")
    face.add_argument(
        "--face-start-offset", "-fsof", type=parse_offset, default=0, metavar="OFFSET",
        help="Sets the start offset to start loading face indices from.",
    )
    face.add_argument(
        "--face-end-offset", "-feof", type=parse_offset, default=0, metavar="OFFSET",
        help="Sets the end offset to finish loading face indices from.",
    )
    face.add_argument(
        "--face-stride", "-fstr", type=parse_offset, default=0, metavar="BYTES",
        help="Number of bytes to proceed after reading in face indices.",
    )
    face.add_argument(
        "--face-type", "-ftyp", type=choice_parser(FACE_TYPE_ALIASES, "face type"), default="i32",
        metavar="TYPE", help="How the face bytes are stored: i16/0 = uint16, i32/1 = uint32 (default).",
    )
    face.add_argument(
        "--quad", "-fquad", action="store_true", help="Indicates that the faces are made up of four elements."
    )

    parser.add_argument("--endian", choices=sorted(ENDIAN_CODES), default="little", help="Byte order of the data.")
    parser.add_argument("--verbose", "-verb", action="store_true", help="Enables more verbose output.")
    parser.add_argument("--summary-json", type=Path, default=None, help="Optional path for JSON summary output.")
    return parser
