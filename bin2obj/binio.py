"""Byte-level helpers shared by the vertex and face extractors.

Reads go through ``read_values`` so a truncated record always surfaces as a
``ShortReadError`` carrying the offset it started at. Seeks are checked against
the stream size up front because regular files happily seek past EOF.
"""

from __future__ import annotations

import os
import struct
from typing import BinaryIO


ENDIAN_CODES = {"little": "<", "big": ">"}

VERTEX_CODES = {"f32": "f", "i16": "h"}
INDEX_CODES = {"i16": "H", "i32": "I"}


class Bin2ObjError(RuntimeError):
    pass


class SeekError(Bin2ObjError):
    pass


class ShortReadError(EOFError):
    def __init__(self, offset: int, wanted: int, got: int) -> None:
        super().__init__(f"Short read at 0x{offset:X}: wanted {wanted} bytes, got {got}")
        self.offset = offset
        self.wanted = wanted
        self.got = got


def stream_size(stream: BinaryIO) -> int:
    pos = stream.tell()
    size = stream.seek(0, os.SEEK_END)
    stream.seek(pos)
    return size


def seek_to(stream: BinaryIO, offset: int, size: int) -> None:
    if offset < 0 or offset > size:
        raise SeekError(f"Failed to seek to {offset} (0x{offset:X}), stream is only {size} bytes")
    stream.seek(offset)


def skip(stream: BinaryIO, count: int, size: int) -> bool:
    target = stream.tell() + count
    if target > size:
        return False
    stream.seek(target)
    return True


def read_values(stream: BinaryIO, code: str, count: int, endian: str = "<") -> tuple:
    fmt = f"{endian}{count}{code}"
    wanted = struct.calcsize(fmt)
    offset = stream.tell()
    raw = stream.read(wanted)
    if len(raw) != wanted:
        raise ShortReadError(offset, wanted, len(raw))
    return struct.unpack(fmt, raw)
