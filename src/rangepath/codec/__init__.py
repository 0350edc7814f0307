"""Range path codec for rangepath.

This module provides the encode/decode pair that represents an integer from a
known range as the decisions of a binary search, plus byte packing for paths.
"""

from __future__ import annotations

from .bitpack import PathPacker, PathUnpacker, pack_path, unpack_path
from .path import decode, encode, encode_from

__all__ = [
    "encode",
    "encode_from",
    "decode",
    "PathPacker",
    "PathUnpacker",
    "pack_path",
    "unpack_path",
]
