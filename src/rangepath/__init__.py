"""rangepath: Binary Search Path Codec

Encodes integers from a known range [start, end) as the sequence of left/right
decisions a binary search makes while locating them. Paths are short, carry no
length header, and decode back exactly given the same range.

Key Features:
- Early-stop encoding (stops when the midpoint strikes the value)
- Optional custom first midpoint for skewed value distributions
- Permissive or strict decoding
- Pydantic-validated range configuration
- Byte packing and path length statistics

Quick Start:
    >>> from rangepath import encode, decode
    >>> path = encode(0, 256, 200)
    >>> decode(0, 256, path)
    200
"""

from __future__ import annotations

from .codec import PathPacker, PathUnpacker, decode, encode, encode_from, pack_path, unpack_path
from .exceptions import (
    DecodeError,
    EncodeError,
    InvalidRangeError,
    MalformedPathError,
    MidpointOutOfRangeError,
    RangePathError,
    TargetOutOfRangeError,
)
from .models import PathRange
from .utils import (
    length_histogram,
    max_path_length,
    mean_path_length,
    path_from_str,
    path_length,
    path_to_str,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "encode_from",
    "decode",
    "PathRange",
    # Packing
    "PathPacker",
    "PathUnpacker",
    "pack_path",
    "unpack_path",
    # Exceptions
    "RangePathError",
    "EncodeError",
    "InvalidRangeError",
    "TargetOutOfRangeError",
    "MidpointOutOfRangeError",
    "DecodeError",
    "MalformedPathError",
    # Sizing
    "max_path_length",
    "path_length",
    "length_histogram",
    "mean_path_length",
    # Text
    "path_to_str",
    "path_from_str",
    # Version
    "__version__",
]
