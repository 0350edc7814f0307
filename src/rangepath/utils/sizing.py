"""Path length calculation utilities.

This module provides functions to bound and measure path lengths for a range,
useful for estimating how many bits a value costs before encoding it.
"""

from __future__ import annotations

from typing import Optional

from ..codec.path import encode, encode_from
from ..exceptions import InvalidRangeError


def max_path_length(start: int, end: int) -> int:
    """Upper bound on path length over [start, end) with the default midpoint.

    Equal to ceil(log2(end - start)), computed exactly with integer arithmetic.

    Raises:
        InvalidRangeError: If start >= end

    Example:
        >>> max_path_length(0, 256)
        8
        >>> max_path_length(0, 257)
        9
        >>> max_path_length(42, 43)
        0
    """
    if start >= end:
        raise InvalidRangeError(start, end)
    return (end - start - 1).bit_length()


def path_length(start: int, end: int, target: int, midpoint: Optional[int] = None) -> int:
    """Number of decisions needed to encode target.

    Raises:
        EncodeError: If the range, target or midpoint is invalid
    """
    if midpoint is None:
        return len(encode(start, end, target))
    return len(encode_from(start, end, target, midpoint))


def length_histogram(start: int, end: int, midpoint: Optional[int] = None) -> dict[int, int]:
    """Count how many values of [start, end) encode to each path length.

    This walks the whole range, so cost grows linearly with its size.

    Returns:
        Dictionary mapping path length to number of values, sorted by length

    Raises:
        EncodeError: If the range or midpoint is invalid

    Example:
        >>> length_histogram(0, 4)
        {0: 1, 1: 2, 2: 1}
    """
    if start >= end:
        raise InvalidRangeError(start, end)

    counts: dict[int, int] = {}
    for value in range(start, end):
        length = path_length(start, end, value, midpoint)
        counts[length] = counts.get(length, 0) + 1

    return dict(sorted(counts.items()))


def mean_path_length(start: int, end: int, midpoint: Optional[int] = None) -> float:
    """Average path length over all values of [start, end), assuming uniform values.

    Raises:
        EncodeError: If the range or midpoint is invalid
    """
    histogram = length_histogram(start, end, midpoint)
    total = sum(length * count for length, count in histogram.items())
    return total / (end - start)
