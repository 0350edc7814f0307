"""Binary search path encoding for integers in a known range.

A value from the half-open range [start, end) is encoded as the sequence of
left/right decisions a binary search makes while locating it:

- False: the value lies left of the midpoint, which becomes the upper bound
- True: the value lies at or right of the midpoint, which becomes the lower bound

Encoding stops early as soon as the midpoint strikes the value exactly or the
interval narrows to a single element, so paths are variable length and never
longer than ceil(log2(end - start)) for the default midpoint. No length header
is stored; the caller must supply the same range (and first midpoint, if a
custom one was used) at decode time.

Example:
    >>> path = encode(0, 256, 200)
    >>> decode(0, 256, path)
    200
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..exceptions import (
    InvalidRangeError,
    MalformedPathError,
    MidpointOutOfRangeError,
    TargetOutOfRangeError,
)
from ..log import get_logger

logger = get_logger(__name__)


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful bound or target
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def floor_midpoint(lo: int, hi: int) -> int:
    """Return floor((lo + hi) / 2) without forming the sum."""
    return lo + (hi - lo) // 2


def _check_range(start: int, end: int) -> None:
    _require_int("start", start)
    _require_int("end", end)
    if start >= end:
        raise InvalidRangeError(start, end)


def _check_target(start: int, end: int, target: int) -> None:
    _require_int("target", target)
    if target < start or target >= end:
        raise TargetOutOfRangeError(start, end, target)


def _check_midpoint(start: int, end: int, midpoint: int) -> None:
    _require_int("midpoint", midpoint)
    if midpoint <= start or midpoint >= end:
        raise MidpointOutOfRangeError(start, end, midpoint)


def encode(start: int, end: int, target: int) -> list[bool]:
    """Encode a value from [start, end) using the default midpoint.

    Args:
        start: Inclusive lower bound of the range
        end: Exclusive upper bound of the range
        target: Value to encode (start <= target < end)

    Returns:
        List of decisions (False=left, True=right). Empty for a one-element
        range or when the first midpoint is the target.

    Raises:
        InvalidRangeError: If start >= end
        TargetOutOfRangeError: If target is outside [start, end)
    """
    _check_range(start, end)
    _check_target(start, end, target)

    if end - start == 1:
        return []

    return encode_from(start, end, target, floor_midpoint(start, end))


def encode_from(start: int, end: int, target: int, midpoint: int) -> list[bool]:
    """Encode a value using a custom midpoint for the first decision.

    A biased first split shortens paths for values clustered on one side of
    the range. Later splits always use the floor midpoint of the remaining
    interval. Decode with the same midpoint (see decode()).

    Args:
        start: Inclusive lower bound of the range
        end: Exclusive upper bound of the range
        target: Value to encode (start <= target < end)
        midpoint: First split point (start < midpoint < end)

    Returns:
        List of decisions (False=left, True=right)

    Raises:
        InvalidRangeError: If start >= end
        TargetOutOfRangeError: If target is outside [start, end)
        MidpointOutOfRangeError: If midpoint is not strictly inside the range
    """
    _check_range(start, end)
    _check_target(start, end, target)
    _check_midpoint(start, end, midpoint)

    path: list[bool] = []
    lo = start
    hi = end
    mid = midpoint

    while target != mid:
        if target < mid:
            path.append(False)
            hi = mid
        else:
            path.append(True)
            lo = mid

        if hi - lo == 1:
            break

        mid = floor_midpoint(lo, hi)

    logger.debug(
        "Encoded %d in [%d, %d) from midpoint %d as %d decisions",
        target,
        start,
        end,
        midpoint,
        len(path),
    )
    return path


def decode(
    start: int,
    end: int,
    path: Iterable[bool],
    *,
    midpoint: Optional[int] = None,
    strict: bool = False,
) -> int:
    """Decode a path back to its value in [start, end).

    The search interval is narrowed by each decision in turn and the floor
    midpoint of what remains is returned. An early-stop path leaves the struck
    midpoint in place; a fully collapsed interval [lo, lo + 1) yields lo.

    By default decoding is total: any sequence of decisions produces some
    integer and nothing is validated. With strict=True the range (and midpoint)
    are validated like the encoders and the path must be exactly the one
    encode()/encode_from() would produce for the decoded value.

    Args:
        start: Inclusive lower bound of the range used at encode time
        end: Exclusive upper bound of the range used at encode time
        path: Decisions to replay (False=left, True=right)
        midpoint: First split point, if the path came from encode_from()
            with a non-default midpoint
        strict: If True, reject paths that are not canonical

    Returns:
        Decoded integer value

    Raises:
        InvalidRangeError: If strict and start >= end
        MidpointOutOfRangeError: If strict and midpoint is outside (start, end)
        MalformedPathError: If strict and the path is not canonical
    """
    decisions = [bool(bit) for bit in path]

    if strict:
        _check_range(start, end)
        if midpoint is not None:
            _check_midpoint(start, end, midpoint)

    lo = start
    hi = end
    mid = floor_midpoint(lo, hi) if midpoint is None else midpoint

    for bit in decisions:
        if bit:
            lo = mid
        else:
            hi = mid
        mid = floor_midpoint(lo, hi)

    if strict:
        _verify_canonical(start, end, decisions, mid, midpoint)

    return mid


def _verify_canonical(
    start: int, end: int, decisions: list[bool], value: int, midpoint: Optional[int]
) -> None:
    """Raise MalformedPathError unless decisions re-encode from value exactly."""
    if value < start or value >= end:
        reason = f"decoded value {value} falls outside the range"
    else:
        if midpoint is None:
            expected = encode(start, end, value)
        else:
            expected = encode_from(start, end, value, midpoint)
        if expected == decisions:
            return
        reason = f"canonical path for {value} has {len(expected)} decisions"

    logger.debug("Rejected path %s for [%d, %d): %s", decisions, start, end, reason)
    raise MalformedPathError(start, end, len(decisions), reason)
