"""Exception hierarchy for rangepath.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from RangePathError for easy catching of any rangepath-specific
error, and from ValueError so callers can treat them as invalid-argument conditions.
"""

from __future__ import annotations


class RangePathError(Exception):
    """Base exception for all rangepath errors."""

    pass


class EncodeError(RangePathError, ValueError):
    """Raised when the arguments of an encode call are invalid.

    Examples:
        - Empty or inverted range (start >= end)
        - Target outside [start, end)
        - First midpoint not strictly inside the range
    """

    pass


class InvalidRangeError(EncodeError):
    """Raised when start >= end."""

    def __init__(self, start: int, end: int) -> None:
        super().__init__(f"Invalid range [{start}, {end}): start must be < end")
        self.start = start
        self.end = end


class TargetOutOfRangeError(EncodeError):
    """Raised when the target does not satisfy start <= target < end."""

    def __init__(self, start: int, end: int, target: int) -> None:
        super().__init__(f"Target {target} out of range [{start}, {end})")
        self.start = start
        self.end = end
        self.target = target


class MidpointOutOfRangeError(EncodeError):
    """Raised when a custom midpoint does not satisfy start < midpoint < end."""

    def __init__(self, start: int, end: int, midpoint: int) -> None:
        super().__init__(
            f"Midpoint {midpoint} must lie strictly inside ({start}, {end})"
        )
        self.start = start
        self.end = end
        self.midpoint = midpoint


class DecodeError(RangePathError, ValueError):
    """Raised when a path or its serialized form cannot be decoded.

    Examples:
        - Truncated packed data (fewer bits than requested)
        - Invalid characters in a textual path
        - Non-canonical path under strict decoding
    """

    pass


class MalformedPathError(DecodeError):
    """Raised by strict decoding when a path is not the canonical encoding of any value."""

    def __init__(self, start: int, end: int, path_length: int, reason: str) -> None:
        super().__init__(
            f"Malformed path of {path_length} decisions for range [{start}, {end}): {reason}"
        )
        self.start = start
        self.end = end
        self.path_length = path_length
        self.reason = reason
