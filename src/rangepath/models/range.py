"""Validated range configuration.

PathRange bundles the parameters that encoder and decoder must agree on
(start, end and an optional first midpoint) into one immutable Pydantic model,
so they can be validated once and passed around together.
"""

from __future__ import annotations

from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from ..codec.path import decode, encode, encode_from, floor_midpoint
from ..utils.sizing import max_path_length


class PathRange(BaseModel):
    """A half-open integer range [start, end) with an optional first midpoint.

    Example:
        >>> r = PathRange(start=0, end=16, midpoint=4)
        >>> path = r.encode(3)
        >>> r.decode(path)
        3

    Attributes:
        start: Inclusive lower bound
        end: Exclusive upper bound
        midpoint: Custom first split point (strictly inside the range), or None
            for the default floor midpoint
    """

    model_config = ConfigDict(
        # Ranges are shared between encoder and decoder; never mutate one
        frozen=True,
        # Reject floats and numeric strings for bounds
        strict=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    start: int
    end: int
    midpoint: Optional[int] = None

    @model_validator(mode="after")
    def _check_bounds(self) -> PathRange:
        if self.start >= self.end:
            raise ValueError(f"start must be < end, got [{self.start}, {self.end})")
        if self.midpoint is not None and not self.start < self.midpoint < self.end:
            raise ValueError(
                f"midpoint {self.midpoint} must lie strictly inside ({self.start}, {self.end})"
            )
        return self

    @property
    def size(self) -> int:
        """Number of values in the range."""
        return self.end - self.start

    @property
    def first_midpoint(self) -> int:
        """Split point used for the first decision."""
        if self.midpoint is not None:
            return self.midpoint
        return floor_midpoint(self.start, self.end)

    def contains(self, value: int) -> bool:
        """Return True if value lies in [start, end)."""
        return self.start <= value < self.end

    def encode(self, target: int) -> list[bool]:
        """Encode target as a decision path over this range."""
        if self.midpoint is None:
            return encode(self.start, self.end, target)
        return encode_from(self.start, self.end, target, self.midpoint)

    def decode(self, path: Iterable[bool], strict: bool = False) -> int:
        """Decode a path produced by encode() on an equal range."""
        return decode(self.start, self.end, path, midpoint=self.midpoint, strict=strict)

    def max_path_length(self) -> int:
        """Upper bound on path length for the default midpoint.

        A custom midpoint can lengthen paths on its larger side; use
        utils.sizing.length_histogram() for the exact distribution.
        """
        return max_path_length(self.start, self.end)
