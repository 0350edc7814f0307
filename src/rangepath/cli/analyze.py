"""Range analysis CLI command."""

from __future__ import annotations

from typing import Optional

from ..models.range import PathRange
from ..utils.sizing import length_histogram, mean_path_length


def analyze_range(start: int, end: int, midpoint: Optional[int] = None) -> None:
    """Print a path length breakdown for a range.

    Args:
        start: Inclusive lower bound
        end: Exclusive upper bound
        midpoint: Custom first midpoint, or None for the default
    """
    path_range = PathRange(start=start, end=end, midpoint=midpoint)

    histogram = length_histogram(start, end, midpoint)
    mean = mean_path_length(start, end, midpoint)
    longest = max(histogram)

    # Header line
    print(f"{'=' * 19} [{start}, {end}) {'=' * 19}")
    print(f"Values in range{'.' * 28}{path_range.size}")
    print(f"First midpoint{'.' * 29}{path_range.first_midpoint}")
    print(f"Worst-case bound (default midpoint){'.' * 8}{path_range.max_path_length()} bits")
    print(f"Longest path{'.' * 31}{longest} bits")
    print(f"Mean path length{'.' * 27}{mean:.3f} bits")
    print()

    # Histogram section
    print(f"{'-' * 24} Path lengths {'-' * 24}")
    width = max(len(str(count)) for count in histogram.values())
    for length, count in histogram.items():
        share = 100.0 * count / path_range.size
        print(f"        {length:>3} bits{'.' * 20}{count:>{width}} values ({share:5.1f}%)")
    print()

    # Summary section
    print(f"{'=' * 24} Summary {'=' * 24}")
    fixed_width = path_range.max_path_length()
    if fixed_width:
        print(f"Savings vs fixed-width field: {100.0 * (1 - mean / fixed_width):.1f}%")
    else:
        print("Single-value range: every path is empty")
    print()
