"""Text form of decision paths ("0" for left, "1" for right)."""

from __future__ import annotations

from typing import Iterable

from ..exceptions import DecodeError

_SEPARATORS = frozenset(" \t\r\n_")


def path_to_str(path: Iterable[bool]) -> str:
    """Render a path as a string of 0s and 1s.

    Example:
        >>> path_to_str([True, False, True])
        '101'
    """
    return "".join("1" if bit else "0" for bit in path)


def path_from_str(text: str) -> list[bool]:
    """Parse a string of 0s and 1s into a path.

    Whitespace and underscores are ignored, so "1010_0110" is accepted.

    Raises:
        DecodeError: If text contains any other character
    """
    path: list[bool] = []
    for index, char in enumerate(text):
        if char in _SEPARATORS:
            continue
        if char == "1":
            path.append(True)
        elif char == "0":
            path.append(False)
        else:
            raise DecodeError(f"Invalid character {char!r} at position {index} in path text")
    return path
