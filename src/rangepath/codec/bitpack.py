"""Bit-level packing and unpacking of decision paths.

This module turns a path (a list of booleans) into compact bytes and back.
Bits are written most significant first, and the last byte is zero-padded.
No length is stored: the caller keeps the bit count alongside the bytes.
"""

from __future__ import annotations

from typing import Iterable

from ..exceptions import DecodeError


class PathPacker:
    """Packs decisions bit-by-bit into a byte buffer.

    Example:
        >>> packer = PathPacker()
        >>> packer.extend([True, False, True])
        >>> packer.to_bytes()
        b'\\xa0'
    """

    def __init__(self) -> None:
        """Initialize an empty packer."""
        self._bits: list[int] = []  # List of 0s and 1s

    def write(self, bit: bool) -> None:
        """Write one decision as a single bit (True=1, False=0)."""
        self._bits.append(1 if bit else 0)

    def extend(self, path: Iterable[bool]) -> None:
        """Write every decision of a path in order."""
        for bit in path:
            self.write(bit)

    def bit_length(self) -> int:
        """Return the current number of bits written."""
        return len(self._bits)

    def to_bytes(self) -> bytes:
        """Convert the bit buffer to bytes.

        If the number of bits is not a multiple of 8, the last byte
        is padded with zeros on the right (LSB side).

        Returns:
            Packed bytes
        """
        if not self._bits:
            return b""

        padded_bits = self._bits + [0] * ((-len(self._bits)) % 8)

        result = bytearray()
        for i in range(0, len(padded_bits), 8):
            byte = 0
            for j in range(8):
                byte = (byte << 1) | padded_bits[i + j]
            result.append(byte)

        return bytes(result)


class PathUnpacker:
    """Reads decisions bit-by-bit from a byte buffer.

    Example:
        >>> unpacker = PathUnpacker(b"\\xa0")
        >>> unpacker.read_path(3)
        [True, False, True]
    """

    def __init__(self, data: bytes) -> None:
        """Initialize an unpacker over the given data.

        Args:
            data: Byte buffer to unpack
        """
        self._bits: list[int] = []
        for byte in data:
            for i in range(7, -1, -1):
                self._bits.append((byte >> i) & 1)
        self._position = 0

    def read(self) -> bool:
        """Read a single decision.

        Raises:
            IndexError: If no more bits are available
        """
        if self._position >= len(self._bits):
            raise IndexError("Attempted to read past end of bit buffer")

        value = self._bits[self._position] == 1
        self._position += 1
        return value

    def read_path(self, num_bits: int) -> list[bool]:
        """Read num_bits decisions.

        Raises:
            ValueError: If num_bits is negative
            IndexError: If not enough bits are available
        """
        if num_bits < 0:
            raise ValueError(f"num_bits must be >= 0, got {num_bits}")

        if num_bits > self.bits_remaining():
            raise IndexError(
                f"Not enough bits: need {num_bits}, have {self.bits_remaining()}"
            )

        return [self.read() for _ in range(num_bits)]

    def bits_remaining(self) -> int:
        """Return the number of unread bits."""
        return len(self._bits) - self._position

    def position(self) -> int:
        """Return the current read position in bits."""
        return self._position


def pack_path(path: Iterable[bool]) -> bytes:
    """Pack a path into bytes, zero-padding the final byte.

    Example:
        >>> pack_path([False, True, True])
        b'`'
    """
    packer = PathPacker()
    packer.extend(path)
    return packer.to_bytes()


def unpack_path(data: bytes, num_bits: int) -> list[bool]:
    """Unpack the first num_bits decisions from packed data.

    Args:
        data: Bytes produced by pack_path()
        num_bits: Number of decisions to read (the original path length)

    Returns:
        The decoded path

    Raises:
        DecodeError: If data is truncated or num_bits is negative
    """
    unpacker = PathUnpacker(data)
    try:
        return unpacker.read_path(num_bits)
    except (IndexError, ValueError) as e:
        raise DecodeError(f"Cannot unpack {num_bits} decisions: {e}") from e
