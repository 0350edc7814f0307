#!/usr/bin/env python3
"""Basic usage example for rangepath.

This example demonstrates:
1. Encoding a value as a binary search path
2. Decoding the path back with the same range
3. Biasing the first split for skewed values
4. Packing paths into bytes and measuring path lengths
"""

from __future__ import annotations

from rangepath import (
    PathRange,
    decode,
    encode,
    length_histogram,
    mean_path_length,
    pack_path,
    path_to_str,
    unpack_path,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("rangepath Basic Usage Example")
    print("=" * 60)
    print()

    # Encode a colour channel value
    print("1. Encoding 200 in [0, 256)...")
    path = encode(0, 256, 200)
    print(f"   Path: {path_to_str(path)} ({len(path)} bits instead of 8)")
    print()

    print("2. Decoding with the same range...")
    print(f"   Value: {decode(0, 256, path)}")
    print()

    # Readings clustered near zero benefit from a low first split
    print("3. Biasing the first split...")
    biased = PathRange(start=0, end=1024, midpoint=16)
    for value in (3, 12, 700):
        bits = biased.encode(value)
        print(f"   {value:>4}: {path_to_str(bits) or '(empty)'}")
    print()

    print("4. Packing and sizing...")
    packed = pack_path(path)
    print(f"   Packed: {packed.hex()} (keep the bit count {len(path)} alongside)")
    print(f"   Unpacked: {unpack_path(packed, len(path))}")
    print(f"   Length histogram for [0, 256): {length_histogram(0, 256)}")
    print(f"   Mean path length: {mean_path_length(0, 256):.3f} bits")
    print()


if __name__ == "__main__":
    main()
