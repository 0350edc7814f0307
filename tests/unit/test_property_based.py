"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from rangepath import (
    MalformedPathError,
    decode,
    encode,
    encode_from,
    max_path_length,
    pack_path,
    path_from_str,
    path_to_str,
    unpack_path,
)


@st.composite
def range_and_target(draw: st.DrawFn, max_size: int = 1 << 70) -> tuple[int, int, int]:
    """Draw (start, end, target) with start <= target < end."""
    start = draw(st.integers(min_value=-(1 << 70), max_value=1 << 70))
    size = draw(st.integers(min_value=1, max_value=max_size))
    target = draw(st.integers(min_value=start, max_value=start + size - 1))
    return start, start + size, target


@st.composite
def range_target_midpoint(draw: st.DrawFn) -> tuple[int, int, int, int]:
    """Draw (start, end, target, midpoint) with start < midpoint < end."""
    start, end, target = draw(range_and_target().filter(lambda r: r[1] - r[0] >= 2))
    midpoint = draw(st.integers(min_value=start + 1, max_value=end - 1))
    return start, end, target, midpoint


class TestCodecProperties:
    """Property-based tests for the codec."""

    @given(args=range_and_target())
    def test_encode_decode_roundtrip(self, args: tuple[int, int, int]) -> None:
        """Test encode/decode is invertible."""
        start, end, target = args
        assert decode(start, end, encode(start, end, target)) == target

    @given(args=range_and_target())
    def test_length_bound(self, args: tuple[int, int, int]) -> None:
        """Test paths never exceed ceil(log2(size))."""
        start, end, target = args
        assert len(encode(start, end, target)) <= max_path_length(start, end)

    @given(args=range_and_target(max_size=1 << 63))
    def test_length_fits_64_bits(self, args: tuple[int, int, int]) -> None:
        """Test 64-bit sized ranges never need more than 64 decisions."""
        start, end, target = args
        assert len(encode(start, end, target)) <= 64

    @given(args=range_target_midpoint())
    def test_custom_midpoint_roundtrip(self, args: tuple[int, int, int, int]) -> None:
        """Test encode_from/decode with the same midpoint is invertible."""
        start, end, target, midpoint = args
        bits = encode_from(start, end, target, midpoint)
        assert decode(start, end, bits, midpoint=midpoint) == target
        assert decode(start, end, bits, midpoint=midpoint, strict=True) == target

    @given(args=range_and_target())
    def test_encode_deterministic(self, args: tuple[int, int, int]) -> None:
        """Test encoding is deterministic."""
        start, end, target = args
        assert encode(start, end, target) == encode(start, end, target)

    @given(
        args=range_and_target(max_size=1 << 20),
        other=st.integers(min_value=0, max_value=(1 << 20) - 1),
    )
    def test_distinct_values_distinct_paths(
        self, args: tuple[int, int, int], other: int
    ) -> None:
        """Test two values of one range never share a path."""
        start, end, target = args
        other_target = start + other % (end - start)
        if other_target != target:
            assert encode(start, end, target) != encode(start, end, other_target)

    @given(
        size=st.integers(min_value=1, max_value=1000),
        path=st.lists(st.booleans(), max_size=12),
    )
    def test_strict_decode_only_accepts_canonical(self, size: int, path: list[bool]) -> None:
        """Test strict decoding either raises or returns a value that re-encodes to path."""
        try:
            value = decode(0, size, path, strict=True)
        except MalformedPathError:
            assert encode(0, size, decode(0, size, path)) != path
        else:
            assert encode(0, size, value) == path


class TestRepresentationProperties:
    """Property-based tests for packed and textual paths."""

    @given(path=st.lists(st.booleans(), max_size=200))
    def test_pack_unpack_roundtrip(self, path: list[bool]) -> None:
        """Test packing preserves the path given its length."""
        packed = pack_path(path)
        assert len(packed) == (len(path) + 7) // 8
        assert unpack_path(packed, len(path)) == path

    @given(path=st.lists(st.booleans(), max_size=200))
    def test_text_roundtrip(self, path: list[bool]) -> None:
        """Test text form preserves the path."""
        assert path_from_str(path_to_str(path)) == path
