from __future__ import annotations

from typing import BinaryIO, Iterable

from .errors import HEADER, ReadError


def lsb(data: Iterable[int]) -> int:
    """Decode an unsigned little-endian integer of any width.

    The first byte is the least significant. Python integers are unbounded,
    so wide inputs are never truncated.
    """
    value = 0
    for shift, byte in enumerate(data):
        value |= byte << (8 * shift)
    return value


def read_exact(stream: BinaryIO, size: int, phase: str = HEADER) -> bytes:
    try:
        data = stream.read(size)
    except OSError as exc:
        raise ReadError(f"stream read failed: {exc}", phase=phase) from exc
    if data is None or len(data) < size:
        got = 0 if data is None else len(data)
        raise ReadError(f"unexpected end of stream: wanted {size} bytes, got {got}", phase=phase)
    return data
