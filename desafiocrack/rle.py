"""Decoder for the 3-byte run-length record format."""

from __future__ import annotations

import struct

__all__ = ["decompress_rle", "DEFAULT_MAX_RUN", "DEFAULT_LIMIT"]

DEFAULT_MAX_RUN = 1000
DEFAULT_LIMIT = 99999

_RECORD = struct.Struct(">HB")


def decompress_rle(
    data: bytes,
    max_run: int | None = DEFAULT_MAX_RUN,
    limit: int | None = DEFAULT_LIMIT,
) -> bytes:
    """Expand records of a big-endian 16-bit run length followed by one byte.

    Runs of length zero, or longer than ``max_run``, are skipped. The output
    is cut at ``limit`` bytes. A trailing partial record is ignored. Passing
    ``None`` for either bound disables it.
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must not be negative")
    data = bytes(data)
    usable = len(data) - len(data) % _RECORD.size
    out = bytearray()
    for length, char in _RECORD.iter_unpack(data[:usable]):
        if length == 0 or (max_run is not None and length > max_run):
            continue
        if limit is not None:
            length = min(length, limit - len(out))
        out += bytes([char]) * length
        if limit is not None and len(out) >= limit:
            break
    return bytes(out)