"""Decoder for the 3-byte LZ78 record format."""

from __future__ import annotations

import struct

__all__ = ["decompress_lz78", "DEFAULT_LIMIT", "MAX_ENTRIES"]

DEFAULT_LIMIT = 99999
MAX_ENTRIES = 65536

_RECORD = struct.Struct(">HB")


def decompress_lz78(data: bytes, limit: int | None = DEFAULT_LIMIT) -> bytes:
    """Expand records of a big-endian 16-bit dictionary index and one byte.

    Index 0 stands for the empty prefix. Decoding stops at a zero byte in the
    character position, at a trailing partial record, or once ``limit`` bytes
    have been written (``None`` disables the limit). Records referring to an
    index not yet in the dictionary are ignored.
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must not be negative")
    data = bytes(data)
    usable = len(data) - len(data) % _RECORD.size
    entries: list[bytes] = [b""]
    out = bytearray()
    for index, char in _RECORD.iter_unpack(data[:usable]):
        if char == 0:
            break
        if index >= len(entries):
            continue
        phrase = entries[index] + bytes([char])
        if limit is not None:
            out += phrase[: limit - len(out)]
        else:
            out += phrase
        if len(entries) < MAX_ENTRIES:
            entries.append(phrase)
        if limit is not None and len(out) >= limit:
            break
    return bytes(out)