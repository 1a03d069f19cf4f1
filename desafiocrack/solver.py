"""Brute-force search for the cipher parameters using a known plaintext hint."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .bits import decrypt
from .lz78 import decompress_lz78
from .rle import decompress_rle

__all__ = [
    "Method",
    "Solution",
    "try_combination",
    "solve",
    "ROTATIONS",
    "KEYS",
    "DEFAULT_METHODS",
]

ROTATIONS = range(1, 8)
KEYS = range(256)


class Method(enum.Enum):
    """Compression method recognised in the decrypted data."""

    RLE = 1
    LZ78 = 2

    @property
    def label(self) -> str:
        """Display name of the method."""
        return self.name

    @property
    def suffix(self) -> str:
        """Lower-case tag used in output file names."""
        return self.name.lower()

    def decompress(self, data: bytes) -> bytes:
        """Expand ``data`` with this method's decoder."""
        return _DECODERS[self](data)


_DECODERS: dict[Method, Callable[[bytes], bytes]] = {
    Method.RLE: decompress_rle,
    Method.LZ78: decompress_lz78,
}

DEFAULT_METHODS: tuple[Method, ...] = (Method.RLE, Method.LZ78)


@dataclass(frozen=True)
class Solution:
    """A parameter set under which the decompressed text contains the hint."""

    rotation: int
    key: int
    method: Method
    position: int
    text: bytes
    hint: bytes

    def context(self, margin: int = 20) -> bytes:
        """Return the hint together with up to ``margin`` bytes on each side."""
        if margin < 0:
            raise ValueError("margin must not be negative")
        start = max(self.position - margin, 0)
        end = min(self.position + len(self.hint) + margin, len(self.text))
        return self.text[start:end]


def _as_bytes(hint: bytes | str) -> bytes:
    if isinstance(hint, str):
        return hint.encode("utf-8")
    return bytes(hint)


def try_combination(
    data: bytes,
    hint: bytes | str,
    rotation: int,
    key: int,
    methods: Iterable[Method] = DEFAULT_METHODS,
) -> Solution | None:
    """Decrypt ``data`` with one parameter pair and look for ``hint``.

    Each method is tried in the given order; the first whose output contains
    the hint wins. Returns ``None`` when there is no match, when either input
    is empty, or when ``rotation`` lies outside 1..7.
    """
    data = bytes(data)
    hint = _as_bytes(hint)
    if not data or not hint or rotation not in ROTATIONS:
        return None
    plain = decrypt(data, rotation, key)
    for method in methods:
        text = method.decompress(plain)
        position = text.find(hint)
        if position >= 0:
            return Solution(
                rotation=rotation,
                key=key,
                method=method,
                position=position,
                text=text,
                hint=hint,
            )
    return None


def solve(
    data: bytes,
    hint: bytes | str,
    methods: Iterable[Method] = DEFAULT_METHODS,
) -> Solution | None:
    """Try every rotation 1..7 and key 0..255 in order; return the first match."""
    data = bytes(data)
    hint = _as_bytes(hint)
    methods = tuple(methods)
    for rotation in ROTATIONS:
        for key in KEYS:
            found = try_combination(data, hint, rotation, key, methods)
            if found is not None:
                return found
    return None