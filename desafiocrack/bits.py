"""Byte-level primitives: bit rotation and the XOR/rotation cipher."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["rotate_right", "decrypt"]


def _check_byte(value: int, name: str) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in range 0..255, got {value}")


def rotate_right(byte: int, n: int) -> int:
    """Rotate an 8-bit value ``n`` bits to the right (``n`` taken modulo 8)."""
    _check_byte(byte, "byte")
    n %= 8
    if n == 0:
        return byte
    return ((byte >> n) | (byte << (8 - n))) & 0xFF


def decrypt(data: Iterable[int], rotation: int, key: int) -> bytes:
    """Undo the cipher: XOR every byte with ``key``, then rotate it right."""
    _check_byte(key, "key")
    return bytes(rotate_right(byte ^ key, rotation) for byte in data)