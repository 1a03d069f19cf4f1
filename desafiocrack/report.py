"""Plain-text report on a decrypted byte stream: C-style arrays, preview, statistics."""

from __future__ import annotations

from dataclasses import dataclass

from .bits import decrypt

__all__ = [
    "CharStats",
    "hex_array",
    "char_array",
    "preview",
    "char_stats",
    "render_report",
    "PREVIEW_LIMIT",
]

PREVIEW_LIMIT = 300
_HEX_PER_LINE = 15
_CHARS_PER_LINE = 10
_LINE_BREAK = "\n    "


def _printable(byte: int) -> bool:
    return 32 <= byte <= 126


def _c_array(declaration: str, items: list[str], per_line: int) -> str:
    parts = [f"{declaration} = {{"]
    last = len(items) - 1
    for index, item in enumerate(items):
        parts.append(item)
        if index < last:
            parts.append(", ")
        if (index + 1) % per_line == 0:
            parts.append(_LINE_BREAK)
    parts.append("};")
    return "".join(parts)


def hex_array(data: bytes) -> str:
    """Format ``data`` as an ``unsigned char`` array literal of hex values."""
    data = bytes(data)
    items = [f"0x{byte:02x}" for byte in data]
    return _c_array(f"unsigned char resultado[{len(data) + 1}]", items, _HEX_PER_LINE)


def char_array(data: bytes) -> str:
    """Format ``data`` as a ``char`` array literal, quoting printable bytes."""
    data = bytes(data)
    items = [
        f"'{chr(byte)}'" if _printable(byte) else f"0x{byte:02x}" for byte in data
    ]
    return _c_array(f"char resultado[{len(data) + 1}]", items, _CHARS_PER_LINE)


def preview(data: bytes, limit: int = PREVIEW_LIMIT) -> str:
    """Render the first ``limit`` bytes as text, non-printables as ``[hex]``."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return "".join(
        chr(byte) if _printable(byte) else f"[{byte:x}]" for byte in bytes(data)[:limit]
    )


@dataclass(frozen=True)
class CharStats:
    """Counts of ASCII character classes in a byte stream."""

    lowercase: int
    uppercase: int
    digits: int
    other: int

    @property
    def total(self) -> int:
        """Number of bytes counted."""
        return self.lowercase + self.uppercase + self.digits + self.other


def char_stats(data: bytes) -> CharStats:
    """Count lower-case letters, upper-case letters, digits and everything else."""
    lower = upper = digits = other = 0
    for byte in bytes(data):
        if 0x61 <= byte <= 0x7A:
            lower += 1
        elif 0x41 <= byte <= 0x5A:
            upper += 1
        elif 0x30 <= byte <= 0x39:
            digits += 1
        else:
            other += 1
    return CharStats(lowercase=lower, uppercase=upper, digits=digits, other=other)


def render_report(data: bytes, rotation: int, key: int) -> str:
    """Decrypt ``data`` with fixed parameters and describe the result."""
    data = bytes(data)
    if not data:
        raise ValueError("no data to decrypt")
    plain = decrypt(data, rotation, key)
    stats = char_stats(plain)
    lines = [
        f"Parametros: Rotacion={rotation}, Clave=0x{key:x}",
        f"size del archivo: {len(data)} bytes",
        "",
        "=== DESENCRIPTACION COMPLETADA ===",
        "",
        "=== ARRAY EN HEXADECIMAL ===",
        hex_array(plain),
        "",
        "=== ARRAY COMO CARACTERES ===",
        char_array(plain),
        "",
        "=== VISTA PREVIA COMO TEXTO ===",
        f"Primeros {PREVIEW_LIMIT} caracteres:",
        preview(plain),
        "",
        "=== ESTADISTICAS ===",
        f"Letras minusculas: {stats.lowercase}",
        f"Letras mayusculas: {stats.uppercase}",
        f"Digitos: {stats.digits}",
        f"Otros caracteres: {stats.other}",
        "",
        "=== FIN ===",
    ]
    return "\n".join(lines)