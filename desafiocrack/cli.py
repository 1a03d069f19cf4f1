"""Command line entry: find the cipher parameters of a numbered challenge."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .report import render_report
from .solver import Solution, solve

__all__ = ["challenge_paths", "read_hint", "main", "MAX_HINT"]

MAX_HINT = 999

_FAILURE_CAUSES = (
    "La pista no coincide con el texto",
    "Los parametros estan fuera del rango probado",
    "El formato del archivo es diferente",
    "Se uso un metodo de compresion diferente",
)


def challenge_paths(tag: str) -> tuple[Path, Path]:
    """Return the encrypted file and hint file names for challenge ``tag``."""
    if len(tag) != 1 or tag.isspace():
        raise ValueError(f"challenge tag must be one character, got {tag!r}")
    return Path(f"Encriptado{tag}.txt"), Path(f"pista{tag}.txt")


def read_hint(path: str | Path) -> bytes:
    """Read the first line of ``path``, at most MAX_HINT bytes of it."""
    with open(path, "rb") as handle:
        first = handle.readline()
    return first.split(b"\n", 1)[0][:MAX_HINT]


def _read_tag_from_stdin() -> str | None:
    while True:
        char = sys.stdin.read(1)
        if not char:
            return None
        if not char.isspace():
            return char


def _show(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _print_solution(solution: Solution, output_dir: Path) -> None:
    print("\n=== SOLUCION COMPLETA ENCONTRADA ===")
    print("Parametros de encriptacion:")
    print(f"- Rotacion (n): {solution.rotation} bits a la derecha")
    print(f"- Clave XOR (K): 0x{solution.key:x} ({solution.key} decimal)")
    print(f"- Metodo de compresion: {solution.method.label}")
    print(f"- Posicion de la pista: caracter #{solution.position + 1}")
    print("\n=== TEXTO COMPLETO RECONSTRUIDO ===")
    print(f"Longitud: {len(solution.text)} caracteres")
    print("\n=== CONTEXTO DE LA PISTA ===")
    print(f"...{_show(solution.context())}...")
    print("\n=== TEXTO COMPLETO ===")
    print(_show(solution.text))
    name = f"resultado_{solution.method.suffix}.txt"
    (output_dir / name).write_bytes(solution.text)
    print(f"\nResultado guardado en: {name}")


def _failure_text() -> str:
    """Build the message shown when no parameters were found."""
    lines = ["\n=== NO SE ENCONTRÓ SOLUCION ===", "Posibles causas:"]
    lines.extend(f"{number}. {cause}" for number, cause in enumerate(_FAILURE_CAUSES, start=1))
    return "\n".join(lines)


def _run_report(encrypted: Path, display: Path, rotation: int, key: int) -> int:
    print("=== DESENCRIPTADOR ===")
    print(f"Archivo: {display}")
    try:
        data = encrypted.read_bytes()
    except OSError:
        print(f"Error al abrir: {display}")
        data = b""
    if not data:
        print("Error: No se pudo leer el archivo")
        return 1
    print(render_report(data, rotation, key))
    return 0


def _run_solver(encrypted: Path, hint_path: Path, names: tuple[Path, Path], directory: Path) -> int:
    print("=== SOLUCIONADOR COMPLETO DE DESAFIO ===")
    print("Deteccion automatica: RLE o LZ78")
    print("Buscando parametros n (rotacion) y K (clave XOR)")
    try:
        data = encrypted.read_bytes()
    except OSError:
        print(f"Error: No se pudo abrir {names[0]}")
        return 1
    print(f"Archivo encriptado: {names[0]} ({len(data)} bytes)")
    try:
        hint = read_hint(hint_path)
    except OSError:
        print(f"Error: No se pudo abrir {names[1]}")
        return 1
    print(f'Pista conocida: "{_show(hint)}" ({len(hint)} caracteres)')

    print("\n=== INICIANDO BUSQUEDA AUTOMATICA ===")
    print("Probando ambos metodos: RLE y LZ78")
    print("Rango de parametros:")
    print("- Rotacion (n): 1 a 7")
    print("- Clave XOR (K): 0 a 255")
    print("\nBuscando...")

    solution = solve(data, hint)
    if solution is None:
        print(_failure_text())
    else:
        print("¡SOLUCION ENCONTRADA!")
        _print_solution(solution, directory)
    print("\n=== FIN DEL PROGRAMA ===")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Solve a challenge, or with --rotation and --key print a decryption report."""
    parser = argparse.ArgumentParser(
        prog="desafiocrack",
        description="Recover rotation and XOR key of an encrypted, compressed file.",
    )
    parser.add_argument("tag", nargs="?", help="challenge character; read from stdin if omitted")
    parser.add_argument("-C", "--directory", type=Path, default=Path("."),
                        help="directory holding the input files and receiving the output")
    parser.add_argument("--rotation", type=int, help="known rotation, for a report only")
    parser.add_argument("--key", type=lambda text: int(text, 0), help="known XOR key, for a report only")
    args = parser.parse_args(argv)

    if (args.rotation is None) != (args.key is None):
        parser.error("--rotation and --key must be given together")
    if args.key is not None and not 0 <= args.key <= 0xFF:
        parser.error("--key must be in range 0..255")

    tag = args.tag if args.tag is not None else _read_tag_from_stdin()
    if tag is None:
        parser.error("no challenge tag given")
    try:
        names = challenge_paths(tag)
    except ValueError as exc:
        parser.error(str(exc))

    directory: Path = args.directory
    encrypted, hint_path = (directory / name for name in names)
    if args.rotation is not None:
        return _run_report(encrypted, names[0], args.rotation, args.key)
    return _run_solver(encrypted, hint_path, names, directory)


if __name__ == "__main__":
    sys.exit(main())