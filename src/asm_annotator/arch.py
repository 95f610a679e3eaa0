'''
detección de la arquitectura (ISA) a partir de marcas textuales del fuente
'''

from __future__ import annotations
from typing import Iterable, Tuple

from .lexer import trim

UNKNOWN = "Unknown"

# (arquitectura, marcas) en orden de prioridad; coincidencia de subcadena sensible a mayúsculas.
# '__aarch64__' figura en el grupo x86-64 (mapeo histórico, se conserva).
TRIGGERS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("x86-64",  (".code64", ".x64", ".quad", "BITS 64", "__x86_64__", "__amd64__", "__aarch64__")),
    ("x86",     (".code32", ".x86", "BITS 32", "__i386__")),
    ("ARM",     (".arm", ".thumb", "__ARM_ARCH", "__arm__")),
    ("MIPS",    (".mips", ".mips64", "__mips__")),
    ("PowerPC", (".ppc", "__powerpc__", "__ppc__")),
    ("RISC-V",  (".riscv", "__riscv")),
    ("SPARC",   (".sparc", "__sparc__")),
)

ARCHITECTURES = tuple(name for name, _ in TRIGGERS) + (UNKNOWN,)

def match_line(line: str) -> str:
    """Arquitectura indicada por una línea, o 'Unknown' si no tiene marcas."""
    s = trim(line)
    for arch, marks in TRIGGERS:
        if any(m in s for m in marks):
            return arch
    return UNKNOWN

def detect_architecture(lines: Iterable[str]) -> str:
    """Devuelve la arquitectura de la primera línea con alguna marca, o 'Unknown'."""
    for line in lines:
        arch = match_line(line)
        if arch != UNKNOWN:
            return arch
    return UNKNOWN

def detect_architecture_file(path: str) -> str:
    """Igual que detect_architecture sobre un archivo; propaga OSError si no se puede leer."""
    with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
        return detect_architecture(line.rstrip("\n") for line in f)
