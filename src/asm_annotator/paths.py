'''
validación del nombre de entrada y nombre del archivo de salida
'''

from __future__ import annotations
from typing import FrozenSet

# Nombres de dispositivo reservados en Windows
FORBIDDEN_NAMES: FrozenSet[str] = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{n}" for n in range(1, 10)]
    + [f"LPT{n}" for n in range(1, 10)]
)

# Extensiones aceptadas (sin '.lst')
SUPPORTED_EXTENSIONS: FrozenSet[str] = frozenset({"asm", "s", "hla", "inc", "palx", "mid"})

OUTPUT_SUFFIX = "_analyzed"

def validate_source_path(name: str) -> None:
    """Lanza ValueError si el nombre está vacío, usa un nombre reservado
    (en cualquier componente, sin distinguir mayúsculas) o una extensión no soportada."""
    if not name.strip(" \t\r\f\v"):
        raise ValueError("Detected empty input")
    *dirs, base = name.upper().split('/')
    if any(part in FORBIDDEN_NAMES for part in dirs):
        raise ValueError("Detected forbidden keyword")
    stem, dot, ext = base.rpartition('.')
    if dot:
        if ext.lower() not in SUPPORTED_EXTENSIONS:
            raise ValueError("Detected forbidden keyword")
        base = stem
    if base in FORBIDDEN_NAMES:
        raise ValueError("Detected forbidden keyword")

def output_path(name: str) -> str:
    """Inserta '_analyzed' antes del último '.', o lo añade al final si no hay."""
    stem, dot, ext = name.rpartition('.')
    if not dot:
        return name + OUTPUT_SUFFIX
    return f"{stem}{OUTPUT_SUFFIX}.{ext}"
