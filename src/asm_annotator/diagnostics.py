'''
clase Diagnostic y helpers para reportar problemas de entrada/salida
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

# Severidad de los diagnósticos (en español)
Severity = Literal["error", "advertencia", "nota"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "advertencia": "ADVERTENCIA",
    "nota": "NOTA",
}

@dataclass(frozen=True)
class Diagnostic:
    """Diagnóstico de la herramienta.

    El análisis de líneas nunca falla; los diagnósticos cubren el nombre de entrada
    y el acceso a archivos, con el archivo como ubicación opcional y una pista.
    """
    severity: Severity
    message: str
    file: Optional[str] = None
    hint: Optional[str] = None

    def __str__(self) -> str:
        loc = f"{self.file}: " if self.file is not None else ""
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, file, hint)

def warning(message: str, *, file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo advertencia."""
    return Diagnostic("advertencia", message, file, hint)
