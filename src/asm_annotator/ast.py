'''
dataclases de clasificación (Label, Directive, Instruction, Unknown, Operand)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Union

# ---- Nodos a nivel de línea ----

@dataclass(frozen=True)
class Label:
    """Etiqueta en el código fuente (p.ej., 'loop:')."""
    name: str

@dataclass(frozen=True)
class Directive:
    """Directiva del ensamblador (p.ej., .text, .byte 0x41)."""
    name: str
    operand: str

@dataclass(frozen=True)
class Instruction:
    """Mnemónico reconocido, sus operandos crudos y la línea original."""
    opcode: str
    operands: str
    line: str

@dataclass(frozen=True)
class Unknown:
    """Línea no reconocida; conserva el texto recortado."""
    text: str

Line = Union[Label, Directive, Instruction, Unknown]

# ---- Operandos ----

OperandKind = Literal["Register", "Immediate", "Memory Address", "Label/Identifier"]

@dataclass(frozen=True)
class Operand:
    """Operando clasificado: tipo y valor ya normalizado."""
    kind: OperandKind
    value: str

    def describe(self) -> str:
        return f"{self.kind}: {self.value}"

    def decorated(self) -> str:
        return f"{self.value} ({self.kind})"
