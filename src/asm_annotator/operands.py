from __future__ import annotations
import string
from typing import Optional

from .ast import Operand
from .regs import is_reg

def is_immediate(operand: str) -> bool:
    return operand[0] == '$' or operand[0] in string.digits or operand == "0"

def is_memory_address(operand: str) -> bool:
    """'[...]' con un '%' dentro; heurística estrecha (estilo AT&T)."""
    return operand.startswith('[') and operand.endswith(']') and '%' in operand

def classify_operand(operand: str) -> Optional[Operand]:
    """Clasifica un operando; None si está vacío.

    Orden: registro > inmediato > dirección de memoria > etiqueta/identificador.
    """
    if not operand:
        return None
    op = operand.lower()
    if is_reg(op):
        return Operand("Register", op)
    if is_immediate(op):
        return Operand("Immediate", op[1:] if op[0] == '$' else op)
    if is_memory_address(op):
        return Operand("Memory Address", op[1:-1])
    return Operand("Label/Identifier", op)

def analyze_operand(operand: str, append_type: bool = False) -> str:
    """'Kind: value', o 'value (Kind)' con append_type; '' para un operando vacío."""
    op = classify_operand(operand)
    if op is None:
        return ""
    return op.decorated() if append_type else op.describe()
