'''
tablas de mnemónicos y directivas reconocidos, con sus plantillas de texto
'''

from __future__ import annotations
from typing import Dict, FrozenSet

# Mnemónicos reconocidos (sensible a mayúsculas)
INSTRUCTIONS: FrozenSet[str] = frozenset({
    "int", "push", "pop", "mov", "movq", "add", "addq", "sub", "subq",
    "jmp", "call", "ret", "cmp", "je", "jne", "inc", "dec", "mul", "div",
    "global", "len", "nop",
})

# Plantillas por directiva; '{op}' es el operando extraído de la línea cruda
DIRECTIVES: Dict[str, str] = {}

def _add(names: str, template: str):
    for name in names.split():
        DIRECTIVES[name] = template

# Secciones
_add(".data",    "Data section declared")
_add(".bss",     "BSS (uninitialized data) section declared")
_add(".text",    "Text (code) section declared")
_add(".section", "Section {op} declared")

# Símbolos y constantes
_add(".globl .global", "Global symbol {op} declared")
_add(".equ .set",      "Constant {op} defined")
_add(".comm",          "Common block {op} declared")

# Datos
_add(".byte",   "Byte value {op} declared")
_add(".word",   "Word value {op} declared")
_add(".dword",  "Double word value {op} declared")
_add(".quad",   "Quad word (64-bit) value {op} declared")
_add(".string", "string constant {op} declared")

# Disposición
_add(".align",          "Align to {op} bytes")
_add(".org",            "Set origin to address {op}")
_add(".reserve .space", "Reserve {op} bytes")

# Archivo
_add(".file",   "File name set to {op}")
_add(".incbin", "Include binary file {op}")
_add(".end",    "End of assembly")

# '.string' descarta este prefijo fijo del operando ('.string ' en la línea sangrada)
STRING_PREFIX_LEN = 8

def is_instruction(opcode: str) -> bool:
    return opcode in INSTRUCTIONS

def is_directive(opcode: str) -> bool:
    return opcode.startswith('.')
