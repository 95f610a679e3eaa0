from __future__ import annotations
from typing import Callable, Dict, Optional

from .ast import Label, Directive, Instruction, Unknown, Line
from .isa import DIRECTIVES, STRING_PREFIX_LEN, is_instruction, is_directive
from .lexer import is_blank, trim, split_opcode, get_operand, split_first
from .operands import analyze_operand

Handler = Callable[[Instruction], Optional[str]]

def _decorate(operand: str) -> str:
    """Type-suffix form of an operand, keeping its leading whitespace verbatim."""
    token = operand.lstrip()
    return operand[:len(operand) - len(token)] + analyze_operand(token, True)

# ---- instruction handlers (None means "nothing specific": generic fallback) ----

def _int(ins: Instruction) -> Optional[str]:
    operand, _ = split_first(ins.operands, ' ')
    if operand.startswith("0x"):
        return f"Instruction: int | Interrupt: {operand}"
    return None

def _arith(ins: Instruction) -> Optional[str]:
    dest, comma, src = ins.operands.partition(',')
    if not comma:
        return None
    return (f"Instruction: {ins.opcode} | Destination: {_decorate(dest)}"
            f" | Source:{_decorate(src)}")

def _binary(ins: Instruction) -> str:
    dest, src = split_first(ins.operands, ' ')
    return (f"Instruction: {ins.opcode} | Destination: {_decorate(dest)}"
            f" | Source: {_decorate(src)}")

def _on_line(template: str) -> Handler:
    """Handler whose operand comes from the raw line."""
    return lambda ins: template.format(op=get_operand(ins.line))

def _on_operands(template: str) -> Handler:
    return lambda ins: template.format(op=ins.operands)

def _fixed(text: str) -> Handler:
    return lambda ins: text

HANDLERS: Dict[str, Handler] = {
    "global": _on_operands("Declare global symbol {op}"),
    "len":    _on_operands("Calculate length of {op}"),
    "int":    _int,
    "push":   _on_line("push instruction: pushed {op} into stack"),
    "jmp":    _on_line("jmp instruction: jumped to {op}"),
    "call":   _on_line("call instruction: called {op}"),
    "je":     _on_line("je instruction: jumped to {op} if equal"),
    "jne":    _on_line("jne instruction: jumped to {op} if not equal"),
    "inc":    _on_line("inc instruction: incremented {op}"),
    "dec":    _on_line("dec instruction: decremented {op}"),
    "ret":    _fixed("ret instruction: returned from function"),
    "nop":    _fixed("no operation"),
    "cmp":    _binary,
    "mul":    _binary,
    "div":    _binary,
}
for _m in ("mov", "movq", "add", "addq", "sub", "subq"):
    HANDLERS[_m] = _arith

def analyze_instruction(ins: Instruction) -> str:
    handler = HANDLERS.get(ins.opcode)
    text = handler(ins) if handler is not None else None
    if text is None:
        return f"Unknown instruction: {ins.opcode}"
    return text

def analyze_directive(name: str, operand: str) -> str:
    template = DIRECTIVES.get(name)
    if template is None:
        return f"Unknown directive: {name}"
    if name == ".string":
        operand = trim(operand)[STRING_PREFIX_LEN:]
    return template.format(op=operand)

def classify_line(line: str) -> Optional[Line]:
    """Classify one raw source line; None for blank lines.

    - 'name:' (after trimming spaces) is a Label.
    - A known mnemonic is an Instruction with its raw operand text.
    - A dot-prefixed opcode is a Directive; its operand is taken from the raw line.
    - Anything else is Unknown.
    """
    if is_blank(line):
        return None
    trimmed = trim(line)
    if trimmed.endswith(':'):
        return Label(trimmed[:-1])
    opcode, operands = split_opcode(trimmed)
    if is_instruction(opcode):
        return Instruction(opcode=opcode, operands=operands, line=line)
    if is_directive(opcode):
        return Directive(name=opcode, operand=get_operand(line))
    return Unknown(trimmed)

def analyze_line(line: str) -> str:
    """Annotation for one source line ('' when there is nothing to add)."""
    node = classify_line(line)
    if node is None:
        return ""
    if isinstance(node, Label):
        return f"Label: {node.name}"
    if isinstance(node, Instruction):
        return analyze_instruction(node)
    if isinstance(node, Directive):
        return analyze_directive(node.name, node.operand)
    return "Unknown instruction"
