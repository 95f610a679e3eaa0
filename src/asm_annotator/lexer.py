from __future__ import annotations
from typing import Tuple

BLANK_CHARS = " \t\r\n"

def is_blank(line: str) -> bool:
    """True for an empty line or one made only of spaces, tabs, CR or LF."""
    return not line.strip(BLANK_CHARS)

def trim(text: str) -> str:
    """Strip ASCII spaces (only spaces) from both ends.

    A string made only of spaces comes back unchanged."""
    s = text.strip(' ')
    return s if s else text

def split_opcode(trimmed: str) -> Tuple[str, str]:
    """Return (opcode, operands) split at the first space.

    Without a space the operands are the whole line ('ret' -> ('ret', 'ret'))."""
    opcode, sep, rest = trimmed.partition(' ')
    if not sep:
        return opcode, trimmed
    return opcode, rest

def get_operand(line: str) -> str:
    """Text after the first space of the raw line, trailing spaces removed."""
    _, sep, operand = line.partition(' ')
    if not sep:
        return ""
    s = operand.rstrip(' ')
    return s if s else operand

def split_first(text: str, sep: str) -> Tuple[str, str]:
    """Split at the first `sep`; when absent both halves are the whole text."""
    head, found, tail = text.partition(sep)
    if not found:
        return text, text
    return head, tail
