'''
tabla de registros reconocidos (x86/x64, FPU/SIMD, control, MSR)
'''

from __future__ import annotations
from typing import FrozenSet

def _seq(prefix: str, start: int, stop: int, suffix: str = "") -> list[str]:
    return [f"{prefix}{n}{suffix}" for n in range(start, stop + 1)]

# Propósito general: 64, 32, 16 y 8 bits
GPR_64 = ["rax", "rbx", "rcx", "rdx", "rsi", "rdi", "rbp", "rsp", *_seq("r", 8, 15)]
GPR_32 = ["eax", "ebx", "ecx", "edx", "esi", "edi", "ebp", "esp", *_seq("r", 8, 15, "d")]
GPR_16 = ["ax", "bx", "cx", "dx", "si", "di", "bp", "sp", *_seq("r", 8, 15, "w")]
GPR_8  = ["al", "ah", "bl", "bh", "cl", "ch", "dl", "dh",
          "sil", "dil", "bpl", "spl", *_seq("r", 8, 15, "b")]

# Puntero de instrucción y banderas
POINTER_FLAGS = ["eip", "rip", "eflags", "rflags"]

# x87, MMX, SSE, AVX, AVX-512
FPU_SIMD = [*_seq("st", 0, 7), *_seq("mm", 0, 7), *_seq("xmm", 0, 15),
            *_seq("ymm", 0, 15), *_seq("zmm", 0, 31)]

# Control, depuración (dr4/dr5 reservados) y test
SYSTEM = [*_seq("cr", 0, 4), *_seq("dr", 0, 3), "dr6", "dr7", *_seq("tr", 3, 7),
          "gdtr", "idtr", "ldtr", "msw"]

# MSR con nombre; physmask6 no figura en la lista histórica
MSRS = [
    "msr_ia32_apic_base", "msr_ia32_mtrrcap",
    *_seq("msr_ia32_mtrr_physbase", 0, 10),
    *[m for m in _seq("msr_ia32_mtrr_physmask", 0, 10) if m != "msr_ia32_mtrr_physmask6"],
    "msr_ia32_perf_status", "msr_ia32_perf_ctl", "msr_ia32_time_stamp_counter",
    "msr_ia32_feature_control", "msr_ia32_sysenter_cs", "msr_ia32_sysenter_esp",
    "msr_ia32_sysenter_eip", "msr_ia32_debugctl", "msr_ia32_sgxleaf",
]

REGISTERS: FrozenSet[str] = frozenset(GPR_64 + GPR_32 + GPR_16 + GPR_8 + POINTER_FLAGS
                                      + FPU_SIMD + SYSTEM + MSRS)

def is_reg(token: str) -> bool:
    """Indica si el token es un registro reconocido (sin distinguir mayúsculas)."""
    return token.lower() in REGISTERS
