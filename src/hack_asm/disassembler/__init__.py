"""
Hack Disassembler Module
========================

Decodes Hack machine words (as found in .hack files) back into assembly
language, for inspecting assembler output.

Usage:
    from hack_asm.disassembler import HackDisassembler

    disasm = HackDisassembler()
    for instr in disasm.disassemble(Path("Max.hack").read_text(encoding="utf-8").splitlines()):
        print(instr)
"""

from .hack import HackDisassembler, DisassembledInstruction

__all__ = [
    "HackDisassembler",
    "DisassembledInstruction",
]
