"""
hack-asm - Assembler Toolchain for the Hack Computer
====================================================

This package assembles programs for the Hack computer, the 16-bit
machine built in "The Elements of Computing Systems" (nand2tetris).

Main Components
---------------
- **assembler**: Two-pass Hack assembler (hackasm)
    Converts assembly source files (.asm) to binary text files (.hack)

- **disassembler**: Hack disassembler (hackdisasm)
    Decodes .hack files back into assembly for inspection

- **cpu**: Instruction set tables shared by both tools

Quick Start
-----------
Assemble a program:
    >>> from hack_asm import Assembler
    >>> asm = Assembler()
    >>> words = asm.assemble_file("Max.asm")
    >>> asm.write_hack("Max.hack")

Or use the command-line tools:
    $ hackasm Max.asm -o Max.hack
    $ hackdisasm Max.hack
"""

__version__ = "1.0.0"
__author__ = "hack-asm contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from hack_asm.assembler import Assembler, assemble, assemble_file
from hack_asm.config import AssemblerConfig
from hack_asm.disassembler import HackDisassembler
from hack_asm.errors import (
    HackError,
    AssemblerError,
    AssemblySyntaxError,
    UnresolvedCompError,
    MalformedLabelError,
    DuplicateSymbolError,
    AddressRangeError,
    SourceLocation,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Assembler
    "Assembler",
    "assemble",
    "assemble_file",
    "AssemblerConfig",
    # Disassembler
    "HackDisassembler",
    # Exception hierarchy
    "HackError",
    "AssemblerError",
    "AssemblySyntaxError",
    "UnresolvedCompError",
    "MalformedLabelError",
    "DuplicateSymbolError",
    "AddressRangeError",
    "SourceLocation",
]
