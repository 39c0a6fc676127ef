"""
Hack Assembler
==============

Two-pass assembler for the Hack 16-bit computer. Converts Hack assembly
source (.asm) into the textual binary format (.hack) loaded into ROM.

Main Components
---------------
- **Assembler**: Main class that loads source and writes output files
- **parser**: Classifies lines and splits C-instructions into fields
- **SymbolTable**: Predefined symbols, labels and variables
- **CodeGenerator**: Two-pass label resolution and encoding

Example Usage
-------------
>>> from hack_asm.assembler import assemble
>>> assemble("(LOOP)\\n@LOOP\\n0;JMP")
['0000000000000000', '1110101010000111']
"""

from hack_asm.assembler.assembler import Assembler, assemble, assemble_file
from hack_asm.assembler.codegen import CodeGenerator
from hack_asm.assembler.parser import (
    InstructionKind,
    Statement,
    LabelDef,
    AddressInstruction,
    ComputeInstruction,
    classify,
    split_compute,
    parse_line,
    parse_source,
    read_lines,
)
from hack_asm.assembler.symbols import (
    PREDEFINED_SYMBOLS,
    Symbol,
    SymbolKind,
    SymbolTable,
)

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    # Parser
    "InstructionKind",
    "Statement",
    "LabelDef",
    "AddressInstruction",
    "ComputeInstruction",
    "classify",
    "split_compute",
    "parse_line",
    "parse_source",
    "read_lines",
    # Symbols
    "PREDEFINED_SYMBOLS",
    "Symbol",
    "SymbolKind",
    "SymbolTable",
    # Code generator
    "CodeGenerator",
]
