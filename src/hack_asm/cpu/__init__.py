"""
Hack CPU Package
================

Instruction set definitions shared by the assembler and the disassembler.
Both tools use the same tables, so an encoded word always decodes back to
the instruction that produced it.

Usage:
    from hack_asm.cpu import comp_code, dest_code, jump_code
"""

from hack_asm.cpu.hack import (
    # Word layout
    WORD_BITS,
    MAX_ADDRESS,
    COMPUTE_PREFIX,
    # Tables
    COMP_CODES,
    DEST_FLAGS,
    DEST_MNEMONICS,
    JUMP_CODES,
    # Encoding
    dest_code,
    jump_code,
    comp_code,
    encode_address,
    encode_compute,
    # Decoding
    is_compute_word,
    decode_dest,
    decode_jump,
    decode_comp,
)

__all__ = [
    "WORD_BITS",
    "MAX_ADDRESS",
    "COMPUTE_PREFIX",
    "COMP_CODES",
    "DEST_FLAGS",
    "DEST_MNEMONICS",
    "JUMP_CODES",
    "dest_code",
    "jump_code",
    "comp_code",
    "encode_address",
    "encode_compute",
    "is_compute_word",
    "decode_dest",
    "decode_jump",
    "decode_comp",
]
