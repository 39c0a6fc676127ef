"""
Hack Instruction Set Definition
===============================

This module defines the binary encoding of the Hack computer's two
instruction formats. Both the assembler (which encodes instructions) and
the disassembler (which decodes them) use these tables.

Instruction Formats
-------------------
Every instruction is a 16-bit word.

1. **A-instruction**: ``@value``
   ```
   0vvv vvvv vvvv vvvv
   ```
   The low 15 bits are loaded into the A register.

2. **C-instruction**: ``dest=comp;jump``
   ```
   111a cccc ccdd djjj
   ```
   - ``a cccccc``: 7-bit ALU operation. The "a" bit selects the M
     (memory at A) operand instead of the A register.
   - ``ddd``: destination flags, one bit each for A, D and M.
   - ``jjj``: jump condition, one bit each for <0, =0 and >0.

Reference
---------
- The Elements of Computing Systems, chapter 6 (Nisan & Schocken)
"""

from typing import Optional

from hack_asm.errors import UnresolvedCompError


# =============================================================================
# Word Layout
# =============================================================================

WORD_BITS = 16

# A-instructions keep the top bit clear, leaving 15 bits of address.
MAX_ADDRESS = (1 << (WORD_BITS - 1)) - 1

COMPUTE_PREFIX = "111"

NO_DEST = "000"
NO_JUMP = "000"


# =============================================================================
# Destination Field
# =============================================================================

# Bit position of each destination register within the 3-bit field.
DEST_FLAGS = {
    "A": 0b100,
    "D": 0b010,
    "M": 0b001,
}

# Canonical spelling of each destination code, for the disassembler.
DEST_MNEMONICS = {
    0b000: "",
    0b001: "M",
    0b010: "D",
    0b011: "MD",
    0b100: "A",
    0b101: "AM",
    0b110: "AD",
    0b111: "AMD",
}


# =============================================================================
# Jump Field
# =============================================================================

JUMP_CODES = {
    "JGT": "001",
    "JEQ": "010",
    "JGE": "011",
    "JLT": "100",
    "JNE": "101",
    "JLE": "110",
    "JMP": "111",
}


# =============================================================================
# Computation Field
# =============================================================================
# The six ALU control bits (zx nx zy ny f no) are shared between the A and
# M forms of an operation; the leading "a" bit picks the operand.
# =============================================================================

_ALU_OPERATIONS = {
    # mnemonic (A form): zx nx zy ny f no
    "0":   "101010",
    "1":   "111111",
    "-1":  "111010",
    "D":   "001100",
    "A":   "110000",
    "!D":  "001101",
    "!A":  "110001",
    "-D":  "001111",
    "-A":  "110011",
    "D+1": "011111",
    "A+1": "110111",
    "D-1": "001110",
    "A-1": "110010",
    "D+A": "000010",
    "D-A": "010011",
    "A-D": "000111",
    "D&A": "000000",
    "D|A": "010101",
}


def _build_comp_table() -> dict[str, str]:
    """Expand the A-form operations into the full 7-bit comp table."""
    table: dict[str, str] = {}
    for mnemonic, bits in _ALU_OPERATIONS.items():
        table[mnemonic] = "0" + bits
        # Operations that read A also exist reading M, with the a-bit set
        if "A" in mnemonic:
            table[mnemonic.replace("A", "M")] = "1" + bits
    return table


COMP_CODES = _build_comp_table()

COMP_MNEMONICS = {code: mnemonic for mnemonic, code in COMP_CODES.items()}

JUMP_MNEMONICS = {code: mnemonic for mnemonic, code in JUMP_CODES.items()}


# =============================================================================
# Encoding Functions
# =============================================================================

def dest_code(mnemonic: str) -> str:
    """
    Encode a destination mnemonic as its 3-bit code.

    The destination is a set of registers, so any ordering of distinct
    letters from A, D and M is accepted ("MD" and "DM" are the same).
    Empty or unrecognised input encodes as "000" (no destination).
    """
    if not mnemonic or len(set(mnemonic)) != len(mnemonic):
        return NO_DEST
    bits = 0
    for register in mnemonic:
        flag = DEST_FLAGS.get(register)
        if flag is None:
            return NO_DEST
        bits |= flag
    return f"{bits:03b}"


def jump_code(mnemonic: str) -> str:
    """
    Encode a jump mnemonic as its 3-bit code.

    Empty or unrecognised input encodes as "000" (no jump).
    """
    return JUMP_CODES.get(mnemonic, NO_JUMP)


def comp_code(mnemonic: str) -> str:
    """
    Encode an ALU operation as its 7-bit code (a-bit + six control bits).

    Raises:
        UnresolvedCompError: If the mnemonic is not one of the 28 operations
    """
    code = COMP_CODES.get(mnemonic)
    if code is None:
        raise UnresolvedCompError(mnemonic)
    return code


def encode_address(value: int) -> str:
    """Encode an A-instruction value as a 16-character binary string."""
    if value < 0 or value > MAX_ADDRESS:
        raise ValueError(f"address {value} out of range 0-{MAX_ADDRESS}")
    return f"{value:0{WORD_BITS}b}"


def encode_compute(dest: str, comp: str, jump: str) -> str:
    """
    Encode a C-instruction as a 16-character binary string.

    Raises:
        UnresolvedCompError: If comp is not a valid operation
    """
    return COMPUTE_PREFIX + comp_code(comp) + dest_code(dest) + jump_code(jump)


# =============================================================================
# Decoding Functions
# =============================================================================

def is_compute_word(word: str) -> bool:
    """True if the word has the C-instruction prefix."""
    return word.startswith(COMPUTE_PREFIX)


def decode_dest(bits: str) -> str:
    """Decode a 3-bit destination field into its canonical mnemonic."""
    return DEST_MNEMONICS[int(bits, 2)]


def decode_jump(bits: str) -> str:
    """Decode a 3-bit jump field; "000" decodes as the empty mnemonic."""
    return JUMP_MNEMONICS.get(bits, "")


def decode_comp(bits: str) -> Optional[str]:
    """Decode a 7-bit comp field, or None if it is not a defined operation."""
    return COMP_MNEMONICS.get(bits)
