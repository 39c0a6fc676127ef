"""
Hack Disassembler
=================

Decodes Hack machine words back into assembly language. This is the
inverse of the assembler's code generation and uses the same encoding
tables, so decoding an assembled program gives back an equivalent
program (labels and variables appear as their numeric addresses).

Usage:
    disasm = HackDisassembler()

    # Disassemble a whole .hack file's words
    instructions = disasm.disassemble(words)

    # Disassemble a single word
    instr = disasm.disassemble_one("1110001100001000", address=5)
    print(instr.text)    # "M=D"
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from hack_asm.cpu import (
    MAX_ADDRESS,
    WORD_BITS,
    decode_comp,
    decode_dest,
    decode_jump,
    is_compute_word,
)


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class DisassembledInstruction:
    """
    Represents a single decoded Hack word.

    Attributes:
        address: ROM address of the word
        word: The 16-character binary string
        is_compute: True for C-instructions
        value: A-instruction value (None for C-instructions)
        dest: Destination mnemonic ("" if none)
        comp: Operation mnemonic ("" for A-instructions or unknown bits)
        jump: Jump mnemonic ("" if none)
        comment: Optional note, e.g. for words that do not decode
    """
    address: int
    word: str
    is_compute: bool
    value: Optional[int] = None
    dest: str = ""
    comp: str = ""
    jump: str = ""
    comment: str = ""

    @property
    def is_valid(self) -> bool:
        """True if the word decodes to an instruction the assembler accepts."""
        if self.is_compute:
            return bool(self.comp)
        return self.value is not None and self.value <= MAX_ADDRESS

    @property
    def text(self) -> str:
        """Assembly text for the word."""
        if not self.is_valid:
            return f".WORD {self.word}"
        if not self.is_compute:
            return f"@{self.value}"
        text = self.comp
        if self.dest:
            text = f"{self.dest}={text}"
        if self.jump:
            text = f"{text};{self.jump}"
        return text

    def __str__(self) -> str:
        """Format as listing line: ADDRESS: WORD  TEXT"""
        if self.comment:
            return f"{self.address:5d}: {self.word}  {self.text:<16} // {self.comment}"
        return f"{self.address:5d}: {self.word}  {self.text}"


# =============================================================================
# Hack Disassembler
# =============================================================================

class HackDisassembler:
    """
    Disassembler for Hack machine words.

    Attributes:
        _symbol_table: Optional address -> name map used to annotate
                       A-instructions
    """

    def __init__(self, symbol_table: Optional[dict[int, str]] = None):
        """
        Initialize the disassembler.

        Args:
            symbol_table: Optional dict mapping addresses to symbol names.
                         A-instructions loading a known address get the
                         name as a comment.
        """
        self._symbol_table = symbol_table or {}

    def disassemble_one(self, word: str, address: int = 0) -> DisassembledInstruction:
        """
        Disassemble a single word.

        Args:
            word: 16-character string of '0' and '1'
            address: ROM address of the word (for display)

        Returns:
            DisassembledInstruction with decoded fields

        Raises:
            ValueError: If word is not a 16-bit binary string
        """
        word = word.strip()
        if len(word) != WORD_BITS or set(word) - {"0", "1"}:
            raise ValueError(f"not a {WORD_BITS}-bit binary word: {word!r}")

        if not is_compute_word(word):
            value = int(word, 2)
            if value > MAX_ADDRESS:
                comment = "top bit set without the C-instruction prefix"
            else:
                comment = self._symbol_table.get(value, "")
            return DisassembledInstruction(
                address=address,
                word=word,
                is_compute=False,
                value=value,
                comment=comment,
            )

        comp = decode_comp(word[3:10])
        if comp is None:
            return DisassembledInstruction(
                address=address,
                word=word,
                is_compute=True,
                comment="undefined ALU operation",
            )

        return DisassembledInstruction(
            address=address,
            word=word,
            is_compute=True,
            dest=decode_dest(word[10:13]),
            comp=comp,
            jump=decode_jump(word[13:16]),
        )

    def disassemble(self, words: Iterable[str], start_address: int = 0) -> list[DisassembledInstruction]:
        """
        Disassemble a sequence of words. Blank entries are skipped.

        Args:
            words: Words in ROM order, e.g. the lines of a .hack file
            start_address: ROM address of the first word

        Returns:
            List of decoded instructions
        """
        result = []
        address = start_address
        for word in words:
            if not word.strip():
                continue
            result.append(self.disassemble_one(word, address))
            address += 1
        return result

    def format_listing(self, words: Iterable[str], start_address: int = 0) -> str:
        """Disassemble words and format them one per line."""
        return "\n".join(str(instr) for instr in self.disassemble(words, start_address))

    def format_source(self, words: Iterable[str]) -> str:
        """
        Disassemble words into re-assemblable source text.

        Words that are not valid instructions come out as comment lines,
        so the text still assembles; those words are dropped from the
        re-assembled program.
        """
        lines = []
        for instr in self.disassemble(words):
            if instr.is_valid:
                lines.append(instr.text)
            else:
                lines.append(f"// {instr.text}  ({instr.comment})")
        return "\n".join(lines)
