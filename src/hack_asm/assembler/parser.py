"""
Hack Assembly Language Parser
=============================

This module classifies source lines and splits them into the fields the
code generator needs. Hack assembly is line oriented with no nesting, so
there is no tokenizer: every line is one of four kinds, decided by its
first (and for labels, last) character.

Statement Types
---------------
1. **LabelDef**: label declaration
   ```asm
   (LOOP)          // names the address of the next instruction
   ```

2. **AddressInstruction**: A-instruction
   ```asm
   @42             // decimal literal
   @LOOP           // label, predefined symbol or variable
   ```

3. **ComputeInstruction**: C-instruction, ``dest=comp;jump``
   ```asm
   D=M             // dest and comp
   0;JMP           // comp and jump
   AM=M-1          // multiple destinations
   ```

Lines that are empty or start with ``//`` are skipped entirely. Comments
are not allowed after an instruction on the same line.
"""

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Iterable, Optional

from hack_asm.errors import (
    AssemblySyntaxError,
    MalformedLabelError,
    SourceLocation,
)


COMMENT_MARKER = "//"
ADDRESS_PREFIX = "@"
LABEL_OPEN = "("
LABEL_CLOSE = ")"
DEST_SEPARATOR = "="
JUMP_SEPARATOR = ";"


# =============================================================================
# Instruction Classification
# =============================================================================

class InstructionKind(Enum):
    """Kind of a single trimmed source line."""
    SKIP = auto()      # Blank line or // comment
    ADDRESS = auto()   # @value
    LABEL = auto()     # (NAME)
    COMPUTE = auto()   # dest=comp;jump

    def __str__(self) -> str:
        return self.name.lower()


def classify(line: str) -> InstructionKind:
    """
    Determine the kind of a trimmed source line.

    >>> classify("@17")
    <InstructionKind.ADDRESS: 2>
    """
    if not line or line.startswith(COMMENT_MARKER):
        return InstructionKind.SKIP
    if line.startswith(ADDRESS_PREFIX):
        return InstructionKind.ADDRESS
    if line.startswith(LABEL_OPEN) and line.endswith(LABEL_CLOSE):
        return InstructionKind.LABEL
    return InstructionKind.COMPUTE


def split_compute(line: str) -> tuple[str, str, str]:
    """
    Split a C-instruction into its (dest, comp, jump) fields.

    The dest field ends at the first '=' and the jump field starts after
    the first ';'. Fields that are not present come back as "".

        "AM=M-1"  -> ("AM", "M-1", "")
        "D;JGT"   -> ("", "D", "JGT")
        "D=D+A;JNE" -> ("D", "D+A", "JNE")
    """
    dest, separator, rest = line.partition(DEST_SEPARATOR)
    if not separator:
        dest, rest = "", line
    comp, _, jump = rest.partition(JUMP_SEPARATOR)
    return dest.strip(), comp.strip(), jump.strip()


# =============================================================================
# Statement Data Classes
# =============================================================================

@dataclass
class Statement:
    """
    Base class for all parsed statements.

    Attributes:
        location: Where the statement appears in the source
        source: The trimmed source text of the line
    """
    location: SourceLocation
    source: str


@dataclass
class LabelDef(Statement):
    """
    Label declaration.

    Attributes:
        name: Label name, without the parentheses
    """
    name: str


@dataclass
class AddressInstruction(Statement):
    """
    A-instruction.

    Attributes:
        symbol: Everything after the '@', either digits or a symbol name
    """
    symbol: str

    @property
    def is_literal(self) -> bool:
        """True if the symbol is a non-negative decimal constant."""
        return self.symbol.isascii() and self.symbol.isdigit()


@dataclass
class ComputeInstruction(Statement):
    """
    C-instruction.

    Attributes:
        dest: Destination registers, "" if absent
        comp: ALU operation
        jump: Jump condition, "" if absent
    """
    dest: str
    comp: str
    jump: str = ""

    @property
    def comp_column(self) -> int:
        """1-based column of the comp field, for error carets."""
        index = self.source.find(self.comp) if self.comp else -1
        return index + 1 if index >= 0 else 1


# =============================================================================
# Parsing
# =============================================================================

def parse_line(line: str, location: SourceLocation) -> Optional[Statement]:
    """
    Parse one trimmed line into a statement.

    Returns:
        The parsed statement, or None for blank and comment lines

    Raises:
        AssemblySyntaxError: If an A-instruction has no symbol
        MalformedLabelError: If a label has an empty name
    """
    kind = classify(line)

    if kind is InstructionKind.SKIP:
        return None

    if kind is InstructionKind.ADDRESS:
        symbol = line[len(ADDRESS_PREFIX):]
        if not symbol:
            raise AssemblySyntaxError(
                "missing value after '@'",
                location=location,
                hint="write @NUMBER or @SYMBOL",
                source_line=line,
            )
        return AddressInstruction(location=location, source=line, symbol=symbol)

    if kind is InstructionKind.LABEL:
        name = line[len(LABEL_OPEN):-len(LABEL_CLOSE)]
        if not name:
            raise MalformedLabelError(line, location=location, source_line=line)
        return LabelDef(location=location, source=line, name=name)

    dest, comp, jump = split_compute(line)
    return ComputeInstruction(
        location=location, source=line, dest=dest, comp=comp, jump=jump
    )


def parse_source(lines: Iterable[str], filename: str = "<input>") -> list[Statement]:
    """
    Parse source lines into a list of statements.

    Lines are trimmed before classification. Blank lines and comments are
    dropped, but line numbers in the resulting locations still count them.

    Args:
        lines: Source lines (with or without surrounding whitespace)
        filename: Name used in error locations

    Returns:
        Statements in source order
    """
    statements: list[Statement] = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        stmt = parse_line(line, SourceLocation(filename, line_number))
        if stmt is not None:
            statements.append(stmt)
    return statements


def read_lines(filepath: str | Path) -> list[str]:
    """
    Read a source file into a list of trimmed lines.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    text = Path(filepath).read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines()]
