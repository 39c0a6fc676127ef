"""
Hack Code Generator
===================

This module turns parsed statements into Hack machine words. It
implements the classic two-pass assembly process:

Pass 1 (Label Resolution)
-------------------------
- Walk the statements with a program counter starting at 0
- A- and C-instructions advance the counter by one
- Each label is bound to the counter value at its declaration, i.e. the
  ROM address of the next real instruction

Pass 2 (Code Generation)
------------------------
- Decimal A-instructions are encoded directly
- Symbolic A-instructions resolve to a label or predefined symbol, or
  allocate a new variable (RAM 16, 17, ...) on first use
- C-instructions are encoded from their dest/comp/jump fields

Because every label is bound before pass 2 starts, forward references
(``@END`` before ``(END)``) resolve like backward ones.

Output
------
A list of 16-character strings of '0' and '1', one per A- or
C-instruction, in source order.
"""

import logging
from typing import Iterable, Optional

from hack_asm.assembler.parser import (
    AddressInstruction,
    ComputeInstruction,
    LabelDef,
    Statement,
    parse_source,
)
from hack_asm.assembler.symbols import DEFAULT_VARIABLE_BASE, SymbolTable
from hack_asm.cpu import MAX_ADDRESS, encode_address, encode_compute
from hack_asm.errors import (
    AddressRangeError,
    SourceLocation,
    UnresolvedCompError,
)

logger = logging.getLogger(__name__)


class CodeGenerator:
    """
    Generates Hack machine words from parsed statements.

    The code generator maintains:
    - Symbol table with predefined symbols, labels and variables
    - Program counter tracking during pass 1
    - Output word buffer
    - Listing lines for each emitted word

    State is rebuilt on every generate() call, so one generator can
    assemble several programs and the same input always gives the same
    output.

    Usage:
        codegen = CodeGenerator()
        words = codegen.generate(statements)
        symbols = codegen.get_symbols()
    """

    def __init__(self, variable_base: int = DEFAULT_VARIABLE_BASE):
        self._variable_base = variable_base
        self._symbols = SymbolTable(variable_base)
        self._code: list[str] = []
        self._pc = 0
        self._listing_lines: list[str] = []

    # =========================================================================
    # Public Interface
    # =========================================================================

    def generate(self, statements: list[Statement]) -> list[str]:
        """
        Generate machine words from parsed statements.

        Args:
            statements: Statements in source order

        Returns:
            Encoded words, one per A- or C-instruction

        Raises:
            AssemblerError: On the first statement that cannot be assembled
        """
        # Reset state for fresh assembly
        self._symbols = SymbolTable(self._variable_base)
        self._code = []
        self._pc = 0
        self._listing_lines = []

        self._pass1(statements)
        logger.debug(
            f"Pass 1 complete: {self._pc} instructions, "
            f"{len(self._symbols.labels())} labels"
        )

        self._pass2(statements)
        logger.debug(
            f"Pass 2 complete: {len(self._code)} words, "
            f"{len(self._symbols.variables())} variables"
        )

        return list(self._code)

    def get_code(self) -> list[str]:
        """Return the words produced by the last generate() call."""
        return list(self._code)

    def get_symbol_table(self) -> SymbolTable:
        """Return the symbol table of the last run."""
        return self._symbols

    def get_symbols(self) -> dict[str, int]:
        """Return the user labels and variables of the last run."""
        symbols = self._symbols.labels()
        symbols.update(self._symbols.variables())
        return symbols

    def get_listing(self) -> str:
        """
        Get the assembly listing as a string.

        Returns:
            The listing showing ROM addresses, words and source lines,
            followed by the user symbol table.
        """
        lines = []
        lines.append("Hack Assembler Listing")
        lines.append("=" * 60)
        lines.append("")
        lines.append("Addr   Word              Line  Source")
        lines.append("-" * 60)
        lines.extend(self._listing_lines)
        lines.append("")
        lines.append("Symbol Table")
        lines.append("-" * 30)
        for name, value in sorted(self.get_symbols().items()):
            lines.append(f"{name:20s} = {value}")
        return "\n".join(lines)

    # =========================================================================
    # Pass 1: Label Resolution
    # =========================================================================

    def _pass1(self, statements: list[Statement]) -> None:
        """First pass: bind every label to the address of the next instruction."""
        self._pc = 0

        for stmt in statements:
            if isinstance(stmt, LabelDef):
                self._symbols.bind(stmt.name, self._pc, stmt.location)
            elif isinstance(stmt, (AddressInstruction, ComputeInstruction)):
                self._pc += 1

    # =========================================================================
    # Pass 2: Code Generation
    # =========================================================================

    def _pass2(self, statements: list[Statement]) -> None:
        """Second pass: encode every A- and C-instruction."""
        for stmt in statements:
            if isinstance(stmt, AddressInstruction):
                word = self._encode_address(stmt)
            elif isinstance(stmt, ComputeInstruction):
                word = self._encode_compute(stmt)
            else:
                # Labels were resolved in pass 1
                continue

            self._listing_lines.append(
                f"{len(self._code):5d}  {word}  {stmt.location.line:4d}  {stmt.source}"
            )
            self._code.append(word)

    def _encode_address(self, inst: AddressInstruction) -> str:
        """Resolve and encode an A-instruction."""
        if inst.is_literal:
            digits = inst.symbol.lstrip("0") or "0"
            # int() refuses very long digit strings, so reject by length first
            if len(digits) > len(str(MAX_ADDRESS)):
                raise AddressRangeError(
                    f"{digits[:6]}... ({len(digits)} digits)", MAX_ADDRESS,
                    location=inst.location,
                    source_line=inst.source,
                )
            value = int(digits)
            if value > MAX_ADDRESS:
                raise AddressRangeError(
                    value, MAX_ADDRESS,
                    location=inst.location,
                    source_line=inst.source,
                )
            return encode_address(value)

        value = self._symbols.lookup(inst.symbol)
        if value is None:
            value = self._symbols.allocate_variable(inst.symbol, inst.location)
            logger.debug(f"Allocated variable '{inst.symbol}' at {value}")
        elif value > MAX_ADDRESS:
            # A label past the end of addressable ROM
            raise AddressRangeError(
                value, MAX_ADDRESS,
                location=inst.location,
                source_line=inst.source,
                symbol=inst.symbol,
            )
        return encode_address(value)

    def _encode_compute(self, inst: ComputeInstruction) -> str:
        """Encode a C-instruction, failing on an unknown operation."""
        try:
            return encode_compute(inst.dest, inst.comp, inst.jump)
        except UnresolvedCompError:
            raise UnresolvedCompError(
                inst.comp,
                location=SourceLocation(
                    inst.location.filename, inst.location.line, inst.comp_column
                ),
                hint=self._comp_hint(inst),
                source_line=inst.source,
            ) from None

    @staticmethod
    def _comp_hint(inst: ComputeInstruction) -> Optional[str]:
        """Suggest a fix for common mistakes in a compute field."""
        if not inst.comp:
            return "a compute instruction needs an operation, e.g. D=M or 0;JMP"
        if "//" in inst.source:
            return "comments must be on their own line"
        if inst.source.startswith("(") or inst.source.endswith(")"):
            return "labels are written as (NAME) on their own line"
        if " " in inst.comp:
            return "operations are written without spaces, e.g. D+1"
        return None


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(lines: Iterable[str], filename: str = "<input>") -> list[str]:
    """
    Assemble source lines into Hack machine words.

    Args:
        lines: Source lines; surrounding whitespace is ignored
        filename: Name used in error locations

    Returns:
        Encoded words as 16-character binary strings

    Raises:
        AssemblerError: If assembly fails
    """
    return CodeGenerator().generate(parse_source(lines, filename))
