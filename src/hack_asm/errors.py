"""
Hack Assembler Error Hierarchy
==============================

This module defines the exception hierarchy for the Hack assembler.
All exceptions inherit from HackError, allowing callers to catch every
assembler-related error with a single except clause if desired.

Exception Hierarchy
-------------------
HackError (base)
└── AssemblerError (assembler-related)
    ├── AssemblySyntaxError - malformed instruction text
    ├── UnresolvedCompError - compute mnemonic has no encoding
    ├── MalformedLabelError - label declaration with a bad name
    ├── DuplicateSymbolError - symbol bound more than once
    └── AddressRangeError - address does not fit in an A-instruction

Errors reading or writing files are not wrapped: FileNotFoundError and
friends propagate unchanged to the caller.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all Hack assembler errors.

        try:
            assembler.assemble_file("Max.asm")
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int = 1

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(HackError):
    """
    Base exception for all assembler-related errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            Max.asm:7:1: error: unknown compute mnemonic 'D+2'
                D=D+2
                ^
            hint: ...
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class AssemblySyntaxError(AssemblerError):
    """
    Syntax error in assembly source code.

    Raised when an instruction cannot be split into its parts, for
    example an address instruction with nothing after the '@'.
    """
    pass


class UnresolvedCompError(AssemblerError):
    """
    A compute instruction's operation has no encoding.

    This is the one encoder failure that aborts assembly: a compute
    instruction without a valid ALU operation cannot be emitted, and
    substituting a default would silently corrupt the program.
    """

    def __init__(
        self,
        mnemonic: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.mnemonic = mnemonic
        super().__init__(
            f"unknown compute mnemonic '{mnemonic}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class MalformedLabelError(AssemblerError):
    """
    Label declaration with an unusable name, such as '()'.
    """

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.text = text
        super().__init__(
            f"malformed label declaration '{text}'",
            location=location,
            hint="labels are written as (NAME) with a non-empty NAME",
            source_line=source_line,
        )


class DuplicateSymbolError(AssemblerError):
    """
    Symbol defined multiple times.

    Raised when a label is declared twice, or when a label tries to
    rebind one of the predefined register symbols.
    """

    def __init__(
        self,
        symbol: str,
        location: Optional[SourceLocation] = None,
        original_location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        self.original_location = original_location

        hint = None
        if original_location:
            hint = f"'{symbol}' was first defined at {original_location}"

        super().__init__(
            f"duplicate symbol '{symbol}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class AddressRangeError(AssemblerError):
    """
    Address value does not fit in an A-instruction.

    A-instructions carry a 15-bit value (0-32767); the most significant
    bit of the word is the instruction type flag.
    """

    def __init__(
        self,
        value: int | str,
        maximum: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        symbol: Optional[str] = None,
    ):
        self.value = value
        self.maximum = maximum
        self.symbol = symbol

        if symbol is not None:
            message = f"address {value} for '{symbol}' exceeds maximum {maximum}"
        else:
            message = f"address {value} exceeds maximum {maximum}"

        super().__init__(message, location=location, source_line=source_line)
