"""
Hack Symbol Table
=================

Maps symbol names to 16-bit addresses. A table starts with the machine's
predefined symbols and grows during assembly:

- **Labels** are bound in pass 1 to the ROM address of the instruction
  that follows the declaration.
- **Variables** are allocated in pass 2, the first time an unknown name
  is used in an A-instruction, at consecutive RAM addresses starting at 16.

Names are case-sensitive. A name is bound at most once; rebinding is an
error rather than an overwrite, so a label can never be reinterpreted as a
variable.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional

from hack_asm.cpu import MAX_ADDRESS
from hack_asm.errors import (
    AddressRangeError,
    DuplicateSymbolError,
    SourceLocation,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Predefined Symbols
# =============================================================================

PREDEFINED_SYMBOLS: dict[str, int] = {
    **{f"R{n}": n for n in range(16)},
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
    "SCREEN": 16384,
    "KBD": 24576,
}

PREDEFINED_LOCATION = SourceLocation("<predefined>", 0, 0)
UNKNOWN_LOCATION = SourceLocation("<unknown>", 0, 0)

DEFAULT_VARIABLE_BASE = 16


# =============================================================================
# Symbol Table Entry
# =============================================================================

class SymbolKind(Enum):
    """How a symbol came to be in the table."""
    PREDEFINED = auto()
    LABEL = auto()
    VARIABLE = auto()


@dataclass(frozen=True)
class Symbol:
    """
    Symbol table entry.

    Attributes:
        name: Symbol name
        value: Bound address
        kind: Predefined register, label or variable
        location: Where the symbol was defined (or first used, for variables)
    """
    name: str
    value: int
    kind: SymbolKind
    location: SourceLocation = PREDEFINED_LOCATION


# =============================================================================
# Symbol Table
# =============================================================================

class SymbolTable:
    """
    Symbol table for a single assembly run.

    Usage:
        table = SymbolTable()
        table.bind("LOOP", 4)
        table.lookup("LOOP")              # 4
        table.allocate_variable("i")      # 16
        table.allocate_variable("i")      # 16 again
        table.lookup("missing")           # None
    """

    def __init__(self, variable_base: int = DEFAULT_VARIABLE_BASE):
        self._symbols: dict[str, Symbol] = {
            name: Symbol(name, value, SymbolKind.PREDEFINED)
            for name, value in PREDEFINED_SYMBOLS.items()
        }
        self._next_variable = variable_base

    def lookup(self, name: str) -> Optional[int]:
        """Return the address bound to name, or None if it is unknown."""
        symbol = self._symbols.get(name)
        return symbol.value if symbol is not None else None

    def get_symbol(self, name: str) -> Optional[Symbol]:
        """Return the full entry for name, or None."""
        return self._symbols.get(name)

    def bind(
        self,
        name: str,
        address: int,
        location: Optional[SourceLocation] = None,
        kind: SymbolKind = SymbolKind.LABEL,
    ) -> None:
        """
        Bind name to address.

        Raises:
            DuplicateSymbolError: If name is already bound
        """
        existing = self._symbols.get(name)
        if existing is not None:
            raise DuplicateSymbolError(
                name,
                location=location,
                original_location=existing.location,
            )
        self._symbols[name] = Symbol(
            name, address, kind, location or UNKNOWN_LOCATION
        )
        logger.debug(f"Bound {kind.name.lower()} '{name}' = {address}")

    def allocate_variable(
        self,
        name: str,
        location: Optional[SourceLocation] = None,
    ) -> int:
        """
        Return the address of name, allocating a variable slot if needed.

        Raises:
            AddressRangeError: If the next slot is beyond the address space
        """
        existing = self._symbols.get(name)
        if existing is not None:
            return existing.value

        address = self._next_variable
        if address > MAX_ADDRESS:
            raise AddressRangeError(
                address, MAX_ADDRESS, location=location, symbol=name
            )
        self.bind(name, address, location, kind=SymbolKind.VARIABLE)
        self._next_variable += 1
        return address

    @property
    def next_variable_address(self) -> int:
        """Address the next new variable will receive."""
        return self._next_variable

    # =========================================================================
    # Read-only Views
    # =========================================================================

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def as_dict(self) -> dict[str, int]:
        """Return a name -> address snapshot of every symbol."""
        return {name: sym.value for name, sym in self._symbols.items()}

    def labels(self) -> dict[str, int]:
        """Return the user labels, in declaration order."""
        return self._of_kind(SymbolKind.LABEL)

    def variables(self) -> dict[str, int]:
        """Return the user variables, in allocation order."""
        return self._of_kind(SymbolKind.VARIABLE)

    def _of_kind(self, kind: SymbolKind) -> dict[str, int]:
        return {
            name: sym.value
            for name, sym in self._symbols.items()
            if sym.kind is kind
        }
