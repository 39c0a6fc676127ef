"""
Hack Assembler - Main Interface
===============================

This module provides the main Assembler class, the primary interface for
assembling Hack source code. It coordinates source loading, the parser and
the code generator, and writes the output files.

Example Usage
-------------
>>> from hack_asm.assembler import Assembler
>>>
>>> asm = Assembler()
>>> words = asm.assemble_string('''
... // Computes R0 = 2 + 3
... @2
... D=A
... @3
... D=D+A
... @0
... M=D
... ''')
>>> words[0]
'0000000000000010'
>>>
>>> # Write the .hack file
>>> asm.write_hack("Add.hack")

Command-Line Usage
------------------
    $ hackasm Add.asm -o Add.hack -l Add.lst -s Add.sym
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from hack_asm.assembler.codegen import CodeGenerator
from hack_asm.assembler.parser import parse_source, read_lines
from hack_asm.config import AssemblerConfig, get_default_config

logger = logging.getLogger(__name__)


class Assembler:
    """
    Main Hack assembler class.

    Attributes:
        config: Settings for this assembler (variable base, output options)
    """

    def __init__(self, config: Optional[AssemblerConfig] = None):
        """
        Initialize the assembler.

        Args:
            config: Assembler settings. Defaults to get_default_config(),
                    which honours the HACK_ASM_* environment variables.
        """
        self.config = config or get_default_config()
        self._codegen = CodeGenerator(variable_base=self.config.variable_base)

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_lines(self, lines: Iterable[str], filename: str = "<input>") -> list[str]:
        """
        Assemble a sequence of source lines.

        Args:
            lines: Source lines (trimmed or not)
            filename: Virtual filename for error messages

        Returns:
            Encoded words as 16-character binary strings

        Raises:
            AssemblerError: If assembly fails
        """
        statements = parse_source(lines, filename)
        logger.debug(f"Parsed {len(statements)} statements from {filename}")

        code = self._codegen.generate(statements)
        logger.info(f"Assembled {len(code)} instructions from {filename}")
        return code

    def assemble_string(self, source: str, filename: str = "<input>") -> list[str]:
        """
        Assemble source code from a string.

        Args:
            source: Assembly source code
            filename: Virtual filename for error messages

        Returns:
            Encoded words as 16-character binary strings

        Raises:
            AssemblerError: If assembly fails
        """
        return self.assemble_lines(source.splitlines(), filename)

    def assemble_file(self, filepath: str | Path) -> list[str]:
        """
        Assemble source code from a file.

        Args:
            filepath: Path to assembly source file

        Returns:
            Encoded words as 16-character binary strings

        Raises:
            AssemblerError: If assembly fails
            FileNotFoundError: If source file not found
        """
        filepath = Path(filepath)
        logger.info(f"Assembling {filepath}...")
        return self.assemble_lines(read_lines(filepath), str(filepath))

    # =========================================================================
    # Output Methods
    # =========================================================================

    def get_code(self) -> list[str]:
        """Get the words produced by the last assembly."""
        return self._codegen.get_code()

    def get_symbols(self) -> dict[str, int]:
        """
        Get the user symbols of the last assembly.

        Returns:
            Dictionary mapping label and variable names to addresses
        """
        return self._codegen.get_symbols()

    def get_labels(self) -> dict[str, int]:
        """Get the labels of the last assembly."""
        return self._codegen.get_symbol_table().labels()

    def get_variables(self) -> dict[str, int]:
        """Get the variables of the last assembly, in allocation order."""
        return self._codegen.get_symbol_table().variables()

    def get_listing(self) -> str:
        """Get the assembly listing as a string."""
        return self._codegen.get_listing()

    def default_output_path(self, source: str | Path) -> Path:
        """Derive the .hack path for a source file."""
        return Path(source).with_suffix(self.config.output_suffix)

    def format_hack(self) -> str:
        """Format the last assembly as .hack file text."""
        text = "\n".join(self.get_code())
        if self.config.trailing_newline and text:
            text += "\n"
        return text

    def write_hack(self, filepath: str | Path) -> None:
        """
        Write the machine words to a .hack file, one word per line.

        Args:
            filepath: Output file path
        """
        Path(filepath).write_text(self.format_hack(), encoding="utf-8")
        logger.info(f"Wrote {len(self.get_code())} words to {filepath}")

    def write_listing(self, filepath: str | Path) -> None:
        """
        Write assembly listing file.

        The listing shows ROM addresses, words, source lines and the
        symbol table.
        """
        Path(filepath).write_text(self.get_listing(), encoding="utf-8")
        logger.info(f"Wrote listing to {filepath}")

    def write_symbols(self, filepath: str | Path) -> None:
        """
        Write symbol table file.

        Format: name address (one per line), labels first, then variables
        in allocation order.
        """
        with open(filepath, "w", encoding="utf-8") as f:
            f.write("# Symbol table\n")
            f.write("# Generated by hackasm\n")
            for name, value in self.get_labels().items():
                f.write(f"{name} {value}\n")
            for name, value in self.get_variables().items():
                f.write(f"{name} {value}\n")
        logger.info(f"Wrote symbols to {filepath}")


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str | Iterable[str], filename: str = "<input>") -> list[str]:
    """
    Convenience function to assemble source code.

    Args:
        source: Either the whole program as one string, or its lines
        filename: Virtual filename for error messages

    Raises:
        AssemblerError: If assembly fails
    """
    asm = Assembler()
    if isinstance(source, str):
        return asm.assemble_string(source, filename)
    return asm.assemble_lines(source, filename)


def assemble_file(filepath: str | Path) -> list[str]:
    """
    Convenience function to assemble a file.

    Raises:
        AssemblerError: If assembly fails
        FileNotFoundError: If source file not found
    """
    return Assembler().assemble_file(filepath)
