"""
Hack Assembler Command-Line Interface
=====================================

This package provides command-line tools:

- **hackasm**: Hack assembler (.asm -> .hack)
- **hackdisasm**: Hack disassembler (.hack -> assembly listing)

Each tool is implemented as a Click-based CLI application with
help text and uniform error reporting.
"""

__all__ = ["hackasm", "hackdisasm"]
