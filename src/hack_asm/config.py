"""
Hack Assembler - Configuration
==============================

Assembler settings. Configuration can come from:
- Default values (defined here)
- Explicit construction (AssemblerConfig(...))
- Environment variables (AssemblerConfig.from_env())

Environment variables (all optional):
    HACK_ASM_VARIABLE_BASE: First RAM address handed out to variables
    HACK_ASM_OUTPUT_SUFFIX: Suffix for the default output file
    HACK_ASM_TRAILING_NEWLINE: "1"/"true"/"yes" to end .hack files with a newline
"""

from dataclasses import dataclass
from typing import Optional
import os


@dataclass
class AssemblerConfig:
    """
    Configuration for an assembly run.

    Attributes:
        variable_base: RAM address of the first variable (default: 16,
                       right after the R0-R15 registers)
        output_suffix: Suffix used when deriving the output filename
        trailing_newline: End the written .hack file with a newline
    """

    variable_base: int = 16
    output_suffix: str = ".hack"
    trailing_newline: bool = False

    @classmethod
    def from_env(cls) -> "AssemblerConfig":
        """
        Create an AssemblerConfig from environment variables.

        Invalid values are ignored and the default is kept.
        """
        config = cls()

        if base := os.environ.get("HACK_ASM_VARIABLE_BASE"):
            try:
                value = int(base)
            except ValueError:
                value = -1
            if value >= 0:
                config.variable_base = value

        if suffix := os.environ.get("HACK_ASM_OUTPUT_SUFFIX"):
            config.output_suffix = suffix if suffix.startswith(".") else f".{suffix}"

        if newline := os.environ.get("HACK_ASM_TRAILING_NEWLINE"):
            config.trailing_newline = newline.strip().lower() in ("1", "true", "yes")

        return config


# =============================================================================
# Default Configuration
# =============================================================================

_default_config: Optional[AssemblerConfig] = None


def get_default_config() -> AssemblerConfig:
    """
    Get the default configuration.

    Created from environment variables on first access.
    """
    global _default_config
    if _default_config is None:
        _default_config = AssemblerConfig.from_env()
    return _default_config


def set_default_config(config: Optional[AssemblerConfig]) -> None:
    """
    Set the default configuration.

    Passing None forgets the cached value so the next call to
    get_default_config() re-reads the environment.
    """
    global _default_config
    _default_config = config
