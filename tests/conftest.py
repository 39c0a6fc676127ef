"""
Shared fixtures for the Hack assembler tests.
"""

import pytest

from hack_asm.config import set_default_config


MAX_ASM = """\
// Computes R2 = max(R0, R1)
@R0
D=M
@R1
D=D-M
@OUTPUT_FIRST
D;JGT
@R1
D=M
@OUTPUT_D
0;JMP
(OUTPUT_FIRST)
@R0
D=M
(OUTPUT_D)
@R2
M=D
(INFINITE_LOOP)
@INFINITE_LOOP
0;JMP
"""

MAX_HACK = [
    "0000000000000000",
    "1111110000010000",
    "0000000000000001",
    "1111010011010000",
    "0000000000001010",
    "1110001100000001",
    "0000000000000001",
    "1111110000010000",
    "0000000000001100",
    "1110101010000111",
    "0000000000000000",
    "1111110000010000",
    "0000000000000010",
    "1110001100001000",
    "0000000000001110",
    "1110101010000111",
]


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate every test from HACK_ASM_* variables and the cached config."""
    for name in (
        "HACK_ASM_VARIABLE_BASE",
        "HACK_ASM_OUTPUT_SUFFIX",
        "HACK_ASM_TRAILING_NEWLINE",
    ):
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def max_source() -> str:
    """The Max.asm program from the nand2tetris project 6 suite."""
    return MAX_ASM


@pytest.fixture
def max_hack() -> list[str]:
    """Expected assembler output for Max.asm."""
    return list(MAX_HACK)
