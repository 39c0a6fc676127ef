# =============================================================================
# test_parser.py - Instruction Classifier Tests
# =============================================================================
# Tests for line classification and C-instruction field splitting.
#
# Test coverage includes:
#   - Classification of comments, blanks, A-, L- and C-instructions
#   - dest/comp/jump splitting with absent fields
#   - Statement construction and malformed input
#   - Line numbering across skipped lines
# =============================================================================

import pytest

from hack_asm.assembler.parser import (
    AddressInstruction,
    ComputeInstruction,
    InstructionKind,
    LabelDef,
    classify,
    parse_line,
    parse_source,
    read_lines,
    split_compute,
)
from hack_asm.errors import (
    AssemblySyntaxError,
    MalformedLabelError,
    SourceLocation,
)


LOC = SourceLocation("test.asm", 1)


# =============================================================================
# Classification Tests
# =============================================================================

class TestClassify:
    """Test classify() on single trimmed lines."""

    @pytest.mark.parametrize("line", ["", "//", "// Computes R0 = 2 + 3", "//@17"])
    def test_skippable(self, line):
        """Blank lines and comments are skipped."""
        assert classify(line) is InstructionKind.SKIP

    @pytest.mark.parametrize("line", ["@0", "@17", "@LOOP", "@R15", "@sys.init$ret"])
    def test_address(self, line):
        """Lines starting with @ are A-instructions."""
        assert classify(line) is InstructionKind.ADDRESS

    @pytest.mark.parametrize("line", ["(LOOP)", "(END)", "(Main.main$if_1)"])
    def test_label(self, line):
        """Parenthesized lines are labels."""
        assert classify(line) is InstructionKind.LABEL

    @pytest.mark.parametrize("line", ["D=M", "0;JMP", "AM=M-1", "D;JGT", "M=D+1;JEQ"])
    def test_compute(self, line):
        """Everything else is a C-instruction."""
        assert classify(line) is InstructionKind.COMPUTE

    def test_unclosed_label_is_compute(self):
        """A line missing the closing parenthesis is not a label."""
        assert classify("(LOOP") is InstructionKind.COMPUTE


# =============================================================================
# Field Splitting Tests
# =============================================================================

class TestSplitCompute:
    """Test dest/comp/jump extraction."""

    def test_dest_and_comp(self):
        assert split_compute("D=M") == ("D", "M", "")

    def test_comp_and_jump(self):
        assert split_compute("0;JMP") == ("", "0", "JMP")

    def test_all_fields(self):
        assert split_compute("AM=M-1;JNE") == ("AM", "M-1", "JNE")

    def test_comp_only(self):
        """An instruction can be just an operation."""
        assert split_compute("D+1") == ("", "D+1", "")

    def test_splits_on_first_delimiter(self):
        """Only the first '=' and first ';' are separators."""
        assert split_compute("A=D=M;JGT;JMP") == ("A", "D=M", "JGT;JMP")

    def test_whitespace_around_fields(self):
        """Spaces around the separators are ignored."""
        assert split_compute("D = M ; JGT") == ("D", "M", "JGT")

    def test_empty_comp(self):
        """A missing operation comes back empty rather than failing here."""
        assert split_compute("D=;JMP") == ("D", "", "JMP")


# =============================================================================
# Statement Construction Tests
# =============================================================================

class TestParseLine:
    """Test parse_line() statement construction."""

    def test_comment_returns_none(self):
        assert parse_line("// nothing", LOC) is None

    def test_address_literal(self):
        stmt = parse_line("@21", LOC)
        assert isinstance(stmt, AddressInstruction)
        assert stmt.symbol == "21"
        assert stmt.is_literal

    def test_address_symbol(self):
        stmt = parse_line("@LOOP", LOC)
        assert isinstance(stmt, AddressInstruction)
        assert stmt.symbol == "LOOP"
        assert not stmt.is_literal

    def test_negative_number_is_not_literal(self):
        """Only non-negative decimal constants count as literals."""
        stmt = parse_line("@-1", LOC)
        assert not stmt.is_literal

    def test_label(self):
        stmt = parse_line("(LOOP)", LOC)
        assert isinstance(stmt, LabelDef)
        assert stmt.name == "LOOP"
        assert stmt.source == "(LOOP)"

    def test_compute(self):
        stmt = parse_line("MD=M+1;JLT", LOC)
        assert isinstance(stmt, ComputeInstruction)
        assert (stmt.dest, stmt.comp, stmt.jump) == ("MD", "M+1", "JLT")

    def test_compute_column(self):
        """comp_column points at the operation for error carets."""
        stmt = parse_line("AM=M-1", LOC)
        assert stmt.comp_column == 4

    def test_missing_address_value(self):
        """'@' alone is a syntax error."""
        with pytest.raises(AssemblySyntaxError) as exc_info:
            parse_line("@", LOC)
        assert "missing value" in str(exc_info.value)

    def test_empty_label(self):
        """'()' is rejected instead of binding an empty name."""
        with pytest.raises(MalformedLabelError):
            parse_line("()", LOC)


# =============================================================================
# Source Parsing Tests
# =============================================================================

class TestParseSource:
    """Test parse_source() on whole programs."""

    def test_skips_comments_and_blanks(self):
        lines = ["// header", "", "@2", "   ", "D=A", "// trailer"]
        statements = parse_source(lines)
        assert [s.source for s in statements] == ["@2", "D=A"]

    def test_trims_lines(self):
        statements = parse_source(["   @2   ", "\tD=A\t"])
        assert [s.source for s in statements] == ["@2", "D=A"]

    def test_line_numbers_count_skipped_lines(self):
        statements = parse_source(["// c", "", "@2", "// c", "D=A"], "prog.asm")
        assert statements[0].location == SourceLocation("prog.asm", 3)
        assert statements[1].location == SourceLocation("prog.asm", 5)

    def test_long_comment_runs(self):
        """Long runs of comments are skipped without recursion."""
        lines = ["// comment"] * 50_000 + ["@1"]
        statements = parse_source(lines)
        assert len(statements) == 1
        assert statements[0].location.line == 50_001

    def test_read_lines(self, tmp_path):
        """read_lines() returns trimmed lines of a file."""
        source = tmp_path / "prog.asm"
        source.write_text("// Compute\n  @2\nD=A  \n\nAM=D|M\n")
        lines = read_lines(source)
        assert lines == ["// Compute", "@2", "D=A", "", "AM=D|M"]

    def test_read_lines_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_lines(tmp_path / "missing.asm")
