# =============================================================================
# test_cli.py - Command-Line Interface Tests
# =============================================================================

from click.testing import CliRunner

from hack_asm.cli.errors import ExitCode
from hack_asm.cli.hackasm import main as hackasm
from hack_asm.cli.hackdisasm import main as hackdisasm


class TestHackasm:
    """Tests for the hackasm command."""

    def test_default_output(self, tmp_path, max_source, max_hack):
        source = tmp_path / "Max.asm"
        source.write_text(max_source)

        result = CliRunner().invoke(hackasm, [str(source)])

        assert result.exit_code == 0, f"Assembly failed: {result.output}"
        assert (tmp_path / "Max.hack").read_text().splitlines() == max_hack

    def test_output_listing_and_symbols(self, tmp_path, max_source):
        source = tmp_path / "Max.asm"
        source.write_text(max_source)

        result = CliRunner().invoke(
            hackasm,
            [
                str(source),
                "-o", str(tmp_path / "out.hack"),
                "-l", str(tmp_path / "Max.lst"),
                "-s", str(tmp_path / "Max.sym"),
                "-v",
            ],
        )

        assert result.exit_code == 0, f"Assembly failed: {result.output}"
        assert (tmp_path / "out.hack").exists()
        assert not (tmp_path / "Max.hack").exists()
        assert "OUTPUT_FIRST" in (tmp_path / "Max.lst").read_text()
        assert "OUTPUT_D 12" in (tmp_path / "Max.sym").read_text().splitlines()
        assert "Assembly complete: 16 instructions, 3 labels, 0 variables" in result.output

    def test_assembly_error(self, tmp_path):
        source = tmp_path / "bad.asm"
        source.write_text("@1\nD=D+2\n")

        result = CliRunner().invoke(hackasm, [str(source)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "Assembly error:" in result.output
        assert "unknown compute mnemonic 'D+2'" in result.output
        assert not (tmp_path / "bad.hack").exists()

    def test_missing_input(self, tmp_path):
        result = CliRunner().invoke(hackasm, [str(tmp_path / "nothing.asm")])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_missing_argument(self):
        result = CliRunner().invoke(hackasm, [])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "INPUT_FILE" in result.output

    def test_version(self):
        result = CliRunner().invoke(hackasm, ["--version"])
        assert result.exit_code == 0
        assert "hackasm" in result.output


class TestHackdisasm:
    """Tests for the hackdisasm command."""

    def test_listing_to_stdout(self, tmp_path, max_hack):
        hack = tmp_path / "Max.hack"
        hack.write_text("\n".join(max_hack))

        result = CliRunner().invoke(hackdisasm, [str(hack)])

        assert result.exit_code == 0, result.output
        first = result.output.splitlines()[0]
        assert first == "    0: 0000000000000000  @0"

    def test_source_to_file(self, tmp_path, max_hack):
        hack = tmp_path / "Max.hack"
        hack.write_text("\n".join(max_hack) + "\n")
        output = tmp_path / "Max.dis.asm"

        result = CliRunner().invoke(hackdisasm, [str(hack), "--source", "-o", str(output)])

        assert result.exit_code == 0, result.output
        lines = output.read_text().splitlines()
        assert lines[-2:] == ["@14", "0;JMP"]

    def test_source_round_trips_through_hackasm(self, tmp_path):
        hack = tmp_path / "odd.hack"
        hack.write_text("0000000000000101\n1000000000000000\n1110110000010000\n")
        output = tmp_path / "odd.asm"

        result = CliRunner().invoke(hackdisasm, [str(hack), "--source", "-o", str(output)])
        assert result.exit_code == 0, result.output

        result = CliRunner().invoke(hackasm, [str(output)])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "odd.hack").read_text().splitlines() == [
            "0000000000000101",
            "1110110000010000",
        ]

    def test_bad_word(self, tmp_path):
        hack = tmp_path / "bad.hack"
        hack.write_text("0000000000000000\nhello\n")

        result = CliRunner().invoke(hackdisasm, [str(hack)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "not a 16-bit binary word" in result.output
