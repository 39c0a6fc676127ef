"""
hackdisasm - Hack Disassembler Command-Line Interface
=====================================================

Decodes a .hack file back into assembly language.

Usage Examples
--------------
Listing with addresses and words:
    $ hackdisasm Max.hack

Plain source that can be fed back to hackasm:
    $ hackdisasm Max.hack --source -o Max.dis.asm
"""

from pathlib import Path
from typing import Optional

import click

from hack_asm import __version__
from hack_asm.cli.errors import handle_cli_exception, setup_logging
from hack_asm.disassembler import HackDisassembler


@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "--source",
    is_flag=True,
    help="Emit bare instructions without addresses or words",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackdisasm")
def main(
    input_file: Path,
    output: Optional[Path],
    source: bool,
    verbose: bool,
) -> None:
    """
    Disassemble a Hack machine code file.

    INPUT_FILE is a .hack file with one 16-bit binary word per line.
    """
    setup_logging(verbose)

    try:
        words = input_file.read_text(encoding="utf-8").splitlines()
        disasm = HackDisassembler()

        if source:
            text = disasm.format_source(words)
        else:
            text = disasm.format_listing(words)

        if output:
            output.write_text(text + "\n", encoding="utf-8")
            if verbose:
                click.echo(f"Wrote disassembly to {output}")
        else:
            click.echo(text)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Disassembly")


if __name__ == "__main__":
    main()
