"""
hackasm - Hack Assembler Command-Line Interface
===============================================

Assembles a Hack assembly source file into the .hack text format, one
16-bit binary word per line.

Usage Examples
--------------
Basic assembly (writes Max.hack next to the source):
    $ hackasm Max.asm

With output file:
    $ hackasm Max.asm -o build/Max.hack

Generate listing and symbol files:
    $ hackasm Max.asm -l Max.lst -s Max.sym

Verbose mode:
    $ hackasm -v Max.asm
"""

from pathlib import Path
from typing import Optional

import click

from hack_asm import __version__
from hack_asm.assembler import Assembler
from hack_asm.cli.errors import handle_cli_exception, setup_logging


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output .hack file (default: input.hack)",
)
@click.option(
    "-l", "--listing",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate listing file",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate symbol file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackasm")
def main(
    input_file: Path,
    output: Optional[Path],
    listing: Optional[Path],
    symbols: Optional[Path],
    verbose: bool,
) -> None:
    """
    Assemble Hack source code.

    INPUT_FILE is the assembly source file (.asm) to assemble.

    \b
    Examples:
        hackasm Max.asm              # Outputs Max.hack
        hackasm Max.asm -o out.hack  # Specify output file
        hackasm Max.asm -s Max.sym   # Also write the symbol table
    """
    setup_logging(verbose)

    asm = Assembler()
    output_file = output if output is not None else asm.default_output_path(input_file)

    try:
        if verbose:
            click.echo(f"Assembling {input_file}...")

        code = asm.assemble_file(input_file)
        asm.write_hack(output_file)
        if verbose:
            click.echo(f"Wrote {len(code)} words to {output_file}")

        if listing:
            asm.write_listing(listing)
            if verbose:
                click.echo(f"Wrote listing to {listing}")

        if symbols:
            asm.write_symbols(symbols)
            if verbose:
                click.echo(f"Wrote symbols to {symbols}")

        if verbose:
            click.echo(
                f"Assembly complete: {len(code)} instructions, "
                f"{len(asm.get_labels())} labels, "
                f"{len(asm.get_variables())} variables"
            )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
