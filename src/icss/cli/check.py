"""CLI command: icss check -- parse and type-check an ICSS file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from icss.parser import ParseError, parse_icss
from icss.validation import check as run_check


@click.command()
@click.argument("icssfile", type=click.Path(exists=True, dir_okay=False))
def check(icssfile: str) -> None:
    """Parse and type-check an ICSS file.

    Prints every diagnostic and exits with code 1 if there are any,
    or code 0 if the stylesheet is valid.
    """
    path = Path(icssfile)

    try:
        stylesheet = parse_icss(path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_check(stylesheet)
    if not diagnostics:
        click.echo(f"OK: {path.name} is valid (0 diagnostics)")
        sys.exit(0)

    for diag in diagnostics:
        click.echo(str(diag))
    click.echo()
    click.echo(f"Summary: {len(diagnostics)} error(s)")
    sys.exit(1)
