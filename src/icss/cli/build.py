"""CLI command: icss compile -- compile an ICSS file to CSS."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from icss.compiler import CompilationError, Compiler
from icss.config import IcssConfig
from icss.parser import ParseError


@click.command("compile")
@click.argument("icssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", default=None, help="Write CSS here instead of stdout")
@click.option("--indent", default=2, type=click.IntRange(min=0), help="Spaces per indent level")
@click.option(
    "--strict/--no-strict",
    default=True,
    help="Refuse to generate output for a stylesheet with diagnostics",
)
def compile_command(icssfile: str, output: str | None, indent: int, strict: bool) -> None:
    """Compile an ICSS file to CSS.

    Parses, checks, evaluates, and renders the stylesheet.
    """
    path = Path(icssfile)
    compiler = Compiler(IcssConfig(indent=" " * indent, strict=strict))

    try:
        css = compiler.compile(path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except CompilationError as exc:
        for diag in exc.diagnostics:
            click.echo(str(diag), err=True)
        click.echo(f"Compilation failed: {len(exc.diagnostics)} error(s)", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(css, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(css, nl=False)
