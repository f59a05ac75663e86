"""Typer-powered command-line interface for semiring matrix arithmetic."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from .config import DEFAULT_ELEMENT_KIND, DEFAULT_FIELD_SIZE, DEFAULT_SEMIRING_NAME, RenderOptions, semiring_by_name
from .errors import MatrixError
from .matrix import Matrix
from .products import multiply, power
from .text import format_matrix, parse_numeric

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Multiply and exponentiate matrices over numeric, boolean and tropical semirings.")
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


def _load(path: Path, kind: str) -> Matrix:
    LOGGER.debug("Reading %s matrix from %s", kind, path)
    return parse_numeric(path.read_text(encoding="utf8"), kind)


def _render(matrix: Matrix, options: RenderOptions) -> None:
    if options.title:
        console.print(f"[bold]{escape(options.title)}[/bold] ({matrix.rows}x{matrix.columns})")
    console.print(format_matrix(matrix, options.field_size or None), highlight=False, markup=False)


def _fail(message: str) -> None:
    console.print(f"[bold red]{escape(message)}[/bold red]")
    raise typer.Exit(code=1)


SemiringOption = typer.Option(
    DEFAULT_SEMIRING_NAME,
    "--semiring",
    help="Semiring name (arithmetic, boolean, min-plus, max-plus, max-min) or 'auto' to use the element type's binding.",
)
KindOption = typer.Option(
    DEFAULT_ELEMENT_KIND,
    "--kind",
    help="Element type used to parse the input files: int, float or bool.",
)
FieldSizeOption = typer.Option(
    DEFAULT_FIELD_SIZE,
    "--field-size",
    help="Right-align every cell to this width.",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")


@app.command("multiply")
def multiply_command(
    left: Path = typer.Argument(..., exists=True, dir_okay=False, help="Left operand file."),
    right: Path = typer.Argument(..., exists=True, dir_okay=False, help="Right operand file."),
    semiring: str = SemiringOption,
    kind: str = KindOption,
    field_size: int = FieldSizeOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the product LEFT x RIGHT."""

    _configure_logging(verbose)
    try:
        structure = semiring_by_name(semiring)
        result = multiply(_load(left, kind), _load(right, kind), structure)
    except (MatrixError, ValueError) as exc:
        _fail(f"Multiplication failed: {exc}")
    _render(result, RenderOptions(field_size, f"{left.name} x {right.name}"))


@app.command("power")
def power_command(
    matrix: Path = typer.Argument(..., exists=True, dir_okay=False, help="Square matrix file."),
    exponent: int = typer.Option(..., "--exponent", "-e", help="Positive integer exponent."),
    semiring: str = SemiringOption,
    kind: str = KindOption,
    field_size: int = FieldSizeOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print MATRIX raised to --exponent."""

    _configure_logging(verbose)
    try:
        structure = semiring_by_name(semiring)
        result = power(_load(matrix, kind), exponent, structure)
    except (MatrixError, ValueError) as exc:
        _fail(f"Exponentiation failed: {exc}")
    _render(result, RenderOptions(field_size, f"{matrix.name}^{exponent}"))


def main() -> None:
    """Entry point for ``python -m gridmatrix``."""

    app()


if __name__ == "__main__":
    main()
