"""Main CLI application for anchordist."""

import typer
from pathlib import Path
from typing import Optional
from enum import Enum

from anchordist.models.selector import Model

app = typer.Typer(
    name="anchordist",
    help="Evolutionary distances from pairwise DNA alignments",
    no_args_is_help=True,
)


class ModelName(str, Enum):
    """Distance model."""
    RAW = Model.RAW.value
    JC = Model.JC.value
    KIMURA = Model.KIMURA.value
    LOGDET = Model.LOGDET.value


class OutputFormat(str, Enum):
    """Output format."""
    TEXT = "text"
    JSON = "json"


@app.command()
def distance(
    alignment: Path = typer.Option(
        ...,
        "--alignment", "-a",
        help="FASTA file with two aligned sequences",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    model: ModelName = typer.Option(
        ModelName.JC,
        "--model", "-m",
        help="Distance model",
    ),
    n_bootstrap: int = typer.Option(
        0,
        "--bootstrap", "-b",
        help="Number of bootstrap replicates",
        min=0,
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Random seed for bootstrapping",
    ),
    level: float = typer.Option(
        0.95,
        "--level",
        help="Confidence level of bootstrap intervals",
        min=0.5,
        max=0.999,
    ),
    min_anchor: int = typer.Option(
        1,
        "--min-anchor",
        help="Minimum length of exact matches counted as anchors",
        min=1,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Output file (default: stdout)",
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        help="Output format",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Minimal output",
    ),
):
    """
    Estimate the evolutionary distance between two aligned sequences.

    Example:
        anchordist distance -a pair.fasta
        anchordist distance -a pair.fasta -m kimura -b 1000 --seed 42
    """
    from .commands.distance import run_distance

    run_distance(
        alignment=alignment,
        model=model.value,
        n_bootstrap=n_bootstrap,
        seed=seed,
        level=level,
        min_anchor=min_anchor,
        output=output,
        format=format.value,
        quiet=quiet,
    )


@app.command()
def models():
    """
    List the available distance models.
    """
    for m in Model:
        anchors = "fast" if m.aggregate_identity else "exact"
        typer.echo(f"{m.value:<8} {m.description} (anchors: {anchors})")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
