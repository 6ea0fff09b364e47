"""Distance command implementation."""

import sys
from pathlib import Path
from typing import Optional

from anchordist import pairwise_distance
from anchordist.io.sequences import PairwiseAlignment


def run_distance(
    alignment: Path,
    model: str,
    n_bootstrap: int,
    seed: Optional[int],
    level: float,
    min_anchor: int,
    output: Optional[Path],
    format: str,
    quiet: bool,
):
    """Estimate the distance between two aligned sequences."""
    try:
        aln = PairwiseAlignment.from_fasta(alignment)
    except Exception as e:
        print(f"Error: Could not load alignment from {alignment}", file=sys.stderr)
        print(f"Details: {e}", file=sys.stderr)
        sys.exit(1)

    if not quiet:
        print(f"Estimating distance: {aln.subject_name} vs {aln.query_name}", file=sys.stderr)
        print("=" * 80, file=sys.stderr)
        print(f"Alignment: {alignment} ({aln.length} columns)", file=sys.stderr)
        print(f"Model:     {model}", file=sys.stderr)
        if n_bootstrap:
            print(f"Bootstrap: {n_bootstrap} replicates", file=sys.stderr)
        print(file=sys.stderr)

    try:
        result = pairwise_distance(
            aln,
            model=model,
            n_bootstrap=n_bootstrap,
            seed=seed,
            level=level,
            min_anchor=min_anchor,
        )
    except ValueError as e:
        print("Error: Distance estimation failed", file=sys.stderr)
        print(f"Details: {e}", file=sys.stderr)
        sys.exit(1)

    # Format output
    if format == "json":
        output_text = result.to_json()
    else:  # text
        output_text = result.summary()

    # Write output
    if output:
        with open(output, 'w') as f:
            f.write(output_text)
        if not quiet:
            print(f"\nResults written to {output}", file=sys.stderr)
    else:
        print(output_text)
