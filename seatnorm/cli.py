"""Typer CLI interface for seatnorm."""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from seatnorm.exceptions import SeatNormError
from seatnorm.models.results import NormalizationQuery, NormalizationResult

app = typer.Typer(
    name="seatnorm",
    help="seatnorm: normalize vendor section/row labels against a venue manifest.",
    no_args_is_help=True,
)

_MANIFEST_HELP = "Manifest CSV: section_id,section_name[,row_id,row_name]"


def _manifest_option():
    return typer.Option(
        ...,
        "--manifest",
        "-m",
        envvar="SEATNORM_MANIFEST",
        help=_MANIFEST_HELP,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """seatnorm: normalize vendor section/row labels against a venue manifest."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_engine(manifest: Path):
    from seatnorm.normalization.engine import NormalizationEngine

    try:
        return NormalizationEngine.from_manifest(manifest)
    except SeatNormError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


def _result_dict(query: NormalizationQuery, result: NormalizationResult) -> dict:
    return {"section": query.section, "row": query.row, **result.model_dump()}


def _fmt(value: object) -> str:
    return "--" if value is None else str(value)


@app.command()
def normalize(
    manifest: Path = _manifest_option(),
    section: str | None = typer.Option(None, "--section", "-s", help="Vendor section label"),
    row: str | None = typer.Option(None, "--row", "-r", help="Vendor row label"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Normalize a single vendor (section, row) pair."""
    engine = _load_engine(manifest)
    query = NormalizationQuery(section=section, row=row)
    result = engine.normalize_query(query)

    if json_output:
        typer.echo(json.dumps(_result_dict(query, result), indent=2))
    else:
        status = "VALID" if result.valid else "INVALID"
        typer.echo(
            f"{status}  section_id={_fmt(result.section_id)}  row_id={_fmt(result.row_id)}"
        )


@app.command()
def batch(
    queries_file: Path = typer.Argument(..., help="Queries file (.csv with section,row or .json list)"),
    manifest: Path = _manifest_option(),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write JSON results to this file"),
) -> None:
    """Normalize every (section, row) pair in a queries file."""
    from seatnorm.ingestion.queries import QueryFileAdapter

    engine = _load_engine(manifest)
    try:
        queries = QueryFileAdapter().parse(queries_file)
    except SeatNormError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    results = engine.normalize_batch(queries)
    rows = [_result_dict(q, r) for q, r in zip(queries, results)]
    valid_count = sum(1 for r in results if r.valid)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(rows, indent=2))
        typer.echo(f"Wrote {len(rows)} result(s) to {output} ({valid_count} valid)")
        return

    if json_output:
        typer.echo(json.dumps(rows, indent=2))
        return

    tbl = Table(title="Normalization Results", show_header=True)
    tbl.add_column("#", justify="right")
    tbl.add_column("Section")
    tbl.add_column("Row")
    tbl.add_column("Section ID", justify="right")
    tbl.add_column("Row ID", justify="right")
    tbl.add_column("Valid")
    for i, r in enumerate(rows, start=1):
        tbl.add_row(
            str(i), _fmt(r["section"]), _fmt(r["row"]),
            _fmt(r["section_id"]), _fmt(r["row_id"]),
            "yes" if r["valid"] else "no",
        )
    console = Console()
    console.print(tbl)
    typer.echo(f"{valid_count} of {len(rows)} input(s) matched the manifest")


@app.command()
def inspect(
    manifest: Path = _manifest_option(),
) -> None:
    """Show manifest size and the keys that need disambiguation."""
    engine = _load_engine(manifest)
    index = engine.index
    collisions = index.collisions()

    typer.echo(f"Records:    {index.record_count}")
    typer.echo(f"Keys:       {len(index)}")
    typer.echo(f"Collisions: {len(collisions)}")

    if not collisions:
        return

    tbl = Table(title="Colliding Keys", show_header=True)
    tbl.add_column("Section Token")
    tbl.add_column("Row")
    tbl.add_column("Candidates")
    for key, records in collisions.items():
        tbl.add_row(
            key.section_token or "(no digits)",
            _fmt(key.row),
            ", ".join(f"{r.section_id}:{r.section_name}" for r in records),
        )
    Console().print(tbl)
