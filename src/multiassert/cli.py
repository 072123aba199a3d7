from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="multiassert", help="Run declarative field checks between two objects")
schema_app = typer.Typer(name="schema", help="Generate schema tooling for check files")
app.add_typer(schema_app, name="schema")


@app.command()
def run(
    check_file: str = typer.Argument(help="Path to the check file (YAML)"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log successful checks and run summaries"
    ),
    junit: str | None = typer.Option(None, help="Write a JUnit XML report to this path"),
    debug_log: str | None = typer.Option(
        None, "--debug-log", help="Also append every log record to this file"
    ),
):
    """Run the checks declared in a check file."""
    from pydantic import ValidationError

    from multiassert.config import load_config
    from multiassert.errors import AggregateFailure, MultiAssertError
    from multiassert.reporting.junit import write_junit
    from multiassert.verbose import setup_logger

    config_path = Path(check_file)
    if not config_path.exists():
        typer.echo(f"Error: check file not found: {check_file}", err=True)
        raise typer.Exit(2)

    try:
        config = load_config(config_path)
    except ValidationError as e:
        typer.echo(f"Error: invalid check file {check_file}:\n{e}", err=True)
        raise typer.Exit(2)

    if verbose:
        config.verbose = True
    logger = setup_logger(
        verbose=config.verbose,
        debug_file=Path(debug_log) if debug_log else None,
    )

    try:
        builder = config.build(logger=logger)
    except (MultiAssertError, ImportError, AttributeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    failed = False
    try:
        builder.run_assertions()
    except AggregateFailure as e:
        failed = True
        typer.echo(str(e), err=True)
    except MultiAssertError as e:
        # Aborted runs have no outcomes to report.
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    if junit:
        write_junit(
            Path(junit),
            builder.results,
            suite_name=config_path.stem,
            elapsed_seconds=builder.elapsed_ms / 1000.0,
        )

    passed = len(builder.successes)
    total = len(builder.results)
    typer.echo(f"{passed}/{total} checks passed")
    if failed:
        raise typer.Exit(1)


@schema_app.command("generate")
def schema_generate(
    out: str = typer.Option(
        "schemas/multiassert.schema.json", help="Output path for JSON Schema"
    ),
    doc: str = typer.Option("docs/schema.md", help="Output path for schema docs"),
):
    """Generate JSON Schema and docs for the check-file format."""
    from multiassert.schema import write_json_schema, write_schema_doc

    out_path = Path(out)
    doc_path = Path(doc)
    write_json_schema(out_path)
    write_schema_doc(doc_path)
    typer.echo(f"Wrote schema: {out_path}")
    typer.echo(f"Wrote docs: {doc_path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
