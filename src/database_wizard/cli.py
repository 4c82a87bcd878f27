import asyncio
import json
import logging
import sys
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from .config import Settings
from .errors import ConfigurationError
from .schema_model import SchemaDescription
from .service import DatabaseWizardService

app = typer.Typer(help="Validate schema descriptions and generate SQL Server DDL.")

SchemaArgument = Annotated[
    str,
    typer.Argument(help="Schema description JSON file. Use `-` for stdin."),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        help="Increases the verbosity of the logging feature, to help when troubleshooting issues.",
    ),
]


def _setup_logging(verbose: bool) -> None:
    root_logger = logging.getLogger()

    loglevel = logging.INFO
    if verbose:
        loglevel = logging.DEBUG

    root_logger.handlers.clear()
    console_handler = logging.StreamHandler(sys.stderr)

    root_logger.setLevel(loglevel)
    root_logger.addHandler(console_handler)


def _load_schema(schema_file: str) -> SchemaDescription:
    try:
        if schema_file == "-":
            payload = json.load(sys.stdin)
        else:
            with open(schema_file) as f:
                payload = json.load(f)
        return SchemaDescription.model_validate(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        typer.echo(f"Could not read schema from '{schema_file}': {e}", err=True)
        raise typer.Exit(code=2)


def _report_errors(errors) -> None:
    for error in errors:
        typer.echo(f"  - {error}", err=True)


@app.command()
def validate(schema_file: SchemaArgument, verbose: VerboseOption = False):
    """Check a schema description and list every rule violation."""
    _setup_logging(verbose)
    result = DatabaseWizardService().validate(_load_schema(schema_file))
    if not result.success:
        typer.echo(result.message, err=True)
        _report_errors(result.errors)
        raise typer.Exit(code=1)
    typer.echo(result.message)


@app.command()
def generate(
    schema_file: SchemaArgument,
    output_file: Annotated[
        Optional[str],
        typer.Option("--output", "-o", help="Write the SQL here instead of stdout."),
    ] = None,
    execute: Annotated[
        bool,
        typer.Option("--execute", help="Run the generated SQL against SQLSERVER_URL."),
    ] = False,
    verbose: VerboseOption = False,
):
    """Generate the DDL script for a schema description, optionally executing it."""
    _setup_logging(verbose)
    schema = _load_schema(schema_file)

    if execute:
        try:
            service = DatabaseWizardService.from_settings(Settings.from_env())
        except ConfigurationError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(code=2)
        result = asyncio.run(service.create_database(schema))
    else:
        result = DatabaseWizardService().preview(schema)

    if result.generated_sql:
        if output_file:
            with open(output_file, "w") as f:
                f.write(result.generated_sql)
            typer.echo(f"SQL written to {output_file}", err=True)
        else:
            typer.echo(result.generated_sql, nl=False)

    if not result.success:
        typer.echo(result.message, err=True)
        _report_errors(result.errors)
        raise typer.Exit(code=1)

    if execute:
        typer.echo(result.message, err=True)


def cli():
    app()


if __name__ == "__main__":
    cli()
