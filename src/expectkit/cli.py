from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="expectkit", help="Inspect expectkit configuration")
schema_app = typer.Typer(name="schema", help="Generate schema tooling")
app.add_typer(schema_app, name="schema")


@app.command()
def check(
    config: str = typer.Argument(help="Path to expectkit YAML config"),
):
    """Validate a config file and print the resolved settings."""
    import yaml
    from pydantic import ValidationError

    from expectkit.config import load_config

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        settings = load_config(config_path)
    except (ValueError, ValidationError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for name, value in settings.model_dump().items():
        typer.echo(f"{name}: {value}")


@schema_app.command("generate")
def schema_generate(
    dir: str = typer.Option(
        "expectkit", "--dir", help="Project directory for default schema/doc outputs"
    ),
    out: str | None = typer.Option(
        None,
        help="Output path for JSON Schema (defaults to <dir>/schemas/expectkit.schema.json)",
    ),
    doc: str | None = typer.Option(
        None, help="Output path for schema docs (defaults to <dir>/docs/schema.md)"
    ),
):
    """Generate the JSON Schema and Markdown doc for the config file."""
    from expectkit.schema import write_json_schema, write_schema_doc

    project_dir = Path(dir)
    out_path = (
        Path(out)
        if out is not None
        else project_dir / "schemas" / "expectkit.schema.json"
    )
    doc_path = Path(doc) if doc is not None else project_dir / "docs" / "schema.md"
    write_json_schema(out_path)
    write_schema_doc(doc_path)
    typer.echo(f"Wrote schema: {out_path}")
    typer.echo(f"Wrote docs: {doc_path}")


if __name__ == "__main__":
    app()
