from pathlib import Path

import typer

from contentaudit.config.settings import Settings
from contentaudit.database.connection import close_pool, init_pool
from contentaudit.logging.logger import Log
from contentaudit.pipeline.audit_pipeline import build_pipeline
from contentaudit.pipeline.exceptions import AuditDeclinedError
from contentaudit.pipeline.models import AuditOptions
from contentaudit.schema.exceptions import SchemaError

app = typer.Typer(help="Audit stored content against its declared schema.")


@app.callback()
def cli() -> None:
    """contentaudit command line."""


@app.command()
def audit(
    clean: bool = typer.Option(
        False,
        "--clean",
        help="Rewrite documents through the content write path. Asks for confirmation.",
    ),
    use_default_values: bool = typer.Option(
        False,
        "--use-default-values",
        help="Fill missing fields with schema defaults while cleaning (requires --clean).",
    ),
    no_telemetry: bool = typer.Option(
        False, "--no-telemetry", help="Do not send the usage event."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log every document checked."
    ),
    root: Path | None = typer.Option(
        None, "--root", help="Content root (defaults to CONTENT_ROOT or the current directory)."
    ),
    schema: Path | None = typer.Option(
        None, "--schema", help="Schema file (defaults to <root>/.contentaudit/schema.json)."
    ),
) -> None:
    """Audit every collection and exit non-zero when documents have errors."""
    settings = _load_settings(root, schema)
    Log.configure("DEBUG" if verbose else settings.log_level)
    options = AuditOptions(
        clean=clean,
        use_default_values=use_default_values,
        no_telemetry=no_telemetry,
        verbose=verbose,
    )

    uses_pool = settings.store_backend.lower() == "postgres"
    if uses_pool:
        init_pool(settings)
    try:
        pipeline, context = build_pipeline(settings, options)
        pipeline.run(context)
    except AuditDeclinedError:
        raise typer.Exit(code=0)
    except SchemaError as exc:
        Log.error(f"Audit aborted: {exc}")
        raise typer.Exit(code=1)
    finally:
        if uses_pool:
            close_pool()

    outcome = context.outcome
    raise typer.Exit(code=outcome.exit_code if outcome is not None else 1)


def _load_settings(root: Path | None, schema: Path | None) -> Settings:
    settings = Settings()
    overrides: dict[str, object] = {}
    if root is not None:
        overrides["content_root"] = root
    if schema is not None:
        overrides["schema_path"] = schema
    return settings.model_copy(update=overrides) if overrides else settings


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
