"""Command-line interface for the adopters loader."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console

if TYPE_CHECKING:
    from adopters.schemas.models import AdoptersContent

app = typer.Typer(
    name="adopters",
    help="Validate and export the adopters dataset.",
    no_args_is_help=True,
)

console = Console()

SiteDirOption = Annotated[
    Path,
    typer.Option(
        "--site-dir",
        "-s",
        help="Site directory containing the adopters directory.",
        exists=True,
        file_okay=False,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Optional YAML file overriding the adopters directory layout.",
        exists=True,
        dir_okay=False,
    ),
]


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)."),
    ] = "WARNING",
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Emit logs as JSON lines."),
    ] = False,
) -> None:
    """Configure logging for every command."""
    from adopters.utils.logging import configure_logging

    configure_logging(level=log_level, json_output=json_logs)


def _load(site_dir: Path, config: Path | None) -> "AdoptersContent":
    """Load the dataset, turning load failures into exit code 1."""
    from adopters.config.loader import load_config
    from adopters.errors import AdoptersError
    from adopters.ingestion.loader import load_adopters
    from adopters.validation.reporter import ConsoleReporter

    try:
        loader_config = load_config(config) if config is not None else None
        return load_adopters(site_dir, loader_config)
    except AdoptersError as e:
        ConsoleReporter(console).print_error(e)
        raise typer.Exit(code=1) from e


@app.command()
def validate(site_dir: SiteDirOption, config: ConfigOption = None) -> None:
    """Validate every adopter record and the unverified list."""
    from adopters.validation.reporter import ConsoleReporter

    console.print(f"[blue]Validating adopters in {site_dir}[/blue]")
    content = _load(site_dir, config)
    ConsoleReporter(console).print_content(content)


@app.command()
def export(
    site_dir: SiteDirOption,
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output path for the global data JSON.",
            dir_okay=False,
        ),
    ],
    config: ConfigOption = None,
) -> None:
    """Load the dataset and write it as site global data JSON."""
    from adopters.export import write_global_data

    content = _load(site_dir, config)
    path = write_global_data(content, output)
    console.print(
        f"[green]Wrote {len(content.adopters)} adopters and "
        f"{len(content.unverified)} unverified entries to {path}[/green]"
    )


@app.command()
def version() -> None:
    """Show version information."""
    from adopters import __version__

    console.print(f"adopters version {__version__}")


if __name__ == "__main__":
    app()
