from __future__ import annotations

import json
import logging
from dataclasses import replace as dc_replace
from pathlib import Path

import typer
import yaml

from .config import EngineConfig, load_config
from .display import clamp_for_display, format_reading_time
from .engine import ReadabilityEngine

app = typer.Typer(help="Readability scoring CLI.", no_args_is_help=True)


@app.command()
def score(
    input_file: typer.FileText = typer.Argument(
        "-", help="Text file to score; '-' reads from stdin."
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, readable=True
    ),
    sample_limit: int | None = typer.Option(
        None,
        "--sample-limit",
        "-s",
        help="Only measure the first N words (0 measures everything).",
    ),
    clamp: bool = typer.Option(
        False, "--clamp", help="Clamp scores to their display ranges."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    """Score a text and print the readability report as JSON."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    cfg = _build_config(config, sample_limit)
    text = input_file.read()
    report = ReadabilityEngine(cfg).score(text)
    payload = clamp_for_display(report) if clamp else report.to_dict()
    typer.echo(json.dumps(payload, indent=2))
    if verbose:
        typer.echo(
            f"Estimated reading time: {format_reading_time(report.reading_time)}",
            err=True,
        )


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = EngineConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _build_config(config_path: Path | None, sample_limit: int | None) -> EngineConfig:
    """Load the YAML config (or defaults) and apply CLI overrides."""
    try:
        cfg = load_config(config_path)
        if sample_limit is not None:
            cfg = dc_replace(cfg, sample_limit=sample_limit).validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return cfg


if __name__ == "__main__":
    main()
