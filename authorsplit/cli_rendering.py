"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
token tables, and strategy listings.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import SplitStageError
from .models.datatypes import Document


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, SplitStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_token_table(document: Document) -> None:
    """Print one tab-separated row per token followed by the processed stages."""

    for token in document.tokens:
        location = token.location
        typer.echo(
            f"{token.index}\t{location.begin_line}:{location.begin_column}-{location.end_column}"
            f"\t{token.text}\t{token.normalized}\t{token.stem or ''}"
        )
    typer.echo(f"Processed stages: {', '.join(document.processed_stages)}")


def echo_strategy_names(title: str, names: list[str]) -> None:
    """Print a titled list of strategy names."""

    typer.echo(f"{title}:")
    for name in names:
        typer.echo(f"  {name}")
