"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and transcript output in text or JSON form.
"""

from __future__ import annotations

import json
from typing import NoReturn, Sequence

import typer

from .errors import PipelineStageError
from .models.datatypes import LinePair, Transcript


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
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


def echo_line_pairs(lines: Sequence[LinePair]) -> None:
    """Print each Gurmukhi line followed by its indented translation."""

    for line in lines:
        typer.echo(line.source_line)
        if line.translation_line:
            typer.echo(f"    {line.translation_line}")


def echo_transcript(transcript: Transcript) -> None:
    """Print transcript header fields and line pairs."""

    typer.echo(f"Date: {transcript.date or '(unknown)'}")
    typer.echo(f"Ang: {transcript.ang or '(unknown)'}")
    typer.echo(f"Title: {transcript.title or '(untitled)'}")
    typer.echo("")
    echo_line_pairs(transcript.lines)


def echo_json(payload: object) -> None:
    """Print a payload as indented JSON with Gurmukhi left unescaped."""

    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
