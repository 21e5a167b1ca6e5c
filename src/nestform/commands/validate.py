"""Command: validate form documents."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from nestform.commands._base import NestformCommand

if TYPE_CHECKING:
    from nestform.commands._context import AppContext


@click.command(
    cls=NestformCommand,
    examples="""\
  nestform validate form.json
  nestform validate forms/*.json
  nestform --json validate form.json
  nestform --locale en validate form.json""",
)
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.pass_obj
def validate(app: AppContext, files: tuple[Path, ...]) -> None:
    """Validate one or more JSON form documents.

    Each file may hold a single form or a list of forms.  Exits with code 1
    if any form has violations or any file cannot be read.
    """
    results = [app.emit(app.service.validate_file(path), exit_on_error=False) for path in files]
    if not all(results):
        raise SystemExit(1)
