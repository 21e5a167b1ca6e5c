"""Command: show the effective bound and span tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nestform.commands._base import NestformCommand

if TYPE_CHECKING:
    from nestform.commands._context import AppContext


@click.command(
    cls=NestformCommand,
    examples="""\
  nestform limits
  nestform --json limits
  NESTFORM_RANGE__MONTH_MAX_MONTHS=6 nestform limits""",
)
@click.pass_obj
def limits(app: AppContext) -> None:
    """Show year/month/day bounds and maximum range spans."""
    app.emit(app.service.limits())
