"""Command: show a bento layout's slots and limits."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from bentoctl.commands._base import BentoCommand

if TYPE_CHECKING:
    from bentoctl.commands._context import AppContext


@click.command(
    "inspect",
    cls=BentoCommand,
    examples="""\
  bentoctl inspect
  bentoctl inspect --layout bento-1-2.yaml
  bentoctl --json inspect""",
)
@click.option(
    "--layout",
    "layout_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Layout document.",
)
@click.pass_obj
def inspect_cmd(app: AppContext, layout_path: Path | None) -> None:
    """Show the slots and type limits of a bento layout."""
    from bentoctl.services.validate import ValidateService

    app.emit(ValidateService(app.settings).inspect(layout_path=layout_path))
