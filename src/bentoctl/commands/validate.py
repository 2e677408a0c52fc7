"""Command: validate a card sequence against a bento layout."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from bentoctl.commands._base import BentoCommand
from bentoctl.commands._context import EXIT_FINDINGS

if TYPE_CHECKING:
    from bentoctl.commands._context import AppContext

_PATH = click.Path(dir_okay=False, path_type=Path)


@click.command(
    cls=BentoCommand,
    examples="""\
  bentoctl validate cards.json
  bentoctl validate cards.json --layout bento-1-2.json
  bentoctl validate links.json --entries export.json
  bentoctl --json validate cards.yaml
  bentoctl -q validate cards.json --errors-only""",
)
@click.argument("cards", type=_PATH)
@click.option("--layout", "layout_path", type=_PATH, default=None, help="Layout document.")
@click.option(
    "--entries",
    "entries_path",
    type=_PATH,
    default=None,
    help="Entries export used to resolve card links.",
)
@click.option(
    "--min-severity",
    type=click.Choice(["warning", "error"]),
    default=None,
    help="Hide findings below this severity.",
)
@click.option("--errors-only", is_flag=True, help="Shortcut for --min-severity error.")
@click.pass_obj
def validate(
    app: AppContext,
    cards: Path,
    layout_path: Path | None,
    entries_path: Path | None,
    min_severity: str | None,
    errors_only: bool,
) -> None:
    """Validate CARDS against the configured bento layout."""
    from bentoctl.services.validate import ValidateService, should_fail

    result = ValidateService(app.settings).validate(
        cards,
        layout_path=layout_path,
        entries_path=entries_path,
        min_severity="error" if errors_only else min_severity,
    )
    app.emit(result)
    if should_fail(result, app.settings.check.fail_on):
        raise SystemExit(EXIT_FINDINGS)
