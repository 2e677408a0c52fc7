"""Shared pytest fixtures and test helpers for bentoctl tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from bentoctl.config.settings import BentoSettings
from bentoctl.domain.layout import CardEntry, LayoutSpec

# ---------------------------------------------------------------------------
# Reference layout: three slots, A / {B, C} / B
# ---------------------------------------------------------------------------

LAYOUT_DOCUMENT: dict[str, Any] = {
    "layoutType": "bento-1-2",
    "targetContentType": "tabsContainer",
    "positions": {
        "leftColumnFullHeightCard": {"index": 0, "expectedTypes": ["CardTypeA"]},
        "rightColumnTopCard": {"index": 1, "expectedTypes": ["CardTypeB", "CardTypeC"]},
        "rightColumnBottomCard": {"index": 2, "expectedTypes": ["CardTypeB"]},
    },
    "limits": {
        "totalEntries": 3,
        "typeLimits": {"CardTypeA": 1, "CardTypeB": 2, "CardTypeC": 1},
    },
}


def make_layout(**overrides: Any) -> LayoutSpec:
    """Build a LayoutSpec from the reference document with top-level overrides."""
    return LayoutSpec.model_validate({**LAYOUT_DOCUMENT, **overrides})


def make_card(card_id: str, content_type: str) -> CardEntry:
    return CardEntry(id=card_id, content_type=content_type)


def cards_of(*content_types: str) -> list[CardEntry]:
    """Cards ``card1..cardN`` with the given content types, in order."""
    return [make_card(f"card{i}", t) for i, t in enumerate(content_types, start=1)]


def sys_entry(entry_id: str, content_type: str) -> dict[str, Any]:
    """An entry in the CMS ``sys`` shape."""
    return {"sys": {"id": entry_id, "contentType": {"sys": {"id": content_type}}}}


def link(entry_id: str) -> dict[str, Any]:
    return {"sys": {"type": "Link", "linkType": "Entry", "id": entry_id}}


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    bento = logging.getLogger("bentoctl")
    bento_level = bento.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    bento.setLevel(bento_level)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BENTOCTL_CONFIG", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def layout() -> LayoutSpec:
    return make_layout()


@pytest.fixture
def layout_file(tmp_path: Path) -> Path:
    return write_json(tmp_path / "layouts" / "bento-1-2.json", LAYOUT_DOCUMENT)


@pytest.fixture
def project(tmp_path: Path, layout_file: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A project directory whose bentoctl.toml points at the reference layout.

    The CWD is changed to the project root so the CLI discovers the config.
    """
    (tmp_path / "bentoctl.toml").write_text(
        '[layout]\npath = "layouts/bento-1-2.json"\n', encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(project: Path) -> BentoSettings:
    return BentoSettings.from_cli(project_root=project)
