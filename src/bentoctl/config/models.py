"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bentoctl.toml only contains
overrides. A project usually needs only ``[layout] path``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class LayoutConfig(BaseModel):
    """[layout] section."""

    model_config = {"frozen": True}

    path: str | None = None


class CardsConfig(BaseModel):
    """[cards] section."""

    model_config = {"frozen": True}

    entries_path: str | None = None


class CheckConfig(BaseModel):
    """[check] section.

    ``fail_on`` picks the lowest finding severity that makes the CLI exit
    non-zero; ``min_severity`` hides findings below it from output.
    """

    model_config = {"frozen": True}

    fail_on: Literal["error", "warning", "never"] = "error"
    min_severity: Literal["warning", "error"] = "warning"

