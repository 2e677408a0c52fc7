"""Layout and card document loading.

Layout configuration is stored as JSON; YAML is accepted too so that
hand-written layouts can carry comments. Parsing failures surface as
:class:`~bentoctl.exceptions.DocumentError`, never as raw decoder errors.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from bentoctl.domain.layout import LayoutSpec
from bentoctl.exceptions import DocumentError

logger = logging.getLogger(__name__)

JSON_SUFFIXES = frozenset({".json"})
YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _new_yaml() -> YAML:
    """Create a fresh safe YAML loader (ruamel's YAML object is stateful)."""
    return YAML(typ="safe", pure=True)


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a Pydantic error into ``loc: msg`` clauses."""
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def read_document(path: Path) -> Any:
    """Load a JSON or YAML document from *path*.

    Raises:
        DocumentError: The file is missing, unreadable or not UTF-8,
            has an unsupported suffix, or does not parse.
    """
    if not path.is_file():
        raise DocumentError("file not found", path=path)

    suffix = path.suffix.lower()
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(f"cannot read file: {exc}", path=path) from exc
    if suffix in JSON_SUFFIXES:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DocumentError(f"invalid JSON: {exc}", path=path) from exc
    elif suffix in YAML_SUFFIXES:
        try:
            data = _new_yaml().load(raw)
        except YAMLError as exc:
            raise DocumentError(f"invalid YAML: {exc}", path=path) from exc
    else:
        raise DocumentError(f"unsupported document type '{suffix or path.name}'", path=path)

    logger.debug("Loaded document %s", path)
    return data


def parse_layout(data: Any, *, path: Path | None = None) -> LayoutSpec:
    """Build a :class:`LayoutSpec` from a decoded layout document."""
    if not isinstance(data, Mapping):
        raise DocumentError("layout document must be a mapping", path=path)
    try:
        return LayoutSpec.model_validate(data)
    except ValidationError as exc:
        raise DocumentError(describe_validation_error(exc), path=path) from exc


def collection_items(
    data: Any,
    *,
    keys: tuple[str, ...] = ("cards", "items"),
    path: Path | None = None,
) -> list[Any]:
    """Return the list held by a collection document.

    A bare list is returned as-is; a mapping must hold the list under
    one of *keys* (first match wins).
    """
    if isinstance(data, list):
        return data
    if isinstance(data, Mapping):
        for key in keys:
            value = data.get(key)
            if isinstance(value, list):
                return value
        expected = ", ".join(f"'{k}'" for k in keys)
        raise DocumentError(f"expected a list under one of {expected}", path=path)
    raise DocumentError("document must be a list or a mapping", path=path)
