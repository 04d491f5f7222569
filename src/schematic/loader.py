"""Loading hyper-schema descriptions into :class:`Document` objects.

JSON is a subset of YAML, so both formats go through ``yaml.safe_load``.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from src.schematic.document import Document
from src.shared.config import GeneratorConfig
from src.shared.errors import DocumentLoadError
from src.shared.models.schema import Schema

logger = logging.getLogger(__name__)


def document_from_dict(
    data: dict[str, Any], config: GeneratorConfig | None = None
) -> Document:
    """Build a :class:`Document` from an already deserialised mapping.

    Raises:
        DocumentLoadError: If *data* is not a mapping or does not fit the
            schema model.
    """
    if not isinstance(data, dict):
        raise DocumentLoadError(
            f"Expected a mapping at the root, got {type(data).__name__}."
        )
    try:
        root = Schema.model_validate(data)
    except ValidationError as exc:
        raise DocumentLoadError(f"Invalid schema document: {exc}") from exc
    return Document(root, config)


def parse_document(text: str, config: GeneratorConfig | None = None) -> Document:
    """Parse a JSON or YAML string into a :class:`Document`.

    Raises:
        DocumentLoadError: On malformed input.
    """
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"Malformed schema document: {exc}") from exc
    return document_from_dict(parsed, config)


def load_document(path: str | Path, config: GeneratorConfig | None = None) -> Document:
    """Read and parse the schema document stored at *path*.

    Raises:
        DocumentLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentLoadError(f"Cannot read schema document {path}: {exc}") from exc
    logger.debug("Loaded schema document from %s", path)
    return parse_document(text, config)
