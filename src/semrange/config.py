"""Loader for constraints documents.

A constraints document maps package names to version range expressions and,
optionally, package names to the versions currently installed::

    constraints:
      libfoo: "^1.2.0"
      libbar: "[2.0.0,3.0.0)"
    installed:
      libfoo: "1.4.2"

JSON (``.json``) and YAML (``.yaml``/``.yml``) files are accepted. The
structure is checked against ``constraints.schema.json``; the expressions
themselves are only parsed when the document is checked, so that every bad
entry is reported rather than the first one.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .validators.constraints_document import validate_document

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "semrange.json"
CONFIG_PATH_ENV_VAR = "SEMRANGE_CONSTRAINTS"

_YAML_SUFFIXES = {".yaml", ".yml"}


class ConfigError(RuntimeError):
    """Raised when a constraints document cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class ConstraintsDocument:
    """Declared range expressions and installed versions, both keyed by name."""

    constraints: dict[str, str]
    installed: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConstraintsDocument:
        try:
            validate_document(data)
        except ValueError as exc:
            raise ConfigError(f"Constraints document failed validation:{exc}") from exc

        return cls(
            constraints=dict(data["constraints"]),
            installed=dict(data.get("installed") or {}),
        )


def _resolve_config_path(path: Path | str | None = None) -> Path:
    """Resolve the constraints file path.

    Priority:
    1. Explicit path argument
    2. SEMRANGE_CONSTRAINTS environment variable
    3. semrange.json in the current working directory
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return Path.cwd() / DEFAULT_CONFIG_NAME


def _decode(config_path: Path, content: str) -> Any:
    if config_path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in constraints file: {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in constraints file: {exc}") from exc


def load_constraints(path: Path | str | None = None) -> ConstraintsDocument:
    """Load and validate a constraints document.

    Args:
        path: Optional path to the document. If not provided, uses the
            SEMRANGE_CONSTRAINTS env var or falls back to ./semrange.json.

    Returns:
        The validated ConstraintsDocument.

    Raises:
        ConfigError: If the file cannot be read, decoded or validated.
    """
    config_path = _resolve_config_path(path)

    if not config_path.exists():
        raise ConfigError(f"Constraints file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read constraints file: {exc}") from exc

    data = _decode(config_path, content)
    if not isinstance(data, dict):
        raise ConfigError("Constraints document must be a mapping")

    document = ConstraintsDocument.from_dict(data)
    logger.debug(
        "Loaded %d constraint(s) and %d installed version(s) from %s",
        len(document.constraints),
        len(document.installed),
        config_path,
    )
    return document
