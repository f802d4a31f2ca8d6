"""Configuration loader for FauxSON parser options."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Tuple

import yaml

from fauxson.schemas import (
    FauxsonError,
    FauxsonErrorCode,
    FauxsonErrorSource,
    ParserConfig,
    Severity,
)
from fauxson.validation import validate

logger = logging.getLogger(__name__)


def load_parser_config(path: Path) -> Tuple[Optional[ParserConfig], Optional[FauxsonError]]:
    """Load parser options from a YAML or JSON file.

    An empty file yields the default configuration.

    Returns (config, None) on success, (None, FauxsonError) on failure.
    """
    payload, err = _load_file(Path(path))
    if err:
        logger.warning("Could not load parser config %s: %s", path, err.message)
        return None, err

    config, validation_err = validate("parser_config", payload or {})
    if validation_err:
        err = _from_validation_error(validation_err)
        logger.warning("Invalid parser config %s: %s", path, err.message)
        return None, err
    return config, None


def _load_file(path: Path):
    if not path.exists():
        return None, _error(f"Config file not found: {path}")

    text = path.read_text()
    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            payload = yaml.safe_load(text)
        else:
            payload = json.loads(text) if text.strip() else None
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        return None, _error(f"Failed to parse config {path.name}", {"error": str(exc)})

    if payload is not None and not isinstance(payload, dict):
        return None, _error(f"Config {path.name} must be a mapping")
    return payload, None


def _error(message: str, details=None) -> FauxsonError:
    return FauxsonError(
        error_id="config_error",
        code=FauxsonErrorCode.CONFIG,
        message=message,
        source=FauxsonErrorSource.CONFIG_LOADER,
        severity=Severity.ERROR,
        details=details,
    )


def _from_validation_error(validation_error: FauxsonError) -> FauxsonError:
    return _error(validation_error.message, validation_error.details)


__all__ = ["load_parser_config"]
