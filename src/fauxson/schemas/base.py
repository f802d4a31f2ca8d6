"""Common schema utilities and base classes."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SchemaBase(BaseModel):
    """Base model with common config for FauxSON schemas."""

    model_config = ConfigDict(populate_by_name=True)


class Severity(str, Enum):
    ERROR = "error"
