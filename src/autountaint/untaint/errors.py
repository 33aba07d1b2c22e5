"""Errors raised while assigning untaint categories."""

from __future__ import annotations

from pathlib import Path
from typing import Any


def entity_name(entity: Any) -> str:
    """Readable name for an entity class or instance."""
    if isinstance(entity, type):
        return entity.__name__
    name = getattr(entity, "name", None)
    if isinstance(name, str):
        return name
    return type(entity).__name__


class UntaintError(Exception):
    """Base class for auto-untaint failures."""


class MissingTypeError(UntaintError):
    """Introspection returned no SQL type for a column."""

    def __init__(self, entity: Any, column: str):
        self.entity = entity
        self.column = column
        super().__init__(f"No type detected for column {column} ({entity_name(entity)})")


class UnresolvedCategoryError(UntaintError):
    """No rule produced an untaint category for a column."""

    def __init__(self, entity: Any, column: str, sql_type: str):
        self.entity = entity
        self.column = column
        self.sql_type = sql_type
        super().__init__(
            f"No untaint type detected for column {column}, "
            f"type {sql_type} in {entity_name(entity)}"
        )


class UntaintConfigLoadError(UntaintError):
    """Error loading an untaint configuration file."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")
