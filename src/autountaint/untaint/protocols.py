"""Capability an entity opts into to be auto-untainted."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class AutoUntaintable(Protocol):
    """Introspection and registration contract consumed by the resolver.

    Implemented by storage.AutoUntaintMixin for declarative models and by
    storage.ReflectedTable for existing tables.
    """

    def list_columns(self) -> Sequence[str]:
        """Persisted column names, case preserved, in table order."""
        ...

    def column_type(self, column: str) -> str | None:
        """SQL type string of a column, or None if it cannot be determined."""
        ...

    def register_untaint_groups(self, groups: Mapping[str, list[str]]) -> None:
        """Record which columns each untaint category applies to."""
        ...
