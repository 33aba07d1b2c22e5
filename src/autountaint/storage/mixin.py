"""Auto-untaint capability for SQLAlchemy declarative models.

Usage:
    class Film(AutoUntaintMixin, Base):
        __tablename__ = "film"

        film_id: Mapped[int] = mapped_column(Integer, primary_key=True)
        title: Mapped[str] = mapped_column(String(255))
        year: Mapped[int] = mapped_column(Integer)

    Film.auto_untaint(skip_columns=["film_id"])
    Film.untaint_columns()  # {"printable": ["title"], "integer": ["year"]}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from sqlalchemy import Column, Table
from sqlalchemy.dialects import sqlite
from sqlalchemy.engine import Dialect
from sqlalchemy.exc import CompileError

from autountaint.untaint import resolver
from autountaint.untaint.models import UntaintConfig


def compile_column_type(column: Column[Any], dialect: Dialect) -> str | None:
    """Render a column's SQL type as the database would declare it.

    Returns:
        Lower-cased type string (e.g. "varchar(255)"), or None when the
        type cannot be rendered (untyped / NullType columns)
    """
    try:
        return column.type.compile(dialect=dialect).lower()
    except CompileError:
        return None


class AutoUntaintMixin:
    """Mixin giving a declarative model the AutoUntaintable capability.

    Column types are compiled against untaint_dialect (SQLite when unset).
    Registered groups are stored per class.
    """

    untaint_dialect: ClassVar[Dialect | None] = None
    _untaint_groups: ClassVar[dict[str, list[str]] | None] = None

    @classmethod
    def _untaint_table(cls) -> Table:
        return cls.__table__  # type: ignore[attr-defined, no-any-return]

    @classmethod
    def list_columns(cls) -> list[str]:
        """Column names of the mapped table, in table order."""
        return [column.name for column in cls._untaint_table().columns]

    @classmethod
    def column_type(cls, column: str) -> str | None:
        """SQL type of a mapped column, or None."""
        # Look up by database name; the collection is keyed by column key
        for table_column in cls._untaint_table().columns:
            if table_column.name == column:
                return compile_column_type(table_column, cls.untaint_dialect or sqlite.dialect())
        return None

    @classmethod
    def register_untaint_groups(cls, groups: Mapping[str, list[str]]) -> None:
        """Store category -> columns on this class."""
        cls._untaint_groups = {category: list(columns) for category, columns in groups.items()}

    @classmethod
    def untaint_columns(cls) -> dict[str, list[str]]:
        """Registered category -> columns (empty before auto_untaint)."""
        groups = cls.__dict__.get("_untaint_groups")
        if not groups:
            return {}
        return {category: list(columns) for category, columns in groups.items()}

    @classmethod
    def untaint_category(cls, column: str) -> str | None:
        """Registered category of a column, or None."""
        for category, columns in cls.untaint_columns().items():
            if column in columns:
                return category
        return None

    @classmethod
    def auto_untaint(
        cls, config: UntaintConfig | None = None, **options: Any
    ) -> dict[str, list[str]]:
        """Resolve and register untaint categories for this model.

        See autountaint.untaint.resolver.auto_untaint for options.
        """
        return resolver.auto_untaint(cls, config, **options)
