"""Auto-untaint capability for existing database tables.

Column types come from the database's own schema description, read through
the SQLAlchemy inspector.

Usage:
    engine = create_engine("sqlite:///films.db")
    film = ReflectedTable(engine, "film")
    auto_untaint(film, strict=True)
    film.untaint_groups  # {"printable": ["title"], "integer": ["year"]}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import CompileError

from autountaint.core.logging import get_logger

logger = get_logger(__name__)


class ReflectedTable:
    """AutoUntaintable view of a table that already exists in a database.

    Columns are reflected once, on first use.
    """

    def __init__(self, engine: Engine, table_name: str, schema: str | None = None):
        self.engine = engine
        self.name = table_name
        self.schema = schema
        self.untaint_groups: dict[str, list[str]] = {}
        self._types: dict[str, str | None] | None = None

    def _reflect(self) -> dict[str, str | None]:
        if self._types is None:
            inspector = sa_inspect(self.engine)
            types: dict[str, str | None] = {}
            for column in inspector.get_columns(self.name, schema=self.schema):
                types[column["name"]] = self._render(column["type"])
            logger.info("table_reflected", table=self.name, columns=len(types))
            self._types = types
        return self._types

    def _render(self, sql_type: Any) -> str | None:
        try:
            return str(sql_type.compile(dialect=self.engine.dialect)).lower()
        except CompileError:
            return None

    def list_columns(self) -> list[str]:
        """Column names in table order."""
        return list(self._reflect())

    def column_type(self, column: str) -> str | None:
        """SQL type of a column, or None."""
        return self._reflect().get(column)

    def register_untaint_groups(self, groups: Mapping[str, list[str]]) -> None:
        """Store category -> columns on this table view."""
        self.untaint_groups = {category: list(columns) for category, columns in groups.items()}

    def __repr__(self) -> str:
        return f"ReflectedTable({self.name!r}, schema={self.schema!r})"
