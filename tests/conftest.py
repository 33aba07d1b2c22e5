"""Shared pytest fixtures for all tests."""

from collections.abc import Callable, Mapping

import pytest

from autountaint.untaint.defaults import TypeMap


class FakeEntity:
    """In-memory AutoUntaintable entity.

    Columns map name -> SQL type (None for an undetectable type).
    Every registration call is recorded.
    """

    def __init__(self, name: str, columns: Mapping[str, str | None]):
        self.name = name
        self.columns = dict(columns)
        self.registrations: list[dict[str, list[str]]] = []
        self.type_lookups: list[str] = []

    def list_columns(self) -> list[str]:
        return list(self.columns)

    def column_type(self, column: str) -> str | None:
        self.type_lookups.append(column)
        return self.columns[column]

    def register_untaint_groups(self, groups: Mapping[str, list[str]]) -> None:
        self.registrations.append({k: list(v) for k, v in groups.items()})


@pytest.fixture
def make_entity() -> Callable[..., FakeEntity]:
    """Factory for in-memory entities."""

    def _make(columns: Mapping[str, str | None], name: str = "Film") -> FakeEntity:
        return FakeEntity(name, columns)

    return _make


@pytest.fixture
def film(make_entity) -> FakeEntity:
    """Entity with one character and one integer column."""
    return make_entity({"title": "varchar(255)", "year": "int(4)"})


@pytest.fixture
def type_map() -> TypeMap:
    """Fresh type table with the standard defaults, isolated per test."""
    return TypeMap()
