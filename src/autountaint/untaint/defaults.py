"""Default SQL type to untaint category table.

STANDARD_TYPE_MAP holds the library-provided mappings for common SQL type
family keywords. A TypeMap merges caller entries over those standard
mappings; DEFAULT_TYPE_MAP is the process-wide instance used whenever a
configuration does not carry its own table.

Usage:
    from autountaint.untaint.defaults import DEFAULT_TYPE_MAP, TypeMap

    # Extend the shared table before resolving
    DEFAULT_TYPE_MAP.extend({"enum": "printable"})

    # Or build an isolated table
    type_map = TypeMap({"money": "printable"})
    type_map.lookup("VARCHAR(255)")  # "printable"
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from types import MappingProxyType

_PRINTABLE = "printable"
_INTEGER = "integer"
_DATE = "date"

STANDARD_TYPE_MAP: Mapping[str, str] = MappingProxyType(
    {
        # Character types
        "varchar": _PRINTABLE,
        "char": _PRINTABLE,
        "nvarchar": _PRINTABLE,
        "nchar": _PRINTABLE,
        "character": _PRINTABLE,
        "character varying": _PRINTABLE,
        # Text / BLOB types
        "text": _PRINTABLE,
        "tinytext": _PRINTABLE,
        "mediumtext": _PRINTABLE,
        "longtext": _PRINTABLE,
        "clob": _PRINTABLE,
        "blob": _PRINTABLE,
        "tinyblob": _PRINTABLE,
        "mediumblob": _PRINTABLE,
        "longblob": _PRINTABLE,
        # Integer types
        "int": _INTEGER,
        "integer": _INTEGER,
        "tinyint": _INTEGER,
        "smallint": _INTEGER,
        "mediumint": _INTEGER,
        "bigint": _INTEGER,
        # Date / time types
        "date": _DATE,
        "datetime": _DATE,
        "timestamp": _DATE,
        "time": _DATE,
    }
)

# "int(11) unsigned zerofill" -> "int", "character varying(40)" -> "character varying"
_ARGUMENTS = re.compile(r"\(.*?\)")
_MODIFIERS = re.compile(r"\s+(unsigned|signed|zerofill|binary|with(out)?\s+time\s+zone)\b.*$")
_WHITESPACE = re.compile(r"\s+")


def type_keyword(sql_type: str) -> str:
    """Reduce an SQL type string to its family keyword.

    Lower-cases the type, drops size/precision arguments and trailing
    modifiers such as ``unsigned``.

    Args:
        sql_type: Raw type descriptor, e.g. ``"INT(4) UNSIGNED"``

    Returns:
        Family keyword, e.g. ``"int"``
    """
    keyword = _ARGUMENTS.sub("", sql_type.lower())
    keyword = _MODIFIERS.sub("", keyword)
    return _WHITESPACE.sub(" ", keyword).strip()


class TypeMap(Mapping[str, str]):
    """SQL type keyword -> untaint category table.

    Keys are stored lower-cased. Entries passed at construction or through
    extend() take precedence over the standard defaults.
    """

    def __init__(
        self,
        extra: Mapping[str, str] | None = None,
        *,
        include_standard: bool = True,
    ):
        self._types: dict[str, str] = dict(STANDARD_TYPE_MAP) if include_standard else {}
        if extra:
            self.extend(extra)

    def extend(self, mapping: Mapping[str, str]) -> TypeMap:
        """Add or replace type mappings.

        Returns:
            self, to allow chaining
        """
        for sql_type, category in mapping.items():
            self._types[sql_type.lower()] = category
        return self

    def lookup(self, sql_type: str) -> str | None:
        """Find the category for an SQL type string.

        The exact (lower-cased) type string is tried first, then its family
        keyword.

        Returns:
            Category, or None if the table has no entry
        """
        exact = self._types.get(sql_type.lower())
        if exact:
            return exact
        return self._types.get(type_keyword(sql_type))

    def copy(self) -> TypeMap:
        """Return an independent copy of this table."""
        return TypeMap(self._types, include_standard=False)

    def __getitem__(self, sql_type: str) -> str:
        return self._types[sql_type.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"TypeMap({self._types!r})"


DEFAULT_TYPE_MAP = TypeMap()
