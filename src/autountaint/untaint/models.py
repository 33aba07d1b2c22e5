"""Pydantic models for untaint configuration.

This module defines the per-call configuration consumed by the category
resolver. Configurations are transient: built from caller arguments (or a
YAML file, see loader.py) for a single resolution and then discarded.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainValidator,
    field_validator,
    model_validator,
)

from autountaint.untaint.defaults import DEFAULT_TYPE_MAP, TypeMap


class PatternRule(BaseModel):
    """A single (pattern, category) rule.

    The pattern is a regular expression searched (not anchored) in the
    subject: a column name or an SQL type string.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    pattern: re.Pattern[str] = Field(..., description="Regular expression to search for")
    category: str = Field(..., min_length=1, description="Untaint category on match")

    @field_validator("pattern", mode="before")
    @classmethod
    def _compile_pattern(cls, value: Any) -> re.Pattern[str]:
        if isinstance(value, re.Pattern):
            return value
        if not isinstance(value, str):
            raise ValueError(
                f"pattern must be a string or compiled regex, got {type(value).__name__}"
            )
        try:
            return re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regular expression {value!r}: {e}") from e

    def matches(self, subject: str) -> bool:
        """Check if the pattern occurs anywhere in subject."""
        return self.pattern.search(subject) is not None


def _coerce_rules(value: Any) -> Any:
    """Accept rules as PatternRule, (pattern, category) pairs or dicts."""
    if value is None:
        return []
    if isinstance(value, Mapping):
        # Insertion order of a mapping is the rule order
        return [{"pattern": k, "category": v} for k, v in value.items()]
    rules = []
    for item in value:
        if isinstance(item, (tuple, list)) and len(item) == 2:
            rules.append({"pattern": item[0], "category": item[1]})
        else:
            rules.append(item)
    return rules


def _as_type_map(value: Any) -> TypeMap:
    """Accept a TypeMap, a plain mapping of extensions, or None."""
    if value is None:
        return DEFAULT_TYPE_MAP
    if isinstance(value, TypeMap):
        return value
    if isinstance(value, Mapping):
        return TypeMap(value)
    raise ValueError(f"type_map must be a mapping, got {type(value).__name__}")


class UntaintConfig(BaseModel):
    """Layered configuration for one auto-untaint resolution.

    Resolution priority per column (first match wins):
        1. column_overrides / untaint_columns
        2. untaint_types (exact SQL type)
        3. type_map (standard defaults plus extensions)
        4. match_types (ordered regex rules on the SQL type)
        5. match_columns (ordered regex rules on the column name)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    column_overrides: dict[str, str] = Field(
        default_factory=dict, description="Column name -> category"
    )
    untaint_columns: dict[str, list[str]] = Field(
        default_factory=dict, description="Category -> column names"
    )
    skip_columns: frozenset[str] = Field(
        default_factory=frozenset, description="Columns never untainted"
    )
    match_columns: list[PatternRule] = Field(
        default_factory=list, description="Ordered regex rules on column names"
    )
    untaint_types: dict[str, str] = Field(
        default_factory=dict, description="Exact SQL type -> category"
    )
    match_types: list[PatternRule] = Field(
        default_factory=list, description="Ordered regex rules on SQL types"
    )
    type_map: Annotated[TypeMap, PlainValidator(_as_type_map)] = Field(
        default_factory=lambda: DEFAULT_TYPE_MAP,
        description="Default SQL type table",
    )
    strict: bool = Field(default=False, description="Raise when no category resolves")
    verbosity: int = Field(default=0, description="Diagnostic detail level (<= 0 silent)")

    @field_validator("match_columns", "match_types", mode="before")
    @classmethod
    def _rules(cls, value: Any) -> Any:
        return _coerce_rules(value)

    @field_validator("skip_columns", mode="before")
    @classmethod
    def _skip(cls, value: Any) -> Any:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            return frozenset([value])
        return frozenset(value)

    @model_validator(mode="after")
    def _check_untaint_columns(self) -> UntaintConfig:
        seen: dict[str, str] = {}
        for category, columns in self.untaint_columns.items():
            for column in columns:
                if column in seen and seen[column] != category:
                    raise ValueError(
                        f"column '{column}' listed under both "
                        f"'{seen[column]}' and '{category}' in untaint_columns"
                    )
                seen[column] = category
        return self

    def column_override(self, column: str) -> str | None:
        """Get the explicit category for a column, if any.

        column_overrides wins over the grouped untaint_columns form.
        """
        if column in self.column_overrides:
            return self.column_overrides[column]
        for category, columns in self.untaint_columns.items():
            if column in columns:
                return category
        return None

    def merged(self, **options: Any) -> UntaintConfig:
        """Return a new config with options applied over this one."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(options)
        return UntaintConfig.model_validate(data)
