"""Untaint category resolution.

Assigns every column of an entity an untaint category: the name of the
validator that later coerces raw user input (form submissions) bound to
that column. Categories are resolved per column, first match wins:

    1. explicit column override
    2. explicit SQL type override
    3. default type table (standard defaults plus extensions)
    4. regex rules on the SQL type, in declared order
    5. regex rules on the column name, in declared order

Usage:
    from autountaint.untaint import auto_untaint

    groups = auto_untaint(Film, skip_columns=["secret_notes"])
    # {"printable": ["title"], "integer": ["year"]}
"""

from __future__ import annotations

from typing import Any

from autountaint.core.logging import get_logger
from autountaint.untaint.errors import (
    MissingTypeError,
    UnresolvedCategoryError,
    entity_name,
)
from autountaint.untaint.models import UntaintConfig
from autountaint.untaint.protocols import AutoUntaintable

logger = get_logger(__name__)

# Longest SQL type shown in per-column diagnostics
TYPE_DISPLAY_LENGTH = 25


def _display_type(sql_type: str) -> str:
    shown = sql_type[:TYPE_DISPLAY_LENGTH]
    if shown != sql_type:
        shown += "..."
    return shown


def _build_config(config: UntaintConfig | None, options: dict[str, Any]) -> UntaintConfig:
    if config is None:
        return UntaintConfig.model_validate(options)
    if options:
        return config.merged(**options)
    return config


def resolve_category(config: UntaintConfig, column: str, sql_type: str) -> str | None:
    """Resolve the untaint category for one column.

    Args:
        config: Resolution configuration
        column: Column name (case preserved)
        sql_type: SQL type string reported for the column

    Returns:
        Category of the first matching rule, or None
    """
    category = (
        config.column_override(column)
        or config.untaint_types.get(sql_type)
        or config.type_map.lookup(sql_type)
    )
    if category:
        return category

    for rule in config.match_types:
        if rule.matches(sql_type):
            return rule.category

    for rule in config.match_columns:
        if rule.matches(column):
            return rule.category

    return None


def resolve_untaint_groups(
    entity: AutoUntaintable,
    config: UntaintConfig | None = None,
    **options: Any,
) -> dict[str, list[str]]:
    """Group an entity's columns by untaint category.

    Does not register anything; see auto_untaint().

    Args:
        entity: Entity implementing the AutoUntaintable capability
        config: Resolution configuration (defaults when omitted)
        **options: UntaintConfig fields, applied over config

    Returns:
        Category -> column names, columns in introspection order

    Raises:
        MissingTypeError: A column has no SQL type
        UnresolvedCategoryError: No category resolved and strict is set
    """
    cfg = _build_config(config, options)
    name = entity_name(entity)

    if cfg.verbosity == 1:
        logger.info("untainting_entity", entity=name)

    groups: dict[str, list[str]] = {}

    for column in entity.list_columns():
        if column in cfg.skip_columns:
            continue

        sql_type = entity.column_type(column)
        if not sql_type:
            raise MissingTypeError(entity, column)

        category = resolve_category(cfg, column, sql_type)

        if not category:
            if cfg.strict:
                raise UnresolvedCategoryError(entity, column, sql_type)
            logger.warning(
                "untaint_type_unresolved",
                entity=name,
                column=column,
                sql_type=sql_type,
            )
            continue

        if cfg.verbosity >= 2:
            logger.info(
                "untaint_type_resolved",
                entity=name,
                column=column,
                sql_type=_display_type(sql_type),
                category=category,
            )

        groups.setdefault(category, []).append(column)

    return groups


def auto_untaint(
    entity: AutoUntaintable,
    config: UntaintConfig | None = None,
    **options: Any,
) -> dict[str, list[str]]:
    """Resolve untaint categories for an entity and register them.

    Registration happens only after every column resolved without a fatal
    error, so a failed call registers nothing.

    Args:
        entity: Entity implementing the AutoUntaintable capability
        config: Resolution configuration (defaults when omitted)
        **options: UntaintConfig fields, applied over config

    Returns:
        The registered category -> column names mapping
    """
    groups = resolve_untaint_groups(entity, config, **options)
    entity.register_untaint_groups(groups)
    return groups
