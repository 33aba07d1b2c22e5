"""autountaint - assign untaint categories to ORM entity columns."""

from autountaint.untaint import (
    DEFAULT_TYPE_MAP,
    AutoUntaintable,
    MissingTypeError,
    TypeMap,
    UnresolvedCategoryError,
    UntaintConfig,
    UntaintError,
    auto_untaint,
    resolve_untaint_groups,
)

__version__ = "0.3.0"

__all__ = [
    "DEFAULT_TYPE_MAP",
    "AutoUntaintable",
    "MissingTypeError",
    "TypeMap",
    "UnresolvedCategoryError",
    "UntaintConfig",
    "UntaintError",
    "auto_untaint",
    "resolve_untaint_groups",
]
