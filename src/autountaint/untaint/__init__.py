"""Automatic untaint category assignment for ORM entity columns."""

from autountaint.untaint.defaults import (
    DEFAULT_TYPE_MAP,
    STANDARD_TYPE_MAP,
    TypeMap,
    type_keyword,
)
from autountaint.untaint.errors import (
    MissingTypeError,
    UnresolvedCategoryError,
    UntaintConfigLoadError,
    UntaintError,
)
from autountaint.untaint.loader import load_default_untaint_config, load_untaint_config
from autountaint.untaint.models import PatternRule, UntaintConfig
from autountaint.untaint.protocols import AutoUntaintable
from autountaint.untaint.resolver import (
    auto_untaint,
    resolve_category,
    resolve_untaint_groups,
)

__all__ = [
    # Defaults
    "DEFAULT_TYPE_MAP",
    "STANDARD_TYPE_MAP",
    "TypeMap",
    "type_keyword",
    # Errors
    "UntaintError",
    "MissingTypeError",
    "UnresolvedCategoryError",
    "UntaintConfigLoadError",
    # Configuration
    "PatternRule",
    "UntaintConfig",
    "load_untaint_config",
    "load_default_untaint_config",
    # Resolution
    "AutoUntaintable",
    "auto_untaint",
    "resolve_category",
    "resolve_untaint_groups",
]
