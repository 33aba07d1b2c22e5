"""SQLAlchemy implementations of the AutoUntaintable capability."""

from autountaint.storage.mixin import AutoUntaintMixin, compile_column_type
from autountaint.storage.reflection import ReflectedTable

__all__ = ["AutoUntaintMixin", "ReflectedTable", "compile_column_type"]
