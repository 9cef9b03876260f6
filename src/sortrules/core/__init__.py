"""
Core sorting engine: rules, rule chaining and the stable multi-key sort.

This package contains the whole ordering logic of sortrules:
- SimpleSortRule / PropertySortRule: one key extractor plus one direction
- Sorter: chained, direction-aware, absent-aware comparison and stable sort
- SortRules: fluent builder collecting rules in priority order
- Models: SortDirection, SortStats and the SortParams configuration DTO

Pure Python with no I/O. The CLI and record services live outside core.
"""

from .interfaces import SortRule, KeyExtractor
from .rules import AbstractSortRule, SimpleSortRule, PropertySortRule
from .sorter import Sorter
from .builder import SortRules
from .models import SortDirection, SortStats, KeySpec, SortParams, RecordFormat

__all__ = [
    "SortRule",
    "KeyExtractor",
    "AbstractSortRule",
    "SimpleSortRule",
    "PropertySortRule",
    "Sorter",
    "SortRules",
    "SortDirection",
    "SortStats",
    "KeySpec",
    "SortParams",
    "RecordFormat",
]
