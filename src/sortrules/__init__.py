"""
sortrules: stable multi-key sorting with per-key direction.

Core features:
- Chain any number of sort rules; later rules only break ties of earlier ones
- Rules from plain functions or from named properties (attributes, getters, mapping keys)
- Absent keys sort last when ascending and first when descending
- In-place sort or a new sorted list, always stable
- CLI for sorting JSON / JSON Lines records by field
"""

# Get version
try:
    from importlib.metadata import PackageNotFoundError, version as _version
    __version__ = _version("sortrules")
except PackageNotFoundError:
    import tomllib
    from pathlib import Path

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API: only what users should import directly
from sortrules.core import (
    Sorter, SortRules, SortRule, SimpleSortRule, PropertySortRule,
    SortDirection, SortStats, KeySpec, SortParams, RecordFormat)
from sortrules.commands import SortCommand
from sortrules.exceptions import (
    SortError, InvalidSortArgumentError, KeyExtractionError, AccessorResolutionError,
    IncomparableKeysError, RecordFormatError)

__all__ = [
    "Sorter",
    "SortRules",
    "SortRule",
    "SimpleSortRule",
    "PropertySortRule",
    "SortDirection",
    "SortStats",
    "KeySpec",
    "SortParams",
    "RecordFormat",
    "SortCommand",
    "SortError",
    "InvalidSortArgumentError",
    "KeyExtractionError",
    "AccessorResolutionError",
    "IncomparableKeysError",
    "RecordFormatError",
    "__version__",
]
