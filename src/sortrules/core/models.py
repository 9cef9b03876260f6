"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Enums, statistics and configuration objects shared by the sorting engine and the CLI.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from sortrules.utils.convert_utils import ConvertUtils


# =============================
# Enums
# =============================

class SortDirection(Enum):
    """
    Direction of a single sort key.
    """
    ASCENDING = "asc"
    DESCENDING = "desc"

    @property
    def display_name(self) -> str:
        """Human-readable name for help text and summaries."""
        mapping = {
            SortDirection.ASCENDING: "Ascending",
            SortDirection.DESCENDING: "Descending",
        }
        return mapping.get(self, self.value)

    @property
    def is_ascending(self) -> bool:
        return self is SortDirection.ASCENDING

    @staticmethod
    def from_flag(ascending: bool) -> 'SortDirection':
        return SortDirection.ASCENDING if ascending else SortDirection.DESCENDING

    def __repr__(self) -> str:
        return self.value


class RecordFormat(Enum):
    """
    Serialization of the records read and written by the CLI.
    """
    JSON = "json"
    JSON_LINES = "jsonl"

    @property
    def display_name(self) -> str:
        mapping = {
            RecordFormat.JSON: "JSON array",
            RecordFormat.JSON_LINES: "JSON Lines",
        }
        return mapping.get(self, self.value)

    @staticmethod
    def from_name(name: str) -> 'RecordFormat':
        """Resolve a format name or its alias ('json', 'jsonl', 'ndjson')."""
        key = name.strip().lower()
        if key == "ndjson":
            return RecordFormat.JSON_LINES
        try:
            return RecordFormat(key)
        except ValueError:
            raise ValueError(f"Unknown record format '{name}'. Valid options: json, jsonl, ndjson") from None

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class KeySpec:
    """
    One requested sort key: the record field to read and its direction.
    """
    field: str
    direction: SortDirection = SortDirection.ASCENDING

    def __post_init__(self):
        if not self.field or not self.field.strip():
            raise ValueError("Sort key field cannot be empty")

    @property
    def ascending(self) -> bool:
        return self.direction.is_ascending

    @staticmethod
    def parse(spec: str) -> 'KeySpec':
        """Build a KeySpec from 'field', 'field:asc' or 'field:desc'."""
        name, ascending = ConvertUtils.split_key_spec(spec)
        return KeySpec(field=name, direction=SortDirection.from_flag(ascending))

    def __str__(self):
        return f"{self.field}:{ConvertUtils.direction_label(self.ascending)}"


@dataclass
class SortStats:
    """
    Counters collected during a single sort call.
    """
    comparisons: int = 0
    extraction_failures: int = 0
    total_time: float = 0.0

    def record_comparison(self) -> None:
        self.comparisons += 1

    def record_extraction_failure(self) -> None:
        self.extraction_failures += 1

    def print_summary(self) -> str:
        lines = [
            "📊 Sort Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Comparisons: {self.comparisons}",
        ]
        if self.extraction_failures:
            lines.append(f"Unresolved keys (sorted as absent): {self.extraction_failures}")
        return "\n".join(lines)


"""
DTO for record sorting parameters with built-in validation.
Interface-agnostic, used by the CLI and by library callers of SortCommand.
"""

@dataclass
class SortParams:
    """Parameters for a record sorting run with validation."""
    input_path: str
    keys: List[KeySpec] = field(default_factory=list)
    output_path: Optional[str] = None
    input_format: RecordFormat = RecordFormat.JSON
    output_format: Optional[RecordFormat] = None

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.input_path or not self.input_path.strip():
            raise ValueError("Input path cannot be empty")

        if not self.keys:
            raise ValueError("At least one sort key is required")

        if self.output_path is not None and not self.output_path.strip():
            raise ValueError("Output path cannot be blank")

        # Output mirrors input unless explicitly requested otherwise
        if self.output_format is None:
            self.output_format = self.input_format

    @staticmethod
    def from_human_readable(
            input_path: str,
            key_specs: List[str],
            output_path: Optional[str] = None,
            input_format: str = "json",
            output_format: Optional[str] = None,
    ) -> 'SortParams':
        """
        Factory method to create params from human-readable inputs.
        Key specs use the 'field[:asc|desc]' syntax, formats a name or alias such as 'ndjson'.
        """
        keys = [KeySpec.parse(spec) for spec in key_specs if spec.strip()]

        return SortParams(
            input_path=input_path,
            keys=keys,
            output_path=output_path,
            input_format=RecordFormat.from_name(input_format),
            output_format=RecordFormat.from_name(output_format) if output_format else None,
        )
