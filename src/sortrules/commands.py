"""
Unified command orchestrator for record sorting.
Used by the CLI and by library callers that work with SortParams.
"""
import logging
from typing import Any, Dict, List, Tuple

from sortrules.core.builder import SortRules
from sortrules.core.models import SortParams, SortStats
from sortrules.services.record_service import RecordService

logger = logging.getLogger(__name__)


class SortCommand:
    """
    Orchestrates the record sorting workflow:
    1. Load records from params.input_path
    2. Build one PropertySortRule per key spec
    3. Sort in place and optionally write the result

    Usage:
        params = SortParams.from_human_readable("people.json", ["last_name", "age:desc"])
        records, stats = SortCommand().execute(params)
    """

    @staticmethod
    def build_rules(params: SortParams) -> SortRules:
        rules = SortRules()
        for spec in params.keys:
            rules.then_with(spec.field, spec.ascending)
        return rules

    def execute(self, params: SortParams) -> Tuple[List[Dict[str, Any]], SortStats]:
        """
        Load and sort records.

        Returns:
            Tuple of (sorted_records, statistics)

        Raises:
            RecordFormatError: If the input cannot be parsed
            IncomparableKeysError: If a key holds values of mixed, unorderable types
            OSError: If the input file cannot be read
        """
        records = RecordService.load(params.input_path, params.input_format)
        rules = self.build_rules(params)
        stats = SortStats()

        logger.debug(f"Sorting {len(records)} records by {', '.join(str(k) for k in params.keys)}")
        rules.sort(records, stats)
        return records, stats

    def execute_and_write(self, params: SortParams) -> SortStats:
        """Execute and write the sorted records to params.output_path (stdout if unset)."""
        records, stats = self.execute(params)
        RecordService.dump(records, params.output_path, params.output_format)
        return stats
