"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/record_service.py
Reading and writing JSON / JSON Lines records for the CLI.
"""
import json
import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from sortrules.core.models import RecordFormat
from sortrules.exceptions import RecordFormatError

logger = logging.getLogger(__name__)

STDIO_PATH = "-"


class RecordService:
    @staticmethod
    def load(path: str, record_format: RecordFormat = RecordFormat.JSON) -> List[Dict[str, Any]]:
        """
        Load records from a file, or from stdin when path is '-'.
        Raises RecordFormatError if the content is not a list of JSON objects.
        """
        logger.debug(f"Loading {record_format.display_name} records from {path}")
        try:
            if path == STDIO_PATH:
                return RecordService.parse(sys.stdin.read(), record_format)
            with open(path, "r", encoding="utf-8") as f:
                return RecordService.parse(f.read(), record_format)
        except UnicodeDecodeError as e:
            raise RecordFormatError(f"{path} is not valid UTF-8 text: {e.reason} at byte {e.start}") from e

    @staticmethod
    def parse(text: str, record_format: RecordFormat = RecordFormat.JSON) -> List[Dict[str, Any]]:
        if record_format == RecordFormat.JSON_LINES:
            records = []
            for line_no, line in enumerate(text.splitlines(), 1):
                if not line.strip():
                    continue
                try:
                    records.append(json.loads(line))
                except json.JSONDecodeError as e:
                    raise RecordFormatError(f"Invalid JSON on line {line_no}: {e.msg}") from e
        else:
            if not text.strip():
                return []
            try:
                records = json.loads(text)
            except json.JSONDecodeError as e:
                raise RecordFormatError(f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e
            if not isinstance(records, list):
                raise RecordFormatError(f"Expected a JSON array of records, got {type(records).__name__}")

        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise RecordFormatError(f"Record #{index} is not an object: {record!r}")
        return records

    @staticmethod
    def dump(
            records: List[Dict[str, Any]],
            path: Optional[str] = None,
            record_format: RecordFormat = RecordFormat.JSON,
    ) -> None:
        """Write records to a file, or to stdout when path is None or '-'."""
        if path is None or path == STDIO_PATH:
            RecordService.write(records, sys.stdout, record_format)
            return

        logger.debug(f"Writing {len(records)} records to {path}")
        with open(path, "w", encoding="utf-8") as f:
            RecordService.write(records, f, record_format)

    @staticmethod
    def write(records: List[Dict[str, Any]], stream: TextIO, record_format: RecordFormat) -> None:
        if record_format == RecordFormat.JSON_LINES:
            for record in records:
                stream.write(json.dumps(record, ensure_ascii=False))
                stream.write("\n")
        else:
            json.dump(records, stream, ensure_ascii=False, indent=2)
            stream.write("\n")
