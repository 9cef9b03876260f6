from sortrules.core.models import RecordFormat

FORMAT_ALIASES = {name: RecordFormat.from_name(name) for name in ("json", "jsonl", "ndjson")}

FORMAT_CHOICES = list(FORMAT_ALIASES.keys())

FORMAT_HELP_TEXT = (
    "Record format:\n"
    "  json   : a single JSON array of objects (default)\n"
    "  jsonl  : one JSON object per line (alias: ndjson)\n"
)

KEY_HELP_TEXT = (
    "Sort key as FIELD[:DIRECTION], repeat for tie-breakers.\n"
    "  DIRECTION : asc | desc | ascending | descending | + | -  (default: asc)\n"
    "Records without the field sort last (asc) or first (desc).\n"
    "Example    : %(prog)s -i people.json -k last_name -k age:desc"
)

EPILOG_TEXT = """
Examples:
  Sort people by last name, then first name
  %(prog)s -i people.json -k last_name -k first_name

  Oldest first, ties broken by name, write to a file
  %(prog)s -i people.json -k age:desc -k last_name -o sorted.json

  Sort a JSON Lines stream from stdin
  cat events.jsonl | %(prog)s -i - --format jsonl -k timestamp
"""
