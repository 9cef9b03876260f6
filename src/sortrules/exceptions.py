"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

exceptions.py
Exception hierarchy for sortrules.
"""


class SortError(Exception):
    """Base exception for all sortrules errors."""


class InvalidSortArgumentError(SortError, ValueError):
    """Raised when a sort entry point gets no collection, no rules or a read-only target."""


class KeyExtractionError(SortError):
    """Raised by a rule that cannot produce a key for an element."""


class AccessorResolutionError(KeyExtractionError):
    """Raised when a named property has no matching accessor on the element."""

    def __init__(self, accessor_name: str, element: object):
        self.accessor_name = accessor_name
        self.element_type = type(element).__name__
        super().__init__(f"No accessor '{accessor_name}' on {self.element_type}")


class IncomparableKeysError(SortError, TypeError):
    """Raised when two present keys of the same rule cannot be ordered against each other."""

    def __init__(self, rule_index: int, key_a: object, key_b: object):
        self.rule_index = rule_index
        self.key_a = key_a
        self.key_b = key_b
        super().__init__(
            f"Incomparable keys for rule #{rule_index}: "
            f"{type(key_a).__name__} {key_a!r} vs {type(key_b).__name__} {key_b!r}"
        )


class RecordFormatError(SortError, ValueError):
    """Raised when input records cannot be read in the requested format."""
