"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the sorting system.
These protocols rely on structural typing via `typing.Protocol`, so any object
with the right shape can take part in a sort without inheriting from our classes.

Key Components:
---------------
- KeyExtractor: Any callable turning an element into a comparable key (or None).
- SortRule: One level of a multi-key sort (key extraction + direction).
"""

from typing import Any, Callable, Optional, Protocol, TypeVar

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

# element -> comparable key, None when the element has no value for the key
KeyExtractor = Callable[[T], Optional[Any]]


# ===== Interfaces =====

class SortRule(Protocol[T_contra]):
    """
    Interface for a single sort level.

    Attributes:
        ascending: True for ascending order, False for descending.
    """
    ascending: bool

    def extract(self, element: T_contra) -> Optional[Any]:
        """
        Produce the comparable key for the element.

        Returns:
            The key, or None when the element has no value for it.

        Raises:
            KeyExtractionError: If the key cannot be resolved at all. The engine
                sorts such elements as if the key were absent.
        """
        ...
