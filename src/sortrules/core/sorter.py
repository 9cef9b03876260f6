"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
Pure multi-key sorting logic, zero dependencies outside core.
Chains sort rules into one ordering and applies it with Python's stable sort.
"""
import logging
import time
from collections.abc import Iterable, MutableSequence, Sequence
from functools import cmp_to_key
from typing import Any, List, Optional

from sortrules.core.interfaces import SortRule, T
from sortrules.core.models import SortStats
from sortrules.exceptions import IncomparableKeysError, InvalidSortArgumentError, KeyExtractionError

logger = logging.getLogger(__name__)


class Sorter:
    """
    Sorts elements by an ordered sequence of rules.
    Rules are applied lexicographically:
    1. The first rule decides the order
    2. On a tie the next rule is consulted, and so on
    3. Elements tied under every rule keep their input order (stable sort)

    Absent keys (None, or a key the rule failed to resolve) behave as the highest
    possible value of their rule:
       - ascending rule  -> absent keys go last
       - descending rule -> absent keys go first
    Two absent keys tie and fall through to the next rule.
    Absent keys therefore trail an ascending sort, which deliberately differs from
    nulls-first comparators that put them at the front.
    """

    @staticmethod
    def compare(a: T, b: T, rules: Sequence[SortRule], stats: Optional[SortStats] = None) -> int:
        """Return -1, 0 or 1 as a sorts before, together with or after b."""
        if stats is not None:
            stats.record_comparison()

        for index, rule in enumerate(rules):
            key_a = Sorter._extract(rule, a, stats)
            key_b = Sorter._extract(rule, b, stats)

            if key_a is None and key_b is None:
                continue
            if key_b is None:
                result = -1
            elif key_a is None:
                result = 1
            else:
                result = Sorter._compare_keys(index, key_a, key_b)

            if result != 0:
                return result if rule.ascending else -result

        return 0

    @staticmethod
    def sort(items: MutableSequence, rules: Sequence[SortRule], stats: Optional[SortStats] = None) -> None:
        """
        Sorts the caller's sequence in place.
        Lists are sorted directly; other mutable sequences are cleared and refilled.
        """
        Sorter._validate(items, rules)
        if not isinstance(items, MutableSequence):
            raise InvalidSortArgumentError(
                f"In-place sort needs a mutable sequence, got {type(items).__name__}; use sorted_list() instead")

        start = time.time()
        if not rules:
            logger.debug("No sort rules given, keeping input order")
        elif len(items) > 1:
            key_func = Sorter._key_func(rules, stats)
            if isinstance(items, list):
                items.sort(key=key_func)
            else:
                ordered = sorted(items, key=key_func)
                items.clear()
                items.extend(ordered)

        if stats is not None:
            stats.total_time += time.time() - start
        logger.debug(f"Sorted {len(items)} items by {len(rules)} rule(s)")

    @staticmethod
    def sorted_list(items: Iterable, rules: Sequence[SortRule], stats: Optional[SortStats] = None) -> List:
        """Returns a new sorted list; the given iterable is left untouched."""
        Sorter._validate(items, rules)
        result = list(items)
        Sorter.sort(result, rules, stats)
        return result

    # =============================
    # Internals
    # =============================

    @staticmethod
    def _validate(items: Any, rules: Any) -> None:
        if items is None:
            raise InvalidSortArgumentError("Items to sort cannot be None")
        if rules is None:
            raise InvalidSortArgumentError("Sort rules cannot be None")

    @staticmethod
    def _key_func(rules: Sequence[SortRule], stats: Optional[SortStats]):
        # Snapshot so appending to the caller's rule list mid-sort has no effect
        frozen = tuple(rules)
        return cmp_to_key(lambda a, b: Sorter.compare(a, b, frozen, stats))

    @staticmethod
    def _extract(rule: SortRule, element: Any, stats: Optional[SortStats]) -> Optional[Any]:
        try:
            return rule.extract(element)
        except KeyExtractionError as e:
            logger.debug(f"Key extraction failed, sorting as absent: {e}")
            if stats is not None:
                stats.record_extraction_failure()
            return None

    @staticmethod
    def _compare_keys(index: int, key_a: Any, key_b: Any) -> int:
        try:
            if key_a < key_b:
                return -1
            if key_b < key_a:
                return 1
        except TypeError as e:
            raise IncomparableKeysError(index, key_a, key_b) from e
        return 0
