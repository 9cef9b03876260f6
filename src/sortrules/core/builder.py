"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/builder.py
Fluent accumulation of sort rules.

    SortRules.start_with(AdultChecker()) \\
        .then_with("gender", ascending=False) \\
        .then_with("first_name") \\
        .sorted_list(people)

Every step accepts one of three forms:
    - a rule object (anything with `extract()` and `ascending`)
    - a callable extractor, ascending by default
    - a property name, resolved through PropertySortRule
"""
from collections.abc import Iterable, MutableSequence
from typing import Any, Generic, List, Optional, Union

from sortrules.core.interfaces import KeyExtractor, SortRule, T
from sortrules.core.models import SortStats
from sortrules.core.rules import PropertySortRule, SimpleSortRule
from sortrules.core.sorter import Sorter

RuleSource = Union[SortRule, KeyExtractor, str]


class SortRules(Generic[T]):
    """Ordered, append-only collection of sort rules with sort entry points."""

    def __init__(self):
        self._rules: List[SortRule] = []

    @classmethod
    def start_with(
            cls,
            key: RuleSource,
            ascending: Optional[bool] = None,
            *,
            is_boolean_property: bool = False,
            getter_prefix: Optional[str] = None,
    ) -> 'SortRules':
        return cls().then_with(
            key,
            ascending,
            is_boolean_property=is_boolean_property,
            getter_prefix=getter_prefix,
        )

    def then_with(
            self,
            key: RuleSource,
            ascending: Optional[bool] = None,
            *,
            is_boolean_property: bool = False,
            getter_prefix: Optional[str] = None,
    ) -> 'SortRules':
        """
        Appends one rule and returns self for chaining.

        Args:
            key: Rule object, callable extractor or property name.
            ascending: Direction for extractors and property names (default True).
                Rule objects carry their own direction, passing one here is an error.
            is_boolean_property: Use the "is" getter prefix (property names only).
            getter_prefix: Custom getter prefix (property names only), wins over
                is_boolean_property.

        Raises:
            TypeError: If key is none of the accepted forms, or options do not apply to it.
        """
        property_options = is_boolean_property or getter_prefix is not None

        if isinstance(key, str):
            rule = PropertySortRule(
                key,
                is_boolean_property=is_boolean_property,
                ascending=True if ascending is None else ascending,
                getter_prefix=getter_prefix,
            )
        elif self._is_rule(key):
            if ascending is not None or property_options:
                raise TypeError("A rule object keeps its own direction and accessor settings")
            rule = key
        elif callable(key):
            if property_options:
                raise TypeError("Getter options only apply to property names")
            rule = SimpleSortRule(key, ascending=True if ascending is None else ascending)
        else:
            raise TypeError(f"Cannot build a sort rule from {type(key).__name__}")

        self._rules.append(rule)
        return self

    @property
    def rules(self) -> List[SortRule]:
        """Copy of the rules in priority order."""
        return list(self._rules)

    def compare(self, a: T, b: T) -> int:
        return Sorter.compare(a, b, self._rules)

    def sort(self, items: MutableSequence, stats: Optional[SortStats] = None) -> None:
        Sorter.sort(items, self._rules, stats)

    def sorted_list(self, items: Iterable, stats: Optional[SortStats] = None) -> List:
        return Sorter.sorted_list(items, self._rules, stats)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self):
        return f"<SortRules count={len(self._rules)}>"

    @staticmethod
    def _is_rule(candidate: Any) -> bool:
        return callable(getattr(candidate, "extract", None)) and hasattr(candidate, "ascending")
