"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/rules.py
Sort rules: one key extractor paired with one direction.

- SimpleSortRule   : wraps any callable element -> key
- PropertySortRule : resolves the key from a named attribute, method or mapping entry
"""
import inspect
import logging
from collections.abc import Mapping
from typing import Any, Generic, Optional

from sortrules.core.interfaces import KeyExtractor, T
from sortrules.exceptions import AccessorResolutionError, KeyExtractionError

logger = logging.getLogger(__name__)


class AbstractSortRule(Generic[T]):
    """
    Base class holding the direction of a rule.
    Direction stays settable after construction; do not change it while a sort is running.
    """

    def __init__(self, ascending: bool = True):
        self._ascending = bool(ascending)

    @property
    def ascending(self) -> bool:
        return self._ascending

    @ascending.setter
    def ascending(self, ascending: bool) -> None:
        self._ascending = bool(ascending)

    def extract(self, element: T) -> Optional[Any]:
        raise NotImplementedError


class SimpleSortRule(AbstractSortRule[T]):
    """
    Rule backed by a plain function. Exceptions raised by the function are not caught;
    return None to mark an absent key.
    """

    def __init__(self, extractor: KeyExtractor, ascending: bool = True):
        if not callable(extractor):
            raise TypeError(f"Key extractor must be callable, got {type(extractor).__name__}")
        super().__init__(ascending)
        self._extractor = extractor

    @property
    def extractor(self) -> KeyExtractor:
        return self._extractor

    def extract(self, element: T) -> Optional[Any]:
        return self._extractor(element)

    def __repr__(self):
        name = getattr(self._extractor, "__name__", type(self._extractor).__name__)
        return f"<SimpleSortRule extractor={name}, ascending={self.ascending}>"


class PropertySortRule(AbstractSortRule[T]):
    """
    Rule reading a named property from each element.

    The accessor name is built from the getter prefix and the property name:
        prefix ""         -> first_name          (plain attribute or property)
        prefix "is"       -> is_adult            (boolean convention)
        prefix "describe" -> describe_home_address
    Mapping elements are indexed by the accessor name, other elements use attribute
    lookup. Callable attributes are invoked without arguments.
    An accessor that needs arguments, or that raises while being read or called,
    ends in KeyExtractionError so the sorter treats the key as absent.
    """

    DEFAULT_GETTER_PREFIX = ""
    BOOLEAN_GETTER_PREFIX = "is"

    def __init__(
            self,
            property_name: str,
            is_boolean_property: bool = False,
            ascending: bool = True,
            getter_prefix: Optional[str] = None,
    ):
        if not property_name or not property_name.strip():
            raise ValueError("Property name cannot be empty")
        super().__init__(ascending)
        self._property_name = property_name.strip()
        if getter_prefix is None:
            getter_prefix = self.BOOLEAN_GETTER_PREFIX if is_boolean_property else self.DEFAULT_GETTER_PREFIX
        self._getter_prefix = getter_prefix

    @property
    def property_name(self) -> str:
        return self._property_name

    @property
    def getter_prefix(self) -> Optional[str]:
        return self._getter_prefix

    @getter_prefix.setter
    def getter_prefix(self, prefix: Optional[str]) -> None:
        self._getter_prefix = prefix

    @property
    def accessor_name(self) -> str:
        prefix = (self._getter_prefix or "").strip()
        if not prefix:
            return self._property_name
        return f"{prefix}_{self._property_name}"

    def extract(self, element: T) -> Optional[Any]:
        name = self.accessor_name
        element_type = type(element).__name__

        if isinstance(element, Mapping):
            try:
                return element[name]
            except KeyError:
                # A missing entry is an absent value, not an error
                return None

        try:
            accessor = getattr(element, name)
        except AttributeError:
            logger.debug(f"Cannot resolve '{name}' on {element_type}")
            raise AccessorResolutionError(name, element) from None
        except Exception as e:
            logger.debug(f"Reading '{name}' on {element_type} failed: {e!r}")
            raise KeyExtractionError(f"Reading '{name}' on {element_type} failed: {e}") from e

        if not callable(accessor):
            return accessor

        if not self._takes_no_arguments(accessor):
            logger.debug(f"'{name}' on {element_type} needs arguments, cannot be used as a getter")
            raise AccessorResolutionError(name, element)

        try:
            return accessor()
        except Exception as e:
            logger.debug(f"Calling '{name}()' on {element_type} failed: {e!r}")
            raise KeyExtractionError(f"Calling '{name}()' on {element_type} failed: {e}") from e

    @staticmethod
    def _takes_no_arguments(func) -> bool:
        try:
            inspect.signature(func).bind()
        except TypeError:
            return False
        except ValueError:
            # No introspectable signature (some builtins), let the call decide
            return True
        return True

    def __repr__(self):
        return (f"<PropertySortRule property={self._property_name}, "
                f"accessor={self.accessor_name}, ascending={self.ascending}>")
