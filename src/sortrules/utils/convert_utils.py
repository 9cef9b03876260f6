"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
from typing import Tuple

# Direction suffixes accepted after the last ':' of a key spec
DIRECTION_ALIASES = {
    "asc": True,
    "ascending": True,
    "+": True,
    "desc": False,
    "descending": False,
    "-": False,
}


class ConvertUtils:
    @staticmethod
    def split_key_spec(spec: str) -> Tuple[str, bool]:
        """
        Split a human-readable key spec into (field, ascending).
        Supports formats: 'age', 'age:desc', 'name:ascending', 'score:-'.
        A field name may itself contain ':' as long as a direction suffix follows.
        Raises ValueError for blank specs or unknown directions.
        """
        spec = spec.strip()
        if not spec:
            raise ValueError("Empty sort key")

        if ":" not in spec:
            return spec, True

        name, _, direction = spec.rpartition(":")
        name = name.strip()
        direction = direction.strip().lower()

        if not name:
            raise ValueError(f"Missing field name in sort key: '{spec}'")

        if direction not in DIRECTION_ALIASES:
            valid = ", ".join(DIRECTION_ALIASES)
            raise ValueError(f"Invalid direction '{direction}' in sort key '{spec}'. Valid options: {valid}")

        return name, DIRECTION_ALIASES[direction]

    @staticmethod
    def direction_label(ascending: bool) -> str:
        """Short label used when echoing key specs (e.g. 'asc', 'desc')."""
        return "asc" if ascending else "desc"
