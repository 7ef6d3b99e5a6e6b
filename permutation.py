# permutation.py
"""Validation and small algebra helpers for 26-entry substitution tables."""
from __future__ import annotations

import math
from collections.abc import Sequence
from enum import IntEnum
from typing import Tuple

from errors import (
    FixedPointError,
    MappingValueError,
    ShapeError,
    SymmetryError,
    UniquenessError,
)

SIZE = 26

Mapping = Tuple[int, ...]


class ValidationLevel(IntEnum):
    BASIC = 0        # length, value range, uniqueness
    SYMMETRIC = 1    # + involution
    REFLECTIVE = 2   # + no fixed points


def mod26(n: int) -> int:
    return ((n % SIZE) + SIZE) % SIZE


def identity() -> list[int]:
    return list(range(SIZE))


def invert(mapping: Sequence[int]) -> list[int]:
    """Return the table ``rev`` with ``rev[mapping[p]] == p``."""
    reverse = [0] * SIZE
    for index, value in enumerate(mapping):
        reverse[value] = index
    return reverse


# ── validation ────────────────────────────────────────────────────
def validate(mapping: Sequence[int], level: ValidationLevel) -> None:
    """Raise a :class:`errors.MappingError` subclass on the first broken rule.

    Rules are checked in order of increasing strictness. At SYMMETRIC and
    above the involution check runs before the uniqueness check: an
    involution over 0‥25 is always a permutation, and a plugboard letter that
    was reused in two pairs should be reported as the broken pairing it is.
    """
    _assert_length(mapping)
    _assert_values(mapping)

    if level >= ValidationLevel.SYMMETRIC:
        _assert_symmetric(mapping)

    _assert_unique(mapping)

    if level >= ValidationLevel.REFLECTIVE:
        _assert_no_fixed_points(mapping)


def _assert_length(m: Sequence[int]) -> None:
    if len(m) != SIZE:
        raise ShapeError(f"Mapping length {len(m)} - must be {SIZE}")


def _assert_values(m: Sequence[int]) -> None:
    for index, value in enumerate(m):
        if isinstance(value, bool) or not isinstance(value, int):
            if isinstance(value, float) and not math.isfinite(value):
                reason = "is not finite"
            else:
                reason = "is not an integer"
            raise MappingValueError(
                f"Mapping value {value!r} at index {index} {reason}",
                index=index,
                value=value,
            )
        if not 0 <= value < SIZE:
            raise MappingValueError(
                f"Mapping value {value} at index {index} out of range 0–{SIZE - 1}",
                index=index,
                value=value,
            )


def _assert_unique(m: Sequence[int]) -> None:
    seen: dict[int, int] = {}
    for index, value in enumerate(m):
        if value in seen:
            raise UniquenessError(
                f"Mapping must have unique values: {value} appears at "
                f"index {seen[value]} and {index}",
                index=index,
                value=value,
            )
        seen[value] = index


def _assert_symmetric(m: Sequence[int]) -> None:
    for index, value in enumerate(m):
        if m[value] != index:
            raise SymmetryError(
                f"Mapping must be symmetric, failed at pair {index}:{value} "
                f"({value} maps to {m[value]})",
                index=index,
                value=value,
            )


def _assert_no_fixed_points(m: Sequence[int]) -> None:
    for index, value in enumerate(m):
        if value == index:
            raise FixedPointError(
                f"Reflective mapping has a fixed point at index {index}",
                index=index,
                value=value,
            )
