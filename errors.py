# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every configuration problem the machine detects."""


# ── wiring-table invariants ───────────────────────────────────────
class MappingError(EnigmaError):
    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        value: object = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.value = value


class ShapeError(MappingError):
    """Mapping does not hold exactly 26 entries."""


class MappingValueError(MappingError):
    """Entry is not an integer symbol in 0‥25."""


class UniquenessError(MappingError):
    """Mapping repeats a value, so it is not a permutation."""


class SymmetryError(MappingError):
    """``mapping[mapping[p]] != p`` for some position."""


class FixedPointError(MappingError):
    """A reflector position maps to itself."""


# ── machine assembly ──────────────────────────────────────────────
class ConfigurationLengthError(EnigmaError):
    """Rotor names, ring settings and positions disagree in length."""


class UnknownNameError(EnigmaError):
    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"Unknown {kind} {name!r}")
        self.kind = kind
        self.name = name
