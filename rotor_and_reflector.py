# rotor_and_reflector.py
from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Protocol, runtime_checkable

from debug import Debug
from errors import ConfigurationLengthError, UnknownNameError
from keyboard_and_plugboard import KEYBOARD
from permutation import Mapping, ValidationLevel, invert, mod26, validate
from wirings import REFLECTORS, ROTORS

debug = Debug()


class Direction(Enum):
    FORWARD = "forward"     # towards the reflector
    REVERSE = "reverse"     # back out to the plugboard


@runtime_checkable
class Encode(Protocol):
    def encode(self, signal: int, direction: Direction) -> int: ...


# ── Rotor (static wiring) ─────────────────────────────────────────
class Rotor:
    """Fixed internal wiring plus notch positions; holds no rotation state."""

    def __init__(self, wiring: str, notches: str = "") -> None:
        forward = KEYBOARD.to_symbols(wiring)
        validate(forward, ValidationLevel.BASIC)

        reverse = invert(forward)
        validate(reverse, ValidationLevel.BASIC)

        self.forward: Mapping = tuple(forward)
        self.reverse: Mapping = tuple(reverse)
        self.notches: frozenset[int] = frozenset(KEYBOARD.to_symbols(notches))

    @classmethod
    def create(cls, name: str) -> "Rotor":
        try:
            wiring, notches = ROTORS[name.strip().upper()]
        except KeyError:
            raise UnknownNameError("rotor", name) from None
        return cls(wiring, notches)

    def encode(self, signal: int, direction: Direction) -> int:
        if direction is Direction.REVERSE:
            return self.reverse[signal]
        return self.forward[signal]

    def __repr__(self) -> str:
        wiring = KEYBOARD.to_text(self.forward)
        notches = KEYBOARD.to_text(sorted(self.notches))
        return f"<Rotor {wiring} notches={notches!r}>"


# ── RotorState (a rotor mounted in the machine) ───────────────────
class RotorState:
    def __init__(self, rotor: Rotor, ring_setting: int = 0, position: int = 0) -> None:
        self.rotor = rotor
        self.ring_setting = mod26(ring_setting)
        self.position = mod26(position)

    def encode(self, signal: int, direction: Direction) -> int:
        shift = mod26(signal - self.ring_setting + self.position)
        mapped = self.rotor.encode(shift, direction)
        out = mod26(mapped + self.ring_setting - self.position)
        debug.log("rotor", "%s %s->%s", direction.value, signal, out)
        return out

    def advance(self) -> None:
        self.position = (self.position + 1) % 26

    def at_notch(self) -> bool:
        return self.position in self.rotor.notches

    @property
    def window(self) -> str:
        """Letter currently visible through the rotor window."""
        return KEYBOARD.backward(self.position)

    def __repr__(self) -> str:
        return f"<RotorState pos={self.position} ring={self.ring_setting}>"


# ── RotorGroup (stepping + chained signal path) ───────────────────
class RotorGroup:
    """Rotor states ordered left to right; the last one is the fast rotor."""

    def __init__(self, rotor_states: Sequence[RotorState]) -> None:
        self.rotor_states: list[RotorState] = list(rotor_states)

    def advance(self) -> None:
        """Advance one key-press, including the middle-rotor double step.

        All decisions are taken against the positions before any rotor moves;
        only then are the chosen rotors advanced.
        """
        states = self.rotor_states
        last = len(states) - 1

        should_advance = [
            index == last
            or states[index + 1].at_notch()
            or (0 < index and states[index].at_notch())
            for index in range(len(states))
        ]

        for state, step in zip(states, should_advance):
            if step:
                state.advance()

        debug.log("stepping", "positions %s", self.positions)

    def encode(self, signal: int, direction: Direction) -> int:
        if direction is Direction.REVERSE:
            order = self.rotor_states
        else:
            order = reversed(self.rotor_states)

        for state in order:
            signal = state.encode(signal, direction)
        return signal

    # ── key helpers ──────────────────────────────────────────────
    @property
    def positions(self) -> list[int]:
        return [state.position for state in self.rotor_states]

    def set_positions(self, positions: Sequence[int]) -> None:
        """Rotate each rotor to the given position (a new message key)."""
        if len(positions) != len(self.rotor_states):
            raise ConfigurationLengthError(
                f"Expected {len(self.rotor_states)} positions, got {len(positions)}"
            )
        for state, position in zip(self.rotor_states, positions):
            state.position = mod26(position)

    def __len__(self) -> int:
        return len(self.rotor_states)

    def __repr__(self) -> str:
        return f"<RotorGroup {self.rotor_states!r}>"


# ── Reflector ─────────────────────────────────────────────────────
class Reflector:
    def __init__(self, wiring: str) -> None:
        mapping = KEYBOARD.to_symbols(wiring)
        validate(mapping, ValidationLevel.REFLECTIVE)

        self.mapping: Mapping = tuple(mapping)

    @classmethod
    def create(cls, name: str) -> "Reflector":
        try:
            wiring = REFLECTORS[name.strip().upper()]
        except KeyError:
            raise UnknownNameError("reflector", name) from None
        return cls(wiring)

    # symmetric table, so the direction never matters
    def encode(self, signal: int, direction: object = None) -> int:
        mapped = self.mapping[signal]
        debug.log("reflector", "%s->%s", signal, mapped)
        return mapped

    def __repr__(self) -> str:
        return f"<Reflector {KEYBOARD.to_text(self.mapping)}>"
