# enigma.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug
from errors import ConfigurationLengthError
from keyboard_and_plugboard import KEYBOARD, Plugboard
from rotor_and_reflector import Direction, Encode, Reflector, Rotor, RotorGroup, RotorState

debug = Debug()


class Enigma:
    def __init__(
        self,
        plugboard: Encode,
        rotor_group: RotorGroup,
        reflector: Encode,
    ) -> None:
        self.plugboard = plugboard
        self.rotor_group = rotor_group
        self.reflector = reflector

    @classmethod
    def create(
        cls,
        rotor_names: Sequence[str],
        reflector_name: str,
        plugboard_config: str = "",
        ring_settings: str | None = None,
        positions: str | None = None,
    ) -> "Enigma":
        """Assemble a machine from a key sheet.

        *ring_settings* and *positions* hold one letter per rotor slot in the
        same order as *rotor_names* ('A' = 0); ``None`` means all 'A'.
        """
        count = len(rotor_names)
        rings = KEYBOARD.to_symbols(ring_settings) if ring_settings is not None else [0] * count
        starts = KEYBOARD.to_symbols(positions) if positions is not None else [0] * count

        if not (count == len(rings) == len(starts)):
            raise ConfigurationLengthError(
                f"lengths must match: {count} rotors, {len(rings)} ring "
                f"settings, {len(starts)} positions"
            )

        rotor_group = RotorGroup(
            [
                RotorState(Rotor.create(name), ring, start)
                for name, ring, start in zip(rotor_names, rings, starts)
            ]
        )
        return cls(Plugboard(plugboard_config), rotor_group, Reflector.create(reflector_name))

    # ── encipher one symbol  ────────────────────────────────────

    def encode(self, signal: int) -> int:
        if not (0 <= signal < 26):
            raise ValueError(f"Signal {signal} out of range 0–25")

        # rotors move before the contact closes
        self.rotor_group.advance()

        n1 = self.plugboard.encode(signal, Direction.FORWARD)
        n2 = self.rotor_group.encode(n1, Direction.FORWARD)
        n3 = self.reflector.encode(n2, Direction.FORWARD)
        n4 = self.rotor_group.encode(n3, Direction.REVERSE)
        n5 = self.plugboard.encode(n4, Direction.REVERSE)

        debug.log("encipher", "%s -> %s -> %s -> %s -> %s -> %s", signal, n1, n2, n3, n4, n5)
        return n5

    def encode_string(self, text: str) -> str:
        """Encipher *text*; decipher by running the ciphertext through an
        identically keyed machine."""
        symbols = KEYBOARD.to_symbols(text)
        return KEYBOARD.to_text(self.encode(s) for s in symbols)

    # ── key helpers ─────────────────────────────────────────────

    def window(self) -> str:
        """Letters currently showing in the rotor windows."""
        return "".join(state.window for state in self.rotor_group.rotor_states)

    def set_key(self, positions: str) -> None:
        """Rotate each rotor to its visible window letter."""
        self.rotor_group.set_positions(KEYBOARD.to_symbols(positions))

    def __repr__(self) -> str:
        return (
            f"<Enigma window={self.window()} {self.plugboard!r} "
            f"{self.reflector!r}>"
        )
