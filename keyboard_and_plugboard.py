# keyboard_and_plugboard.py
from __future__ import annotations

from collections.abc import Iterable

from debug import Debug
from permutation import Mapping, ValidationLevel, identity, validate
from wirings import ALPHABET

debug = Debug()


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """Translate between letters and integer symbols (A = 0 … Z = 25)."""

    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            return self.alpha_to_index[letter.upper()]
        except KeyError:
            raise ValueError(
                f"Invalid character {letter!r} for current alphabet."
            ) from None

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise ValueError(f"Signal {signal} out of range 0–{hi}")
        return self.alphabet[signal]

    def to_symbols(self, text: str) -> list[int]:
        """Strip whitespace, upper-case and convert every character.

        Anything outside the alphabet raises ``ValueError`` before a single
        symbol is returned.
        """
        cleaned = "".join(text.split()).upper()
        symbols = [self.forward(ch) for ch in cleaned]
        debug.log("keyboard", "%r -> %s", text, symbols)
        return symbols

    def to_text(self, symbols: Iterable[int]) -> str:
        return "".join(self.backward(s) for s in symbols)


KEYBOARD = Keyboard()


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    """Symmetric letter swaps configured from a string such as ``"DF AC"``."""

    def __init__(self, config: str = "") -> None:
        mapping = identity()

        for pair in config.upper().split():
            if len(pair) != 2:
                raise ValueError(f"Pair {pair!r} must be exactly 2 symbols")
            x, y = (KEYBOARD.forward(ch) for ch in pair)
            # a reused letter leaves a dangling half-swap for validate to catch
            mapping[x] = y
            mapping[y] = x

        validate(mapping, ValidationLevel.SYMMETRIC)

        self.mapping: Mapping = tuple(mapping)

    def encode(self, signal: int, direction: object = None) -> int:
        mapped = self.mapping[signal]
        debug.log("plugboard", "%s->%s", signal, mapped)
        return mapped

    def pairs(self) -> list[str]:
        return [
            KEYBOARD.backward(a) + KEYBOARD.backward(b)
            for a, b in enumerate(self.mapping)
            if a < b
        ]

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs())}>"
