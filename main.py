# main.py
from __future__ import annotations

import argparse, json, sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

import enigma
import keyboard_and_plugboard
import rotor_and_reflector
from debug import COMPONENTS, Debug
from enigma import Enigma
from errors import EnigmaError

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class Config:
    """Runtime switches for the command line front end."""

    block: int = 5                  # display block size, 0 = no grouping
    debug: List[str] = field(default_factory=list)   # components to trace
    log_to: str | None = None       # extra log file


@dataclass(slots=True)
class MachineSettings:
    """One key sheet: everything needed to rebuild an identical machine."""

    rotors: List[str] = field(default_factory=lambda: ["VIII", "II", "III"])
    reflector: str = "B"
    plugboard: str = "CT BX ZW PI VM NO"
    ring_settings: str = "AAA"
    positions: str = "CUX"

    @classmethod
    def from_dict(cls, data: dict) -> "MachineSettings":
        if not isinstance(data, dict):
            raise ValueError(f"Key sheet must be a JSON object, got {type(data).__name__}")

        required = {"rotors", "reflector", "ring_settings", "positions"}
        missing = required - data.keys()
        if missing:
            raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")

        for key in ("reflector", "ring_settings", "positions"):
            _require_str(data, key)

        rotors = _str_or_list(data, "rotors")
        plugs = " ".join(_str_or_list(data, "plugboard"))   # e.g. ["AM", "FI"]

        return cls(
            rotors=rotors,
            reflector=data["reflector"],
            plugboard=plugs,
            ring_settings=data["ring_settings"],
            positions=data["positions"],
        )

    def to_dict(self) -> dict:
        return {
            "rotors": list(self.rotors),
            "reflector": self.reflector,
            "plugboard": self.plugboard,
            "ring_settings": self.ring_settings,
            "positions": self.positions,
        }

    def build(self) -> Enigma:
        return Enigma.create(
            self.rotors,
            self.reflector,
            self.plugboard,
            self.ring_settings,
            self.positions,
        )


def _require_str(data: dict, key: str) -> None:
    if not isinstance(data[key], str):
        raise ValueError(f"Config key {key!r} must be a string of letters, got {data[key]!r}")


def _str_or_list(data: dict, key: str) -> List[str]:
    """Accept "I II III" or ["I", "II", "III"]; missing means empty."""
    value = data.get(key, "")
    if isinstance(value, str):
        return value.split()
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ValueError(f"Config key {key!r} must be a string or a list of strings, got {value!r}")


def load_config(path: str | Path) -> MachineSettings:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return MachineSettings.from_dict(data)


# ────────────────────────────────────────────────────────────────────────
#  1. Logging helpers
# ────────────────────────────────────────────────────────────────────────


def enable_debug(components: Sequence[str], log_to: str | None = None) -> None:
    """Switch on tracing for *components* in every machine module."""
    if not components:
        return
    Debug.configure(log_to=log_to)
    for module in (keyboard_and_plugboard, rotor_and_reflector, enigma):
        module.debug.enable(*components)


# ────────────────────────────────────────────────────────────────────────
#  2. Output helpers
# ────────────────────────────────────────────────────────────────────────


def group(text: str, block: int) -> str:
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


# ────────────────────────────────────────────────────────────────────────
#  3. CLI
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    defaults = MachineSettings()
    p = argparse.ArgumentParser(description="Encipher or decipher with an Enigma machine")
    p.add_argument("message", nargs="*", help="Text to encipher. If omitted, an interactive loop starts.")
    p.add_argument("--rotors", default=" ".join(defaults.rotors), help="Rotor names left to right, e.g. 'I II III'")
    p.add_argument("--reflector", default=defaults.reflector, help="Reflector name: A, B or C")
    p.add_argument("--plugboard", default=defaults.plugboard, help="Plug pairs, e.g. 'AM FI NV'")
    p.add_argument("--rings", default=defaults.ring_settings, help="Ring settings, one letter per rotor")
    p.add_argument("--positions", default=defaults.positions, help="Start positions, one letter per rotor")
    p.add_argument("--config", metavar="FILE", help="Load the key sheet from JSON instead of the flags above.")
    p.add_argument("--block", type=int, default=5, help="Group output in blocks of N letters (0 disables). Default: 5")
    p.add_argument("--debug", nargs="+", choices=COMPONENTS, default=[], metavar="COMPONENT", help=f"Trace components: {', '.join(COMPONENTS)}")
    p.add_argument("--log-file", dest="log_file", metavar="PATH", help="Also write trace output to PATH")
    return p.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> MachineSettings:
    if args.config:
        return load_config(args.config)
    return MachineSettings(
        rotors=args.rotors.split(),
        reflector=args.reflector,
        plugboard=args.plugboard,
        ring_settings=args.rings,
        positions=args.positions,
    )


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    cfg = Config(block=args.block, debug=list(args.debug), log_to=args.log_file)

    try:
        settings = settings_from_args(args)
        machine = settings.build()
        enable_debug(cfg.debug, cfg.log_to)

        # one-shot mode --------------------------------------------------
        if args.message:
            print(group(machine.encode_string("".join(args.message)), cfg.block))
            return

        # interactive loop -----------------------------------------------
        start = machine.window()
        print("Press Enter on an empty line to quit.")
        while True:
            try:
                txt = input("Message > ")
            except EOFError:
                break
            if not txt.strip():
                break
            machine.set_key(start)
            print(group(machine.encode_string(txt), cfg.block))
    except (EnigmaError, ValueError, OSError) as e:
        sys.exit(f"enigma: {e}")


if __name__ == "__main__":
    main()
