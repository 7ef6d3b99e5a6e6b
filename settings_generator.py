# settings_generator.py
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from random import Random, SystemRandom
from typing import List, Sequence

from main import MachineSettings
from wirings import ALPHABET, REFLECTORS, ROTORS

N_ROTORS = 3
MAX_PAIRS = 10

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = min(k, len(alpha) // 2)
    pool = list(alpha)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(
    rng: Random | SystemRandom,
    *,
    n_rotors: int = N_ROTORS,
    max_pairs: int = MAX_PAIRS,
) -> MachineSettings:
    rotors = rng.sample(list(ROTORS), n_rotors)
    return MachineSettings(
        rotors=rotors,
        reflector=rng.choice(sorted(REFLECTORS)),
        plugboard=" ".join(choose_pairs(ALPHABET, max_pairs, rng)),
        ring_settings="".join(rng.choices(ALPHABET, k=n_rotors)),
        positions="".join(rng.choices(ALPHABET, k=n_rotors)),
    )


def parse_cli(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate an Enigma key sheet")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--pairs", type=int, default=MAX_PAIRS, help=f"Plugboard pairs (default: {MAX_PAIRS})")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_config.json"),
        help="Destination JSON file (default: enigma_config.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_cli(argv)
    if args.pairs < 0:
        sys.exit("--pairs must not be negative")

    settings = generate_settings(build_rng(args.seed), max_pairs=args.pairs)
    # refuse to write a sheet that would not build
    settings.build()

    args.outfile.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {' '.join(settings.rotors)}\n"
        f"   reflector   : {settings.reflector}\n"
        f"   rings       : {settings.ring_settings}\n"
        f"   positions   : {settings.positions}\n"
        f"   plug pairs  : {settings.plugboard or '-'}")


if __name__ == "__main__":
    main()
