#!/usr/bin/env python3
"""Canonicalize numerator/denominator pairs from the command line or a parfile."""

import argparse
import sys
import tomllib
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .rational import BigRational

Pair = Tuple[int, int]


def _parse_int(value, *, where: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{where}: expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(f"{where}: expected an integer, got {value!r}") from None
    raise ValueError(f"{where}: expected an integer, got {value!r}")


def pairs_from_arguments(values: Sequence[str]) -> List[Pair]:
    if len(values) % 2:
        raise ValueError("expected an even number of integers (numerator denominator ...)")
    numbers = [_parse_int(value, where=f"argument {index + 1}") for index, value in enumerate(values)]
    return list(zip(numbers[::2], numbers[1::2]))


def load_parfile(path: Path) -> List[Pair]:
    """Read ``pairs = [[n, d], ...]`` from a TOML parfile.

    Components may be TOML integers or decimal strings, the latter for values
    that do not fit in 64 bits.
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Parfile not found: {path}")
    with path.open("rb") as pf:
        params = tomllib.load(pf)

    raw_pairs = params.get("pairs")
    if not isinstance(raw_pairs, list):
        raise ValueError(f"{path}: missing 'pairs' array")

    pairs: List[Pair] = []
    for index, raw in enumerate(raw_pairs):
        where = f"{path}: pairs[{index}]"
        if not isinstance(raw, list) or len(raw) != 2:
            raise ValueError(f"{where}: expected [numerator, denominator]")
        pairs.append((_parse_int(raw[0], where=where), _parse_int(raw[1], where=where)))
    return pairs


def describe(value: BigRational) -> str:
    if value.is_nan():
        return "nan"
    if value.is_infinity():
        return "infinite"
    return "finite"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bigrational",
        description="Print the canonical form of numerator/denominator pairs.",
    )
    parser.add_argument(
        "integers",
        nargs="*",
        help="Alternating numerators and denominators, e.g. 4 8 -3 6",
    )
    parser.add_argument("--parfile", dest="parfile", help="TOML file with a 'pairs' array")
    parser.add_argument(
        "--repr",
        dest="use_repr",
        action="store_true",
        help="Print repr() of each value instead of its display form",
    )
    args = parser.parse_args(argv)

    pairs = pairs_from_arguments(args.integers)
    if args.parfile is not None:
        pairs.extend(load_parfile(Path(args.parfile)))
    if not pairs:
        parser.error("no pairs given")

    for numerator, denominator in pairs:
        value = BigRational(numerator, denominator)
        shown = repr(value) if args.use_repr else str(value)
        print(f"{numerator}/{denominator} -> {shown} ({describe(value)})")
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
