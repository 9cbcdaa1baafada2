#!/usr/bin/env python3
"""
Command-line front end for the deterministic primitives.

Examples:
    python3 tools/primitives_cli.py exp2 10.5
    python3 tools/primitives_cli.py round -- -2.5
    python3 tools/primitives_cli.py base32z 0123abcd --strict
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.core.errors import Base32zCapacityError, ConfigError, HexLengthError, InvalidHexError
from src.core.exp2 import Exp2Scaling, exp2
from src.core.rounding import round_half_away
from src.encoding.base32z import hex_to_base32z
from src.integration.config import PrimitivesConfig, load_config

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def _err(msg: str) -> None:
    print(f"[primitives] {msg}", file=sys.stderr)


def _parse_float(raw: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Deterministic exp2/round and base32z key encoding.")
    ap.add_argument("--config", default=None, help="YAML config file (environment still overrides)")
    ap.add_argument("--verbose", action="store_true", help="enable debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_round = sub.add_parser("round", help="round half away from zero")
    p_round.add_argument("x", type=_parse_float)

    p_exp2 = sub.add_parser("exp2", help="2**x")
    p_exp2.add_argument("x", type=_parse_float)
    p_exp2.add_argument(
        "--legacy-scaling",
        action="store_true",
        help="repeat-doubling scaling (ignores negative integer parts)",
    )

    p_b32 = sub.add_parser("base32z", help="encode a hex key as z-base-32")
    p_b32.add_argument("hex")
    p_b32.add_argument("--strict", action="store_true", help="reject non-hex characters")
    return ap


def run(args: argparse.Namespace, cfg: PrimitivesConfig) -> int:
    if args.cmd == "round":
        print(repr(round_half_away(args.x)))
        return EXIT_OK

    if args.cmd == "exp2":
        scaling = Exp2Scaling.LEGACY_DOUBLING if args.legacy_scaling else cfg.exp2_scaling
        print(repr(exp2(args.x, scaling=scaling)))
        return EXIT_OK

    if args.cmd == "base32z":
        strict = bool(args.strict or cfg.strict_hex)
        try:
            out = hex_to_base32z(args.hex, strict=strict, capacity=cfg.base32z_capacity)
        except HexLengthError as exc:
            _err(f"FAIL: {exc}")
            return EXIT_USAGE
        except (Base32zCapacityError, InvalidHexError) as exc:
            _err(f"FAIL: {exc}")
            return EXIT_FAILED
        print(out)
        return EXIT_OK

    raise AssertionError(f"unhandled command: {args.cmd}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        cfg = load_config(args.config)
    except ConfigError as exc:
        _err(f"bad config: {exc}")
        return EXIT_USAGE
    return run(args, cfg)


if __name__ == "__main__":
    raise SystemExit(main())
