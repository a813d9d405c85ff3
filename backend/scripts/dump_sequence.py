#!/usr/bin/env python3
"""
Dump a java.util.Random compatible sequence for a seed.

Prints the values a JVM would produce for the same seed, plus a short
digest so runs on different machines can be compared at a glance.

Usage:
    python -m scripts.dump_sequence --seed 123 --kind int --count 10
    python -m scripts.dump_sequence --seed 42 --kind bounded --bound 6 --format json --out ../out/dice.json
"""
import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from javarand.config import settings
from javarand.digest import sequence_digest
from javarand.errors import RandomError
from javarand.logic.rng import JavaRandom, resolve_default_seed


logger = logging.getLogger("scripts.dump_sequence")

KINDS = ("int", "bounded", "long", "boolean", "float", "double", "bytes")


def get_timestamp_iso() -> str:
    """Get ISO 8601 UTC timestamp."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def draw_values(
    rng: JavaRandom,
    kind: str,
    count: int,
    bound: int | None = None,
) -> list[Any]:
    """
    Draw ``count`` values of one kind from ``rng``.

    For ``bytes`` the count is the buffer length and the result is the
    list of unsigned byte values.
    """
    if kind == "int":
        return [rng.next_int() for _ in range(count)]
    if kind == "bounded":
        if bound is None:
            raise ValueError("kind 'bounded' requires a bound")
        return [rng.next_int(bound) for _ in range(count)]
    if kind == "long":
        return [rng.next_long() for _ in range(count)]
    if kind == "boolean":
        return [rng.next_boolean() for _ in range(count)]
    if kind == "float":
        return [rng.next_float() for _ in range(count)]
    if kind == "double":
        return [rng.next_double() for _ in range(count)]
    if kind == "bytes":
        buffer = bytearray(count)
        rng.next_bytes(buffer)
        return list(buffer)
    raise ValueError(f"Unknown kind: {kind}")


def build_report(
    seed: int,
    kind: str,
    count: int,
    bound: int | None = None,
) -> dict[str, Any]:
    """
    Draw a sequence and describe it.

    Returns dict with:
      - seed: raw seed passed to the constructor
      - internal_seed: scrambled seed before the first draw
      - kind, bound, count
      - values: drawn values
      - digest: sequence_digest() of the values
      - generated_at: ISO 8601 UTC timestamp
    """
    rng = JavaRandom(seed)
    internal_seed = rng.seed
    values = draw_values(rng, kind, count, bound)

    return {
        "seed": seed,
        "internal_seed": internal_seed,
        "kind": kind,
        "bound": bound,
        "count": count,
        "values": values,
        "digest": sequence_digest(kind, seed, values),
        "generated_at": get_timestamp_iso(),
    }


def format_text(report: dict[str, Any]) -> str:
    """Render a report as `i: value` lines followed by the digest."""
    lines = [f"{i}: {value}" for i, value in enumerate(report["values"])]
    lines.append(f"digest: {report['digest']}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print a java.util.Random compatible sequence"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Raw seed (default: JAVARAND_DEFAULT_SEED, else wall clock)",
    )
    parser.add_argument(
        "--kind",
        choices=KINDS,
        default="int",
        help="Kind of value to draw (default: int)",
    )
    parser.add_argument(
        "--bound",
        type=int,
        default=None,
        help="Exclusive upper bound, required for --kind bounded",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=settings.dump_count,
        help=f"Number of values, or buffer length for bytes (default: {settings.dump_count})",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--out",
        type=str,
        default=None,
        help="Write output to this path instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())

    if args.kind == "bounded" and args.bound is None:
        parser.error("--bound is required with --kind bounded")
    if args.count < 0:
        parser.error("--count must be non-negative")

    seed = args.seed if args.seed is not None else resolve_default_seed()
    logger.info("Drawing %d %s value(s) for seed %d", args.count, args.kind, seed)

    try:
        report = build_report(seed, args.kind, args.count, args.bound)
    except RandomError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 2

    if args.format == "json":
        output = json.dumps(report, indent=2)
    else:
        output = format_text(report)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(output + "\n")
        print(f"Wrote {len(report['values'])} value(s) to {out_path}")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
