"""Command-line entry point: ``python -m sweepclock``."""
from __future__ import annotations

import argparse
import logging

from sweepclock.app import run
from sweepclock.config import BLEND_MODES, ClockConfig


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sweepclock", description="Animated sweeping clock face"
    )
    p.add_argument("--duration", type=int, default=6000,
                   help="Milliseconds per 720 degree sweep (default: 6000)")
    p.add_argument("--degree-limit", type=float, default=45.0,
                   help="Degrees over which a passed dot eases into place (default: 45)")
    p.add_argument("--manual", action="store_true",
                   help="Drive the sweep with a slider instead of a timer")
    p.add_argument("--blend-mode", choices=BLEND_MODES, default=None,
                   help="Composite a gradient overlay with this blend mode")
    p.add_argument("--round-caps", action="store_true", help="Round stroke ends")
    p.add_argument("--size", type=int, default=300, help="Window edge in pixels (default: 300)")
    p.add_argument("--tps", type=int, default=60, help="Ticks per second (default: 60)")
    p.add_argument("--fps", type=int, default=60, help="Frame rate cap (default: 60)")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    return p


def config_from_args(args: argparse.Namespace) -> ClockConfig:
    return ClockConfig(
        duration_ms=args.duration,
        degree_limit=args.degree_limit,
        control="manual" if args.manual else "auto",
        blend_mode=args.blend_mode,
        round_caps=args.round_caps,
        size=args.size,
        tps=args.tps,
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))
    if args.fps <= 0:
        parser.error("--fps must be positive")
    run(config, fps=args.fps)


if __name__ == "__main__":
    main()
