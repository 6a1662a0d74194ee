"""Lay out a random tag cloud and save the preview PNG + JSON summary."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from circular_cloud import export_cloud, random_sizes


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=500, help="Number of rectangles to place")
    parser.add_argument("--seed", type=int, default=None, help="Seed for sizes and outline colors")
    parser.add_argument(
        "--center",
        type=int,
        nargs=2,
        default=(500, 500),
        metavar=("X", "Y"),
        help="Cloud center",
    )
    parser.add_argument("--prj-id", default="cloud", help="Name of the output sub-directory")
    parser.add_argument("--output-root", type=Path, default=Path("output"), help="Root output directory")
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=1_000_000,
        help="Candidate positions tried per rectangle before giving up",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every placement")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sizes = random_sizes(args.count, seed=args.seed)
    summary = export_cloud(
        args.prj_id,
        sizes,
        center=tuple(args.center),
        output_root=args.output_root,
        seed=args.seed,
        max_iterations=args.max_iterations,
    )
    print(json.dumps(summary["metrics"], indent=2))
    print(f"Saved cloud image to {summary['image_path']}")


if __name__ == "__main__":
    main()
