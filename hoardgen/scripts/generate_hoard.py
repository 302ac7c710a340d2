#!/usr/bin/env python3
"""CLI script for generating a treasure hoard."""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

from hoardgen.core.config import settings
from hoardgen.core.logging import configure_logging
from hoardgen.hoard.assembler import create_assembler
from hoardgen.hoard.models import HoardResult
from hoardgen.hoard.store import LoggingNotifier


def build_configuration(gems: Optional[str], jewellery: Optional[str]) -> dict[str, str]:
    """Turn CLI options into a hoard configuration, keeping option order."""
    configuration = {}
    if gems:
        configuration["gems"] = gems
    if jewellery:
        configuration["jewellery"] = jewellery
    return configuration


def print_hoard(hoard: HoardResult) -> None:
    print(f"\n=== {hoard.name} ({hoard.container_id}) ===")
    for item in hoard.items:
        print(f"  {item.name}: {item.cost}gp")
        print(f"      {item.description}")
    print(f"\nTotal: {len(hoard.items)} items, {hoard.total_value}gp")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Generate a random OSE treasure hoard from the roll table packs"
    )
    parser.add_argument("name", type=str, help="Name of the treasure hoard")
    parser.add_argument(
        "-g", "--gems",
        type=str,
        default=None,
        help='Roll formula for the number of gems (e.g. "3d6")',
    )
    parser.add_argument(
        "-j", "--jewellery",
        type=str,
        default=None,
        help='Roll formula for jewellery (validated; quantity is always 2d10)',
    )
    parser.add_argument(
        "--packs-dir",
        type=str,
        default=None,
        help=f"Directory of table pack files (default: {settings.packs_dir})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible hoard",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the hoard as JSON",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every table draw",
    )

    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    configuration = build_configuration(args.gems, args.jewellery)
    if not configuration:
        parser.error("at least one of --gems or --jewellery is required")

    packs_dir = Path(args.packs_dir) if args.packs_dir else None
    if packs_dir and not packs_dir.exists():
        print(f"Error: Path does not exist: {packs_dir}")
        return 1

    notifier = LoggingNotifier()
    assembler = create_assembler(packs_dir=packs_dir, seed=args.seed, notifier=notifier)
    hoard = asyncio.run(assembler.generate_hoard(args.name, configuration))
    if hoard is None:
        _, message = notifier.last
        print(f"Error: {message}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(hoard.model_dump(mode="json"), indent=2))
    else:
        print_hoard(hoard)
    return 0


if __name__ == "__main__":
    sys.exit(main())
