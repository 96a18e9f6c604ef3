#!/usr/bin/env python3
"""Generate a sample file of synthetic Brazilian addresses.

Writes ``addresses.json`` to the output directory with the stored fields
and display forms of each address. Defaults come from the environment
(see ``AddressesConfig.from_env``); command-line flags override them.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tsaas_addresses.config import AddressesConfig
from tsaas_addresses.generators.address import AddressFactory
from tsaas_addresses.logging import setup_logging
from tsaas_addresses.serialization import serialize_value

logger = logging.getLogger("tsaas_addresses.scripts.generate_sample_addresses")


def non_negative_int(value: str) -> int:
    """argparse type for counts."""
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Generate sample Brazilian addresses")
    parser.add_argument("--count", type=non_negative_int, default=100, help="Number of addresses")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--output-dir", type=Path, default=None, help="Output directory")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON")
    parser.add_argument("--log-level", default=None, help="Log level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Generate addresses and save them as JSON."""
    args = parse_args(argv)
    config = AddressesConfig.from_env()

    setup_logging(level=args.log_level or config.log_level, format_type=config.log_format)

    seed = args.seed if args.seed is not None else config.seed
    output_dir = args.output_dir or config.output.output_dir
    pretty = args.pretty or config.output.pretty_json

    factory = AddressFactory(config=config.factory, seed=seed)
    addresses = factory.generate_batch(args.count)

    output_dir.mkdir(parents=True, exist_ok=True)
    filepath = output_dir / "addresses.json"
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(
            serialize_value(addresses),
            f,
            indent=2 if pretty else None,
            ensure_ascii=False,
        )

    logger.info("Saved %d addresses to %s", len(addresses), filepath)
    return 0


if __name__ == "__main__":
    sys.exit(main())
