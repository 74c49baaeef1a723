#!/usr/bin/env python3
"""Mint, transfer and delete art records against a live entropy source.

Entropy sourcing:
- ARTMINT_ENTROPY_URL set: raw bytes fetched over HTTP
- otherwise: the operating system's random source

Default behavior:
1) mint --count records as --creator,
2) optionally transfer the first one to --transfer-to,
3) optionally delete the last one,
4) print every record and the store metadata as JSON.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyartmint import ArtMintConfig, ArtMintError, ArtRegistry  # noqa: E402


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Mint pyartmint records and print them")
    parser.add_argument("--creator", default="alice", help="Caller identity used for minting.")
    parser.add_argument("--count", type=int, default=2, help="Number of records to mint.")
    parser.add_argument(
        "--transfer-to",
        default=None,
        help="Transfer the first minted record to this identity.",
    )
    parser.add_argument(
        "--delete-last",
        action="store_true",
        help="Delete the last minted record after minting.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable DEBUG logging.")
    return parser.parse_args()


async def _run(args: argparse.Namespace) -> int:
    config = ArtMintConfig.from_env()
    async with ArtRegistry(config) as registry:
        try:
            ids = [await registry.create_record(args.creator) for _ in range(args.count)]
            if ids and args.transfer_to:
                registry.transfer_ownership(args.creator, ids[0], args.transfer_to)
            if ids and args.delete_last:
                owner = args.transfer_to if args.transfer_to and len(ids) == 1 else args.creator
                registry.delete_record(owner, ids[-1])
        except ArtMintError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

        output = {
            "records": [record.model_dump(mode="json") for record in registry.list_records()],
            "metadata": registry.get_metadata().model_dump(),
        }
    print(json.dumps(output, indent=2, sort_keys=True))
    return 0


def main() -> int:
    args = _parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
