"""Command-line entry point with version and address utilities."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence

from .address import Address

VERSION = ""
COMMIT = ""
BUILT_AT = ""
BUILT_BY = ""


def _version(args: argparse.Namespace) -> int:
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "tronctl"
    print(
        f"TronCTL. {prog} version {VERSION}-{COMMIT} ({BUILT_BY} {BUILT_AT})",
        file=sys.stderr,
    )
    return 0


def _nothing(args: argparse.Namespace) -> int:
    return 0


def _base58_to_addr(args: argparse.Namespace) -> int:
    print(Address.from_base58(args.address).to_hex())
    return 0


def _addr_to_base58(args: argparse.Namespace) -> int:
    try:
        text = str(Address.from_hex(args.address))
    except ValueError:
        text = ""
    print(text)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tronctl", description="Tron command-line tools")
    parser.set_defaults(handler=None, help_parser=parser)
    commands = parser.add_subparsers(title="commands")

    version = commands.add_parser("version", help="Show version")
    version.set_defaults(handler=_version)

    utility = commands.add_parser("utility", help="common tron utilities")
    utility.set_defaults(handler=None, help_parser=utility)
    tools = utility.add_subparsers(title="commands")

    metadata = tools.add_parser("metadata", help="data includes network specific values")
    metadata.set_defaults(handler=_nothing)
    metrics = tools.add_parser("metrics", help="mostly in-memory fluctuating values")
    metrics.set_defaults(handler=_nothing)

    to_hex = tools.add_parser("base58-to-addr", help="0x Address of a base58 one-address")
    to_hex.add_argument("address")
    to_hex.set_defaults(handler=_base58_to_addr)

    to_b58 = tools.add_parser("addr-to-base58", help="base58 tron-address of an 0x address")
    to_b58.add_argument("address")
    to_b58.set_defaults(handler=_addr_to_base58)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1
    if args.handler is None:
        args.help_parser.print_help()
        return 0
    try:
        return args.handler(args)
    except (ValueError, LookupError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())