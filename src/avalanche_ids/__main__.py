"""
Identifier command line tools.

Usage::

    python -m avalanche_ids node-id staker1.crt
    python -m avalanche_ids encode 3d0ad12b8ee8928edf248ca91ca55600fb383f07 --kind node-id
    python -m avalanche_ids decode NodeID-6ZmBHXTqjknJoZtXbnJ6x7af863rXDTwx --kind node-id
    python -m avalanche_ids prefix TtF4d2QWbk5vzQGTEPrN48x6vwgAoAmKQ9cbp79inpQmcRKES 0 1

Commands:
    node-id   Print the node id of a PEM-encoded staking certificate
    encode    Print the canonical text form of hex-encoded raw bytes
    decode    Print the raw bytes (hex) of a canonical text form
    prefix    Print the id derived from an id and u64 tags
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from avalanche_ids import config
from avalanche_ids.ids import BaseId, Id, NodeId, ShortId
from avalanche_ids.types import IdsError

logger = logging.getLogger(__name__)

ID_KINDS: dict[str, type[BaseId]] = {
    "id": Id,
    "short-id": ShortId,
    "node-id": NodeId,
}
"""Identifier types selectable with `--kind`."""


def setup_logging(verbose: bool = False) -> None:
    """Configure the root logger for command line use."""
    level = logging.DEBUG if verbose else config.LOG_LEVEL

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)


def cmd_node_id(args: argparse.Namespace) -> str:
    """Derive the node id of a certificate file."""
    return str(NodeId.from_cert_file(args.cert))


def cmd_encode(args: argparse.Namespace) -> str:
    """Encode hex bytes as the canonical text form of `--kind`."""
    id_type = ID_KINDS[args.kind]
    try:
        raw = bytes.fromhex(args.hex.removeprefix("0x"))
    except ValueError as e:
        raise IdsError(f"invalid hex input: {e}") from e
    return str(id_type.from_bytes(raw))


def cmd_decode(args: argparse.Namespace) -> str:
    """Decode a canonical text form of `--kind` to hex bytes."""
    return ID_KINDS[args.kind].from_string(args.text).hex()


def cmd_prefix(args: argparse.Namespace) -> str:
    """Derive a child id from an id and its tags."""
    try:
        return str(Id.from_string(args.id).prefix(*args.tags))
    except OverflowError as e:
        raise IdsError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog="avalanche_ids",
        description="Avalanche identifier tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    node_id = commands.add_parser("node-id", help="Node id of a PEM staking certificate")
    node_id.add_argument("cert", type=Path, help="Path to the PEM certificate")
    node_id.set_defaults(handler=cmd_node_id)

    encode = commands.add_parser("encode", help="Canonical text form of raw bytes")
    encode.add_argument("hex", help="Raw bytes as hex (optionally 0x-prefixed)")
    encode.add_argument("--kind", choices=sorted(ID_KINDS), default="id")
    encode.set_defaults(handler=cmd_encode)

    decode = commands.add_parser("decode", help="Raw bytes of a canonical text form")
    decode.add_argument("text", help="Canonical text form")
    decode.add_argument("--kind", choices=sorted(ID_KINDS), default="id")
    decode.set_defaults(handler=cmd_decode)

    prefix = commands.add_parser("prefix", help="Derive a child id from u64 tags")
    prefix.add_argument("id", help="Parent id (canonical text form)")
    prefix.add_argument("tags", nargs="*", type=int, help="u64 tags, in order")
    prefix.set_defaults(handler=cmd_prefix)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)

    try:
        print(args.handler(args))
    except IdsError as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
