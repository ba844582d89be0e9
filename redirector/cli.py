from __future__ import annotations

import argparse
import sys
from pathlib import Path

from redirector.domain.loader import MalformedInputError, load_resolver
from redirector.logging_conf import LEVELS, setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the mapping-file tools."""
    parser = argparse.ArgumentParser(prog="redirector", description="Inspect YAML redirect mappings")
    parser.add_argument("--log-level", type=str.upper, choices=LEVELS, default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    p_check = sub.add_parser("check", help="validate a mapping file and count its paths")
    p_check.add_argument("file", type=Path)

    p_resolve = sub.add_parser("resolve", help="print the destination for a path")
    p_resolve.add_argument("file", type=Path)
    p_resolve.add_argument("path")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        resolver = load_resolver(args.file.read_bytes())
    except OSError as e:
        print(f"error: cannot read {args.file}: {e.strerror or e}", file=sys.stderr)
        return 1
    except MalformedInputError as e:
        print(f"error: {args.file}: {e}", file=sys.stderr)
        return 1

    if args.command == "check":
        print(f"{args.file}: {len(resolver)} paths")
        return 0

    location = resolver.resolve(args.path)
    if not location:
        print(f"{args.path}: not mapped", file=sys.stderr)
        return 1
    print(location)
    return 0


if __name__ == "__main__":
    sys.exit(main())
