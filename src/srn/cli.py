#!/usr/bin/env python3
"""
SRN - command-line interface for Structured Resource Names.

Commands:
- build: Build an SRN from its components
- parse: Parse an SRN into its components
- validate: Check an SRN string
- parent: Print the parent of an SRN
- compare: Order two SRNs by creation time

Usage:
    srn build my-app users tenant123 profile settings
    srn build my-app docs tenant123 readme --strategy content_addressable
    srn parse ern:my-app:users:tenant123:profile_01j9.../settings
    srn parse <srn> --format yaml
    srn validate <srn>
    srn parent <srn>
    srn compare <srn-a> <srn-b>
    srn --help
"""

import argparse
import logging
import sys
from pathlib import Path

from srn.commands.name import SRNCommand

FORMAT_CHOICES = ["text", "json", "yaml"]
STRATEGY_CHOICES = ["time_ordered", "content_addressable"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="srn",
        description="SRN - build, parse and inspect Structured Resource Names",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s build my-app users tenant123 profile           Time-ordered root
  %(prog)s build my-app users tenant123 profile a b c     With parts
  %(prog)s build my-app docs t1 readme --strategy content_addressable
  %(prog)s parse ern:my-app:users:tenant123:profile_...   Show components
  %(prog)s parse <srn> --format json                      As JSON mapping
  %(prog)s validate <srn>                                 Exit 1 if invalid
  %(prog)s parent <srn>                                   Drop the last part
  %(prog)s compare <srn-a> <srn-b>                        Order by creation

Configuration:
  Defaults are read from .srn/config.yaml (searched upward from cwd):
    naming:
      scheme: ern
      strategy: time_ordered
    output:
      format: text
        """
    )

    parser.add_argument(
        "--config-root",
        type=str,
        metavar="PATH",
        help="Directory containing .srn/ (default: auto-detect)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ----- srn build -----
    build_cmd = subparsers.add_parser(
        "build",
        help="Build an SRN from components",
        description="Build an SRN; the root is generated from ROOT_LABEL"
    )
    build_cmd.add_argument("domain", help="Domain (e.g., my-app)")
    build_cmd.add_argument("category", help="Category (e.g., users)")
    build_cmd.add_argument("account", help="Account (e.g., tenant123)")
    build_cmd.add_argument("root_label", help="Root label (e.g., profile)")
    build_cmd.add_argument("parts", nargs="*", help="Path parts (up to 10)")
    build_cmd.add_argument(
        "--strategy", "-s",
        type=str,
        choices=STRATEGY_CHOICES,
        help="Root strategy (default: from config, else time_ordered)"
    )
    build_cmd.add_argument("--scheme", type=str, help="Scheme literal (default: ern)")
    build_cmd.add_argument(
        "--format", "-f",
        type=str,
        choices=FORMAT_CHOICES,
        help="Output format"
    )

    # ----- srn parse -----
    parse_cmd = subparsers.add_parser("parse", help="Parse an SRN")
    parse_cmd.add_argument("srn", help="SRN to parse")
    parse_cmd.add_argument("--scheme", type=str, help="Expected scheme literal")
    parse_cmd.add_argument(
        "--format", "-f",
        type=str,
        choices=FORMAT_CHOICES,
        help="Output format"
    )

    # ----- srn validate -----
    validate_cmd = subparsers.add_parser("validate", help="Validate an SRN")
    validate_cmd.add_argument("srn", help="SRN to validate")
    validate_cmd.add_argument("--scheme", type=str, help="Expected scheme literal")

    # ----- srn parent -----
    parent_cmd = subparsers.add_parser("parent", help="Print the parent SRN")
    parent_cmd.add_argument("srn", help="SRN with at least one part")
    parent_cmd.add_argument("--scheme", type=str, help="Expected scheme literal")

    # ----- srn compare -----
    compare_cmd = subparsers.add_parser("compare", help="Order two SRNs by creation time")
    compare_cmd.add_argument("left", help="First SRN")
    compare_cmd.add_argument("right", help="Second SRN")
    compare_cmd.add_argument("--scheme", type=str, help="Expected scheme literal")

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    config_root = Path(args.config_root) if args.config_root else None
    try:
        cmd = SRNCommand(config_root=config_root)
    except ValueError as e:  # SRNError subclasses ValueError
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    if args.command == "build":
        return cmd.build(
            domain=args.domain,
            category=args.category,
            account=args.account,
            root_label=args.root_label,
            parts=args.parts,
            strategy=args.strategy,
            scheme=args.scheme,
            format=args.format,
        )
    elif args.command == "parse":
        return cmd.parse(args.srn, scheme=args.scheme, format=args.format)
    elif args.command == "validate":
        return cmd.validate(args.srn, scheme=args.scheme)
    elif args.command == "parent":
        return cmd.parent(args.srn, scheme=args.scheme)
    elif args.command == "compare":
        return cmd.compare(args.left, args.right, scheme=args.scheme)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
