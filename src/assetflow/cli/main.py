"""CLI entrypoint for assetflow."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from assetflow import __version__
from assetflow.config import check_transformations, load_rule_set, validate_config_file
from assetflow.constants.branding import CLI_DESCRIPTION, VALID_CONFIG_MESSAGE
from assetflow.constants.transform import CONFIG_FILENAME
from assetflow.exceptions import ConfigError, NoMatchError
from assetflow.exceptions.validation import format_errors


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="assetflow",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate-config", help="Report every problem in a transformation config")
    validate.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path(CONFIG_FILENAME),
        help=f"Transformation config file (default: {CONFIG_FILENAME})",
    )
    validate.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    check = subparsers.add_parser("check", help="Show which targets a source type may transform into")
    check.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path(CONFIG_FILENAME),
        help=f"Transformation config file (default: {CONFIG_FILENAME})",
    )
    check.add_argument("-s", "--source", required=True, help="Source entity type")
    check.add_argument(
        "-t",
        "--target",
        action="append",
        required=True,
        help="Candidate target entity type (repeat flag for multiple values)",
    )
    check.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "validate-config":
        return _handle_validate_config(args)
    if args.command == "check":
        return _handle_check(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run collect-all validation and report results."""
    errors = validate_config_file(args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print(VALID_CONFIG_MESSAGE)
    return 0


def _handle_check(args: argparse.Namespace) -> int:
    """Load the config and print the reachable targets, one per line."""
    try:
        rule_set = load_rule_set(args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        matches = check_transformations(rule_set, args.source, *args.target)
    except NoMatchError as exc:
        print(f"{args.source}: {exc}", file=sys.stderr)
        return 1

    for target in matches:
        print(target)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
