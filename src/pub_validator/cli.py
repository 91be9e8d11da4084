"""CLI entrypoint for validating a package before publishing."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import load_settings
from .core import validate_package
from .errors import PubValidatorError
from .parsers.semver import Version

EXIT_OK = 0
EXIT_WARNINGS = 10
EXIT_ERRORS = 65
EXIT_FAILURE = 1


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--root", type=Path, default=Path("."), help="Package directory")
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON config file")
    parser.add_argument("--server-url", default=None, help="Registry the package is uploaded to")
    parser.add_argument("--sdk-version", default=None, help="Version of the running SDK")
    parser.add_argument(
        "--package-size",
        type=int,
        default=None,
        help="Size of the archive in bytes (computed from the package files if omitted)",
    )
    parser.add_argument(
        "--ignore-warnings",
        action="store_true",
        help="Exit successfully when only warnings are found",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.config)
        if args.server_url:
            settings = replace(settings, server_url=args.server_url.rstrip("/"))
        if args.sdk_version:
            settings = replace(settings, sdk_version=Version.parse(args.sdk_version))
        outcome = asyncio.run(
            validate_package(args.root, settings, package_size=args.package_size)
        )
    except (PubValidatorError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if outcome.has_errors:
        return EXIT_ERRORS
    if outcome.has_warnings and not args.ignore_warnings:
        return EXIT_WARNINGS

    if not outcome.report:
        print("Package has 0 warnings.")
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
