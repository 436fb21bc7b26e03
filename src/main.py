# src/main.py — v3
"""CLI entry point: validate, show, stats commands.

Usage:
    sitecontent validate [--root DIR]
    sitecontent show <path> --kind <kind> [--root DIR]
    sitecontent stats [--root DIR]

Logging follows LOG_LEVEL, LOG_FORMAT and LOG_FILE; -v forces DEBUG.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from sitecontent.config.settings import ConfigurationError, Settings, load_settings
from sitecontent.version import __version__

if TYPE_CHECKING:
    from sitecontent.content.loader import ContentLoader

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _load_settings(args)
    except (ConfigurationError, ValidationError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    _setup_logging(settings, args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return asyncio.run(args.func(args, settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    from sitecontent.content.registry import VALIDATORS_BY_KIND

    parser = argparse.ArgumentParser(
        prog="sitecontent",
        description=f"sitecontent v{__version__}: storefront content validation",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- validate ---
    p_validate = subparsers.add_parser(
        "validate", help="Validate every well-known content document",
    )
    _add_root_argument(p_validate)
    p_validate.set_defaults(func=_cmd_validate)

    # --- show ---
    p_show = subparsers.add_parser(
        "show", help="Print one validated document as JSON",
    )
    p_show.add_argument("path", help="Logical path, e.g. content/navigation.json")
    p_show.add_argument(
        "-k", "--kind", required=True, choices=sorted(VALIDATORS_BY_KIND),
        help="Content kind used to validate the document",
    )
    _add_root_argument(p_show)
    p_show.set_defaults(func=_cmd_show)

    # --- stats ---
    p_stats = subparsers.add_parser(
        "stats", help="Load all documents and print cache statistics",
    )
    _add_root_argument(p_stats)
    p_stats.set_defaults(func=_cmd_stats)

    return parser


def _add_root_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-r", "--root", type=Path, default=None,
        help="Content root directory (default: CONTENT_ROOT or ./config)",
    )


def _load_settings(args: argparse.Namespace) -> Settings:
    """Settings from the environment and .env, with --root applied on top."""
    overrides: dict[str, object] = {}
    root = getattr(args, "root", None)
    if root is not None:
        overrides["content_root"] = root
        overrides["content_source"] = "file"
    return load_settings(**overrides)


def _make_loader(settings: Settings) -> ContentLoader:
    from sitecontent.api.facade import create_content_loader

    return create_content_loader(settings)


async def _cmd_validate(args: argparse.Namespace, settings: Settings) -> int:
    """Validate all content documents and print a summary."""
    from sitecontent.api.facade import validate_all

    loader = _make_loader(settings)
    summary = await validate_all(loader)

    for report in summary.reports:
        if report.valid:
            print(f"✓ {report.name} - Valid")
        else:
            print(f"✗ {report.name} - Invalid ({report.kind}):")
            for err in report.errors:
                print(f"    {err}")

    print("\n" + "=" * 60)
    print("Validation Summary:")
    print(f"  Total files: {summary.total}")
    print(f"  Valid:       {summary.valid}")
    print(f"  Invalid:     {summary.invalid}")
    print("=" * 60)
    return 0 if summary.ok else 1


async def _cmd_show(args: argparse.Namespace, settings: Settings) -> int:
    """Print a validated document."""
    from sitecontent.cache.models import Invalid
    from sitecontent.content.registry import VALIDATORS_BY_KIND

    loader = _make_loader(settings)
    outcome = await loader.load(args.path, VALIDATORS_BY_KIND[args.kind])
    if isinstance(outcome, Invalid):
        logger.error("%s: %s", args.path, outcome.summary())
        return 1

    content = outcome.content
    data = content.model_dump(mode="json", by_alias=True) if hasattr(content, "model_dump") else content
    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


async def _cmd_stats(args: argparse.Namespace, settings: Settings) -> int:
    """Display cache statistics after loading every document."""
    from sitecontent.api.facade import validate_all

    loader = _make_loader(settings)
    summary = await validate_all(loader)
    stats = loader.stats()

    print(f"\nContent cache ({'enabled' if stats.cache_enabled else 'disabled'}):")
    print(f"  Cached:   {stats.size}")
    print(f"  Valid:    {summary.valid}")
    print(f"  Invalid:  {summary.invalid}")
    for path in stats.paths:
        print(f"    {path}")
    return 0


def _setup_logging(settings: Settings, verbose: bool) -> None:
    """Configure logging from LOG_* settings; --verbose forces DEBUG."""
    from sitecontent.logging.logger import setup_logging_from_settings

    setup_logging_from_settings(settings, level="DEBUG" if verbose else None)


if __name__ == "__main__":
    sys.exit(main())
