#!/usr/bin/env python3
"""main.py — CLI entry point for the icon library build.

Usage:
    python main.py <command> [options]

Commands:
    process   - Read installed icon packages and build the manifest + SVG tree
    publish   - Upload the build to Cloudflare KV and object storage
    help      - Show this help message

Examples:
    python main.py process
    python main.py publish
    python main.py publish --manifest
    python main.py publish --svgs --lib tabler
    python main.py help
"""

from __future__ import annotations

import argparse
import sys


def cmd_process(args: argparse.Namespace) -> int:
    """Run the full processing pipeline."""
    from icon_pipeline.paths import Paths
    from icon_pipeline.pipeline import run_pipeline

    config = Paths.get_config()
    run_pipeline(config.node_modules, config.output_dir)
    return 0


def cmd_publish(args: argparse.Namespace) -> int:
    """Upload the manifest and/or the SVG tree."""
    from icon_pipeline.config import get_publisher_config
    from icon_pipeline.exceptions import ConfigurationError, ManifestError
    from icon_pipeline.paths import Paths
    from icon_pipeline.publisher import run_publish
    from icon_pipeline.storage import get_kv_store, get_object_store

    try:
        config = get_publisher_config()
    except ConfigurationError as exc:
        print(f"[ERROR] {exc}")
        return 1

    try:
        return run_publish(
            Paths.output_dir(),
            kv_store=get_kv_store(config),
            object_store=get_object_store(config),
            manifest=args.manifest,
            svgs=args.svgs,
            library=args.lib,
            concurrency=config.concurrency,
        )
    except ManifestError as exc:
        print(f"[ERROR] {exc}")
        return 1


def cmd_help(args: argparse.Namespace) -> int:
    """Show help message."""
    build_parser().print_help()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="main.py",
        description="Icon library build and publish CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py process
  python main.py publish
  python main.py publish --manifest
  python main.py publish --svgs --lib tabler
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # process subcommand
    subparsers.add_parser(
        "process",
        help="Build manifest.json, libraries.json, report.json and the SVG tree",
    )

    # publish subcommand
    publish_parser = subparsers.add_parser(
        "publish",
        help="Upload the build to KV and object storage",
    )
    publish_parser.add_argument(
        "--manifest",
        action="store_true",
        help="Upload manifest.json and libraries.json to KV",
    )
    publish_parser.add_argument(
        "--svgs",
        action="store_true",
        help="Upload the SVG tree to object storage",
    )
    publish_parser.add_argument(
        "--lib",
        default=None,
        metavar="NAME",
        help="Only upload SVGs of one library (e.g. tabler)",
    )

    # help subcommand
    subparsers.add_parser("help", help="Show this help message")

    return parser


_COMMANDS = {
    "process": cmd_process,
    "publish": cmd_publish,
    "help": cmd_help,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    handler = _COMMANDS.get(args.command or "help", cmd_help)
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
