#!/usr/bin/env python3
"""
Command-line interface for the URL registry.

Usage:
    url-registry shorten <url> [custom_code]
    url-registry expand <short_code>
    url-registry stats [short_code]
    url-registry list
    url-registry delete <short_code>
    url-registry                      (runs a demonstration)
"""

import argparse
import json
import sys
from typing import Optional, List

from .config import load_config
from .registry import URLRegistry
from .exceptions import URLRegistryError
from .common.logging_config import setup_logging


DEMO_URLS = [
    "https://www.google.com",
    "https://github.com/microsoft/typescript",
    "https://nodejs.org/en/docs/",
]


class URLRegistryCLI:
    """Command-line interface for the URL registry."""

    def __init__(self, registry: URLRegistry):
        """Initialize CLI.

        Args:
            registry: Registry the commands operate on
        """
        self.registry = registry

    def shorten(self, url: str, custom_code: Optional[str] = None) -> int:
        """Shorten a URL."""
        try:
            record = self.registry.create_short_url(url, custom_code)
        except URLRegistryError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        print(f"Short URL: {self.registry.get_full_short_url(record.short_code)}")
        print(f"Code: {record.short_code}")
        return 0

    def expand(self, short_code: str) -> int:
        """Print the original URL without counting a click."""
        original_url = self.registry.get_original_url(short_code, track_click=False)
        if original_url is None:
            print(f"Short code '{short_code}' not found", file=sys.stderr)
            return 1

        print(f"Original URL: {original_url}")
        return 0

    def stats(self, short_code: Optional[str] = None) -> int:
        """Print per-code or aggregate statistics as JSON."""
        stats = self.registry.get_statistics(short_code)
        if stats is None:
            print(f"Short code '{short_code}' not found", file=sys.stderr)
            return 1

        label = "Statistics" if short_code else "Overall statistics"
        print(f"{label}:")
        print(json.dumps(stats.to_dict(), indent=2))
        return 0

    def list_urls(self) -> int:
        """Print every registered URL."""
        urls = self.registry.list_urls()
        print(f"Registered URLs ({len(urls)}):")
        for record in urls:
            print(f"{record.short_code} -> {record.original_url} ({record.click_count} clicks)")
        return 0

    def delete(self, short_code: str) -> int:
        """Delete a short URL."""
        if not self.registry.delete_short_url(short_code):
            print(f"Short code '{short_code}' not found", file=sys.stderr)
            return 1

        print(f"Deleted short URL {short_code}")
        return 0

    def demo(self) -> int:
        """Run a fixed sequence exercising create, resolve and stats."""
        print("=== URL Registry Demo ===\n")

        print("Shortening URLs:")
        for url in DEMO_URLS:
            try:
                record = self.registry.create_short_url(url)
            except URLRegistryError as e:
                print(f"Error: {e}\n")
                continue
            print(f"Original URL: {url}")
            print(f"Short URL: {self.registry.get_full_short_url(record.short_code)}")
            print(f"Code: {record.short_code}\n")

        print("Custom code:")
        try:
            record = self.registry.create_short_url("https://example.com", "example")
            print(f"Custom URL: {self.registry.get_full_short_url(record.short_code)}\n")
        except URLRegistryError as e:
            print(f"Custom code error: {e}\n")

        print("Expanding:")
        urls = self.registry.list_urls()
        if urls:
            first = urls[0]
            expanded = self.registry.get_original_url(first.short_code)
            print(f"Code: {first.short_code}")
            print(f"Expanded URL: {expanded}\n")

        print("Statistics:")
        stats = self.registry.get_statistics()
        print(f"Total URLs: {stats.total_urls}")
        print(f"Total clicks: {stats.total_clicks}")
        if stats.top_urls:
            print("Top URLs:")
            for index, top in enumerate(stats.top_urls, start=1):
                print(f"  {index}. {top.short_code} ({top.click_count} clicks)")

        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="url-registry",
        description="URL Registry CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten https://example.com/long/url

  # Shorten with custom code
  %(prog)s shorten https://example.com/long/url mylink

  # Look up the original URL
  %(prog)s expand mylink

  # Statistics for one code, or for everything
  %(prog)s stats mylink
  %(prog)s stats

  # Run the demonstration
  %(prog)s
        """
    )

    parser.add_argument(
        "--base-url",
        default=None,
        help="Base URL for short links (default: from BASE_URL env or https://short.ly)"
    )

    parser.add_argument(
        "--storage-file",
        default=None,
        help="Registry JSON file (default: from STORAGE_FILE env or urls.json)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", aliases=["short"], help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")
    shorten_parser.add_argument("custom_code", nargs="?", help="Custom short code")

    expand_parser = subparsers.add_parser("expand", help="Get original URL")
    expand_parser.add_argument("short_code", help="Short code to lookup")

    stats_parser = subparsers.add_parser("stats", help="Get statistics")
    stats_parser.add_argument("short_code", nargs="?", help="Short code (omit for overall statistics)")

    subparsers.add_parser("list", help="List all URLs")

    delete_parser = subparsers.add_parser("delete", help="Delete a short URL")
    delete_parser.add_argument("short_code", help="Short code to delete")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(base_url=args.base_url, storage_file=args.storage_file)
    logger = setup_logging(
        level="DEBUG" if args.verbose else config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    cli = URLRegistryCLI(URLRegistry.from_config(config, logger=logger))

    if args.command in ("shorten", "short"):
        return cli.shorten(args.url, args.custom_code)
    elif args.command == "expand":
        return cli.expand(args.short_code)
    elif args.command == "stats":
        return cli.stats(args.short_code)
    elif args.command == "list":
        return cli.list_urls()
    elif args.command == "delete":
        return cli.delete(args.short_code)
    else:
        return cli.demo()


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
