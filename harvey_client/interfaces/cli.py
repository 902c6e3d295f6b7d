"""
interfaces/cli.py
──────────────────────────────────────────────────────────────────────────────
Command-line interface for the Harvey lookup client.

Usage:
  # Single record
  harvey-lookup get isco 7233011
  harvey-lookup get school 42

  # Search with filters (repeat --filter; repeated names build a list)
  harvey-lookup search school --filter name=Gymnázium --per-page 5
  harvey-lookup search isco --filter title=mechanik --filter revisions=3

  # Fulltext ISCO search (code or title)
  harvey-lookup fulltext Agromechatronik
  harvey-lookup fulltext 7233011

Output is always JSON.  Connection settings come from HARVEY_* env vars.

Exit codes:
  0 — success
  1 — API / configuration error
  2 — argument error
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from harvey_client.domain.exceptions import ConfigurationError, HarveyError
from harvey_client.domain.models import Resource
from harvey_client.services.container import get_client

logger = logging.getLogger(__name__)

_RESOURCES = [r.value for r in Resource]


# ── Argument parser ────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="harvey-lookup",
        description="Query the Harvey classification API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    sub = p.add_subparsers(dest="command")

    get_p = sub.add_parser("get", help="Fetch a single record by id or code.")
    get_p.add_argument("resource", choices=_RESOURCES)
    get_p.add_argument("identifier")

    search_p = sub.add_parser("search", help="Search a resource.")
    search_p.add_argument("resource", choices=_RESOURCES)
    search_p.add_argument(
        "--filter", "-f",
        action="append",
        default=[],
        dest="filters",
        metavar="NAME=VALUE",
        help="Filter to apply; repeat for several filters or list values.",
    )
    search_p.add_argument("--page", type=int, default=1)
    search_p.add_argument(
        "--per-page",
        type=int,
        default=None,
        dest="per_page",
        help="Page size; 0 disables pagination. (default: HARVEY_PER_PAGE)",
    )

    fulltext_p = sub.add_parser("fulltext", help="Fulltext ISCO search.")
    fulltext_p.add_argument("query")
    fulltext_p.add_argument("--sort-by", default="title", dest="sort_by")
    return p


# ── Helpers ────────────────────────────────────────────────────────────────

def parse_filters(pairs: list[str]) -> dict[str, Any]:
    """Turn ["name=x", "revisions=1", "revisions=2"] into a filter dict.

    A name given more than once becomes a list.

    Raises:
        ValueError: On an item without "=".
    """
    filters: dict[str, Any] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"Filter must look like NAME=VALUE, got {pair!r}")
        if name in filters:
            existing = filters[name]
            filters[name] = (existing if isinstance(existing, list) else [existing]) + [value]
        else:
            filters[name] = value
    return filters


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


# ── Main logic ─────────────────────────────────────────────────────────────

def run(args: argparse.Namespace) -> int:
    """Execute the selected command.

    Returns:
        Exit code (0 = success, 1 = error, 2 = bad arguments).
    """
    try:
        filters = parse_filters(args.filters) if args.command == "search" else {}
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    try:
        client = get_client()
    except HarveyError as exc:
        logger.exception("Client initialisation failed")
        print(f"ERROR: Client initialisation failed: {exc}", file=sys.stderr)
        return 1

    try:
        if args.command == "get":
            result = client.get_resource(args.resource, args.identifier)
        elif args.command == "search":
            result = client.search_resource(
                args.resource, page=args.page, per_page=args.per_page, **filters
            )
        else:
            result = client.fulltext_isco(args.query, sort_by=args.sort_by)
    except (ConfigurationError, TypeError, ValueError) as exc:
        # Unknown filter name or invalid paging value (pydantic ValidationError)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    except HarveyError as exc:
        logger.exception("Harvey %s failed", args.command)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    _print_json(result)
    return 0


def main() -> None:
    """Entry point for the harvey-lookup console script."""
    parser = _build_parser()
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(2)

    sys.exit(run(args))


if __name__ == "__main__":
    main()
