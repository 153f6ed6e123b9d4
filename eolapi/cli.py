"""Command line entry point: ``eolapi search`` and ``eolapi page``."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path

from loguru import logger

from eolapi import __version__
from eolapi.client import EolClient
from eolapi.config.loader import load_config
from eolapi.errors import EolError
from eolapi.pages import PageQuery
from eolapi.search import SearchQuery


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="eolapi", description="Query the Encyclopedia of Life API.")
    parser.add_argument("--version", action="version", version=f"eolapi {__version__}")
    parser.add_argument("--config", type=Path, default=None, help="Config file (default: ~/.eolapi/config.json)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Search taxa across all result pages")
    search.add_argument("term")
    search.add_argument("--exact", action="store_true")
    search.add_argument("--limit", type=int, default=0)
    search.add_argument("--filter-string", default="")
    search.add_argument("--taxon-concept-id", type=int, default=0)
    search.add_argument("--hierarchy-entry-id", type=int, default=0)
    search.add_argument("--cache-ttl", type=int, default=None)

    page = sub.add_parser("page", help="Look up one taxon page by id")
    page.add_argument("id", type=int)
    for media in ("images", "videos", "sounds", "maps", "text"):
        page.add_argument(f"--{media}", type=int, default=0)
    page.add_argument("--iucn", action="store_true")
    page.add_argument("--subjects", default="")
    page.add_argument("--licenses", default="")
    page.add_argument("--details", action="store_true")
    page.add_argument("--common-names", action="store_true")
    page.add_argument("--synonyms", action="store_true")
    page.add_argument("--references", action="store_true")
    page.add_argument("--vetted", type=int, choices=(0, 1, 2), default=0)
    page.add_argument("--cache-ttl", type=int, default=0)
    return parser


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="INFO" if verbose else "WARNING")


async def _run(args: argparse.Namespace) -> object:
    config = load_config(args.config)
    client = EolClient(config)

    if args.command == "search":
        cache_ttl = config.search.cache_ttl if args.cache_ttl is None else args.cache_ttl
        query = SearchQuery(
            query=args.term,
            exact=args.exact,
            limit=args.limit,
            filter_by_taxon_concept_id=args.taxon_concept_id,
            filter_by_hierarchy_entry_id=args.hierarchy_entry_id,
            filter_by_string=args.filter_string,
            cache_ttl=cache_ttl,
        )
        results = await client.search(query)
        return [r.to_dict() for r in results]

    detail = await client.page(
        PageQuery(
            id=args.id,
            images=args.images,
            videos=args.videos,
            sounds=args.sounds,
            maps=args.maps,
            text=args.text,
            iucn=args.iucn,
            subjects=args.subjects,
            licenses=args.licenses,
            details=args.details,
            common_names=args.common_names,
            synonyms=args.synonyms,
            references=args.references,
            vetted=args.vetted,
            cache_ttl=args.cache_ttl,
        )
    )
    payload = asdict(detail)
    payload["texts"] = [m.to_dict() for m in detail.texts()]
    payload["images"] = [m.to_dict() for m in detail.images()]
    return payload


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        payload = asyncio.run(_run(args))
    except EolError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
