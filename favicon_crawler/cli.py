"""
Run the favicon crawler from the command line.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from collections.abc import Sequence
from functools import partial

from favicon_crawler.config import ConfigurationError, CrawlerSettings, get_crawler_settings
from favicon_crawler.csv_io import InputFileError, read_domain_records, write_results
from favicon_crawler.logging_utils import configure_logging, log_event
from favicon_crawler.pipeline import FaviconCrawlPipeline
from favicon_crawler.worker import http_resolver_factory

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_MISSING_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resolve favicon URLs for a CSV of domains.")
    parser.add_argument(
        "--input",
        dest="input_path",
        default=None,
        help="Headerless rank,domain CSV file.",
    )
    parser.add_argument(
        "--output",
        dest="output_path",
        default=None,
        help="Output CSV path (default output.csv).",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=None,
        help="Extra attempts for a domain whose lookup failed.",
    )
    parser.add_argument(
        "--timeout",
        dest="timeout_seconds",
        type=float,
        default=None,
        help="Per-request timeout in seconds.",
    )
    parser.add_argument(
        "--workers",
        "--threads",
        dest="workers",
        type=int,
        default=None,
        help="Number of worker threads.",
    )
    parser.add_argument(
        "--dom-only",
        dest="dom_only",
        action="store_true",
        default=None,
        help="Skip the /favicon.ico probe and inspect page markup only.",
    )
    parser.add_argument(
        "--verbose-failures",
        dest="log_attempt_failures",
        action="store_true",
        default=None,
        help="Log every failed request attempt.",
    )
    parser.add_argument(
        "--debug-domain",
        dest="debug_domain",
        default=None,
        help="Resolve a single domain via DOM inspection and print the result.",
    )
    return parser


def apply_overrides(settings: CrawlerSettings, args: argparse.Namespace) -> CrawlerSettings:
    """
    Overlay explicitly passed CLI flags on environment-derived settings.
    """

    overrides = {
        field.name: getattr(args, field.name)
        for field in dataclasses.fields(CrawlerSettings)
        if getattr(args, field.name, None) is not None
    }
    if "retries" in overrides:
        overrides["retries"] = max(0, overrides["retries"])
    if "workers" in overrides:
        overrides["workers"] = max(1, overrides["workers"])
    if "timeout_seconds" in overrides:
        overrides["timeout_seconds"] = max(0.1, overrides["timeout_seconds"])
    return dataclasses.replace(settings, **overrides)


def debug_single(settings: CrawlerSettings, domain: str) -> int:
    debug_settings = dataclasses.replace(settings, dom_only=True, log_attempt_failures=True)
    resolver = http_resolver_factory(debug_settings)()
    try:
        favicon_url = resolver.resolve(domain)
    finally:
        resolver.close()
    print(json.dumps({"domain": domain, "favicon_url": favicon_url}, indent=2))
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = apply_overrides(get_crawler_settings(), args)

    if args.debug_domain:
        configure_logging()
        return debug_single(settings, args.debug_domain)

    try:
        input_path = settings.require_input_path()
    except ConfigurationError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_MISSING_INPUT

    configure_logging()
    log_event(logger, logging.INFO, "reading_input", input_path=input_path)
    try:
        records = read_domain_records(input_path, retries=settings.retries)
    except (InputFileError, OSError) as exc:
        log_event(logger, logging.ERROR, "input_read_failed", input_path=input_path, error=str(exc))
        return EXIT_INPUT_ERROR

    pipeline = FaviconCrawlPipeline(
        settings=settings,
        output_writer=partial(write_results, settings.output_path),
    )
    summary = pipeline.run(records)

    print(json.dumps(dataclasses.asdict(summary), indent=2))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
