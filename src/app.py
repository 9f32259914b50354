"""Application entry point for the contactscope CLI."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from art import tprint
from rich.console import Console

import settings
from adapters.json_contacts import JsonContactSource
from adapters.table_formatting import build_contacts_table, format_contact_line
from core.components import Component
from core.config import FilterConfig
from core.errors import InvalidPatternError
from core.filtering import ContactFilter
from core.models import Person
from core.predicates import ComponentPredicate, MatchMode, build_predicate

NAME = "CONTACTSCOPE"
FONT = "tarty-1"

EXIT_INVALID_FILTER = 2


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        # stdout carries results, so log lines go to stderr.
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/contactscope.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
            backupCount=int(file_cfg.get("backup_count", 5)),
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _filter_config() -> FilterConfig:
    return FilterConfig(
        default_component=settings.DEFAULT_COMPONENT,
        default_mode=settings.DEFAULT_MODE,
        cache_size=settings.CACHE_SIZE,
    )


def _print_contacts(
    contacts: List[Person],
    predicate: Optional[ComponentPredicate],
    plain: bool,
) -> None:
    if plain:
        for person in contacts:
            print(format_contact_line(person))
        return
    Console().print(build_contacts_table(contacts, predicate))


def _run_filter(args: argparse.Namespace, contact_filter: ContactFilter, config: FilterConfig) -> int:
    logger = logging.getLogger(__name__)
    try:
        predicate = build_predicate(
            args.pattern,
            args.component or config.default_component,
            args.mode or config.default_mode,
        )
    except InvalidPatternError as exc:
        logger.warning("Rejected filter: %s", exc)
        print(f"Invalid filter: {exc}", file=sys.stderr)
        return EXIT_INVALID_FILTER

    matches = contact_filter.apply(predicate)
    _print_contacts(matches, predicate, args.plain)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="contactscope")
    parser.add_argument("--contacts", help="Path to the contacts JSON file")
    parser.add_argument("--no-banner", action="store_true", help="Skip the startup banner")
    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="Show all contacts")
    list_parser.add_argument("--plain", action="store_true", help="One contact per line")

    filter_parser = subparsers.add_parser("filter", help="Show contacts matching a pattern")
    filter_parser.add_argument("pattern", help="Text to match; word modes split it on spaces")
    filter_parser.add_argument(
        "--component",
        "-c",
        help=f"Field to match ({', '.join(c.value for c in Component)})",
    )
    filter_parser.add_argument(
        "--mode",
        "-m",
        help=f"Match mode ({', '.join(m.value for m in MatchMode)})",
    )
    filter_parser.add_argument("--plain", action="store_true", help="One contact per line")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.no_banner:
        _print_banner()
    _configure_logging()

    config = _filter_config()
    source = JsonContactSource(args.contacts or settings.CONTACTS_PATH)
    contact_filter = ContactFilter(source, cache_size=config.cache_size)

    if args.command == "filter":
        return _run_filter(args, contact_filter, config)

    plain = getattr(args, "plain", False)
    _print_contacts(contact_filter.contacts, None, plain)
    return 0


if __name__ == "__main__":
    sys.exit(main())
