from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, List

from . import __version__
from .config import Settings, load_settings
from .log import LogConfig, get_logger, setup_logging
from .query import query_filter

log = get_logger(__name__)


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="url-query-cleaner",
        description="Strip tracking query parameters (utm_*, gclid, fbclid, ...) from URLs.",
    )
    p.add_argument("-V", "--version", action="version", version=f"url-query-cleaner {__version__}")
    p.add_argument("--config", default=None, help="YAML config file (optional). Env vars override defaults.")
    sub = p.add_subparsers(dest="cmd", required=True)

    clean = sub.add_parser("clean", help="Clean URLs given as arguments, in a file, or on stdin.")
    clean.add_argument("urls", nargs="*", metavar="URL", help="URLs to clean.")
    clean.add_argument("--input", default=None, help="File with one URL per line ('-' for stdin).")
    _add_filter_args(clean)
    clean.add_argument("--log-level", default=None, help="DEBUG/INFO/WARN/ERROR (overrides env/config).")
    clean.add_argument("--no-color", action="store_true", help="Disable colored logging.")
    clean.add_argument("-q", "--quiet", action="store_true", help="Only log malformed URLs.")

    flt = sub.add_parser("filters", help="Print the effective filter prefixes, one per line.")
    _add_filter_args(flt)

    args = p.parse_args(argv)
    cfg = load_settings(args.config)
    if getattr(args, "log_level", None):
        cfg.log_level = args.log_level
    if getattr(args, "no_color", False):
        cfg.no_color = True
    if getattr(args, "quiet", False):
        cfg.quiet = True
    setup_logging(LogConfig(level=cfg.log_level, no_color=cfg.no_color, quiet=cfg.quiet))

    try:
        filters = _effective_filters(args, cfg)
    except ValueError as e:
        log.error("%s", e)
        return 2

    if args.cmd == "clean":
        return _cmd_clean(args, filters)
    if args.cmd == "filters":
        for f in filters:
            print(f)
        return 0
    return 2


def _add_filter_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--allow", action="append", default=[], metavar="NAME",
                   help="Keep this tracker (utm, gclid, gclsrc, dclid, fbclid, mscklid, zanpid). Repeatable.")
    p.add_argument("--filter", action="append", default=[], dest="extra_filters", metavar="PREFIX",
                   help="Also remove parameters starting with PREFIX. Repeatable.")
    p.add_argument("--no-tracking", action="store_true",
                   help="Do not apply the tracking policy; only remove --filter/extra_filters prefixes.")


def _effective_filters(args, cfg: Settings) -> List[str]:
    cfg.allow = list(cfg.allow) + list(args.allow)
    cfg.extra_filters = list(cfg.extra_filters) + list(args.extra_filters)
    if args.no_tracking:
        return list(cfg.extra_filters)
    return cfg.filters()


def _cmd_clean(args, filters: List[str]) -> int:
    try:
        urls = list(_read_urls(args.urls, args.input))
    except (OSError, UnicodeDecodeError) as e:
        log.error("Failed to read URLs: %s", e)
        return 2

    failed = 0
    for url in urls:
        try:
            print(query_filter(url, filters))
        except ValueError as e:
            failed += 1
            log.error("Malformed URL %r: %s", url, e)

    log.debug("Cleaned %d/%d URLs with %d filters.", len(urls) - failed, len(urls), len(filters))
    return 1 if failed else 0


def _read_urls(positional: Iterable[str], input_path: str | None) -> Iterable[str]:
    positional = list(positional)
    yield from positional
    if input_path == "-" or (input_path is None and not positional):
        yield from _nonblank(sys.stdin)
    elif input_path is not None:
        with Path(input_path).open(encoding="utf-8") as f:
            yield from _nonblank(f)


def _nonblank(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        line = line.strip()
        if line:
            yield line
