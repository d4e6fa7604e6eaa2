"""Command line interface for pagediff."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional

from .adapters.pymupdf import load_layouts, page_texts
from .config import DiffParams, get_preset
from .errors import PageDiffError
from .report import diff_session_to_json, write_json_report
from .search import search_pages
from .session import DiffSession
from .summary import summarize_pages

logger = logging.getLogger("pagediff")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagediff",
        description="Word level text comparison of two PDFs with page highlight rectangles.",
    )
    parser.add_argument("--base", help="Path to the baseline PDF")
    parser.add_argument("--target", help="Path to the PDF compared against the baseline")
    parser.add_argument("--json", help="Write the diff report to this path instead of stdout")
    parser.add_argument("--preset", default="default", help="Preset name (exact|default|fast)")
    parser.add_argument("--cell-budget", type=int, help="Override the LCS table cell budget")
    parser.add_argument("--search", help="Also report occurrences of this text in the baseline")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        print(__version__)
        return 0

    if not args.base or not args.target:
        parser.error("--base and --target are required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        preset = get_preset(args.preset)
    except KeyError as exc:
        parser.error(str(exc))
        return 2

    try:
        params = DiffParams.from_env(preset.params)
        if args.cell_budget is not None:
            params = params.copy(cell_budget=args.cell_budget)
        base_layouts, base_count = load_layouts(args.base)
        target_layouts, target_count = load_layouts(args.target)
    except PageDiffError as exc:
        logger.error("%s", exc)
        return 1

    base_texts = page_texts(base_layouts, base_count)
    target_texts = page_texts(target_layouts, target_count)
    summary = summarize_pages(base_texts, target_texts)

    session = DiffSession(params)
    session.set_summary(summary, base_page_count=base_count, target_page_count=target_count)
    for layout in base_layouts.values():
        session.store_base_layout(layout)
    for layout in target_layouts.values():
        session.store_target_layout(layout)

    logger.info(
        "%s: %d changed page(s), %d added, %d removed",
        summary.note,
        len(summary.changed_pages),
        summary.added_pages,
        summary.removed_pages,
    )

    hits = None
    if args.search:
        hits = search_pages(base_texts, args.search, context_chars=params.search_context_chars)
        logger.info("%d match(es) for %r", len(hits), args.search)

    if args.json:
        write_json_report(session, args.json, hits)
    else:
        print(diff_session_to_json(session, hits))
    return 0


if __name__ == "__main__":
    sys.exit(main())
