#!/usr/bin/env python3
"""Export name tables from Babel CLDR data into the packaged asset layout.

Builds one table per (kind, locale) with cldrnames.cldr and writes it as
``<output>/<kind>/<locale>.json`` in the format read by PackageTableLoader
and PathTableLoader.

Existing files are left untouched unless --overwrite is given, because the
packaged assets are generated from a pinned CLDR release and Babel may ship
a different one.

Exit codes:
    0: Every requested table was written (or skipped as existing).
    1: Babel missing, or at least one locale unknown to Babel.

Usage:
    export_cldr_tables.py LOCALE [LOCALE ...] [--kind KIND] [--output DIR] [--overwrite]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger("export_cldr_tables")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    from cldrnames.enums import TableKind  # noqa: PLC0415

    parser = argparse.ArgumentParser(
        description="Export CLDR name tables from Babel into JSON assets.",
    )
    parser.add_argument("locales", nargs="+", help="Locale identifiers (e.g. ak pt_PT).")
    parser.add_argument(
        "--kind", "-k",
        action="append",
        choices=[str(kind) for kind in TableKind],
        help="Table kind to export (repeatable; default: all kinds).",
    )
    parser.add_argument(
        "--output", "-o",
        default="src/cldrnames/data",
        help="Root directory of the asset tree (default: src/cldrnames/data).",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace existing asset files.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log each table written.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Export the requested tables."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    from cldrnames.cldr import build_table  # noqa: PLC0415
    from cldrnames.core.babel_compat import BabelImportError  # noqa: PLC0415
    from cldrnames.diagnostics import UnknownLocaleError  # noqa: PLC0415
    from cldrnames.enums import TableKind  # noqa: PLC0415
    from cldrnames.table import dump_table  # noqa: PLC0415

    kinds = [TableKind(kind) for kind in args.kind] if args.kind else list(TableKind)
    output = Path(args.output)
    failures = 0
    written = 0

    for kind in kinds:
        for locale_id in args.locales:
            target = output / str(kind) / f"{locale_id}.json"
            if target.exists() and not args.overwrite:
                logger.info("[SKIP] %s exists", target)
                continue
            try:
                table = build_table(kind, locale_id)
            except BabelImportError as e:
                logger.error("[ERROR] %s", e)
                return 1
            except UnknownLocaleError as e:
                logger.error("[ERROR] %s", e)
                failures += 1
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(dump_table(table), encoding="utf-8")
            written += 1
            logger.debug("[OK] %s (%d entries)", target, len(table))

    logger.info("Wrote %d table(s), %d failure(s)", written, failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
