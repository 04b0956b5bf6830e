"""``jurisdiction-compile``: regenerate the lookup tables from the source data."""

import argparse
import logging
import sys

import httpx

from jurisdiction.compiler.pipeline import GENERATED_DIR, build
from jurisdiction.compiler.source import fetch_source, read_source
from jurisdiction.config import settings
from jurisdiction.errors import DataIntegrityError

logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="jurisdiction-compile",
        description="Validate the ISO 3166 / UN M49 source and regenerate the lookup tables.",
    )
    origin = ap.add_mutually_exclusive_group()
    origin.add_argument("--source", default="", help="Path to the source JSON (default: DATA_SOURCE_PATH)")
    origin.add_argument(
        "--url",
        nargs="?",
        const=settings.UPSTREAM_DATA_URL,
        default="",
        help="Fetch the source over HTTP (default URL: UPSTREAM_DATA_URL)",
    )
    ap.add_argument("--output-dir", default=GENERATED_DIR, help="Directory for the generated modules")
    ap.add_argument("--no-regions", action="store_true", help="Leave out UN M49 region data")
    ap.add_argument("--fresh", action="store_true", help="Ignore previously generated canonical indices")
    ap.add_argument("--check", action="store_true", help="Validate only, write nothing")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        if args.url:
            document = fetch_source(args.url, settings.HTTP_TIMEOUT_SECONDS)
        else:
            document = read_source(args.source or settings.DATA_SOURCE_PATH)
    except (OSError, httpx.HTTPError) as exc:
        logger.error("Cannot load source data: %s", exc)
        return 1

    try:
        build(
            document,
            output_dir=args.output_dir,
            include_regions=not args.no_regions,
            fresh=args.fresh,
            write=not args.check,
        )
    except DataIntegrityError as exc:
        logger.error("Source data rejected, nothing written: %s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
