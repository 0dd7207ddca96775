"""Command line entry point: ``netflix-eda`` / ``python -m netflix_eda``."""

import argparse
import logging
import sys
import warnings

from .pipeline import run_analysis
from .preprocess import load_catalog
from .sample import make_demo_catalog
from .settings import OUTPUT_DIR, TOP_COUNTRIES, TOP_PEOPLE

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netflix-eda",
        description="Exploratory analysis of the Netflix titles catalog.")
    parser.add_argument("csv", nargs="?",
                        help="Path to netflix_titles.csv")
    parser.add_argument("--demo", action="store_true",
                        help="Analyse a generated catalog instead of a CSV")
    parser.add_argument("--demo-size", type=int, default=6000,
                        help="Number of generated titles (default: 6000)")
    parser.add_argument("--output-dir", default=OUTPUT_DIR,
                        help=f"Where figures and the report go (default: {OUTPUT_DIR})")
    parser.add_argument("--top", type=int, default=TOP_PEOPLE,
                        help=f"Rows in the director/actor tables (default: {TOP_PEOPLE})")
    parser.add_argument("--top-countries", type=int, default=TOP_COUNTRIES,
                        help=f"Countries in the stacked bar (default: {TOP_COUNTRIES})")
    parser.add_argument("--no-report", action="store_true",
                        help="Skip the interactive HTML report")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.csv and not args.demo:
        parser.error("give a CSV path or --demo")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    warnings.filterwarnings("ignore")

    if args.demo:
        logger.info("Generating a demo catalog of %d titles", args.demo_size)
        catalog = make_demo_catalog(args.demo_size)
    else:
        try:
            catalog = load_catalog(args.csv)
        except (OSError, ValueError) as exc:
            logger.error("Could not load %s: %s", args.csv, exc)
            return 1

    run_analysis(catalog, output_dir=args.output_dir,
                 top_countries=args.top_countries, top_people=args.top,
                 with_report=not args.no_report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
