# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Provides command-line interface to run the pipeline.
#
# COMMANDS:
# ---------
# 1. Rank the attributes of a dataset:
#    featrank rank
#    featrank rank --input KDDCup99.csv --output ranked_columns.csv
#    featrank rank --workers 8 --normal-label "normal." --log-level DEBUG
#
# 2. Show the summary of the last run:
#    featrank summary
#
#   `python -m featrank.cli ...` works the same way.
#
# EXIT CODES:
# -----------
#   0 → success
#   1 → FeatRankError (unreadable input, bad configuration, ...)
#   2 → usage error (argparse)
#
# ==============================================

import argparse
import json
import sys
from dataclasses import replace
from typing import List, Optional

from featrank import __version__
from featrank.config import get_config
from featrank.errors import FeatRankError
from featrank.persistence import SummaryStore
from featrank.pipeline import RankingPipeline
from featrank.utils.logging import setup_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="featrank",
        description="Rank binary attributes of a labeled CSV dataset by chi-square score",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", type=str, default=None,
                        help="DEBUG, INFO, WARNING or ERROR (default: LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    rank = subparsers.add_parser("rank", help="Score and rank attributes")
    rank.add_argument("--input", "-i", type=str, default=None, help="Input CSV with header row")
    rank.add_argument("--output", "-o", type=str, default=None, help="Ranked output CSV")
    rank.add_argument("--workers", "-w", type=int, default=None,
                      help="Parallel scoring workers (1 = sequential)")
    rank.add_argument("--normal-label", type=str, default=None,
                      help="Label literal of the benign category")
    rank.add_argument("--no-summary", action="store_true", help="Do not save a run summary")

    subparsers.add_parser("summary", help="Print the summary of the last run")
    return parser


def _cmd_rank(args: argparse.Namespace) -> int:
    config = get_config()
    if args.workers is not None:
        if args.workers < 1:
            raise FeatRankError(f"--workers must be >= 1, got {args.workers}")
        config = replace(config, scoring=replace(config.scoring, max_workers=args.workers))
    if args.normal_label is not None:
        config = replace(config, schema=replace(config.schema, normal_label=args.normal_label))

    with RankingPipeline(config, save_summary=not args.no_summary) as pipeline:
        summary = pipeline.run(input_path=args.input, output_path=args.output)

    print(f"Results written to '{summary['output_path']}'.")
    return 0


def _cmd_summary(args: argparse.Namespace) -> int:
    store = SummaryStore(get_config().io.summary_dir)
    summary = store.load_summary()
    if summary is None:
        print(f"No summary found in {store.storage_dir}")
        return 1
    print(json.dumps(summary, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        try:
            setup_logging(args.log_level or get_config().log_level)
        except ValueError as e:
            print(f"featrank: {e}", file=sys.stderr)
            return 2
        if args.command == "rank":
            return _cmd_rank(args)
        return _cmd_summary(args)
    except FeatRankError as e:
        logger.error(f"[!] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
