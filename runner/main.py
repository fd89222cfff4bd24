"""
Command-line entry point for running the lab over files.

Usage:
    python -m runner.main --printers printers.txt --orders orders.txt
    python -m runner.main --printers printers.txt --orders orders.txt --output out.txt
    python -m runner.main --batch 5

Single mode runs one lab and prints the log to stdout (or writes it to
--output). Batch mode runs scenarios 1..N using the path templates from
config/settings.py, writing one output file per scenario.

Exit codes:
    0  every run finished
    1  an input file was missing or malformed, or the orders were out of order
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from adapters.orders import read_orders, read_printer_count, write_log
from config.settings import settings
from models.errors import LabError
from scheduler.lab import Lab

logger = logging.getLogger(__name__)


def run_once(printers_path: str, orders_path: str, output_path: Optional[str] = None) -> str:
    """Run one lab from files and return the rendered log."""
    lab = Lab(read_printer_count(printers_path))
    log = lab.take_orders(read_orders(orders_path)).render()

    if output_path:
        write_log(output_path, log)
    return log


def run_batch(runs: int) -> None:
    for run in range(1, runs + 1):
        logger.info(f"Scenario {run}/{runs}")
        run_once(settings.printers_path(run), settings.orders_path(run), settings.output_path(run))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print lab simulator")
    parser.add_argument("--printers", type=str, help="File holding the number of printers")
    parser.add_argument("--orders", type=str, help="Orders file, one job per line")
    parser.add_argument("--output", type=str, default=None, help="Write the log here instead of stdout")
    parser.add_argument(
        "--batch", type=int, default=None, metavar="N",
        help=f"Run scenarios 1..N from the configured templates (default N: {settings.BATCH_RUNS})",
        nargs="?", const=settings.BATCH_RUNS,
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.batch is None and not (args.printers and args.orders):
        parser.error("either --batch or both --printers and --orders are required")

    try:
        if args.batch is not None:
            run_batch(args.batch)
        else:
            log = run_once(args.printers, args.orders, args.output)
            if not args.output:
                print(log)
    except (LabError, FileNotFoundError) as e:
        logger.error(f"Run failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
