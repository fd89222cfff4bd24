"""
Demo data generator - writes a random scenario for the runner.

Usage:
    python -m scripts.generate_orders
    python -m scripts.generate_orders --run 6 --jobs 40 --printers 3 --seed 7

This creates, using the path templates from config/settings.py:
- a printer-count file holding --printers
- an orders file with --jobs lines in non-decreasing arrival order,
  roughly one HIGH job in four

Then:  python -m runner.main --printers <printers file> --orders <orders file>
"""

import argparse
import random
from pathlib import Path
from typing import Optional, Sequence

from config.settings import settings
from models.enums import Priority

MODELS = ["gear", "bracket", "hinge", "vase", "clip", "knob", "mount", "spool"]
CLIENTS = ["ana", "rui", "joana", "pedro", "ines"]


def _write(path: str, text: str) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")


def generate_orders(num_jobs: int, printers: int, seed: Optional[int] = None) -> list[str]:
    """Return `num_jobs` orders-file lines sorted by arrival time."""
    rng = random.Random(seed)
    arrival = 0
    lines = []
    for i in range(num_jobs):
        arrival += rng.choice([0, 0, 1, 2, 3, 5])
        priority = Priority.HIGH if rng.random() < 0.25 else Priority.NORMAL
        lines.append(" ".join([
            str(arrival),
            rng.choice(CLIENTS),
            f"{rng.choice(MODELS)}-{i}",
            str(rng.randint(1, 12)),
            str(printers),
            priority.value,
        ]))
    return lines


def write_scenario(run: int, num_jobs: int, printers: int, seed: Optional[int] = None) -> tuple[str, str]:
    """Write the printer-count and orders files for scenario `run`; return their paths."""
    printers_path = settings.printers_path(run)
    orders_path = settings.orders_path(run)
    _write(printers_path, f"{printers}\n")
    _write(orders_path, "\n".join(generate_orders(num_jobs, printers, seed)) + "\n")
    return printers_path, orders_path


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Generate a random print lab scenario")
    parser.add_argument("--run", type=int, default=1, help="Scenario number (default: 1)")
    parser.add_argument("--jobs", type=int, default=20, help="Number of orders (default: 20)")
    parser.add_argument("--printers", type=int, default=2, help="Number of printers (default: 2)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args(argv)

    printers_path, orders_path = write_scenario(args.run, args.jobs, args.printers, args.seed)
    print(f"Wrote {args.printers} printer(s) to {printers_path}")
    print(f"Wrote {args.jobs} order(s) to {orders_path}")


if __name__ == "__main__":
    main()
