"""
File adapters - turn text files into PrintJobs and a log back into a file.

Orders file, one job per line, whitespace separated:

    <arrival_time> <client> <name> <duration> <printer_hint> <priority>
    0 ana gear 5 2 NORMAL
    0 rui bracket 3 2 HIGH

`client` and `printer_hint` are carried on the record but the lab never
looks at them. Blank lines are skipped.

Printer-count file: the first whitespace-separated token is the number of
printers (a positive integer); anything after it is ignored.

Everything here fails fast: a bad line raises InputFormatError naming the
line, a missing file raises FileNotFoundError unchanged.
"""

import logging
from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field, ValidationError

from models.enums import Priority
from models.job import PrintJob
from models.errors import InputFormatError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

ORDER_FIELDS = ("arrival_time", "client", "name", "duration", "printer_hint", "priority")


class OrderRecord(BaseModel):
    """One parsed line of an orders file."""

    arrival_time: int = Field(..., ge=0)
    client: str
    name: str = Field(..., min_length=1, pattern=r"^\S+$")
    duration: int = Field(..., gt=0)
    printer_hint: int
    priority: Priority

    def to_job(self) -> PrintJob:
        return PrintJob(
            name=self.name,
            duration=self.duration,
            arrival_time=self.arrival_time,
            priority=self.priority,
        )


def parse_order_line(line: str, line_number: int = 1) -> OrderRecord:
    """
    Parse a single orders-file line.

    Raises:
        InputFormatError: wrong field count, non-integer numbers, non-positive
            duration, negative arrival time or an unknown priority token.
    """
    tokens = line.split()
    if len(tokens) != len(ORDER_FIELDS):
        raise InputFormatError(
            f"Line {line_number}: expected {len(ORDER_FIELDS)} fields "
            f"({' '.join(ORDER_FIELDS)}), got {len(tokens)}"
        )

    try:
        return OrderRecord.model_validate(dict(zip(ORDER_FIELDS, tokens)))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InputFormatError(f"Line {line_number}: {problems}") from e


def read_orders(path: PathLike) -> list[PrintJob]:
    """Read every job from an orders file, in file order."""
    jobs = []
    with open(path, encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            jobs.append(parse_order_line(line, line_number).to_job())
    logger.info(f"Read {len(jobs)} order(s) from {path}")
    return jobs


def read_printer_count(path: PathLike) -> int:
    """
    Read the number of printers from a printer-count file.

    Raises:
        InputFormatError: the file is empty or its first token is not a
            positive integer.
    """
    tokens = Path(path).read_text(encoding="utf-8").split()
    if not tokens:
        raise InputFormatError(f"{path}: printer count file is empty")

    try:
        count = int(tokens[0])
    except ValueError as e:
        raise InputFormatError(f"{path}: printer count must be an integer, got {tokens[0]!r}") from e

    if count < 1:
        raise InputFormatError(f"{path}: printer count must be positive, got {count}")
    return count


def write_log(path: PathLike, text: str) -> None:
    """Write the rendered log, creating parent directories as needed."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")
    logger.info(f"Wrote log to {target}")
