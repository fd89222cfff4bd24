"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("HIGH", not "Priority.HIGH")
- They render directly into log lines via .value
- They work as FastAPI / pydantic field types
- A typo in an orders file becomes an immediate error instead of a silent bug
"""

import enum


class Priority(str, enum.Enum):
    HIGH = "HIGH"        # always chosen before NORMAL jobs waiting on the same printer
    NORMAL = "NORMAL"    # default class


class JobStatus(str, enum.Enum):
    WAITING = "WAITING"      # enqueued on a printer, not yet started
    PRINTING = "PRINTING"    # the printer's in-flight job
    FINISHED = "FINISHED"    # remaining duration reached 0, removed from its queue
