# iplog/models.py
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class LogEntry:
    ip: str                 # "a.b.c.d" exactly as it appeared in the log (not validated)
    timestamp: datetime     # naive; tz offsets are dropped at load time


@dataclass(frozen=True)
class AnalysisConfig:
    log_path: Path
    output_path: Path
    time_start: date
    time_end: date
    address_start: Optional[str] = None   # base address, compared unmasked
    address_mask: Optional[str] = None    # e.g. "255.255.255.0"
    log_level: str = "WARNING"


# Per-address hit counts, keys in first-seen order.
CountTable = dict[str, int]
