# iplog/datasources/log_file.py

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from iplog.errors import IOFailure
from iplog.models import LogEntry
from iplog.utils.dates import parse_timestamp
from iplog.utils.logging import get_logger

log = get_logger(__name__)

PathLike = Union[str, Path]


def parse_line(line: str) -> tuple[str, str] | None:
    """
    Split a log line into (address, timestamp text) on the first colon.

    Returns None for lines without a colon (blank lines included);
    those are skipped without complaint.
    """
    parts = line.rstrip("\r\n").split(":", 1)
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def load_log_entries(path: PathLike) -> list[LogEntry]:
    """
    Read ``<address>:<timestamp>`` lines from ``path``.

    A single bad timestamp fails the whole load: nothing read so far
    is returned.
    """
    path = Path(path)
    entries: list[LogEntry] = []
    skipped = 0

    try:
        with path.open("r", encoding="utf-8-sig") as fh:
            for lineno, line in enumerate(fh, start=1):
                parsed = parse_line(line)
                if parsed is None:
                    skipped += 1
                    continue

                ip, raw_ts = parsed
                try:
                    ts = parse_timestamp(raw_ts)
                except ValueError as e:
                    raise IOFailure(
                        f"Error reading log file: {e} on line {lineno}"
                    ) from e
                entries.append(LogEntry(ip=ip, timestamp=ts))
    except (OSError, UnicodeDecodeError) as e:
        raise IOFailure(f"Error reading log file: {e}") from e

    log.info("Loaded %d entries from %s (%d lines skipped)", len(entries), path, skipped)
    return entries


@dataclass
class LogFileSource:
    path: Path

    def load(self) -> list[LogEntry]:
        return load_log_entries(self.path)
