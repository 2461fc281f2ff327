# iplog/utils/dates.py

from __future__ import annotations
from datetime import date, datetime

import pandas as pd

from iplog.utils.logging import get_logger

log = get_logger(__name__)

CLI_DATE_FORMAT = "%d.%m.%Y"
DISPLAY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_cli_date(value: str) -> date:
    """
    Parse a ``dd.mm.yyyy`` command-line date.

    Raises ValueError for any other shape; callers turn that into
    an argument error naming the flag.
    """
    return datetime.strptime(value.strip(), CLI_DATE_FORMAT).date()


def format_cli_date(value: date) -> str:
    return value.strftime(CLI_DATE_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """
    Parse a free-form log timestamp.

    ISO 8601 text is read as ISO 8601. Anything else goes through the pandas
    general parser (RFC 2822, ``31.12.2023 10:00`` and the like) with
    ambiguous numeric dates read day-first, same as the CLI dates.
    Timezone offsets are dropped, keeping the wall-clock time.

    Raises ValueError if the text can't be parsed or is empty.
    """
    text = value.strip()
    if not text:
        raise ValueError("empty timestamp")

    try:
        ts = pd.to_datetime(text, format="ISO8601")
    except (ValueError, OverflowError):
        # dayfirst must not reach ISO text: pandas would swap month and day
        try:
            ts = pd.to_datetime(text, dayfirst=True)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"invalid timestamp {text!r}") from e

    if ts is pd.NaT:
        raise ValueError(f"invalid timestamp {text!r}")

    if ts.tzinfo is not None:
        log.debug("Dropping timezone from %r", text)
        ts = ts.tz_localize(None)

    return ts.to_pydatetime()


def format_timestamp(value: datetime) -> str:
    return value.strftime(DISPLAY_TIMESTAMP_FORMAT)
