# iplog/datasources/base.py

from __future__ import annotations
from dataclasses import asdict
from typing import Iterable, Protocol

import pandas as pd

from iplog.models import LogEntry

ENTRY_COLUMNS = ["ip", "timestamp"]


class DataSource(Protocol):
    """Anything that can produce log entries in file order."""

    def load(self) -> list[LogEntry]:
        ...


def entries_to_dataframe(entries: Iterable[LogEntry]) -> pd.DataFrame:
    """
    Build the entry frame used by the processing stages.

    Columns are ``ip`` (str) and ``timestamp`` (datetime64); row order is
    the order of ``entries``. An empty input still gets both columns with
    the right dtypes so ``.dt`` accessors work downstream.
    """
    rows = [asdict(e) for e in entries]
    df = pd.DataFrame(rows, columns=ENTRY_COLUMNS)
    df["ip"] = df["ip"].astype(object)
    df["timestamp"] = pd.to_datetime(df["timestamp"])
    return df


def dataframe_to_entries(df: pd.DataFrame) -> list[LogEntry]:
    return [
        LogEntry(ip=ip, timestamp=ts.to_pydatetime())
        for ip, ts in zip(df["ip"], df["timestamp"])
    ]


def datasource_to_dataframe(ds: DataSource) -> pd.DataFrame:
    return entries_to_dataframe(ds.load())
