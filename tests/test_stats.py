from __future__ import annotations

from datetime import datetime

from iplog.datasources.base import entries_to_dataframe
from iplog.models import LogEntry
from iplog.processing.stats import count_addresses


def test_counts_duplicates_in_first_seen_order() -> None:
    ts = datetime(2023, 12, 1)
    df = entries_to_dataframe([
        LogEntry("10.0.0.2", ts),
        LogEntry("10.0.0.1", ts),
        LogEntry("10.0.0.2", ts),
        LogEntry("10.0.0.1", ts),
        LogEntry("10.0.0.2", ts),
    ])
    counts = count_addresses(df)
    assert counts == {"10.0.0.2": 3, "10.0.0.1": 2}
    assert list(counts) == ["10.0.0.2", "10.0.0.1"]


def test_empty_frame_gives_empty_counts() -> None:
    assert count_addresses(entries_to_dataframe([])) == {}
