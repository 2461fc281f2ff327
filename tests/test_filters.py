from __future__ import annotations

from datetime import date, datetime

import pytest

from iplog.datasources.base import dataframe_to_entries, entries_to_dataframe
from iplog.errors import InvalidArgument
from iplog.models import LogEntry
from iplog.processing.filters import filter_by_address, filter_by_time


def _frame(*rows: tuple[str, datetime]):
    return entries_to_dataframe([LogEntry(ip, ts) for ip, ts in rows])


def test_time_filter_is_inclusive_on_calendar_dates() -> None:
    df = _frame(
        ("10.0.0.1", datetime(2023, 11, 30, 23, 59)),
        ("10.0.0.2", datetime(2023, 12, 1, 0, 0)),
        ("10.0.0.3", datetime(2023, 12, 31, 23, 59, 59)),
        ("10.0.0.4", datetime(2024, 1, 1, 0, 0)),
    )
    out = filter_by_time(df, date(2023, 12, 1), date(2023, 12, 31))
    assert list(out["ip"]) == ["10.0.0.2", "10.0.0.3"]
    assert list(out.index) == [0, 1]


def test_time_filter_is_idempotent() -> None:
    df = _frame(
        ("10.0.0.1", datetime(2023, 12, 5, 12)),
        ("10.0.0.2", datetime(2023, 10, 5, 12)),
        ("10.0.0.1", datetime(2023, 12, 6, 12)),
    )
    once = filter_by_time(df, date(2023, 12, 1), date(2023, 12, 31))
    twice = filter_by_time(once, date(2023, 12, 1), date(2023, 12, 31))
    assert dataframe_to_entries(once) == dataframe_to_entries(twice)


def test_time_filter_reversed_range_is_empty() -> None:
    df = _frame(("10.0.0.1", datetime(2023, 12, 5, 12)))
    assert filter_by_time(df, date(2023, 12, 31), date(2023, 12, 1)).empty


def test_time_filter_on_empty_frame() -> None:
    assert filter_by_time(entries_to_dataframe([]), date(2023, 1, 1), date(2023, 12, 31)).empty


SUBNET_ROWS = (
    ("192.168.1.10", datetime(2023, 12, 1)),
    ("192.168.2.10", datetime(2023, 12, 1)),
    ("192.168.1.200", datetime(2023, 12, 1)),
    ("10.0.0.1", datetime(2023, 12, 1)),
)


def test_address_filter_keeps_subnet_members() -> None:
    out = filter_by_address(_frame(*SUBNET_ROWS), "192.168.1.0", "255.255.255.0")
    assert list(out["ip"]) == ["192.168.1.10", "192.168.1.200"]


def test_address_filter_does_not_mask_start_address() -> None:
    out = filter_by_address(_frame(*SUBNET_ROWS), "192.168.1.5", "255.255.255.0")
    assert out.empty


@pytest.mark.parametrize("start, mask", [(None, "255.255.255.0"), ("192.168.1.0", None), (None, None)])
def test_address_filter_skipped_without_both_values(start, mask) -> None:
    df = _frame(*SUBNET_ROWS)
    assert filter_by_address(df, start, mask) is df


def test_malformed_entry_address_aborts() -> None:
    df = _frame(("192.168.1.10", datetime(2023, 12, 1)), ("bad-ip", datetime(2023, 12, 1)))
    with pytest.raises(InvalidArgument, match="bad-ip"):
        filter_by_address(df, "192.168.1.0", "255.255.255.0")


def test_malformed_start_fails_even_on_empty_frame() -> None:
    with pytest.raises(InvalidArgument):
        filter_by_address(entries_to_dataframe([]), "192.168.1", "255.255.255.0")
