# iplog/processing/filters.py

from __future__ import annotations
from datetime import date
from typing import Optional

import pandas as pd

from iplog.utils.ipv4 import ipv4_to_int
from iplog.utils.logging import get_logger

log = get_logger(__name__)


def filter_by_time(
        df: pd.DataFrame,
        time_start: date,
        time_end: date,
        ts_col: str = "timestamp",
) -> pd.DataFrame:
    """
    Keep rows whose calendar date is within [time_start, time_end].

    Time of day is ignored, so an entry at 23:59 on ``time_end`` is kept.
    """
    days = df[ts_col].dt.normalize()
    mask = (days >= pd.Timestamp(time_start)) & (days <= pd.Timestamp(time_end))
    out = df[mask].reset_index(drop=True)
    log.info("Time filter %s..%s kept %d of %d entries", time_start, time_end, len(out), len(df))
    return out


def filter_by_address(
        df: pd.DataFrame,
        address_start: Optional[str],
        address_mask: Optional[str],
        ip_col: str = "ip",
) -> pd.DataFrame:
    """
    Keep rows where ``ip & mask == address_start``.

    The start address is compared as given, not masked: with mask
    255.255.255.0, start 192.168.1.0 matches 192.168.1.x but
    192.168.1.5 matches nothing.

    If either the start or the mask is None the frame is returned untouched.
    Raises InvalidArgument for any malformed address, including ones in
    the frame.
    """
    if address_start is None or address_mask is None:
        log.debug("No address start/mask given; skipping address filter")
        return df

    start = ipv4_to_int(address_start)
    mask = ipv4_to_int(address_mask)

    if df.empty:
        return df

    ints = df[ip_col].map(ipv4_to_int).astype("int64")
    out = df[(ints & mask) == start].reset_index(drop=True)
    log.info(
        "Address filter %s/%s kept %d of %d entries",
        address_start, address_mask, len(out), len(df),
    )
    return out
