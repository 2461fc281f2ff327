# iplog/processing/stats.py

from __future__ import annotations

import pandas as pd

from iplog.models import CountTable
from iplog.utils.logging import get_logger

log = get_logger(__name__)


def count_addresses(df: pd.DataFrame, ip_col: str = "ip") -> CountTable:
    """
    Count rows per address, keys in the order each address first appears.
    """
    if df.empty:
        return {}

    sizes = df.groupby(ip_col, sort=False).size()
    counts = {str(ip): int(n) for ip, n in sizes.items()}
    log.info("Counted %d distinct addresses over %d entries", len(counts), len(df))
    return counts
