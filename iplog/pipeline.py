# iplog/pipeline.py

from __future__ import annotations
from typing import Callable

import pandas as pd
import typer

from iplog.arguments import describe_config
from iplog.datasources.base import dataframe_to_entries, datasource_to_dataframe
from iplog.datasources.log_file import LogFileSource
from iplog.export import format_counts, write_counts
from iplog.models import AnalysisConfig, CountTable
from iplog.processing.filters import filter_by_address, filter_by_time
from iplog.processing.stats import count_addresses
from iplog.utils.dates import format_timestamp
from iplog.utils.logging import get_logger

log = get_logger(__name__)

Echo = Callable[[str], None]


def _echo_entries(echo: Echo, df: pd.DataFrame, sep: str) -> None:
    for entry in dataframe_to_entries(df):
        echo(f"{entry.ip}{sep}{format_timestamp(entry.timestamp)}")


def run_analysis(config: AnalysisConfig, echo: Echo = typer.echo) -> CountTable:
    """
    Load, filter, count and write, reporting each stage through ``echo``.

    Returns the counts that were written. Any IplogError from a stage
    propagates unchanged; an output file is only written once every
    earlier stage succeeded.
    """
    for line in describe_config(config):
        echo(line)

    # 1) load
    df = datasource_to_dataframe(LogFileSource(path=config.log_path))
    if df.empty:
        log.warning("No entries loaded from %s", config.log_path)

    echo("")
    echo("Log File Contents:")
    _echo_entries(echo, df, sep=":")
    echo("")

    # 2) filter
    df = filter_by_time(df, config.time_start, config.time_end)
    df = filter_by_address(df, config.address_start, config.address_mask)

    echo("Filtered Log Entries:")
    _echo_entries(echo, df, sep=": ")
    echo("")

    # 3) count
    counts = count_addresses(df)

    echo("IP Address Counts:")
    for line in format_counts(counts):
        echo(line)
    echo("")

    # 4) export
    write_counts(counts, config.output_path)
    echo("Analysis complete.")
    return counts
