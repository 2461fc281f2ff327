# iplog/arguments.py

from __future__ import annotations
from pathlib import Path
from typing import Sequence

from iplog.errors import InvalidArgument
from iplog.models import AnalysisConfig
from iplog.utils.dates import parse_cli_date, format_cli_date
from iplog.utils.logging import get_logger, LEVEL_NAMES

log = get_logger(__name__)

USAGE = (
    "Usage: iplog --file-log [path] --file-output [path] "
    "[--address-start <address>] [--address-mask <mask>] "
    "--time-start <start_date> --time-end <end_date> [--log-level <level>]"
)

# flag -> AnalysisConfig field
FLAGS = {
    "--file-log": "log_path",
    "--file-output": "output_path",
    "--address-start": "address_start",
    "--address-mask": "address_mask",
    "--time-start": "time_start",
    "--time-end": "time_end",
    "--log-level": "log_level",
}


def parse_arguments(tokens: Sequence[str]) -> AnalysisConfig:
    """
    Turn ``--flag value`` pairs into an AnalysisConfig.

    Tokens are consumed strictly two at a time; the same flag given twice
    keeps the last value. Address text is not checked here, a malformed
    address only fails once the address filter converts it.

    Raises InvalidArgument for unknown flags, a trailing flag without a
    value, a date that isn't ``dd.mm.yyyy``, an unknown log level, or a
    missing mandatory setting.
    """
    values: dict[str, object] = {}

    for i in range(0, len(tokens), 2):
        flag = tokens[i]
        if flag not in FLAGS:
            raise InvalidArgument(f"Unknown argument: {flag}")
        if i + 1 >= len(tokens):
            raise InvalidArgument(f"Missing value for argument: {flag}")

        field = FLAGS[flag]
        values[field] = _convert(flag, tokens[i + 1])
        log.debug("%s -> %s=%r", flag, field, values[field])

    if not values.get("log_path"):
        raise InvalidArgument("File log path is missing.")
    if not values.get("output_path"):
        raise InvalidArgument("File output path is missing.")
    if "time_start" not in values:
        raise InvalidArgument("Start time is missing or invalid.")
    if "time_end" not in values:
        raise InvalidArgument("End time is missing or invalid.")

    return AnalysisConfig(
        log_path=Path(values["log_path"]),
        output_path=Path(values["output_path"]),
        time_start=values["time_start"],
        time_end=values["time_end"],
        address_start=values.get("address_start"),
        address_mask=values.get("address_mask"),
        log_level=values.get("log_level", "WARNING"),
    )


def _convert(flag: str, raw: str) -> object:
    if flag in ("--time-start", "--time-end"):
        try:
            return parse_cli_date(raw)
        except ValueError as e:
            raise InvalidArgument(
                f"Invalid date for {flag}: '{raw}' (expected dd.mm.yyyy)"
            ) from e

    if flag == "--log-level":
        level = raw.strip().upper()
        if level not in LEVEL_NAMES:
            raise InvalidArgument(
                f"Invalid log level: '{raw}' (expected one of {', '.join(LEVEL_NAMES)})"
            )
        return level

    return raw


def describe_config(config: AnalysisConfig) -> list[str]:
    """Human-readable summary echoed before the analysis starts."""
    lines = [
        f"Log File Path: {config.log_path}",
        f"Output File Path: {config.output_path}",
    ]
    if config.address_start:
        lines.append(f"Address Start: {config.address_start}")
    if config.address_mask:
        lines.append(f"Address Mask: {config.address_mask}")
    lines.append(f"Time Start: {format_cli_date(config.time_start)}")
    lines.append(f"Time End: {format_cli_date(config.time_end)}")
    return lines
