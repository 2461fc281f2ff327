# iplog/export.py

from __future__ import annotations
from pathlib import Path
from typing import Mapping, Union

from iplog.errors import IOFailure
from iplog.utils.logging import get_logger

log = get_logger(__name__)


PathLike = Union[str, Path]


def format_counts(counts: Mapping[str, int]) -> list[str]:
    return [f"{ip}: {n}" for ip, n in counts.items()]


def write_counts(counts: Mapping[str, int], path: PathLike) -> None:
    """
    Write one ``<address>: <count>`` line per address, in mapping order.

    Overwrites ``path``. The parent directory must already exist.
    An empty mapping leaves an empty file.
    """
    out_path = Path(path)
    log.info("Saving %d address counts to %s", len(counts), out_path)

    try:
        with out_path.open("w", encoding="utf-8", newline="\n") as f:
            for line in format_counts(counts):
                f.write(line + "\n")
    except OSError as e:
        raise IOFailure(f"Error writing output file: {e}") from e

    if not counts:
        log.warning("No addresses matched; wrote empty file %s", out_path)
    else:
        log.debug("Counts written successfully to %s", out_path)
