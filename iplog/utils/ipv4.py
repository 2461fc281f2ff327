# iplog/utils/ipv4.py

from __future__ import annotations

from iplog.errors import InvalidArgument


def ipv4_to_int(address: str) -> int:
    """
    Convert dotted-quad text to a 32-bit integer, first octet most significant.

    Raises InvalidArgument unless there are exactly four dot-separated
    decimal parts, each in 0..255.
    """
    parts = address.split(".")
    if len(parts) != 4:
        raise InvalidArgument(f"Invalid IPv4 address: '{address}'")

    value = 0
    for part in parts:
        part = part.strip()
        # ASCII digits only; int() would also take "٣" or "+3"
        if not part.isascii() or not part.isdigit():
            raise InvalidArgument(f"Invalid IPv4 address: '{address}'")
        octet = int(part)
        if octet > 255:
            raise InvalidArgument(f"Invalid IPv4 address: '{address}'")
        value = (value << 8) | octet

    return value
