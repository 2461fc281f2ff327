# iplog/errors.py


class IplogError(Exception):
    """Base class for every error reported to the user as ``Error: <message>``."""


class InvalidArgument(IplogError):
    """Bad or missing command-line flags, bad dates, malformed IPv4 text."""


class IOFailure(IplogError):
    """Log/output file could not be read or written, or a log timestamp is unparseable."""
