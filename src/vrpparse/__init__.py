"""vrpparse package

Reads Solomon / Gehring-Homberger (VRPTW) and Li-Lim (PDPTW) instance files
into immutable `Instance` values for downstream routing code.

Key entry points
----------------
• `parse` turns the text of an instance file into an `Instance`.
• `read_instance` does the same for a path on disk.
• `ParseError` and its subclasses report the first problem found, with its line.
"""

from .errors import (
    ErrorKind,
    IncompleteSeparatorBlock,
    InvalidRowFieldCount,
    MalformedIdentifier,
    MalformedInteger,
    MissingDataRows,
    MissingVehicleSummary,
    ParseError,
    TrailingContent,
    UnterminatedLine,
)
from .models import Instance, NodeRecord, ParseWarning, WarningKind
from .parsers import parse, read_instance

__all__ = [
    # Models
    "Instance",
    "NodeRecord",
    "ParseWarning",
    "WarningKind",
    # Parsing
    "parse",
    "read_instance",
    # Errors
    "ErrorKind",
    "ParseError",
    "MalformedInteger",
    "MalformedIdentifier",
    "UnterminatedLine",
    "MissingVehicleSummary",
    "IncompleteSeparatorBlock",
    "MissingDataRows",
    "TrailingContent",
    "InvalidRowFieldCount"
]
