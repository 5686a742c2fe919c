"""Parse errors raised while reading instance files.

Every error is fatal: the reader stops at the first problem and reports the
1-based line together with what it expected to find there.
"""
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of fatal parse errors."""
    MALFORMED_INTEGER = "malformed_integer"
    MALFORMED_IDENTIFIER = "malformed_identifier"
    UNTERMINATED_LINE = "unterminated_line"
    MISSING_VEHICLE_SUMMARY = "missing_vehicle_summary"
    INCOMPLETE_SEPARATOR_BLOCK = "incomplete_separator_block"
    MISSING_DATA_ROWS = "missing_data_rows"
    TRAILING_CONTENT = "trailing_content"
    INVALID_ROW_FIELD_COUNT = "invalid_row_field_count"


class ParseError(ValueError):
    """Base class for all instance parse errors."""
    kind: ErrorKind = None

    def __init__(self, line: int, expected: str, found: Optional[str] = None):
        self.line = line
        self.expected = expected
        self.found = found
        message = f"line {line}: expected {expected}"
        if found is not None:
            message += f", found {found}"
        super().__init__(message)


class MalformedInteger(ParseError):
    kind = ErrorKind.MALFORMED_INTEGER


class MalformedIdentifier(ParseError):
    kind = ErrorKind.MALFORMED_IDENTIFIER


class UnterminatedLine(ParseError):
    kind = ErrorKind.UNTERMINATED_LINE


class MissingVehicleSummary(ParseError):
    kind = ErrorKind.MISSING_VEHICLE_SUMMARY


class IncompleteSeparatorBlock(ParseError):
    kind = ErrorKind.INCOMPLETE_SEPARATOR_BLOCK


class MissingDataRows(ParseError):
    kind = ErrorKind.MISSING_DATA_ROWS


class TrailingContent(ParseError):
    kind = ErrorKind.TRAILING_CONTENT


class InvalidRowFieldCount(ParseError):
    kind = ErrorKind.INVALID_ROW_FIELD_COUNT
