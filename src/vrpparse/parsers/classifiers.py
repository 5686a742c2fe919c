"""Recognizers for the line groups of an instance file.

Each classifier consumes whole physical lines from a `Scanner`. The header and
separator blocks are optional and decided by looking at the next token only;
once a block is entered it is never backed out of.
"""
import logging
from typing import Optional

from ..errors import (
    IncompleteSeparatorBlock,
    InvalidRowFieldCount,
    MalformedInteger,
    MissingVehicleSummary,
    UnterminatedLine,
)
from ..models import NodeRecord, VehicleSummary
from .scanner import Scanner, TokenKind, integer_fields, split_tokens

logger = logging.getLogger(__name__)

HEADER_SKIPPED_LINES = 3
SEPARATOR_SKIPPED_LINES = 3
MANDATORY_FIELDS = ('id', 'x', 'y', 'demand', 'ready_time', 'due_date', 'service_time')
ROW_WIDTHS = (7, 9)

_ROW_EXPECTATION = "7 or 9 integer fields"


def is_row_line(text: str) -> bool:
    """Whether a line holds nothing but a complete data row."""
    fields = integer_fields(text)
    return fields is not None and len(fields) in ROW_WIDTHS


def read_header(scanner: Scanner) -> Optional[str]:
    """Read the optional four-line preamble and return the instance name."""
    kind = scanner.peek_kind()
    if kind is not TokenKind.IDENTIFIER:
        logger.debug(f"No header block: line {scanner.line} starts with a {kind.value} token")
        return None

    name = scanner.identifier("instance name")
    scanner.skip_rest_of_line("end of the instance name line")
    for _ in range(HEADER_SKIPPED_LINES):
        scanner.skip_rest_of_line("header line")
    logger.debug(f"Header block for instance {name} ends on line {scanner.line - 1}")
    return name


def read_vehicle_summary(scanner: Scanner) -> VehicleSummary:
    """Read the mandatory '<vehicles> <capacity> ...' line."""
    expected = "vehicle summary line '<vehicles> <capacity>'"
    line = scanner.line
    if scanner.peek_kind() is TokenKind.END:
        raise MissingVehicleSummary(line, expected, "end of input")
    if is_row_line(scanner.peek_line()):
        raise MissingVehicleSummary(line, expected, "a data row")

    vehicle_count = scanner.integer("vehicle count")
    capacity = scanner.integer("vehicle capacity")
    scanner.skip_rest_of_line("end of the vehicle summary line")
    return VehicleSummary(vehicle_count, capacity, line)


def read_separator(scanner: Scanner) -> bool:
    """Read the optional separator block after the vehicle summary.

    The block is a blank line followed by exactly three lines of arbitrary
    content. It is either fully present or fully absent.
    """
    if scanner.peek_kind() is not TokenKind.NEWLINE:
        return False

    start = scanner.line
    expected = f"blank line followed by {SEPARATOR_SKIPPED_LINES} separator lines"
    scanner.end_line()
    for seen in range(SEPARATOR_SKIPPED_LINES):
        if scanner.at_end():
            raise IncompleteSeparatorBlock(start, expected, f"{seen} line(s) before end of input")
        if is_row_line(scanner.peek_line()):
            raise IncompleteSeparatorBlock(
                start, expected, f"{seen} line(s) before the data row on line {scanner.line}"
            )
        try:
            scanner.skip_rest_of_line("separator line")
        except UnterminatedLine as e:
            raise IncompleteSeparatorBlock(
                start, expected, f"{seen} terminated line(s) before end of input"
            ) from e
    logger.debug(f"Separator block on lines {start}-{scanner.line - 1}")
    return True


def _row_field(scanner: Scanner, name: str, line: int, count: int) -> int:
    if scanner.peek_kind() in (TokenKind.NEWLINE, TokenKind.END):
        raise InvalidRowFieldCount(line, _ROW_EXPECTATION, f"{count} fields")
    return scanner.integer(f"integer field '{name}'")


def read_row(scanner: Scanner, strict: bool = False) -> NodeRecord:
    """Read one data row of 7 integers plus an optional pickup/delivery pair.

    With ``strict`` the row must end with a line terminator even when it is
    the last line of the file.
    """
    line = scanner.line
    values = [
        _row_field(scanner, name, line, count)
        for count, name in enumerate(MANDATORY_FIELDS)
    ]
    pair = scanner.try_integer_pair("pickup/delivery index")
    if pair is not None:
        values.extend(pair)

    kind = scanner.peek_kind()
    if kind is TokenKind.NEWLINE:
        scanner.end_line()
    elif kind is TokenKind.END:
        if strict:
            raise UnterminatedLine(line, "line terminator after the data row", "end of input")
    else:
        rest = scanner.peek_line()
        extra = integer_fields(rest)
        if extra:
            raise InvalidRowFieldCount(line, _ROW_EXPECTATION, f"{len(values) + len(extra)} fields")
        bad = next(token for token in split_tokens(rest) if integer_fields(token) is None)
        raise MalformedInteger(line, "integer field or end of the data row", repr(bad))

    return NodeRecord(*values, line=line)
