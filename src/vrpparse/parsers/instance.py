"""Parser for Solomon / Gehring-Homberger and Li-Lim instance files.

Layout of a file, line by line::

    [<name> ...]              optional header: name line + 3 arbitrary lines
    [...]
    <vehicles> <capacity> ... mandatory vehicle summary
    [<blank>]                 optional separator: blank line + 3 arbitrary lines
    [...]
    <id> <x> <y> <demand> <ready> <due> <service> [<pickup> <delivery>]
    ...                       one or more data rows, then end of input
"""
import logging
from pathlib import Path
from typing import List, Optional, Union

from ..config.parameters import Parameters
from ..errors import MissingDataRows, TrailingContent
from ..models import Instance, NodeRecord
from ..validation import validate
from .classifiers import is_row_line, read_header, read_row, read_separator, read_vehicle_summary
from .scanner import Scanner, TokenKind

logger = logging.getLogger(__name__)


def _continues_rows(scanner: Scanner, nodes: List[NodeRecord]) -> bool:
    """Whether an integer-led line is read as a data row.

    The first row, and any line with more content after it, is committed so a
    broken row reports its own error. The last non-blank line only counts
    when it is a complete row; otherwise it is trailing content.
    """
    if not nodes or is_row_line(scanner.peek_line()):
        return True
    return not scanner.on_last_line()


def _read_rows(scanner: Scanner, strict: bool) -> List[NodeRecord]:
    nodes = []
    while True:
        kind = scanner.peek_kind()
        if kind is TokenKind.END:
            break
        if scanner.starts_integer() and _continues_rows(scanner, nodes):
            nodes.append(read_row(scanner, strict))
            continue
        if not nodes:
            raise MissingDataRows(scanner.line, "at least one data row", scanner.describe_next())
        if kind is TokenKind.NEWLINE and not strict and scanner.only_blanks_remain():
            scanner.skip_to_end()
            break
        raise TrailingContent(scanner.line, "a data row or end of input", scanner.describe_next())

    if not nodes:
        raise MissingDataRows(scanner.line, "at least one data row", "end of input")
    return nodes


def parse(text: str, params: Optional[Parameters] = None) -> Instance:
    """Parse the text of an instance file.

    Args:
        text: Full file contents with ``\\n`` line terminators.
        params: Reader configuration; defaults apply when omitted.

    Returns:
        The parsed instance, with any validation warnings attached.

    Raises:
        ParseError: on the first structural or lexical error.
    """
    if params is None:
        params = Parameters()

    scanner = Scanner(text)
    name = read_header(scanner)
    summary = read_vehicle_summary(scanner)
    read_separator(scanner)
    nodes = _read_rows(scanner, params.strict_line_endings)

    instance = Instance(
        name=name,
        vehicle_count=summary.vehicle_count,
        capacity=summary.capacity,
        nodes=tuple(nodes),
        warnings=validate(summary, nodes, params),
    )
    logger.info(
        f"Parsed instance {name or '<unnamed>'}: "
        f"{instance.row_count} rows, vehicles={instance.vehicle_count}, "
        f"capacity={instance.capacity}"
    )
    return instance


def read_instance(path: Union[str, Path], params: Optional[Parameters] = None) -> Instance:
    """Read and parse an instance file.

    Files are read with universal newlines, so CRLF files parse like LF ones.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Instance file not found: {path}")
    if params is None:
        params = Parameters()

    with open(path, encoding=params.encoding) as f:
        text = f.read()
    logger.debug(f"Read {len(text)} characters from {path}")
    return parse(text, params)
