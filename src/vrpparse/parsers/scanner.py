"""Lexical scanner over the raw text of an instance file.

The scanner keeps a single forward-moving cursor. Spaces and tabs separate
tokens and are skipped before every token; the newline character is the only
line terminator. The only backtracking is `try_integer_pair`, which restores
the cursor when the optional trailing pair of a row is not there.
"""
import re
from enum import Enum
from typing import List, Optional, Tuple

from ..errors import MalformedIdentifier, MalformedInteger, UnterminatedLine

_BLANKS = re.compile(r"[ \t]*")
_INTEGER = re.compile(r"-?[0-9]+")
_IDENTIFIER = re.compile(r"[A-Za-z0-9_]+")
_NON_BLANK = re.compile(r"[^ \t\n]+")

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class TokenKind(Enum):
    """Shape of the next token, as seen by one-token lookahead."""
    INTEGER = "integer"
    IDENTIFIER = "identifier"
    NEWLINE = "newline"
    END = "end"
    OTHER = "other"


def split_tokens(text: str) -> List[str]:
    """Split one line into tokens on spaces and tabs only."""
    return _NON_BLANK.findall(text)


def integer_fields(text: str) -> Optional[List[int]]:
    """Integers on one line, read the way `Scanner.integer` reads them.

    Adjacent signed integers such as ``1-2`` count as two fields. Returns
    ``None`` when anything other than integers and blanks is on the line.
    """
    fields = []
    pos = _BLANKS.match(text).end()
    while pos < len(text):
        match = _INTEGER.match(text, pos)
        if match is None:
            return None
        fields.append(int(match.group()))
        pos = _BLANKS.match(text, match.end()).end()
    return fields


class Scanner:
    """Cursor over the source text with a 1-based line counter."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1

    def skip_blanks(self) -> None:
        self.pos = _BLANKS.match(self.text, self.pos).end()

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek_kind(self) -> TokenKind:
        """Classify the next token without consuming it.

        An integer immediately followed by identifier characters (``12ab``)
        is identifier-shaped, not integer-shaped.
        """
        self.skip_blanks()
        if self.at_end():
            return TokenKind.END
        if self.text[self.pos] == "\n":
            return TokenKind.NEWLINE
        match = _INTEGER.match(self.text, self.pos)
        if match and not _IDENTIFIER.match(self.text, match.end()):
            return TokenKind.INTEGER
        if _IDENTIFIER.match(self.text, self.pos):
            return TokenKind.IDENTIFIER
        return TokenKind.OTHER

    def starts_integer(self) -> bool:
        """Whether the next token begins with an integer."""
        return self._match_integer() is not None

    def peek_line(self) -> str:
        """Text from the cursor up to, not including, the next terminator."""
        end = self.text.find("\n", self.pos)
        return self.text[self.pos:] if end == -1 else self.text[self.pos:end]

    def describe_next(self) -> str:
        """Human readable description of what the cursor is looking at."""
        self.skip_blanks()
        if self.at_end():
            return "end of input"
        if self.text[self.pos] == "\n":
            return "end of line"
        return repr(_NON_BLANK.match(self.text, self.pos).group())

    def only_blanks_remain(self) -> bool:
        return not self.text[self.pos:].strip(" \t\n")

    def on_last_line(self) -> bool:
        """Whether only blank lines follow the line under the cursor."""
        end = self.text.find("\n", self.pos)
        return end == -1 or not self.text[end + 1:].strip(" \t\n")

    def skip_to_end(self) -> None:
        self.line += self.text.count("\n", self.pos)
        self.pos = len(self.text)

    def _match_integer(self):
        self.skip_blanks()
        return _INTEGER.match(self.text, self.pos)

    def integer(self, what: str) -> int:
        """Consume one integer token.

        Raises:
            MalformedInteger: if the next token is not an integer or does not
                fit a signed 32-bit value.
        """
        match = self._match_integer()
        if match is None:
            raise MalformedInteger(self.line, what, self.describe_next())
        value = int(match.group())
        if not INT32_MIN <= value <= INT32_MAX:
            raise MalformedInteger(self.line, f"{what} within the 32-bit range", match.group())
        self.pos = match.end()
        return value

    def try_integer_pair(self, what: str) -> Optional[Tuple[int, int]]:
        """Consume two integers, or nothing at all if either is missing."""
        mark = self.pos
        if self._match_integer() is None:
            self.pos = mark
            return None
        first = self.integer(what)
        if self._match_integer() is None:
            self.pos = mark
            return None
        return first, self.integer(what)

    def identifier(self, what: str) -> str:
        self.skip_blanks()
        match = _IDENTIFIER.match(self.text, self.pos)
        if match is None:
            raise MalformedIdentifier(self.line, what, self.describe_next())
        self.pos = match.end()
        return match.group()

    def end_line(self, what: str = "line terminator") -> None:
        """Consume the line terminator that must follow the current token."""
        self.skip_blanks()
        if self.at_end():
            raise UnterminatedLine(self.line, what, "end of input")
        if self.text[self.pos] != "\n":
            raise UnterminatedLine(self.line, what, self.describe_next())
        self.pos += 1
        self.line += 1

    def skip_rest_of_line(self, what: str = "line terminator") -> None:
        """Discard everything up to and including the next line terminator."""
        end = self.text.find("\n", self.pos)
        if end == -1:
            self.pos = len(self.text)
            raise UnterminatedLine(self.line, what, "end of input")
        self.pos = end + 1
        self.line += 1
