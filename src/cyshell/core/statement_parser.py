"""
Statement parser - incremental splitting of REPL input into statements.

A statement is either a single-line meta-command (``:help``, ``:begin`` ...)
or a script fragment terminated by a semicolon that is not quoted, commented
or escaped. Text arrives in chunks (normally one line at a time) and quotes or
comments may span several chunks, so all scanning state lives on the parser.
"""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)

SEMICOLON = ";"
BACKSLASH = "\\"
LINE_COMMENT_START = "//"
LINE_COMMENT_END = "\n"
BLOCK_COMMENT_START = "/*"
BLOCK_COMMENT_END = "*/"
BACKTICK = "`"
DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"

META_COMMAND_PREFIX = ":"
LINE_TERMINATORS = frozenset("\n\r\u2028\u2029")

_COMMENT_DELIMITERS = {
    LINE_COMMENT_START: LINE_COMMENT_END,
    BLOCK_COMMENT_START: BLOCK_COMMENT_END,
}
_QUOTE_CHARS = frozenset((BACKTICK, DOUBLE_QUOTE, SINGLE_QUOTE))
_NO_COMMENT = -1


def is_meta_command(chunk: str) -> bool:
    """Return True if the whole chunk is a single meta-command line.

    The accepted shape is optional whitespace, a colon, at least one character
    that is not a line terminator, then optional whitespace up to the end.
    """
    pos = 0
    end = len(chunk)
    while pos < end and chunk[pos].isspace():
        pos += 1
    if pos == end or chunk[pos] != META_COMMAND_PREFIX:
        return False
    pos += 1

    body_start = pos
    while pos < end and chunk[pos] not in LINE_TERMINATORS:
        pos += 1
    if pos == body_start:
        return False

    # Everything after the first line terminator must be whitespace
    return all(ch.isspace() for ch in chunk[pos:])


class StatementParser(Protocol):
    """Interface a read loop uses to turn input chunks into statements."""

    def ingest(self, chunk: str) -> None: ...

    def has_pending(self) -> bool: ...

    def take_pending(self) -> list[str]: ...

    def has_open_text(self) -> bool: ...

    def reset(self) -> None: ...


class ShellStatementParser:
    """Cypher-shell aware parser detecting meta-commands or script statements.

    Feed text with :meth:`ingest`, then drain finished statements with
    :meth:`take_pending`. Comment text is removed from the statements it
    appears in, quoted text is kept verbatim.
    """

    def __init__(self) -> None:
        self._buffer: list[str] = []
        self._pending: list[str] = []
        self._awaited: str | None = None
        self._comment_start = _NO_COMMENT
        self._prev = ""
        self._current = ""
        self._escaped = False

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def awaited_delimiter(self) -> str | None:
        """Text that will close the open quote or comment, None if neither is open."""
        return self._awaited

    @property
    def in_comment(self) -> bool:
        return self._awaited in (LINE_COMMENT_END, BLOCK_COMMENT_END)

    @property
    def in_quote(self) -> bool:
        return self._awaited is not None and not self.in_comment

    @property
    def buffered_text(self) -> str:
        """Statement text collected so far, with closed comments already removed."""
        return "".join(self._buffer)

    def has_pending(self) -> bool:
        return bool(self._pending)

    def take_pending(self) -> list[str]:
        """Return completed statements in order and forget them."""
        result = self._pending
        self._pending = []
        return result

    def has_open_text(self) -> bool:
        """True if non-whitespace text has been seen since the last statement."""
        return bool(self.buffered_text.strip())

    def reset(self) -> None:
        """Drop every piece of state, as if freshly constructed."""
        self._buffer = []
        self._pending = []
        self._awaited = None
        self._comment_start = _NO_COMMENT
        self._prev = ""
        self._current = ""
        self._escaped = False
        logger.debug("Statement parser reset")

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def ingest(self, chunk: str) -> None:
        """Parse the next chunk of text, normally one line including its newline.

        Completed statements are queued for :meth:`take_pending`; anything left
        over stays buffered until a later chunk completes it.
        """
        if not self.has_open_text() and is_meta_command(chunk):
            logger.debug("Meta-command recognized: %r", chunk)
            self._pending.append(chunk)
            return

        for char in chunk:
            self._buffer.append(char)
            self._prev, self._current = self._current, char

            if self._escaped:
                self._escaped = False
                continue

            if self._handle_comment():
                continue

            if char == BACKSLASH:
                # Escapes work everywhere except inside comments, quotes included
                self._escaped = True
                continue

            if self._handle_quote():
                continue

            if char == SEMICOLON:
                self._complete_statement()
                continue

            self._open_delimiter()

    def _handle_comment(self) -> bool:
        if not self.in_comment:
            return False

        if self._closes_delimiter():
            del self._buffer[self._comment_start :]
            logger.debug("Comment closed; %d characters kept", len(self._buffer))
            self._awaited = None
            self._comment_start = _NO_COMMENT
        return True

    def _handle_quote(self) -> bool:
        if not self.in_quote:
            return False

        if self._closes_delimiter():
            self._awaited = None
        return True

    def _closes_delimiter(self) -> bool:
        expected = self._awaited
        if expected is None:
            return False
        if len(expected) == 1:
            return expected == self._current
        return expected == self._prev + self._current

    def _complete_statement(self) -> None:
        statement = self.buffered_text
        self._pending.append(statement)
        self._buffer = []
        logger.debug("Statement completed: %r", statement)

    def _open_delimiter(self) -> None:
        """Start a quote or comment if the last one or two characters open one."""
        closer = _COMMENT_DELIMITERS.get(self._prev + self._current)
        if closer is not None:
            # Both opening characters normally sit at the end of the buffer
            self._comment_start = max(len(self._buffer) - 2, 0)
            logger.debug("Comment opened, awaiting %r", closer)
        elif self._current in _QUOTE_CHARS:
            closer = self._current
        self._awaited = closer
