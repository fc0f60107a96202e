"""
Comment group extraction for //-commented sources.

Scans Go lexical structure just far enough to find comments:
line comments, block comments, interpreted strings, runes and raw strings.
Comment markers inside literals are not comments.

Grouping follows the Go parser:
- A comment after code on the same line starts a trailing group that only
  takes further comments starting on that same line.
- Otherwise a comment joins the current group while no code intervenes and
  it starts at most one line after the previous comment ended.
"""

from bisect import bisect_right

from nolintlint.directives.models import CommentGroup, Position
from nolintlint.shared.domain.exceptions import SourceParseError


class _GroupBuilder:
    """Accumulates comments into groups while the scanner walks the source."""

    def __init__(self) -> None:
        self.groups: list[CommentGroup] = []
        self._lines: list[str] = []
        self._position: Position | None = None
        self._end_line = 0
        self._max_gap = 1

    def can_extend(self, start_line: int, code_since_comment: bool) -> bool:
        return bool(self._lines) and not code_since_comment and start_line <= self._end_line + self._max_gap

    def start(self, text: str, position: Position, end_line: int, trailing: bool) -> None:
        self.flush()
        self._lines = [text]
        self._position = position
        self._end_line = end_line
        self._max_gap = 0 if trailing else 1

    def extend(self, text: str, end_line: int) -> None:
        self._lines.append(text)
        self._end_line = end_line

    def flush(self) -> None:
        if self._lines:
            self.groups.append(CommentGroup(lines=tuple(self._lines), position=self._position))
        self._lines = []
        self._position = None


class CommentScanner:
    """
    Extracts comment groups from one source text.

    Usage:
        >>> groups = CommentScanner(source, "main.go").scan()
    """

    def __init__(self, source: str, filename: str = ""):
        self.source = source
        self.filename = filename
        self._line_starts = [0] + [i + 1 for i, ch in enumerate(source) if ch == "\n"]

        self._builder = _GroupBuilder()
        self._last_code_line = 0
        self._code_since_comment = True

    def position(self, offset: int) -> Position:
        """Position of a character offset (1-based line and column)."""
        line = bisect_right(self._line_starts, offset)
        column = offset - self._line_starts[line - 1] + 1
        return Position(filename=self.filename, offset=offset, line=line, column=column)

    def _line(self, offset: int) -> int:
        return bisect_right(self._line_starts, offset)

    def _error(self, message: str, offset: int) -> SourceParseError:
        position = self.position(offset)
        return SourceParseError(f"{position}: {message}", context={"position": str(position)})

    def scan(self) -> list[CommentGroup]:
        """
        Scan the whole source.

        Returns:
            Comment groups in source order

        Raises:
            SourceParseError: If a comment or literal is not terminated
        """
        src = self.source
        n = len(src)
        i = 0
        while i < n:
            ch = src[i]
            nxt = src[i + 1] if i + 1 < n else ""

            if ch == "/" and nxt == "/":
                end = src.find("\n", i)
                if end == -1:
                    end = n
                self._comment(i, end)
                i = end
            elif ch == "/" and nxt == "*":
                end = src.find("*/", i + 2)
                if end == -1:
                    raise self._error("comment not terminated", i)
                self._comment(i, end + 2)
                i = end + 2
            elif ch in " \t\r\n":
                i += 1
            elif ch == '"':
                i = self._quoted(i, '"', "string literal not terminated")
            elif ch == "'":
                i = self._quoted(i, "'", "rune literal not terminated")
            elif ch == "`":
                end = src.find("`", i + 1)
                if end == -1:
                    raise self._error("raw string literal not terminated", i)
                self._code(i)
                i = end + 1
            else:
                self._code(i)
                i += 1

        self._builder.flush()
        return self._builder.groups

    def _quoted(self, start: int, quote: str, message: str) -> int:
        src = self.source
        j = start + 1
        while True:
            if j >= len(src) or src[j] == "\n":
                raise self._error(message, start)
            # A backslash cannot escape the end of the line.
            if src[j] == "\\" and j + 1 < len(src) and src[j + 1] != "\n":
                j += 2
                continue
            if src[j] == quote:
                break
            j += 1
        self._code(start)
        return j + 1

    def _code(self, offset: int) -> None:
        # Go compares a comment's line with the start of the previous token.
        self._last_code_line = self._line(offset)
        self._code_since_comment = True

    def _comment(self, start: int, end: int) -> None:
        text = self.source[start:end].replace("\r", "")
        start_line = self._line(start)
        end_line = self._line(end - 1)

        if self._builder.can_extend(start_line, self._code_since_comment):
            self._builder.extend(text, end_line)
        else:
            trailing = self._last_code_line == start_line
            self._builder.start(text, self.position(start), end_line, trailing)
        self._code_since_comment = False


def extract_comment_groups(source: str, filename: str = "") -> list[CommentGroup]:
    """
    Extract comment groups from source text.

    Args:
        source: Source code
        filename: Name recorded in positions

    Returns:
        Comment groups in source order

    Raises:
        SourceParseError: If a comment or literal is not terminated
    """
    return CommentScanner(source, filename).scan()
