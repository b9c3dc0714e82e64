"""Source line lookup and UTF-8 byte offsets for diagnostics."""

from typing import Final


class LineIndex:
    """
    Start offsets of every line in a source text.

    Only ``\\n`` starts a new line, matching the parser's line counting. A
    ``\\r`` before the newline is dropped from the text returned by
    line_text().
    """

    def __init__(self, text: str) -> None:
        self.text: Final = text
        self.line_starts = [0]
        self._is_ascii_only = text.isascii()

        newline = text.find("\n")
        while newline != -1:
            self.line_starts.append(newline + 1)
            newline = text.find("\n", newline + 1)

    def line_text(self, line: int) -> str:
        """Text of a 1-based line; lines outside the text are empty."""
        if not 1 <= line <= len(self.line_starts):
            return ""
        start = self.line_starts[line - 1]
        if line < len(self.line_starts):
            end = self.line_starts[line] - 1
        else:
            end = len(self.text)
        return self.text[start:end].removesuffix("\r")

    def byte_offset(self, offset: int) -> int:
        """Position of a character offset in the UTF-8 encoded text."""
        if self._is_ascii_only:
            return offset
        return len(self.text[:offset].encode("utf-8", "surrogatepass"))
