# easyfts/query/scanner.py
"""Character cursor used by the query parser."""

NULL_CHAR = "\0"


class Scanner:
    """Cursor over a string with lookahead and block extraction.

    Every move is clamped to the end of the text, so callers can advance
    freely without bounds checks. Reading past the end yields ``NULL_CHAR``.
    """

    def __init__(self, text: str | None = None) -> None:
        self.reset(text)

    def reset(self, text: str | None = None) -> None:
        """Set the text and move back to its start."""
        self.text = text or ""
        self.position = 0

    @property
    def end_of_text(self) -> bool:
        return self.position >= len(self.text)

    def peek(self, ahead: int = 0) -> str:
        pos = self.position + ahead
        return self.text[pos] if pos < len(self.text) else NULL_CHAR

    def extract(self, start: int, end: int) -> str:
        """Return the text in the half-open range [start, end)."""
        return self.text[start:end]

    def move_ahead(self, ahead: int = 1) -> None:
        self.position = min(self.position + ahead, len(self.text))

    def move_past_whitespace(self) -> None:
        while self.peek().isspace():
            self.move_ahead()

    def move_past(self, chars: str) -> None:
        """Skip over a run of any of the given characters."""
        while not self.end_of_text and self.peek() in chars:
            self.move_ahead()

    def move_to(self, chars: str) -> None:
        """Advance to the next occurrence of any of the given characters."""
        while not self.end_of_text and self.peek() not in chars:
            self.move_ahead()

    def move_to_whitespace(self) -> None:
        while not self.end_of_text and not self.peek().isspace():
            self.move_ahead()

    def extract_quoted(self, escape: bool = False) -> str:
        """Extract the text between the quote under the cursor and its match.

        Args:
            escape: Read a doubled quote as one literal quote character.

        Returns:
            The quoted text without its delimiters. The cursor is left on the
            closing quote, or at the end of the text when it is unterminated.
        """
        quote = self.peek()
        self.move_ahead()
        if not escape:
            start = self.position
            self.move_to(quote)
            return self.extract(start, self.position)

        parts: list[str] = []
        start = self.position
        while True:
            self.move_to(quote)
            parts.append(self.extract(start, self.position))
            if self.end_of_text or self.peek(1) != quote:
                break
            # Doubled quote: keep one and carry on
            parts.append(quote)
            self.move_ahead(2)
            start = self.position
        return "".join(parts)

    def extract_block(self, open_char: str, close_char: str) -> str:
        """Extract the text inside a nested block of delimiters.

        The cursor must be on ``open_char``. Delimiters inside double-quoted
        spans do not count toward nesting. On return the cursor is on the
        matching ``close_char``, or at the end of the text if unbalanced.
        """
        depth = 1
        self.move_ahead()
        start = self.position
        while not self.end_of_text:
            char = self.peek()
            if char == open_char:
                depth += 1
            elif char == close_char:
                depth -= 1
                if depth == 0:
                    break
            elif char == '"':
                self.extract_quoted()
            self.move_ahead()
        return self.extract(start, self.position)
