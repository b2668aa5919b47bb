"""Quote-aware field tokenizer driven by a separator predicate.

Fields are runs of non-separator characters. Single- and double-quoted spans
are never split, and a field fully enclosed in one pair of matching quotes is
emitted without them. Backslashes are kept verbatim: a backslash only stops
the quote right after it from opening or closing a quoted span.

The cursor is a byte offset into the UTF-8 encoded input, so error offsets
refer to bytes rather than characters.
"""

from __future__ import annotations

from typing import Callable

from shell_fields.domain.exceptions import InvalidEncodingError, UnterminatedQuoteError

SeparatorPredicate = Callable[[str], bool]

QUOTES = ('"', "'")
ESCAPE = "\\"

_QUOTE_BYTES = frozenset(b"\"'")


def is_space(rune: str) -> bool:
    return rune.isspace()


def make_separator(extra: str = "") -> SeparatorPredicate:
    """Return a predicate matching whitespace and any character of *extra*."""
    if not extra:
        return is_space
    extra_chars = frozenset(extra)

    def is_separator(rune: str) -> bool:
        return rune.isspace() or rune in extra_chars

    return is_separator


def _rune_length(lead: int) -> int:
    """Length of the UTF-8 sequence started by *lead*, 0 for an invalid lead byte."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


class Scanner:
    """Cursor over UTF-8 bytes with the three scans the tokenizer needs.

    Each scan advances ``pos`` and returns the new position.
    """

    def __init__(self, data: bytes, is_separator: SeparatorPredicate) -> None:
        self._data = data
        self._is_separator = is_separator
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self._data)

    def prefix(self, end: int | None = None) -> str:
        """Text consumed before *end* (the cursor by default)."""
        return self._data[: self.pos if end is None else end].decode("utf-8")

    def span(self, start: int, end: int) -> str:
        return self._data[start:end].decode("utf-8")

    def decode_rune(self, phase: str) -> tuple[str, int]:
        """Decode the character at the cursor without advancing.

        Returns the character and its encoded size in bytes.
        """
        data = self._data
        pos = self.pos
        size = _rune_length(data[pos])
        if size == 0:
            raise InvalidEncodingError(data[pos], pos, self.prefix(), phase)
        try:
            return data[pos : pos + size].decode("utf-8"), size
        except UnicodeDecodeError as err:
            raise InvalidEncodingError(data[pos], pos, self.prefix(), phase) from err

    def skip_separators(self) -> int:
        while not self.at_end():
            rune, size = self.decode_rune("skip separators")
            if not self._is_separator(rune):
                break
            self.pos += size
        return self.pos

    def find_end_quote(self, quote: str) -> int:
        """Advance past the next *quote* not preceded by a backslash."""
        prev = None
        while not self.at_end():
            rune, size = self.decode_rune("find end matching quote")
            self.pos += size
            if rune == quote and prev != ESCAPE:
                return self.pos
            prev = rune
        raise UnterminatedQuoteError(quote, self.pos, self.prefix())

    def scan_field(self) -> int:
        """Advance to the next separator outside of quoted spans, or to the end."""
        prev = None
        while not self.at_end():
            rune, size = self.decode_rune("find next separator")
            if self._is_separator(rune):
                break
            self.pos += size
            if rune in QUOTES and prev != ESCAPE:
                start = self.pos - size
                try:
                    self.find_end_quote(rune)
                except UnterminatedQuoteError as err:
                    prefix = self.prefix(start)
                    raise UnterminatedQuoteError(
                        rune,
                        start,
                        prefix,
                        f"failed to find the matching quote starting at index {start} ({prefix}): {err}",
                    ) from err
            prev = rune
        return self.pos


def _as_bytes(text: str | bytes) -> bytes:
    if isinstance(text, str):
        # Lone surrogates stay invalid and are reported like any bad byte.
        return text.encode("utf-8", "surrogatepass")
    return bytes(text)


def tokenize(text: str | bytes, is_separator: SeparatorPredicate) -> list[str]:
    """Split *text* into fields at characters matching *is_separator*.

    Examples
    --------
    >>> tokenize('test me "here and there" ok', is_space)
    ['test', 'me', 'here and there', 'ok']
    >>> tokenize(' "a b", "c"', make_separator(","))
    ['a b', 'c']

    Raises InvalidEncodingError or UnterminatedQuoteError; no fields are
    returned on failure. Empty or all-separator input yields ``[]``.
    """
    data = _as_bytes(text)
    scanner = Scanner(data, is_separator)
    fields: list[str] = []

    while not scanner.at_end():
        start = scanner.skip_separators()
        end = scanner.scan_field()
        if start >= end:
            continue
        if end - start >= 2 and data[start] == data[end - 1] and data[start] in _QUOTE_BYTES:
            fields.append(scanner.span(start + 1, end - 1))
        else:
            fields.append(scanner.span(start, end))

    return fields


def shell_split(text: str | bytes) -> list[str]:
    """Split *text* on whitespace, respecting quoted substrings."""
    return tokenize(text, is_space)
