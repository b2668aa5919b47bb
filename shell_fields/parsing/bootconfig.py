"""Parser for bootconfig listings such as ``/proc/bootconfig``.

Each line has the shape::

    kernel.CabCmdBranches = "test\\x20me", "here", "ok"

and is normalized to ``kernel.CabCmdBranches=test\\x20me,here,ok``.
"""

from __future__ import annotations

import logging
from typing import Iterator

from shell_fields.domain.entities import ConfigEntry
from shell_fields.domain.exceptions import (
    MissingSeparatorError,
    ScanError,
    TokenizeError,
    ValueParseError,
)

from .tokenizer import make_separator, tokenize

logger = logging.getLogger(__name__)

DEFAULT_MAX_LINE_LENGTH = 64 * 1024

VALUE_SEPARATOR = make_separator(",")


class LineScanner:
    """Iterates over the logical lines of in-memory text.

    Lines end at ``\\n`` with one trailing ``\\r`` dropped. A final line
    without a newline is still yielded, a trailing newline does not produce an
    extra empty line, and blank lines in between are yielded as ``""``.
    """

    def __init__(self, text: str, max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> None:
        if max_line_length < 1:
            raise ValueError(f"max_line_length must be positive, got {max_line_length}")
        self._text = text
        self._max_line_length = max_line_length

    def __iter__(self) -> Iterator[str]:
        text = self._text
        length = len(text)
        pos = 0
        lineno = 0

        while pos < length:
            end = text.find("\n", pos)
            if end == -1:
                end = length
            next_pos = end + 1

            line = text[pos:end]
            if line.endswith("\r"):
                line = line[:-1]
            lineno += 1

            size = len(line.encode("utf-8", "surrogatepass"))
            if size > self._max_line_length:
                raise ScanError(
                    f"failed to scan bootconfig line {lineno}: "
                    f"{size} bytes exceeds the limit of {self._max_line_length}"
                )

            yield line
            pos = next_pos


def parse_line(line: str) -> ConfigEntry:
    """Parse one ``key = "v1", "v2"`` line."""
    key, sep, raw_value = line.partition("=")
    if not sep:
        raise MissingSeparatorError(line)

    try:
        fields = tokenize(raw_value, VALUE_SEPARATOR)
    except TokenizeError as err:
        raise ValueParseError(line, err) from err

    return ConfigEntry(key=key.strip(), value=",".join(fields), fields=tuple(fields))


def parse_entries(text: str, max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> list[ConfigEntry]:
    """Parse every line of *text*; the first bad line aborts the whole call."""
    entries = [parse_line(line) for line in LineScanner(text, max_line_length)]
    logger.debug("Parsed %d bootconfig entries", len(entries))
    return entries


def parse_config(text: str, max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> list[str]:
    """Return the normalized ``key=value`` string of every line, in order."""
    return [str(entry) for entry in parse_entries(text, max_line_length)]
