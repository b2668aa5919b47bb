"""Tokenizer and bootconfig parser."""

from shell_fields.parsing.bootconfig import LineScanner, parse_config, parse_entries, parse_line
from shell_fields.parsing.tokenizer import (
    Scanner,
    is_space,
    make_separator,
    shell_split,
    tokenize,
)

__all__ = [
    "LineScanner",
    "Scanner",
    "is_space",
    "make_separator",
    "parse_config",
    "parse_entries",
    "parse_line",
    "shell_split",
    "tokenize",
]
