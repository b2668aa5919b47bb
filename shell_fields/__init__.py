"""Shell-style field splitting and bootconfig normalization."""

from shell_fields.domain.entities import ConfigEntry
from shell_fields.domain.exceptions import (
    ConfigParseError,
    InvalidEncodingError,
    MissingSeparatorError,
    ScanError,
    ShellFieldsError,
    TokenizeError,
    UnterminatedQuoteError,
    ValueParseError,
)
from shell_fields.parsing.bootconfig import parse_config, parse_entries
from shell_fields.parsing.tokenizer import make_separator, shell_split, tokenize

__all__ = [
    "ConfigEntry",
    "ConfigParseError",
    "InvalidEncodingError",
    "MissingSeparatorError",
    "ScanError",
    "ShellFieldsError",
    "TokenizeError",
    "UnterminatedQuoteError",
    "ValueParseError",
    "make_separator",
    "parse_config",
    "parse_entries",
    "shell_split",
    "tokenize",
]
