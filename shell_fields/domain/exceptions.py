"""Exception hierarchy for tokenizing and bootconfig parsing."""

from __future__ import annotations


class ShellFieldsError(Exception):
    pass


class TokenizeError(ShellFieldsError):
    """Base class for tokenizer failures.

    ``offset`` is a byte offset into the UTF-8 encoded input and ``prefix``
    is the text consumed before it.
    """

    def __init__(self, message: str, offset: int, prefix: str) -> None:
        super().__init__(message)
        self.offset = offset
        self.prefix = prefix


class InvalidEncodingError(TokenizeError):
    def __init__(self, byte: int, offset: int, prefix: str, phase: str) -> None:
        super().__init__(
            f"failed to {phase}: invalid Unicode encoding byte 0x{byte:02x} "
            f"at index {offset} ({prefix})",
            offset,
            prefix,
        )
        self.byte = byte
        self.phase = phase


class UnterminatedQuoteError(TokenizeError):
    def __init__(self, quote: str, offset: int, prefix: str, message: str | None = None) -> None:
        super().__init__(
            message or f"no end matching quote ({quote}) found",
            offset,
            prefix,
        )
        self.quote = quote


class ConfigParseError(ShellFieldsError):
    def __init__(self, message: str, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line


class MissingSeparatorError(ConfigParseError):
    def __init__(self, line: str) -> None:
        super().__init__(f"failed to parse bootconfig line {line!r}: missing '='", line)


class ValueParseError(ConfigParseError):
    def __init__(self, line: str, cause: TokenizeError) -> None:
        super().__init__(f"failed to parse bootconfig line {line!r} after '=': {cause}", line)


class ScanError(ConfigParseError):
    pass
