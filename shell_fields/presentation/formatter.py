"""Text renderings of field lists for the command line."""

from __future__ import annotations

import json

OUTPUT_FORMATS = ("lines", "json", "quoted")


def quote(field: str) -> str:
    return json.dumps(field, ensure_ascii=False)


class FieldFormatter:
    """Renders fields one per line, as a JSON array, or as a quoted list."""

    def __init__(self, output: str = "lines") -> None:
        if output not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format: {output!r} (expected one of {', '.join(OUTPUT_FORMATS)})"
            )
        self._output = output

    def format_error(self, exception: Exception) -> str:
        return f"Error: {exception}"

    def format_fields(self, fields: list[str]) -> str:
        if self._output == "json":
            return json.dumps(fields, ensure_ascii=False)
        if self._output == "quoted":
            return "[" + " ".join(quote(f) for f in fields) + "]"
        return "\n".join(fields)
