"""CLI entry point for shell-fields."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from shell_fields.config import AppConfig, load_config
from shell_fields.domain.exceptions import ConfigParseError, TokenizeError
from shell_fields.parsing.bootconfig import parse_config
from shell_fields.parsing.tokenizer import make_separator, tokenize
from shell_fields.presentation.formatter import OUTPUT_FORMATS, FieldFormatter

logger = logging.getLogger(__name__)


def _fail(message: str) -> NoReturn:
    click.echo(message, err=True)
    sys.exit(1)


def _formatter(app_config: AppConfig) -> FieldFormatter:
    try:
        return FieldFormatter(app_config.cli.output)
    except ValueError as err:
        _fail(f"Error: {err}")


def _echo_fields(formatter: FieldFormatter, fields: list[str]) -> None:
    rendered = formatter.format_fields(fields)
    if rendered:
        click.echo(rendered)


@click.group()
@click.option(
    "--config", "-c",
    default=None,
    help="Path to YAML config file",
)
@click.option(
    "--output", "-o",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format: lines, json, or quoted (overrides config/env)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=None,
    help="Enable debug logging (overrides config/env)",
)
@click.pass_context
def cli(ctx: click.Context, config: str | None, output: str | None, verbose: bool | None) -> None:
    """Split text into shell-style fields and normalize bootconfig listings.

    Configuration priority: YAML config < env vars (SHELL_FIELDS_*) < CLI arguments.
    """
    try:
        app_config = load_config(
            config_path=config,
            cli_overrides={"cli.output": output, "cli.verbose": verbose},
        )
    except ValueError as err:
        _fail(f"Error: invalid configuration: {err}")

    log_level = logging.DEBUG if app_config.cli.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    ctx.obj = app_config


@cli.command()
@click.argument("text")
@click.option(
    "--separators", "-s",
    default=None,
    help="Extra separator characters besides whitespace (overrides config/env)",
)
@click.pass_obj
def split(app_config: AppConfig, text: str, separators: str | None) -> None:
    """Split TEXT into fields, keeping quoted spans together."""
    formatter = _formatter(app_config)
    extra = separators if separators is not None else app_config.split.separators

    try:
        fields = tokenize(text, make_separator(extra))
    except TokenizeError as err:
        _fail(formatter.format_error(err))

    logger.debug("Split %r into %d fields", text, len(fields))
    _echo_fields(formatter, fields)


@cli.command()
@click.argument("path", required=False)
@click.pass_obj
def bootconfig(app_config: AppConfig, path: str | None) -> None:
    """Print the normalized key=value entries of a bootconfig listing.

    PATH defaults to bootconfig.path from the configuration (/proc/bootconfig).
    """
    formatter = _formatter(app_config)
    source = Path(path or app_config.bootconfig.path)

    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        _fail(f"Error: failed to read {source}: {err}")

    try:
        entries = parse_config(text, max_line_length=app_config.bootconfig.max_line_length)
    except (ConfigParseError, ValueError) as err:
        _fail(formatter.format_error(err))

    logger.debug("Read %d entries from %s", len(entries), source)
    _echo_fields(formatter, entries)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
