"""
Transcribe Subcommand Module

Runs the same resolve -> extract -> transcribe flow as the MCP tool, but
reports failures with exit codes instead of error text.
"""

import asyncio
import os
import sys

import click

from transcriber.config import TranscriberConfig
from transcriber.engine import transcribe_file
from transcriber.errors import (
    ProviderNotAvailableError,
    TranscriptionError,
)
from transcriber.paths import resolve_file_path
from transcriber.utils.logging_config import configure_logging

from .help_texts import (
    CONFIG_HELP, LOG_LEVEL_HELP, TRANSCRIBE_FILE_HELP, TRANSCRIBE_HELP,
    TRANSCRIBE_JSON_HELP, TRANSCRIBE_MODEL_HELP, ExitCodes,
)
from .shared_options import config_option, log_level_option, model_option


@click.command(help=TRANSCRIBE_HELP)
@click.argument("file_path", metavar="FILE")
@model_option(help=TRANSCRIBE_MODEL_HELP)
@click.option("--json", "as_json", is_flag=True, default=False, help=TRANSCRIBE_JSON_HELP)
@config_option(help=CONFIG_HELP)
@log_level_option(help=LOG_LEVEL_HELP)
def transcribe(file_path, model, as_json, config, log_level):
    configure_logging(level=log_level)

    try:
        transcriber_config = TranscriberConfig.load(config)
    except TranscriptionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCodes.INVALID_CONFIGURATION)

    resolved = resolve_file_path(file_path, transcriber_config.base_path)
    if not os.path.isfile(resolved):
        click.echo(f"Error: File not found: {resolved}", err=True)
        sys.exit(ExitCodes.FILE_NOT_FOUND)

    model = model or transcriber_config.whisper_model
    try:
        result = asyncio.run(transcribe_file(resolved, model, transcriber_config))
    except ProviderNotAvailableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCodes.ENGINE_NOT_AVAILABLE)
    except TranscriptionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCodes.GENERAL_ERROR)

    if as_json:
        click.echo(result.model_dump_json(indent=2))
    else:
        click.echo(result.text.strip())
