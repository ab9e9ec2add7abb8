"""Status subcommand: prints the MLX Whisper status report."""

import asyncio
import sys

import click

from mcp_server.tools.status import format_status_report
from transcriber.config import TranscriberConfig
from transcriber.errors import TranscriptionError
from transcriber.status import check_status
from transcriber.utils.logging_config import configure_logging

from .help_texts import CONFIG_HELP, LOG_LEVEL_HELP, STATUS_HELP, ExitCodes
from .shared_options import config_option, log_level_option


@click.command(help=STATUS_HELP)
@config_option(help=CONFIG_HELP)
@log_level_option(help=LOG_LEVEL_HELP)
def status(config, log_level):
    configure_logging(level=log_level)

    try:
        transcriber_config = TranscriberConfig.load(config)
    except TranscriptionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCodes.INVALID_CONFIGURATION)

    report = asyncio.run(check_status(transcriber_config))
    click.echo(format_status_report(report, transcriber_config))
    if not report.ready:
        sys.exit(ExitCodes.ENGINE_NOT_AVAILABLE)
