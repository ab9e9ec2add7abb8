"""List subcommand: audio and video files with sizes."""

import os
import sys

import click

from mcp_server.tools.files import find_media_files
from transcriber.config import TranscriberConfig
from transcriber.errors import TranscriptionError
from transcriber.paths import format_file_size

from .help_texts import CONFIG_HELP, LIST_HELP, ExitCodes
from .shared_options import config_option


@click.command(name="list", help=LIST_HELP)
@click.argument("directory", required=False)
@config_option(help=CONFIG_HELP)
def list_files(directory, config):
    try:
        transcriber_config = TranscriberConfig.load(config)
    except TranscriptionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCodes.INVALID_CONFIGURATION)

    directory = directory or transcriber_config.base_path
    if not directory:
        click.echo("Error: No directory specified and TRANSCRIBE_BASE_PATH is not configured.", err=True)
        sys.exit(ExitCodes.FILE_NOT_FOUND)
    if not os.path.isdir(directory):
        click.echo(f"Error: Directory not found: {directory}", err=True)
        sys.exit(ExitCodes.FILE_NOT_FOUND)

    try:
        entries = [
            (name, format_file_size(os.path.getsize(os.path.join(directory, name))))
            for name in find_media_files(directory)
        ]
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCodes.GENERAL_ERROR)

    for name, size in entries:
        click.echo(f"{name}\t{size}")
