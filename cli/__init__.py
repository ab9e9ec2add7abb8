"""
CLI Package for MLX Whisper Transcriber

This package provides a Click group with one subcommand per module, mirroring
the MCP tools (transcribe, status, list) plus ``serve`` to start the server.

The cli() function serves as the console script entry point for setup.py.
"""

import os

import click
from dotenv import load_dotenv

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')

from transcriber import __version__

from .help_texts import SERVE_HELP, SERVE_PORT_HELP, SERVE_TRANSPORT_HELP, CONFIG_HELP
from .list_files import list_files
from .status import status
from .transcribe import transcribe


@click.group()
@click.version_option(version=__version__, prog_name='mlx-whisper-transcriber')
def main():
    """MLX Whisper Transcriber - transcribe audio and video on Apple Silicon.

    Audio is extracted from video with ffmpeg and transcribed by mlx_whisper
    running in a separate Python process.
    """
    pass


@main.command(help=SERVE_HELP)
@click.option('--transport', type=click.Choice(['stdio', 'sse']), default=None, help=SERVE_TRANSPORT_HELP)
@click.option('--port', type=int, default=None, help=SERVE_PORT_HELP)
@click.option('--config', '-c', default=None, help=CONFIG_HELP)
def serve(transport, port, config):
    from mcp_server.server import main as run_server

    argv = []
    if transport:
        argv += ['--transport', transport]
    if port:
        argv += ['--port', str(port)]
    if config:
        argv += ['--config', config]
    run_server(argv)


# Register subcommands
main.add_command(transcribe)
main.add_command(status)
main.add_command(list_files)


# Entry point for setup.py console script
def cli():
    """Console script entry point."""
    main()
