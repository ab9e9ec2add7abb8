"""
Shared CLI Option Decorators

This module provides reusable Click decorators for common CLI options,
ensuring consistency across subcommands.
"""

import click

from transcriber.config import WHISPER_MODELS


def model_option(help=None):
    """Decorator for Whisper model selection."""
    def decorator(f):
        return click.option(
            '--model', '-m',
            default=None,
            type=click.Choice(list(WHISPER_MODELS)),
            help=help or 'Whisper model to use'
        )(f)
    return decorator


def config_option(help=None):
    """Decorator for configuration file options."""
    def decorator(f):
        return click.option(
            '--config', '-c',
            default=None,
            type=click.Path(dir_okay=False),
            help=help or 'Path to configuration file'
        )(f)
    return decorator


def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default='warning',
            type=click.Choice(['debug', 'info', 'warning', 'error'], case_sensitive=False),
            help=help or 'Logging level'
        )(f)
    return decorator
