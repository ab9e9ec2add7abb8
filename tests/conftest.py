"""
Pytest configuration and fixtures for test isolation.
"""
import logging

import pytest

from transcriber.config import TranscriberConfig
from transcriber.utils.logging_config import logging_config
from transcriber.process import ProcessResult

CONFIG_ENV_VARS = [
    "WHISPER_MODEL",
    "TRANSCRIBE_BASE_PATH",
    "TRANSCRIBE_PYTHON",
    "TRANSCRIBE_FFMPEG",
    "TRANSCRIBE_TIMEOUT",
    "MCP_SERVER_CONFIG",
    "MCP_TRANSPORT",
    "MCP_PORT",
    "MCP_LOG_LEVEL",
    "MCP_LOG_FILE",
]


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Remove configuration env vars so every test starts from defaults."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handler changes made by configure_logging() inside a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging_config._configured = False


@pytest.fixture
def config():
    """Default configuration without a base path."""
    return TranscriberConfig(whisper_model="base")


@pytest.fixture
def media_dir(tmp_path):
    """Directory holding a small audio file, a video file and a text file."""
    directory = tmp_path / "media"
    directory.mkdir()
    (directory / "a.mp3").write_bytes(b"\x00" * 1536)
    (directory / "b.txt").write_text("not media")
    (directory / "c.mov").write_bytes(b"\x00" * 2048)
    return directory


@pytest.fixture
def engine_output():
    """Build a ProcessResult the way the mlx_whisper script reports it."""
    def _build(payload: str, returncode: int = 0, stderr: str = "Loading MLX Whisper...\n"):
        stdout = "[00:00.000 --> 00:01.000]  hi\n---JSON_START---\n" + payload + "\n"
        return ProcessResult(returncode=returncode, stdout=stdout, stderr=stderr)
    return _build
