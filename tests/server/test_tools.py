"""Tests for MCP tool implementations.

Every tool returns text. Failures are rendered as ``Error: ...`` content,
never raised. External processes are mocked at the transcriber boundary.
"""

import os
from unittest.mock import AsyncMock, patch

import pytest

from mcp_server.tools.files import list_audio_files
from mcp_server.tools.status import check_mlx_status, format_status_report
from mcp_server.tools.transcribe import transcribe_audio
from transcriber.config import TranscriberConfig
from transcriber.errors import (
    ExtractionFailedError,
    RuntimeNotFoundError,
    TranscriptionFailedError,
)
from transcriber.models import Segment, StatusReport, TranscriptionResult
from transcriber.process import ProcessResult


class TestTranscribeTool:
    @pytest.mark.asyncio
    async def test_success_report(self, media_dir):
        result = TranscriptionResult(text=" Hello there.", segments=[Segment(start=0, end=1, text=" Hello there.")])
        config = TranscriberConfig(base_path=str(media_dir))

        with patch("mcp_server.tools.transcribe.transcribe_file", new=AsyncMock(return_value=result)) as run:
            text = await transcribe_audio(config, file_path="a.mp3", model="tiny")

        run.assert_awaited_once_with(os.path.join(str(media_dir), "a.mp3"), "tiny", config)
        assert text.startswith("## Transcription of a.mp3")
        assert "**File size:** 1.5 KB" in text
        assert "**Model:** whisper-tiny-mlx" in text
        assert text.endswith("---\n\n Hello there.")

    @pytest.mark.asyncio
    async def test_default_model_from_config(self, media_dir):
        config = TranscriberConfig(whisper_model="medium")
        with patch("mcp_server.tools.transcribe.transcribe_file",
                   new=AsyncMock(return_value=TranscriptionResult(text="x"))) as run:
            text = await transcribe_audio(config, file_path=str(media_dir / "c.mov"))

        assert run.call_args.args[1] == "medium"
        assert "whisper-medium-mlx" in text

    @pytest.mark.asyncio
    async def test_file_not_found_without_base(self, config):
        text = await transcribe_audio(config, file_path="/nonexistent/talk.mp3")
        assert text == "Error: File not found: /nonexistent/talk.mp3"

    @pytest.mark.asyncio
    async def test_file_not_found_hints_base_path(self, media_dir):
        config = TranscriberConfig(base_path=str(media_dir))
        text = await transcribe_audio(config, file_path="missing.wav")

        assert text.startswith("Error: File not found: missing.wav")
        assert f"Tip: Files should be in {media_dir} or provide a full path." in text

    @pytest.mark.asyncio
    async def test_directory_is_not_a_file(self, media_dir, config):
        text = await transcribe_audio(config, file_path=str(media_dir))
        assert text.startswith("Error: File not found")

    @pytest.mark.asyncio
    async def test_unknown_model(self, media_dir, config):
        text = await transcribe_audio(config, file_path=str(media_dir / "a.mp3"), model="huge")
        assert text.startswith("Error: Unknown model 'huge'")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error, expected", [
        (TranscriptionFailedError("boom"), "Error: boom"),
        (RuntimeNotFoundError("Python not found: [Errno 2]"), "Error: Python not found: [Errno 2]"),
        (ExtractionFailedError("ffmpeg failed: bad header", stderr="bad header"), "Error: ffmpeg failed: bad header"),
        (RuntimeError("unexpected"), "Error: unexpected"),
    ])
    async def test_failures_rendered_as_text(self, media_dir, config, error, expected):
        with patch("mcp_server.tools.transcribe.transcribe_file", new=AsyncMock(side_effect=error)):
            text = await transcribe_audio(config, file_path=str(media_dir / "a.mp3"))
        assert text == expected

    @pytest.mark.asyncio
    async def test_video_end_to_end_leaves_no_temp_file(self, media_dir, config):
        """Full tool flow for a video with ffmpeg and the engine mocked at the process level."""
        async def fake_run_process(argv, on_stderr_line=None, timeout=None):
            if argv[0] == "ffmpeg":
                with open(argv[-2] if argv[-1] == "-y" else argv[-1], "wb") as f:
                    f.write(b"RIFF")
                return ProcessResult(returncode=0, stdout="", stderr="")
            return ProcessResult(
                returncode=0,
                stdout='---JSON_START---\n{"success": false, "error": "out of memory"}',
                stderr="",
            )

        with patch("transcriber.extraction.run_process", new=fake_run_process), \
                patch("transcriber.engine.run_process", new=fake_run_process):
            text = await transcribe_audio(config, file_path=str(media_dir / "c.mov"))

        assert text == "Error: out of memory"
        assert not [name for name in os.listdir(media_dir) if "_temp_audio" in name]


class TestStatusTool:
    @pytest.mark.asyncio
    async def test_ready(self):
        config = TranscriberConfig(base_path="/media")
        report = StatusReport(ready=True, version="0.4.1", metal_available=True)
        with patch("mcp_server.tools.status.check_status", new=AsyncMock(return_value=report)):
            text = await check_mlx_status(config)

        assert "✅ **MLX Whisper installed**" in text
        assert "**Metal GPU:** ✅ Available" in text
        assert "**Default model:** whisper-large-v3-mlx" in text
        assert "**Base path:** /media" in text
        assert "- tiny (fastest, least accurate)" in text

    def test_ready_without_base_path(self, config):
        text = format_status_report(StatusReport(ready=True, metal_available=False), config)
        assert "**Metal GPU:** ❌ Not available" in text
        assert "Not configured (use full paths)" in text

    @pytest.mark.asyncio
    async def test_missing_runtime(self):
        text = await check_mlx_status(TranscriberConfig(python_executable="/nonexistent/bin/python3"))
        assert "❌ **Not ready**" in text
        assert "Python not found" in text
        assert "pip install mlx-whisper" in text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("result", [
        ProcessResult(returncode=1, stdout="", stderr="Trace/breakpoint trap"),
        ProcessResult(returncode=0, stdout="{not json", stderr=""),
    ])
    async def test_bad_probe_output(self, config, result):
        with patch("transcriber.status.run_process", new=AsyncMock(return_value=result)):
            text = await check_mlx_status(config)
        assert "❌ **Not ready**" in text

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_rendered(self, config):
        with patch("mcp_server.tools.status.check_status", new=AsyncMock(side_effect=RuntimeError("loop closed"))):
            text = await check_mlx_status(config)
        assert "❌ **Not ready**" in text
        assert "loop closed" in text


class TestListTool:
    @pytest.mark.asyncio
    async def test_lists_only_media(self, media_dir, config):
        text = await list_audio_files(config, directory=str(media_dir))

        assert text.splitlines()[0] == f"## Audio/Video files in {media_dir}"
        assert "- **a.mp3** (1.5 KB)" in text
        assert "- **c.mov** (2 KB)" in text
        assert "b.txt" not in text
        assert len([line for line in text.splitlines() if line.startswith("- ")]) == 2

    @pytest.mark.asyncio
    async def test_defaults_to_base_path(self, media_dir):
        text = await list_audio_files(TranscriberConfig(base_path=str(media_dir)))
        assert "a.mp3" in text

    @pytest.mark.asyncio
    async def test_no_directory_and_no_base(self, config):
        text = await list_audio_files(config)
        assert text == "Error: No directory specified and TRANSCRIBE_BASE_PATH is not configured."

    @pytest.mark.asyncio
    async def test_missing_directory(self, config, tmp_path):
        missing = tmp_path / "nope"
        text = await list_audio_files(config, directory=str(missing))
        assert text == f"Error: Directory not found: {missing}"

    @pytest.mark.asyncio
    async def test_empty_directory(self, config, tmp_path):
        text = await list_audio_files(config, directory=str(tmp_path))
        assert text == f"No audio or video files found in: {tmp_path}"

    @pytest.mark.asyncio
    async def test_skips_directories_with_media_names(self, config, media_dir):
        (media_dir / "folder.mp4").mkdir()
        text = await list_audio_files(config, directory=str(media_dir))
        assert "folder.mp4" not in text
