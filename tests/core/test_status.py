"""
Unit Tests: mlx_whisper status probe

The probe must never raise. Missing runtime, nonzero exit and unreadable
output all become a not-ready report.
"""

import importlib.util
import sys
from unittest.mock import AsyncMock, patch

import pytest

from transcriber.config import TranscriberConfig
from transcriber.errors import TranscriptionTimeoutError
from transcriber.process import ProcessResult
from transcriber.status import check_status, parse_status_output


def _probe_returns(stdout: str, returncode: int = 0, stderr: str = ""):
    return patch("transcriber.status.run_process", new=AsyncMock(
        return_value=ProcessResult(returncode=returncode, stdout=stdout, stderr=stderr)
    ))


class TestParseStatusOutput:
    def test_ready(self):
        report = parse_status_output('{"success": true, "mlx_whisper_version": "0.4.1", "metal_available": true}\n')
        assert report.ready is True
        assert report.version == "0.4.1"
        assert report.metal_available is True

    def test_not_installed(self):
        report = parse_status_output('{"success": false, "error": "mlx-whisper not installed: No module"}')
        assert report.ready is False
        assert "not installed" in report.error

    def test_invalid_json(self):
        with pytest.raises(ValueError):
            parse_status_output("Traceback (most recent call last):")


@pytest.mark.asyncio
async def test_ready_report(config):
    with _probe_returns('{"success": true, "mlx_whisper_version": "installed", "metal_available": false}'):
        report = await check_status(config)
    assert report.ready is True
    assert report.metal_available is False


@pytest.mark.asyncio
async def test_missing_runtime_is_not_ready():
    config = TranscriberConfig(python_executable="/nonexistent/bin/python3")
    report = await check_status(config)
    assert report.ready is False
    assert "Python not found" in report.error


@pytest.mark.asyncio
async def test_nonzero_exit_is_not_ready(config):
    with _probe_returns("", returncode=1, stderr="Illegal instruction"):
        report = await check_status(config)
    assert report.ready is False
    assert "Illegal instruction" in report.error


@pytest.mark.asyncio
async def test_nonzero_exit_after_success_line_is_not_ready(config):
    with _probe_returns('{"success": true, "metal_available": true}', returncode=139):
        report = await check_status(config)
    assert report.ready is False
    assert "139" in report.error


@pytest.mark.asyncio
async def test_invalid_json_is_not_ready(config):
    with _probe_returns("not json at all"):
        report = await check_status(config)
    assert report.ready is False
    assert "not json at all" in report.error


@pytest.mark.asyncio
async def test_unexpected_field_types_are_not_ready(config):
    with _probe_returns('{"success": true, "metal_available": "maybe"}'):
        report = await check_status(config)
    assert report.ready is False


@pytest.mark.asyncio
async def test_timeout_is_not_ready(config):
    with patch("transcriber.status.run_process",
               new=AsyncMock(side_effect=TranscriptionTimeoutError("python3 timed out after 5.0s"))):
        report = await check_status(config)
    assert report.ready is False
    assert "timed out" in report.error


@pytest.mark.asyncio
async def test_real_probe_without_mlx_whisper():
    if importlib.util.find_spec("mlx_whisper") is not None:
        pytest.skip("mlx_whisper is installed")

    report = await check_status(TranscriberConfig(python_executable=sys.executable))
    assert report.ready is False
    assert "mlx-whisper not installed" in report.error
