"""
mlx_whisper availability probe.

Spawns the configured Python runtime with a short script that imports
mlx_whisper and asks MLX whether Metal is available. The probe never raises:
a missing runtime, a nonzero exit or unreadable output all produce a
not-ready StatusReport.
"""

import json
import logging

from pydantic import ValidationError

from transcriber.config import TranscriberConfig
from transcriber.errors import TranscriptionError
from transcriber.models import StatusReport
from transcriber.process import run_process

logger = logging.getLogger(__name__)

STATUS_SCRIPT = '''
import json
try:
    import mlx_whisper
    import mlx.core as mx

    print(json.dumps({
        "success": True,
        "mlx_whisper_version": getattr(mlx_whisper, "__version__", "installed"),
        "metal_available": bool(mx.metal.is_available()),
    }))
except ImportError as e:
    print(json.dumps({"success": False, "error": f"mlx-whisper not installed: {e}"}))
except Exception as e:
    print(json.dumps({"success": False, "error": str(e)}))
'''


def parse_status_output(stdout: str) -> StatusReport:
    """Turn the probe's single JSON line into a StatusReport.

    Raises:
        ValueError: If the output is not a JSON object in the expected shape
    """
    data = json.loads(stdout.strip())
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    if data.get("success"):
        return StatusReport(
            ready=True,
            version=data.get("mlx_whisper_version"),
            metal_available=data.get("metal_available"),
        )
    return StatusReport(ready=False, error=data.get("error") or "Unknown error")


async def check_status(config: TranscriberConfig) -> StatusReport:
    """Report whether mlx_whisper can be imported by the configured runtime."""
    logger.info("Checking MLX Whisper status...")
    argv = [config.python_executable, "-c", STATUS_SCRIPT]

    try:
        result = await run_process(argv, timeout=config.timeout)
    except OSError as e:
        logger.error(f"Python not found: {e}")
        return StatusReport(
            ready=False,
            error="Python not found. Make sure Python 3 is installed and in your PATH.",
        )
    except TranscriptionError as e:
        logger.error(f"Error checking status: {e}")
        return StatusReport(ready=False, error=str(e))

    try:
        report = parse_status_output(result.stdout)
    except (ValueError, ValidationError) as e:
        logger.error(f"Error checking status: {e}")
        detail = f"Could not read probe output ({e}). Output: {result.stdout.strip()}"
        if result.returncode != 0:
            detail += f"\nExit code {result.returncode}: {result.stderr.strip()}"
        return StatusReport(ready=False, error=detail)

    if report.ready and result.returncode != 0:
        report = StatusReport(
            ready=False,
            error=f"Status probe exited with code {result.returncode}: {result.stderr.strip()}",
        )

    if report.ready:
        logger.info(f"MLX Whisper is ready. Metal: {report.metal_available}")
    else:
        logger.warning(f"MLX Whisper not ready: {report.error}")
    return report
