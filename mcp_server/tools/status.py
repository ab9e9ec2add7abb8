"""Status tool - reports whether mlx_whisper is installed and Metal is usable."""

import logging

from transcriber.config import WHISPER_MODELS, TranscriberConfig
from transcriber.models import StatusReport
from transcriber.status import check_status

logger = logging.getLogger(__name__)

MODEL_NOTES = {
    "tiny": "fastest, least accurate",
    "large-v3": "slowest, most accurate",
}


def _model_list() -> str:
    lines = []
    for name in WHISPER_MODELS:
        note = MODEL_NOTES.get(name)
        lines.append(f"- {name} ({note})" if note else f"- {name}")
    return "\n".join(lines)


def format_status_report(report: StatusReport, config: TranscriberConfig) -> str:
    """Render a StatusReport as Markdown."""
    if not report.ready:
        return (
            "## MLX Whisper Status\n\n"
            "❌ **Not ready**\n\n"
            f"**Error:** {report.error}\n\n"
            "**To install:**\n```bash\npip install mlx-whisper\n```"
        )

    metal = "✅ Available" if report.metal_available else "❌ Not available"
    base_path = config.base_path or "Not configured (use full paths)"
    version = f" ({report.version})" if report.version else ""
    return (
        "## MLX Whisper Status\n\n"
        f"✅ **MLX Whisper installed**{version}\n\n"
        f"**Metal GPU:** {metal}\n"
        f"**Default model:** whisper-{config.whisper_model}-mlx\n"
        f"**Base path:** {base_path}\n\n"
        f"**Available models:**\n{_model_list()}"
    )


async def check_mlx_status(config: TranscriberConfig) -> str:
    """Probe the mlx_whisper runtime. Never raises.

    Returns:
        Markdown status report, ready or not ready
    """
    try:
        report = await check_status(config)
    except Exception as e:
        logger.exception("Unexpected error while checking status")
        report = StatusReport(ready=False, error=str(e))
    return format_status_report(report, config)
