"""
Transcriber Configuration

Immutable process-wide settings for the transcriber core. The configuration
is built once at startup and passed explicitly to the path resolver, the
subprocess invokers and the MCP tools.

Configuration Precedence (highest to lowest):
1. Environment variables (WHISPER_MODEL, TRANSCRIBE_BASE_PATH, TRANSCRIBE_*)
2. The ``transcriber`` section of a YAML config file
3. System defaults
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

import yaml

from transcriber.errors import TranscriptionError

# Ordered fastest/least accurate to slowest/most accurate
WHISPER_MODELS = ("tiny", "base", "small", "medium", "large-v3")

ModelName = Literal["tiny", "base", "small", "medium", "large-v3"]

DEFAULT_MODEL = "large-v3"


@dataclass(frozen=True)
class TranscriberConfig:
    """Settings shared by every tool invocation.

    Attributes:
        whisper_model: Model used when a call omits ``model``
        base_path: Optional directory used to resolve bare filenames and as
            the default directory for listings
        python_executable: Interpreter that has mlx_whisper installed
        ffmpeg_executable: ffmpeg binary used for audio extraction
        model_namespace: Hugging Face namespace hosting the MLX weights
        timeout: Seconds to wait for a subprocess, or None to wait forever
    """
    whisper_model: str = DEFAULT_MODEL
    base_path: str = ""
    python_executable: str = "python3"
    ffmpeg_executable: str = "ffmpeg"
    model_namespace: str = "mlx-community"
    timeout: Optional[float] = None

    def __post_init__(self):
        if self.whisper_model not in WHISPER_MODELS:
            raise TranscriptionError(
                f"Invalid whisper model '{self.whisper_model}'. "
                f"Valid options: {', '.join(WHISPER_MODELS)}"
            )
        if self.timeout is not None and self.timeout <= 0:
            raise TranscriptionError(f"Timeout must be positive, got {self.timeout}")

    def model_repo(self, model: str) -> str:
        """Return the repository identifier mlx_whisper loads for ``model``."""
        return f"{self.model_namespace}/whisper-{model}-mlx"

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "TranscriberConfig":
        """Load config from YAML file, env vars, or defaults.

        Priority: env vars > YAML > defaults.
        """
        values: Dict[str, Any] = {}

        path = config_path or os.environ.get("MCP_SERVER_CONFIG")
        if path and os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            section = data.get("transcriber") or {}
            for key in ("whisper_model", "base_path", "python_executable",
                        "ffmpeg_executable", "model_namespace", "timeout"):
                if key in section and section[key] is not None:
                    values[key] = section[key]

        # Env var overrides
        if os.environ.get("WHISPER_MODEL"):
            values["whisper_model"] = os.environ["WHISPER_MODEL"]
        if os.environ.get("TRANSCRIBE_BASE_PATH"):
            values["base_path"] = os.environ["TRANSCRIBE_BASE_PATH"]
        if os.environ.get("TRANSCRIBE_PYTHON"):
            values["python_executable"] = os.environ["TRANSCRIBE_PYTHON"]
        if os.environ.get("TRANSCRIBE_FFMPEG"):
            values["ffmpeg_executable"] = os.environ["TRANSCRIBE_FFMPEG"]
        if os.environ.get("TRANSCRIBE_TIMEOUT"):
            values["timeout"] = os.environ["TRANSCRIBE_TIMEOUT"]

        if "timeout" in values:
            try:
                values["timeout"] = float(values["timeout"])
            except (TypeError, ValueError):
                raise TranscriptionError(f"Invalid timeout value: {values['timeout']!r}")

        return cls(**values)
