"""
Transcriber data models.

Pydantic models for the payloads exchanged with the external engine and for
the results handed back to the tool layer.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Segment(BaseModel):
    """A timestamped span of transcript text.

    Fields the engine reports beyond start/end/text (id, tokens, ...) are kept.
    """
    model_config = ConfigDict(extra="allow")

    start: float = 0.0
    end: float = 0.0
    text: str = ""


class TranscriptionResult(BaseModel):
    """Full text and ordered segments of a successful transcription."""
    text: str = ""
    segments: List[Segment] = Field(default_factory=list)


class EngineSuccess(BaseModel):
    """Structured payload of a successful engine run."""
    success: Literal[True]
    text: str = ""
    segments: List[Segment] = Field(default_factory=list)

    def to_result(self) -> TranscriptionResult:
        return TranscriptionResult(text=self.text, segments=self.segments)


class EngineFailure(BaseModel):
    """Structured payload of an engine run that reported an error."""
    success: Literal[False]
    error: Optional[str] = None


class StatusReport(BaseModel):
    """Outcome of the mlx_whisper availability probe."""
    ready: bool
    version: Optional[str] = None
    metal_available: Optional[bool] = None
    error: Optional[str] = None
