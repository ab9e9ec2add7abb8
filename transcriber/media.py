"""Extension based media classification. No content sniffing."""

import os

VIDEO_EXTENSIONS = frozenset([".mp4", ".mov", ".avi", ".mkv", ".webm", ".flv", ".wmv"])

AUDIO_EXTENSIONS = frozenset([".mp3", ".wav", ".ogg", ".flac", ".m4a", ".webm"])

MEDIA_EXTENSIONS = VIDEO_EXTENSIONS | AUDIO_EXTENSIONS


def _extension(path: str) -> str:
    return os.path.splitext(path)[1].lower()


def is_video_file(path: str) -> bool:
    """True when ffmpeg must extract audio from ``path`` before transcription."""
    return _extension(path) in VIDEO_EXTENSIONS


def is_media_file(path: str) -> bool:
    """True when ``path`` should show up in an audio/video listing."""
    return _extension(path) in MEDIA_EXTENSIONS
