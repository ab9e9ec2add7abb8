"""
setup.py

Packaging metadata and CLI entry points for the MLX Whisper transcriber.

Version: 2.1.0: MCP server exposing ffmpeg + mlx_whisper transcription as
tools, plus a Click CLI for the same operations.
"""
from setuptools import setup, find_packages

setup(
    name="mlx-whisper-transcriber",
    version="2.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "mcp>=1.2,<2",
        "click",
        "pydantic>=2.0",
        "ffmpeg-python",
        "PyYAML",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "mlx-whisper-transcriber=cli:cli",
            "mlx-whisper-mcp=mcp_server.server:main",
        ],
    },
    python_requires=">=3.10",
)
