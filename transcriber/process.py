"""
Subprocess runner shared by the audio extractor, the transcription invoker
and the status probe.

The process is spawned with asyncio, stdout and stderr are drained
concurrently until EOF, and stderr lines can be forwarded as they arrive so a
long transcription is visibly alive in the host's log.
"""

import asyncio
import codecs
import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from transcriber.errors import TranscriptionTimeoutError

logger = logging.getLogger(__name__)

# Progress bars redraw with a bare carriage return
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

_READ_SIZE = 4096


@dataclass
class ProcessResult:
    """Exit status and fully drained output of a finished subprocess."""
    returncode: int
    stdout: str
    stderr: str


async def _drain(
    stream: asyncio.StreamReader,
    chunks: List[str],
    on_line: Optional[Callable[[str], None]] = None,
) -> None:
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    pending = ""

    while True:
        data = await stream.read(_READ_SIZE)
        text = decoder.decode(data, final=not data)
        if text:
            chunks.append(text)
            if on_line is not None:
                pending += text
                *lines, pending = _LINE_BREAK.split(pending)
                for line in lines:
                    if line.strip():
                        on_line(line.rstrip())
        if not data:
            break

    if on_line is not None and pending.strip():
        on_line(pending.rstrip())


def _kill(process: asyncio.subprocess.Process) -> None:
    try:
        process.kill()
    except ProcessLookupError:
        pass


async def _kill_and_reap(process: asyncio.subprocess.Process, drains: List[asyncio.Future]) -> None:
    # Draining must continue after the kill or a paused pipe never reports EOF
    _kill(process)
    await asyncio.gather(*drains, return_exceptions=True)
    await process.wait()


async def run_process(
    argv: Sequence[str],
    on_stderr_line: Optional[Callable[[str], None]] = None,
    timeout: Optional[float] = None,
) -> ProcessResult:
    """Run ``argv`` to completion and capture its output.

    Args:
        argv: Executable followed by its arguments
        on_stderr_line: Called with each non-empty stderr line as it arrives
        timeout: Seconds to wait before killing the process, None waits forever

    Returns:
        ProcessResult with the exit status and decoded output

    Raises:
        OSError: If the executable cannot be spawned (FileNotFoundError when
            it is not on the search path)
        TranscriptionTimeoutError: If the process outlives ``timeout``
    """
    process = await asyncio.create_subprocess_exec(
        *argv,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    logger.debug(f"Spawned {argv[0]} (pid {process.pid})")

    stdout_chunks: List[str] = []
    stderr_chunks: List[str] = []
    drains = [
        asyncio.ensure_future(_drain(process.stdout, stdout_chunks)),
        asyncio.ensure_future(_drain(process.stderr, stderr_chunks, on_stderr_line)),
    ]

    try:
        returncode = await asyncio.wait_for(process.wait(), timeout)
        await asyncio.shield(asyncio.gather(*drains))
    except asyncio.TimeoutError:
        await _kill_and_reap(process, drains)
        raise TranscriptionTimeoutError(f"{argv[0]} timed out after {timeout}s")
    except asyncio.CancelledError:
        await asyncio.shield(_kill_and_reap(process, drains))
        raise

    logger.debug(f"{argv[0]} exited with code {returncode}")
    return ProcessResult(
        returncode=returncode,
        stdout="".join(stdout_chunks),
        stderr="".join(stderr_chunks),
    )
