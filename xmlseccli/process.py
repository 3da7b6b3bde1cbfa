"""
Launching xmlsec1 and moving document bytes through its standard streams.

A child that reads a large input while writing a large output blocks once either pipe buffer fills up, so the input
write and both output reads run as concurrent tasks that are all joined before the process is waited on.
"""

import logging
import subprocess
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .exceptions import ProcessLaunchFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletedInvocation:
    """
    Everything observed about one finished xmlsec1 run.
    """

    args: Tuple[str, ...]
    returncode: int
    output: bytes
    diagnostic: bytes
    stream_error: Optional[OSError] = None
    """
    The first I/O error raised while feeding or draining the process pipes, if any.
    """


def launch(args: Sequence[str]) -> subprocess.Popen:
    """
    Start xmlsec1 with all three standard streams connected to pipes. The argument vector is passed to the OS as is;
    no shell is involved.
    """
    logger.debug("Launching %s", list(args))
    try:
        return subprocess.Popen(list(args), stdin=subprocess.PIPE, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    except OSError as e:
        raise ProcessLaunchFailure(f"Unable to start {args[0]}: {e}") from e


def _feed(stream, data: bytes) -> None:
    try:
        stream.write(data)
    finally:
        stream.close()


def _drain(stream) -> bytes:
    try:
        return stream.read()
    finally:
        stream.close()


def _stream_error(future: Future) -> Optional[OSError]:
    error = future.exception()
    if error is None:
        return None
    if isinstance(error, OSError):
        return error
    raise error


def pump(process: subprocess.Popen, data: bytes) -> CompletedInvocation:
    """
    Write ``data`` to the process input and collect its output and diagnostic streams, then wait for it to exit.

    Stream errors do not stop the other tasks: the remaining streams are still drained and the process is always
    reaped. If the pump itself is interrupted, the child is killed first.
    """
    try:
        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="xmlsec-pump") as executor:
            feeding = executor.submit(_feed, process.stdin, data)
            draining_output = executor.submit(_drain, process.stdout)
            draining_diagnostic = executor.submit(_drain, process.stderr)
        returncode = process.wait()
    finally:
        if process.returncode is None:
            process.kill()
            process.wait()

    stream_error = None
    for future in feeding, draining_output, draining_diagnostic:
        error = _stream_error(future)
        if error is not None:
            logger.debug("Stream error while talking to %s: %s", process.args, error)
            stream_error = stream_error or error
    output = b"" if draining_output.exception() else draining_output.result()
    diagnostic = b"" if draining_diagnostic.exception() else draining_diagnostic.result()
    logger.debug(
        "%s exited with status %d (%d output bytes, %d diagnostic bytes)",
        process.args[0],
        returncode,
        len(output),
        len(diagnostic),
    )
    return CompletedInvocation(
        args=tuple(process.args),
        returncode=returncode,
        output=output,
        diagnostic=diagnostic,
        stream_error=stream_error,
    )


def run(args: Sequence[str], data: bytes) -> CompletedInvocation:
    return pump(launch(args), data)
