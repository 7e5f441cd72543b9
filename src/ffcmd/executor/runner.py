"""Running FFmpeg as a subprocess.

The runner builds the command, starts FFmpeg with the parent environment
plus the log variables contributed by the options, captures stderr into an
in-memory buffer and waits for the process to exit, time out or be
cancelled.
"""

from __future__ import annotations

import logging
import os
import subprocess  # nosec B404 - subprocess is required for FFmpeg invocation
import threading
import time
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from ffcmd.command import Command, build_command
from ffcmd.config.loader import resolve_ffmpeg
from ffcmd.errors import ProcessCancelledError, ProcessError, ProcessTimeoutError
from ffcmd.executor.progress import StdErrParser
from ffcmd.options.filters import ComplexFilterOptions
from ffcmd.options.global_options import GlobalOptions
from ffcmd.options.io import Input, Output

logger = logging.getLogger(__name__)


class StderrBuffer:
    """Append-only, thread-safe text buffer."""

    def __init__(self) -> None:
        self._chunks: list[str] = []
        self._lock = threading.Lock()

    def append(self, text: str) -> None:
        with self._lock:
            self._chunks.append(text)

    def snapshot(self) -> str:
        with self._lock:
            return "".join(self._chunks)


class FFmpeg:
    """Runs an FFmpeg binary with options built from a job description.

    Example:
        ffmpeg = FFmpeg("/usr/bin/ffmpeg")
        ffmpeg.set_stderr_parser(ProgressParser(print))
        ffmpeg.execute(GlobalOptions(), [Input("in.mkv")], [Output("out.mp4")])
    """

    POLL_INTERVAL: float = 0.1
    STDERR_DRAIN_TIMEOUT: float = 5.0  # Timeout for draining stderr after exit

    def __init__(self, binary_path: str | Path | None = None) -> None:
        """Initialize the runner.

        Args:
            binary_path: ffmpeg executable. None resolves it from PATH on
                first use.
        """
        self._binary_path = Path(binary_path) if binary_path is not None else None
        self._stderr_parser: StdErrParser | None = None

    @property
    def binary_path(self) -> Path:
        """Path to ffmpeg.

        Raises:
            ToolNotFoundError: If no path was given and ffmpeg is not in PATH.
        """
        if self._binary_path is None:
            self._binary_path = resolve_ffmpeg()
        return self._binary_path

    def set_stderr_parser(self, parser: StdErrParser | None) -> None:
        """Register (or clear with None) the periodic stderr observer."""
        self._stderr_parser = parser

    def build_command(
        self,
        global_options: GlobalOptions,
        inputs: Sequence[Input] = (),
        outputs: Sequence[Output] = (),
        *,
        complex_filter: ComplexFilterOptions | None = None,
    ) -> Command:
        """Build the command without running it."""
        return build_command(
            self.binary_path,
            global_options,
            inputs,
            outputs,
            complex_filter=complex_filter,
        )

    def execute(
        self,
        global_options: GlobalOptions,
        inputs: Sequence[Input] = (),
        outputs: Sequence[Output] = (),
        *,
        complex_filter: ComplexFilterOptions | None = None,
        cancel_event: threading.Event | None = None,
        timeout: float | None = None,
    ) -> str:
        """Build the command and run it to completion.

        Returns:
            Captured stderr.

        Raises:
            CompositionError: If the options fail to render.
            ProcessError: If FFmpeg fails, times out or is cancelled.
        """
        command = self.build_command(
            global_options, inputs, outputs, complex_filter=complex_filter
        )
        return self.run(command, cancel_event=cancel_event, timeout=timeout)

    def run(
        self,
        command: Command,
        *,
        cancel_event: threading.Event | None = None,
        timeout: float | None = None,
    ) -> str:
        """Run a built command.

        Args:
            command: Command to run.
            cancel_event: Setting this event kills FFmpeg.
            timeout: Seconds before FFmpeg is killed. None = no limit.

        Returns:
            Captured stderr.

        Raises:
            ProcessError: If FFmpeg cannot be started, exits non-zero, times
                out or is cancelled. The error carries the command line and
                the stderr captured so far.
        """
        command_line = str(command)
        env = {**os.environ, **command.env}
        logger.debug("Starting ffmpeg", extra={"command": command_line})

        try:
            process = subprocess.Popen(  # nosec B603 - argv list, no shell
                command.argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
                env=env,
            )
        except OSError as e:
            raise ProcessError("starting ffmpeg failed", command_line) from e

        buffer = StderrBuffer()

        def read_stderr() -> None:
            try:
                assert process.stderr is not None
                for line in process.stderr:
                    buffer.append(line)
            except (ValueError, OSError) as e:
                # Pipe closed after kill
                logger.debug("Stderr reader stopped: %s", e)

        reader_thread = threading.Thread(target=read_stderr, daemon=True)
        reader_thread.start()

        stop_ticker = threading.Event()
        ticker_thread: threading.Thread | None = None
        if self._stderr_parser is not None:
            ticker_thread = threading.Thread(
                target=self._tick,
                args=(self._stderr_parser, buffer, stop_ticker),
                daemon=True,
            )
            ticker_thread.start()

        cancelled = False
        timed_out = False
        start_time = time.monotonic()
        try:
            while True:
                try:
                    process.wait(timeout=self.POLL_INTERVAL)
                    break
                except subprocess.TimeoutExpired:
                    pass
                if cancel_event is not None and cancel_event.is_set():
                    cancelled = True
                    break
                if timeout is not None and time.monotonic() - start_time >= timeout:
                    timed_out = True
                    break
        finally:
            # Also reached on KeyboardInterrupt; never leave FFmpeg running
            if process.poll() is None:
                process.kill()
                process.wait()
            stop_ticker.set()
            if ticker_thread is not None:
                ticker_thread.join()
            reader_thread.join(timeout=self.STDERR_DRAIN_TIMEOUT)

        stderr = buffer.snapshot()
        if cancelled:
            logger.warning("ffmpeg cancelled", extra={"command": command_line})
            raise ProcessCancelledError("ffmpeg was cancelled", command_line, stderr)
        if timed_out:
            logger.warning(
                "ffmpeg timed out",
                extra={"command": command_line, "timeout": timeout},
            )
            raise ProcessTimeoutError(
                f"ffmpeg timed out after {timeout} seconds", command_line, stderr
            )
        logger.debug(
            "ffmpeg exited",
            extra={"command": command_line, "returncode": process.returncode},
        )
        if process.returncode != 0:
            raise ProcessError(
                "ffmpeg failed", command_line, stderr, process.returncode
            )
        return stderr

    @staticmethod
    def _tick(
        parser: StdErrParser,
        buffer: StderrBuffer,
        stop: threading.Event,
    ) -> None:
        """Call the parser once per period until stopped."""
        while not stop.wait(parser.period()):
            try:
                parser.process(datetime.now(), buffer.snapshot())
            except Exception as e:
                logger.warning("Stderr parser error: %s", e)
