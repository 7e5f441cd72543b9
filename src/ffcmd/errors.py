"""Error types for ffcmd.

Errors raised while rendering options are wrapped with increasing context
as they travel up through the option groups, so the message of the
outermost error names the whole chain, for example::

    output #2: output options: encoding options: -b option #1: value
    should be a Number
"""

from __future__ import annotations


class FFCmdError(Exception):
    """Base class for ffcmd errors."""


class ParseError(FFCmdError):
    """Raised when numeric shorthand text cannot be parsed."""

    def __init__(self, message: str, text: str = "") -> None:
        self.text = text
        super().__init__(message)


class FormatError(FFCmdError):
    """Raised when a value cannot be rendered to its textual form."""

    def __init__(
        self,
        reason: str,
        flag: str | None = None,
        index: int | None = None,
        value: object = None,
    ) -> None:
        self.reason = reason
        self.flag = flag
        self.index = index
        self.value = value
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.flag is None:
            return self.reason
        if self.index is None:
            return f"{self.flag} option: {self.reason}"
        return f"{self.flag} option #{self.index}: {self.reason}"

    def at_index(self, index: int) -> FormatError:
        """Return a copy of this error tagged with a list position."""
        return FormatError(self.reason, flag=self.flag, index=index, value=self.value)


class CompositionError(FFCmdError):
    """Raised when a nested option group fails.

    Attributes:
        context: What was being rendered (e.g. "output #2").
        cause: The wrapped error.
    """

    def __init__(self, context: str, cause: Exception) -> None:
        self.context = context
        self.cause = cause
        super().__init__(f"{context}: {cause}")

    @property
    def chain(self) -> list[str]:
        """Contexts from outermost to innermost, ending with the root message."""
        contexts = [self.context]
        cause: Exception = self.cause
        while isinstance(cause, CompositionError):
            contexts.append(cause.context)
            cause = cause.cause
        contexts.append(str(cause))
        return contexts

    @property
    def root_cause(self) -> Exception:
        """The innermost non-composition error."""
        cause: Exception = self.cause
        while isinstance(cause, CompositionError):
            cause = cause.cause
        return cause


class ProcessError(FFCmdError):
    """Raised when FFmpeg cannot be started or exits unsuccessfully."""

    def __init__(
        self,
        message: str,
        command: str,
        stderr: str = "",
        returncode: int | None = None,
    ) -> None:
        self.command = command
        self.stderr = stderr
        self.returncode = returncode
        detail = f"{message}: running {command} failed"
        if returncode is not None:
            detail += f" with exit code {returncode}"
        if stderr:
            detail += f" with stderr {stderr}"
        super().__init__(detail)


class ToolNotFoundError(FFCmdError):
    """Raised when the ffmpeg binary cannot be located."""


class ProcessTimeoutError(ProcessError):
    """Raised when FFmpeg is killed because it ran past its timeout."""


class ProcessCancelledError(ProcessError):
    """Raised when FFmpeg is killed because its run was cancelled."""
