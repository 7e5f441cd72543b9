"""Exit codes for ffcmd CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (job file, config)
    30-39: Tool errors
    40-49: Operation errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for ffcmd CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    INTERRUPTED = 2  # Ctrl+C / SIGINT

    # Validation errors (10-19)
    JOB_VALIDATION_ERROR = 10
    CONFIG_ERROR = 11
    COMMAND_BUILD_ERROR = 12

    # Tool errors (30-39)
    TOOL_NOT_AVAILABLE = 30

    # Operation errors (40-49)
    OPERATION_FAILED = 40
    TIMED_OUT = 41
