"""CLI run command: execute a job file with FFmpeg."""

import logging
from pathlib import Path

import click

from ffcmd.cli.exit_codes import ExitCode
from ffcmd.config import FFCmdConfig, resolve_ffmpeg
from ffcmd.errors import (
    FFCmdError,
    ProcessError,
    ProcessTimeoutError,
    ToolNotFoundError,
)
from ffcmd.executor import FFmpeg, FFmpegProgress, ProgressParser
from ffcmd.jobs import JobFileError, load_job
from ffcmd.logging import job_context

logger = logging.getLogger(__name__)


def _echo_progress(progress: FFmpegProgress) -> None:
    parts = []
    if progress.frame is not None:
        parts.append(f"frame={progress.frame}")
    if progress.fps is not None:
        parts.append(f"fps={progress.fps:g}")
    if progress.out_time_seconds is not None:
        parts.append(f"time={progress.out_time_seconds:.2f}s")
    if progress.speed:
        parts.append(f"speed={progress.speed}")
    click.echo(" ".join(parts), err=True)


@click.command("run")
@click.argument("job_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Kill FFmpeg after this many seconds.",
)
@click.option(
    "--progress/--no-progress",
    default=False,
    help="Report FFmpeg progress on stderr.",
)
@click.option("--job-id", default=None, help="Identifier used to tag log records.")
@click.pass_context
def run_command(
    ctx: click.Context,
    job_file: Path,
    timeout: float | None,
    progress: bool,
    job_id: str | None,
) -> None:
    """Run the FFmpeg command described by JOB_FILE."""
    config: FFCmdConfig = ctx.obj["config"]

    try:
        job = load_job(job_file)
    except JobFileError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.JOB_VALIDATION_ERROR)

    try:
        ffmpeg = FFmpeg(resolve_ffmpeg(config.tools))
    except ToolNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.TOOL_NOT_AVAILABLE)

    if progress:
        ffmpeg.set_stderr_parser(
            ProgressParser(_echo_progress, period=config.runner.progress_period)
        )

    effective_timeout = timeout if timeout is not None else config.runner.timeout

    with job_context(job_id or job_file.stem):
        try:
            command = ffmpeg.build_command(
                job.global_options,
                job.inputs,
                job.outputs,
                complex_filter=job.complex_filter,
            )
        except FFCmdError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(ExitCode.COMMAND_BUILD_ERROR)

        logger.info("Running %s", command)
        try:
            ffmpeg.run(command, timeout=effective_timeout)
        except KeyboardInterrupt:
            click.echo("Interrupted", err=True)
            ctx.exit(ExitCode.INTERRUPTED)
        except ProcessError as e:
            logger.error("%s", e)
            click.echo(f"Error: {e}", err=True)
            if isinstance(e, ProcessTimeoutError):
                ctx.exit(ExitCode.TIMED_OUT)
            ctx.exit(ExitCode.OPERATION_FAILED)

    logger.info("Finished %s", job_file)
    click.echo(f"Done: {', '.join(str(o.path) for o in job.outputs)}")
