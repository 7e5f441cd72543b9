"""CLI build command: print the FFmpeg command for a job file."""

import json
from pathlib import Path

import click

from ffcmd.cli.exit_codes import ExitCode
from ffcmd.command import Command
from ffcmd.config import FFCmdConfig
from ffcmd.errors import FFCmdError
from ffcmd.jobs import JobFileError, load_job


@click.command("build")
@click.argument("job_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the argument list as JSON instead of a shell command.",
)
@click.pass_context
def build_command(ctx: click.Context, job_file: Path, as_json: bool) -> None:
    """Print the FFmpeg command described by JOB_FILE."""
    config: FFCmdConfig = ctx.obj["config"]

    try:
        job = load_job(job_file)
    except JobFileError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.JOB_VALIDATION_ERROR)

    try:
        args = job.build_args()
    except FFCmdError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.COMMAND_BUILD_ERROR)

    binary = str(config.tools.ffmpeg) if config.tools.ffmpeg else "ffmpeg"
    if as_json:
        click.echo(json.dumps([binary, *args]))
    else:
        click.echo(str(Command(binary=binary, args=tuple(args))))
