"""CLI module for ffcmd."""

import logging
from pathlib import Path

import click

from ffcmd.cli.exit_codes import ExitCode
from ffcmd.config import get_config
from ffcmd.logging import configure_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="ffcmd")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file (default: ~/.ffcmd/config.toml).",
)
@click.option(
    "--ffmpeg",
    "ffmpeg_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to the ffmpeg binary.",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    ffmpeg_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """ffcmd - Build and run FFmpeg commands from job files."""
    ctx.ensure_object(dict)
    try:
        config = get_config(
            config_path,
            ffmpeg_path=ffmpeg_path,
            log_level=log_level.casefold() if log_level else None,
            log_file=log_file,
            log_format="json" if log_json else None,
        )
    except ValueError as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        ctx.exit(ExitCode.CONFIG_ERROR)

    configure_logging(config.logging)
    ctx.obj["config"] = config


# Defer import to avoid circular dependency
def _register_commands():
    from ffcmd.cli.build import build_command
    from ffcmd.cli.run import run_command

    main.add_command(build_command)
    main.add_command(run_command)


_register_commands()
