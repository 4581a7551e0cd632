"""
CLI module - Command line interface for Transcode Geometry

Entry point for the `tgeo` command using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import AppConfig, load_config
from .logging_setup import setup_logging
from .resolution import ConfigurationError, ResolutionPlan, ResolutionPolicy, plan_resolution
from .stream import VideoStreamInfo, video_streams_from_probe

console = Console()
app = typer.Typer(
    name="tgeo",
    help="Transcode Geometry - target resolution, scale filter and output size for video streams.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    if value:
        console.print(f"tgeo version {__version__}")
        raise typer.Exit()


# Type aliases for common options
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to config file", exists=True, dir_okay=False),
]
TargetOption = Annotated[
    str | None,
    typer.Option("--target", "-t", help="Target resolution: 'original' or larger-side pixels (overrides config)"),
]


@app.callback()
def main(
    version: Annotated[
        bool, typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version")
    ] = False,
):
    """Transcode Geometry - target resolution, scale filter and output size for video streams."""
    pass


def _load(config_path: Path | None) -> AppConfig:
    """Load configuration and set up logging from it."""
    try:
        app_config = load_config(config_path)
        setup_logging(app_config.logging)
    except (yaml.YAMLError, ValueError) as e:
        console.print(f"[red]Error:[/red] Invalid configuration: {e}")
        raise typer.Exit(1) from None
    return app_config


def _get_policy(app_config: AppConfig, target: str | None) -> ResolutionPolicy:
    if target is not None:
        return ResolutionPolicy.from_setting(target)
    return app_config.transcode.resolution_policy()


def _plan_table(title: str, rows: list[tuple[VideoStreamInfo, ResolutionPlan]]) -> Table:
    table = Table(title=title)
    table.add_column("Stream", style="cyan")
    table.add_column("Source")
    table.add_column("Target")
    table.add_column("Scale")
    table.add_column("Output")
    table.add_column("Resize")

    for stream, plan in rows:
        resize = "[green]yes[/green]" if plan.should_scale else "[dim]no[/dim]"
        table.add_row(
            str(stream.index),
            f"{stream.width}x{stream.height}",
            str(plan.target_resolution),
            plan.scaling,
            f"{plan.size.width}x{plan.size.height}",
            resize,
        )
    return table


def _plan_all(streams: list[VideoStreamInfo], policy: ResolutionPolicy) -> list[tuple[VideoStreamInfo, ResolutionPlan]]:
    try:
        return [(stream, plan_resolution(stream, policy)) for stream in streams]
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None


@app.command()
def plan(
    width: Annotated[int, typer.Argument(help="Source width in pixels", min=1)],
    height: Annotated[int, typer.Argument(help="Source height in pixels", min=1)],
    target: TargetOption = None,
    config: ConfigOption = None,
):
    """
    Show the output geometry for a single stream.

    [bold]Examples:[/bold]

        tgeo plan 1920 1080 -t 720

        tgeo plan 1080 1920 --target original
    """
    app_config = _load(config)
    policy = _get_policy(app_config, target)

    stream = VideoStreamInfo(index=0, width=width, height=height)
    rows = _plan_all([stream], policy)
    console.print(_plan_table(f"Resolution Plan (target: {policy.target_resolution})", rows))


@app.command()
def probe(
    probe_file: Annotated[
        Path, typer.Argument(help="ffprobe JSON (-show_streams -of json)", exists=True, dir_okay=False)
    ],
    target: TargetOption = None,
    config: ConfigOption = None,
):
    """
    Show the output geometry for every video stream in an ffprobe report.

    [bold]Example:[/bold]

        ffprobe -v error -show_streams -of json input.mov > probe.json

        tgeo probe probe.json -t 1080
    """
    app_config = _load(config)
    policy = _get_policy(app_config, target)

    try:
        with open(probe_file) as f:
            streams = video_streams_from_probe(json.load(f))
    except (json.JSONDecodeError, ValueError) as e:
        console.print(f"[red]Error:[/red] Cannot read {probe_file.name}: {e}")
        raise typer.Exit(1) from None

    if not streams:
        console.print(f"[yellow]No video streams in {probe_file.name}[/yellow]")
        return

    rows = _plan_all(streams, policy)
    console.print(_plan_table(f"{probe_file.name} (target: {policy.target_resolution})", rows))


@app.command("show-config")
def show_config(config: ConfigOption = None):
    """Show the effective transcode configuration."""
    app_config = _load(config)

    table = Table(title="Transcode Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for key, value in app_config._to_dict()["transcode"].items():
        if isinstance(value, list):
            value = ", ".join(map(str, value)) or "-"
        table.add_row(key, str(value))

    console.print(table)


if __name__ == "__main__":
    app()
