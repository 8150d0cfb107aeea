"""CLI entrypoint for taskorder."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Order tasks so that dependencies come first.")
config_app = typer.Typer(help="Configuration commands")

PATH_HELP = "Task list file, '-' for stdin. Defaults to input.path from config."


@app.command("run")
def run_cmd(
    path: str | None = typer.Argument(None, help=PATH_HELP),
    stream: bool = typer.Option(
        False, "--stream", help="Print each block as soon as it closes"
    ),
    config: Path | None = typer.Option(None, "--config", help="Extra YAML config file"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """Print the task order for every block."""
    commands.run(path=path, stream=stream, config_path=config, log_level=log_level)


@app.command("tree")
def tree_cmd(
    path: str | None = typer.Argument(None, help=PATH_HELP),
    config: Path | None = typer.Option(None, "--config", help="Extra YAML config file"),
) -> None:
    """Dump the dependency trees as JSON."""
    commands.tree(path=path, config_path=config)


@app.command("check")
def check_cmd(
    path: str | None = typer.Argument(None, help=PATH_HELP),
    config: Path | None = typer.Option(None, "--config", help="Extra YAML config file"),
) -> None:
    """Validate a task list."""
    commands.check(path=path, config_path=config)


@config_app.command("show")
def config_show_cmd(
    config: Path | None = typer.Option(None, "--config", help="Extra YAML config file"),
) -> None:
    """Show effective configuration."""
    commands.config_show(config_path=config)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
