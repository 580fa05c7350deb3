from dataclasses import dataclass, replace

import typer

from gittown.adapters.command_runner.subprocess_runner import SubprocessCommandRunner
from gittown.adapters.console.typer_console import TyperConsole
from gittown.adapters.input.stream_reader import StreamInputReader
from gittown.application.browser import get_open_browser_command
from gittown.application.messages import print_label_and_value
from gittown.application.processes import (
    output_contains,
    output_contains_line,
    run_require_output,
)
from gittown.application.user_input import get_user_input
from gittown.config import Settings, load_settings, parse_log_level
from gittown.domain.command import Command
from gittown.logging_utils import configure_logging

app = typer.Typer(add_completion=False)

_PASSTHROUGH = {"ignore_unknown_options": True, "allow_interspersed_args": False}


@dataclass
class Services:
    settings: Settings
    runner: SubprocessCommandRunner
    console: TyperConsole
    reader: StreamInputReader


def _services(ctx: typer.Context) -> Services:
    return ctx.obj


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(None, "--log-level"),
) -> None:
    try:
        settings = load_settings()
        if log_level is not None:
            settings = replace(
                settings, log_level=parse_log_level(log_level, "--log-level")
            )
    except ValueError as exc:
        raise typer.BadParameter(str(exc))
    configure_logging(settings.log_level)
    ctx.obj = Services(
        settings=settings,
        runner=SubprocessCommandRunner(),
        console=TyperConsole(color=settings.color),
        reader=StreamInputReader(),
    )


@app.command(context_settings=_PASSTHROUGH)
def run(ctx: typer.Context, command: list[str] = typer.Argument(...)):
    services = _services(ctx)
    output = run_require_output(
        Command(command), runner=services.runner, console=services.console
    )
    services.console.echo(output)


@app.command(context_settings=_PASSTHROUGH)
def contains(
    ctx: typer.Context, value: str, command: list[str] = typer.Argument(...)
):
    services = _services(ctx)
    found = output_contains(
        Command(command), value, runner=services.runner, console=services.console
    )
    raise typer.Exit(0 if found else 1)


@app.command("contains-line", context_settings=_PASSTHROUGH)
def contains_line(
    ctx: typer.Context, value: str, command: list[str] = typer.Argument(...)
):
    services = _services(ctx)
    found = output_contains_line(
        Command(command), value, runner=services.runner, console=services.console
    )
    raise typer.Exit(0 if found else 1)


@app.command()
def browser(ctx: typer.Context):
    services = _services(ctx)
    services.console.echo(
        get_open_browser_command(
            runner=services.runner,
            console=services.console,
            override=services.settings.browser,
        )
    )


@app.command()
def ask(ctx: typer.Context, prompt: str):
    services = _services(ctx)
    typer.echo(prompt, nl=False)
    services.console.echo(
        get_user_input(reader=services.reader, console=services.console)
    )


@app.command()
def show(ctx: typer.Context, label: str, value: str):
    services = _services(ctx)
    print_label_and_value(label, value, console=services.console)
