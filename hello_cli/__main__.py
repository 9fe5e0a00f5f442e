"""Command line interface for hello-cli."""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import datetime
from typing import Callable, Optional, Sequence

import click
import typer
from rich.text import Text

from . import __version__, decoders
from .binder import ArgumentKind, ArgumentSpec, bind
from .config import Settings
from .console import console, err_console
from .constants import APP_NAME, ExitCode
from .effects import LogAction, complete, make_log_to_system
from .greeting import create_greeting
from .interactive import InteractiveFallback, needs_fallback
from .log import setup_logging
from .prompts import Prompter, RichPrompter
from .result import CancellationSignal, Failure

logger = logging.getLogger(__name__)

ARGUMENTS = (
    ArgumentSpec(
        key="name",
        kind=ArgumentKind.POSITIONAL,
        decoder=decoders.string,
        display_name="name",
        help="Name to greet",
    ),
    ArgumentSpec(
        key="lang",
        kind=ArgumentKind.NAMED,
        decoder=decoders.optional(decoders.language),
        required=False,
        long="lang",
        short="l",
        help="Language (en, ja, es)",
    ),
)


def _usage() -> str:
    lines = []
    for spec in ARGUMENTS:
        flags = spec.label if spec.kind is ArgumentKind.POSITIONAL else f"--{spec.long}, -{spec.short}"
        lines.append(f"{flags}: {spec.help}{'' if spec.required else ' (optional)'}")
    return "\n\n".join(lines)


def report(error: object) -> None:
    err_console.print(Text(f"Error: {error}", style="red"))


async def run(
    tokens: Sequence[str],
    prompter: Optional[Prompter] = None,
    log_action: Optional[LogAction] = None,
    now: Callable[[], datetime] = datetime.now,
    settings: Optional[Settings] = None,
) -> ExitCode:
    """Bind TOKENS, fill the gaps interactively, greet, then log.

    Raises CancellationSignal when the user aborts a prompt.
    """
    settings = settings or Settings.from_env()
    bound = await bind(ARGUMENTS, tokens)
    if isinstance(bound, Failure):
        report(bound.error)
        return ExitCode.USER_ERROR

    name, language = bound.value["name"], bound.value["lang"]
    if needs_fallback(language):
        fallback = InteractiveFallback(prompter or RichPrompter())
        name, language = await fallback.resolve(name)

    greeting = create_greeting(name, language, now())
    if isinstance(greeting, Failure):
        report(greeting.error)
        return ExitCode.USER_ERROR

    await complete(
        greeting.value,
        log_action or make_log_to_system(settings.log_command),
        delay=settings.log_delay,
    )
    console.print(greeting.value, style="bold green", markup=False, highlight=False, soft_wrap=True)
    return ExitCode.OK


app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)

OWN_FLAGS = ("--verbose",)


def command_tokens(argv: Sequence[str]) -> list[str]:
    """Drop the flags Typer handles itself; everything after ``--`` is kept as is."""
    tokens: list[str] = []
    rest = iter(argv)
    for token in rest:
        if token == "--":
            tokens.append(token)
            tokens.extend(rest)
            break
        if token not in OWN_FLAGS:
            tokens.append(token)
    return tokens


def exit_status(code: object) -> ExitCode:
    """Map whatever the command returned onto the three documented statuses."""
    if code is None:
        return ExitCode.OK
    try:
        return ExitCode(code)
    except ValueError:
        # Typer reports Ctrl-C as 130.
        return ExitCode.USER_ERROR


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    epilog=_usage(),
)
def hello(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr."),
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> ExitCode:
    """Greet NAME in the chosen language, asking for anything missing."""
    settings = Settings.from_env()
    setup_logging("DEBUG" if verbose else settings.log_level)
    # Click swallows a bare "--", so bind from the raw argv when main() passed it.
    argv = ctx.obj.get("argv") if isinstance(ctx.obj, dict) else None
    tokens = command_tokens(argv) if argv is not None else list(ctx.args)
    return asyncio.run(run(tokens, settings=settings))


def main(argv: Optional[list[str]] = None) -> None:
    """Run the CLI application and exit with its status code."""
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        code = exit_status(app(args=argv, prog_name=APP_NAME, standalone_mode=False, obj={"argv": argv}))
    except (CancellationSignal, KeyboardInterrupt):
        code = ExitCode.USER_ERROR
    except click.ClickException as exc:
        exc.show(file=sys.stderr)
        code = ExitCode.USER_ERROR
    except click.exceptions.Abort:
        code = ExitCode.USER_ERROR
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unhandled error", exc_info=True)
        err_console.print(f"[red]Fatal error:[/red] {type(exc).__name__}", highlight=False)
        code = ExitCode.INTERNAL_ERROR
    sys.exit(int(code))


if __name__ == "__main__":
    main()
