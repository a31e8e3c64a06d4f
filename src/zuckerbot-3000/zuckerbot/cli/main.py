"""CLI entrypoint for zuckerbot — typer app that runs the oracle on the terminal."""

import asyncio
import logging
import random
import sys
import time

import structlog
import typer

from zuckerbot.cli.console import ConsoleLoop, banner, stdin_lines
from zuckerbot.config.domain.config import OracleConfig
from zuckerbot.core.errors import ZuckerbotError
from zuckerbot.oracle.application.oracle import Oracle
from zuckerbot.oracle.domain.observer import OracleObserver
from zuckerbot.oracle.domain.writer import Writer
from zuckerbot.oracle.infrastructure.console_writer import RichConsoleWriter
from zuckerbot.oracle.infrastructure.observer import StructlogOracleObserver

app = typer.Typer(add_completion=False)

_LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog to write to stderr, leaving stdout to the oracle."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = _LOG_LEVELS.get(log_level.lower())
    if level is None:
        typer.echo(
            f"Invalid log level: {log_level!r}. Must be one of: "
            f"{', '.join(_LOG_LEVELS)}."
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


async def _consult(
    config: OracleConfig,
    writer: Writer,
    rng: random.Random,
    observer: OracleObserver,
) -> None:
    writer.write(banner(persona=config.persona))
    async with Oracle(
        config=config, writer=writer, rng=rng, observer=observer
    ) as oracle:
        console = ConsoleLoop(intake=oracle, writer=writer, persona=config.persona)
        await console.run(lines=stdin_lines(stream=sys.stdin, observer=observer))
        # Input is gone but pending answers and prophecies keep coming.
        await oracle.serve_forever()


@app.command()
def run(
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Diagnostic log format on stderr: 'console' or 'json'",
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Minimum diagnostic log level: debug, info, warning or error",
    ),
) -> None:
    """Ask the oracle anything. Answers arrive in due time."""
    _configure_structlog(log_format=log_format, log_level=log_level)

    config = OracleConfig()
    writer = RichConsoleWriter()
    # Fresh pseudo random numbers every run.
    rng = random.Random(time.time())

    try:
        asyncio.run(
            _consult(
                config=config,
                writer=writer,
                rng=rng,
                observer=StructlogOracleObserver(),
            )
        )
    except KeyboardInterrupt:
        typer.echo("")
        sys.exit(0)
    except ZuckerbotError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


if __name__ == "__main__":
    app()
