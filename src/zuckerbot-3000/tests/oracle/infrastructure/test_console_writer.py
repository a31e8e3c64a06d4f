"""Tests for RichConsoleWriter."""

import io

from rich.console import Console

from zuckerbot.oracle.infrastructure.console_writer import RichConsoleWriter


def _make_writer() -> tuple[RichConsoleWriter, io.StringIO]:
    buffer = io.StringIO()
    console = Console(
        file=buffer, markup=False, highlight=False, emoji=False, soft_wrap=True
    )
    return RichConsoleWriter(console=console), buffer


class TestRichConsoleWriter:
    def test_single_characters_are_written_without_newline(self) -> None:
        writer, buffer = _make_writer()

        for char in '"hi"':
            writer.write(char)

        assert buffer.getvalue() == '"hi"'

    def test_markup_and_emoji_codes_are_printed_verbatim(self) -> None:
        writer, buffer = _make_writer()

        writer.write("[bold]banana[/bold] :smile:\n")

        assert buffer.getvalue() == "[bold]banana[/bold] :smile:\n"
