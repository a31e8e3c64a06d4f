"""RichConsoleWriter — Writer backed by a rich Console."""

from rich.console import Console


class RichConsoleWriter:
    """Writes raw text through ``Console.out`` so nothing is styled or reflowed.

    Quote marks, brackets and the like in oracle messages must reach the
    terminal verbatim, so markup, highlighting and emoji codes are all off.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(
            markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    def write(self, text: str) -> None:
        self._console.out(text, end="", highlight=False)
