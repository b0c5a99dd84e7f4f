"""
Terminal rendering of a selected search result and its details.
"""

import textwrap
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .schema import DetailResult, NormalizedItem

OVERVIEW_WIDTH = 80
INDENT = "  "


def wrap_overview(text: str, width: int = OVERVIEW_WIDTH, indent: str = INDENT) -> List[str]:
    """Wrap text into lines of at most `width` columns, each starting with `indent`.

    Paragraphs are wrapped one by one and a blank paragraph becomes an
    indent-only line. Words longer than the width are kept whole on a line
    of their own.
    """
    if not text:
        return []

    lines = []
    for paragraph in text.split("\n"):
        if not paragraph.strip():
            lines.append(indent)
            continue
        lines.extend(textwrap.wrap(
            paragraph,
            width=width,
            initial_indent=indent,
            subsequent_indent=indent,
            break_long_words=False,
            break_on_hyphens=False
        ))
    return lines


class Presenter:
    def __init__(self, console: Optional[Console] = None, site_url: str = "https://www.themoviedb.org"):
        self.console = console or Console()
        self.site_url = site_url.rstrip("/")

    def _line(self, text: str = "") -> None:
        self.console.print(text, highlight=False, soft_wrap=True)

    def _heading(self, label: str) -> None:
        self._line(f"{INDENT}[green]{label}[/green]")
        self._line()

    def _field(self, label: str, value: object) -> None:
        self._line(f"{INDENT}[green]{label}[/green] {escape(str(value))}")
        self._line()

    def _value(self, value: str) -> None:
        self._line(f"{INDENT}{escape(value)}")
        self._line()

    def details_url(self, item: NormalizedItem) -> str:
        segment = "tv" if item.media_type == "tv" else "movie"
        return f"{self.site_url}/{segment}/{item.id}"

    def render(self, item: NormalizedItem, detail: Optional[DetailResult] = None) -> None:
        """Print the selected item, followed by its type-specific details when available."""
        self._line()
        self._heading("Title:")
        self._value(item.title)

        self._field("Original language:", item.original_language.upper())

        self._heading("Overview:")
        for line in wrap_overview(item.overview):
            self._line(escape(line))
        self._line()

        if detail is None:
            return

        if item.media_type == "tv":
            self.render_tv(item, detail)
        else:
            self.render_movie(item, detail)

    def render_tv(self, item: NormalizedItem, detail: DetailResult) -> None:
        if detail.has_tv_counts:
            self._field("Number of seasons:", detail.number_of_seasons)
            self._field("Number of episodes:", detail.number_of_episodes)
        else:
            self._line(f"{INDENT}[yellow]Season and episode counts unavailable.[/yellow]")
            self._line()
        self._heading("Tagline:")
        self._value(detail.tagline or "")
        self._heading("For more details, visit:")
        self._value(self.details_url(item))

    def render_movie(self, item: NormalizedItem, detail: DetailResult) -> None:
        self._heading("Tagline:")
        self._value(detail.tagline or "")
        self._heading("Runtime:")
        self._value(f"{detail.runtime or 0} mins.")
        self._heading("For more details, visit:")
        self._value(self.details_url(item))
