"""Main panel showing the page being displayed."""

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static

from ..nodes import NavNode


def render_page(page: NavNode, index: int, total: int) -> Text:
    """Build the panel body for a page as Rich Text."""
    text = Text()
    if page.icon:
        text.append(f"{page.icon}  ", style="bold bright_yellow")
    text.append(page.title, style="bold bright_white")
    text.append("\n\n")
    if index == -1:
        text.append("Not in the page list", style="dim")
    else:
        text.append(f"Page {index + 1} of {total}", style="italic cyan")
    return text


class PageView(Vertical):
    """Panel rendering the current page."""

    DEFAULT_CSS = """
    PageView {
        width: 100%;
        height: 100%;
        padding: 1 2;
    }

    PageView > #page-body {
        width: 100%;
        height: auto;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(id="page-body")

    def show_page(self, page: NavNode, index: int, total: int) -> None:
        """Display page along with its position in the content."""
        self.query_one("#page-body", Static).update(render_page(page, index, total))
