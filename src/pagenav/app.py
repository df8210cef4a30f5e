"""Main Textual application for pagenav."""

import logging
from collections.abc import Callable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header, ListView

from .config import Config
from .errors import InvalidState
from .navigation import NavigationController
from .widgets import PageList, PageView
from .widgets.page_list import PageItem

logger = logging.getLogger(__name__)


class PagenavApp(App):
    """pagenav - multi-page navigation shell."""

    TITLE = "pagenav"
    SUB_TITLE = "Page Navigator"

    CSS = """
    #main-container {
        width: 100%;
        height: 1fr;
    }

    #page-list {
        width: 30%;
        height: 100%;
        border: solid $accent;
    }

    #page-list:focus-within {
        border: solid cyan;
    }

    #page-view {
        width: 70%;
        height: 100%;
        border: solid $success;
    }
    """

    BINDINGS = [
        Binding("q", "quit_navigator", "Quit"),
        Binding("n", "nav_next", "Next"),
        Binding("p", "nav_prev", "Previous"),
        Binding("h", "nav_home", "Home"),
        Binding("d", "remove_current", "Remove"),
    ]

    def __init__(self, controller: NavigationController) -> None:
        super().__init__()
        self.controller = controller
        self.controller.set_exit_hook(self.exit)

    @classmethod
    def from_config(cls, config: Config) -> "PagenavApp":
        """Build the app and its controller from config."""
        home, content = config.build_pages()
        controller = NavigationController.from_config(home, content, config.navigation)
        return cls(controller)

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-container"):
            yield PageList(id="page-list")
            yield PageView(id="page-view")
        yield Footer()

    def on_mount(self) -> None:
        """Draw the initial state."""
        self.refresh_view()
        self.query_one("#page-list", PageList).list_view.focus()

    def refresh_view(self) -> None:
        """Re-read the controller and redraw both panels."""
        content = self.controller.get_content()
        index = self.controller.get_current_node_index()
        self.query_one("#page-list", PageList).update_pages(content, index)
        self.query_one("#page-view", PageView).show_page(
            self.controller.get_current_node(), index, len(content)
        )

    def action_nav_next(self) -> None:
        """Show the next page."""
        self._step(self.controller.nav_next)

    def action_nav_prev(self) -> None:
        """Show the previous page."""
        self._step(self.controller.nav_prev)

    def action_nav_home(self) -> None:
        """Show the home page."""
        if not self.controller.nav_home():
            self.notify("Home is not in the page list", severity="warning")
            return
        self.refresh_view()

    def action_remove_current(self) -> None:
        """Remove the displayed page from the page list."""
        current = self.controller.get_current_node()
        if not self.controller.remove_content(current):
            self.notify("Current page is not in the page list", severity="warning")
            return
        self.notify(f"Removed: {current.title}", timeout=2)
        self.refresh_view()

    def action_quit_navigator(self) -> None:
        """Quit through the controller's shutdown hook."""
        self.controller.exit()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Navigate to a page picked in the list."""
        if isinstance(event.item, PageItem) and self.controller.nav(event.item.page):
            self.refresh_view()

    def _step(self, move: Callable[[], bool]) -> None:
        try:
            move()
        except InvalidState as e:
            logger.debug("Navigation step rejected: %s", e)
            self.notify("No pages to navigate", severity="warning")
            return
        self.refresh_view()


def run_app(config: Config) -> None:
    """Run the pagenav application."""
    app = PagenavApp.from_config(config)
    app.run()
