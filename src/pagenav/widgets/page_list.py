"""Page list widget showing the navigable content."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, ListItem, ListView, Static

from ..nodes import NavNode


class PageItem(ListItem):
    """A list item representing a content page."""

    def __init__(self, page: NavNode) -> None:
        super().__init__()
        self.page = page

    def compose(self) -> ComposeResult:
        yield Label(f"{self.page.icon}  {self.page.title}".strip())


class PageList(Vertical):
    """Widget listing the content pages with the current one marked."""

    DEFAULT_CSS = """
    PageList {
        width: 1fr;
        height: 1fr;
    }

    PageList > #page-list-header {
        background: $primary-background;
        color: $warning;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    PageList > #page-list-view {
        height: 1fr;
    }

    PageList ListItem {
        padding: 0 1;
    }

    PageList ListItem.current-page {
        background: $accent;
        text-style: bold;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._pages: list[NavNode] = []

    def compose(self) -> ComposeResult:
        yield Static("Pages", id="page-list-header")
        yield ListView(id="page-list-view")

    @property
    def list_view(self) -> ListView:
        return self.query_one("#page-list-view", ListView)

    @property
    def pages(self) -> list[NavNode]:
        return list(self._pages)

    def update_pages(self, pages: list[NavNode], current_index: int) -> None:
        """Rebuild the list and mark the page at current_index."""
        self._pages = list(pages)
        list_view = self.list_view
        list_view.clear()
        for i, page in enumerate(self._pages):
            item = PageItem(page)
            if i == current_index:
                item.add_class("current-page")
            list_view.append(item)
        if 0 <= current_index < len(self._pages):
            list_view.index = current_index
