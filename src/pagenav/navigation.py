"""Navigation state management for multi-view applications."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TYPE_CHECKING

from .errors import IndexOutOfRange, InvalidState
from .nodes import NavNode

if TYPE_CHECKING:
    from .config import NavigationConfig

logger = logging.getLogger(__name__)

ExitHook = Callable[[], object]


class NavigationController:
    """Home node, ordered content and a cursor on the displayed node.

    Nodes are matched by identity everywhere; the first occurrence wins when a
    node appears more than once. The controller keeps no observers: after an
    operation the owner re-reads the current node and content to redraw.
    """

    def __init__(
        self,
        home: NavNode,
        content: Sequence[NavNode] | None = None,
        *,
        on_exit: ExitHook | None = None,
        home_always_navigable: bool = False,
    ) -> None:
        self._home = home
        self._content: list[NavNode] = list(content) if content is not None else []
        self._current = home
        self._on_exit = on_exit
        # When set, home is reachable even if it is not part of the content
        self.home_always_navigable = home_always_navigable

    @classmethod
    def from_config(
        cls,
        home: NavNode,
        content: Sequence[NavNode] | None,
        config: NavigationConfig,
        on_exit: ExitHook | None = None,
    ) -> NavigationController:
        """Build a controller using the navigation policy from config."""
        return cls(
            home,
            content,
            on_exit=on_exit,
            home_always_navigable=config.home_always_navigable,
        )

    # Accessors

    @property
    def home(self) -> NavNode:
        return self._home

    @property
    def current(self) -> NavNode:
        return self._current

    def get_home(self) -> NavNode:
        """Return the home node."""
        return self._home

    def get_content(self) -> list[NavNode]:
        """Return a copy of the content nodes, home excluded unless added."""
        return list(self._content)

    def get_content_at(self, index: int) -> NavNode:
        """Return the content node at index."""
        self._check_index(index, "look up a node")
        return self._content[index]

    def get_current_node(self) -> NavNode:
        """Return the node being displayed."""
        return self._current

    def get_current_node_index(self) -> int:
        """Return the content position of the current node, or -1."""
        return self._index_of(self._current)

    def __len__(self) -> int:
        return len(self._content)

    def __iter__(self) -> Iterator[NavNode]:
        return iter(list(self._content))

    def __contains__(self, node: object) -> bool:
        return self._index_of(node) != -1

    # Mutators

    def set_home(self, home: NavNode) -> None:
        """Replace the home node. The current node is left alone."""
        self._home = home

    def add_content(self, node: NavNode, index: int | None = None) -> None:
        """Insert a node at index, or append it when index is None.

        Indexes below zero insert at the front and indexes past the end
        append, so exactly one node is always added.
        """
        size = len(self._content)
        if index is None or index >= size:
            position = size
        elif index < 0:
            position = 0
        else:
            position = index
        self._content.insert(position, node)
        logger.debug("Added node %r at %d", node, position)

    def add_all_content(self, nodes: Iterable[NavNode]) -> None:
        """Append nodes in order."""
        for node in nodes:
            self.add_content(node)

    def remove_all_content(self) -> None:
        """Remove every content node, one at a time."""
        for node in list(self._content):
            self.remove_content(node)

    def remove_content(self, node: NavNode) -> bool:
        """Remove the first occurrence of node.

        If node is being displayed, navigate home before removing it so the
        cursor does not point at a node that left the content.

        Returns True if the node was found and removed.
        """
        index = self._index_of(node)
        if index == -1:
            return False

        if node is self._current:
            self.nav_home()

        del self._content[index]
        logger.debug("Removed node %r from %d", node, index)
        return True

    def remove_content_at(self, index: int) -> bool:
        """Remove the content node at index."""
        self._check_index(index, "remove a node")
        return self.remove_content(self._content[index])

    # Navigation

    def nav(self, node: NavNode) -> bool:
        """Display node if it belongs to the content.

        Returns False and leaves the cursor alone when it does not.
        """
        index = self._index_of(node)
        if index != -1:
            self._current = self._content[index]
        elif self.home_always_navigable and node is self._home:
            self._current = self._home
        else:
            logger.debug("Cannot navigate to %r: not in content", node)
            return False

        logger.debug("Navigated to %r", self._current)
        return True

    def nav_to(self, index: int) -> bool:
        """Display the content node at index; -1 means home."""
        if index == -1:
            return self.nav_home()
        self._check_index(index, "navigate")
        return self.nav(self._content[index])

    def nav_home(self) -> bool:
        """Display the home node."""
        return self.nav(self._home)

    def nav_next(self) -> bool:
        """Display the next content node, wrapping to the first."""
        size = self._require_content("navigate to the next node")
        target = (self.get_current_node_index() + 1) % size
        return self.nav(self._content[target])

    def nav_prev(self) -> bool:
        """Display the previous content node, wrapping to the last."""
        size = self._require_content("navigate to the previous node")
        target = (self.get_current_node_index() + size - 1) % size
        return self.nav(self._content[target])

    def set_exit_hook(self, hook: ExitHook | None) -> None:
        """Register the callable run by exit(), or clear it with None."""
        self._on_exit = hook

    def exit(self) -> None:
        """Run the owner's shutdown hook, if any.

        The controller never ends the process itself; whether to quit is up
        to the owner.
        """
        if self._on_exit is None:
            logger.debug("Exit requested with no hook registered")
            return
        logger.info("Exit requested, running shutdown hook")
        self._on_exit()

    # Helpers

    def _index_of(self, node: object) -> int:
        for i, candidate in enumerate(self._content):
            if candidate is node:
                return i
        return -1

    def _check_index(self, index: int, action: str) -> None:
        if not 0 <= index < len(self._content):
            raise IndexOutOfRange(index, len(self._content), action)

    def _require_content(self, action: str) -> int:
        size = len(self._content)
        if size == 0:
            raise InvalidState(f"Cannot {action}: there is no content.")
        return size
