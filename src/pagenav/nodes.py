"""Type protocols for navigable nodes and navigators.

These protocols describe what the controller consumes (nodes) and what it
provides (the navigable operation set), so owners can type against the
contract instead of the concrete class.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class NavNode(Protocol):
    """A page that can be navigated to.

    Nodes are compared by identity only. Title and icon are display data for
    the owner; the controller never reads them.
    """

    title: str
    icon: str


@dataclass(eq=False)
class Page:
    """Plain node with a title and an icon reference."""

    title: str
    icon: str = ""

    def __str__(self) -> str:
        return f"{self.icon} {self.title}".strip()


@runtime_checkable
class Navigable(Protocol):
    """Operations offered by a navigator over a home node and its content."""

    def get_home(self) -> NavNode: ...
    def get_content(self) -> list[NavNode]: ...
    def get_content_at(self, index: int) -> NavNode: ...
    def get_current_node(self) -> NavNode: ...
    def get_current_node_index(self) -> int: ...
    def set_home(self, home: NavNode) -> None: ...
    def add_content(self, node: NavNode, index: int | None = ...) -> None: ...
    def add_all_content(self, nodes: Iterable[NavNode]) -> None: ...
    def remove_all_content(self) -> None: ...
    def remove_content(self, node: NavNode) -> bool: ...
    def remove_content_at(self, index: int) -> bool: ...
    def nav(self, node: NavNode) -> bool: ...
    def nav_to(self, index: int) -> bool: ...
    def nav_home(self) -> bool: ...
    def nav_next(self) -> bool: ...
    def nav_prev(self) -> bool: ...
    def set_exit_hook(self, hook: Callable[[], object] | None) -> None: ...
    def exit(self) -> None: ...
