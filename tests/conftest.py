"""Shared fixtures for pagenav tests."""

import pytest

from pagenav.navigation import NavigationController
from pagenav.nodes import Page


@pytest.fixture
def pages():
    """Home page A and content pages B, C, D."""
    return {
        "A": Page("Home", "⌂"),
        "B": Page("Inbox", "✉"),
        "C": Page("Calendar", "▦"),
        "D": Page("Settings", "⚙"),
    }


@pytest.fixture
def nav(pages):
    """Controller with home A and content [B, C, D]."""
    return NavigationController(pages["A"], [pages["B"], pages["C"], pages["D"]])


@pytest.fixture
def nav_with_home(pages):
    """Controller whose content starts with the home page: [A, B, C, D]."""
    return NavigationController(
        pages["A"], [pages["A"], pages["B"], pages["C"], pages["D"]]
    )


@pytest.fixture
def config_paths(tmp_path, monkeypatch):
    """Point config loading at a temp directory and return the config path."""
    config_dir = tmp_path / ".config" / "pagenav"
    config_path = config_dir / "config.toml"
    monkeypatch.setattr("pagenav.config.get_config_dir", lambda: config_dir)
    monkeypatch.setattr("pagenav.config.get_config_path", lambda: config_path)
    return config_path
