"""Configuration loading and defaults for pagenav."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .nodes import Page


def get_config_dir() -> Path:
    """Get the pagenav config directory (XDG-style)."""
    return Path.home() / ".config" / "pagenav"


def get_config_path() -> Path:
    """Get the config file path."""
    return get_config_dir() / "config.toml"


def _toml_str(value: str) -> str:
    """Quote a value as a TOML basic string."""
    escaped = []
    for ch in value:
        if ch == "\\":
            escaped.append("\\\\")
        elif ch == '"':
            escaped.append('\\"')
        elif ch == "\n":
            escaped.append("\\n")
        elif ch == "\t":
            escaped.append("\\t")
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            escaped.append(f"\\u{ord(ch):04X}")
        else:
            escaped.append(ch)
    return '"' + "".join(escaped) + '"'


def _default_pages() -> list["PageConfig"]:
    return [
        PageConfig("Inbox", "✉"),
        PageConfig("Calendar", "▦"),
        PageConfig("Settings", "⚙"),
    ]


@dataclass
class PageConfig:
    """A page declared in the config file."""

    title: str
    icon: str = ""

    def to_page(self) -> Page:
        return Page(title=self.title, icon=self.icon)


@dataclass
class NavigationConfig:
    """Navigation policy configuration."""

    home_always_navigable: bool = False
    include_home: bool = False  # put home at index 0 of the content


@dataclass
class Config:
    """Application configuration."""

    home: PageConfig = field(default_factory=lambda: PageConfig("Home", "⌂"))
    pages: list[PageConfig] = field(default_factory=_default_pages)
    navigation: NavigationConfig = field(default_factory=NavigationConfig)
    log_level: str = "WARNING"

    def build_pages(self) -> tuple[Page, list[Page]]:
        """Create the home page and the content pages."""
        home = self.home.to_page()
        content = [page.to_page() for page in self.pages]
        if self.navigation.include_home:
            content.insert(0, home)
        return home, content

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create defaults."""
        config_path = get_config_path()

        # Ensure config directory exists
        get_config_dir().mkdir(parents=True, exist_ok=True)

        if not config_path.exists():
            default_config = cls()
            default_config.save()
            return default_config

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        # Parse home page
        home_data = data.get("home", {})
        home = PageConfig(
            title=home_data.get("title", "Home"),
            icon=home_data.get("icon", "⌂"),
        )

        # Parse content pages, keeping defaults when the key is absent
        if "pages" in data:
            pages = [
                PageConfig(title=p.get("title", ""), icon=p.get("icon", ""))
                for p in data["pages"]
            ]
        else:
            pages = _default_pages()

        # Parse navigation policy
        nav_data = data.get("navigation", {})
        navigation = NavigationConfig(
            home_always_navigable=nav_data.get("home_always_navigable", False),
            include_home=nav_data.get("include_home", False),
        )

        log_level = str(data.get("log_level", "WARNING")).upper()

        return cls(
            home=home,
            pages=pages,
            navigation=navigation,
            log_level=log_level,
        )

    def save(self) -> None:
        """Save configuration to file."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        # Build TOML content manually (tomllib is read-only)
        lines = [
            '# pagenav Configuration',
            '',
            '# Logging level: DEBUG, INFO, WARNING or ERROR',
            f'log_level = {_toml_str(self.log_level)}',
            '',
            '# Page shown at startup',
            '[home]',
            f'title = {_toml_str(self.home.title)}',
            f'icon = {_toml_str(self.home.icon)}',
            '',
            '# home_always_navigable: allow returning home even if it is not a page',
            '# include_home: list home as the first page',
            '[navigation]',
            f'home_always_navigable = {str(self.navigation.home_always_navigable).lower()}',
            f'include_home = {str(self.navigation.include_home).lower()}',
        ]

        for page in self.pages:
            lines.extend([
                '',
                '[[pages]]',
                f'title = {_toml_str(page.title)}',
                f'icon = {_toml_str(page.icon)}',
            ])

        config_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
