"""Entry point for pagenav."""

import logging
import sys

from textual.logging import TextualHandler

from .app import run_app
from .config import Config


def setup_logging(level_name: str) -> None:
    """Send log records to the Textual devtools console."""
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(level=level, handlers=[TextualHandler()], force=True)


def main() -> int:
    """Main entry point for pagenav."""
    try:
        # Load configuration
        config = Config.load()

        setup_logging(config.log_level)

        # Run the application
        run_app(config)

        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
