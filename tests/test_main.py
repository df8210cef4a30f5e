"""Tests for the pagenav entry point."""

import logging

from pagenav import __main__ as entry


class TestMain:
    def test_runs_app_with_loaded_config(self, config_paths, monkeypatch):
        seen = []
        monkeypatch.setattr(entry, "run_app", lambda config: seen.append(config))
        assert entry.main() == 0
        assert len(seen) == 1
        assert config_paths.exists()

    def test_reports_errors(self, config_paths, monkeypatch, capsys):
        def boom(config):
            raise RuntimeError("terminal too small")

        monkeypatch.setattr(entry, "run_app", boom)
        assert entry.main() == 1
        assert "Error: terminal too small" in capsys.readouterr().err

    def test_keyboard_interrupt_is_clean_exit(self, config_paths, monkeypatch):
        def interrupted(config):
            raise KeyboardInterrupt

        monkeypatch.setattr(entry, "run_app", interrupted)
        assert entry.main() == 0

    def test_setup_logging_level(self):
        entry.setup_logging("debug")
        assert logging.getLogger().level == logging.DEBUG
        entry.setup_logging("nonsense")
        assert logging.getLogger().level == logging.WARNING
