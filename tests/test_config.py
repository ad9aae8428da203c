"""Tests for environment overrides."""

import importlib

from smallsh import config


class TestKillTimeout:
    """SMALLSH_KILL_TIMEOUT parsing."""

    def reload_with(self, monkeypatch, value):
        monkeypatch.setenv("SMALLSH_KILL_TIMEOUT", value)
        return importlib.reload(config)

    def test_valid_value(self, monkeypatch):
        try:
            assert self.reload_with(monkeypatch, "2.5").KILL_TIMEOUT == 2.5
        finally:
            monkeypatch.undo()
            importlib.reload(config)

    def test_malformed_value_falls_back(self, monkeypatch):
        try:
            cfg = self.reload_with(monkeypatch, "soon")
            assert cfg.KILL_TIMEOUT == cfg.DEFAULT_KILL_TIMEOUT
        finally:
            monkeypatch.undo()
            importlib.reload(config)
