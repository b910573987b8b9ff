"""
Logging setup tests.
"""
import logging

from hrms.core.logging_config import setup_logging


class TestSetupLogging:

    def setup_method(self):
        self.root = logging.getLogger()
        self.saved_level = self.root.level

    def teardown_method(self):
        self.root.setLevel(self.saved_level)

    def test_adds_one_handler_when_unconfigured(self, monkeypatch):
        monkeypatch.setattr(self.root, "handlers", [])

        setup_logging("DEBUG")

        assert len(self.root.handlers) == 1
        assert self.root.level == logging.DEBUG

    def test_repeated_calls_do_not_stack_handlers(self, monkeypatch):
        monkeypatch.setattr(self.root, "handlers", [])

        setup_logging("INFO")
        setup_logging("INFO")

        assert len(self.root.handlers) == 1

    def test_leaves_existing_configuration_alone(self, monkeypatch):
        existing = logging.NullHandler()
        monkeypatch.setattr(self.root, "handlers", [existing])

        setup_logging("DEBUG")

        assert self.root.handlers == [existing]
