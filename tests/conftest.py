from datetime import datetime

import pytest

from hello_cli.config import Settings


class ScriptedPrompter:
    """Prompter replaying canned answers and recording what was asked."""

    def __init__(self, names=(), languages=()):
        self.names = list(names)
        self.languages = list(languages)
        self.calls = []

    async def text(self, message, placeholder=""):
        self.calls.append(("text", message))
        return self.names.pop(0)

    async def select(self, message, options):
        self.calls.append(("select", message))
        return self.languages.pop(0)


@pytest.fixture
def settings():
    return Settings(log_command="echo", log_delay=0.0)


@pytest.fixture
def morning():
    return lambda: datetime(2024, 5, 1, 9, 30)


@pytest.fixture
def quiet_env(monkeypatch):
    monkeypatch.setenv("HELLO_CLI_LOG_DELAY", "0")
    monkeypatch.delenv("HELLO_CLI_LOG_COMMAND", raising=False)
    monkeypatch.delenv("HELLO_CLI_LOG_LEVEL", raising=False)
