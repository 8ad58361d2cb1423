"""Shared fixtures: an in-memory stand-in for the tmux binary."""

import pytest

from tmuxman.hierarchy import Hierarchy
from tmuxman.tmux import ProcessFailure, TmuxClient


class FakeTmux:
    """Serves canned list-* output and records every argv.

    sessions: list of "id|name|count|created" lines
    windows: session id -> list of window lines
    panes: window id -> list of pane lines
    fail: subcommands that exit non-zero
    """

    def __init__(self):
        self.sessions: list[str] = []
        self.windows: dict[str, list[str]] = {}
        self.panes: dict[str, list[str]] = {}
        self.fail: set[str] = set()
        self.calls: list[list[str]] = []

    def __call__(self, args: list[str]) -> str:
        self.calls.append(list(args))
        command = args[0]
        if command in self.fail:
            raise ProcessFailure(args, 1, "simulated failure")
        if command == "list-sessions":
            return "\n".join(self.sessions)
        if command == "list-windows":
            return "\n".join(self.windows.get(args[2], []))
        if command == "list-panes":
            return "\n".join(self.panes.get(args[2], []))
        return ""

    def commands(self) -> list[str]:
        return [call[0] for call in self.calls]

    def writes(self) -> list[list[str]]:
        return [call for call in self.calls if not call[0].startswith("list-")]


@pytest.fixture
def fake_tmux() -> FakeTmux:
    """Two sessions: A with windows @1 (2 panes) and @2 (1 pane), B with @3."""
    fake = FakeTmux()
    fake.sessions = ["$0|A|2|Mon Jan  1 10:00", "$1|B|1|Mon Jan  1 11:00"]
    fake.windows = {
        "$0": ["@1|editor|1|b25d,80x24,0,0,1", "@2|logs|0|b25e,80x24,0,0,2"],
        "$1": ["@3|shell|1|b25f,80x24,0,0,3"],
    }
    fake.panes = {
        "@1": ["%1|40|24|/home/u|vim|1", "%2|39|24|/home/u|bash|0"],
        "@2": ["%3|80|24|/var/log|tail|1"],
        "@3": ["%4|80|24|/tmp|zsh|1"],
    }
    return fake


@pytest.fixture
def client(fake_tmux: FakeTmux) -> TmuxClient:
    return TmuxClient(runner=fake_tmux)


@pytest.fixture
def hierarchy(client: TmuxClient) -> Hierarchy:
    h = Hierarchy(client)
    h.refresh_all()
    return h
