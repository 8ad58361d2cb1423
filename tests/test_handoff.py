"""Tests for handing the terminal over after the UI exits."""

from unittest.mock import MagicMock, patch

from tmuxman.handoff import handoff
from tmuxman.tmux import TmuxClient
from tmuxman.types import AttachTarget


def test_inside_tmux_switches_client(fake_tmux):
    client = TmuxClient(runner=fake_tmux)
    exec_fn = MagicMock()
    with patch.dict("os.environ", {"TMUX": "/tmp/tmux-1000/default,1,0"}):
        assert handoff(AttachTarget("A", window_id="@1"), client, exec_fn) is True
    assert fake_tmux.calls == [["switch-client", "-t", "A:@1"]]
    exec_fn.assert_not_called()


def test_outside_tmux_execs_attach(fake_tmux):
    client = TmuxClient(binary="tmux", runner=fake_tmux)
    exec_fn = MagicMock()
    with patch.dict("os.environ", {}, clear=True):
        handoff(AttachTarget("A"), client, exec_fn)
    exec_fn.assert_called_once_with("tmux", ["tmux", "attach", "-t", "A"])


def test_pane_target_selects_window_and_pane_first(fake_tmux):
    client = TmuxClient(runner=fake_tmux)
    with patch.dict("os.environ", {}, clear=True):
        handoff(AttachTarget("A", window_id="@2", pane_id="%3"), client, MagicMock())
    assert fake_tmux.calls == [["select-window", "-t", "@2"], ["select-pane", "-t", "%3"]]


def test_failed_switch_reports_false(fake_tmux):
    fake_tmux.fail.add("switch-client")
    client = TmuxClient(runner=fake_tmux)
    with patch.dict("os.environ", {"TMUX": "x"}):
        assert handoff(AttachTarget("A"), client, MagicMock()) is False
