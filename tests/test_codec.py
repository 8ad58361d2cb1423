"""Tests for record decoding and argument vectors."""

import pytest

from tmuxman.tmux import PaneRecord, ProcessFailure, SessionRecord, TmuxClient, WindowRecord
from tmuxman.tmux.client import decode_lines
from tmuxman.tmux.pane import PANE_FORMAT, list_panes_args
from tmuxman.tmux.session import SESSION_FORMAT, list_sessions_args
from tmuxman.tmux.window import WINDOW_FORMAT, list_windows_args


def test_format_strings_use_pipe_delimiter():
    assert SESSION_FORMAT == "#{session_id}|#{session_name}|#{session_windows}|#{session_created_string}"
    assert WINDOW_FORMAT == "#{window_id}|#{window_name}|#{window_active}|#{window_layout}"
    assert PANE_FORMAT.count("|") == 5


def test_read_args_are_scoped():
    assert list_sessions_args() == ["list-sessions", "-F", SESSION_FORMAT]
    assert list_windows_args("$3") == ["list-windows", "-t", "$3", "-F", WINDOW_FORMAT]
    assert list_panes_args("@7") == ["list-panes", "-t", "@7", "-F", PANE_FORMAT]


def test_session_full_line():
    record = SessionRecord.from_format_line("$1|work|3|Tue Feb  4 09:15:00 2025")
    assert record == SessionRecord("$1", "work", "3", "Tue Feb  4 09:15:00 2025")


def test_session_missing_fields_default():
    assert SessionRecord.from_format_line("$1|work") == SessionRecord("$1", "work", "0", "")
    assert SessionRecord.from_format_line("") == SessionRecord("", "", "0", "")


def test_window_active_flag_and_defaults():
    assert WindowRecord.from_format_line("@2|vim|1|abcd,80x24,0,0").active is True
    assert WindowRecord.from_format_line("@2|vim|0|abcd").active is False
    assert WindowRecord.from_format_line("@2") == WindowRecord("@2", "", False, "")


def test_pane_short_line_degrades():
    record = PaneRecord.from_format_line("%5|80|24")
    assert record == PaneRecord("%5", "80", "24", "", "", False)
    assert record.size == "80x24"


def test_pane_extra_fields_ignored():
    record = PaneRecord.from_format_line("%5|80|24|/tmp|bash|1|unexpected")
    assert record.active is True
    assert record.current_command == "bash"


def test_decode_lines_skips_blank_lines_and_keeps_order():
    raw = "$2|b|1|x\n\n$1|a|1|y\n"
    assert [s.name for s in decode_lines(raw, SessionRecord)] == ["b", "a"]


@pytest.mark.parametrize(
    "call,expected",
    [
        (lambda c: c.create_session("dev"), ["new-session", "-d", "-s", "dev"]),
        (lambda c: c.rename_session("dev", "ops"), ["rename-session", "-t", "dev", "ops"]),
        (lambda c: c.kill_session("dev"), ["kill-session", "-t", "dev"]),
        (lambda c: c.create_window("$1", "logs"), ["new-window", "-t", "$1", "-n", "logs"]),
        (lambda c: c.rename_window("@4", "build"), ["rename-window", "-t", "@4", "build"]),
        (lambda c: c.kill_window("@4"), ["kill-window", "-t", "@4"]),
        (lambda c: c.create_pane("@4"), ["split-window", "-t", "@4"]),
        (lambda c: c.kill_pane("%9"), ["kill-pane", "-t", "%9"]),
        (lambda c: c.select_window("@4"), ["select-window", "-t", "@4"]),
        (lambda c: c.select_pane("%9"), ["select-pane", "-t", "%9"]),
        (lambda c: c.switch_client("dev:@4"), ["switch-client", "-t", "dev:@4"]),
    ],
)
def test_write_argv(fake_tmux, call, expected):
    assert call(TmuxClient(runner=fake_tmux)) is True
    assert fake_tmux.calls == [expected]


def test_write_failure_reported_not_raised(fake_tmux):
    fake_tmux.fail.add("kill-session")
    assert TmuxClient(runner=fake_tmux).kill_session("gone") is False


def test_read_failure_raises(fake_tmux):
    fake_tmux.fail.add("list-sessions")
    with pytest.raises(ProcessFailure):
        TmuxClient(runner=fake_tmux).list_sessions()
