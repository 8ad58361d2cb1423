"""Drive the Textual app headlessly against the fake tmux."""

import asyncio

from tmuxman.hierarchy import Hierarchy
from tmuxman.tmux.pane import list_panes_args
from tmuxman.types import AttachTarget, FocusArea
from tmuxman.ui import TmuxManagerApp
from tmuxman.ui.screens import BrowserScreen, ConfirmScreen, NameInputScreen
from tmuxman.ui.screens.browser_screen import help_text
from tmuxman.ui.widgets import ResourceColumn


def _run(app: TmuxManagerApp, *keys: str) -> None:
    async def drive():
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press(*keys)
            if app.is_running:
                await pilot.pause()

    asyncio.run(drive())


def test_help_text_follows_focus():
    assert "Split Pane" in help_text(FocusArea.PANES)
    assert help_text(FocusArea.SESSIONS).startswith("NAV: Arrows/Tab")


def test_columns_mirror_hierarchy(client):
    app = TmuxManagerApp(Hierarchy(client))

    async def drive():
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.screen, BrowserScreen)
            columns = {c.area: c for c in app.screen.query(ResourceColumn)}
            assert columns[FocusArea.SESSIONS].option_count == 2
            assert columns[FocusArea.PANES].option_count == 2
            assert columns[FocusArea.SESSIONS].has_class("-focused")

            await pilot.press("j", "tab", "k")
            await pilot.pause()
            assert app.hierarchy.selected_session().name == "B"
            assert app.screen.focus_area is FocusArea.WINDOWS
            assert columns[FocusArea.WINDOWS].has_class("-focused")
            assert columns[FocusArea.PANES].option_count == 1

    asyncio.run(drive())


def test_rename_prompt_is_prefilled(client):
    app = TmuxManagerApp(Hierarchy(client))

    async def drive():
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("R")
            await pilot.pause()
            assert isinstance(app.screen, NameInputScreen)
            assert app.screen.mode.initial == "A"

    asyncio.run(drive())


def test_new_session_through_prompt(client, fake_tmux):
    app = TmuxManagerApp(Hierarchy(client))
    _run(app, "n", "o", "p", "s", "enter")
    assert ["new-session", "-d", "-s", "ops"] in fake_tmux.writes()


def test_delete_cancelled_sends_nothing(client, fake_tmux):
    app = TmuxManagerApp(Hierarchy(client))
    _run(app, "d", "n")
    assert fake_tmux.writes() == []


def test_delete_confirmed_kills_session(client, fake_tmux):
    app = TmuxManagerApp(Hierarchy(client))
    _run(app, "d", "y")
    assert fake_tmux.writes() == [["kill-session", "-t", "A"]]


def test_enter_exits_with_attach_target(client):
    app = TmuxManagerApp(Hierarchy(client))
    _run(app, "tab", "enter")
    assert app.return_value == AttachTarget("A", window_id="@1")


def test_quit_returns_nothing(client):
    app = TmuxManagerApp(Hierarchy(client))
    _run(app, "q")
    assert app.return_value is None


def test_delete_session_with_bracketed_name(client, fake_tmux):
    fake_tmux.sessions = ["$7|dev[/]|1|x", "$8|[red]x|1|y"]
    app = TmuxManagerApp(Hierarchy(client))

    async def drive():
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("d")
            await pilot.pause()
            assert isinstance(app.screen, ConfirmScreen)
            assert app.screen.mode.label == "dev[/]"
            await pilot.press("y")
            await pilot.pause()

    asyncio.run(drive())
    assert fake_tmux.writes() == [["kill-session", "-t", "dev[/]"]]


def test_click_row_in_other_column_focuses_and_refetches(client, fake_tmux):
    app = TmuxManagerApp(Hierarchy(client))

    async def drive():
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            fake_tmux.calls.clear()
            # Row 0 sits below the top border; row 1 is window @2
            await pilot.click("#windows-column", offset=(3, 2))
            await pilot.pause()
            assert app.screen.focus_area is FocusArea.WINDOWS
            assert app.hierarchy.selected_window().id == "@2"
            assert [p.id for p in app.hierarchy.panes] == ["%3"]
            assert fake_tmux.calls == [list_panes_args("@2")]

    asyncio.run(drive())
