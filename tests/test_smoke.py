"""Headless TUI smoke tests covering critical user journeys."""

from typing import cast

from textual.widgets import OptionList

from requestie.app import RequestieApp
from requestie.document import default_document
from requestie.domain.selection import EnvironmentPanel, RequestPanel
from requestie.models import EnvironmentValue, Header, HttpMethod
from requestie.persistence import deserialize_document, serialize_document
from requestie.screens.body import BodyScreen
from requestie.screens.confirm import ConfirmScreen
from requestie.screens.help import HelpScreen
from requestie.screens.method_picker import MethodPickerScreen
from requestie.screens.pair import PairScreen
from requestie.session import Session
from requestie.storage import MemoryStore
from requestie.widgets.environment_view import EnvironmentView
from requestie.widgets.pair_table import PairTable
from requestie.widgets.request_view import RequestView


def make_app(store: MemoryStore | None = None) -> RequestieApp:
    return RequestieApp(Session(store or MemoryStore()))


def app_of(pilot) -> RequestieApp:
    return cast(RequestieApp, pilot.app)


class TestMount:
    async def test_default_document_shown(self):
        """
        Given the app is launched with an empty store
        When the UI mounts
        Then the sidebar lists one request and one environment under two headings
        And the request editor shows the seeded header
        """
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            assert pilot.app.query_one("#panels", OptionList).option_count == 4
            assert pilot.app.query_one("#request-view", RequestView).display is True
            assert pilot.app.query_one("#environment-view", EnvironmentView).display is False
            assert pilot.app.query_one("#headers", PairTable).row_count == 1

    async def test_saved_document_shown(self):
        """
        Given a store holding a document with an environment selected
        When the UI mounts
        Then the environment editor is displayed with its values
        """
        doc = default_document()
        doc.add_environment()
        doc.add_environment_value(1)
        doc.add_environment_value(1)
        async with make_app(MemoryStore(serialize_document(doc))).run_test(headless=True) as pilot:
            await pilot.pause()
            assert pilot.app.query_one("#environment-view", EnvironmentView).display is True
            assert pilot.app.query_one("#values", PairTable).row_count == 2

    async def test_subtitle_counts_items(self):
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            assert "1 request" in pilot.app.sub_title
            assert "1 environment" in pilot.app.sub_title


class TestSidebar:
    async def test_enter_opens_environment(self):
        """
        Given the first request is highlighted in the sidebar
        When the user moves down past the heading and presses Enter
        Then the environment is selected and its editor shown
        """
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("down", "enter")
            await pilot.pause()
            assert app_of(pilot).document.selected == EnvironmentPanel(index=0)
            assert pilot.app.query_one("#environment-view", EnvironmentView).display is True

    async def test_add_request(self):
        """
        Given the default document
        When the user presses a
        Then a blank request is added, selected, and listed in the sidebar
        """
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("a")
            await pilot.pause()
            doc = app_of(pilot).document
            assert [r.name for r in doc.requests] == ["Request 1", "New Request 2"]
            assert doc.selected == RequestPanel(index=1)
            assert pilot.app.query_one("#panels", OptionList).option_count == 5
            assert pilot.app.query_one("#headers", PairTable).row_count == 0

    async def test_add_environment(self):
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("e")
            await pilot.pause()
            doc = app_of(pilot).document
            assert [e.name for e in doc.environments] == ["Default", "New Environment 2"]
            assert pilot.app.query_one("#environment-view", EnvironmentView).display is True


class TestDelete:
    async def test_delete_environment_after_confirm(self):
        """
        Given a second environment is selected
        When the user presses x and confirms with y
        Then it is removed and the remaining environment is selected
        """
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("e")
            await pilot.press("x")
            await pilot.pause()
            assert isinstance(pilot.app.screen, ConfirmScreen)
            await pilot.press("y")
            await pilot.pause()
            doc = app_of(pilot).document
            assert [e.name for e in doc.environments] == ["Default"]
            assert doc.selected == EnvironmentPanel(index=0)

    async def test_cancel_keeps_environment(self):
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("e")
            await pilot.press("x")
            await pilot.pause()
            await pilot.press("n")
            await pilot.pause()
            assert len(app_of(pilot).document.environments) == 2

    async def test_last_environment_refused(self):
        """
        Given the only environment is selected
        When the user presses x
        Then no confirmation is shown and the environment remains
        """
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("down", "enter")
            await pilot.pause()
            await pilot.press("x")
            await pilot.pause()
            assert not isinstance(pilot.app.screen, ConfirmScreen)
            assert len(app_of(pilot).document.environments) == 1

    async def test_delete_only_request(self):
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("x")
            await pilot.pause()
            await pilot.press("y")
            await pilot.pause()
            doc = app_of(pilot).document
            assert doc.requests == []
            assert doc.selected == EnvironmentPanel(index=0)
            assert pilot.app.query_one("#environment-view", EnvironmentView).display is True


class TestRequestEditing:
    async def test_pick_method(self):
        """
        Given the default GET request
        When the user presses m, moves down three rows and presses Enter
        Then the method becomes POST
        """
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("m")
            await pilot.pause()
            assert isinstance(pilot.app.screen, MethodPickerScreen)
            await pilot.press("down", "down", "down", "enter")
            await pilot.pause()
            assert app_of(pilot).document.requests[0].method is HttpMethod.POST

    async def test_edit_url(self):
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("a")
            await pilot.press("u")
            await pilot.pause()
            await pilot.press(*"localhost", "enter")
            await pilot.pause()
            assert app_of(pilot).document.requests[1].url == "localhost"

    async def test_edit_body(self):
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("b")
            await pilot.pause()
            assert isinstance(pilot.app.screen, BodyScreen)
            await pilot.press(*"hi", "ctrl+s")
            await pilot.pause()
            assert app_of(pilot).document.requests[0].body == "hi"

    async def test_escape_discards_body(self):
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("b")
            await pilot.pause()
            await pilot.press(*"hi", "escape")
            await pilot.pause()
            assert app_of(pilot).document.requests[0].body == ""

    async def test_add_header_row(self):
        """
        Given the default request
        When the user presses o and fills in both sides of the new row
        Then the header is appended after the existing one
        """
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("o")
            await pilot.pause()
            assert isinstance(pilot.app.screen, PairScreen)
            await pilot.press(*"Accept", "enter", *"text", "enter")
            await pilot.pause()
            assert app_of(pilot).document.requests[0].headers == [
                Header("Content-Type", "application/json"),
                Header("Accept", "text"),
            ]

    async def test_cancelled_row_stays_blank(self):
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("o")
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
            assert app_of(pilot).document.requests[0].headers[-1] == Header("", "")

    async def test_dd_deletes_header(self):
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("d", "d")
            await pilot.pause()
            assert app_of(pilot).document.requests[0].headers == []
            assert pilot.app.query_one("#headers", PairTable).row_count == 0


class TestEnvironmentEditing:
    async def test_add_value_row(self):
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("e", "o")
            await pilot.pause()
            await pilot.press(*"HOST", "enter", *"db", "enter")
            await pilot.pause()
            assert app_of(pilot).document.environments[1].values == [EnvironmentValue("HOST", "db")]

    async def test_method_key_ignored_for_environment(self):
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("e", "m")
            await pilot.pause()
            assert not isinstance(pilot.app.screen, MethodPickerScreen)


class TestHelp:
    async def test_question_mark_opens_help(self):
        async with make_app().run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("?")
            await pilot.pause()
            assert isinstance(pilot.app.screen, HelpScreen)
            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(pilot.app.screen, HelpScreen)


class TestQuit:
    async def test_quit_saves_exactly_once(self):
        """
        Given the user added a request
        When the user presses q
        Then the document is saved once and loads back with both requests
        """
        store = MemoryStore()
        async with make_app(store).run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("a")
            await pilot.press("q")

        assert store.save_count == 1
        saved = deserialize_document(store.load())
        assert [r.name for r in saved.requests] == ["Request 1", "New Request 2"]

    async def test_nothing_saved_before_quit(self):
        store = MemoryStore()
        async with make_app(store).run_test(headless=True) as pilot:
            await pilot.pause()
            await pilot.press("a", "e")
            await pilot.pause()
            assert store.save_count == 0
