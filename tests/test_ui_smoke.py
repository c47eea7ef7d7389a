"""
UI Component Smoke Tests.
Tests that the Tk components can be imported and driven by view models.
Note: Actual Tkinter rendering requires a display, so widget tests skip without one.
"""

import pytest

from fake_title.models.schemas import RequestVariant, TitleRecord
from title_gui.state import AppStore
from title_gui.views.title_view import TitleView

tk = pytest.importorskip("tkinter")


@pytest.fixture
def tk_root():
    try:
        root = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"No display available: {exc}")
    root.withdraw()
    yield root
    root.destroy()


# ===========================================================================
# Import Tests
# ===========================================================================


class TestImports:
    """Tests that the Tk-facing modules import without a display."""

    def test_theme_import(self):
        from title_gui.theme import ModernTheme, Theme

        assert ModernTheme().name == "Modern"
        assert Theme().name == "Default"

    def test_components_import(self):
        from title_gui.components.title_display import TitleDisplay, bind_store
        from title_gui.components.trigger_buttons import BUTTON_LABELS, TriggerButtons

        assert TitleDisplay is not None
        assert TriggerButtons is not None
        assert bind_store is not None
        assert BUTTON_LABELS[RequestVariant.NORMAL] == "Generate Fake Title"
        assert BUTTON_LABELS[RequestVariant.SLOW] == "Generate Fake Title Slowly"

    def test_app_import(self):
        from title_gui.app import FakeTitleApp, main

        app = FakeTitleApp()
        assert app.store.state is not None
        assert callable(main)


# ===========================================================================
# Widget Tests
# ===========================================================================


class TestTitleDisplay:
    """Tests for title_gui/components/title_display.py."""

    def test_apply_loaded_view(self, tk_root):
        from title_gui.components.title_display import TitleDisplay

        display = TitleDisplay(tk_root)
        display.apply(TitleView(heading="Senior Backend Engineer"))

        assert display.heading_var.get() == "Senior Backend Engineer"
        assert display.error_var.get() == ""
        assert not display.spinner.winfo_ismapped()

    def test_apply_error_view(self, tk_root):
        from title_gui.components.title_display import TitleDisplay

        display = TitleDisplay(tk_root)
        display.apply(TitleView(error="Error: boom"))

        assert display.error_var.get() == "Error: boom"

    def test_bind_store_renders_changes(self, tk_root):
        from title_gui.components.title_display import TitleDisplay, bind_store

        store = AppStore()
        writer = store.writer()
        display = TitleDisplay(tk_root)
        unsubscribe = bind_store(store, display)

        writer.loaded(TitleRecord(seniority="senior", field="backend", role="engineer"))
        assert display.heading_var.get() == "Senior Backend Engineer"

        writer.errored("Title service returned HTTP 500")
        assert display.error_var.get() == "Error: Title service returned HTTP 500"
        assert display.heading_var.get().strip() == ""

        unsubscribe()
        writer.loading()
        assert display.error_var.get() == "Error: Title service returned HTTP 500"


class TestTriggerButtons:
    """Tests for title_gui/components/trigger_buttons.py."""

    def test_buttons_call_trigger_with_variant(self, tk_root):
        from title_gui.components.trigger_buttons import TriggerButtons

        calls = []
        buttons = TriggerButtons(tk_root, calls.append)

        buttons.buttons[RequestVariant.NORMAL].invoke()
        buttons.buttons[RequestVariant.SLOW].invoke()

        assert calls == [RequestVariant.NORMAL, RequestVariant.SLOW]


# ===========================================================================
# App Lifecycle Tests
# ===========================================================================


class ClosedRoot:
    """Stands in for a Tk root whose window was closed right away."""

    def update(self):
        raise tk.TclError('can\'t invoke "update" command: application has been destroyed')


class RecordingDisplay:
    def __init__(self):
        self.views = []

    def apply(self, view):
        self.views.append(view)


class ClosableClient:
    def __init__(self):
        self.closed = False

    async def get(self, url):
        raise AssertionError("no request expected")

    async def aclose(self):
        self.closed = True


def _headless_window(self, dispatcher):
    self.display = RecordingDisplay()
    return ClosedRoot()


class TestAppLifecycle:
    """Tests for title_gui/app.py teardown."""

    def test_widgets_are_not_init_fields(self):
        import dataclasses

        from title_gui.app import FakeTitleApp

        init_fields = {f.name for f in dataclasses.fields(FakeTitleApp) if f.init}
        assert "display" not in init_fields
        assert "buttons" not in init_fields
        assert FakeTitleApp().display is None

    @pytest.mark.asyncio
    async def test_injected_client_is_left_open(self, monkeypatch):
        from title_gui.app import FakeTitleApp

        monkeypatch.setattr(FakeTitleApp, "build_window", _headless_window)
        client = ClosableClient()
        app = FakeTitleApp(http_client=client)

        await app.run_async()

        assert client.closed is False
        assert app.display.views == [TitleView()]

    @pytest.mark.asyncio
    async def test_owned_client_is_closed(self, monkeypatch):
        import title_gui.app as app_module

        client = ClosableClient()
        monkeypatch.setattr(app_module.FakeTitleApp, "build_window", _headless_window)
        monkeypatch.setattr(app_module, "get_http_client", lambda settings: client)

        await app_module.FakeTitleApp().run_async()

        assert client.closed is True
