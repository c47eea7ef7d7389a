"""Main GUI application object.

Wires the store, the request dispatcher and the Tk components together and
runs everything on a single asyncio loop.
"""

from __future__ import annotations

import asyncio
import tkinter as tk
from dataclasses import dataclass, field
from tkinter import ttk
from typing import Optional

from fake_title.config import Settings, get_settings
from fake_title.http_client import HttpClient
from fake_title.utils.logger import setup_logging
from title_gui.components.title_display import TitleDisplay, bind_store
from title_gui.components.trigger_buttons import TriggerButtons
from title_gui.services.clients import get_http_client
from title_gui.services.dispatcher import RequestDispatcher
from title_gui.state import AppStore
from title_gui.theme import ModernTheme, Theme, apply_theme
from title_gui.utils.async_tasks import pump_tk
from title_gui.utils.logging import log

WINDOW_TITLE = "Fake Title Generator"


@dataclass
class FakeTitleApp:
    """Application shell: one window, one store, one dispatcher."""

    settings: Settings = field(default_factory=get_settings)
    theme: Theme = field(default_factory=ModernTheme)
    http_client: Optional[HttpClient] = None
    store: AppStore = field(default_factory=AppStore)
    display: Optional[TitleDisplay] = field(default=None, init=False)
    buttons: Optional[TriggerButtons] = field(default=None, init=False)

    def build_window(self, dispatcher: RequestDispatcher) -> tk.Tk:
        root = tk.Tk()
        root.title(WINDOW_TITLE)
        root.configure(background=self.theme.background_color)
        apply_theme(ttk.Style(root), self.theme)

        container = ttk.Frame(root, style="Main.TFrame", padding=24)
        container.pack(fill="both", expand=True)

        self.display = TitleDisplay(container)
        self.display.frame.pack(fill="x")
        self.buttons = TriggerButtons(container, dispatcher.trigger)
        self.buttons.frame.pack(fill="x", pady=(8, 0))
        return root

    async def run_async(self) -> None:
        owns_client = self.http_client is None
        http = get_http_client(self.settings) if owns_client else self.http_client
        dispatcher = RequestDispatcher(self.store, http, self.settings.api_base_url)
        root = self.build_window(dispatcher)
        unsubscribe = bind_store(self.store, self.display)
        log(f"Title widget ready, service at {self.settings.api_base_url}")
        try:
            await pump_tk(root)
        finally:
            unsubscribe()
            await dispatcher.shutdown()
            # an injected client stays open for its owner
            if owns_client:
                await http.aclose()

    def run(self) -> None:
        """Open the window and block until it is closed."""

        asyncio.run(self.run_async())


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    FakeTitleApp(settings=settings).run()
