"""Title area: heading, spinner and error line."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable

from title_gui.state import AppStore
from title_gui.views.title_view import TitleView, render


class TitleDisplay:
    """Shows a ``TitleView`` inside a frame it owns."""

    def __init__(self, parent: tk.Misc):
        self.frame = ttk.Frame(parent, style="Main.TFrame")

        self.heading_var = tk.StringVar(master=self.frame)
        ttk.Label(self.frame, textvariable=self.heading_var, style="Title.TLabel").pack(pady=(0, 8))

        self.spinner = ttk.Progressbar(self.frame, mode="indeterminate", length=240)

        self.error_var = tk.StringVar(master=self.frame)
        self.error_label = ttk.Label(self.frame, textvariable=self.error_var, style="Error.TLabel")

        self.apply(TitleView())

    def apply(self, view: TitleView) -> None:
        self.heading_var.set(view.heading)

        if view.busy:
            self.spinner.pack(pady=(0, 8))
            self.spinner.start(15)
        else:
            self.spinner.stop()
            self.spinner.pack_forget()

        if view.error:
            self.error_var.set(view.error)
            self.error_label.pack(pady=(0, 8))
        else:
            self.error_var.set("")
            self.error_label.pack_forget()


def bind_store(store: AppStore, display: TitleDisplay) -> Callable[[], None]:
    """Re-render ``display`` on every state change, starting with the current one.

    Returns the unsubscribe callable.
    """

    display.apply(render(store.state))
    return store.subscribe(lambda state: display.apply(render(state)))
