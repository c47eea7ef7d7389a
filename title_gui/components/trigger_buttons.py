"""The two request buttons."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Any, Callable, Dict

from fake_title.models.schemas import RequestVariant

BUTTON_LABELS = {
    RequestVariant.NORMAL: "Generate Fake Title",
    RequestVariant.SLOW: "Generate Fake Title Slowly",
}


class TriggerButtons:
    """One button per request variant, each calling ``on_trigger(variant)``."""

    def __init__(self, parent: tk.Misc, on_trigger: Callable[[RequestVariant], Any]):
        self.frame = ttk.Frame(parent, style="Main.TFrame")
        self.buttons: Dict[RequestVariant, ttk.Button] = {}
        for variant, label in BUTTON_LABELS.items():
            button = ttk.Button(
                self.frame,
                text=label,
                style="Accent.TButton",
                command=lambda v=variant: on_trigger(v),
            )
            button.pack(fill="x", pady=4)
            self.buttons[variant] = button
