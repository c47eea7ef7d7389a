"""Theme primitives for the title widget."""

from __future__ import annotations

from dataclasses import dataclass
from tkinter import ttk


@dataclass(frozen=True)
class Theme:
    """Base theme definition."""

    name: str = "Default"
    primary_color: str = "#1f2937"  # slate-800
    accent_color: str = "#3b82f6"  # blue-500
    background_color: str = "#ffffff"
    error_color: str = "#dc2626"  # red-600
    font_family: str = "Helvetica"
    heading_size: int = 24


@dataclass(frozen=True)
class ModernTheme(Theme):
    """A slightly more opinionated default theme."""

    name: str = "Modern"
    background_color: str = "#0b1220"  # dark
    primary_color: str = "#e5e7eb"  # gray-200
    accent_color: str = "#22c55e"  # green-500
    error_color: str = "#f87171"  # red-400
    font_family: str = "Inter"


def apply_theme(style: ttk.Style, theme: Theme) -> None:
    """Register the ttk styles the widget components use."""

    style.configure("Main.TFrame", background=theme.background_color)
    style.configure(
        "Title.TLabel",
        background=theme.background_color,
        foreground=theme.primary_color,
        font=(theme.font_family, theme.heading_size, "bold"),
    )
    style.configure(
        "Error.TLabel",
        background=theme.background_color,
        foreground=theme.error_color,
        font=(theme.font_family, 12),
    )
    style.configure(
        "Accent.TButton",
        foreground=theme.primary_color,
        background=theme.accent_color,
        padding=(12, 6),
    )
