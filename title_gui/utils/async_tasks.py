"""Async helpers.

Tk has its own main loop; instead of running it in a second thread we pump
it from a coroutine so widget callbacks and HTTP requests share one asyncio
loop.
"""

from __future__ import annotations

import asyncio
import tkinter as tk

from title_gui.utils.logging import logger

FRAME_INTERVAL = 1 / 60


async def pump_tk(root: tk.Tk, interval: float = FRAME_INTERVAL) -> None:
    """Process Tk events until the window is destroyed."""

    while True:
        try:
            root.update()
        except tk.TclError:
            # raised once the root window has been destroyed
            logger.debug("Tk root destroyed, stopping event pump")
            return
        await asyncio.sleep(interval)
