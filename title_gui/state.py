"""Application state container.

The widget is always in exactly one lifecycle state:

    Idle -> Loading -> Loaded | Errored -> Loading -> ...

``AppStore`` holds the current state and notifies subscribers on every
change. Writes go through a single ``StoreWriter`` handed out once, which
the request dispatcher claims; everything else can only read and subscribe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Union

from fake_title.models.schemas import TitleRecord
from title_gui.utils.logging import log_state_change


@dataclass(frozen=True)
class Idle:
    """No request made yet."""


@dataclass(frozen=True)
class Loading:
    """A request is in flight. Holds nothing from the previous outcome."""


@dataclass(frozen=True)
class Loaded:
    title: TitleRecord


@dataclass(frozen=True)
class Errored:
    message: str


AppState = Union[Idle, Loading, Loaded, Errored]
Listener = Callable[[AppState], None]


class StoreWriter:
    """The only way to change an ``AppStore``'s state."""

    def __init__(self, store: "AppStore"):
        self._store = store

    def loading(self) -> None:
        self._store._set(Loading())

    def loaded(self, title: TitleRecord) -> None:
        self._store._set(Loaded(title=title))

    def errored(self, message: str) -> None:
        if not message:
            raise ValueError("Errored state requires a message")
        self._store._set(Errored(message=message))


class AppStore:
    """Holds the current ``AppState`` and fans changes out to listeners."""

    def __init__(self) -> None:
        self._state: AppState = Idle()
        self._listeners: List[Listener] = []
        self._writer_claimed = False

    @property
    def state(self) -> AppState:
        return self._state

    def writer(self) -> StoreWriter:
        """Claim the store's writer. Only one writer may ever exist."""

        if self._writer_claimed:
            raise RuntimeError("AppStore writer already claimed")
        self._writer_claimed = True
        return StoreWriter(self)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with the new state after every write.

        Returns a callable that removes the listener again.
        """

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, new_state: AppState) -> None:
        log_state_change(self._state, new_state)
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
