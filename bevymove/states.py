"""Application states and a small state machine with enter/exit hooks."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from enum import Enum, auto


class AppState(Enum):
    """The screens the application moves between."""

    BOOTING_APP = auto()
    ERROR_SCREEN = auto()
    MAIN_MENU = auto()
    IN_GAME = auto()
    PAUSED = auto()

    @classmethod
    def default(cls) -> AppState:
        return cls.BOOTING_APP


Callback = Callable[[], None]


class StateMachine:
    """Tracks the current state and runs hooks when it changes.

    A requested state is held until :meth:`apply` is called, so a change
    asked for in the middle of a frame takes effect at a well defined point.
    """

    def __init__(self, initial: AppState = AppState.BOOTING_APP) -> None:
        self.current = initial
        self.pending: AppState | None = None
        self.started = False
        self._enter: defaultdict[AppState, list[Callback]] = defaultdict(list)
        self._exit: defaultdict[AppState, list[Callback]] = defaultdict(list)

    def on_enter(self, state: AppState, callback: Callback) -> None:
        """Run ``callback`` whenever ``state`` is entered."""
        self._enter[state].append(callback)

    def on_exit(self, state: AppState, callback: Callback) -> None:
        """Run ``callback`` whenever ``state`` is left."""
        self._exit[state].append(callback)

    def set(self, state: AppState) -> None:
        """Request a change to ``state``; the latest request wins."""
        if not isinstance(state, AppState):
            raise TypeError(f"not an application state: {state!r}")
        self.pending = state

    def start(self) -> None:
        """Enter the initial state, running its enter hooks once."""
        if self.started:
            raise RuntimeError("state machine already started")
        self.started = True
        for callback in list(self._enter[self.current]):
            callback()

    def apply(self) -> bool:
        """Carry out a requested change; return whether one happened."""
        if self.pending is None:
            return False
        target, self.pending = self.pending, None
        for callback in list(self._exit[self.current]):
            callback()
        self.current = target
        for callback in list(self._enter[target]):
            callback()
        return True

    def __contains__(self, state: object) -> bool:
        return self.current is state