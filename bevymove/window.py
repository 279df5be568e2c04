"""Window sizes used by the different application states."""

from __future__ import annotations

from bevymove.states import AppState

TITLE = "Bevy Circle Example"
INITIAL_SIZE = (600, 600)

_SIZES = {
    AppState.BOOTING_APP: (800, 600),
    AppState.MAIN_MENU: (1024, 768),
}


def window_size_for(state: AppState) -> tuple[int, int] | None:
    """Return the window size a state switches to, or None to keep the current one."""
    return _SIZES.get(state)