"""
Selection Store - owns the selected tonic and mode.

Every change is broadcast synchronously to the registered observers as a
StateChange snapshot, in registration order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chuk_mcp_cof.constants import DEFAULT_MODE, DEFAULT_TONIC
from chuk_mcp_cof.core.mode import Mode
from chuk_mcp_cof.core.pitch import PitchClass
from chuk_mcp_cof.core.scale import scale
from chuk_mcp_cof.models.state import StateChange

logger = logging.getLogger(__name__)

Observer = Callable[[StateChange], None]


class SelectionStore:
    """
    Holds the current (tonic, mode) selection and notifies observers.

    The store never broadcasts on construction. Hosts announce the
    initial state by calling change_tonic once their observers are
    registered.

    Changes are not deduplicated, and an observer that changes the
    selection from inside its callback triggers a nested broadcast.
    """

    def __init__(
        self,
        tonic: PitchClass = DEFAULT_TONIC,
        mode: Mode = DEFAULT_MODE,
    ):
        """
        Initialize the store.

        Args:
            tonic: Initial tonic
            mode: Initial mode
        """
        self._tonic = PitchClass(tonic)
        self._mode = Mode(mode)
        self._observers: list[Observer] = []

    @property
    def tonic(self) -> PitchClass:
        """Currently selected tonic."""
        return self._tonic

    @property
    def mode(self) -> Mode:
        """Currently selected mode."""
        return self._mode

    @property
    def observer_count(self) -> int:
        """Number of registered observers."""
        return len(self._observers)

    def add_observer(self, callback: Observer) -> Observer:
        """
        Register a callback for every future broadcast.

        The callback is not invoked on registration. Returns the callback,
        so this can be used as a decorator.
        """
        self._observers.append(callback)
        logger.debug("Registered observer %r (%d total)", callback, len(self._observers))
        return callback

    def change_tonic(self, tonic: PitchClass) -> None:
        """Replace the tonic, keep the mode, and broadcast."""
        self._tonic = PitchClass(tonic)
        logger.debug("Tonic changed to %s", self._tonic.label)
        self._broadcast()

    def change_mode(self, mode: Mode) -> None:
        """Replace the mode, keep the tonic, and broadcast."""
        self._mode = Mode(mode)
        logger.debug("Mode changed to %s", self._mode.label)
        self._broadcast()

    def snapshot(self) -> StateChange:
        """Build the current state without notifying anyone."""
        return StateChange(
            tonic=self._tonic,
            mode=self._mode,
            scale=scale(self._tonic, self._mode),
        )

    def _broadcast(self) -> None:
        """
        Deliver a fresh snapshot to every observer.

        Walks the live observer list, so an observer registered during
        the broadcast is called in the same broadcast.
        """
        state_change = self.snapshot()
        logger.debug(
            "Broadcasting %s %s to %d observers",
            state_change.tonic.label,
            state_change.mode.label,
            len(self._observers),
        )
        for observer in self._observers:
            observer(state_change)
