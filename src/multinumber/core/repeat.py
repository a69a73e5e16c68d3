"""Auto-repeat state machine for held step keys.

The controller has two states: idle (``held_key is None``) and repeating a
single key. It owns no timer; the host calls :meth:`RepeatController.cycle`
on its own cadence from the thread that owns the values, and stops calling
once ``cycle`` returns ``False``.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 10


class StepKey(enum.Enum):
    INCREASE = "increase"
    DECREASE = "decrease"


class RepeatController:
    """Turns key-down/key-up signals into single steps or a repeat session.

    Parameters
    ----------
    step:
        Performs one tick in the direction of the given key.
    start_cadence:
        Asks the host to start calling :meth:`cycle` every interval.
    """

    def __init__(
        self,
        step: Callable[[StepKey], object],
        start_cadence: Callable[[], None] | None = None,
    ) -> None:
        self._step = step
        self._start_cadence = start_cadence
        self._held: StepKey | None = None

    @property
    def held_key(self) -> StepKey | None:
        return self._held

    @property
    def is_repeating(self) -> bool:
        return self._held is not None

    def key_down(self, key: StepKey, is_repeat: bool) -> None:
        if not is_repeat:
            self._step(key)
            return

        if self._held is key:
            return

        if self._held is not None:
            # Same loop, new direction.
            logger.debug("Repeat switched %s -> %s", self._held.value, key.value)
            self._held = key
            return

        logger.debug("Repeat started: %s", key.value)
        self._held = key
        self.cycle()
        if self._start_cadence is not None:
            self._start_cadence()

    def key_up(self, key: StepKey) -> bool:
        """End the session if *key* is the held key. Returns whether it was."""
        if self._held is not key:
            return False
        logger.debug("Repeat stopped: %s", key.value)
        self._held = None
        return True

    def cancel(self) -> None:
        if self._held is not None:
            logger.debug("Repeat cancelled: %s", self._held.value)
        self._held = None

    def cycle(self) -> bool:
        """Run one cadence wake-up. Returns ``False`` once the session is over."""
        if self._held is None:
            return False
        self._step(self._held)
        return True
