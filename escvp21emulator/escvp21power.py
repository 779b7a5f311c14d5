"""
Implements the power state machine of the emulated projector.

There is no background timer, the timed transitions out of warming up and cooling down are
applied when the state is sampled with advance().

Created on 19 Oct 2026

@author: escvp21emulator contributors
"""

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)

DEFAULT_WARMING_DURATION = 20
DEFAULT_COOLING_DURATION = 5


class PowerState:
    """
    Power state of the emulated projector.
    """

    POWERSTATE_OFF = "PowerOff"
    POWERSTATE_WARMING = "Warming"
    POWERSTATE_LAMPON = "LampOn"
    POWERSTATE_COOLING = "Cooling"

    POWERSTATE_CODES = {
        POWERSTATE_OFF: "00",
        POWERSTATE_LAMPON: "01",
        POWERSTATE_WARMING: "02",
        POWERSTATE_COOLING: "03",
    }

    def __init__(
        self,
        warming_duration: float = DEFAULT_WARMING_DURATION,
        cooling_duration: float = DEFAULT_COOLING_DURATION,
        clock: Callable[[], float] = time.monotonic,
    ):
        assert warming_duration >= 0
        assert cooling_duration >= 0

        self._warming_duration = warming_duration
        self._cooling_duration = cooling_duration
        self._clock = clock

        self._state = self.POWERSTATE_OFF
        self._started_at: float | None = None

    def __str__(self):
        return self._state

    @property
    def warming_duration(self) -> float:
        return self._warming_duration

    @property
    def cooling_duration(self) -> float:
        return self._cooling_duration

    @property
    def state(self) -> str:
        """
        The current power state, after applying any timed transition.
        """
        self.advance()
        return self._state

    @property
    def started_at(self) -> float | None:
        """
        Clock time at which the current transient state was entered, None in stable states.
        """
        return self._started_at

    def _transition(self, state: str, started_at: float | None = None) -> None:
        logger.debug("Power state %s -> %s", self._state, state)
        self._state = state
        self._started_at = started_at

    def advance(self) -> None:
        """
        Completes warming up or cooling down when the duration has elapsed.
        """
        if self._state == self.POWERSTATE_WARMING:
            if self._clock() - self._started_at > self._warming_duration:
                self._transition(self.POWERSTATE_LAMPON)
        elif self._state == self.POWERSTATE_COOLING:
            if self._clock() - self._started_at > self._cooling_duration:
                self._transition(self.POWERSTATE_OFF)

    def power_up(self) -> None:
        """
        Starts warming up, only when the projector is off.
        """
        self.advance()
        if self._state == self.POWERSTATE_OFF:
            self._transition(self.POWERSTATE_WARMING, self._clock())

    def power_down(self) -> None:
        """
        Starts cooling down, only when the lamp is on.
        """
        self.advance()
        if self._state == self.POWERSTATE_LAMPON:
            self._transition(self.POWERSTATE_COOLING, self._clock())

    def is_lamp_on(self) -> bool:
        return self.state == self.POWERSTATE_LAMPON

    def code(self) -> str:
        """
        The two character code reported for the PWR parameter.
        """
        return self.POWERSTATE_CODES[self.state]
