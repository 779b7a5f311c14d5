"""
Implements the ESC/VP21 command processor.

Created on 19 Oct 2026

@author: escvp21emulator contributors
"""

import logging
import re
from typing import Callable

from .escvp21classes import (
    ESCVP21InvalidCommandError,
    ESCVP21InvalidPowerStateError,
    ESCVP21ProcessorError,
)
from .escvp21parameters import ParameterTable
from .escvp21power import (
    DEFAULT_COOLING_DURATION,
    DEFAULT_WARMING_DURATION,
    PowerState,
)

logger = logging.getLogger(__name__)

SET_RE = re.compile(r"([A-Z][A-Z0-9]+) +(.+)", re.DOTALL)

POWER_PARAMETER = "PWR"
POWER_ON = "ON"
POWER_OFF = "OFF"


class CommandProcessor:
    """
    Answers ESC/VP21 requests using a parameter table and a power state.
    """

    def __init__(
        self,
        warming_duration: float = DEFAULT_WARMING_DURATION,
        cooling_duration: float = DEFAULT_COOLING_DURATION,
        parameters: ParameterTable | None = None,
        clock: Callable[[], float] | None = None,
    ):
        if parameters is None:
            parameters = ParameterTable()

        self._parameters = parameters
        if clock is None:
            self._power = PowerState(warming_duration, cooling_duration)
        else:
            self._power = PowerState(warming_duration, cooling_duration, clock)

    @property
    def parameters(self) -> ParameterTable:
        return self._parameters

    @property
    def power(self) -> PowerState:
        return self._power

    @staticmethod
    def parse_request(request: str) -> tuple[str, str | None]:
        """
        Splits a request into the parameter name and the value, the value is None for queries.
        """
        if request.endswith("?"):
            return request[:-1], None

        matches = SET_RE.fullmatch(request)
        if not matches:
            raise ESCVP21InvalidCommandError(request)

        return matches.group(1), matches.group(2)

    def process(self, request: str) -> str | None:
        """
        Processes a request.

        Returns the reply for a query or None for a successful set. Raises an
        ESCVP21ProcessorError if the request can not be processed.
        """
        try:
            name, value = self.parse_request(request)

            if name == POWER_PARAMETER:
                return self._process_power(value)

            return self._process_parameter(name, value)
        except ESCVP21ProcessorError as ex:
            ex.request = request
            raise

    def _process_power(self, value: str | None) -> str | None:
        if value is None:
            return f"{POWER_PARAMETER}={self._power.code()}"

        if value == POWER_ON:
            self._power.power_up()
        elif value == POWER_OFF:
            self._power.power_down()
        else:
            raise ESCVP21InvalidCommandError()

        return None

    def _process_parameter(self, name: str, value: str | None) -> str | None:
        self._power.advance()

        parameter = self._parameters.parameter(name)

        if not parameter.supported_in_power_off and not self._power.is_lamp_on():
            raise ESCVP21InvalidPowerStateError(power_state=str(self._power))

        if value is None:
            return f"{name}={parameter.get()}"

        self._parameters.set(name, value)
        return None
