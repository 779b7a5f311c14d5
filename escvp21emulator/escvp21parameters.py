"""
Implements the parameter table of the emulated projector.

Created on 19 Oct 2026

@author: escvp21emulator contributors
"""

import logging

from .escvp21classes import ESCVP21InvalidCommandError, Parameter

logger = logging.getLogger(__name__)

# Name, default, validation, supported in power off
DEFAULT_PARAMETERS = [
    ("SNO", "1234567890", None, True),
    ("LAMP", "100", None, False),
    ("KEY", None, r"[A-Z0-9]{2}|INIT", False),
    ("AUTOHOME", "00", r"[A-Z0-9]{2}", False),
    ("ERR", "00", None, True),
    ("FREEZE", "OFF", r"(OFF|ON)", False),
    ("FASTBOOT", "01", r"\d{2}", False),
    ("SIGNAL", "01", None, False),
    ("ONTIME", "110", None, False),
    ("SOURCE", "00", r"[A-Z0-9]{2}", False),
    ("MUTE", "0000", r"(OFF|ON)", False),
    ("VOL", "90", r"\d+", False),
    ("ZOOM", "0", r"\d{1,3}", False),
    ("HREVERSE", "ON", r"(OFF|ON)", False),
    ("VREVERSE", "ON", r"(OFF|ON)", False),
    ("IMGSHIFT", "0 1", r"-?[0-2] -?[0-2]", False),
    ("REFRESHTIME", "00", r"\d{2}", False),
]


class ParameterTable:
    """
    The parameters of the emulated projector by name.

    The set of names is fixed at construction.
    """

    def __init__(self, parameters: list[Parameter] | None = None):
        if parameters is None:
            parameters = [Parameter(*entry) for entry in DEFAULT_PARAMETERS]

        self._parameters: dict[str, Parameter] = {}
        for parameter in parameters:
            if parameter.name in self._parameters:
                logger.warning("Duplicate parameter %s, using last", parameter.name)
            self._parameters[parameter.name] = parameter

    def __contains__(self, name: str) -> bool:
        return name in self._parameters

    def __len__(self):
        return len(self._parameters)

    def names(self) -> frozenset[str]:
        """
        The names of all parameters in the table.
        """
        return frozenset(self._parameters)

    def parameter(self, name: str) -> Parameter:
        """
        Returns the parameter with the given name.
        """
        parameter = self._parameters.get(name)
        if parameter is None:
            raise ESCVP21InvalidCommandError(name)

        return parameter

    def get(self, name: str) -> str:
        """
        Returns the current value of the named parameter.
        """
        return self.parameter(name).get()

    def set(self, name: str, value: str) -> None:
        """
        Sets the value of the named parameter.
        """
        parameter = self.parameter(name)
        parameter.set(value)
        logger.debug("%s set to %s", name, parameter.value)
