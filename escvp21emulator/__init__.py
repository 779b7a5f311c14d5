"""
Implements an emulator of a projector controlled over the ESC/VP21 serial protocol.

Created on 19 Oct 2026

@author: escvp21emulator contributors
"""

from .escvp21classes import (
    ESCVP21Error,
    ESCVP21InvalidCommandError,
    ESCVP21InvalidFramingError,
    ESCVP21InvalidPowerStateError,
    ESCVP21InvalidQueryError,
    ESCVP21InvalidValueError,
    ESCVP21ProcessorError,
    Parameter,
)
from .escvp21codec import ESCVP21Codec
from .escvp21connection import (
    BAUD_RATES,
    DEFAULT_BAUD_RATE,
    ESCVP21Connection,
    ESCVP21ConnectionError,
    ESCVP21SerialConnection,
)
from .escvp21emulator import ESCVP21Emulator
from .escvp21parameters import ParameterTable
from .escvp21power import (
    DEFAULT_COOLING_DURATION,
    DEFAULT_WARMING_DURATION,
    PowerState,
)
from .escvp21processor import CommandProcessor
