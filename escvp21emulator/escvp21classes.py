"""
Implements the ESC/VP21 emulator parameter and error classes.

Created on 19 Oct 2026

@author: escvp21emulator contributors
"""

import re


class Parameter:
    """
    ESC/VP21 Parameter.

    A named state slot of the emulated projector. Whether the parameter can be read depends on
    the presence of a value, whether it can be written depends on the presence of a validation
    pattern.
    """

    def __init__(
        self,
        name: str,
        default: str | None,
        validation: str | None = None,
        supported_in_power_off: bool = False,
    ):
        assert name is not None

        self._name = name
        self._default = default
        self._value = default
        self._validation = re.compile(validation) if validation is not None else None
        self._supported_in_power_off = supported_in_power_off

    def __repr__(self):
        return f"Parameter({self._name!r}, value={self._value!r})"

    @property
    def name(self) -> str:
        """
        The parameter name.
        """
        return self._name

    @property
    def default(self) -> str | None:
        """
        The value the parameter was created with.
        """
        return self._default

    @property
    def value(self) -> str | None:
        """
        The current value, None for write-only parameters.
        """
        return self._value

    @property
    def validation(self) -> re.Pattern | None:
        """
        The validation pattern, None for read-only parameters.
        """
        return self._validation

    @property
    def supported_in_power_off(self) -> bool:
        """
        True if the parameter can be accessed while the lamp is not on.
        """
        return self._supported_in_power_off

    @property
    def readable(self) -> bool:
        return self._value is not None

    @property
    def writable(self) -> bool:
        return self._validation is not None

    def accepts(self, value: str) -> bool:
        """
        Test if the validation pattern matches anywhere in the given value.
        """
        return self._validation is not None and self._validation.search(value) is not None

    def get(self) -> str:
        """
        Returns the current value of the parameter.
        """
        if not self._value:
            raise ESCVP21InvalidCommandError(self._name)

        return self._value

    def set(self, value: str) -> None:
        """
        Sets the value of the parameter.

        The value INIT resets the parameter to its default. Values given to write-only
        parameters are validated and then discarded.
        """
        if self._validation is None:
            raise ESCVP21InvalidCommandError(f"{self._name} {value}")

        if not self.accepts(value):
            raise ESCVP21InvalidValueError(f"{self._name} {value}")

        if self._value is None:
            return

        if value == "INIT":
            self._value = self._default
        else:
            self._value = value


class ESCVP21Error(Exception):
    """
    Generic ESC/VP21 emulator error.
    """


class ESCVP21ProcessorError(ESCVP21Error):
    """
    Error raised while processing a request.

    The emulator answers any of these errors with ERR.
    """

    def __init__(self, request: str | None = None):
        super().__init__(request)
        self.request = request

    def __str__(self):
        return f"Error processing request '{self.request}'"


class ESCVP21InvalidCommandError(ESCVP21ProcessorError):
    """
    Invalid command error.

    Unknown parameter, malformed request, query without readable value or set of a read-only
    parameter.
    """

    def __str__(self):
        return f"Invalid command '{self.request}'"


class ESCVP21InvalidQueryError(ESCVP21ProcessorError):
    """
    Invalid query error.

    A query produced no value where one was expected.
    """

    def __str__(self):
        return f"Invalid query '{self.request}'"


class ESCVP21InvalidValueError(ESCVP21ProcessorError):
    """
    Invalid value error.

    The value does not match the validation pattern of the parameter.
    """

    def __str__(self):
        return f"Invalid value in '{self.request}'"


class ESCVP21InvalidPowerStateError(ESCVP21ProcessorError):
    """
    Invalid power state error.

    The parameter can only be accessed while the lamp is on.
    """

    def __init__(self, request: str | None = None, power_state: str | None = None):
        super().__init__(request)
        self.power_state = power_state

    def __str__(self):
        return f"Request '{self.request}' not allowed in power state {self.power_state}"


class ESCVP21InvalidFramingError(ESCVP21Error):
    """
    Invalid framing error.

    A completed frame is not valid UTF-8.
    """

    def __init__(self, frame: bytes | None = None):
        super().__init__(frame)
        self.frame = frame

    def __str__(self):
        return f"Invalid frame {self.frame!r}"
