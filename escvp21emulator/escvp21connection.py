"""
Implements the connection types the ESC/VP21 emulator serves requests on.

Created on 19 Oct 2026

@author: escvp21emulator contributors
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod

import aiofiles
import serial
import serial_asyncio_fast as serial_asyncio

from .escvp21classes import ESCVP21Error

logger = logging.getLogger(__name__)

# Timeout in seconds
_SERIAL_TIMEOUT = 0.01
_READ_TIMEOUT = 0.05

BAUD_RATES = [2400, 4800, 9600, 14400, 19200, 38400, 57600, 115200]
DEFAULT_BAUD_RATE = 9600


class ESCVP21ConnectionError(ESCVP21Error):
    """
    ESC/VP21 Connection Error.

    When an error occurs while opening or using the connection.
    """


class ESCVP21Connection(ABC):
    """
    Abstract class on which the different connection types are build.
    """

    _reader: asyncio.StreamReader = None
    _writer: asyncio.StreamWriter = None
    _read_timeout = _READ_TIMEOUT
    _record_file = None

    def __init__(self, record: bool = False):
        super().__init__()

        self._record = record

    @abstractmethod
    async def open(self) -> bool:
        """
        Opens the connection.
        """
        if self._record:
            file_name = time.strftime("%Y%m%d-%H%M%S.txt")
            logger.info("Recording requests to %s", file_name)
            self._record_file = await aiofiles.open(file_name, "wb")

    def is_open(self) -> bool:
        """
        Checks if the connection is open.
        """
        return self._writer is not None

    async def close(self) -> bool:
        """
        Closes the connection.
        """
        if self._record_file:
            await self._record_file.close()
            self._record_file = None

        if not self.is_open():
            return True

        try:
            self._writer.close()
            await self._writer.wait_closed()
        except (ConnectionError, TimeoutError):
            pass
        except OSError:
            logger.exception("Unhandeled OSError")

        self._reader = None
        self._writer = None

        logger.debug("Connection closed")
        return True

    async def read(self, size: int = 1) -> bytes:
        """
        Read up to size bytes from the connection.

        Returns an empty bytes object when nothing was received within the read timeout.
        Raises ESCVP21ConnectionError when the connection is lost.
        """
        if not self.is_open():
            raise ESCVP21ConnectionError("Connection not open")

        if self._reader.at_eof():
            raise ESCVP21ConnectionError("Connection closed by peer")

        try:
            data = await asyncio.wait_for(
                self._reader.read(size), timeout=self._read_timeout
            )
        except asyncio.exceptions.TimeoutError:
            return b""
        except (ConnectionError, TimeoutError, OSError) as ex:
            await self.close()
            raise ESCVP21ConnectionError(str(ex)) from ex

        if self._record_file:
            await self._record_file.write(data)

        return data

    async def write(self, data: bytes) -> int:
        """
        Output the given bytes over the connection.
        """
        if not self.is_open():
            raise ESCVP21ConnectionError("Connection not open")

        try:
            self._writer.write(data)
            await self._writer.drain()

            return len(data)
        except (ConnectionError, TimeoutError, OSError) as ex:
            await self.close()
            raise ESCVP21ConnectionError(str(ex)) from ex


class ESCVP21SerialConnection(ESCVP21Connection):
    """
    Class to handle the serial connection type.
    """

    def __init__(
        self,
        serial_port: str,
        baud_rate: int = DEFAULT_BAUD_RATE,
        record: bool = False,
    ):
        super().__init__(record)
        assert serial_port is not None
        assert baud_rate in BAUD_RATES, "Not a valid baud rate"

        self._serial_port = serial_port
        self._baud_rate = baud_rate

    def __str__(self):
        return self._serial_port

    async def open(self) -> bool:
        await super().open()

        try:
            if not self.is_open():
                self._reader, self._writer = (
                    await serial_asyncio.open_serial_connection(
                        url=self._serial_port,
                        baudrate=self._baud_rate,
                        bytesize=serial.EIGHTBITS,
                        parity=serial.PARITY_NONE,
                        stopbits=serial.STOPBITS_ONE,
                        timeout=_SERIAL_TIMEOUT,
                    )
                )
                logger.info("Opened %s at %d baud", self, self._baud_rate)

            return True
        except serial.SerialException as ex:
            raise ESCVP21ConnectionError(str(ex)) from ex
