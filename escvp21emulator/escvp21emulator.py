"""
Implements the ESC/VP21Emulator class which serves the command processor on a connection.

Created on 19 Oct 2026

@author: escvp21emulator contributors
"""

import asyncio
import logging

from .escvp21classes import ESCVP21InvalidFramingError, ESCVP21ProcessorError
from .escvp21codec import ESCVP21Codec
from .escvp21connection import ESCVP21Connection, ESCVP21ConnectionError
from .escvp21processor import CommandProcessor

logger = logging.getLogger(__name__)

READ_BUFFER_SIZE = 128

background_tasks = set()


def _add_background_task(task: asyncio.Task) -> None:
    # The event loop only keeps weak references to tasks
    background_tasks.add(task)
    task.add_done_callback(background_tasks.discard)


class ESCVP21Emulator:
    """
    Emulates an ESC/VP21 projector on the given connection.
    """

    _run_task: asyncio.Task | None = None

    def __init__(
        self,
        connection: ESCVP21Connection,
        processor: CommandProcessor | None = None,
    ):
        assert connection is not None

        self.connection = connection
        self.processor = processor if processor is not None else CommandProcessor()
        self._codec = ESCVP21Codec()

    def running(self) -> bool:
        """
        True if the emulator runs as a background task.
        """
        return self._run_task is not None and not self._run_task.done()

    def handle_frame(self, request: str) -> bytes:
        """
        Processes a single request and returns the bytes to write back.
        """
        logger.debug("Request: %s", request)

        try:
            reply = self.processor.process(request)
        except ESCVP21ProcessorError as ex:
            logger.warning("%s", ex)
            return self._codec.encode_error()

        logger.debug("Reply: %s", reply)
        return self._codec.encode(reply)

    async def _process_chunk(self, chunk: bytes) -> None:
        while True:
            try:
                request = self._codec.decode(chunk)
            except ESCVP21InvalidFramingError as ex:
                logger.error("%s", ex)
                chunk = b""
                continue

            if request is None:
                return

            await self.connection.write(self.handle_frame(request))
            chunk = b""

    async def run(self) -> None:
        """
        Reads requests from the connection and writes the replies until the connection fails.
        """
        logger.info("Emulating projector on %s", self.connection)

        while True:
            try:
                chunk = await self.connection.read(READ_BUFFER_SIZE)
                if len(chunk) > 0:
                    await self._process_chunk(chunk)
            except asyncio.CancelledError:
                logger.debug("Emulator was canceled")
                break
            except ESCVP21ConnectionError as ex:
                logger.error("Error communicating on %s: %s", self.connection, ex)
                break

        logger.info("Emulator on %s stopped", self.connection)

    def start(self) -> asyncio.Task:
        """
        Starts the emulator as a background task.
        """
        if not self.running():
            self._run_task = asyncio.create_task(self.run())
            _add_background_task(self._run_task)

        return self._run_task

    async def stop(self) -> None:
        """
        Stops the emulator background task.
        """
        if self.running():
            self._run_task.cancel()
            await asyncio.gather(self._run_task, return_exceptions=True)

        self._run_task = None
