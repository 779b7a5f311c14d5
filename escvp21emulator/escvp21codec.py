"""
Implements the ESC/VP21 line codec.

Requests are terminated by a carriage return, replies by a carriage return followed by a colon.

Created on 19 Oct 2026

@author: escvp21emulator contributors
"""

import logging

from .escvp21classes import ESCVP21InvalidFramingError

logger = logging.getLogger(__name__)

REQUEST_TERMINATOR = b"\r"
REPLY_TERMINATOR = b"\r:"
ERROR_TOKEN = b"ERR"

MAX_BUFFER_SIZE = 1024


class ESCVP21Codec:
    """
    Frames the inbound byte stream into requests and encodes replies.
    """

    def __init__(self):
        self._buffer = bytearray()

    def __len__(self):
        return len(self._buffer)

    def decode(self, chunk: bytes = b"") -> str | None:
        """
        Adds the chunk to the buffer and returns the first complete request, or None if no
        request is complete yet.

        Only one request is returned per call, call again with an empty chunk to get any
        following request that is already buffered.
        """
        self._buffer.extend(chunk)

        position = self._buffer.find(REQUEST_TERMINATOR)
        if position < 0:
            if len(self._buffer) > MAX_BUFFER_SIZE:
                logger.warning(
                    "No request terminator in %d bytes, discarding buffer",
                    len(self._buffer),
                )
                self.reset()
            return None

        frame = bytes(self._buffer[:position])
        del self._buffer[: position + 1]

        try:
            return frame.decode("utf-8")
        except UnicodeDecodeError as ex:
            raise ESCVP21InvalidFramingError(frame) from ex

    def reset(self) -> None:
        """
        Discards any buffered bytes.
        """
        self._buffer.clear()

    @staticmethod
    def encode(reply: str | None) -> bytes:
        """
        Encodes a reply, None encodes to just the reply terminator.
        """
        if reply is None:
            return REPLY_TERMINATOR

        return reply.encode("utf-8") + REPLY_TERMINATOR

    @staticmethod
    def encode_error() -> bytes:
        return ERROR_TOKEN + REPLY_TERMINATOR
