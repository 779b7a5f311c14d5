# pylint: disable=invalid-name
# pylint: disable=missing-class-docstring
# pylint: disable=missing-function-docstring
"""
Created on 19 Oct 2026

@author: escvp21emulator contributors
"""

import unittest

from escvp21emulator.escvp21classes import ESCVP21InvalidFramingError
from escvp21emulator.escvp21codec import MAX_BUFFER_SIZE, ESCVP21Codec


class Test(unittest.TestCase):
    def setUp(self):
        self._codec = ESCVP21Codec()

    def test_decode_single_chunk(self):
        self.assertEqual("SNO?", self._codec.decode(b"SNO?\r"))
        self.assertEqual(0, len(self._codec))

    def test_decode_split_chunks(self):
        self.assertIsNone(self._codec.decode(b"SNO"))
        self.assertEqual(3, len(self._codec))
        self.assertEqual("SNO?", self._codec.decode(b"?\r"))

    def test_decode_keeps_whitespace(self):
        self.assertEqual(" VOL 9 ", self._codec.decode(b" VOL 9 \r"))

    def test_decode_empty_frame(self):
        self.assertEqual("", self._codec.decode(b"\r"))

    def test_decode_one_frame_per_call(self):
        self.assertEqual("SNO?", self._codec.decode(b"SNO?\rLAMP?\rVOL"))
        self.assertEqual("LAMP?", self._codec.decode())
        self.assertIsNone(self._codec.decode())
        self.assertEqual("VOL 10", self._codec.decode(b" 10\r"))

    def test_decode_utf8(self):
        self.assertEqual("SOURCE é", self._codec.decode("SOURCE é\r".encode("utf-8")))

    def test_decode_invalid_utf8(self):
        with self.assertRaises(ESCVP21InvalidFramingError) as context:
            self._codec.decode(b"SNO\xff?\r")
        self.assertEqual(b"SNO\xff?", context.exception.frame)

        # The invalid frame is consumed
        self.assertEqual("SNO?", self._codec.decode(b"SNO?\r"))

    def test_buffer_without_terminator_is_discarded(self):
        with self.assertLogs("escvp21emulator.escvp21codec", level="WARNING"):
            self.assertIsNone(self._codec.decode(b"A" * (MAX_BUFFER_SIZE + 1)))
        self.assertEqual(0, len(self._codec))
        self.assertEqual("SNO?", self._codec.decode(b"SNO?\r"))

    def test_buffer_up_to_limit_is_kept(self):
        self.assertIsNone(self._codec.decode(b"A" * MAX_BUFFER_SIZE))
        self.assertEqual(MAX_BUFFER_SIZE, len(self._codec))

    def test_reset(self):
        self._codec.decode(b"SNO")
        self._codec.reset()
        self.assertEqual("LAMP?", self._codec.decode(b"LAMP?\r"))

    def test_encode(self):
        self.assertEqual(b"SNO=1234567890\r:", ESCVP21Codec.encode("SNO=1234567890"))
        self.assertEqual(b"\r:", ESCVP21Codec.encode(None))
        self.assertEqual(b"ERR\r:", ESCVP21Codec.encode_error())


if __name__ == "__main__":
    unittest.main()
