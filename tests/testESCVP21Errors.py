# pylint: disable=invalid-name
# pylint: disable=missing-class-docstring
# pylint: disable=missing-function-docstring
"""
Created on 19 Oct 2026

@author: escvp21emulator contributors
"""

import unittest

from escvp21emulator import (
    ESCVP21ConnectionError,
    ESCVP21Error,
    ESCVP21InvalidCommandError,
    ESCVP21InvalidFramingError,
    ESCVP21InvalidPowerStateError,
    ESCVP21InvalidQueryError,
    ESCVP21InvalidValueError,
    ESCVP21ProcessorError,
)


class Test(unittest.TestCase):
    def testESCVP21ProcessorError(self):
        error = ESCVP21ProcessorError("SNO?")
        self.assertIsInstance(error, ESCVP21Error)
        self.assertEqual("SNO?", error.request)
        self.assertIn("SNO?", str(error))

    def testESCVP21InvalidCommandError(self):
        error = ESCVP21InvalidCommandError("FOO?")
        self.assertIsInstance(error, ESCVP21ProcessorError)
        self.assertEqual("Invalid command 'FOO?'", str(error))

    def testESCVP21InvalidQueryError(self):
        self.assertIsInstance(ESCVP21InvalidQueryError(), ESCVP21ProcessorError)

    def testESCVP21InvalidValueError(self):
        error = ESCVP21InvalidValueError("VOL x")
        self.assertIsInstance(error, ESCVP21ProcessorError)
        self.assertIn("VOL x", str(error))

    def testESCVP21InvalidPowerStateError(self):
        error = ESCVP21InvalidPowerStateError("LAMP?", "Warming")
        self.assertIsInstance(error, ESCVP21ProcessorError)
        self.assertEqual("Warming", error.power_state)
        self.assertIn("Warming", str(error))

    def testESCVP21InvalidFramingError(self):
        error = ESCVP21InvalidFramingError(b"\xff")
        self.assertNotIsInstance(error, ESCVP21ProcessorError)
        self.assertEqual(b"\xff", error.frame)

    def testESCVP21ConnectionError(self):
        self.assertIsInstance(ESCVP21ConnectionError("closed"), ESCVP21Error)


if __name__ == "__main__":
    unittest.main()
