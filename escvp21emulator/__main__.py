"""
Command line interface of the ESC/VP21 projector emulator.

Created on 19 Oct 2026

@author: escvp21emulator contributors
"""

import argparse
import asyncio
import logging
import sys

from serial.tools import list_ports

from escvp21emulator import (
    BAUD_RATES,
    DEFAULT_BAUD_RATE,
    DEFAULT_COOLING_DURATION,
    DEFAULT_WARMING_DURATION,
    CommandProcessor,
    ESCVP21ConnectionError,
    ESCVP21Emulator,
    ESCVP21SerialConnection,
)

_LOGGER = logging.getLogger(__name__)


def list_serial_ports() -> None:
    """
    Prints the available serial ports.
    """
    ports = sorted(list_ports.comports(), key=lambda port: port.device)
    if len(ports) == 0:
        _LOGGER.info("No serial ports found")

    for port in ports:
        print(f"{port.device}\t{port.description}")


async def main(emulator: ESCVP21Emulator) -> int:
    try:
        await emulator.connection.open()
    except ESCVP21ConnectionError as ex:
        _LOGGER.error("Failed to open %s, reason: %s", emulator.connection, ex)
        return 1

    try:
        await emulator.run()
    finally:
        _LOGGER.info("Closing %s", emulator.connection)
        await emulator.connection.close()

    return 0


def _duration(value: str) -> float:
    try:
        duration = float(value)
    except ValueError as ex:
        raise argparse.ArgumentTypeError(f"invalid duration: '{value}'") from ex

    if not duration >= 0:
        raise argparse.ArgumentTypeError(f"duration must not be negative: '{value}'")

    return duration


def build_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(
        prog="escvp21emulator", description="ESC/VP21 projector emulator"
    )
    argparser.add_argument("--debug", dest="debugLogging", action="store_true")

    subparsers = argparser.add_subparsers(dest="action", required=True)

    subparsers.add_parser("ports", help="list the available serial ports")

    open_parser = subparsers.add_parser(
        "open", help="emulate a projector on a serial port"
    )
    open_parser.add_argument("--port", required=True)
    open_parser.add_argument(
        "--baud-rate",
        dest="baud_rate",
        type=int,
        choices=BAUD_RATES,
        default=DEFAULT_BAUD_RATE,
    )
    open_parser.add_argument(
        "--warming", type=_duration, default=DEFAULT_WARMING_DURATION
    )
    open_parser.add_argument(
        "--cooling", type=_duration, default=DEFAULT_COOLING_DURATION
    )
    open_parser.add_argument("--record", dest="record", action="store_true")

    return argparser


def run(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    if args.debugLogging:
        logging.basicConfig(
            format="%(asctime)s %(levelname)-8s %(filename)s:%(lineno)d %(message)s",
            level=logging.DEBUG,
        )
    else:
        logging.basicConfig(format="%(message)s", level=logging.INFO)

    if args.action == "ports":
        list_serial_ports()
        return 0

    connection = ESCVP21SerialConnection(args.port, args.baud_rate, args.record)
    processor = CommandProcessor(args.warming, args.cooling)
    emulator = ESCVP21Emulator(connection, processor)

    try:
        return asyncio.run(main(emulator))
    except KeyboardInterrupt:
        # Handle keyboard interrupt
        return 0


if __name__ == "__main__":
    sys.exit(run())
