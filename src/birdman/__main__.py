#!/usr/bin/env python3
"""
Birdman Challenge entry point: python -m birdman
"""

import argparse
import logging
import sys

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, TICK_RATE
from .data_models import GameConfig
from .errors import BirdmanError
from .log import setup_logging

logger = logging.getLogger("birdman")


def parse_addr(value: str):
    host, _, port = value.rpartition(":")
    if not host or not port.isdigit():
        raise argparse.ArgumentTypeError(f"expected HOST:PORT, got {value!r}")
    return host, int(port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="birdman", description="Birdman Challenge")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--tick-rate", type=int, default=TICK_RATE)
    parser.add_argument("--telemetry", type=parse_addr, default=None, metavar="HOST:PORT",
                        help="send analytics events as UDP datagrams")
    parser.add_argument("--sound-dir", default=None,
                        help="directory holding flap.wav, damage.wav and game_over.wav")
    parser.add_argument("--log-level", default="info")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    # pygame is only needed once we open a window
    from .client import BirdmanClient
    from .sound import SoundBoard
    from .telemetry import TelemetryClient

    try:
        config = GameConfig(screen_width=args.width, screen_height=args.height,
                            tick_rate=args.tick_rate)
        sounds = SoundBoard(args.sound_dir)
    except BirdmanError as e:
        logger.error("%s", e)
        return 1

    client = BirdmanClient(config, TelemetryClient(args.telemetry), sounds)
    try:
        client.run()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
