"""
telemetry.py: Fire-and-forget analytics events sent as JSON datagrams.
"""

import json
import logging
import socket
from typing import Any, Dict, Optional, Tuple

from .constants import TELEMETRY_GAME_NAME

logger = logging.getLogger(__name__)


class TelemetryClient:
    """
    Sends one UDP datagram per event. Without an address events are only
    logged. Transport failures never reach the game loop.
    """

    def __init__(self, addr: Optional[Tuple[str, int]] = None):
        self.addr = None
        self.sock: Optional[socket.socket] = None
        if addr is None:
            return

        # Resolve once so the game loop never waits on DNS
        host, port = addr
        try:
            family, _, _, _, sockaddr = socket.getaddrinfo(
                host, port, type=socket.SOCK_DGRAM)[0]
        except OSError as e:
            logger.warning("Telemetry disabled, cannot resolve %s:%s: %s", host, port, e)
            return

        self.addr = sockaddr
        self.sock = socket.socket(family, socket.SOCK_DGRAM)
        self.sock.setblocking(False)

    def emit(self, event: str, fields: Dict[str, Any]):
        payload = {"game": TELEMETRY_GAME_NAME, "event": event, **fields}
        logger.debug("Telemetry %s", payload)
        if self.sock is None:
            return

        data = json.dumps(payload).encode('utf-8')
        try:
            self.sock.sendto(data, self.addr)
        except OSError as e:
            logger.warning("Telemetry send to %s failed: %s", self.addr, e)

    def close(self):
        if self.sock is not None:
            self.sock.close()
            self.sock = None
