"""control_channel.py
==================
Out-of-band control of the fault controller through host string messages.

Circuit code switches fault injection on and off by emitting the messages
``"FaultyEnabled"`` and ``"FaultyDisabled"`` through the host engine's generic
message hook. Those two strings are consumed here. Every other message is
handed to the host's own handler unchanged, so ordinary diagnostics keep
working.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable
import logging

from .controller import FaultController

logger = logging.getLogger(__name__)

ENABLE_MESSAGE = "FaultyEnabled"
DISABLE_MESSAGE = "FaultyDisabled"


class ControlMessage(Enum):
    ENABLE = ENABLE_MESSAGE
    DISABLE = DISABLE_MESSAGE
    UNRECOGNIZED = None

    @classmethod
    def parse(cls, msg: str) -> "ControlMessage":
        """Exact, case-sensitive match against the two control strings."""
        if msg == ENABLE_MESSAGE:
            return cls.ENABLE
        if msg == DISABLE_MESSAGE:
            return cls.DISABLE
        return cls.UNRECOGNIZED


class ControlChannel:
    """Routes control messages to a :class:`FaultController`.

    Parameters
    ----------
    controller : FaultController
    forward : Callable[[str], None]
        The host engine's general message handler; receives every message
        that is not a control message.
    """

    __slots__ = ("controller", "forward")

    def __init__(self, controller: FaultController, forward: Callable[[str], None]) -> None:
        self.controller = controller
        self.forward = forward

    def deliver(self, msg: str) -> ControlMessage:
        """Handle ``msg`` and return how it was classified."""
        kind = ControlMessage.parse(msg)
        match kind:
            case ControlMessage.ENABLE:
                self.controller.set_enabled(True)
            case ControlMessage.DISABLE:
                self.controller.set_enabled(False)
            case ControlMessage.UNRECOGNIZED:
                logger.debug("Forwarding message to host: %r", msg)
                self.forward(msg)
        return kind


__all__ = ["ENABLE_MESSAGE", "DISABLE_MESSAGE", "ControlMessage", "ControlChannel"]
