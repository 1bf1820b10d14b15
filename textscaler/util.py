#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""
Various helper functions that are used across the library.
"""

from collections.abc import Callable

from numpy import interp


def clamp(value, min_, max_):
    """
    Constrain a value to the specified range

    :param value: Input value
    :param min_: Range minimum
    :param max_: Range maximum

    :return: The constrained value
    """
    return max(min_, min(value, max_))


def scale(value, src_min, src_max, dst_min, dst_max) -> float:
    """
    Scale a value from one range to another.

    The input is clamped to the source range first, so the result
    always lies within the destination range.

    :param value: Input value
    :param src_min: Min value of input range
    :param src_max: Max value of input range
    :param dst_min: Min value of output range
    :param dst_max: Max value of output range

    :return: The scaled value
    """
    return float(interp(clamp(value, src_min, src_max), [src_min, src_max], [dst_min, dst_max]))


class Signal:
    """
    A simple signalling construct.

    Listeners may connect() to this signal, and their handlers will
    be invoked in connection order when fire() is called.
    """

    def __init__(self):
        self._handlers: list[Callable] = []

    def connect(self, handler: Callable):
        """
        Connect a handler to this signal

        :param handler: Function to invoke when the signal fires
        """
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Callable):
        """
        Disconnect a previously connected handler. Unknown
        handlers are ignored.
        """
        if handler in self._handlers:
            self._handlers.remove(handler)

    def disconnect_all(self):
        """Drop every connected handler."""
        self._handlers.clear()

    def fire(self, *args, **kwargs):
        """
        Fire the signal, invoking all connected handlers

        :params args: Arguments to call handlers with
        """
        for handler in list(self._handlers):
            handler(*args, **kwargs)
