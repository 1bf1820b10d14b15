#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""
Exception types.

Only ConfigurationError escapes to callers. Device errors are raised
by the command runner and absorbed at the DeviceEnumerator boundary.
"""


class TextScalerError(Exception):
    """Base class for textscaler errors."""


class ConfigurationError(TextScalerError, ValueError):
    """Raised at construction time for unusable settings (e.g. min == max)."""


class DeviceError(TextScalerError):
    """
    An external device command failed.

    :param command: argv of the failed command
    :param reason: human readable failure description
    """

    def __init__(self, command: list[str], reason: str):
        super().__init__(f"{' '.join(command)}: {reason}")
        self.command = command
        self.reason = reason


class DeviceQueryFailure(DeviceError):
    """Device discovery could not run or produced nothing usable."""


class DevicePushFailure(DeviceError):
    """Sending a value to one device failed."""

    def __init__(self, command: list[str], reason: str, device: str):
        super().__init__(command, reason)
        self.device = device
