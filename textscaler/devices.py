#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""
External monitor discovery and control.

Monitors are driven through a command line tool (ddccontrol by default).
Discovery runs a query command and extracts one identifier per line
carrying the device marker; pushing runs an apply command per device.
Commands are argv templates with {device} and {value} placeholders and
are never passed through a shell.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from .errors import DevicePushFailure, DeviceQueryFailure
from .log import LOG_PROTOCOL_TRACE, Log


DEFAULT_QUERY_COMMAND = ("ddccontrol", "-p")
DEFAULT_APPLY_COMMAND = ("ddccontrol", "{device}", "-r", "0x10", "-w", "{value}")
DEFAULT_MARKER = "Device:"
SUDO_PREFIX = ("sudo", "-n")


def parse_devices(output: str, marker: str = DEFAULT_MARKER) -> tuple[str, ...]:
    """
    Extract device identifiers from line-oriented query output.

    Whitespace is removed from each line before matching, so
    " - Device: dev:/dev/i2c-4" yields "dev:/dev/i2c-4". Matching is
    case-insensitive. Lines without the marker, or with nothing after
    it, are skipped.

    :param output: Raw stdout of the query command
    :param marker: Token preceding each identifier

    :return: Identifiers in the order they were printed
    """
    token = "".join(marker.split()).lower()
    devices = []

    for line in output.splitlines():
        compact = "".join(line.split())
        idx = compact.lower().find(token)
        if idx < 0:
            continue

        device = compact[idx + len(token):]
        if device:
            devices.append(device)

    return tuple(devices)


def expand_command(template: Sequence[str], **values) -> list[str]:
    """Substitute {name} placeholders in each argument of an argv template."""
    argv = []
    for arg in template:
        for name, value in values.items():
            arg = arg.replace("{%s}" % name, str(value))
        argv.append(arg)
    return argv


class DeviceEnumerator:
    """
    Finds and drives external monitors.

    :param query_command: argv printing one descriptor line per device
    :param apply_command: argv template with {device} and {value}
    :param marker: Token preceding device identifiers in query output
    :param use_sudo: Prefix both commands with non-interactive sudo
    :param timeout: Seconds before a command is abandoned
    """

    def __init__(self, query_command: Sequence[str] = DEFAULT_QUERY_COMMAND,
                 apply_command: Sequence[str] = DEFAULT_APPLY_COMMAND,
                 marker: str = DEFAULT_MARKER, use_sudo: bool = False,
                 timeout: float = 5.0):
        prefix = list(SUDO_PREFIX) if use_sudo else []

        self._query_command = prefix + list(query_command)
        self._apply_command = prefix + list(apply_command)
        self._marker = marker
        self._timeout = timeout
        self._devices: tuple[str, ...] = ()
        self._logger = Log.get("textscaler.devices")

    @classmethod
    def from_config(cls, config) -> DeviceEnumerator:
        """Build an enumerator from a ScalerConfig."""
        return cls(query_command=config.query_command,
                   apply_command=config.apply_command,
                   marker=config.device_marker,
                   use_sudo=config.use_sudo,
                   timeout=config.command_timeout)

    @property
    def devices(self) -> tuple[str, ...]:
        """Result of the last discover() call."""
        return self._devices

    def _run(self, argv: list[str], failure, **kwargs) -> str:
        self._logger.log(LOG_PROTOCOL_TRACE, "exec: %s", argv)
        try:
            result = subprocess.run(argv, capture_output=True, text=True,
                                    timeout=self._timeout, check=False)
        except subprocess.TimeoutExpired as err:
            raise failure(argv, f"timed out after {self._timeout}s", **kwargs) from err
        except OSError as err:
            raise failure(argv, str(err), **kwargs) from err

        self._logger.log(LOG_PROTOCOL_TRACE, "exit=%d stdout=%r stderr=%r",
                         result.returncode, result.stdout, result.stderr)

        if result.returncode != 0:
            reason = (result.stderr or "").strip() or f"exit status {result.returncode}"
            raise failure(argv, reason, **kwargs)

        return result.stdout or ""

    def discover(self) -> tuple[str, ...]:
        """
        Query the attached monitors.

        An unusable query is not an error: the result is simply empty
        and callers run without hardware.

        :return: Device identifiers in discovery order
        """
        try:
            output = self._run(self._query_command, DeviceQueryFailure)
            devices = parse_devices(output, self._marker)
            if not devices:
                raise DeviceQueryFailure(self._query_command, "no devices reported")

        except DeviceQueryFailure as err:
            self._logger.info("No controllable devices: %s", err.reason)
            devices = ()

        else:
            self._logger.info("Found %d device(s): %s", len(devices), ", ".join(devices))

        self._devices = devices
        return devices

    def push(self, device: str, value: int) -> bool:
        """
        Send an integer value to one device.

        :return: True if the command exited successfully
        """
        argv = expand_command(self._apply_command, device=device, value=int(value))
        try:
            self._run(argv, DevicePushFailure, device=device)
        except DevicePushFailure as err:
            self._logger.warning("Failed to set %s to %d: %s", device, value, err.reason)
            return False

        self._logger.debug("Set %s to %d", device, value)
        return True

    def push_all(self, value: int, devices: Sequence[str] | None = None) -> tuple[str, ...]:
        """
        Send a value to every device, continuing past failures.

        :param devices: Targets, defaults to the discovered set
        :return: The devices that failed
        """
        if devices is None:
            devices = self._devices

        return tuple(device for device in devices if not self.push(device, value))
