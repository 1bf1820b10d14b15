#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""
Configuration

ScalerConfig describes the adjustable quantity (bounds, precision,
default), how changes travel downstream (debounce window, store write
mode) and how monitors are driven. It is validated once, at
construction; a config that reaches the controller is usable.

Persisted as YAML under ~/.config/textscaler/config.yaml.
"""

from __future__ import annotations

import math
import os
from datetime import datetime
from enum import Enum as PyEnum

from ruamel.yaml import YAML
from traitlets import Bool, Enum, Float, HasTraits, Int, List, TraitError, Unicode

from .devices import DEFAULT_APPLY_COMMAND, DEFAULT_MARKER, DEFAULT_QUERY_COMMAND
from .errors import ConfigurationError
from .log import Log
from .settings import DEFAULT_SCHEMA_ID, TEXT_SCALING_FACTOR_KEY


CONFDIR = os.path.join(os.path.expanduser("~"), ".config", "textscaler")
CONFFILE = os.path.join(CONFDIR, "config.yaml")


class WriteMode(PyEnum):
    """When slider motion is written to the settings store."""

    ON_EVERY_CHANGE = "write-on-every-change"
    ON_COMMIT_ONLY = "write-on-commit-only"


class ScalerConfig(HasTraits):
    """
    Validated controller configuration.

    :raises ConfigurationError: for empty or inverted bounds, a default
                                outside the bounds, or out-of-range
                                numeric settings
    """

    schema_id = Unicode(DEFAULT_SCHEMA_ID).tag(config=True)
    key = Unicode(TEXT_SCALING_FACTOR_KEY).tag(config=True)

    min_value = Float(0.5).tag(config=True)
    max_value = Float(3.0).tag(config=True)
    default_value = Float(1.0).tag(config=True)
    decimals = Int(2, min=0, max=6).tag(config=True)

    debounce_window = Float(0.6, min=0.0).tag(config=True)
    scroll_step = Float(0.05, min=0.0).tag(config=True)
    write_mode = Enum([mode.value for mode in WriteMode],
                      default_value=WriteMode.ON_COMMIT_ONLY.value).tag(config=True)

    enable_devices = Bool(True).tag(config=True)
    device_min = Int(0).tag(config=True)
    device_max = Int(100).tag(config=True)
    device_marker = Unicode(DEFAULT_MARKER).tag(config=True)
    query_command = List(Unicode(), default_value=list(DEFAULT_QUERY_COMMAND),
                         minlen=1).tag(config=True)
    apply_command = List(Unicode(), default_value=list(DEFAULT_APPLY_COMMAND),
                         minlen=1).tag(config=True)
    use_sudo = Bool(False).tag(config=True)
    command_timeout = Float(5.0, min=0.1).tag(config=True)

    def __init__(self, **kwargs):
        if isinstance(kwargs.get("write_mode"), WriteMode):
            kwargs["write_mode"] = kwargs["write_mode"].value

        try:
            super().__init__(**kwargs)
        except TraitError as err:
            raise ConfigurationError(str(err)) from err

        self._check_bounds()

    def _check_bounds(self):
        for name in ("min_value", "max_value", "default_value"):
            if not math.isfinite(getattr(self, name)):
                raise ConfigurationError(f"{name} must be finite, got {getattr(self, name)}")

        if self.min_value >= self.max_value:
            raise ConfigurationError(
                f"min_value ({self.min_value}) must be less than max_value ({self.max_value})")

        if not self.min_value <= self.default_value <= self.max_value:
            raise ConfigurationError(
                f"default_value ({self.default_value}) outside "
                f"[{self.min_value}, {self.max_value}]")

        if self.device_min >= self.device_max:
            raise ConfigurationError(
                f"device_min ({self.device_min}) must be less than "
                f"device_max ({self.device_max})")

    @property
    def mode(self) -> WriteMode:
        return WriteMode(self.write_mode)

    @classmethod
    def text_scaling(cls, **overrides) -> ScalerConfig:
        """Desktop text scaling factor, 0.50 - 3.00."""
        return cls(**overrides)

    @classmethod
    def brightness(cls, **overrides) -> ScalerConfig:
        """
        Plain 0 - 100 brightness with integer steps. The empty schema id
        keeps the value in memory instead of a desktop setting.
        """
        values = dict(schema_id="", key="brightness",
                      min_value=0.0, max_value=100.0, default_value=0.0,
                      decimals=0, scroll_step=5.0,
                      write_mode=WriteMode.ON_EVERY_CHANGE.value)
        values.update(overrides)
        return cls(**values)

    def to_dict(self) -> dict:
        result = {}
        for name in sorted(self.trait_names(config=True)):
            value = getattr(self, name)
            result[name] = list(value) if isinstance(value, list) else value
        return result

    @classmethod
    def load_yaml(cls, path: str) -> ScalerConfig:
        """
        Load a configuration file. Unknown keys are logged and skipped.

        :raises ConfigurationError: if the file is not a mapping or
                                    holds invalid values
        """
        with open(path, encoding="utf-8") as yaml_file:
            data = YAML(typ="safe").load(yaml_file)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path}: expected a mapping, got {type(data).__name__}")

        known = set(cls.class_trait_names(config=True))
        unknown = sorted(set(data) - known)
        if unknown:
            Log.get("textscaler.config").warning(
                "Ignoring unknown keys in %s: %s", path, ", ".join(unknown))

        return cls(**{k: v for k, v in data.items() if k in known})

    def save_yaml(self, path: str):
        """Write this configuration to a YAML file."""
        dirname = os.path.dirname(path)
        if dirname:
            os.makedirs(dirname, exist_ok=True)

        yaml = YAML()
        yaml.default_flow_style = False

        with open(path, "w", encoding="utf-8") as yaml_file:
            yaml_file.write(self._yaml_header())
            yaml.dump(self.to_dict(), yaml_file)

    @staticmethod
    def _yaml_header() -> str:
        header = "#\n#  textscaler configuration\n#\n"
        header += "#  Updated on: %s\n" % datetime.now().isoformat(" ")
        header += "#\n"
        return header

    @classmethod
    def load_default(cls) -> ScalerConfig:
        """Load the user's configuration file, or the text scaling preset."""
        if os.path.isfile(CONFFILE):
            return cls.load_yaml(CONFFILE)
        return cls.text_scaling()
