#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
from .config import ScalerConfig, WriteMode
from .controller import SyncController, UpdateSource
from .debounce import ApplierState, DebouncedApplier
from .devices import DeviceEnumerator, parse_devices
from .errors import ConfigurationError, DevicePushFailure, DeviceQueryFailure
from .settings import GioSettingsStore, MemorySettingsStore
from .version import __version__
