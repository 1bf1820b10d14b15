#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#

# TextScaler GTK Widgets
from .scale_entry import ScaleEntry

__all__ = [
    "ScaleEntry",
]
