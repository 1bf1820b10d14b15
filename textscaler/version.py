#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
__version__ = '0.3.0'
