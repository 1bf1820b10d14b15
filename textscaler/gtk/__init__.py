#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""
TextScaler GTK4 frontend.
"""
