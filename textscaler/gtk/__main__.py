#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""
TextScaler GTK Entry Point

Run with: python -m textscaler.gtk
"""

import argparse
import sys

from textscaler.config import ScalerConfig
from textscaler.log import Log


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TextScaler GTK frontend")
    parser.add_argument(
        "-d", "--debug", action="count", default=0, help="Increase logging verbosity"
    )
    parser.add_argument("-C", "--colorlog", action="store_true", help="Use colored log output")
    parser.add_argument(
        "--brightness", action="store_true", help="Control a 0-100 brightness value instead"
    )
    parser.add_argument("--config", metavar="FILE", help="Load configuration from FILE")

    args, remaining = parser.parse_known_args()

    # Set up logging
    Log.enable_color(args.colorlog)
    Log.set_verbosity(args.debug)

    if args.config:
        config = ScalerConfig.load_yaml(args.config)
    elif args.brightness:
        config = ScalerConfig.brightness()
    else:
        config = None

    # Replace sys.argv with remaining args for GTK
    sys.argv = [sys.argv[0]] + remaining

    # Import and run application
    from .application import main as app_main  # noqa: PLC0415

    return app_main(config)


if __name__ == "__main__":
    sys.exit(main())
