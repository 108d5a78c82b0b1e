#!/usr/bin/env python3
"""
Desk Calendar - A PySide6 desktop month calendar with per-date events.

This is the main entry point for the application.
"""

import sys
import argparse
from pathlib import Path

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from backend.config import Config
from backend.debug import set_debug, debug_print
from backend.timezone_utils import set_timezone
from gui.main_window import MainWindow


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Desk Calendar - A desktop month calendar with per-date events"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to configuration file (default: auto-detect)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    return parser.parse_args(argv)


def main():
    """Main entry point."""
    args = parse_args()
    set_debug(args.debug)

    # Enable high DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    # Create application
    app = QApplication(sys.argv)
    app.setApplicationName("Desk Calendar")
    app.setApplicationVersion("0.1")

    app.setStyle("Fusion")

    # Load configuration
    try:
        config = Config.load(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print(f"\nThe default location is {Config.get_default_config_path()}")
        print("\nExample configuration:")
        print("""
[General]
navigation = "month"   # or "day"
year_range = 5
timezone = "Europe/Amsterdam"

[Colors]
today_background = "#ffff00"
selected_border = "#ff0000"
has_events_text = "#0000ff"
""")
        sys.exit(1)
    except Exception as e:
        print(f"Error loading configuration: {e}")
        sys.exit(1)

    set_timezone(config.timezone)
    debug_print(f"Loaded configuration from: {args.config or Config.get_default_config_path()}")
    debug_print(f"  Navigation: {config.navigation.value}, year range: +-{config.year_range}")

    # Create and show main window
    window = MainWindow(config)
    window.show()

    # Run event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
