import logging
import sys

import config
from services.file_manager import load_or_setup_paths
from ui.console_app import GymConsoleApp

"""
Entry point for the Gym Management System.
Run this file to start the console application.
"""


def setup_logging() -> None:
    # Full log to file; only warnings reach the console so menus stay readable
    console = logging.StreamHandler()
    console.setLevel(logging.WARNING)
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=logging.INFO,
        handlers=[
            logging.FileHandler(config.LOG_FILE, encoding='utf-8'),
            console,
        ]
    )


def main() -> int:
    # Resolve data paths first so the log file lands in the data folder
    load_or_setup_paths()
    setup_logging()
    return GymConsoleApp().start()


if __name__ == "__main__":
    sys.exit(main())
