import argparse
import logging
import signal
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication, QSystemTrayIcon

from packages.core.logging_ import setup_logging
from .ui.window import MainWindow

log = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Get Back To Work idle monitor")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="DEBUG also logs every idle check and display tick",
    )
    parser.add_argument(
        "--minimized",
        action="store_true",
        help="start in the tray; the options menu stays reachable from the tray icon",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level)

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Get Back To Work")
    # The window hides to the tray; only Quit ends the app.
    app.setQuitOnLastWindowClosed(not QSystemTrayIcon.isSystemTrayAvailable())
    win = MainWindow()
    if args.minimized and QSystemTrayIcon.isSystemTrayAvailable():
        log.info("Starting minimized to tray")
    else:
        win.show()

    # Qt swallows SIGINT while in exec()
    def on_sigint(sig, frame):
        log.info("Interrupted, quitting")
        win.monitor.stop()
        app.quit()

    signal.signal(signal.SIGINT, on_sigint)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
