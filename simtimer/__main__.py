"""Allow running SimTimer as a module: python -m simtimer."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from .app import SimTimerApp


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("SIMTIMER_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("SimTimer")
    app.setOrganizationName("SimTimer")

    window = SimTimerApp()
    window.show()
    logging.getLogger(__name__).info("SimTimer ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
