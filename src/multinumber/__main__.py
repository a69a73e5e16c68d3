"""Entry point for the demo: python -m multinumber."""

from __future__ import annotations

import logging
import sys

from multinumber.app import MultiNumberApp
from multinumber.core.settings import AppSettings
from multinumber.ui.main_window import MainWindow


def main() -> int:
    """Launch the demo window."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = MultiNumberApp(sys.argv)
    window = MainWindow(AppSettings(app.config_dir()))
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
