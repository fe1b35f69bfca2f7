# src/decayviz/app.py
import logging
import sys

from PySide6.QtWidgets import QApplication

from decayengine.config import LOG_LEVEL
from decayviz.ui.main_window import MainWindow


def main() -> int:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
