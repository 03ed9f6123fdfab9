# gui.py
import sys

from PySide6.QtWidgets import QApplication

from constants import APP_NAME, APP_VERSION, ORGANIZATION, ORGANIZATION_DOMAIN
from utils.logger import setup_logging, get_logger


def main():
    setup_logging()
    logger = get_logger(__name__)
    logger.info(f"Starting {APP_NAME} {APP_VERSION}")

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORGANIZATION)
    app.setOrganizationDomain(ORGANIZATION_DOMAIN)

    from ui.main_window import MainWindow
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
